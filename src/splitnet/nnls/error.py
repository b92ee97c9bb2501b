# This source code is part of the Splitnet package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

"""
This module contains all possible errors and warnings of the `nnls`
subpackage.
"""

__name__ = "splitnet.nnls"
__author__ = "The Splitnet contributors"
__all__ = ["CancelledError", "NonConvergenceWarning"]


class CancelledError(Exception):
    """
    Indicates that a computation was cancelled by the caller.
    """

    pass


class NonConvergenceWarning(Warning):
    """
    Indicates that the optimization did not converge within the maximum
    number of iterations.
    The best solution found so far is still used.
    """

    pass
