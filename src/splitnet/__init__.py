# This source code is part of the Splitnet package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

"""
This is the top-level package of *Splitnet*.
It does not provide functionality itself, the actual functionality
is distributed over its subpackages:

The :mod:`splitnet.splits` subpackage contains the :class:`Split`
data model and functions for analyzing weighted split systems.

The :mod:`splitnet.nnls` subpackage estimates the weights of the
circular splits of a *NeighborNet* by non-negative least squares.
"""

__version__ = "0.1.0"
__name__ = "splitnet"
__author__ = "The Splitnet contributors"
