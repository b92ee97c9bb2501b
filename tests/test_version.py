# This source code is part of the Splitnet package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

from importlib.metadata import version
import splitnet


def test_version():
    """
    Check if the package version matches the installed distribution.
    """
    assert splitnet.__version__ == version("splitnet")
