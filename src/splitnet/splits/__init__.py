# This source code is part of the Splitnet package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

"""
This subpackage provides the data model for splits, i.e. weighted
bipartitions of a taxon set, and functions to analyze split systems.

The :class:`Split` is the central class in this subpackage.
Like the leaf nodes of a phylogenetic tree, a :class:`Split` does not
store the taxa directly.
Instead, taxa are represented by reference indices:
These indices refer to a separate list or array, containing the actual
reference objects.

A weighted split system induces a distance matrix
(:func:`induced_distances()`), which can be compared with the original
distances via :func:`least_squares_fit()`.
"""

__name__ = "splitnet.splits"
__author__ = "The Splitnet contributors"

from .analysis import *
from .split import *
