# This source code is part of the Splitnet package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

"""
This subpackage estimates the weights of circular splits from a
distance matrix, as done by the *NeighborNet* method.

Given a circular ordering of *n* taxa, there are *n(n-1)/2* circular
splits, i.e. splits whose sides are contiguous arcs of the ordering.
:func:`compute_split_weights()` assigns a non-negative weight to each
of them, such that the distances induced by the weighted splits are
the least squares approximation of the given distances.
The circular ordering itself is not computed here, it must be given.

Internally, split weights and distances are both represented as
symmetric *(n,n)* matrices, indexed by circular position:
For *i < j* the entry ``x[i,j]`` is the weight of the split separating
the positions *i, ..., j-1* from the rest.
The design matrix of the least squares problem is never set up
explicitly, instead :func:`circular_metric()` and
:func:`circular_adjoint()` apply it and its transpose in
:math:`O(n^2)` time.

The optimization itself is an active set method
(:func:`optimize_fit()`):
The least squares problem is solved on the current face, i.e. with
the weights in the active set pinned to zero, using conjugate
gradients (:func:`cgnr()`).
Infeasible solutions are moved back into the non-negative orthant
(:func:`golden_projection()`, :func:`furthest_feasible()`) and the
KKT conditions decide, which constraints are released
(:func:`check_kkt()`).
The algorithm and its parameters are chosen via :class:`NNLSParams`.
"""

__name__ = "splitnet.nnls"
__author__ = "The Splitnet contributors"

from .activeset import *
from .cgnr import *
from .driver import *
from .error import *
from .operator import *
from .params import *
from .progress import *
from .repair import *
