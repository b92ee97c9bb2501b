# This source code is part of the Splitnet package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

"""
This module provides functions for managing the active set, i.e. the
split weights that are pinned to zero.
"""

__name__ = "splitnet.nnls"
__author__ = "The Splitnet contributors"
__all__ = ["zero_elements", "check_kkt", "filter_most_negative"]

import math
import numpy as np
from .operator import gradient
from .params import NNLSMethod


def zero_elements(x, out=None):
    """
    Get the mask of weights that are exactly zero.

    Parameters
    ----------
    x : ndarray, shape=(n,n), dtype=float
        The symmetric matrix of split weights.
    out : ndarray, shape=(n,n), dtype=bool, optional
        If given, the mask is written into this array, e.g. an existing
        active set.

    Returns
    -------
    active_set : ndarray, shape=(n,n), dtype=bool
        True for each zero weight.

    Examples
    --------

    >>> x = np.array([
    ...     [0.0, 1.0, 0.0],
    ...     [1.0, 0.0, 2.0],
    ...     [0.0, 2.0, 0.0],
    ... ])
    >>> print(zero_elements(x))
    [[ True False  True]
     [False  True False]
     [ True False  True]]
    """
    return np.equal(x, 0, out=out)


def check_kkt(x, d, active_set, params):
    """
    Check the KKT conditions of the non-negative least squares problem
    and release violated constraints.

    It is assumed that `x` is optimal for the face given by
    `active_set`.
    Then `x` is optimal for the overall problem, if the gradient
    component of each pinned weight is non-negative, within
    ``params.kkt_bound``.

    Parameters
    ----------
    x : ndarray, shape=(n,n), dtype=float
        The symmetric matrix of split weights.
        ``active_set[i,j]`` must imply ``x[i,j] == 0``.
    d : ndarray, shape=(n,n), dtype=float
        The symmetric distance matrix, indexed by circular position.
    active_set : ndarray, shape=(n,n), dtype=bool
        The symmetric mask of weights pinned to zero.
        If the KKT conditions are violated, constraints are removed
        from it in place:
        For :attr:`NNLSMethod.ACTIVE_SET` only the constraint with the
        most negative gradient component is removed,
        for :attr:`NNLSMethod.PROJECTED_GRADIENT` all constraints with
        a gradient component below ``-params.kkt_bound`` are removed.
    params : NNLSParams
        The optimization parameters.

    Returns
    -------
    finished : bool
        True, if the KKT conditions are (approximately) satisfied.
    """
    n = x.shape[0]
    upper = np.triu_indices(n, k=1)
    grad = gradient(x, d)[upper]
    active = active_set[upper]

    # Ties are resolved in favor of the first pair in row-major order
    active_grad = np.where(active, grad, 0.0)
    if len(active_grad) == 0:
        return True
    min_pos = np.argmin(active_grad)
    min_grad = active_grad[min_pos]
    if min_grad >= -params.kkt_bound:
        return True

    if params.method == NNLSMethod.ACTIVE_SET:
        release = np.zeros(len(active), dtype=bool)
        release[min_pos] = True
    else:
        release = active & (grad < -params.kkt_bound)
    i = upper[0][release]
    j = upper[1][release]
    active_set[i, j] = False
    active_set[j, i] = False
    return False


def filter_most_negative(x, active_set, fraction_to_keep):
    """
    Pin a batch of the most negative free weights to zero.

    A threshold is chosen, so that a fraction of `fraction_to_keep`
    of the negative free weights are at least this threshold.
    All free weights strictly below the threshold are added to the
    active set.
    This emulates the collapsing of multiple negative splits in
    *SplitsTree4*.

    Parameters
    ----------
    x : ndarray, shape=(n,n), dtype=float
        The symmetric matrix of split weights.
    active_set : ndarray, shape=(n,n), dtype=bool
        The symmetric mask of weights pinned to zero.
        It is modified in place.
    fraction_to_keep : float
        The minimum fraction of the negative weights to keep free.

    Examples
    --------

    >>> x = np.array([
    ...     [ 0.0, -3.0, -1.0, -2.0],
    ...     [-3.0,  0.0,  1.0,  1.0],
    ...     [-1.0,  1.0,  0.0, -4.0],
    ...     [-2.0,  1.0, -4.0,  0.0],
    ... ])
    >>> active_set = np.zeros(x.shape, dtype=bool)
    >>> filter_most_negative(x, active_set, 0.5)
    >>> print(active_set[np.triu_indices(4, k=1)])
    [ True False False False False  True]
    """
    n = x.shape[0]
    upper = np.triu_indices(n, k=1)
    weights = x[upper]
    free = ~active_set[upper]
    negative = np.sort(weights[free & (weights < 0)])
    n_negative = len(negative)
    if n_negative == 0:
        return

    n_keep = math.ceil(n_negative * fraction_to_keep)
    if n_keep == 0:
        threshold = 0.0
    else:
        threshold = negative[n_negative - n_keep]

    pin = free & (weights < threshold)
    i = upper[0][pin]
    j = upper[1][pin]
    active_set[i, j] = True
    active_set[j, i] = True
