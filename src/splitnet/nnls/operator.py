# This source code is part of the Splitnet package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

"""
This module provides the linear operator that maps circular split
weights to the distances they induce, and its adjoint.
"""

__name__ = "splitnet.nnls"
__author__ = "The Splitnet contributors"
__all__ = ["circular_metric", "circular_adjoint", "objective", "gradient"]

import numpy as np


def circular_metric(x):
    r"""
    Compute the circular metric induced by circular split weights.

    For a circular ordering of *n* taxa, the entry ``x[i,j]`` with
    *i < j* is the weight of the split separating the taxa at the
    positions *i, ..., j-1* from the rest.
    The distance between two positions is the sum of weights of all
    splits separating them.

    This is the product *Ax* of the *NeighborNet* design matrix with
    the weight vector, computed in :math:`O(n^2)` without setting up the
    design matrix itself.

    Parameters
    ----------
    x : ndarray, shape=(n,n), dtype=float
        The symmetric matrix of split weights.
        The diagonal is ignored by the recurrence and should be zero.

    Returns
    -------
    d : ndarray, shape=(n,n), dtype=float
        The symmetric distance matrix, indexed by circular position.

    See Also
    --------
    circular_adjoint : The adjoint operator.

    Notes
    -----
    Distances between adjacent positions are sums over a row of `x`:

    .. math::

        d_{i,i+1} = \sum_{j \neq i+1} x_{i+1,j}

    Distances at larger gaps *k* are derived from the gaps *k-1* and
    *k-2*:

    .. math::

        d_{i,i+k} = d_{i,i+k-1} + d_{i+1,i+k} - d_{i+1,i+k-1}
                    - 2 x_{i+1,i+k}

    Examples
    --------

    Three taxa, only the split ``{0} | {1, 2}`` has a non-zero weight:

    >>> x = np.zeros((3, 3))
    >>> x[0, 1] = x[1, 0] = 1.0
    >>> print(circular_metric(x))
    [[0. 1. 1.]
     [1. 0. 0.]
     [1. 0. 0.]]
    """
    x = _check_square(x, "weight")
    n = x.shape[0]
    d = np.zeros((n, n), dtype=float)
    if n < 2:
        return d

    for i in range(n - 1):
        d[i, i + 1] = (
            _sequential_sum(x[i + 1, i + 1 :]) + _sequential_sum(x[i + 1, : i + 1])
        )

    # Within each gap all entries are independent of each other
    # -> evaluate them at once, preserving the per-entry operation order
    for k in range(2, n):
        i = np.arange(n - k)
        j = i + k
        d[i, j] = d[i, j - 1] + d[i + 1, j] - d[i + 1, j - 1] - 2 * x[i + 1, j]

    return _mirror_upper(d)


def circular_adjoint(r):
    r"""
    Apply the adjoint of :func:`circular_metric()` to a matrix.

    The entry ``p[i,j]`` of the result is the sum of all entries of
    `r` belonging to pairs of positions, that are separated by the
    split ``x[i,j]``.

    Parameters
    ----------
    r : ndarray, shape=(n,n), dtype=float
        A symmetric matrix indexed by circular position, typically a
        residual of distances.

    Returns
    -------
    p : ndarray, shape=(n,n), dtype=float
        The symmetric result in split weight space.

    See Also
    --------
    circular_metric : The forward operator.

    Notes
    -----
    The recurrence mirrors the one of :func:`circular_metric()`:

    .. math::

        p_{i,i+1} = \sum_j r_{i,j}

        p_{i,i+k} = p_{i,i+k-1} + p_{i+1,i+k} - p_{i+1,i+k-1}
                    - 2 r_{i,i+k-1}

    Examples
    --------

    >>> r = np.array([
    ...     [0.0, 1.0, 2.0],
    ...     [1.0, 0.0, 3.0],
    ...     [2.0, 3.0, 0.0],
    ... ])
    >>> print(circular_adjoint(r))
    [[0. 3. 5.]
     [3. 0. 4.]
     [5. 4. 0.]]
    """
    r = _check_square(r, "residual")
    n = r.shape[0]
    p = np.zeros((n, n), dtype=float)
    if n < 2:
        return p

    for i in range(n - 1):
        p[i, i + 1] = _sequential_sum(r[i, :])

    for k in range(2, n):
        i = np.arange(n - k)
        j = i + k
        p[i, j] = p[i, j - 1] + p[i + 1, j] - p[i + 1, j - 1] - 2 * r[i, j - 1]

    return _mirror_upper(p)


def objective(x, d):
    """
    Evaluate the least squares objective ``||Ax - d||``.

    Parameters
    ----------
    x : ndarray, shape=(n,n), dtype=float
        The symmetric matrix of split weights.
    d : ndarray, shape=(n,n), dtype=float
        The symmetric distance matrix, indexed by circular position.

    Returns
    -------
    value : float
        The Frobenius norm of the difference between the induced and
        the given distances.
    """
    return float(np.linalg.norm(circular_metric(x) - d))


def gradient(x, d):
    """
    Compute the gradient ``A^T (Ax - d)`` of ``1/2 ||Ax - d||^2``.

    Parameters
    ----------
    x : ndarray, shape=(n,n), dtype=float
        The symmetric matrix of split weights.
    d : ndarray, shape=(n,n), dtype=float
        The symmetric distance matrix, indexed by circular position.

    Returns
    -------
    gradient : ndarray, shape=(n,n), dtype=float
        The symmetric gradient in split weight space.
    """
    return circular_adjoint(circular_metric(x) - d)


def _check_square(matrix, name):
    matrix = np.asarray(matrix, dtype=float)
    if matrix.ndim != 2 or matrix.shape[0] != matrix.shape[1]:
        raise ValueError(
            f"The {name} matrix must be square, got shape {matrix.shape}"
        )
    return matrix


def _mirror_upper(matrix):
    upper = np.triu_indices(matrix.shape[0], k=1)
    matrix[upper[1], upper[0]] = matrix[upper]
    return matrix


def _sequential_sum(vector):
    # Summation from left to right,
    # 'np.sum()' uses pairwise summation with different rounding
    if len(vector) == 0:
        return 0.0
    return np.cumsum(vector)[-1]
