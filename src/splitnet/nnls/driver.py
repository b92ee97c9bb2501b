# This source code is part of the Splitnet package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

"""
This module provides the estimation of circular split weights from a
distance matrix.
"""

__name__ = "splitnet.nnls"
__author__ = "The Splitnet contributors"
__all__ = ["compute_split_weights", "optimize_fit", "search_face"]

import warnings
import numpy as np
from ..splits.split import Split
from .activeset import check_kkt, filter_most_negative, zero_elements
from .cgnr import cgnr
from .error import NonConvergenceWarning
from .operator import objective
from .params import NNLSMethod, NNLSParams
from .repair import furthest_feasible, golden_projection


def compute_split_weights(distances, cycle, params=None, progress=None):
    """
    Estimate the weights of all circular splits of an ordering by
    non-negative least squares.

    This is the split weight estimation step of the *NeighborNet*
    method :footcite:`Bryant2004`:
    The weights are chosen such that the distances induced by the
    splits approximate the given `distances` as closely as possible in
    the least squares sense, subject to all weights being non-negative.

    Parameters
    ----------
    distances : ndarray, shape=(n,n), dtype=float
        The pairwise distances between the taxa.
        Only the upper triangle (with respect to the circular ordering)
        is used.
    cycle : array-like, shape=(n,), dtype=int
        The circular ordering of the taxa, as permutation of the taxon
        indices.
    params : NNLSParams, optional
        The optimization parameters.
        By default, the default parameters for *n* taxa are used.
    progress : ProgressMonitor, optional
        If given, the optimization reports its progress to this object
        and checks for cancellation once per outer iteration.

    Returns
    -------
    splits : list of Split
        The splits with a weight above ``params.cutoff``.
        The side :attr:`Split.part` of each split is a contiguous arc of
        the ordering, not containing its last taxon.
        The splits are sorted by the first and then by the last
        position of this arc.

    Raises
    ------
    ValueError
        If the distance matrix is not square or contains non-finite
        values, or if `cycle` is not a permutation of its taxa.
    CancelledError
        If the computation was cancelled via `progress`.

    Warns
    -----
    NonConvergenceWarning
        If the optimization did not converge within
        ``params.outer_iterations``.
        The best solution found so far is returned nevertheless.

    See Also
    --------
    optimize_fit : Optimization on the weight matrix itself.

    Notes
    -----
    The optimization starts with all weights set to one.

    Single taxa do not have any split.
    Two taxa have only a single split, whose weight is their
    distance.

    References
    ----------

    .. footbibliography::

    Examples
    --------

    >>> distances = np.array([
    ...     [0, 2, 4, 4],
    ...     [2, 0, 4, 4],
    ...     [4, 4, 0, 2],
    ...     [4, 4, 2, 0],
    ... ])
    >>> splits = compute_split_weights(distances, [0, 1, 2, 3])
    >>> for split in splits:
    ...     print(sorted(split.part), f"{split.weight:.3f}")
    [0] 1.000
    [0, 1] 2.000
    [0, 1, 2] 1.000
    [1] 1.000
    [2] 1.000
    """
    distances = np.asarray(distances, dtype=float)
    if distances.ndim != 2 or distances.shape[0] != distances.shape[1]:
        raise ValueError(
            f"Distance matrix must be square, got shape {distances.shape}"
        )
    if not np.all(np.isfinite(distances)):
        raise ValueError("Distance matrix contains non-finite values")
    cycle = np.asarray(cycle, dtype=int)
    n = len(cycle)
    if n == 0:
        raise ValueError("The circular ordering is empty")
    if n != distances.shape[0]:
        raise ValueError(
            f"The ordering contains {n} taxa, "
            f"but the distance matrix has {distances.shape[0]} taxa"
        )
    if not np.array_equal(np.sort(cycle), np.arange(n)):
        raise ValueError("The ordering is not a permutation of the taxa")

    if n == 1:
        return []
    if n == 2:
        dist = distances[cycle[0], cycle[1]]
        if dist > 0:
            return [Split([cycle[0]], 2, dist)]
        return []

    if params is None:
        params = NNLSParams(n)

    # Only the upper triangle in circular order is taken into account
    d = np.triu(distances[np.ix_(cycle, cycle)], k=1)
    d = d + d.T

    x = np.ones((n, n), dtype=float)
    np.fill_diagonal(x, 0)

    converged = optimize_fit(x, d, params, progress)
    if not converged:
        warnings.warn(
            f"NNLS optimization did not converge within "
            f"{params.outer_iterations} iterations",
            NonConvergenceWarning,
        )

    splits = []
    cutoff = params.cutoff
    for i in range(n):
        for j in range(i + 1, n):
            if x[i, j] > cutoff:
                splits.append(Split(cycle[i:j], n, x[i, j]))
    return splits


def optimize_fit(x, d, params, progress=None):
    """
    Find the non-negative split weights that minimize ``||Ax - d||``.

    Faces of the non-negative orthant are searched repeatedly via
    :func:`search_face()`.
    When the solution is optimal for the current face, or the objective
    does not decrease anymore, the KKT conditions of the overall
    problem are checked via :func:`check_kkt()`.

    Parameters
    ----------
    x : ndarray, shape=(n,n), dtype=float
        The symmetric matrix of non-negative initial split weights.
        It is overwritten with the solution.
    d : ndarray, shape=(n,n), dtype=float
        The symmetric distance matrix, indexed by circular position.
    params : NNLSParams
        The optimization parameters.
    progress : ProgressMonitor, optional
        If given, the progress is reported to this object and
        cancellation is checked once per outer iteration.

    Returns
    -------
    converged : bool
        True, if a solution was found within
        ``params.outer_iterations``.
        Otherwise, `x` contains the best solution found so far.

    Raises
    ------
    CancelledError
        If the computation was cancelled via `progress`.
    """
    if x.shape != d.shape:
        raise ValueError(
            f"Weights {x.shape} and distances {d.shape} "
            f"must have the same shape"
        )
    fx_old = objective(x, d)
    active_set = zero_elements(x)

    for k in range(1, params.outer_iterations + 1):
        optimal_for_face = search_face(x, d, active_set, params)
        fx = objective(x, d)
        if optimal_for_face or fx_old - fx < params.tolerance:
            if params.greedy:
                return True
            if check_kkt(x, d, active_set, params):
                return True
        fx_old = fx
        if progress is not None:
            progress.set_progress(k, params.outer_iterations, fx)
            progress.check_for_cancel()
    return False


def search_face(x, d, active_set, params):
    """
    Minimize ``||Ax - d||`` on the face given by the active set and
    move the result back into the feasible region.

    The minimum on the face is approximated by :func:`cgnr()`.
    If the result contains negative weights, a feasible point between
    the initial and the resulting weights is chosen, either via
    :func:`golden_projection()` (projected gradient method) or via
    :func:`furthest_feasible()` (active set method).
    The active set is updated accordingly.

    Parameters
    ----------
    x : ndarray, shape=(n,n), dtype=float
        The symmetric matrix of non-negative initial split weights.
        It is overwritten with the new point.
    d : ndarray, shape=(n,n), dtype=float
        The symmetric distance matrix, indexed by circular position.
    active_set : ndarray, shape=(n,n), dtype=bool
        The symmetric mask of weights pinned to zero.
        It is updated in place.
    params : NNLSParams
        The optimization parameters.

    Returns
    -------
    optimal : bool
        True, if `x` is the approximate minimizer on the current face.
    """
    x0 = x.copy()

    cg_converged = cgnr(
        x, d, active_set, params.tolerance, params.cg_iterations
    )
    if params.collapse_multiple:
        filter_most_negative(x, active_set, params.fraction_negative_to_keep)
        cg_converged = cgnr(
            x, d, active_set, params.tolerance, params.cg_iterations
        )

    if np.min(x) < 0:
        if params.method == NNLSMethod.PROJECTED_GRADIENT:
            golden_projection(x, x0, d, params.tolerance)
        else:
            furthest_feasible(x, x0, params.tolerance)
        zero_elements(x, out=active_set)
        return False
    return cg_converged
