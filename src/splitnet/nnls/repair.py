# This source code is part of the Splitnet package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

"""
This module provides functions for moving an infeasible solution,
i.e. split weights with negative entries, back into the feasible
region.
"""

__name__ = "splitnet.nnls"
__author__ = "The Splitnet contributors"
__all__ = ["golden_projection", "furthest_feasible", "projected_objective"]

import numpy as np
from .operator import objective

# Golden ratio section of an interval
_C = (3 - np.sqrt(5)) / 2.0
_R = 1.0 - _C


def golden_projection(x, x0, d, tolerance):
    """
    Find the best feasible point on the projection of the line segment
    between two points.

    The projection of a point is its closest point in the non-negative
    orthant, i.e. all negative weights are set to zero.
    ``||A proj((1-t) x0 + t x) - d||`` is minimized over *t* in
    *[0, 1]* via golden section search.

    Parameters
    ----------
    x : ndarray, shape=(n,n), dtype=float
        The symmetric matrix of split weights at the end of the segment,
        usually an infeasible CG solution.
        It is overwritten with the optimal projected point.
    x0 : ndarray, shape=(n,n), dtype=float
        The feasible start of the segment.
    d : ndarray, shape=(n,n), dtype=float
        The symmetric distance matrix, indexed by circular position.
    tolerance : float
        The search stops, when the search interval is not larger than
        this value.

    Notes
    -----
    If the lower end of the search interval remained at exactly *t = 0*
    and the objective at *t = 0* is strictly lower than at the inner
    point, *t = 0* is chosen.
    Hence, a minimum at the boundary is returned exactly, i.e. `x`
    becomes the projection of `x0` itself.
    """
    t0 = 0.0
    t1 = _C
    t2 = _C + _C * (1 - _C)
    t3 = 1.0
    f1 = projected_objective(t1, x0, x, d)
    f2 = projected_objective(t2, x0, x, d)

    while abs(t3 - t0) > tolerance:
        if f2 < f1:
            t0 = t1
            t1 = t2
            t2 = _R * t1 + _C * t3
            f1 = f2
            f2 = projected_objective(t2, x0, x, d)
        else:
            t3 = t2
            t2 = t1
            t1 = _R * t2 + _C * t0
            f2 = f1
            f1 = projected_objective(t1, x0, x, d)

    t_min = t1
    if f2 < f1:
        t_min = t2
    elif t0 == 0:
        f0 = projected_objective(t0, x0, x, d)
        if f0 < f1:
            t_min = t0

    x[:] = _project((1 - t_min) * x0 + t_min * x)


def projected_objective(t, x0, x, d):
    """
    Evaluate the objective at the projection of ``(1-t) x0 + t x``.

    Parameters
    ----------
    t : float
        The position on the segment between `x0` (*t = 0*) and `x`
        (*t = 1*).
    x0, x : ndarray, shape=(n,n), dtype=float
        The ends of the segment.
    d : ndarray, shape=(n,n), dtype=float
        The symmetric distance matrix, indexed by circular position.

    Returns
    -------
    value : float
        ``||A proj((1-t) x0 + t x) - d||``.
    """
    return objective(_project(x0 * (1 - t) + x * t), d)


def furthest_feasible(x, x0, tolerance):
    """
    Find the point on the line segment between two points, that is
    furthest from the start, but still feasible.

    For each negative weight in `x` the segment crosses zero at
    ``t = x0 / (x0 - x)``; the smallest of these values gives the
    furthest feasible point.

    Parameters
    ----------
    x : ndarray, shape=(n,n), dtype=float
        The symmetric matrix of split weights at the end of the segment,
        usually an infeasible CG solution.
        It is overwritten with the furthest feasible point.
    x0 : ndarray, shape=(n,n), dtype=float
        The feasible start of the segment.
    tolerance : float
        Weights below this value are set to exactly zero.
    """
    negative = x < 0
    t_min = 1.0
    if np.any(negative):
        t_min = min(
            t_min,
            float(np.min(x0[negative] / (x0[negative] - x[negative]))),
        )

    n = x.shape[0]
    upper = np.triu_indices(n, k=1)
    x_t = (1.0 - t_min) * x0[upper] + t_min * x[upper]
    x_t[x_t < tolerance] = 0
    x[upper] = x_t
    x[upper[1], upper[0]] = x_t


def _project(x):
    return np.maximum(x, 0.0)
