# This source code is part of the Splitnet package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

"""
This module provides the conjugate gradient solver for the least
squares problem on a face of the non-negative orthant.
"""

__name__ = "splitnet.nnls"
__author__ = "The Splitnet contributors"
__all__ = ["cgnr"]

import numpy as np
from .operator import circular_adjoint, circular_metric


def cgnr(x, d, active_set, tolerance, max_iterations):
    """
    Minimize ``||Ax - d||`` subject to ``x[i,j] = 0`` for all pinned
    weights, using the conjugate gradient method on the normal
    equations (CGNR).

    The method follows the *CGNR* algorithm from
    *Iterative Methods for Sparse Linear Systems* (Saad).
    The constraint is realized by masking the pinned entries of the
    gradient, before the search direction is updated and before
    convergence is measured.

    Parameters
    ----------
    x : ndarray, shape=(n,n), dtype=float
        The symmetric matrix of initial split weights.
        It is modified in place and contains the least squares solution
        on the current face afterwards.
        The solution may contain negative weights.
    d : ndarray, shape=(n,n), dtype=float
        The symmetric distance matrix, indexed by circular position.
    active_set : ndarray, shape=(n,n), dtype=bool
        The symmetric mask of weights pinned to zero.
    tolerance : float
        The solver stops, if the squared norm of the masked gradient
        falls below this value.
    max_iterations : int
        The maximum number of CG iterations.

    Returns
    -------
    converged : bool
        True, if the solver stopped before exhausting
        `max_iterations`.
    """
    if x.shape != d.shape or x.shape != active_set.shape:
        raise ValueError(
            f"Weights {x.shape}, distances {d.shape} and active set "
            f"{active_set.shape} must have the same shape"
        )

    r = d - circular_metric(x)
    z = circular_adjoint(r)
    z[active_set] = 0
    p = z.copy()
    ztz = np.sum(z * z)
    if ztz == 0:
        # Already optimal on this face, no direction to search
        return True

    k = 1
    while True:
        w = circular_metric(p)
        alpha = ztz / np.sum(w * w)
        x += alpha * p
        r -= alpha * w
        z = circular_adjoint(r)
        z[active_set] = 0
        ztz2 = np.sum(z * z)
        beta = ztz2 / ztz

        if ztz2 < tolerance or k >= max_iterations:
            break

        p = z + beta * p
        ztz = ztz2
        k += 1

    return k < max_iterations
