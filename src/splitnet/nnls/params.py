# This source code is part of the Splitnet package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

"""
This module contains the parameters of the circular NNLS optimization.
"""

__name__ = "splitnet.nnls"
__author__ = "The Splitnet contributors"
__all__ = ["NNLSMethod", "NNLSParams"]

from enum import Enum


class NNLSMethod(Enum):
    """
    The strategy for leaving the feasible region and for relaxing
    constraints.

    - `PROJECTED_GRADIENT` -
      Infeasible CG steps are repaired by a golden section search along
      the projected path, and every constraint violating the KKT
      conditions is released at once.
    - `ACTIVE_SET` -
      Infeasible CG steps are cut back to the furthest feasible point,
      and only the most violating constraint is released.
    """

    PROJECTED_GRADIENT = "projected_gradient"
    ACTIVE_SET = "active_set"


class NNLSParams:
    """
    Parameters for the estimation of circular split weights.

    Parameters
    ----------
    n_taxa : int, optional
        The number of taxa.
        Only used for the default iteration limits.
    method : NNLSMethod or str, optional
        The optimization method.
        By default the projected gradient method is used.
    tolerance : float, optional
        The approximate tolerance in split weights.
        It is the convergence criterion for the CG solver, the
        objective decrease and the golden section search.
    greedy : bool, optional
        If true, the optimization stops as soon as the solution is
        optimal for the current face, without checking the KKT
        conditions of the overall problem.
    cg_iterations : int, optional
        Maximum number of iterations in each call of the CG solver.
        By default ``max(n_taxa, 10)``.
    outer_iterations : int, optional
        Maximum number of face optimizations.
        By default ``max(n_taxa, 10)``.
    collapse_multiple : bool, optional
        If true, a fraction of the most negative weights are pinned to
        zero at once after each CG solve.
        This emulates the behavior of *SplitsTree4*.
    fraction_negative_to_keep : float, optional
        The fraction of negative weights, that are *not* pinned to zero,
        if `collapse_multiple` is true.
    kkt_bound : float, optional
        A gradient component of a zero weight below ``-kkt_bound``
        violates the KKT conditions.
        By default ``tolerance / 100``.

    Attributes
    ----------
    method, tolerance, greedy, cg_iterations, outer_iterations, collapse_multiple, fraction_negative_to_keep, kkt_bound
        The values given in the constructor, after the defaults have
        been filled in.
    cutoff : float
        Only split weights above this value are reported.
        It is ``tolerance / 10``.

    Examples
    --------

    >>> params = NNLSParams(n_taxa=20, method="active_set")
    >>> print(params.method)
    NNLSMethod.ACTIVE_SET
    >>> print(params.cg_iterations, params.outer_iterations)
    20 20
    >>> print(params.kkt_bound == params.tolerance / 100)
    True
    """

    def __init__(
        self,
        n_taxa=None,
        method=NNLSMethod.PROJECTED_GRADIENT,
        tolerance=1e-6,
        greedy=False,
        cg_iterations=None,
        outer_iterations=None,
        collapse_multiple=False,
        fraction_negative_to_keep=0.4,
        kkt_bound=None,
    ):
        default_iterations = 10 if n_taxa is None else max(int(n_taxa), 10)
        self.method = NNLSMethod(method)
        self.tolerance = float(tolerance)
        self.greedy = bool(greedy)
        self.cg_iterations = (
            default_iterations if cg_iterations is None else int(cg_iterations)
        )
        self.outer_iterations = (
            default_iterations if outer_iterations is None
            else int(outer_iterations)
        )
        self.collapse_multiple = bool(collapse_multiple)
        self.fraction_negative_to_keep = float(fraction_negative_to_keep)
        self.kkt_bound = (
            self.tolerance / 100 if kkt_bound is None else float(kkt_bound)
        )

        if self.tolerance <= 0:
            raise ValueError(
                f"Tolerance must be positive, got {self.tolerance}"
            )
        if self.cg_iterations < 1:
            raise ValueError(
                f"At least one CG iteration is required, "
                f"got {self.cg_iterations}"
            )
        if self.outer_iterations < 1:
            raise ValueError(
                f"At least one outer iteration is required, "
                f"got {self.outer_iterations}"
            )
        if not 0 <= self.fraction_negative_to_keep <= 1:
            raise ValueError(
                f"Fraction of negative weights to keep must be in [0, 1], "
                f"got {self.fraction_negative_to_keep}"
            )
        if self.kkt_bound < 0:
            raise ValueError(
                f"KKT bound must be non-negative, got {self.kkt_bound}"
            )

    @property
    def cutoff(self):
        return self.tolerance / 10

    def copy(self):
        """
        Copy the parameters.

        Returns
        -------
        copy : NNLSParams
            A copy of these parameters.
        """
        return NNLSParams(
            method=self.method,
            tolerance=self.tolerance,
            greedy=self.greedy,
            cg_iterations=self.cg_iterations,
            outer_iterations=self.outer_iterations,
            collapse_multiple=self.collapse_multiple,
            fraction_negative_to_keep=self.fraction_negative_to_keep,
            kkt_bound=self.kkt_bound,
        )

    def __eq__(self, item):
        if not isinstance(item, NNLSParams):
            return False
        return (
            self.method == item.method
            and self.tolerance == item.tolerance
            and self.greedy == item.greedy
            and self.cg_iterations == item.cg_iterations
            and self.outer_iterations == item.outer_iterations
            and self.collapse_multiple == item.collapse_multiple
            and self.fraction_negative_to_keep == item.fraction_negative_to_keep
            and self.kkt_bound == item.kkt_bound
        )

    def __repr__(self):
        return (
            f"NNLSParams(method={self.method}, "
            f"tolerance={self.tolerance!r}, "
            f"greedy={self.greedy!r}, "
            f"cg_iterations={self.cg_iterations!r}, "
            f"outer_iterations={self.outer_iterations!r}, "
            f"collapse_multiple={self.collapse_multiple!r}, "
            f"fraction_negative_to_keep={self.fraction_negative_to_keep!r}, "
            f"kkt_bound={self.kkt_bound!r})"
        )
