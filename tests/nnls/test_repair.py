# This source code is part of the Splitnet package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

import numpy as np
import pytest
import splitnet.nnls as nnls
from tests.util import random_weights, to_matrix


@pytest.mark.parametrize("seed", range(5))
def test_golden_projection_boundary(seed):
    """
    If the start of the segment is already optimal, the projection
    search returns exactly the start point.
    """
    N = 6
    rng = np.random.default_rng(seed)
    x0 = random_weights(N, rng)
    d = nnls.circular_metric(x0)
    # Moving towards 'x' monotonically worsens the fit
    x = x0 - 2.0
    np.fill_diagonal(x, 0)

    nnls.golden_projection(x, x0, d, 1e-6)

    assert np.array_equal(x, x0)


@pytest.mark.parametrize("seed", range(5))
def test_golden_projection_end(seed):
    """
    If the projection of the end of the segment reproduces the
    distances, the search approaches the end point.
    """
    N = 6
    rng = np.random.default_rng(seed)
    x_end = random_weights(N, rng)
    # Make some of the weights negative
    upper = np.triu(rng.random((N, N)) < 0.3, k=1)
    x_end[upper | upper.T] *= -1
    ref_x = np.maximum(x_end, 0)
    d = nnls.circular_metric(ref_x)
    x0 = ref_x + random_weights(N, rng)

    x = x_end.copy()
    nnls.golden_projection(x, x0, d, 1e-8)

    assert np.all(x >= 0)
    assert np.array_equal(x, x.T)
    assert x.flatten().tolist() == pytest.approx(ref_x.flatten().tolist(), abs=1e-6)


def test_golden_projection_improves(rng):
    """
    The projected point is feasible and not worse than the projected
    start of the segment.
    """
    N = 8
    d = random_weights(N, rng)
    x0 = np.ones((N, N))
    np.fill_diagonal(x0, 0)
    x = x0.copy()
    nnls.cgnr(x, d, np.eye(N, dtype=bool), 1e-12, 100)
    f0 = nnls.projected_objective(0.0, x0, x, d)

    nnls.golden_projection(x, x0, d, 1e-6)

    assert np.all(x >= 0)
    assert nnls.objective(x, d) <= f0


def test_projected_objective(rng):
    N = 5
    x0 = random_weights(N, rng)
    x = random_weights(N, rng) - 0.5
    d = random_weights(N, rng)
    t = 0.3
    ref_value = nnls.objective(np.maximum((1 - t) * x0 + t * x, 0), d)
    assert nnls.projected_objective(t, x0, x, d) == pytest.approx(ref_value)


def test_furthest_feasible():
    """
    The weight that turns negative first limits the step.
    """
    x0 = to_matrix([0.5, 1.0, 2.0], 3)
    x = to_matrix([-0.5, 2.0, 1.0], 3)

    nnls.furthest_feasible(x, x0, 1e-6)

    # Step length t = 0.5 / (0.5 + 0.5)
    assert x.tolist() == to_matrix([0.0, 1.5, 1.5], 3).tolist()


def test_furthest_feasible_minimum_ratio():
    """
    Of multiple weights turning negative, the one with the smallest
    step length is decisive.
    """
    x0 = to_matrix([1.0, 1.0, 1.0], 3)
    # Step lengths 0.5 and 0.25
    x = to_matrix([-1.0, -3.0, 1.0], 3)

    nnls.furthest_feasible(x, x0, 1e-6)

    assert x.tolist() == to_matrix([0.5, 0.0, 1.0], 3).tolist()


def test_furthest_feasible_snapping():
    """
    Weights below the tolerance are set to exactly zero, even if the
    whole step is feasible.
    """
    x0 = to_matrix([1.0, 1.0, 1.0], 3)
    x = to_matrix([1e-9, 2.0, 0.5], 3)

    nnls.furthest_feasible(x, x0, 1e-6)

    assert x.tolist() == to_matrix([0.0, 2.0, 0.5], 3).tolist()


@pytest.mark.parametrize("seed", range(5))
def test_furthest_feasible_random(seed):
    N = 7
    rng = np.random.default_rng(seed)
    x0 = random_weights(N, rng)
    x = random_weights(N, rng) - 0.5
    np.fill_diagonal(x, 0)

    nnls.furthest_feasible(x, x0, 1e-10)

    assert np.all(x >= 0)
    assert np.array_equal(x, x.T)
    # At least one weight hits the boundary
    assert np.any(x[np.triu_indices(N, k=1)] == 0)
