# This source code is part of the Splitnet package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

import pytest
import splitnet.nnls as nnls


def test_defaults():
    params = nnls.NNLSParams()
    assert params.method == nnls.NNLSMethod.PROJECTED_GRADIENT
    assert params.tolerance == 1e-6
    assert params.greedy is False
    assert params.cg_iterations == 10
    assert params.outer_iterations == 10
    assert params.collapse_multiple is False
    assert params.fraction_negative_to_keep == 0.4
    assert params.kkt_bound == params.tolerance / 100
    assert params.cutoff == params.tolerance / 10


@pytest.mark.parametrize("n_taxa, ref_iterations", [(3, 10), (10, 10), (25, 25)])
def test_iteration_defaults(n_taxa, ref_iterations):
    params = nnls.NNLSParams(n_taxa)
    assert params.cg_iterations == ref_iterations
    assert params.outer_iterations == ref_iterations


def test_kkt_bound_follows_tolerance():
    params = nnls.NNLSParams(tolerance=1e-4)
    assert params.kkt_bound == pytest.approx(1e-6)


@pytest.mark.parametrize(
    "method, ref_method",
    [
        ("projected_gradient", nnls.NNLSMethod.PROJECTED_GRADIENT),
        ("active_set", nnls.NNLSMethod.ACTIVE_SET),
        (nnls.NNLSMethod.ACTIVE_SET, nnls.NNLSMethod.ACTIVE_SET),
    ],
)
def test_method(method, ref_method):
    assert nnls.NNLSParams(method=method).method == ref_method


@pytest.mark.parametrize(
    "kwargs",
    [
        {"method": "simplex"},
        {"tolerance": 0},
        {"tolerance": -1e-6},
        {"cg_iterations": 0},
        {"outer_iterations": 0},
        {"fraction_negative_to_keep": 1.5},
        {"fraction_negative_to_keep": -0.1},
        {"kkt_bound": -1.0},
    ],
)
def test_invalid(kwargs):
    with pytest.raises(ValueError):
        nnls.NNLSParams(**kwargs)


def test_copy():
    params = nnls.NNLSParams(20, method="active_set", greedy=True)
    copy = params.copy()
    assert copy == params
    assert copy is not params
    copy.greedy = False
    assert params.greedy is True
