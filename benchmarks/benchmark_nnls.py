import numpy as np
import pytest
import splitnet.nnls as nnls


@pytest.fixture(scope="module", params=[20, 100])
def distances(request):
    n = request.param
    rng = np.random.default_rng(0)
    upper = np.triu(rng.random((n, n)), k=1)
    return upper + upper.T + 1.0 - np.eye(n)


@pytest.mark.benchmark
@pytest.mark.parametrize("function", [nnls.circular_metric, nnls.circular_adjoint])
def benchmark_operator(function, distances):
    """
    Apply the circular linear operator or its adjoint.
    """
    function(distances)


@pytest.mark.benchmark
@pytest.mark.parametrize("method", list(nnls.NNLSMethod))
def benchmark_compute_split_weights(method, distances):
    """
    Estimate the circular split weights of random distances.
    """
    n = len(distances)
    nnls.compute_split_weights(
        distances, np.arange(n), nnls.NNLSParams(n, method=method)
    )
