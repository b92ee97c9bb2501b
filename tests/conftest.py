# This source code is part of the Splitnet package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

import numpy as np
import pytest


@pytest.fixture
def rng():
    return np.random.default_rng(0)
