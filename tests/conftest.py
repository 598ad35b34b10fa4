import matplotlib

matplotlib.use("Agg")

import pytest


@pytest.fixture
def textbook_dims():
    return [10, 20, 30, 40, 30]
