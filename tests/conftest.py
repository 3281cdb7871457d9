import numpy as np
import pytest


@pytest.fixture
def distinct_4x4():
    """RGB изображение 4x4, где у каждого пикселя свой цвет."""
    values = np.arange(4 * 4 * 3, dtype=np.uint8).reshape(4, 4, 3)
    return (values * 5).astype(np.uint8)
