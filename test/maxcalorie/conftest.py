import sys
from pathlib import Path

import numpy as np
import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from MaxCalorie.food import FoodItem


def make_catalog(rows):
    return [FoodItem(description=d, weight=w, calories=c) for d, w, c in rows]


def random_catalog(seed: int, n_items: int, *, max_weight: int = 10, max_calories: int = 100):
    """Integral weights/calories so float sums are exact in every summation order."""
    rng = np.random.default_rng(seed)
    weights = rng.integers(1, max_weight + 1, size=n_items)
    calories = rng.integers(0, max_calories + 1, size=n_items)
    return [
        FoodItem(description=f"food-{i}", weight=float(w), calories=float(c))
        for i, (w, c) in enumerate(zip(weights, calories))
    ]


@pytest.fixture
def abcd_catalog():
    return make_catalog([
        ("A", 2, 3),
        ("B", 3, 4),
        ("C", 4, 5),
        ("D", 5, 6),
    ])


@pytest.fixture
def catalog_factory():
    return make_catalog


@pytest.fixture
def random_catalog_factory():
    return random_catalog
