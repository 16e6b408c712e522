"""
Shared fixtures for all tests.

This module provides the datasets used across the unit tests.
"""
import pytest
import sys
from pathlib import Path

# Add src to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT / "src"))

from evalsplits import Dataset, make_attributes  # noqa: E402


FEATURES = ["sepal", "petal", "bucket", "class"]


def _label_for(i: int) -> str:
    """60% 'a', 30% 'b', 10% 'c', interleaved."""
    r = i % 10
    if r < 6:
        return 'a'
    if r < 9:
        return 'b'
    return 'c'


def build_dataset(n_rows: int, relation_name: str = "iris") -> Dataset:
    """Build a labeled dataset with a categorical last column."""
    rows = [[float(i), i * 0.5, float(i % 7), _label_for(i)] for i in range(n_rows)]
    return Dataset(
        rows,
        make_attributes(FEATURES, label_categories=('a', 'b', 'c')),
        label_index=3,
        relation_name=relation_name
    )


# =============================================================================
# Dataset Fixtures
# =============================================================================

@pytest.fixture
def labeled_dataset():
    """100 rows, categorical label with 60/30/10 class counts."""
    return build_dataset(100)


@pytest.fixture
def small_dataset():
    """7 rows, categorical label."""
    return build_dataset(7, relation_name="small")


@pytest.fixture
def dataset_factory():
    """Build labeled datasets of any size."""
    return build_dataset


@pytest.fixture
def numeric_label_dataset():
    """20 rows with a numeric label column."""
    rows = [[float(i), float(i * i)] for i in range(20)]
    return Dataset(rows, make_attributes(["x", "y"]), label_index=1, relation_name="numeric")


@pytest.fixture
def unlabeled_dataset():
    """10 rows without a label column."""
    rows = [[float(i), float(-i)] for i in range(10)]
    return Dataset(rows, make_attributes(["x", "y"]), label_index=None, relation_name="unlabeled")
