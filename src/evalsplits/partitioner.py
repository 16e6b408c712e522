"""
Contiguous fold boundaries over an index ordering.

Folds differ in size by at most one row; the first ``row_count % fold_count``
folds receive the extra rows.
"""

from typing import List, Sequence, Tuple

import numpy as np

from .errors import InvalidPolicyError


def _check_fold_count(row_count: int, fold_count: int) -> None:
    if fold_count < 1:
        raise InvalidPolicyError(f"fold_count must be >= 1, got {fold_count}")
    if fold_count > row_count:
        raise InvalidPolicyError(
            f"Cannot have more folds than rows: folds={fold_count}, rows={row_count}"
        )


def fold_bounds(row_count: int, fold_count: int, fold_index: int) -> Tuple[int, int]:
    """
    Compute the slice of one fold.

    Args:
        row_count: Number of rows being partitioned
        fold_count: Number of folds
        fold_index: 0-based fold index

    Returns:
        Tuple of (first, length)

    Raises:
        InvalidPolicyError: If fold_count is < 1 or larger than row_count
        IndexError: If fold_index is not a valid fold
    """
    _check_fold_count(row_count, fold_count)
    if not 0 <= fold_index < fold_count:
        raise IndexError(f"fold_index {fold_index} out of range for {fold_count} folds")

    base = row_count // fold_count
    remainder = row_count % fold_count
    if fold_index < remainder:
        return fold_index * (base + 1), base + 1
    return fold_index * base + remainder, base


def fold_sizes(row_count: int, fold_count: int) -> List[int]:
    """Sizes of all folds, in fold order."""
    return [fold_bounds(row_count, fold_count, f)[1] for f in range(fold_count)]


def split_ordering(ordering: Sequence[int], fold_count: int,
                   fold_index: int) -> Tuple[np.ndarray, np.ndarray]:
    """
    Split an ordering into the rows outside and inside one fold.

    Args:
        ordering: Index ordering to partition
        fold_count: Number of folds
        fold_index: 0-based fold index

    Returns:
        Tuple of (train, test); both keep the order of ``ordering``
    """
    order = np.asarray(ordering, dtype=np.int64).reshape(-1)
    first, length = fold_bounds(order.shape[0], fold_count, fold_index)
    test = order[first:first + length].copy()
    train = np.concatenate([order[:first], order[first + length:]])
    return train, test
