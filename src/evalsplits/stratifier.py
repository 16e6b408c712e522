"""
Label-aware reordering of an index sequence for stratified cross-validation.
"""

from typing import Any, Dict, List, Sequence

import numpy as np

from .dataset import is_missing

_MISSING = object()


def _label_key(value: Any) -> Any:
    return _MISSING if is_missing(value) else value


def group_by_label(ordering: Sequence[int], labels: Sequence[Any]) -> List[np.ndarray]:
    """
    Group positions of an ordering by their label value.

    Groups appear in order of first occurrence and keep the internal order of
    ``ordering``. Missing labels (None, NaN) form one group.

    Args:
        ordering: Row indices
        labels: Label value per row, indexed by row index

    Returns:
        List of index arrays, one per label value
    """
    groups: Dict[Any, List[int]] = {}
    for idx in np.asarray(ordering, dtype=np.int64).reshape(-1):
        groups.setdefault(_label_key(labels[idx]), []).append(int(idx))
    return [np.asarray(members, dtype=np.int64) for members in groups.values()]


def stratify(ordering: Sequence[int], labels: Sequence[Any], fold_count: int) -> np.ndarray:
    """
    Reorder indices so each contiguous fold mirrors the label distribution.

    The label-grouped sequence is dealt round-robin across the fold
    boundaries: element ``i`` goes to fold ``i % fold_count`` and the folds are
    concatenated. Fold ``s`` then holds every ``fold_count``-th element of the
    grouped sequence, and its size equals ``fold_bounds(n, fold_count, s)``.

    Args:
        ordering: Row indices (typically already shuffled)
        labels: Label value per row, indexed by row index
        fold_count: Number of folds the result will be partitioned into

    Returns:
        Reordered index array
    """
    if fold_count < 1:
        raise ValueError(f"fold_count must be >= 1, got {fold_count}")
    groups = group_by_label(ordering, labels)
    if not groups:
        return np.zeros(0, dtype=np.int64)
    grouped = np.concatenate(groups)
    return np.concatenate([grouped[start::fold_count] for start in range(fold_count)])
