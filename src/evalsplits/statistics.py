"""
Label distribution statistics of generated splits.
"""

from collections import Counter
from typing import Any, Dict, List

from .base_generator import TrainTestSplit
from .dataset import BaseDataset


def label_distribution(dataset: BaseDataset) -> Dict[Any, int]:
    """
    Count rows per label value.

    Args:
        dataset: Labeled dataset

    Returns:
        Dictionary label value -> count, empty if the dataset has no label
    """
    if dataset.label_column_index() is None:
        return {}
    return dict(Counter(dataset.label_values().tolist()))


def get_split_statistics(splits: List[TrainTestSplit]) -> Dict:
    """
    Compute statistics across splits.

    Args:
        splits: Generated splits

    Returns:
        Statistics dictionary
    """
    stats = {
        'n_splits': len(splits),
        'splits': [],
        'avg_train_size': 0,
        'avg_test_size': 0
    }

    total_train = 0
    total_test = 0

    for split in splits:
        stats['splits'].append({
            'fold': split.fold_number,
            'train_size': split.n_train,
            'test_size': split.n_test,
            'train_label_counts': label_distribution(split.train),
            'test_label_counts': label_distribution(split.test)
        })
        total_train += split.n_train
        total_test += split.n_test

    stats['avg_train_size'] = total_train / len(splits) if splits else 0
    stats['avg_test_size'] = total_test / len(splits) if splits else 0

    return stats
