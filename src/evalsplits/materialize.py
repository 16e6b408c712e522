"""
Turn index lists into datasets, either as views or as copies.
"""

from typing import Optional, Sequence

from .dataset import BaseDataset, Dataset, DatasetView, checked_indices


def as_view(dataset: BaseDataset, indices: Sequence[int],
            relation_name: Optional[str] = None) -> DatasetView:
    """Read-only projection of ``dataset``; no row data is copied."""
    return DatasetView(dataset, indices, relation_name=relation_name)


def as_copy(dataset: BaseDataset, indices: Sequence[int],
            relation_name: Optional[str] = None) -> Dataset:
    """
    Independent dataset holding copies of the selected rows.

    Args:
        dataset: Source dataset or view
        indices: Row indices into ``dataset``, in output order
        relation_name: Name of the copy (defaults to the source name)

    Returns:
        New Dataset

    Raises:
        IndexError: If an index is outside the rows of ``dataset``
    """
    idx = checked_indices(indices, dataset.row_count())
    if isinstance(dataset, DatasetView):
        idx = dataset.original_indices()[idx]
        dataset = dataset.source
    if isinstance(dataset, Dataset):
        return dataset.take(idx, relation_name=relation_name)

    rows = [list(dataset.row_at(int(i))) for i in idx]
    return Dataset(
        rows,
        dataset.attributes,
        label_index=dataset.label_column_index(),
        relation_name=relation_name if relation_name is not None else dataset.relation_name
    )


def materialize(dataset: BaseDataset, indices: Sequence[int], use_view: bool,
                relation_name: Optional[str] = None) -> BaseDataset:
    """
    Materialize the selected rows of ``dataset``.

    Args:
        dataset: Source dataset
        indices: Row indices, in output order
        use_view: True for a read-only view, False for an independent copy
        relation_name: Name of the result

    Returns:
        DatasetView or Dataset with identical row content and order
    """
    if use_view:
        return as_view(dataset, indices, relation_name=relation_name)
    return as_copy(dataset, indices, relation_name=relation_name)
