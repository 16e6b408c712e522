"""
Tabular datasets consumed by the split generators.

A Dataset holds ordered rows of typed values with at most one label column.
A DatasetView is a read-only projection of a Dataset through a list of row
indices; it never copies row data.
"""

import math
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Iterator, List, Optional, Sequence, Tuple

import numpy as np

from .errors import ReadOnlyViolationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Attribute:
    """Description of a single column."""
    name: str
    categories: Optional[Tuple[str, ...]] = None  # None = numeric column

    @property
    def is_categorical(self) -> bool:
        """Whether the column holds category values."""
        return self.categories is not None

    @property
    def type_name(self) -> str:
        """Short type name used in exports."""
        return 'categorical' if self.is_categorical else 'numeric'


def is_missing(value: Any) -> bool:
    """Return True for None and NaN values."""
    if value is None:
        return True
    return isinstance(value, float) and math.isnan(value)


def checked_indices(indices: Sequence[int], row_count: int) -> np.ndarray:
    """
    Convert row indices to a flat int64 array and validate their range.

    Raises:
        IndexError: If an index is negative or not below ``row_count``
    """
    idx = np.asarray(indices, dtype=np.int64).reshape(-1)
    if idx.size > 0 and (idx.min() < 0 or idx.max() >= row_count):
        raise IndexError(f"Row indices out of range for {row_count} rows")
    return idx


class BaseDataset(ABC):
    """Common read interface of datasets and dataset views."""

    def __init__(self, relation_name: str):
        self._relation_name = relation_name

    @property
    @abstractmethod
    def attributes(self) -> Tuple[Attribute, ...]:
        """Column descriptions, in column order."""
        pass

    @abstractmethod
    def row_count(self) -> int:
        """Number of rows."""
        pass

    @abstractmethod
    def label_column_index(self) -> Optional[int]:
        """Index of the label column, None if the dataset is unlabeled."""
        pass

    @abstractmethod
    def row_at(self, idx: int) -> np.ndarray:
        """Values of row ``idx``."""
        pass

    @abstractmethod
    def value_at(self, row: int, col: int) -> Any:
        """Single cell value."""
        pass

    @abstractmethod
    def set_value(self, row: int, col: int, value: Any) -> None:
        """Replace a single cell value."""
        pass

    @abstractmethod
    def to_array(self) -> np.ndarray:
        """Copy of all values as a 2-D object array."""
        pass

    @property
    def relation_name(self) -> str:
        """Human-readable name of the dataset."""
        return self._relation_name

    def set_relation_name(self, name: str) -> None:
        """Rename the dataset. Names are tags only and may be changed on views."""
        self._relation_name = name

    def num_attributes(self) -> int:
        """Number of columns."""
        return len(self.attributes)

    def label_attribute(self) -> Optional[Attribute]:
        """Attribute of the label column, if any."""
        idx = self.label_column_index()
        if idx is None:
            return None
        return self.attributes[idx]

    def label_is_categorical(self) -> bool:
        """Whether a label column exists and is categorical."""
        attribute = self.label_attribute()
        return attribute is not None and attribute.is_categorical

    def label_value_of(self, row: int) -> Any:
        """Label value of ``row``."""
        idx = self.label_column_index()
        if idx is None:
            raise ValueError(f"Dataset '{self.relation_name}' has no label column")
        return self.value_at(row, idx)

    def label_values(self) -> np.ndarray:
        """Label values of all rows, in row order."""
        values = np.empty(self.row_count(), dtype=object)
        for i in range(self.row_count()):
            values[i] = self.label_value_of(i)
        return values

    def rows(self) -> Iterator[np.ndarray]:
        """Iterate over rows in order."""
        for i in range(self.row_count()):
            yield self.row_at(i)

    def __len__(self) -> int:
        return self.row_count()


class Dataset(BaseDataset):
    """
    In-memory dataset.

    Values live in a 2-D NumPy object array so that numeric and categorical
    columns can be mixed. Treated as immutable while a split generator reads it.
    """

    def __init__(self,
                 rows: Sequence[Sequence[Any]],
                 attributes: Sequence[Attribute],
                 label_index: Optional[int] = None,
                 relation_name: str = 'dataset'):
        """
        Initialize dataset.

        Args:
            rows: Row values, one sequence per row
            attributes: Column descriptions
            label_index: Index of the label column, None for unlabeled data
            relation_name: Name of the dataset

        Raises:
            ValueError: If a row does not match the number of attributes or the
                label index is out of range
        """
        attributes = tuple(attributes)
        values = np.empty((len(rows), len(attributes)), dtype=object)
        for i, row in enumerate(rows):
            if len(row) != len(attributes):
                raise ValueError(
                    f"Row {i} has {len(row)} values, expected {len(attributes)}"
                )
            values[i, :] = list(row)

        self._init_from_values(values, attributes, label_index, relation_name)

    @classmethod
    def _from_values(cls, values: np.ndarray,
                     attributes: Tuple[Attribute, ...],
                     label_index: Optional[int],
                     relation_name: str) -> 'Dataset':
        """Wrap an already built value array without copying it."""
        dataset = cls.__new__(cls)
        dataset._init_from_values(values, attributes, label_index, relation_name)
        return dataset

    def _init_from_values(self, values: np.ndarray,
                          attributes: Tuple[Attribute, ...],
                          label_index: Optional[int],
                          relation_name: str) -> None:
        if label_index is not None and not 0 <= label_index < len(attributes):
            raise ValueError(
                f"Label index {label_index} out of range for {len(attributes)} attributes"
            )
        BaseDataset.__init__(self, relation_name)
        self._values = values
        self._attributes = attributes
        self._label_index = label_index

    @property
    def attributes(self) -> Tuple[Attribute, ...]:
        return self._attributes

    def row_count(self) -> int:
        return self._values.shape[0]

    def label_column_index(self) -> Optional[int]:
        return self._label_index

    def row_at(self, idx: int) -> np.ndarray:
        return self._values[idx]

    def value_at(self, row: int, col: int) -> Any:
        return self._values[row, col]

    def set_value(self, row: int, col: int, value: Any) -> None:
        self._values[row, col] = value

    def to_array(self) -> np.ndarray:
        return self._values.copy()

    def values_for(self, indices: np.ndarray) -> np.ndarray:
        """Copy of the selected rows, in index order."""
        return self._values[checked_indices(indices, self.row_count())].copy()

    def take(self, indices: Sequence[int], relation_name: Optional[str] = None) -> 'Dataset':
        """
        Create a new dataset holding copies of the selected rows.

        Args:
            indices: Row indices, in output order
            relation_name: Name of the new dataset (defaults to this name)

        Returns:
            Independent Dataset
        """
        return Dataset._from_values(
            self.values_for(np.asarray(indices, dtype=np.int64)),
            self._attributes,
            self._label_index,
            relation_name if relation_name is not None else self.relation_name
        )


class DatasetView(BaseDataset):
    """
    Read-only projection of a Dataset through a list of row indices.

    Row ``i`` of the view is row ``indices[i]`` of the source. Views of views
    are flattened onto the underlying Dataset.
    """

    def __init__(self, source: BaseDataset, indices: Sequence[int],
                 relation_name: Optional[str] = None):
        """
        Initialize view.

        Args:
            source: Dataset (or view) to project
            indices: Row indices into ``source``, in view order
            relation_name: Name of the view (defaults to the source name)

        Raises:
            IndexError: If an index is outside the source rows
        """
        idx = checked_indices(indices, source.row_count())

        if isinstance(source, DatasetView):
            idx = source.original_indices()[idx]
            source = source.source

        super().__init__(relation_name if relation_name is not None else source.relation_name)
        idx = idx.copy()
        idx.flags.writeable = False
        self._source = source
        self._indices = idx

    @property
    def source(self) -> BaseDataset:
        """Underlying dataset."""
        return self._source

    def original_indices(self) -> np.ndarray:
        """Read-only array mapping view rows to source rows."""
        return self._indices

    @property
    def attributes(self) -> Tuple[Attribute, ...]:
        return self._source.attributes

    def row_count(self) -> int:
        return self._indices.shape[0]

    def label_column_index(self) -> Optional[int]:
        return self._source.label_column_index()

    def row_at(self, idx: int) -> np.ndarray:
        row = self._source.row_at(int(self._indices[idx])).view()
        row.flags.writeable = False
        return row

    def value_at(self, row: int, col: int) -> Any:
        return self._source.value_at(int(self._indices[row]), col)

    def set_value(self, row: int, col: int, value: Any) -> None:
        raise ReadOnlyViolationError(
            f"Cannot modify view '{self.relation_name}': views are read-only"
        )

    def to_array(self) -> np.ndarray:
        if isinstance(self._source, Dataset):
            return self._source.values_for(self._indices)
        return np.array([list(self.row_at(i)) for i in range(self.row_count())], dtype=object)


def make_attributes(names: List[str], label_categories: Optional[Tuple[str, ...]] = None,
                    label_index: int = -1) -> List[Attribute]:
    """
    Build numeric attributes with an optional categorical label column.

    Args:
        names: Column names
        label_categories: Categories of the label column; None keeps it numeric
        label_index: Position of the label column (negative counts from the end)

    Returns:
        List of Attribute
    """
    attributes = [Attribute(name) for name in names]
    if label_categories is not None and attributes:
        pos = label_index % len(attributes)
        attributes[pos] = Attribute(attributes[pos].name, tuple(label_categories))
    return attributes
