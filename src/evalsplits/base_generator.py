"""
Shared state machine of the train/test split generators.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Sequence, Tuple
import logging

import numpy as np

from .dataset import BaseDataset
from .errors import ExhaustedError, InvalidPolicyError
from .materialize import materialize
from .naming import create_relation_name
from .policies import GeneratorConfig
from .random_source import RandomSequenceSource

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TrainTestSplit:
    """One train/test pair produced by a split generator."""
    train: BaseDataset
    test: BaseDataset
    seed: int
    fold_number: int
    fold_count: int
    train_original_indices: List[int] = field(default_factory=list)
    test_original_indices: List[int] = field(default_factory=list)

    @property
    def n_train(self) -> int:
        """Number of training rows."""
        return len(self.train_original_indices)

    @property
    def n_test(self) -> int:
        """Number of test rows."""
        return len(self.test_original_indices)

    def get_summary(self) -> str:
        """Get human-readable summary."""
        return (f"Fold {self.fold_number}/{self.fold_count} (seed={self.seed}): "
                f"train={self.n_train}, test={self.n_test}")


class BaseSplitGenerator(ABC):
    """
    Lazy, single-use producer of TrainTestSplit records.

    The policy is validated when the generator is built. The base ordering is
    computed once, on the first call to ``next_split``. Every random draw of
    a generator comes from its own RandomSequenceSource.

    Not thread-safe: drain the generator with ``get_all_splits`` before handing
    the splits to parallel workers.
    """

    def __init__(self, dataset: BaseDataset, config: Optional[GeneratorConfig] = None):
        """
        Initialize split generator.

        Args:
            dataset: Source dataset; only read, never modified
            config: Generator configuration (uses default if None)

        Raises:
            InvalidPolicyError: If the dataset is empty
        """
        if config is None:
            config = GeneratorConfig()
        if dataset.row_count() == 0:
            raise InvalidPolicyError(f"Dataset '{dataset.relation_name}' has no rows")

        self.dataset = dataset
        self.config = config
        self._random: Optional[RandomSequenceSource] = None
        self._ordering: Optional[np.ndarray] = None
        self._current_fold = 1

    @abstractmethod
    def fold_count(self) -> int:
        """Number of splits this generator produces."""
        pass

    @abstractmethod
    def get_generator_name(self) -> str:
        """Return name of this generator."""
        pass

    @abstractmethod
    def _build_ordering(self, random: RandomSequenceSource) -> np.ndarray:
        """Compute the base ordering, drawing only from ``random``."""
        pass

    @abstractmethod
    def _split_indices(self, fold_number: int) -> Tuple[np.ndarray, np.ndarray]:
        """Train and test original indices of ``fold_number`` (1-based)."""
        pass

    @property
    def seed(self) -> int:
        """Seed of the random stream."""
        return self.config.seed

    @property
    def current_fold(self) -> int:
        """1-based number of the next fold to produce."""
        return self._current_fold

    @property
    def random_draws(self) -> int:
        """Draws consumed from the random stream so far."""
        return 0 if self._random is None else self._random.draws

    def is_initialized(self) -> bool:
        """Whether the base ordering has been computed."""
        return self._ordering is not None

    def is_exhausted(self) -> bool:
        """Whether all splits have been produced."""
        return self._current_fold > self.fold_count()

    def base_ordering(self) -> np.ndarray:
        """Copy of the base ordering, initializing the generator if needed."""
        self._ensure_initialized()
        return self._ordering.copy()

    def _ensure_initialized(self) -> None:
        if self._ordering is not None:
            return
        self._random = RandomSequenceSource(self.config.seed)
        self._ordering = self._build_ordering(self._random)
        logger.info(f"Initialized {self!r}: {self.dataset.row_count()} rows, "
                    f"{self._random.draws} draws consumed")

    def next_split(self) -> TrainTestSplit:
        """
        Produce the next train/test split.

        Returns:
            TrainTestSplit for the current fold

        Raises:
            ExhaustedError: If all splits have already been produced
        """
        if self.is_exhausted():
            raise ExhaustedError(
                f"No more folds available: all {self.fold_count()} splits were produced"
            )
        self._ensure_initialized()

        fold_number = self._current_fold
        train_idx, test_idx = self._split_indices(fold_number)
        train, test = self._materialize(train_idx, test_idx, fold_number)

        result = TrainTestSplit(
            train=train,
            test=test,
            seed=self.config.seed,
            fold_number=fold_number,
            fold_count=self.fold_count(),
            train_original_indices=train_idx.tolist(),
            test_original_indices=test_idx.tolist()
        )
        self._current_fold += 1

        logger.info(f"Generated fold {fold_number}/{self.fold_count()}: "
                    f"train={result.n_train}, test={result.n_test}")
        return result

    def _materialize(self, train_idx: np.ndarray, test_idx: np.ndarray,
                     fold_number: int) -> Tuple[BaseDataset, BaseDataset]:
        name = self.dataset.relation_name
        template = self.config.relation_template
        train = materialize(
            self.dataset, train_idx, self.config.use_view,
            relation_name=create_relation_name(template, name, True, fold_number)
        )
        test = materialize(
            self.dataset, test_idx, self.config.use_view,
            relation_name=create_relation_name(template, name, False, fold_number)
        )
        return train, test

    def get_all_splits(self) -> List[TrainTestSplit]:
        """
        Produce all remaining splits as a list.

        Returns:
            List of TrainTestSplit
        """
        return list(self)

    def __iter__(self) -> Iterator[TrainTestSplit]:
        return self

    def __next__(self) -> TrainTestSplit:
        if self.is_exhausted():
            raise StopIteration
        return self.next_split()

    def __repr__(self) -> str:
        return (f"{type(self).__name__}({self.get_generator_name()}, seed={self.config.seed}, "
                f"randomize={self.config.randomize}, folds={self.fold_count()}, "
                f"template={self.config.relation_template!r})")


def drain_splits(generators: Sequence[BaseSplitGenerator]) -> List[TrainTestSplit]:
    """Drain several generators sequentially into one list."""
    splits: List[TrainTestSplit] = []
    for generator in generators:
        splits.extend(generator.get_all_splits())
    return splits
