"""
Percentage-based single train/test split generator.
"""

from typing import Optional, Tuple
import logging

import numpy as np

from .base_generator import BaseSplitGenerator
from .dataset import BaseDataset
from .errors import InvalidPolicyError
from .policies import GeneratorConfig, RandomSplitPolicy
from .random_source import RandomSequenceSource

logger = logging.getLogger(__name__)


class RandomSplitGenerator(BaseSplitGenerator):
    """
    Generates one train/test split from a training fraction.

    The first ``round(train_fraction * row_count)`` rows of the base ordering
    (rounded half up) form the training set, the rest the test set. The
    ordering is shuffled (``row_count - 1`` draws) only when ``randomize`` is
    set and ``preserve_order`` is not.
    """

    def __init__(self, dataset: BaseDataset, policy: Optional[RandomSplitPolicy] = None,
                 config: Optional[GeneratorConfig] = None):
        """
        Initialize random split generator.

        Args:
            dataset: Full dataset
            policy: Random split policy (uses default if None)
            config: Generator configuration (uses default if None)

        Raises:
            InvalidPolicyError: If either side of the split would be empty and
                the policy does not allow it
        """
        super().__init__(dataset, config)
        if policy is None:
            policy = RandomSplitPolicy()

        row_count = dataset.row_count()
        train_size = policy.train_size(row_count)
        if not policy.allow_empty and (train_size == 0 or train_size == row_count):
            raise InvalidPolicyError(
                f"train_fraction={policy.train_fraction} on {row_count} rows gives "
                f"train={train_size}, test={row_count - train_size}; both sides need at least one row"
            )

        self.policy = policy
        self._train_size = train_size

    def fold_count(self) -> int:
        return 1

    def get_generator_name(self) -> str:
        return "ordered-split" if self.preserves_order() else "random-split"

    def preserves_order(self) -> bool:
        """Whether the rows keep their original order."""
        return self.policy.preserve_order or not self.config.randomize

    @property
    def train_size(self) -> int:
        """Number of training rows."""
        return self._train_size

    def _build_ordering(self, random: RandomSequenceSource) -> np.ndarray:
        identity = np.arange(self.dataset.row_count(), dtype=np.int64)
        if self.preserves_order():
            return identity
        # row_count - 1 draws
        return random.shuffle(identity)

    def _split_indices(self, fold_number: int) -> Tuple[np.ndarray, np.ndarray]:
        train = self._ordering[:self._train_size].copy()
        test = self._ordering[self._train_size:].copy()
        return train, test
