"""
K-fold and leave-one-out cross-validation fold generator.
"""

from typing import Optional, Tuple
import logging

import numpy as np

from .base_generator import BaseSplitGenerator
from .dataset import BaseDataset
from .errors import InvalidPolicyError, LabelRequiredError
from .partitioner import split_ordering
from .policies import GeneratorConfig, KFoldPolicy
from .random_source import RandomSequenceSource
from .stratifier import stratify

logger = logging.getLogger(__name__)


class CrossValidationFoldGenerator(BaseSplitGenerator):
    """
    Generates the train/test pairs of a (stratified) k-fold cross-validation.

    Initialization draws from one RandomSequenceSource in this order:

    1. One full shuffle of the row indices (``row_count - 1`` draws). With
       ``randomize`` the result becomes the base ordering, without it the
       shuffle is replayed on a copy and discarded. Either way the stream is
       left in the state of a single up-front shuffle.
    2. Stratification of the (possibly shuffled) ordering, no draws.

    Each fold then reshuffles its training rows from the same stream
    (``n_train - 1`` draws). Test rows keep their partition order.
    """

    def __init__(self, dataset: BaseDataset, policy: Optional[KFoldPolicy] = None,
                 config: Optional[GeneratorConfig] = None):
        """
        Initialize fold generator.

        Args:
            dataset: Full dataset
            policy: K-fold policy; folds < 2 means leave-one-out (uses default if None)
            config: Generator configuration (uses default if None)

        Raises:
            InvalidPolicyError: If there are fewer than two folds or fewer rows than folds
            LabelRequiredError: If stratification applies but there is no label column
        """
        super().__init__(dataset, config)
        if policy is None:
            policy = KFoldPolicy()

        row_count = dataset.row_count()
        num_folds = policy.effective_folds(row_count)
        if num_folds < 2:
            raise InvalidPolicyError(
                f"Number of folds must be at least 2, got {num_folds} for {row_count} rows"
            )
        if row_count < num_folds:
            raise InvalidPolicyError(
                f"Cannot have less data than folds: required={num_folds}, provided={row_count}"
            )

        # leave-one-out folds hold a single row each, nothing to stratify
        wants_stratify = policy.stratify and num_folds < row_count
        if wants_stratify and dataset.label_column_index() is None:
            raise LabelRequiredError(
                f"Stratification requested but dataset '{dataset.relation_name}' has no label column"
            )

        self.policy = policy
        self._num_folds = num_folds
        self._stratify = wants_stratify and dataset.label_is_categorical()

        if wants_stratify and not self._stratify:
            logger.warning(f"Label of '{dataset.relation_name}' is numeric, "
                           "falling back to non-stratified folds")

    def fold_count(self) -> int:
        return self._num_folds

    def get_generator_name(self) -> str:
        if self._num_folds == self.dataset.row_count():
            return "leave-one-out"
        return "stratified-kfold" if self._stratify else "kfold"

    def is_stratified(self) -> bool:
        """Whether folds are built from a stratified ordering."""
        return self._stratify

    def _build_ordering(self, random: RandomSequenceSource) -> np.ndarray:
        identity = np.arange(self.dataset.row_count(), dtype=np.int64)

        # row_count - 1 draws in both branches
        if self.config.randomize:
            ordering = random.shuffle(identity)
        else:
            random.replay_shuffle(identity)
            ordering = identity

        if self._stratify:
            ordering = stratify(ordering, self.dataset.label_values(), self._num_folds)

        return ordering

    def _split_indices(self, fold_number: int) -> Tuple[np.ndarray, np.ndarray]:
        train, test = split_ordering(self._ordering, self._num_folds, fold_number - 1)
        # n_train - 1 draws
        train = self._random.shuffle(train)
        return train, test
