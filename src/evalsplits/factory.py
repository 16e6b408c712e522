"""
Build the split generator matching a split policy.
"""

from typing import Dict, Optional
import logging

from .base_generator import BaseSplitGenerator
from .cv_generator import CrossValidationFoldGenerator
from .dataset import BaseDataset
from .errors import InvalidPolicyError
from .policies import GeneratorConfig, KFoldPolicy, RandomSplitPolicy, SplitPolicy
from .random_split_generator import RandomSplitGenerator

logger = logging.getLogger(__name__)

GENERATORS: Dict[type, type] = {
    KFoldPolicy: CrossValidationFoldGenerator,
    RandomSplitPolicy: RandomSplitGenerator
}


def make_split_generator(dataset: BaseDataset, policy: SplitPolicy,
                         config: Optional[GeneratorConfig] = None) -> BaseSplitGenerator:
    """
    Create the generator for ``policy``.

    Args:
        dataset: Full dataset
        policy: KFoldPolicy or RandomSplitPolicy
        config: Generator configuration (uses default if None)

    Returns:
        Unstarted split generator

    Raises:
        InvalidPolicyError: If the policy type is unknown or cannot be applied
    """
    generator_cls = GENERATORS.get(type(policy))
    if generator_cls is None:
        raise InvalidPolicyError(
            f"Unknown split policy: {type(policy).__name__}. "
            f"Available: {[cls.__name__ for cls in GENERATORS]}"
        )

    generator = generator_cls(dataset, policy, config)
    logger.debug(f"Created {generator!r} for '{dataset.relation_name}'")
    return generator
