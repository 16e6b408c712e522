"""
Repeated split runs and their index-only export.

Each run builds a fresh generator whose seed is ``config.seed + run - 1``,
so run ``r`` is reproducible on its own.
"""

from dataclasses import dataclass, field, replace
from typing import Any, Dict, Iterator, List, Optional
import logging

from .base_generator import TrainTestSplit
from .dataset import BaseDataset
from .errors import InvalidPolicyError
from .factory import make_split_generator
from .policies import GeneratorConfig, SplitPolicy

logger = logging.getLogger(__name__)

DATASET_NAME = "dataset.name"
DATASET_NUMINSTANCES = "dataset.num_instances"
DATASET_NUMATTRIBUTES = "dataset.num_attributes"
PREFIX_DATASET_ATTRIBUTE = "dataset.attribute."
SUFFIX_NAME = ".name"
SUFFIX_TYPE = ".type"


@dataclass
class SplitRun:
    """All splits of one run."""
    run: int
    seed: int
    splits: List[TrainTestSplit] = field(default_factory=list)

    @property
    def n_splits(self) -> int:
        """Number of splits in the run."""
        return len(self.splits)


class SplitRunsGenerator:
    """Runs a split policy several times with consecutive seeds."""

    def __init__(self, dataset: BaseDataset, policy: SplitPolicy,
                 config: Optional[GeneratorConfig] = None, num_runs: int = 1):
        """
        Initialize runs generator.

        Args:
            dataset: Full dataset
            policy: Split policy applied in every run
            config: Generator configuration; its seed is the seed of run 1
            num_runs: Number of runs

        Raises:
            InvalidPolicyError: If num_runs < 1
        """
        if num_runs < 1:
            raise InvalidPolicyError(f"num_runs must be >= 1, got {num_runs}")
        self.dataset = dataset
        self.policy = policy
        self.config = config if config is not None else GeneratorConfig()
        self.num_runs = num_runs

    def seed_for_run(self, run: int) -> int:
        """Seed of the 1-based ``run``."""
        return self.config.seed + run - 1

    def generate_runs(self) -> Iterator[SplitRun]:
        """
        Generate all runs.

        Yields:
            SplitRun with the drained splits of each run
        """
        for run in range(1, self.num_runs + 1):
            config = replace(self.config, seed=self.seed_for_run(run))
            generator = make_split_generator(self.dataset, self.policy, config)
            splits = generator.get_all_splits()
            logger.info(f"Run {run}/{self.num_runs} (seed={config.seed}): {len(splits)} splits")
            yield SplitRun(run=run, seed=config.seed, splits=splits)

    def get_all_runs(self) -> List[SplitRun]:
        """Get all runs as a list (non-generator version)."""
        return list(self.generate_runs())


def to_indexed_splits(dataset: BaseDataset, runs: List[SplitRun]) -> Dict[str, Any]:
    """
    Describe runs by original row indices only.

    Args:
        dataset: Dataset the runs were generated from
        runs: Generated runs

    Returns:
        JSON-serializable dictionary with dataset metadata and per-run folds
    """
    result: Dict[str, Any] = {
        DATASET_NAME: dataset.relation_name,
        DATASET_NUMINSTANCES: dataset.row_count(),
        DATASET_NUMATTRIBUTES: dataset.num_attributes()
    }
    for i, attribute in enumerate(dataset.attributes):
        result[f"{PREFIX_DATASET_ATTRIBUTE}{i}{SUFFIX_NAME}"] = attribute.name
        result[f"{PREFIX_DATASET_ATTRIBUTE}{i}{SUFFIX_TYPE}"] = attribute.type_name

    result['runs'] = [
        {
            'run': run.run,
            'seed': run.seed,
            'folds': [
                {
                    'fold': split.fold_number,
                    'train': list(split.train_original_indices),
                    'test': list(split.test_original_indices)
                }
                for split in run.splits
            ]
        }
        for run in runs
    ]
    return result
