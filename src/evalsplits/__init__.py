"""
Deterministic train/test split generation for model evaluation.

Supports:
- K-fold cross-validation (optionally stratified)
- Leave-one-out cross-validation
- Percentage-based random or order-preserving splits
- Views or copies of the selected rows
- Repeated runs with consecutive seeds
"""

from .errors import (
    SplitError,
    InvalidPolicyError,
    LabelRequiredError,
    ExhaustedError,
    ReadOnlyViolationError
)
from .dataset import Attribute, BaseDataset, Dataset, DatasetView, make_attributes
from .random_source import RandomSequenceSource
from .partitioner import fold_bounds, fold_sizes, split_ordering
from .stratifier import group_by_label, stratify
from .naming import create_relation_name
from .materialize import as_copy, as_view, materialize
from .policies import GeneratorConfig, KFoldPolicy, RandomSplitPolicy, SplitPolicy
from .base_generator import BaseSplitGenerator, TrainTestSplit, drain_splits
from .cv_generator import CrossValidationFoldGenerator
from .random_split_generator import RandomSplitGenerator
from .factory import make_split_generator
from .runs import SplitRun, SplitRunsGenerator, to_indexed_splits
from .statistics import get_split_statistics, label_distribution
from .config import SplitSettings, load_split_config, policy_from_dict, settings_from_dict

__all__ = [
    'SplitError',
    'InvalidPolicyError',
    'LabelRequiredError',
    'ExhaustedError',
    'ReadOnlyViolationError',
    'Attribute',
    'BaseDataset',
    'Dataset',
    'DatasetView',
    'make_attributes',
    'RandomSequenceSource',
    'fold_bounds',
    'fold_sizes',
    'split_ordering',
    'group_by_label',
    'stratify',
    'create_relation_name',
    'as_copy',
    'as_view',
    'materialize',
    'GeneratorConfig',
    'KFoldPolicy',
    'RandomSplitPolicy',
    'SplitPolicy',
    'BaseSplitGenerator',
    'TrainTestSplit',
    'drain_splits',
    'CrossValidationFoldGenerator',
    'RandomSplitGenerator',
    'make_split_generator',
    'SplitRun',
    'SplitRunsGenerator',
    'to_indexed_splits',
    'get_split_statistics',
    'label_distribution',
    'SplitSettings',
    'load_split_config',
    'policy_from_dict',
    'settings_from_dict'
]
