"""
Split policies and generator configuration.
"""

from dataclasses import dataclass
from typing import Any, Union

from .errors import InvalidPolicyError
from .naming import DEFAULT_TEMPLATE, normalize_template


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _check_bool(name: str, value: Any) -> None:
    if not isinstance(value, bool):
        raise InvalidPolicyError(f"{name} must be a bool, got {value!r}")


@dataclass(frozen=True)
class KFoldPolicy:
    """K-fold cross-validation; folds < 2 means leave-one-out."""
    folds: int = 10
    stratify: bool = True

    def __post_init__(self):
        """Validate policy."""
        if not _is_int(self.folds):
            raise InvalidPolicyError(f"folds must be an int, got {self.folds!r}")
        _check_bool('stratify', self.stratify)

    def is_leave_one_out(self) -> bool:
        """Whether the fold count degenerates to one fold per row."""
        return self.folds < 2

    def effective_folds(self, row_count: int) -> int:
        """Number of folds for a dataset with ``row_count`` rows."""
        return row_count if self.is_leave_one_out() else self.folds


@dataclass(frozen=True)
class RandomSplitPolicy:
    """Single percentage-based train/test split."""
    train_fraction: float = 0.66
    preserve_order: bool = False
    allow_empty: bool = False  # accept splits with an empty train or test side

    def __post_init__(self):
        """Validate fraction."""
        if isinstance(self.train_fraction, bool) or not isinstance(self.train_fraction, (int, float)):
            raise InvalidPolicyError(f"train_fraction must be a number, got {self.train_fraction!r}")
        if not 0.0 < self.train_fraction < 1.0:
            raise InvalidPolicyError(
                f"train_fraction must be in (0, 1), got {self.train_fraction}"
            )
        _check_bool('preserve_order', self.preserve_order)
        _check_bool('allow_empty', self.allow_empty)

    def train_size(self, row_count: int) -> int:
        """Number of training rows (rounded half up)."""
        return int(self.train_fraction * row_count + 0.5)


SplitPolicy = Union[KFoldPolicy, RandomSplitPolicy]


@dataclass(frozen=True)
class GeneratorConfig:
    """Settings shared by all split generators."""
    seed: int = 42
    randomize: bool = True
    use_view: bool = False
    relation_template: str = DEFAULT_TEMPLATE

    def __post_init__(self):
        """Validate settings and normalize template."""
        if not _is_int(self.seed):
            raise InvalidPolicyError(f"seed must be an int, got {self.seed!r}")
        _check_bool('randomize', self.randomize)
        _check_bool('use_view', self.use_view)
        if self.relation_template is not None and not isinstance(self.relation_template, str):
            raise InvalidPolicyError(
                f"relation_template must be a string, got {self.relation_template!r}"
            )
        object.__setattr__(self, 'relation_template', normalize_template(self.relation_template))
