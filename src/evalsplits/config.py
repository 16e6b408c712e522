"""
Split settings from dictionaries and YAML/JSON files.

Example YAML::

    policy:
      mode: kfold        # kfold, loo or random_split
      folds: 10
      stratify: true
    generator:
      seed: 1
      randomize: true
      use_view: false
      relation_template: "@-$T-$N"
    runs: 1
"""

from dataclasses import dataclass, fields
from typing import Any, Dict, Optional
import json
import logging

import yaml

from .errors import InvalidPolicyError
from .policies import GeneratorConfig, KFoldPolicy, RandomSplitPolicy, SplitPolicy

logger = logging.getLogger(__name__)

POLICY_MODES = ('kfold', 'loo', 'random_split')


@dataclass(frozen=True)
class SplitSettings:
    """Complete split setup of an evaluation."""
    policy: SplitPolicy
    config: GeneratorConfig
    runs: int = 1


def _check_keys(section: str, values: Dict[str, Any], allowed) -> None:
    unknown = sorted(set(values) - set(allowed))
    if unknown:
        raise InvalidPolicyError(f"Unknown {section} settings: {unknown}")


def policy_from_dict(values: Dict[str, Any]) -> SplitPolicy:
    """
    Build a split policy from a dictionary.

    Args:
        values: Dictionary with a 'mode' key and the policy fields

    Returns:
        KFoldPolicy or RandomSplitPolicy

    Raises:
        InvalidPolicyError: If the mode or a key is unknown
    """
    values = dict(values)
    mode = str(values.pop('mode', 'kfold')).lower()

    if mode == 'kfold':
        _check_keys('kfold', values, [f.name for f in fields(KFoldPolicy)])
        return KFoldPolicy(**values)
    if mode == 'loo':
        _check_keys('loo', values, ['stratify'])
        return KFoldPolicy(folds=-1, **values)
    if mode == 'random_split':
        _check_keys('random_split', values, [f.name for f in fields(RandomSplitPolicy)])
        return RandomSplitPolicy(**values)

    raise InvalidPolicyError(f"Unknown split mode: {mode}. Available: {list(POLICY_MODES)}")


def generator_config_from_dict(values: Optional[Dict[str, Any]]) -> GeneratorConfig:
    """Build a GeneratorConfig; missing keys keep their defaults."""
    values = dict(values or {})
    _check_keys('generator', values, [f.name for f in fields(GeneratorConfig)])
    return GeneratorConfig(**values)


def settings_from_dict(values: Dict[str, Any]) -> SplitSettings:
    """
    Build complete split settings.

    Args:
        values: Dictionary with 'policy', 'generator' and 'runs' sections

    Returns:
        SplitSettings
    """
    _check_keys('top-level', values, ['policy', 'generator', 'runs'])
    runs = int(values.get('runs', 1))
    if runs < 1:
        raise InvalidPolicyError(f"runs must be >= 1, got {runs}")
    return SplitSettings(
        policy=policy_from_dict(values.get('policy') or {}),
        config=generator_config_from_dict(values.get('generator')),
        runs=runs
    )


def load_split_config(config_path: str) -> SplitSettings:
    """
    Load split settings from a YAML/JSON config file.

    Args:
        config_path: Path to config file

    Returns:
        SplitSettings
    """
    with open(config_path, encoding='utf-8') as f:
        if config_path.endswith('.yaml') or config_path.endswith('.yml'):
            config_dict = yaml.safe_load(f)
        else:
            config_dict = json.load(f)

    settings = settings_from_dict(config_dict or {})
    logger.info(f"Loaded split settings from {config_path}: {settings.policy}, seed={settings.config.seed}")
    return settings
