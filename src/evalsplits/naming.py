"""
Relation name templates for generated train/test datasets.

Placeholders:
    @   original relation name
    $T  "train" or "test"
    $N  current fold number

There is no escaping: a template cannot contain a literal "@", "$T" or "$N".
"""

from typing import Optional

PLACEHOLDER_ORIGINAL = '@'
PLACEHOLDER_TYPE = '$T'
PLACEHOLDER_FOLD = '$N'

DEFAULT_TEMPLATE = PLACEHOLDER_ORIGINAL


def normalize_template(template: Optional[str]) -> str:
    """Fall back to the original name when no template is given."""
    if not template:
        return DEFAULT_TEMPLATE
    return template


def create_relation_name(template: Optional[str], original_name: str,
                         is_train: bool, fold_number: int) -> str:
    """
    Expand a relation name template.

    Args:
        template: Template string; empty or None means "@"
        original_name: Relation name of the source dataset
        is_train: Whether the name is for the training set
        fold_number: 1-based fold number

    Returns:
        Expanded name
    """
    remaining = normalize_template(template)
    parts = []

    while remaining:
        if remaining.startswith(PLACEHOLDER_ORIGINAL):
            parts.append(original_name)
            remaining = remaining[len(PLACEHOLDER_ORIGINAL):]
        elif remaining.startswith(PLACEHOLDER_TYPE):
            parts.append('train' if is_train else 'test')
            remaining = remaining[len(PLACEHOLDER_TYPE):]
        elif remaining.startswith(PLACEHOLDER_FOLD):
            parts.append(str(fold_number))
            remaining = remaining[len(PLACEHOLDER_FOLD):]
        else:
            parts.append(remaining[0])
            remaining = remaining[1:]

    return ''.join(parts)
