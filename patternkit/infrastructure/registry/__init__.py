"""Infrastructure registry patterns."""

from .capability_registry import CapabilityRegistry, case_insensitive, tag_label

__all__ = [
    'CapabilityRegistry',
    'case_insensitive',
    'tag_label',
]
