"""CI resource group cleanup."""

from .detection import has_ci_prefix, build_activity_filter, group_has_activity
from .cleanup import ResourceGroupReaper

__all__ = [
    "has_ci_prefix",
    "build_activity_filter",
    "group_has_activity",
    "ResourceGroupReaper",
]
