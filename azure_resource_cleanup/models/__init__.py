"""Data models for Azure CI cleanup."""

from .cleanup_action import CleanupAction, RESOURCE_GROUP, DNS_RECORD
from .config import Config

__all__ = ["CleanupAction", "Config", "RESOURCE_GROUP", "DNS_RECORD"]
