"""Exceptions raised by the cleanup passes."""

from __future__ import annotations
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .models import CleanupAction


class CleanupError(Exception):
    """Base class for cleanup failures."""


class FatalScanError(CleanupError):
    """A scan pass was aborted before all items were processed.

    Attributes:
        actions: Decisions taken before the pass was aborted
    """

    def __init__(self, message: str, actions: list[CleanupAction] | None = None):
        super().__init__(message)
        self.actions = actions or []


class RecoverableScanError(CleanupError):
    """A scan pass completed but some items could not be processed.

    Attributes:
        errors: Every per-item error seen during the pass, in order
        actions: Decisions taken during the pass, including the failed items
    """

    def __init__(
        self,
        message: str,
        errors: list[Exception],
        actions: list[CleanupAction] | None = None,
    ):
        super().__init__(message)
        self.errors = errors
        self.actions = actions or []

    @property
    def last_error(self) -> Exception | None:
        return self.errors[-1] if self.errors else None


class ResolutionError(CleanupError):
    """A hostname lookup failed for a reason other than SERVFAIL."""
