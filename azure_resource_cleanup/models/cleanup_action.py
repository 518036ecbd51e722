"""CleanupAction data class."""

from __future__ import annotations
from dataclasses import dataclass, asdict
from typing import Any

RESOURCE_GROUP = "resource_group"
DNS_RECORD = "dns_record"


@dataclass
class CleanupAction:
    """Represents the decision taken for one CI resource."""

    resource_type: str  # resource_group | dns_record
    name: str
    action: str  # DELETE | KEEP | SKIP
    reason: str
    dry_run: bool = False
    error: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        data = asdict(self)
        if data["error"] is None:
            del data["error"]
        return data
