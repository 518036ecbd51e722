"""Resource group detection: CI naming and recent activity."""

from __future__ import annotations
import datetime
from typing import Any, Iterable

from ..utils import format_rfc3339


def has_ci_prefix(name: str, prefixes: Iterable[str]) -> bool:
    """Check if resource group name was created by a CI pipeline."""
    return any(name.startswith(prefix) for prefix in prefixes)


def build_activity_filter(group_name: str, since: datetime.datetime) -> str:
    """Build the activity log OData filter for one resource group."""
    return (
        f"eventTimestamp ge '{format_rfc3339(since)}' "
        f"and resourceGroupName eq '{group_name}'"
    )


def group_has_activity(
    monitor_client: Any, group_name: str, since: datetime.datetime
) -> bool:
    """Check if a resource group had any activity log event since a given time.

    Only the first page is fetched: one event is enough to keep the group.
    Raises AzureError if the query fails.
    """
    events = monitor_client.activity_logs.list(
        filter=build_activity_filter(group_name, since)
    )
    return next(iter(events), None) is not None
