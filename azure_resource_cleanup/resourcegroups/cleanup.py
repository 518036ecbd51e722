"""Deletion of stale CI resource groups."""

from __future__ import annotations
from typing import Any

from azure.core.exceptions import AzureError, ResourceNotFoundError

from ..exceptions import FatalScanError
from ..models import CleanupAction, Config, RESOURCE_GROUP
from ..utils import compute_cutoff, format_rfc3339, get_logger
from .detection import group_has_activity, has_ci_prefix

logger = get_logger()


class ResourceGroupReaper:
    """Delete CI resource groups without activity since the grace period.

    A failed delete aborts the pass with FatalScanError. A failed activity
    query only skips the group.
    """

    def __init__(self, resource_client: Any, monitor_client: Any, config: Config):
        self.resource_client = resource_client
        self.monitor_client = monitor_client
        self.config = config

    def run(self) -> list[CleanupAction]:
        """Scan all resource groups once and delete the stale CI ones."""
        cutoff = compute_cutoff(self.config.grace_period)
        actions: list[CleanupAction] = []
        scanned = 0

        logger.info(
            "Scanning resource groups",
            extra={"cutoff": format_rfc3339(cutoff), "dry_run": self.config.dry_run},
        )

        try:
            for group in self.resource_client.resource_groups.list():
                scanned += 1
                action = self._process_group(group.name, cutoff)
                if action:
                    actions.append(action)
        except FatalScanError as e:
            e.actions = actions
            raise
        except AzureError as e:
            raise FatalScanError(
                f"Failed to list resource groups: {e}", actions=actions
            ) from e

        deleted = sum(1 for a in actions if a.action == "DELETE")
        logger.info(
            f"Resource group scan: {scanned} scanned, {deleted} deleted",
            extra={
                "scanned": scanned,
                "deleted": deleted,
                "dry_run": self.config.dry_run,
            },
        )
        return actions

    def _process_group(self, name: str, cutoff) -> CleanupAction | None:
        logger.debug("Checking resource group", extra={"resource_group": name})

        if not has_ci_prefix(name, self.config.ci_group_prefixes):
            return None

        try:
            active = group_has_activity(self.monitor_client, name, cutoff)
        except AzureError as e:
            logger.error(
                "Failed to query activity log, skipping resource group",
                extra={"resource_group": name, "error": str(e)},
            )
            return CleanupAction(
                resource_type=RESOURCE_GROUP,
                name=name,
                action="SKIP",
                reason="Activity log query failed",
                dry_run=self.config.dry_run,
                error=str(e),
            )

        if active:
            logger.debug(
                "Resource group has recent activity, keeping",
                extra={"resource_group": name},
            )
            return CleanupAction(
                resource_type=RESOURCE_GROUP,
                name=name,
                action="KEEP",
                reason=f"Activity since {format_rfc3339(cutoff)}",
                dry_run=self.config.dry_run,
            )

        self.delete_group(name)
        return CleanupAction(
            resource_type=RESOURCE_GROUP,
            name=name,
            action="DELETE",
            reason=f"No activity since {format_rfc3339(cutoff)}",
            dry_run=self.config.dry_run,
        )

    def delete_group(self, name: str) -> None:
        """Start deletion of a resource group; a missing group counts as deleted."""
        if self.config.dry_run:
            logger.info(
                "Would DELETE resource_group",
                extra={"dry_run": True, "resource_group": name},
            )
            return

        logger.info("DELETE resource_group", extra={"resource_group": name})
        try:
            # Deletion runs for minutes; the next pass picks up leftovers
            self.resource_client.resource_groups.begin_delete(name)
        except ResourceNotFoundError:
            logger.debug(
                "Resource group already gone", extra={"resource_group": name}
            )
            return
        except AzureError as e:
            logger.error(
                "Resource group deletion failed",
                extra={"resource_group": name, "error": str(e)},
            )
            raise FatalScanError(
                f"Failed to delete resource group {name}: {e}"
            ) from e

        logger.debug("Resource group deleted", extra={"resource_group": name})
