"""Main entry point for Azure CI resources cleanup."""

from __future__ import annotations
import time
from typing import Any

import azure.functions as func
from azure.core.exceptions import AzureError

from .delegated_dns import DNSRecordReaper
from .exceptions import CleanupError, FatalScanError, RecoverableScanError
from .models import CleanupAction, Config
from .resourcegroups import ResourceGroupReaper
from .utils import AzureClients, create_clients, get_logger

logger = get_logger()


def _run_reaper(
    label: str, reaper: Any, actions: list[CleanupAction], errors: list[str]
) -> None:
    """Run one reaper, collecting its actions and errors."""
    start_time = time.time()
    try:
        actions.extend(reaper.run())
    except RecoverableScanError as e:
        actions.extend(e.actions)
        errors.append(f"{label}: {e}")
        logger.error(f"{label} cleanup completed with errors: {e}")
    except FatalScanError as e:
        # Items handled before the abort were still deleted
        actions.extend(e.actions)
        errors.append(f"{label}: {e}")
        logger.error(f"{label} cleanup aborted: {e}")
    except (CleanupError, AzureError) as e:
        errors.append(f"{label}: {e}")
        logger.error(f"{label} cleanup failed: {e}")
    logger.info(f"{label} cleanup finished in {time.time() - start_time:.1f}s")


def run_cleanup(
    config: Config | None = None, clients: AzureClients | None = None
) -> dict[str, Any]:
    """Run every enabled reaper once and return a summary of the pass."""
    config = config or Config.from_env()
    logger.info(f"Starting Azure CI resources cleanup (DRY_RUN={config.dry_run})")

    if clients is None:
        clients = create_clients(config.subscription_id)

    actions: list[CleanupAction] = []
    errors: list[str] = []

    if config.resource_group_cleanup_enabled:
        reaper = ResourceGroupReaper(clients.resource, clients.monitor, config)
        _run_reaper("Resource group", reaper, actions, errors)
    else:
        logger.info("Resource group cleanup disabled")

    if config.dns_cleanup_enabled:
        _run_reaper("DNS record", DNSRecordReaper(clients.dns, config), actions, errors)
    else:
        logger.info("DNS record cleanup disabled")

    action_counts: dict[str, int] = {}
    for action in actions:
        action_counts[action.action] = action_counts.get(action.action, 0) + 1

    logger.info(f"Cleanup complete: {len(actions)} actions, {len(errors)} errors")
    for action_type, count in action_counts.items():
        logger.info(f"  {action_type}: {count}")

    return {
        "dry_run": config.dry_run,
        "total_actions": len(actions),
        "by_action": action_counts,
        "actions": [action.to_dict() for action in actions],
        "errors": errors,
    }


def main(mytimer: func.TimerRequest) -> None:
    """Azure Functions timer trigger."""
    if mytimer.past_due:
        logger.info("Timer is past due")

    config = Config.from_env()
    if not config.subscription_id:
        logger.error("AZURE_SUBSCRIPTION_ID is not set")
        return

    summary = run_cleanup(config)
    if summary["errors"]:
        # Failing the invocation makes the next timer run retry
        raise CleanupError("; ".join(summary["errors"]))
