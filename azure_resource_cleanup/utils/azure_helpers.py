"""Azure helper functions."""

from __future__ import annotations
import datetime
from dataclasses import dataclass
from typing import Any

from azure.identity import DefaultAzureCredential
from azure.mgmt.dns import DnsManagementClient
from azure.mgmt.monitor import MonitorManagementClient
from azure.mgmt.resource import ResourceManagementClient


@dataclass
class AzureClients:
    """Management clients used by the reapers."""

    resource: ResourceManagementClient
    monitor: MonitorManagementClient
    dns: DnsManagementClient


def create_clients(subscription_id: str, credential: Any = None) -> AzureClients:
    """Create management clients for a subscription.

    Falls back to DefaultAzureCredential, which picks up managed identity in
    Azure Functions and environment or CLI credentials elsewhere.
    """
    if credential is None:
        credential = DefaultAzureCredential()
    return AzureClients(
        resource=ResourceManagementClient(credential, subscription_id),
        monitor=MonitorManagementClient(credential, subscription_id),
        dns=DnsManagementClient(credential, subscription_id),
    )


def compute_cutoff(
    grace_period: datetime.timedelta, now: datetime.datetime | None = None
) -> datetime.datetime:
    """Return the UTC instant before which CI resources count as stale."""
    if now is None:
        now = datetime.datetime.now(datetime.timezone.utc)
    return (now - grace_period).astimezone(datetime.timezone.utc)


def format_rfc3339(moment: datetime.datetime) -> str:
    """Format an aware datetime as RFC3339 in UTC with a trailing Z.

    Fractional seconds are kept when present and omitted otherwise.
    """
    utc = moment.astimezone(datetime.timezone.utc)
    return utc.isoformat().replace("+00:00", "Z")
