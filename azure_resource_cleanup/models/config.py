"""Configuration from environment variables."""

from __future__ import annotations
import datetime
import os
from dataclasses import dataclass

# Core configuration
DRY_RUN = os.environ.get("DRY_RUN", "true").lower() == "true"
AZURE_SUBSCRIPTION_ID = os.environ.get("AZURE_SUBSCRIPTION_ID", "")

# Cleanup toggles
RESOURCE_GROUP_CLEANUP_ENABLED = (
    os.environ.get("RESOURCE_GROUP_CLEANUP_ENABLED", "true").lower() == "true"
)
DNS_CLEANUP_ENABLED = os.environ.get("DNS_CLEANUP_ENABLED", "true").lower() == "true"

# Logging configuration
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()

# CI resources older than this without activity are deleted
GRACE_PERIOD = datetime.timedelta(minutes=90)

# Resource group naming used by CI pipelines
CI_GROUP_PREFIXES = ("ci-", "e2e")

# Delegated DNS zone holding e2e cluster records
DNS_ZONE_NAME = "azure.gigantic.io"
DNS_ZONE_RESOURCE_GROUP = "root_dns_zone_rg"
E2E_TERRAFORM_PREFIX = "e2eterraform"
E2E_RECORD_REGIONS = ("westeurope", "germanywestcentral")

# Public resolver used to probe cluster API hostnames
DNS_SERVER_ADDRESS = "8.8.8.8"
DNS_RESOLVER_RETRIES = 5


@dataclass(frozen=True)
class Config:
    """Immutable settings shared by the reapers."""

    dry_run: bool = DRY_RUN
    subscription_id: str = AZURE_SUBSCRIPTION_ID
    resource_group_cleanup_enabled: bool = RESOURCE_GROUP_CLEANUP_ENABLED
    dns_cleanup_enabled: bool = DNS_CLEANUP_ENABLED
    log_level: str = LOG_LEVEL
    grace_period: datetime.timedelta = GRACE_PERIOD
    ci_group_prefixes: tuple[str, ...] = CI_GROUP_PREFIXES
    dns_zone_name: str = DNS_ZONE_NAME
    dns_zone_resource_group: str = DNS_ZONE_RESOURCE_GROUP
    e2e_terraform_prefix: str = E2E_TERRAFORM_PREFIX
    e2e_record_regions: tuple[str, ...] = E2E_RECORD_REGIONS
    dns_server_address: str = DNS_SERVER_ADDRESS
    dns_resolver_retries: int = DNS_RESOLVER_RETRIES

    @classmethod
    def from_env(cls) -> Config:
        """Build a Config from the current environment."""
        return cls(
            dry_run=os.environ.get("DRY_RUN", "true").lower() == "true",
            subscription_id=os.environ.get("AZURE_SUBSCRIPTION_ID", ""),
            resource_group_cleanup_enabled=(
                os.environ.get("RESOURCE_GROUP_CLEANUP_ENABLED", "true").lower()
                == "true"
            ),
            dns_cleanup_enabled=(
                os.environ.get("DNS_CLEANUP_ENABLED", "true").lower() == "true"
            ),
            log_level=os.environ.get("LOG_LEVEL", "INFO").upper(),
        )
