"""Deletion of orphaned CI records in the delegated DNS zone."""

from __future__ import annotations
from typing import Any

from azure.core.exceptions import AzureError
from azure.mgmt.dns.models import RecordType

from ..exceptions import FatalScanError, RecoverableScanError, ResolutionError
from ..models import CleanupAction, Config, DNS_RECORD
from ..utils import get_logger
from .detection import api_hostname, is_ci_record
from .resolver import ApiResolver

logger = get_logger()


class DNSRecordReaper:
    """Delete NS delegations of e2e clusters whose API no longer resolves.

    Unlike ResourceGroupReaper, a failed delete does not abort the pass:
    errors are collected and raised together as RecoverableScanError once
    every record has been processed.
    """

    def __init__(
        self,
        dns_client: Any,
        config: Config,
        resolver: ApiResolver | None = None,
    ):
        self.dns_client = dns_client
        self.config = config
        self.resolver = resolver or ApiResolver(
            config.dns_server_address, config.dns_resolver_retries
        )

    def run(self) -> list[CleanupAction]:
        """Scan the delegated zone once and delete the orphaned CI records."""
        actions: list[CleanupAction] = []
        errors: list[Exception] = []
        scanned = 0

        logger.info(
            "Scanning delegated DNS records",
            extra={
                "zone": self.config.dns_zone_name,
                "resource_group": self.config.dns_zone_resource_group,
                "dry_run": self.config.dry_run,
            },
        )

        try:
            records = self.dns_client.record_sets.list_by_type(
                resource_group_name=self.config.dns_zone_resource_group,
                zone_name=self.config.dns_zone_name,
                record_type=RecordType.NS,
            )
            for record in records:
                scanned += 1
                action = self._process_record(record, errors)
                if action:
                    actions.append(action)
        except AzureError as e:
            raise FatalScanError(
                f"Failed to list DNS records in {self.config.dns_zone_name}: {e}",
                actions=actions,
            ) from e

        deleted = sum(1 for a in actions if a.action == "DELETE")
        logger.info(
            f"DNS record scan: {scanned} scanned, {deleted} deleted, "
            f"{len(errors)} errors",
            extra={
                "scanned": scanned,
                "deleted": deleted,
                "errors": len(errors),
                "dry_run": self.config.dry_run,
            },
        )

        if errors:
            raise RecoverableScanError(
                f"{len(errors)} DNS record(s) could not be processed, "
                f"last error: {errors[-1]}",
                errors=errors,
                actions=actions,
            )
        return actions

    def is_ci_record(self, name: str) -> bool:
        """Check a record name against the configured e2e naming rules."""
        return is_ci_record(
            name, self.config.e2e_terraform_prefix, self.config.e2e_record_regions
        )

    def _process_record(
        self, record: Any, errors: list[Exception]
    ) -> CleanupAction | None:
        name = record.name
        if not self.is_ci_record(name):
            return None

        hostname = api_hostname(name, self.config.dns_zone_name)
        try:
            addresses = self.resolver.lookup_host(hostname)
        except ResolutionError as e:
            logger.warning(
                "Unexpected error resolving API hostname, keeping record",
                extra={"record_name": name, "hostname": hostname, "error": str(e)},
            )
            errors.append(e)
            return self._action(name, "SKIP", "Resolution failed", error=str(e))

        if addresses:
            logger.debug(
                "DNS record still resolves, keeping",
                extra={"record_name": name, "addresses": addresses},
            )
            return self._action(name, "KEEP", f"{hostname} resolves")

        logger.info("DNS record has to be deleted", extra={"record_name": name})
        try:
            self.delete_record(name, record.etag)
        except AzureError as e:
            logger.error(
                "Failed to delete DNS record, skipping",
                extra={"record_name": name, "error": str(e)},
            )
            errors.append(e)
            return self._action(name, "SKIP", "Deletion failed", error=str(e))

        return self._action(name, "DELETE", f"{hostname} does not resolve")

    def delete_record(self, name: str, etag: str | None) -> None:
        """Delete one NS record set, guarded by its etag."""
        if self.config.dry_run:
            logger.info(
                "Would DELETE dns_record",
                extra={
                    "dry_run": True,
                    "record_name": name,
                    "zone": self.config.dns_zone_name,
                },
            )
            return

        logger.info(
            "DELETE dns_record",
            extra={"record_name": name, "zone": self.config.dns_zone_name},
        )
        self.dns_client.record_sets.delete(
            resource_group_name=self.config.dns_zone_resource_group,
            zone_name=self.config.dns_zone_name,
            relative_record_set_name=name,
            record_type=RecordType.NS,
            if_match=etag,
        )
        logger.debug("DNS record deleted", extra={"record_name": name})

    def _action(
        self, name: str, action: str, reason: str, error: str | None = None
    ) -> CleanupAction:
        return CleanupAction(
            resource_type=DNS_RECORD,
            name=name,
            action=action,
            reason=reason,
            dry_run=self.config.dry_run,
            error=error,
        )
