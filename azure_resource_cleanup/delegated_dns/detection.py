"""Detection of CI records in the delegated DNS zone."""

from __future__ import annotations
import re
from typing import Iterable

from ..models.config import E2E_RECORD_REGIONS, E2E_TERRAFORM_PREFIX


def _region_pattern(regions: Iterable[str]) -> re.Pattern[str]:
    # Matches e.g. e2eabcd.westeurope
    alternatives = "|".join(re.escape(region) for region in regions)
    return re.compile(rf"^e2e.*\.({alternatives})$")


_DEFAULT_PATTERN = _region_pattern(E2E_RECORD_REGIONS)


def is_ci_record(
    name: str,
    prefix: str = E2E_TERRAFORM_PREFIX,
    regions: Iterable[str] | None = None,
) -> bool:
    """Check if a delegated DNS record was created by a CI pipeline."""
    if name.startswith(prefix):
        return True

    pattern = _DEFAULT_PATTERN if regions is None else _region_pattern(regions)
    return pattern.fullmatch(name) is not None


def api_hostname(record_name: str, zone_name: str) -> str:
    """Return the cluster API hostname served through a delegated record."""
    return f"api.{record_name}.{zone_name}"
