"""CI record cleanup in the delegated DNS zone."""

from .detection import is_ci_record, api_hostname
from .resolver import ApiResolver
from .cleanup import DNSRecordReaper

__all__ = ["is_ci_record", "api_hostname", "ApiResolver", "DNSRecordReaper"]
