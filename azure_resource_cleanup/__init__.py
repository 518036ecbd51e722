"""Azure CI resources cleanup: stale resource groups and delegated DNS records."""

from .handler import run_cleanup, main

__version__ = "1.0.0"
__description__ = "Automated cleanup of orphaned CI resources in Azure"

__all__ = ["run_cleanup", "main"]
