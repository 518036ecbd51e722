"""Utility functions for Azure CI cleanup."""

from .azure_helpers import (
    AzureClients,
    create_clients,
    compute_cutoff,
    format_rfc3339,
)
from .logging_config import get_logger

__all__ = [
    "AzureClients",
    "create_clients",
    "compute_cutoff",
    "format_rfc3339",
    "get_logger",
]
