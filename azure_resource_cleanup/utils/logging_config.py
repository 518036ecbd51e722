"""Shared structured logger for the cleanup passes."""

import os

from aws_lambda_powertools import Logger

# LOG_LEVEL=DEBUG shows every resource group and record checked
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()

# One JSON line per event; per-item fields (resource_group, record_name,
# dry_run, error) go through extra= so they can be queried in
# Application Insights
logger = Logger(
    service="azure-resource-cleanup",
    level=LOG_LEVEL,
)


def get_logger():
    """Return the logger used by every cleanup module."""
    return logger
