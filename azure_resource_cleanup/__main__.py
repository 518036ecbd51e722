"""Run a single cleanup pass outside Azure Functions."""

import json
import sys

from .handler import run_cleanup
from .models import Config
from .utils import get_logger

logger = get_logger()


def main() -> int:
    config = Config.from_env()
    if not config.subscription_id:
        logger.error("AZURE_SUBSCRIPTION_ID is not set")
        return 2

    summary = run_cleanup(config)
    print(json.dumps(summary, indent=2))
    return 1 if summary["errors"] else 0


if __name__ == "__main__":
    sys.exit(main())
