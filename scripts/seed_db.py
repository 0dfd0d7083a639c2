#!/usr/bin/env python3
"""
Seed the product catalog.

Deletes every product and inserts the fixed Meo Stationery catalog.
Exits with status 1 if any step fails.
"""
import argparse
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from app.config.loader import load_config_for_environment
from app.core.db import Database
from app.core.logging import configure_logging
from app.services.seed_service import run_seed


def main() -> int:
    parser = argparse.ArgumentParser(description="Seed the Meo Stationery product catalog")
    parser.add_argument(
        "--env",
        choices=["development", "staging", "production", "testing"],
        default=None,
        help="Environment configuration to load"
    )
    parser.add_argument(
        "--database-url",
        default=None,
        help="Database URL (overrides DATABASE_URL)"
    )
    args = parser.parse_args()

    settings = load_config_for_environment(args.env)
    configure_logging(settings.log_level.value, settings.log_format)

    database = Database(args.database_url or settings.database_url)
    return run_seed(database)


if __name__ == "__main__":
    sys.exit(main())
