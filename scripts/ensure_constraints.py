#!/usr/bin/env python3
"""Create the Neo4j constraints and indexes the address book relies on.

Unique Contact.id and Business.id, index on Contact.nin (NIN lookups on register).
Run from repo root with .env (NEO4J_URI, NEO4J_USER, NEO4J_PASSWORD).
Idempotent.
"""
import logging
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(REPO_ROOT / "src"))

from addressbook.infrastructure import (  # noqa: E402
    configure_logging,
    ensure_constraints,
    get_driver,
    load_settings,
)

logger = logging.getLogger(__name__)


def main() -> int:
    settings = load_settings()
    configure_logging(settings.log_level)
    driver = get_driver(settings)
    try:
        ensure_constraints(driver)
        logger.info("Constraints ensured on %s", settings.neo4j_uri)
        print(f"Constraints and indexes ensured on {settings.neo4j_uri}")
        return 0
    finally:
        driver.close()


if __name__ == "__main__":
    sys.exit(main())
