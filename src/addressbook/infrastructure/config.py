"""Settings from environment (.env supported), Neo4j driver, repository and logging setup."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv
from neo4j import GraphDatabase

from addressbook.infrastructure.persistence.neo4j_repository import Neo4jAddressBookRepository

REPO_ROOT = Path(__file__).resolve().parents[3]

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@dataclass(frozen=True)
class Settings:
    neo4j_uri: str = "bolt://localhost:7687"
    neo4j_user: str = "neo4j"
    neo4j_password: str = "password"
    log_level: str = "INFO"
    default_region: str | None = None


def _load_dotenv() -> None:
    # First .env found wins: repo root, then working directory.
    for path in (REPO_ROOT / ".env", Path.cwd() / ".env"):
        if path.exists():
            load_dotenv(path)
            break


def load_settings(*, dotenv: bool = True) -> Settings:
    """Read settings from os.environ, after loading .env unless dotenv is False."""
    if dotenv:
        _load_dotenv()
    region = os.environ.get("ADDRESSBOOK_DEFAULT_REGION", "").strip().upper() or None
    return Settings(
        neo4j_uri=os.environ.get("NEO4J_URI", Settings.neo4j_uri).strip(),
        neo4j_user=os.environ.get("NEO4J_USER", Settings.neo4j_user).strip(),
        neo4j_password=os.environ.get("NEO4J_PASSWORD", Settings.neo4j_password).strip(),
        log_level=os.environ.get("ADDRESSBOOK_LOG_LEVEL", Settings.log_level).strip().upper(),
        default_region=region,
    )


def get_driver(settings: Settings):
    return GraphDatabase.driver(
        settings.neo4j_uri, auth=(settings.neo4j_user, settings.neo4j_password)
    )


def build_repository(settings: Settings, driver) -> Neo4jAddressBookRepository:
    """Neo4j repository using settings.default_region for mobiles without a country."""
    return Neo4jAddressBookRepository(driver, default_region=settings.default_region)


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        format=LOG_FORMAT,
        level=getattr(logging, level.upper(), logging.INFO),
    )
