"""Tests for settings loading and logging setup."""

import logging

from addressbook.domain import ContactData
from addressbook.infrastructure import (
    Neo4jAddressBookRepository,
    Settings,
    build_repository,
    configure_logging,
    load_settings,
)

_ENV_VARS = (
    "NEO4J_URI",
    "NEO4J_USER",
    "NEO4J_PASSWORD",
    "ADDRESSBOOK_LOG_LEVEL",
    "ADDRESSBOOK_DEFAULT_REGION",
)


def test_defaults_when_env_empty(monkeypatch):
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    assert load_settings(dotenv=False) == Settings()


def test_reads_and_strips_env(monkeypatch):
    monkeypatch.setenv("NEO4J_URI", " bolt://db:7687 ")
    monkeypatch.setenv("NEO4J_USER", "admin")
    monkeypatch.setenv("NEO4J_PASSWORD", "secret")
    monkeypatch.setenv("ADDRESSBOOK_LOG_LEVEL", "debug")
    monkeypatch.setenv("ADDRESSBOOK_DEFAULT_REGION", "ar")

    settings = load_settings(dotenv=False)
    assert settings.neo4j_uri == "bolt://db:7687"
    assert settings.neo4j_user == "admin"
    assert settings.neo4j_password == "secret"
    assert settings.log_level == "DEBUG"
    assert settings.default_region == "AR"


def test_blank_default_region_is_none(monkeypatch):
    monkeypatch.setenv("ADDRESSBOOK_DEFAULT_REGION", "  ")
    assert load_settings(dotenv=False).default_region is None


def test_dotenv_file_in_cwd_is_loaded(monkeypatch, tmp_path):
    # setenv first so teardown removes whatever load_dotenv writes.
    monkeypatch.setenv("NEO4J_USER", "placeholder")
    monkeypatch.delenv("NEO4J_USER")
    monkeypatch.setattr("addressbook.infrastructure.config.REPO_ROOT", tmp_path / "nowhere")
    (tmp_path / ".env").write_text("NEO4J_USER=from_dotenv\n")
    monkeypatch.chdir(tmp_path)

    assert load_settings().neo4j_user == "from_dotenv"


def test_configure_logging_passes_level_and_format(monkeypatch):
    calls = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))

    configure_logging("debug")
    configure_logging("NOT_A_LEVEL")

    assert calls[0]["level"] == logging.DEBUG
    assert calls[1]["level"] == logging.INFO
    assert "%(levelname)s" in calls[0]["format"]


class _RecordingResult:
    def consume(self):
        return None


class _RecordingSession:
    def __init__(self, calls):
        self._calls = calls

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False

    def run(self, query, **params):
        self._calls.append(params)
        return _RecordingResult()


class _RecordingDriver:
    def __init__(self):
        self.calls = []

    def session(self):
        return _RecordingSession(self.calls)


def test_build_repository_applies_default_region():
    driver = _RecordingDriver()
    repo = build_repository(Settings(default_region="IT"), driver)
    assert isinstance(repo, Neo4jAddressBookRepository)

    repo.create_contact(ContactData(firstname="Ann", mobile="312 345 6789"))
    repo.create_contact(ContactData(firstname="Bob", mobile="202 555 1234", mobile_country="US"))

    assert driver.calls[0]["props"]["mobile_e164"] == "+393123456789"
    assert driver.calls[1]["props"]["mobile_e164"] == "+12025551234"


def test_build_repository_without_default_region_skips_e164():
    driver = _RecordingDriver()
    repo = build_repository(Settings(), driver)

    repo.create_contact(ContactData(firstname="Ann", mobile="312 345 6789"))

    assert "mobile_e164" not in driver.calls[0]["props"]
