"""
Configuration and startup behaviour.
"""
from dataclasses import replace
from unittest.mock import patch

import pytest

from observer import database
from observer.__main__ import main
from observer.config import _env_bool
from observer.services.errors import ConnectionFailure


def test_missing_database_url_fails_fast(monkeypatch):
    monkeypatch.setattr(database, "settings", replace(database.settings, database_url=""))

    with pytest.raises(ConnectionFailure, match="OBSERVER_DATABASE_URL"):
        database.init_db()
    with pytest.raises(ConnectionFailure):
        database.init_db("   ")


def test_unreachable_database_fails_fast(tmp_path):
    url = f"sqlite:///{tmp_path / 'missing' / 'dir' / 'observer.db'}"

    with pytest.raises(ConnectionFailure):
        database.init_db(url)


def test_session_scope_requires_init():
    database.close_db()

    with pytest.raises(ConnectionFailure):
        with database.session_scope():
            pass


def test_postgres_urls_use_psycopg_driver():
    assert (
        database._build_database_url("postgresql://u:p@db/observer")
        == "postgresql+psycopg://u:p@db/observer"
    )
    assert database._build_database_url("sqlite:///x.db") == "sqlite:///x.db"


def test_env_bool(monkeypatch):
    monkeypatch.setenv("OBSERVER_TEST_FLAG", "Yes")
    assert _env_bool("OBSERVER_TEST_FLAG") is True
    monkeypatch.setenv("OBSERVER_TEST_FLAG", "0")
    assert _env_bool("OBSERVER_TEST_FLAG", True) is False
    monkeypatch.delenv("OBSERVER_TEST_FLAG")
    assert _env_bool("OBSERVER_TEST_FLAG", True) is True


def test_main_exits_when_database_is_missing(caplog):
    with patch(
        "observer.__main__.init_db", side_effect=ConnectionFailure("missing")
    ), patch("observer.__main__.uvicorn.run") as run:
        with pytest.raises(SystemExit) as excinfo:
            main()

    assert excinfo.value.code == 1
    run.assert_not_called()
    assert [(r.name, r.levelname) for r in caplog.records if r.message == "missing"] == [
        ("observer.__main__", "CRITICAL")
    ]


def test_main_serves_on_configured_address():
    with patch("observer.__main__.init_db"), patch("observer.__main__.uvicorn.run") as run:
        main()

    _, kwargs = run.call_args
    assert kwargs["host"] == database.settings.host
    assert kwargs["port"] == database.settings.port
