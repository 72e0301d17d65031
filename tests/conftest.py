"""Shared fixtures: isolate configuration and log files per test."""

from __future__ import annotations

import pytest


@pytest.fixture(autouse=True)
def _isolated_home(tmp_path, monkeypatch):
    """Point SCHEMAST_HOME_DIR at a temp dir and reset the config singleton."""
    from schemast.config import get_config

    monkeypatch.setenv("SCHEMAST_HOME_DIR", str(tmp_path / "home"))
    monkeypatch.delenv("SCHEMAST_SCHEMA_DIR", raising=False)
    get_config.cache_clear()
    yield
    get_config.cache_clear()


USER_SCHEMA = '''\
"""User schema."""
from schemast import ent
from schemast.ent import field


class User(ent.Schema):
    # Fields of the user.
    def fields(self):
        return [
            field.String("name"),
            field.Int("age").optional(),  # years
        ]

    def edges(self):
        return None
'''


@pytest.fixture()
def user_source() -> str:
    return USER_SCHEMA


@pytest.fixture()
def schema_dir(tmp_path, user_source):
    """A schema package directory holding ``user.py``."""
    d = tmp_path / "schema"
    d.mkdir()
    (d / "user.py").write_text(user_source, encoding="utf-8")
    return d
