"""Unit tests for environment-driven settings."""

import os
from unittest.mock import patch

import pytest

from core import config, db


def test_defaults():
    with patch.dict(os.environ, {}, clear=True):
        assert config.db_pool_min_size() == 1
        assert config.db_pool_max_size() == 5
        assert config.db_command_timeout_s() == 30.0
        assert config.log_level() == "INFO"
        assert config.app_host() == "0.0.0.0"
        assert config.app_port() == 5000
        assert config.cors_allow_origins() == ["http://localhost:5173", "http://127.0.0.1:5173"]


def test_invalid_ints_fall_back_to_default():
    with patch.dict(os.environ, {"APP_PORT": "abc", "DB_POOL_MIN_SIZE": ""}, clear=True):
        assert config.app_port() == 5000
        assert config.db_pool_min_size() == 1


def test_pool_max_never_below_min():
    with patch.dict(os.environ, {"DB_POOL_MIN_SIZE": "8", "DB_POOL_MAX_SIZE": "2"}, clear=True):
        assert config.db_pool_max_size() == 8


def test_cors_origins_split_and_trimmed():
    with patch.dict(os.environ, {"CORS_ALLOW_ORIGINS": " https://a.example , ,https://b.example"}, clear=True):
        assert config.cors_allow_origins() == ["https://a.example", "https://b.example"]


def test_log_level_uppercased():
    with patch.dict(os.environ, {"LOG_LEVEL": "debug"}, clear=True):
        assert config.log_level() == "DEBUG"


def test_database_url_required():
    with patch.dict(os.environ, {}, clear=True):
        with pytest.raises(RuntimeError, match="DATABASE_URL"):
            db.database_url()


def test_database_url_strips_sslmode():
    url = "postgresql://u:p@localhost:5432/blog?sslmode=disable&application_name=api"
    with patch.dict(os.environ, {"DATABASE_URL": url}, clear=True):
        assert db.database_url() == "postgresql://u:p@localhost:5432/blog?application_name=api"


def test_database_url_without_query_unchanged():
    url = "postgresql://u:p@localhost:5432/blog"
    with patch.dict(os.environ, {"DATABASE_URL": url}, clear=True):
        assert db.database_url() == url


@pytest.mark.parametrize(
    ("tag", "expected"),
    [("DELETE 1", 1), ("UPDATE 0", 0), ("DELETE 12", 12), ("", 0), ("SELECT", 0)],
)
def test_affected_rows(tag, expected):
    assert db.affected_rows(tag) == expected
