"""
Unit tests for environment-driven configuration
"""
import json
import logging

import pytest

from app.config.loader import ConfigLoader
from app.config.settings import Environment, S3Settings, Settings, parse_environment
from app.core.logging import JsonFormatter


@pytest.fixture
def clean_env(monkeypatch):
    for name in (
        "ENVIRONMENT", "NODE_ENV", "APP_VERSION", "npm_package_version",
        "S3_BUCKET_URL", "NEXT_PUBLIC_S3_BUCKET_URL",
    ):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_defaults(clean_env):
    settings = Settings(_env_file=None)

    assert settings.app_name == "meo-stationery"
    assert settings.app_version == "1.0.0"
    assert settings.environment == Environment.DEVELOPMENT
    assert settings.monitoring.slow_request_threshold_ms == 1000
    assert settings.s3.placeholder_image_url == "/placeholder.jpg"


def test_node_style_variables(clean_env):
    clean_env.setenv("NODE_ENV", "production")
    clean_env.setenv("npm_package_version", "3.1.0")

    settings = Settings(_env_file=None)

    assert settings.node_env == "production"
    assert settings.reported_environment == "production"
    assert settings.app_version == "3.1.0"


def test_environment_test_maps_to_testing(clean_env):
    clean_env.setenv("ENVIRONMENT", "test")

    assert Settings(_env_file=None).environment == Environment.TESTING


@pytest.mark.parametrize("value", ["test", "qa"])
def test_node_env_is_reported_verbatim(clean_env, value):
    clean_env.setenv("NODE_ENV", value)

    settings = Settings(_env_file=None)

    assert settings.environment == Environment.DEVELOPMENT
    assert settings.reported_environment == value


def test_reported_environment_falls_back_to_deployment_environment(clean_env):
    clean_env.setenv("ENVIRONMENT", "staging")
    clean_env.setenv("NODE_ENV", "")

    settings = Settings(_env_file=None)

    assert settings.node_env is None
    assert settings.reported_environment == "staging"


def test_loader_ignores_node_env_when_choosing_config(clean_env, tmp_path):
    clean_env.chdir(tmp_path)
    clean_env.setenv("NODE_ENV", "qa")

    settings = ConfigLoader.load_environment_config()

    assert settings.environment == Environment.DEVELOPMENT
    assert settings.reported_environment == "qa"


def test_bucket_url_prefers_server_variable(clean_env):
    clean_env.setenv("NEXT_PUBLIC_S3_BUCKET_URL", "https://public.example.com")
    assert S3Settings(_env_file=None).bucket_url == "https://public.example.com"

    clean_env.setenv("S3_BUCKET_URL", "https://private.example.com")
    assert S3Settings(_env_file=None).bucket_url == "https://private.example.com"


def test_blank_bucket_url_is_unset(clean_env):
    clean_env.setenv("S3_BUCKET_URL", "  ")

    assert S3Settings(_env_file=None).bucket_url is None


def test_parse_environment():
    assert parse_environment("Staging") == Environment.STAGING
    with pytest.raises(ValueError):
        parse_environment("moon")


def test_json_formatter_includes_extra_fields():
    record = logging.LogRecord("app.test", logging.WARNING, __file__, 1, "slow %s", ("/api/health",), None)
    record.request_id = "req-1"

    payload = json.loads(JsonFormatter().format(record))

    assert payload["level"] == "WARNING"
    assert payload["message"] == "slow /api/health"
    assert payload["request_id"] == "req-1"
    assert "args" not in payload
