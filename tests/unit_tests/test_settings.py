"""Tests for environment backed settings."""
import logging

from bifrost import BridgeConfig
from bifrost.logging_config import setup_logging
from bifrost.settings import BridgeSettings


def test_defaults(monkeypatch):
    monkeypatch.delenv("BIFROST_PROVIDER", raising=False)
    settings = BridgeSettings(_env_file=None)
    assert settings.provider == "s3"
    assert settings.region == "us-east-1"
    assert settings.default_timeout == 0
    assert settings.log_level == "INFO"


def test_reads_prefixed_environment(monkeypatch):
    monkeypatch.setenv("BIFROST_PROVIDER", "pinata")
    monkeypatch.setenv("BIFROST_PINATA_JWT", "jwt")
    monkeypatch.setenv("BIFROST_DEFAULT_TIMEOUT", "15")
    monkeypatch.setenv("BIFROST_PUBLIC_READ", "true")
    monkeypatch.setenv("BIFROST_LOG_LEVEL", "debug")

    settings = BridgeSettings(_env_file=None)

    assert settings.provider == "pinata"
    assert settings.pinata_jwt == "jwt"
    assert settings.default_timeout == 15
    assert settings.public_read is True
    assert settings.log_level == "DEBUG"


def test_to_bridge_config(monkeypatch):
    monkeypatch.setenv("BIFROST_PROVIDER", "gcs")
    monkeypatch.setenv("BIFROST_DEFAULT_BUCKET", "assets")
    monkeypatch.setenv("BIFROST_PROJECT", "rainbow")

    config = BridgeSettings(_env_file=None).to_bridge_config()

    assert isinstance(config, BridgeConfig)
    assert config.provider == "gcs"
    assert config.default_bucket == "assets"
    assert config.project == "rainbow"


def test_setup_logging_adds_single_handler():
    logger = setup_logging("debug", logger_name="bifrost.test")
    setup_logging("info", logger_name="bifrost.test")

    assert logger.level == logging.INFO
    assert len(logger.handlers) == 1
    logger.handlers.clear()
