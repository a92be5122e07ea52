"""Shared test fixtures."""
import pytest
from unittest.mock import MagicMock


@pytest.fixture(autouse=True)
def env_vars(monkeypatch):
    """Set required environment variables for all tests."""
    monkeypatch.setenv("AWS_REGION", "us-east-1")
    monkeypatch.setenv("ACCOUNT_NAME", "TestAccount")
    monkeypatch.setenv("SLACK_WEBHOOK_URL", "https://hooks.slack.com/test")
    monkeypatch.setenv("IGNORED_RULES", "sandbox-*")
    monkeypatch.delenv("AWS_DEFAULT_REGION", raising=False)
    monkeypatch.delenv("ENABLE_METRICS", raising=False)


@pytest.fixture
def config():
    """Create a Config instance with test env vars."""
    from config_rule_status.config import Config
    return Config()


@pytest.fixture
def cs_client():
    """A stand-in for a boto3 config client."""
    return MagicMock()


@pytest.fixture
def utils(cs_client):
    """ConfigServiceUtils bound to the mock client."""
    from config_rule_status.config_service import ConfigServiceUtils
    return ConfigServiceUtils(cs_client, region="us-east-1")
