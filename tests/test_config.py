"""Tests for config module."""
import pytest
from unittest.mock import patch

from config_rule_status.config import Config, current_region, safe_get, is_ignored


class TestConfig:
    def test_region_from_env(self, config):
        assert config.region == "us-east-1"

    def test_account_name(self, config):
        assert config.account_name == "TestAccount"

    def test_webhook_optional(self, monkeypatch):
        monkeypatch.delenv("SLACK_WEBHOOK_URL")
        assert Config().slack_webhook_url is None

    def test_ignored_rules_parsing(self, monkeypatch):
        monkeypatch.setenv("IGNORED_RULES", " sandbox-*, legacy-rule ,")
        assert Config().ignored_rules == ["sandbox-*", "legacy-rule"]

    def test_check_flags_default_on(self, config):
        assert config.enable_recorder_check is True
        assert config.enable_rule_state_check is True
        assert config.enable_compliance_check is True
        assert config.enable_staleness_check is True
        assert config.enable_metrics is False

    def test_check_flag_disabled(self, monkeypatch):
        monkeypatch.setenv("ENABLE_STALENESS_CHECK", "False")
        assert Config().enable_staleness_check is False

    def test_settings_defaults(self, config):
        assert config.stale_after_hours == 24
        assert config.max_retries == 3
        assert config.retry_delay == 2
        assert config.rate_limit == 30
        assert config.max_message_length == 3000


class TestCurrentRegion:
    def test_aws_region_wins(self, monkeypatch):
        monkeypatch.setenv("AWS_DEFAULT_REGION", "eu-west-1")
        assert current_region() == "us-east-1"

    def test_default_region_fallback(self, monkeypatch):
        monkeypatch.delenv("AWS_REGION")
        monkeypatch.setenv("AWS_DEFAULT_REGION", "eu-west-1")
        assert current_region() == "eu-west-1"

    def test_session_fallback(self, monkeypatch):
        monkeypatch.delenv("AWS_REGION")
        with patch("config_rule_status.config.boto3.session.Session") as session:
            session.return_value.region_name = "ap-northeast-1"
            assert current_region() == "ap-northeast-1"


class TestSafeGet:
    def test_nested_value(self):
        assert safe_get({"a": {"b": {"c": 42}}}, "a", "b", "c") == 42

    def test_missing_key(self):
        assert safe_get({"a": {"b": 1}}, "a", "x") is None

    def test_none_input(self):
        assert safe_get(None, "a") is None


class TestIsIgnored:
    def test_wildcard_match(self, config):
        assert is_ignored(config, "sandbox-s3-encryption") is True

    def test_no_match(self, config):
        assert is_ignored(config, "prod-s3-encryption") is False

    def test_none_name(self, config):
        assert is_ignored(config, None) is False
