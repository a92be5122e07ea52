"""Configuration from environment variables."""
import os
import fnmatch

import boto3


class Config:
    """Configuration from environment variables."""

    def __init__(self):
        self.region = current_region()
        self.account_name = os.getenv("ACCOUNT_NAME", "AWS Account")
        self.slack_webhook_url = os.getenv("SLACK_WEBHOOK_URL") or None
        self.ignored_rules = [
            x.strip() for x in os.getenv("IGNORED_RULES", "").split(",") if x.strip()
        ]

        # Check flags
        self.enable_recorder_check = os.getenv("ENABLE_RECORDER_CHECK", "true").lower() == "true"
        self.enable_rule_state_check = os.getenv("ENABLE_RULE_STATE_CHECK", "true").lower() == "true"
        self.enable_compliance_check = os.getenv("ENABLE_COMPLIANCE_CHECK", "true").lower() == "true"
        self.enable_staleness_check = os.getenv("ENABLE_STALENESS_CHECK", "true").lower() == "true"
        self.enable_metrics = os.getenv("ENABLE_METRICS", "false").lower() == "true"

        self.stale_after_hours = int(os.getenv("STALE_AFTER_HOURS", "24"))

        # Slack delivery
        self.max_retries = int(os.getenv("MAX_RETRIES", "3"))
        self.retry_delay = int(os.getenv("RETRY_DELAY_SECONDS", "2"))
        self.rate_limit = int(os.getenv("RATE_LIMIT_PER_MINUTE", "30"))
        self.max_message_length = int(os.getenv("MAX_SLACK_MESSAGE_LENGTH", "3000"))


def current_region():
    """Region from the environment, falling back to the boto3 session default."""
    return (
        os.getenv("AWS_REGION")
        or os.getenv("AWS_DEFAULT_REGION")
        or boto3.session.Session().region_name
    )


def safe_get(dictionary, *keys):
    """Safely get nested dictionary value."""
    for key in keys:
        if dictionary is None or key not in dictionary:
            return None
        dictionary = dictionary[key]
    return dictionary


def is_ignored(config, rule_name):
    """Check if a rule name matches an ignore pattern (supports wildcards)."""
    if not rule_name:
        return False
    return any(fnmatch.fnmatch(rule_name, pattern) for pattern in config.ignored_rules)
