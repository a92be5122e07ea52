"""Utilities for querying AWS Config Service rule state."""
import logging
from datetime import datetime, timezone

import boto3

from .config import current_region, safe_get

logger = logging.getLogger(__name__)

# https://docs.aws.amazon.com/general/latest/gr/rande.html#awsconfig_region
CONFIG_REGIONS = (
    "us-east-1",
    "us-west-2",
    "eu-west-1",
    "eu-central-1",
    "ap-northeast-1",
)


class UnsupportedRegionError(Exception):
    """Raised when Config Service is not supported in the configured region."""


def get_available_regions():
    """Regions where Config Service is currently supported."""
    return list(CONFIG_REGIONS)


class ConfigServiceUtils:
    """Thin wrapper over a boto3 ``config`` client.

    Errors raised by the client are not caught here. When no client is given,
    one is taken from ``clients`` (a ClientFactory) or built with boto3, after
    the region has been validated.
    """

    def __init__(self, cs_client=None, region=None, clients=None):
        region = region or current_region()
        if region not in get_available_regions():
            raise UnsupportedRegionError(f"Region {region} not yet supported by config service")

        self.region = region
        if cs_client is None:
            cs_client = clients.get("config") if clients else boto3.client("config", region_name=region)
        self.cs = cs_client

    def get_config_rules(self):
        """Get all config rules for the region."""
        logger.debug(f"Describing config rules in {self.region}")
        return self.cs.describe_config_rules().get("ConfigRules", [])

    def get_config_rule_by_name(self, rule_name):
        """Get a config rule by name, or None."""
        logger.debug(f"Describing config rule {rule_name}")
        rules = self.cs.describe_config_rules(ConfigRuleNames=[rule_name]).get("ConfigRules", [])
        return rules[0] if rules else None

    def get_rule_evaluation_status_by_name(self, rule_name):
        """Get the evaluation status record of a rule, or None."""
        logger.debug(f"Describing evaluation status of {rule_name}")
        statuses = self.cs.describe_config_rule_evaluation_status(
            ConfigRuleNames=[rule_name]
        ).get("ConfigRulesEvaluationStatus", [])
        return statuses[0] if statuses else None

    def get_rule_compliance_by_name(self, rule_name):
        """Get the most recent evaluation result for a rule, or None.

        Results carrying ``ResultRecordedTime`` are ranked by it; otherwise the
        first result returned by the service wins.
        """
        logger.debug(f"Getting compliance details of {rule_name}")
        results = self.cs.get_compliance_details_by_config_rule(
            ConfigRuleName=rule_name
        ).get("EvaluationResults", [])
        if not results:
            return None
        if all(r.get("ResultRecordedTime") for r in results):
            return max(results, key=lambda r: r["ResultRecordedTime"])
        return results[0]

    def recorder_active(self):
        """Are all recorders in this region recording and logging successfully."""
        logger.debug(f"Describing configuration recorder status in {self.region}")
        statuses = self.cs.describe_configuration_recorder_status().get(
            "ConfigurationRecordersStatus", []
        )
        for status in statuses:
            if not status.get("recording") or status.get("lastStatus") != "SUCCESS":
                logger.debug(f"Recorder {status.get('name')} unhealthy: {status}")
                return False
        return True

    @staticmethod
    def rule_active(rule):
        """Is this rule in the ACTIVE state."""
        return rule.get("ConfigRuleState") == "ACTIVE"

    def rule_compliant(self, rule):
        """Is this rule currently passing."""
        result = self.get_rule_compliance_by_name(rule["ConfigRuleName"])
        return safe_get(result, "ComplianceType") == "COMPLIANT"

    def hours_since_last_run(self, rule, now=None):
        """Whole hours since the rule's last successful invocation, or None if it never ran."""
        status = self.get_rule_evaluation_status_by_name(rule["ConfigRuleName"])
        last_run = safe_get(status, "LastSuccessfulInvocationTime")
        if last_run is None:
            return None

        now = now or datetime.now(timezone.utc)
        return int((now - last_run).total_seconds() // 3600)
