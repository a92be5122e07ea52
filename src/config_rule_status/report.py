"""Rule status report building and Slack formatting."""
import logging
from datetime import datetime, timezone

from .config import is_ignored, safe_get

logger = logging.getLogger(__name__)


def build_rule_report(config, utils, now=None):
    """Query every non-ignored rule in the region.

    Args:
        config: Configuration object
        utils: ConfigServiceUtils instance
        now: reference time for hours_since_last_run (defaults to current UTC time)

    Returns {"region", "recorder_active", "rules": [row, ...]} where each row is
    {"name", "state", "active", "compliant", "compliance_type",
    "hours_since_last_run"}. ``compliance_type`` is None for rules with no
    evaluation results.
    """
    now = now or datetime.now(timezone.utc)
    rows = []
    for rule in utils.get_config_rules():
        name = rule.get("ConfigRuleName")
        if is_ignored(config, name):
            logger.debug(f"Skipping ignored rule {name}")
            continue
        compliance_type = safe_get(utils.get_rule_compliance_by_name(name), "ComplianceType")
        rows.append({
            "name": name,
            "state": rule.get("ConfigRuleState"),
            "active": utils.rule_active(rule),
            "compliant": compliance_type == "COMPLIANT",
            "compliance_type": compliance_type,
            "hours_since_last_run": utils.hours_since_last_run(rule, now=now),
        })

    report = {
        "region": utils.region,
        "recorder_active": utils.recorder_active(),
        "rules": rows,
    }
    logger.info(f"Collected {len(rows)} rules in {utils.region}")
    return report


def summarize(report, stale_after_hours):
    """Count rules by status."""
    rows = report["rules"]
    return {
        "rules_total": len(rows),
        "rules_inactive": sum(1 for r in rows if not r["active"]),
        "rules_noncompliant": sum(1 for r in rows if r["compliance_type"] == "NON_COMPLIANT"),
        "rules_never_run": sum(1 for r in rows if r["hours_since_last_run"] is None),
        "rules_stale": sum(
            1 for r in rows
            if r["hours_since_last_run"] is not None and r["hours_since_last_run"] > stale_after_hours
        ),
        "recorders_unhealthy": 0 if report["recorder_active"] else 1,
    }


def format_report_message(config, region, label, events):
    """Format check events into a Slack message."""
    msg = f"*{label} - {config.account_name} ({region})*\n"
    for evt in events[:10]:
        msg += f"[{evt['severity']}] {evt['description']}\n"
    if len(events) > 10:
        msg += f"...and {len(events) - 10} more\n"
    return msg
