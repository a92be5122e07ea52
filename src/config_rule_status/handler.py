"""Scheduled Lambda handler reporting AWS Config rule status."""
import json
import logging
import traceback

from .config import Config
from .clients import ClientFactory
from .config_service import ConfigServiceUtils, UnsupportedRegionError
from .slack import SlackNotifier
from .report import build_rule_report, summarize, format_report_message
from .metrics import new_metrics, publish_metrics
from .checks import REGISTRY

logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")
logger = logging.getLogger(__name__)


def lambda_handler(event, context):
    """Main Lambda handler."""
    request_id = context.aws_request_id if context else "local"

    try:
        config = Config()
    except ValueError as e:
        logger.error(f"Invalid configuration: {e}")
        return {
            "statusCode": 500,
            "body": json.dumps({"error": str(e)}),
        }

    logger.info(f"Checking Config rules in {config.region} - {request_id}")
    clients = ClientFactory(config.region)

    try:
        utils = ConfigServiceUtils(region=config.region, clients=clients)
    except UnsupportedRegionError as e:
        logger.warning(str(e))
        return {
            "statusCode": 400,
            "body": json.dumps({"error": str(e)}),
        }

    notifier = SlackNotifier(config) if config.slack_webhook_url else None
    metrics = new_metrics()

    try:
        report = build_rule_report(config, utils)
        summary = summarize(report, config.stale_after_hours)
        metrics.update(summary)

        for flag_attr, label, check_module in REGISTRY:
            if not getattr(config, flag_attr, False):
                continue
            try:
                events = check_module.run(config, report)
                if events and notifier:
                    has_high = any(e["severity"] == "HIGH" for e in events)
                    msg = format_report_message(config, report["region"], label, events)
                    notifier.send(msg, has_high, metrics=metrics)
                elif events:
                    logger.info(f"{label}: {len(events)} findings")
            except Exception as e:
                logger.error(f"{label} check error: {e}")

        if config.enable_metrics:
            publish_metrics(clients, metrics, config.region)

        logger.info(f"Complete - {request_id}")
        return {
            "statusCode": 200,
            "body": json.dumps({
                "region": report["region"],
                "summary": summary,
                "rules": report["rules"],
            }),
        }

    except Exception as e:
        logger.error(f"Handler error: {e}\n{traceback.format_exc()}")

        if notifier:
            try:
                notifier.send(f"*Error - {config.account_name}*\n{e}", True)
            except Exception as e2:
                logger.error(f"Error reporting failure: {e2}")

        return {
            "statusCode": 500,
            "body": json.dumps({"error": str(e)}),
        }
