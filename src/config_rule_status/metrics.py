"""CloudWatch metrics publishing."""
import logging
from datetime import datetime, timezone

logger = logging.getLogger(__name__)

NAMESPACE = "ConfigRuleStatus"


def new_metrics():
    """Create a fresh metrics dict."""
    return {
        "rules_total": 0,
        "rules_inactive": 0,
        "rules_noncompliant": 0,
        "rules_never_run": 0,
        "rules_stale": 0,
        "recorders_unhealthy": 0,
        "notifications_sent": 0,
        "notifications_failed": 0,
    }


def publish_metrics(clients, metrics, region):
    """Publish metrics to CloudWatch, dimensioned by region."""
    try:
        cw = clients.get("cloudwatch")
        timestamp = datetime.now(timezone.utc)
        cw.put_metric_data(
            Namespace=NAMESPACE,
            MetricData=[
                {
                    "MetricName": k,
                    "Dimensions": [{"Name": "Region", "Value": region}],
                    "Value": v,
                    "Unit": "Count",
                    "Timestamp": timestamp,
                }
                for k, v in metrics.items()
            ],
        )
        logger.info(f"Metrics: {metrics}")
    except Exception as e:
        logger.error(f"Metrics error: {e}")
