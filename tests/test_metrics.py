"""Tests for CloudWatch metrics publishing."""
from unittest.mock import MagicMock

from config_rule_status.metrics import NAMESPACE, new_metrics, publish_metrics


class TestPublishMetrics:
    def test_puts_every_metric(self):
        cw = MagicMock()
        clients = MagicMock()
        clients.get = lambda name: cw if name == "cloudwatch" else MagicMock()
        metrics = new_metrics()
        metrics["rules_total"] = 4

        publish_metrics(clients, metrics, "us-east-1")

        kwargs = cw.put_metric_data.call_args[1]
        assert kwargs["Namespace"] == NAMESPACE
        data = {d["MetricName"]: d for d in kwargs["MetricData"]}
        assert set(data) == set(metrics)
        assert data["rules_total"]["Value"] == 4
        assert data["rules_total"]["Dimensions"] == [{"Name": "Region", "Value": "us-east-1"}]

    def test_errors_logged_not_raised(self):
        cw = MagicMock()
        cw.put_metric_data.side_effect = Exception("throttled")
        clients = MagicMock()
        clients.get = lambda name: cw

        publish_metrics(clients, new_metrics(), "us-east-1")
