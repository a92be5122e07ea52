"""Configuration recorder health check."""


def run(config, report):
    """Flag the region when any recorder is stopped or failing.

    Returns list of {"severity": str, "description": str}.
    """
    if report["recorder_active"]:
        return []
    return [{
        "severity": "HIGH",
        "description": f"AWS Config recorder in {report['region']} is not recording successfully",
    }]
