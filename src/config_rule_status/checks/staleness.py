"""Config rule freshness check."""


def run(config, report):
    """Flag rules that have not run successfully within the configured window.

    Returns list of {"severity": str, "description": str}.
    """
    events = []
    for row in report["rules"]:
        hours = row["hours_since_last_run"]
        if hours is None:
            events.append({
                "severity": "LOW",
                "description": f"Config rule '{row['name']}' has never run successfully",
            })
        elif hours > config.stale_after_hours:
            events.append({
                "severity": "MEDIUM",
                "description": f"Config rule '{row['name']}' last ran {hours}h ago",
            })
    return events
