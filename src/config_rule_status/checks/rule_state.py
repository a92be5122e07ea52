"""Inactive config rule check."""


def run(config, report):
    """List rules whose state is not ACTIVE.

    Returns list of {"severity": str, "description": str}.
    """
    return [
        {
            "severity": "MEDIUM",
            "description": f"Config rule '{row['name']}' is {row['state'] or 'in an unknown state'}",
        }
        for row in report["rules"]
        if not row["active"]
    ]
