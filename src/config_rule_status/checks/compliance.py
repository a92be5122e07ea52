"""Config rule compliance check."""


def run(config, report):
    """Summarize NON_COMPLIANT rules and name the first five.

    Rules without results, or typed NOT_APPLICABLE or INSUFFICIENT_DATA, are not flagged.

    Returns list of {"severity": str, "description": str}.
    """
    non_compliant = [
        row["name"] for row in report["rules"] if row["compliance_type"] == "NON_COMPLIANT"
    ]
    if not non_compliant:
        return []

    events = [{
        "severity": "HIGH",
        "description": f"{len(non_compliant)} config rules are non-compliant",
    }]
    for name in non_compliant[:5]:
        events.append({
            "severity": "LOW",
            "description": f"Config rule '{name}' is non-compliant",
        })
    return events
