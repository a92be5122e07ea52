"""Rule status check registry."""
from . import (
    recorder,
    rule_state,
    compliance,
    staleness,
)

# (config_flag_attr, label, module)
REGISTRY = [
    ("enable_recorder_check", "Config Recorder", recorder),
    ("enable_rule_state_check", "Config Rule State", rule_state),
    ("enable_compliance_check", "Config Compliance", compliance),
    ("enable_staleness_check", "Config Rule Freshness", staleness),
]
