from skillscanner.core.models import Finding, Severity, Category
from skillscanner.core.summary import summarize, select_rule

CRIT = Finding("curl pipe to shell", Severity.CRITICAL, Category.REMOTE_EXEC, 35)
HIGH = Finding("eval() usage", Severity.HIGH, Category.CODE_EXECUTION, 25)
HIGH2 = Finding("rm -rf command", Severity.HIGH, Category.DESTRUCTIVE, 25)
LOW = Finding("Binds to all interfaces", Severity.LOW, Category.NETWORK, 5)
ENV = Finding("Environment variable API_KEY is used but not declared",
              Severity.MEDIUM, Category.CONSISTENCY, 8)
BIN = Finding("Binary jq is required but not declared",
              Severity.LOW, Category.CONSISTENCY, 5)
NO_LICENSE = Finding("No license specified", Severity.INFO, Category.QUALITY, 5)


def test_no_findings_is_safe():
    assert summarize("weather", []) == (
        "weather appears safe. No risky patterns or metadata inconsistencies "
        "were detected.")


def test_quality_only_is_safe():
    assert select_rule([NO_LICENSE]).name == "safe"


def test_critical_wins_and_lists_only_critical_labels():
    text = summarize("weather", [HIGH, CRIT, ENV])
    assert text == ("weather contains critical risk patterns: curl pipe to shell. "
                    "Manual review is strongly recommended before installing.")


def test_high_lists_high_labels():
    assert summarize("weather", [HIGH, LOW, HIGH2]) == (
        "weather uses high-risk capabilities: eval() usage, rm -rf command.")


def test_high_notes_inconsistencies():
    assert summarize("weather", [HIGH, ENV]) == (
        "weather uses high-risk capabilities: eval() usage. "
        "Metadata inconsistencies were also found.")


def test_inconsistencies_without_high_risk():
    assert summarize("weather", [LOW, ENV, BIN, NO_LICENSE]) == (
        "weather is functionally safe, but its registry metadata has "
        "inconsistencies: environment variable api_key is used but not declared; "
        "binary jq is required but not declared.")


def test_minor_notes_list_every_label():
    assert summarize("weather", [LOW, NO_LICENSE]) == (
        "weather has minor notes: Binds to all interfaces, No license specified.")


def test_precedence_order():
    assert select_rule([CRIT, HIGH]).name == "critical"
    assert select_rule([HIGH, ENV]).name == "high"
    assert select_rule([ENV]).name == "inconsistent"
    assert select_rule([LOW]).name == "minor"
