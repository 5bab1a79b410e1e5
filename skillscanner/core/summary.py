"""
Summary generation as an ordered decision table.

Each entry pairs a predicate over the findings with a template; the first
predicate that holds picks the paragraph.
"""

from dataclasses import dataclass
from typing import Callable, List, Sequence

from skillscanner.core.models import Finding, Category, Severity


Predicate = Callable[[Sequence[Finding]], bool]
Template = Callable[[str, Sequence[Finding]], str]


@dataclass(frozen=True)
class SummaryRule:
    name: str
    applies: Predicate
    render: Template


def _risks(findings):
    return [f for f in findings if f.is_risk]


def _consistency(findings):
    return [f for f in findings if f.category == Category.CONSISTENCY]


def _labels(findings, severity=None) -> List[str]:
    return [f.label for f in findings if severity is None or f.severity == severity]


def _has(severity):
    return lambda findings: any(f.severity == severity for f in findings)


def _safe(name, findings):
    return (f"{name} appears safe. No risky patterns or metadata "
            f"inconsistencies were detected.")


def _critical(name, findings):
    labels = ", ".join(_labels(_risks(findings), Severity.CRITICAL))
    return (f"{name} contains critical risk patterns: {labels}. "
            f"Manual review is strongly recommended before installing.")


def _high(name, findings):
    labels = ", ".join(_labels(_risks(findings), Severity.HIGH))
    text = f"{name} uses high-risk capabilities: {labels}."
    if _consistency(findings):
        text += " Metadata inconsistencies were also found."
    return text


def _inconsistent(name, findings):
    labels = "; ".join(f.label.lower() for f in _consistency(findings))
    return (f"{name} is functionally safe, but its registry metadata has "
            f"inconsistencies: {labels}.")


def _minor(name, findings):
    return f"{name} has minor notes: {', '.join(_labels(findings))}."


SUMMARY_RULES = (
    SummaryRule("safe",
                lambda fs: not _risks(fs) and not _consistency(fs), _safe),
    SummaryRule("critical", _has(Severity.CRITICAL), _critical),
    SummaryRule("high", _has(Severity.HIGH), _high),
    SummaryRule("inconsistent", lambda fs: bool(_consistency(fs)), _inconsistent),
    SummaryRule("minor", lambda fs: True, _minor),
)


def select_rule(findings: Sequence[Finding]) -> SummaryRule:
    for rule in SUMMARY_RULES:
        if rule.applies(findings):
            return rule
    raise AssertionError("summary table has no fallback")


def summarize(name: str, findings: Sequence[Finding]) -> str:
    return select_rule(findings).render(name, findings)
