from typing import List, Sequence

from skillscanner.checkers.base import BaseChecker
from skillscanner.core.models import Skill, Finding
from skillscanner.core.rules import RULES, SecurityRule


class PatternMatcher(BaseChecker):
    """
    Applies the rule table to the skill content:
      - one finding per rule with at least one match, in table order.
      - count is the literal number of matches; weight is per rule, not per match.
    """

    def __init__(self, rules: Sequence[SecurityRule] = RULES):
        self.name = "Pattern Matcher"
        self.rules = tuple(rules)

    def check(self, skill: Skill, content: str) -> List[Finding]:
        findings = []
        for rule in self.rules:
            n = rule.count(content)
            if n:
                findings.append(Finding(
                    label=rule.label,
                    severity=rule.severity,
                    category=rule.category,
                    weight=rule.weight,
                    count=n,
                ))
        return findings
