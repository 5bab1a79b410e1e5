from typing import List

from skillscanner.checkers.base import BaseChecker
from skillscanner.core.models import Skill, Finding, Severity, Category


NO_DOCS_LABEL = "No documentation (README/SKILL.md body)"
NO_LICENSE_LABEL = "No license specified"


class QualityChecker(BaseChecker):
    """Registry hygiene: documentation and license presence."""

    def __init__(self):
        self.name = "Quality"

    def check(self, skill: Skill, content: str) -> List[Finding]:
        findings = []
        if not skill.readme and not skill.body:
            findings.append(Finding(NO_DOCS_LABEL, Severity.LOW,
                                    Category.QUALITY, weight=10))
        if not skill.license:
            findings.append(Finding(NO_LICENSE_LABEL, Severity.INFO,
                                    Category.QUALITY, weight=5))
        return findings
