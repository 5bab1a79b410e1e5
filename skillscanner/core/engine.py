from typing import Dict, List, Optional, Sequence

from skillscanner.checkers.base import BaseChecker
from skillscanner.checkers.patterns import PatternMatcher
from skillscanner.checkers.env_vars import EnvVarConsistency
from skillscanner.checkers.binaries import BinaryConsistency
from skillscanner.checkers.quality import QualityChecker
from skillscanner.core.models import (
    Skill, Finding, Category, CategoryDetail, SecurityReport,
)
from skillscanner.core.rules import CATEGORY_LABELS
from skillscanner.core.scoring import classify, total_weight
from skillscanner.core.summary import summarize


def default_checkers() -> List[BaseChecker]:
    # Pattern findings first, then consistency and quality.
    return [PatternMatcher(), EnvVarConsistency(), BinaryConsistency(),
            QualityChecker()]


def build_content(skill: Skill) -> str:
    parts = []
    for attr in ("skill_md", "readme", "body"):
        value = getattr(skill, attr)
        if value is None:
            value = ""
        if not isinstance(value, str):
            raise TypeError(
                f"{skill.id}: {attr} must be str, got {type(value).__name__}")
        parts.append(value)
    return "\n".join(parts)


def group_findings(findings: Sequence[Finding]) -> Dict[Category, CategoryDetail]:
    """Single pass; categories keep first-seen order, empty ones never appear."""
    buckets: Dict[Category, List[Finding]] = {}
    for f in findings:
        buckets.setdefault(f.category, []).append(f)
    return {
        cat: CategoryDetail(CATEGORY_LABELS[cat], tuple(items))
        for cat, items in buckets.items()
    }


class Scanner:
    def __init__(self, checkers: Optional[Sequence[BaseChecker]] = None, logger=None):
        self.name = "SkillScanner"
        self.version = "1.0.0"
        self.checkers = list(checkers) if checkers is not None else default_checkers()
        self.logger = logger

    def scan(self, skill: Skill) -> SecurityReport:
        content = build_content(skill)
        if self.logger:
            self.logger.debug(f"Escaneando {skill.id} ({len(content)} chars)")

        findings: List[Finding] = []
        for chk in self.checkers:
            found = chk.check(skill, content)
            if self.logger and found:
                self.logger.debug(f"  {chk.name}: {len(found)} hallazgo(s)")
            findings.extend(found)

        weight = total_weight(findings)
        band = classify(weight)
        return SecurityReport(
            skill_id=skill.id,
            status=band.status,
            status_color=band.color,
            confidence=band.confidence,
            summary=summarize(skill.name, findings),
            findings=tuple(findings),
            details=group_findings(findings),
            total_weight=weight,
        )


_default = Scanner()


def scan_skill(skill: Skill) -> SecurityReport:
    return _default.scan(skill)
