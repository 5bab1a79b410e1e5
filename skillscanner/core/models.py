"""Shared data models for the skill scanner."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Dict, FrozenSet, Optional, Tuple


class Severity(str, Enum):
    INFO = "info"
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class Category(str, Enum):
    CODE_EXECUTION = "code_execution"
    DESTRUCTIVE = "destructive"
    REMOTE_EXEC = "remote_exec"
    PRIVILEGE = "privilege"
    CREDENTIALS = "credentials"
    NETWORK = "network"
    FILESYSTEM = "filesystem"
    CONSISTENCY = "consistency"
    QUALITY = "quality"


# Findings in these categories are not counted as risks by the summary.
NON_RISK_CATEGORIES = frozenset({Category.QUALITY, Category.CONSISTENCY})


class Status(str, Enum):
    BENIGN = "Benign"
    SUSPICIOUS = "Suspicious"
    DANGEROUS = "Dangerous"


class Confidence(str, Enum):
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"

    @property
    def label(self) -> str:
        return f"{self.value} CONFIDENCE"


class StatusColor(str, Enum):
    GREEN = "green"
    YELLOW = "yellow"
    ORANGE = "orange"
    RED = "red"


@dataclass(frozen=True)
class Skill:
    """
    A skill record as mirrored from the upstream registry.

    Text fields may be None; metadata collections may be empty.
    """
    id: str
    skill_md: Optional[str] = None
    readme: Optional[str] = None
    body: Optional[str] = None
    env_vars: FrozenSet[str] = frozenset()
    bins: FrozenSet[str] = frozenset()
    license: Optional[str] = None
    display_name: Optional[str] = None

    @property
    def name(self) -> str:
        """Display name, falling back to the slug part of the id."""
        if self.display_name:
            return self.display_name
        return self.id.rsplit("/", 1)[-1]


@dataclass(frozen=True)
class Finding:
    """A single risk or inconsistency signal."""
    label: str
    severity: Severity
    category: Category
    weight: int
    count: int = 1

    @property
    def is_risk(self) -> bool:
        return self.category not in NON_RISK_CATEGORIES

    def to_dict(self) -> dict:
        return {
            "label": self.label,
            "severity": self.severity.value,
            "category": self.category.value,
            "count": self.count,
            "weight": self.weight,
        }


@dataclass(frozen=True)
class CategoryDetail:
    """Findings of one category, in report order."""
    label: str
    findings: Tuple[Finding, ...] = ()


@dataclass(frozen=True)
class SecurityReport:
    skill_id: str
    status: Status
    status_color: StatusColor
    confidence: Confidence
    summary: str
    findings: Tuple[Finding, ...]
    details: Dict[Category, CategoryDetail]
    total_weight: int
    scanned_at: datetime = field(
        default_factory=lambda: datetime.now(timezone.utc))

    def to_dict(self) -> dict:
        return {
            "skillId": self.skill_id,
            "status": self.status.value,
            "statusColor": self.status_color.value,
            "confidence": self.confidence.label,
            "summary": self.summary,
            "findings": [f.to_dict() for f in self.findings],
            "details": {
                cat.value: {
                    "label": detail.label,
                    "findings": [f.to_dict() for f in detail.findings],
                }
                for cat, detail in self.details.items()
            },
            "totalWeight": self.total_weight,
            "scannedAt": self.scanned_at.isoformat(),
        }
