import re
from typing import List

from skillscanner.checkers.base import BaseChecker
from skillscanner.core.models import Skill, Finding, Severity, Category


_BIN = r"([A-Za-z0-9][\w+-]*(?:\.[\w+-]+)*)"

# `which` counts only in command position and before a redirect, separator or closer.
_CMD_START = r"(?:^|`|\$\(|!|\bif|&&|\|\|)[ \t]*"
_CMD_END = r"[ \t]*(?=>|;|&&|\|\||`|\))"

UNDECLARED_BIN_WEIGHT = 5


class BinaryConsistency(BaseChecker):
    """
    External binaries the content depends on but the metadata does not
    declare. Only explicit signals count:
      - presence checks: `which NAME` in command position, `command -v NAME`.
      - prose: "`NAME` must be installed", "requires `NAME`".
    """

    def __init__(self):
        self.name = "Binary Dependency Consistency"
        self._rx = [
            re.compile(r"\bcommand\s+-v\s+" + _BIN),
            re.compile(_CMD_START + r"which[ \t]+" + _BIN + _CMD_END, re.M),
            re.compile(r"`" + _BIN + r"`\s+(?:must|needs\s+to|should)\s+be\s+installed\b",
                       re.I),
            re.compile(r"\brequires?\s+`" + _BIN + r"`", re.I),
        ]

    def referenced(self, content: str) -> List[str]:
        out = []
        for name in self.extract(self._rx, content):
            name = name.lower()
            if name not in out:
                out.append(name)
        return out

    def check(self, skill: Skill, content: str) -> List[Finding]:
        declared = {b.lower() for b in (skill.bins or ())}
        return [
            Finding(
                label=f"Binary {name} is required but not declared",
                severity=Severity.LOW,
                category=Category.CONSISTENCY,
                weight=UNDECLARED_BIN_WEIGHT,
            )
            for name in self.referenced(content)
            if name not in declared
        ]
