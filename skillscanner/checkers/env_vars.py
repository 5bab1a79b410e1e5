import re
from typing import List

from skillscanner.checkers.base import BaseChecker
from skillscanner.core.models import Skill, Finding, Severity, Category


_NAME = r"([A-Z][A-Z0-9_]*)"

# Generic shell/session variables that say nothing about a skill's config.
IGNORED_ENV_VARS = frozenset({
    "HOME", "PATH", "PWD", "OLDPWD", "USER", "SHELL", "TERM", "LANG",
    "LOGNAME", "HOSTNAME", "TMPDIR", "EDITOR", "DISPLAY", "LC_ALL", "IFS",
    "UID", "RANDOM", "OSTYPE", "SECONDS", "LINENO",
})

UNDECLARED_ENV_WEIGHT = 8


class EnvVarConsistency(BaseChecker):
    """
    Environment variables referenced in the content but missing from the
    declared metadata. Recognized idioms:
      - lookups: os.getenv("X"), os.environ.get("X"), Deno.env.get("X").
      - indexed maps: os.environ["X"], process.env["X"], process.env.X.
      - shell tokens: ${X} and $X.
    Names are upper-case only; deny-listed names and names of two
    characters or fewer are dropped.
    """

    def __init__(self):
        self.name = "Environment Variable Consistency"
        q = r"""\s*['"]""" + _NAME + r"""['"]"""
        self._rx = [
            re.compile(r"\bos\.getenv\(" + q),
            re.compile(r"\bos\.environ\.get\(" + q),
            re.compile(r"\bDeno\.env\.get\(" + q),
            re.compile(r"\bos\.environ\[" + q + r"\s*\]"),
            re.compile(r"\bprocess\.env\[" + q + r"\s*\]"),
            re.compile(r"\bprocess\.env\." + _NAME + r"\b"),
            re.compile(r"\$\{" + _NAME + r"(?:[:}]|-)"),
            re.compile(r"\$" + _NAME + r"\b"),
        ]

    def referenced(self, content: str) -> List[str]:
        return [n for n in self.extract(self._rx, content)
                if len(n) > 2 and n not in IGNORED_ENV_VARS]

    def check(self, skill: Skill, content: str) -> List[Finding]:
        declared = set(skill.env_vars or ())
        return [
            Finding(
                label=f"Environment variable {name} is used but not declared",
                severity=Severity.MEDIUM,
                category=Category.CONSISTENCY,
                weight=UNDECLARED_ENV_WEIGHT,
            )
            for name in self.referenced(content)
            if name not in declared
        ]
