"""Static rule table for the pattern matcher.

Every pattern is compiled case-insensitively when this module is imported,
so a broken pattern fails at startup and never during a scan. Quantifiers
are bounded or limited to a single line to keep matching linear.
"""

import re
from dataclasses import dataclass, field
from typing import Tuple

from skillscanner.core.models import Category, Severity


@dataclass(frozen=True)
class SecurityRule:
    pattern: str
    severity: Severity
    label: str
    category: Category
    weight: int
    regex: re.Pattern = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        if self.weight <= 0:
            raise ValueError(f"Rule {self.label!r} needs a positive weight")
        object.__setattr__(self, "regex", re.compile(self.pattern, re.I))

    def count(self, content: str) -> int:
        """Number of non-overlapping matches in *content*."""
        return sum(1 for _ in self.regex.finditer(content))


CATEGORY_LABELS = {
    Category.CODE_EXECUTION: "Code Execution",
    Category.DESTRUCTIVE: "Destructive Commands",
    Category.REMOTE_EXEC: "Remote Code Execution",
    Category.PRIVILEGE: "Privilege Escalation",
    Category.CREDENTIALS: "Credentials & Secrets",
    Category.NETWORK: "Network Exposure",
    Category.FILESYSTEM: "Filesystem Access",
    Category.CONSISTENCY: "Metadata Consistency",
    Category.QUALITY: "Quality",
}


_S = Severity
_C = Category

RULES: Tuple[SecurityRule, ...] = (
    # ── code execution ─────────────────────────────────────────
    SecurityRule(r"\beval\s*\(", _S.HIGH, "eval() usage",
                 _C.CODE_EXECUTION, 25),
    SecurityRule(r"\bexec\s*\(", _S.HIGH, "exec() usage",
                 _C.CODE_EXECUTION, 25),
    SecurityRule(r"\bchild_process\b", _S.HIGH, "child_process module",
                 _C.CODE_EXECUTION, 20),
    SecurityRule(r"\bnew\s+Function\s*\(", _S.HIGH, "Function() constructor",
                 _C.CODE_EXECUTION, 20),
    SecurityRule(r"\bshell\s*=\s*True\b", _S.MEDIUM, "subprocess with shell=True",
                 _C.CODE_EXECUTION, 15),

    # ── destructive ────────────────────────────────────────────
    SecurityRule(r"\brm\s+-(?:rf|fr)\b", _S.HIGH, "rm -rf command",
                 _C.DESTRUCTIVE, 25),
    SecurityRule(r"\brmdir\s+/s\b", _S.HIGH, "rmdir /s command",
                 _C.DESTRUCTIVE, 25),
    SecurityRule(r"\bdel\s+/f\b", _S.HIGH, "del /f command",
                 _C.DESTRUCTIVE, 20),
    SecurityRule(r"\bformat\s+[a-z]:(?=[ \t]*(?:$|\r?\n|/|&&|;))",
                 _S.CRITICAL, "Format drive command", _C.DESTRUCTIVE, 40),
    SecurityRule(r"\bmkfs(?:\.\w+)?\s+/dev/", _S.CRITICAL, "Filesystem wipe (mkfs)",
                 _C.DESTRUCTIVE, 40),

    # ── remote execution ───────────────────────────────────────
    SecurityRule(r"\bcurl\s[^\n|]*\|\s*(?:sudo\s+)?(?:bash|sh|zsh)\b", _S.CRITICAL,
                 "curl pipe to shell", _C.REMOTE_EXEC, 35),
    SecurityRule(r"\bwget\s[^\n|]*\|\s*(?:sudo\s+)?(?:bash|sh|zsh)\b", _S.CRITICAL,
                 "wget pipe to shell", _C.REMOTE_EXEC, 35),
    SecurityRule(r"\bbase64\s+(?:-d|--decode)\b[^\n|]*\|\s*(?:bash|sh|zsh)\b",
                 _S.CRITICAL, "Encoded payload piped to shell", _C.REMOTE_EXEC, 35),
    SecurityRule(r"\bInvoke-Expression\b|\biex\s*\(", _S.HIGH, "PowerShell IEX",
                 _C.REMOTE_EXEC, 25),
    SecurityRule(r"/dev/tcp/", _S.CRITICAL, "Reverse shell via /dev/tcp",
                 _C.REMOTE_EXEC, 40),

    # ── privilege ──────────────────────────────────────────────
    SecurityRule(r"\bsudo\b", _S.MEDIUM, "sudo usage",
                 _C.PRIVILEGE, 10),
    SecurityRule(r"\bchmod\s+(?:-R\s+)?777\b", _S.MEDIUM, "chmod 777",
                 _C.PRIVILEGE, 10),
    SecurityRule(r"\bchmod\s+[ugoa]*\+s\b", _S.MEDIUM, "setuid/setgid bit",
                 _C.PRIVILEGE, 15),
    SecurityRule(r"--no-sandbox\b", _S.MEDIUM, "no-sandbox flag",
                 _C.PRIVILEGE, 10),

    # ── credentials ────────────────────────────────────────────
    SecurityRule(r"-----BEGIN (?:RSA |EC |DSA |OPENSSH )?PRIVATE KEY-----",
                 _S.CRITICAL, "Embedded private key", _C.CREDENTIALS, 40),
    SecurityRule(r"\bpassword\s*[:=]\s*['\"][^'\"\n]+['\"]", _S.MEDIUM,
                 "Hardcoded password", _C.CREDENTIALS, 10),
    SecurityRule(r"['\"][A-Za-z0-9+/=]{20,}['\"]", _S.LOW,
                 "Possible hardcoded token", _C.CREDENTIALS, 5),
    SecurityRule(r"~/\.(?:ssh|aws|gnupg)\b", _S.HIGH,
                 "Credential directory access", _C.CREDENTIALS, 20),

    # ── network ────────────────────────────────────────────────
    SecurityRule(r"\b0\.0\.0\.0\b", _S.LOW, "Binds to all interfaces",
                 _C.NETWORK, 5),
    SecurityRule(r"\bdisable[^\n]{0,40}\bssl\b|\bssl[^\n]{0,40}verify[^\n]{0,20}\bfalse\b"
                 r"|\bverify\s*=\s*False\b", _S.MEDIUM,
                 "SSL verification disabled", _C.NETWORK, 10),
    SecurityRule(r"\bhttps?://\d{1,3}(?:\.\d{1,3}){3}\b", _S.LOW,
                 "Raw IP address endpoint", _C.NETWORK, 5),

    # ── filesystem ─────────────────────────────────────────────
    SecurityRule(r"/etc/(?:passwd|shadow|sudoers)\b", _S.HIGH,
                 "System credential file access", _C.FILESYSTEM, 20),
    SecurityRule(r">>?\s*~/\.(?:bashrc|zshrc|profile|bash_profile)\b", _S.MEDIUM,
                 "Writes to shell profile", _C.FILESYSTEM, 10),
)
