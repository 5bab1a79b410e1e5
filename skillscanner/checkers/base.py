"""Abstract base for all skill checkers."""

from abc import ABC, abstractmethod
import re
from typing import Iterable, List, Tuple

from skillscanner.core.models import Skill, Finding


class BaseChecker(ABC):
    """Every checker must implement check()."""

    name: str = "Unnamed Checker"

    # ── public API ──────────────────────────────────────────────

    @abstractmethod
    def check(self, skill: Skill, content: str) -> List[Finding]:
        """
        Inspect *skill* and its concatenated *content*.
        Return the findings in a stable order; an empty list if none.
        """
        ...

    # ── shared helpers ──────────────────────────────────────────

    @staticmethod
    def extract(patterns: Iterable[re.Pattern], content: str) -> List[str]:
        """
        First capture group of every match across *patterns*, ordered by
        position in *content* and deduplicated (first occurrence wins).
        """
        hits: List[Tuple[int, str]] = []
        for rx in patterns:
            for m in rx.finditer(content):
                hits.append((m.start(), m.group(1)))
        hits.sort(key=lambda h: h[0])

        seen = set()
        out = []
        for _, name in hits:
            if name not in seen:
                seen.add(name)
                out.append(name)
        return out
