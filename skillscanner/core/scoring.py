"""Weight bands: total_weight -> (status, confidence, color)."""

from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

from skillscanner.core.models import Finding, Status, Confidence, StatusColor


@dataclass(frozen=True)
class Band:
    low: int                # inclusive
    high: Optional[int]     # inclusive, None = unbounded
    status: Status
    confidence: Confidence
    color: StatusColor

    def contains(self, weight: int) -> bool:
        return weight >= self.low and (self.high is None or weight <= self.high)


# Contiguous and total over the non-negative integers. A zero weight is
# reported with HIGH confidence, small non-zero weights with MEDIUM.
BANDS: Tuple[Band, ...] = (
    Band(0, 0, Status.BENIGN, Confidence.HIGH, StatusColor.GREEN),
    Band(1, 15, Status.BENIGN, Confidence.MEDIUM, StatusColor.GREEN),
    Band(16, 40, Status.SUSPICIOUS, Confidence.HIGH, StatusColor.YELLOW),
    Band(41, 70, Status.SUSPICIOUS, Confidence.HIGH, StatusColor.ORANGE),
    Band(71, None, Status.DANGEROUS, Confidence.HIGH, StatusColor.RED),
)


def total_weight(findings: Iterable[Finding]) -> int:
    return sum(f.weight for f in findings)


def classify(weight: int) -> Band:
    if weight < 0:
        raise ValueError(f"total weight cannot be negative: {weight}")
    for band in BANDS:
        if band.contains(weight):
            return band
    raise AssertionError(f"no band covers weight {weight}")
