import pytest

from skillscanner.core.models import Finding, Status, Confidence, StatusColor, Severity, Category
from skillscanner.core.scoring import BANDS, classify, total_weight


@pytest.mark.parametrize("weight,status,confidence,color", [
    (0, Status.BENIGN, Confidence.HIGH, StatusColor.GREEN),
    (1, Status.BENIGN, Confidence.MEDIUM, StatusColor.GREEN),
    (15, Status.BENIGN, Confidence.MEDIUM, StatusColor.GREEN),
    (16, Status.SUSPICIOUS, Confidence.HIGH, StatusColor.YELLOW),
    (40, Status.SUSPICIOUS, Confidence.HIGH, StatusColor.YELLOW),
    (41, Status.SUSPICIOUS, Confidence.HIGH, StatusColor.ORANGE),
    (70, Status.SUSPICIOUS, Confidence.HIGH, StatusColor.ORANGE),
    (71, Status.DANGEROUS, Confidence.HIGH, StatusColor.RED),
    (10_000, Status.DANGEROUS, Confidence.HIGH, StatusColor.RED),
])
def test_band_edges(weight, status, confidence, color):
    band = classify(weight)
    assert (band.status, band.confidence, band.color) == (status, confidence, color)


def test_bands_partition_without_gaps():
    for prev, nxt in zip(BANDS, BANDS[1:]):
        assert prev.high is not None
        assert nxt.low == prev.high + 1
    assert BANDS[0].low == 0
    assert BANDS[-1].high is None
    for w in range(0, 200):
        assert sum(b.contains(w) for b in BANDS) == 1


def test_negative_weight_rejected():
    with pytest.raises(ValueError):
        classify(-1)


def test_total_weight_sums_findings():
    fs = [Finding("a", Severity.LOW, Category.NETWORK, 5, count=4),
          Finding("b", Severity.HIGH, Category.DESTRUCTIVE, 25)]
    assert total_weight(fs) == 30
    assert total_weight([]) == 0


def test_confidence_label():
    assert Confidence.HIGH.label == "HIGH CONFIDENCE"
    assert Confidence.MEDIUM.label == "MEDIUM CONFIDENCE"
