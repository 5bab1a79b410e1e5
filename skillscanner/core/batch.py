from concurrent.futures import ThreadPoolExecutor
from typing import Dict, Iterable, Optional

from skillscanner.core.engine import Scanner
from skillscanner.core.models import Skill, SecurityReport

ON_ERROR_CHOICES = ("skip", "raise")


def batch_scan(
    skills: Iterable[Skill],
    scanner: Optional[Scanner] = None,
    workers: Optional[int] = None,
    on_error: str = "skip",
    logger=None,
) -> Dict[str, SecurityReport]:
    """
    Scan every skill independently and key the reports by skill id.

    on_error="skip" logs the failure and leaves the skill out of the result;
    on_error="raise" re-raises the first failure. Scans share no state, so
    workers > 1 runs them on a thread pool; the result is merged once.
    """
    if on_error not in ON_ERROR_CHOICES:
        raise ValueError(f"on_error must be one of {ON_ERROR_CHOICES}, got {on_error!r}")

    scanner = scanner or Scanner(logger=logger)
    skills = list(skills)

    def _one(skill: Skill):
        try:
            return skill.id, scanner.scan(skill), None
        except Exception as exc:
            if on_error == "raise":
                raise
            return skill.id, None, exc

    if workers and workers > 1:
        with ThreadPoolExecutor(max_workers=workers) as executor:
            outcomes = list(executor.map(_one, skills))
    else:
        outcomes = [_one(s) for s in skills]

    results: Dict[str, SecurityReport] = {}
    for skill_id, report, exc in outcomes:
        if exc is not None:
            if logger:
                logger.warn(f"Error escaneando {skill_id}: {exc}")
            continue
        results[skill_id] = report

    if logger:
        logger.info(f"{len(results)}/{len(skills)} skills escaneadas")
    return results
