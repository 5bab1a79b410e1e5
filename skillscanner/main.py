import argparse
import json
import sys

from skillscanner.parsers.skill import load_skill, load_skills
from skillscanner.core.engine import Scanner
from skillscanner.core.batch import batch_scan
from skillscanner.core.models import Status
from skillscanner.reporters.console import Log

_RANK = {Status.BENIGN: 0, Status.SUSPICIOUS: 1, Status.DANGEROUS: 2}


def main(argv=None) -> int:
    p = argparse.ArgumentParser(description="Skill Security Scanner")
    p.add_argument("paths", nargs="*", help="Directorios de skills (<owner>/<slug>)")
    p.add_argument("--root", help="Raiz del mirror: escanea todas las skills")
    p.add_argument("--json", action="store_true", help="Salida JSON por skill id")
    p.add_argument("--workers", type=int, default=1)
    p.add_argument("--fail-on", choices=["suspicious", "dangerous"],
                   help="Exit 1 si algun reporte alcanza este estado")
    p.add_argument("-v", "--verbose", action="count", default=1,
                   help="-v, -vv")
    args = p.parse_args(argv)

    # JSON output keeps stdout clean
    log = Log(verbose=-1 if args.json else args.verbose)

    try:
        skills = load_skills(args.root) if args.root else []
        skills += [load_skill(sp) for sp in args.paths]
    except (OSError, ValueError) as e:
        log.fail(str(e))
        return 2
    if not skills:
        log.fail("Sin skills para escanear (usa PATH o --root)")
        return 2

    reports = batch_scan(skills, scanner=Scanner(logger=log),
                         workers=args.workers, logger=log)

    if args.json:
        print(json.dumps({sid: r.to_dict() for sid, r in reports.items()}, indent=2))
    else:
        for rep in reports.values():
            log.report(rep)
        flagged = [r for r in reports.values() if r.status != Status.BENIGN]
        if flagged:
            log.fail(f"{len(flagged)}/{len(reports)} skills con riesgo")
        else:
            log.ok(f"Sin hallazgos de riesgo en {len(reports)} skill(s)")

    if args.fail_on:
        threshold = _RANK[Status(args.fail_on.capitalize())]
        if any(_RANK[r.status] >= threshold for r in reports.values()):
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
