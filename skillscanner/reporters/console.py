from colorama import init as colorama_init, Fore, Style
from datetime import datetime

from skillscanner.core.models import SecurityReport
colorama_init(autoreset=True)

STATUS_COLORS = {"green": Fore.GREEN, "yellow": Fore.YELLOW,
                 "orange": Fore.LIGHTRED_EX, "red": Fore.RED}
SEVERITY_COLORS = {"critical": Fore.RED, "high": Fore.LIGHTRED_EX,
                   "medium": Fore.YELLOW, "low": Fore.GREEN, "info": Fore.CYAN}


class Log:
    def __init__(self, verbose: int = 1):
        self.verbose = verbose

    def _time(self):
        return datetime.now().strftime("[%H:%M:%S]")

    def _fmt(self, level: str, color: str):
        return f"{self._time()} {color}[{level}]{Style.RESET_ALL}"

    def info(self, msg: str):
        if self.verbose >= 1:
            print(f"{self._fmt('INFO', Fore.CYAN)} {msg}")

    def warn(self, msg: str):
        if self.verbose >= 0:
            print(f"{self._fmt('WARNING', Fore.YELLOW)} {msg}")

    def ok(self, msg: str):
        print(f"{self._fmt('SUCCESS', Fore.GREEN)} {msg}")

    def fail(self, msg: str):
        print(f"{self._fmt('FAIL', Fore.RED)} {msg}")

    def debug(self, msg: str):
        if self.verbose >= 2:
            print(f"{self._fmt('DEBUG', Fore.MAGENTA)} {msg}")

    def report(self, rep: SecurityReport):
        col = STATUS_COLORS.get(rep.status_color.value, Fore.WHITE)
        print(f"{self._fmt(rep.status.value.upper(), col)} {Style.BRIGHT}{rep.skill_id}"
              f"{Style.RESET_ALL} {rep.confidence.label} "
              f"{Style.DIM}(weight {rep.total_weight}){Style.RESET_ALL}")
        print(f"    {rep.summary}")
        for detail in rep.details.values():
            print(f"    {Style.BRIGHT}{detail.label}{Style.RESET_ALL}")
            for f in detail.findings:
                sev_col = SEVERITY_COLORS.get(f.severity.value, Fore.WHITE)
                print(f"      {sev_col}{f.severity.value:<8}{Style.RESET_ALL} {f.label} "
                      f"{Style.DIM}x{f.count} +{f.weight}{Style.RESET_ALL}")
