# src/seo_linter/reporting/console_reporter.py
import sys
from typing import Optional, TextIO

from tqdm import tqdm

from seo_linter.engine.runner import RunListener
from seo_linter.model import RunReport


class ConsoleReporter(RunListener):
    """
    Prints linting progress and the final summary to the console.
    Lines are written through `tqdm.write()` so they do not break progress bars.
    """

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream

    def _write(self, line: str = "") -> None:
        tqdm.write(line, file=self.stream or sys.stdout)

    def run_begin(self) -> None:
        self._write("Begin testing...")

    def page_begin(self, url: str) -> None:
        self._write(f"  Testing: {url}")

    def rule_end(self, url, rule, is_error, is_warning, parser_overridden, validator_overridden) -> None:
        overrides = []
        if parser_overridden:
            overrides.append("parser")
        if validator_overridden:
            overrides.append("validator")
        suffix = f" (⚑ overriding {', '.join(overrides)})" if overrides else ""

        if is_error:
            mark = "✗"
        elif is_warning:
            mark = "⚑"
        else:
            mark = "✓"
        self._write(f"    {mark} {rule}{suffix}")

    def run_end(self, report: RunReport) -> None:
        self._write("\n")
        if report.success_count:
            self._write(f"  {report.success_count} passing")
        if report.warning_count:
            self._write(f"  {report.warning_count} warnings")
        if report.fail_count:
            self._write(f"  {report.fail_count} failing")
        self._write()

        for issue in list(report.warnings) + list(report.errors):
            self._write(f"{issue.rule}: {issue.url}")
            self._write(issue.message)
            self._write()
