# src/seo_linter/engine/runner.py
import logging
from enum import Enum
from typing import Iterable, Iterator, List, Literal, Optional, Sequence, Union

from pydantic import BaseModel, ConfigDict

from seo_linter.engine.invoker import RuleInvoker
from seo_linter.engine.resolver import OverrideResolver
from seo_linter.engine.routes import RouteConfig
from seo_linter.model import (
    Page,
    RuleOutcome,
    OutcomeRecord,
    IssueRecord,
    RunReport,
)
from seo_linter.rules.registry import RuleRegistry

logger = logging.getLogger(__name__)


class RunState(str, Enum):
    IDLE = "idle"
    RUNNING = "running"
    COMPLETED = "completed"


# --- Event records (emitted in strict order: RunBegin, (PageBegin, RuleEnd*, PageEnd)*, RunEnd) ---

class _Event(BaseModel):
    model_config = ConfigDict(frozen=True)


class RunBegin(_Event):
    type: Literal["run_begin"] = "run_begin"


class PageBegin(_Event):
    type: Literal["page_begin"] = "page_begin"
    url: str


class RuleEnd(_Event):
    type: Literal["rule_end"] = "rule_end"
    url: str
    rule: str
    is_error: bool
    is_warning: bool
    parser_overridden: bool
    validator_overridden: bool


class PageEnd(_Event):
    type: Literal["page_end"] = "page_end"
    url: str


class RunEnd(_Event):
    type: Literal["run_end"] = "run_end"
    report: RunReport


RunEvent = Union[RunBegin, PageBegin, RuleEnd, PageEnd, RunEnd]


class RunListener:
    """
    Receives progress notifications from a TestRunner.
    Subclasses override only the callbacks they care about.
    """

    def run_begin(self) -> None:
        pass

    def page_begin(self, url: str) -> None:
        pass

    def rule_end(
            self,
            url: str,
            rule: str,
            is_error: bool,
            is_warning: bool,
            parser_overridden: bool,
            validator_overridden: bool
    ) -> None:
        pass

    def page_end(self, url: str) -> None:
        pass

    def run_end(self, report: RunReport) -> None:
        pass


class _ReportBuilder:
    """Mutable accumulator used while a run is in progress."""

    def __init__(self):
        self.success_count = 0
        self.warning_count = 0
        self.fail_count = 0
        self.outcomes: List[OutcomeRecord] = []
        self.warnings: List[IssueRecord] = []
        self.errors: List[IssueRecord] = []

    def add(self, url: str, rule: str, outcome: RuleOutcome) -> None:
        self.outcomes.append(OutcomeRecord(url=url, rule=rule, outcome=outcome))
        if outcome.is_error:
            self.fail_count += 1
            self.errors.append(IssueRecord(url=url, rule=rule, message=outcome.message))
        elif outcome.is_warning:
            self.warning_count += 1
            self.warnings.append(IssueRecord(url=url, rule=rule, message=outcome.message))
        else:
            self.success_count += 1

    def build(self) -> RunReport:
        return RunReport(
            success_count=self.success_count,
            warning_count=self.warning_count,
            fail_count=self.fail_count,
            outcomes=tuple(self.outcomes),
            warnings=tuple(self.warnings),
            errors=tuple(self.errors)
        )


class TestRunner:
    """
    Orchestrates a linting run: every page against every applicable rule.

    Pages are processed in the order supplied and rules in registry order,
    so the same input always yields the same event sequence and report.
    A runner performs exactly one run.
    """
    __test__ = False  # not a pytest test class

    def __init__(
            self,
            registry: RuleRegistry,
            route_config: Optional[RouteConfig] = None,
            listeners: Sequence[RunListener] = (),
            invoker: Optional[RuleInvoker] = None
    ):
        self.registry = registry
        self.resolver = OverrideResolver(route_config)
        self.invoker = invoker or RuleInvoker()
        self.listeners: List[RunListener] = list(listeners)
        self.state = RunState.IDLE
        self.report: Optional[RunReport] = None

    def add_listener(self, listener: RunListener) -> None:
        self.listeners.append(listener)

    def iter_events(self, pages: Iterable[Page]) -> Iterator[RunEvent]:
        """
        Performs the run lazily, yielding one event record per step.

        The final event is a RunEnd carrying the finalized report.
        """
        if self.state != RunState.IDLE:
            raise RuntimeError(f"TestRunner cannot start a run in state '{self.state.value}'.")

        self.state = RunState.RUNNING
        rules = self.registry.list_rules()
        builder = _ReportBuilder()
        logger.info("Begin testing with %d rule(s)...", len(rules))
        yield RunBegin()

        for page in pages:
            yield PageBegin(url=page.url)

            for rule in rules:
                invocation = self.resolver.resolve(page, rule)
                if invocation is None:
                    continue

                outcome = self.invoker.invoke(invocation)
                builder.add(page.url, rule.name, outcome)

                yield RuleEnd(
                    url=page.url,
                    rule=rule.name,
                    is_error=outcome.is_error,
                    is_warning=outcome.is_warning,
                    parser_overridden=invocation.parser_overridden,
                    validator_overridden=invocation.validator_overridden
                )

            yield PageEnd(url=page.url)

        self.report = builder.build()
        self.state = RunState.COMPLETED
        logger.info(
            "Testing complete: %d passing, %d warnings, %d failing",
            self.report.success_count, self.report.warning_count, self.report.fail_count
        )
        yield RunEnd(report=self.report)

    def run(self, pages: Iterable[Page]) -> RunReport:
        """Runs all pages, notifying every listener, and returns the finalized report."""
        for event in self.iter_events(pages):
            self._dispatch(event)
        return self.report

    def _dispatch(self, event: RunEvent) -> None:
        for listener in self.listeners:
            if isinstance(event, RuleEnd):
                listener.rule_end(
                    event.url,
                    event.rule,
                    event.is_error,
                    event.is_warning,
                    event.parser_overridden,
                    event.validator_overridden
                )
            elif isinstance(event, PageBegin):
                listener.page_begin(event.url)
            elif isinstance(event, PageEnd):
                listener.page_end(event.url)
            elif isinstance(event, RunBegin):
                listener.run_begin()
            elif isinstance(event, RunEnd):
                listener.run_end(event.report)
