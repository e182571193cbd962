# src/seo_linter/app.py
"""
Host-side wiring: builds the rule registry (built-ins plus custom rules),
the route config and the runner, then lints already crawled pages.
"""
import logging
from pathlib import Path
from typing import Any, Iterable, Mapping, Optional, Sequence, Union

from seo_linter.engine.routes import RouteConfig
from seo_linter.engine.runner import RunListener, TestRunner
from seo_linter.managers.route_config_manager import build_route_config, load_route_config
from seo_linter.managers.rule_loader import RuleLoader
from seo_linter.model import Page, RunReport
from seo_linter.reporting.console_reporter import ConsoleReporter
from seo_linter.rules.registry import RuleRegistry
from seo_linter.utils.config_loader import get_nested_config
from seo_linter.utils.configure_logging import configure_logger
from seo_linter.utils.path_utils import PathUtils

logger = logging.getLogger(__name__)


def setup_logging() -> None:
    """Initializes logging based on settings.json."""
    configure_logger(
        get_nested_config("debug.level", "INFO"),
        module_specific_levels=get_nested_config("debug.modules"),
        silenced_loggers=get_nested_config("debug.silenced")
    )


def build_registry(rules_dir: Optional[Union[str, Path]] = None) -> RuleRegistry:
    """
    Creates the registry with every built-in rule and, when given, the custom
    rules from `rules_dir` (which may shadow built-ins).

    Raises:
        RuleLoadError: If the custom rules cannot be loaded.
    """
    custom_rules = []
    if rules_dir:
        custom_rules = RuleLoader(PathUtils.resolve_user_path(str(rules_dir))).load()
    return RuleRegistry.with_builtins(custom_rules)


def build_runner(
        rules_dir: Optional[Union[str, Path]] = None,
        route_config: Optional[Union[RouteConfig, Mapping[str, Any], str, Path]] = None,
        listeners: Optional[Sequence[RunListener]] = None
) -> TestRunner:
    """
    Assembles a TestRunner.

    `route_config` may be a ready RouteConfig, a configuration mapping, or a
    path to a JSON file. Without listeners, progress goes to a ConsoleReporter.
    """
    if route_config is None or isinstance(route_config, RouteConfig):
        config = route_config
    elif isinstance(route_config, Mapping):
        config = build_route_config(route_config)
    else:
        config = load_route_config(PathUtils.resolve_user_path(str(route_config)))

    return TestRunner(
        build_registry(rules_dir),
        route_config=config,
        listeners=[ConsoleReporter()] if listeners is None else listeners
    )


def lint(
        pages: Iterable[Page],
        rules_dir: Optional[Union[str, Path]] = None,
        route_config: Optional[Union[RouteConfig, Mapping[str, Any], str, Path]] = None,
        listeners: Optional[Sequence[RunListener]] = None
) -> RunReport:
    """Lints crawled pages and returns the report; use `report.exit_code` for the process status."""
    runner = build_runner(rules_dir=rules_dir, route_config=route_config, listeners=listeners)
    report = runner.run(pages)
    if report.fail_count:
        logger.warning("%d rule(s) failed", report.fail_count)
    return report
