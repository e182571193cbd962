# tests/core/test_console_reporter.py
from seo_linter.engine.runner import TestRunner
from seo_linter.engine.routes import RouteConfig, RouteSettings, RuleOverride
from seo_linter.model import Page, Renderer
from seo_linter.reporting.console_reporter import ConsoleReporter
from seo_linter.rules.core import Rule, ok, warning, error
from seo_linter.rules.registry import RuleRegistry

URL = "https://example.com/"


def test_console_reporter_output(capsys):
    registry = RuleRegistry([
        Rule("passes", lambda doc, ctx: ok()),
        Rule("warns", lambda doc, ctx: warning("Watch out")),
        Rule("fails", lambda doc, ctx: error("Broken")),
    ])
    config = RouteConfig({URL: RouteSettings(overrides={
        "passes": RuleOverride(renderer=Renderer.CLIENT, validator=lambda doc, ctx: ok())
    })})
    page = Page.from_html(URL, "<html></html>")

    TestRunner(registry, route_config=config, listeners=[ConsoleReporter()]).run([page])
    out = capsys.readouterr().out

    assert "Begin testing..." in out
    assert f"  Testing: {URL}" in out
    assert "    ✓ passes (⚑ overriding parser, validator)" in out
    assert "    ⚑ warns\n" in out
    assert "    ✗ fails\n" in out
    assert "  1 passing" in out
    assert "  1 warnings" in out
    assert "  1 failing" in out
    # Waarschuwingen komen voor fouten in de samenvatting
    assert out.index(f"warns: {URL}\nWatch out") < out.index(f"fails: {URL}\nBroken")


def test_console_reporter_omits_zero_counts(capsys):
    registry = RuleRegistry([Rule("passes", lambda doc, ctx: ok())])
    TestRunner(registry, listeners=[ConsoleReporter()]).run([Page.from_html(URL, "")])
    out = capsys.readouterr().out

    assert "  1 passing" in out
    assert "warnings" not in out
    assert "failing" not in out
