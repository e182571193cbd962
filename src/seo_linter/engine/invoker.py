# src/seo_linter/engine/invoker.py
import logging
from typing import Any

from seo_linter.engine.resolver import ResolvedInvocation
from seo_linter.model import (
    RuleContext,
    RuleOutcome,
    PassOutcome,
    WarningOutcome,
    ErrorOutcome,
)

logger = logging.getLogger(__name__)


class InvalidOutcomeError(TypeError):
    """Raised when a validator returns something other than a rule outcome."""


def coerce_outcome(raw: Any) -> RuleOutcome:
    """
    Normalizes a validator's return value to a RuleOutcome.

    Accepts outcome objects and the tagged records used at the plugin boundary:
    {"ok": True}, {"warning": "<message>"} and {"error": "<message>"}.
    """
    if isinstance(raw, (PassOutcome, WarningOutcome, ErrorOutcome)):
        return raw

    if isinstance(raw, dict) and len(raw) == 1:
        key, value = next(iter(raw.items()))
        if key == "ok" and value is True:
            return PassOutcome()
        if key == "warning" and isinstance(value, str):
            return WarningOutcome(message=value)
        if key == "error" and isinstance(value, str):
            return ErrorOutcome(message=value)

    raise InvalidOutcomeError(f"invalid rule outcome {raw!r}")


class RuleInvoker:
    """
    Runs one resolved rule against one page.

    A failing validator never aborts the run: exceptions and malformed return
    values are turned into an ErrorOutcome carrying the original failure.
    """

    def invoke(self, invocation: ResolvedInvocation) -> RuleOutcome:
        rule_name = invocation.rule.name
        page = invocation.page
        context = RuleContext(
            url=page.url,
            renderer=invocation.renderer,
            crawl_error=page.crawl_error
        )

        logger.debug("Running rule '%s' on %s (%s)", rule_name, page.url, invocation.renderer.value)
        try:
            raw = invocation.validator(invocation.document, context)
            return coerce_outcome(raw)
        except Exception as e:
            logger.warning("Rule '%s' failed internally on %s: %s", rule_name, page.url, e)
            logger.debug("Traceback for rule '%s'", rule_name, exc_info=True)
            return ErrorOutcome(message=f"Rule '{rule_name}' failed internally: {type(e).__name__}: {e}")
