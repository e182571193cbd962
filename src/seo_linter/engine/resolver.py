# src/seo_linter/engine/resolver.py
import logging
from typing import Callable, Optional

from bs4 import BeautifulSoup
from pydantic import BaseModel, ConfigDict

from seo_linter.engine.routes import RouteConfig
from seo_linter.model import Page, Renderer
from seo_linter.rules.core import Rule

logger = logging.getLogger(__name__)


class ResolvedInvocation(BaseModel):
    """The fully resolved decision for one (page, rule) pair, computed before the rule runs."""
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    rule: Rule
    page: Page
    renderer: Renderer
    requested_renderer: Renderer
    document: BeautifulSoup
    validator: Callable
    parser_overridden: bool = False
    validator_overridden: bool = False

    @property
    def used_fallback(self) -> bool:
        return self.renderer != self.requested_renderer


class OverrideResolver:
    """
    Decides, per (page, rule), whether the rule runs, against which rendering,
    and with which validator.
    """

    def __init__(self, route_config: Optional[RouteConfig] = None):
        self.route_config = route_config or RouteConfig()

    def resolve(self, page: Page, rule: Rule) -> Optional[ResolvedInvocation]:
        """
        Resolves the invocation for a rule on a page.

        Returns:
            The ResolvedInvocation, or None when the page's route excludes the rule.
        """
        settings = self.route_config.settings_for(page.url)
        if settings.excludes(rule.name):
            logger.debug("Skipping rule '%s' for %s (excluded by route config)", rule.name, page.url)
            return None

        override = settings.override_for(rule.name)
        override_renderer = override.renderer if override else None
        override_validator = override.validator if override else None

        requested = override_renderer or rule.default_renderer
        renderer = requested
        document = page.document_for(requested)
        if document is None:
            # Client rendering missing or failed: lint whatever the server delivered.
            renderer = Renderer.SERVER
            document = page.server_document
            logger.debug(
                "No %s document for %s, rule '%s' falls back to the server document",
                requested.value, page.url, rule.name
            )

        return ResolvedInvocation(
            rule=rule,
            page=page,
            renderer=renderer,
            requested_renderer=requested,
            document=document,
            validator=override_validator or rule.validate,
            parser_overridden=override_renderer is not None,
            validator_overridden=override_validator is not None
        )
