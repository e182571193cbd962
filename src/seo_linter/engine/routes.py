# src/seo_linter/engine/routes.py
import logging
from fnmatch import fnmatchcase
from typing import Callable, Dict, Optional, Set
from urllib.parse import urlparse

from pydantic import BaseModel, ConfigDict, Field

from seo_linter.model import Renderer

logger = logging.getLogger(__name__)


class RuleOverride(BaseModel):
    """Per-route replacement of a rule's rendering and/or validator."""
    model_config = ConfigDict(frozen=True)

    renderer: Optional[Renderer] = None
    validator: Optional[Callable] = None


class RouteSettings(BaseModel):
    """Lint settings that apply to every page matching one route pattern."""
    model_config = ConfigDict(frozen=True)

    excluded_rules: Set[str] = Field(default_factory=set)
    overrides: Dict[str, RuleOverride] = Field(default_factory=dict)

    def excludes(self, rule_name: str) -> bool:
        return rule_name in self.excluded_rules

    def override_for(self, rule_name: str) -> Optional[RuleOverride]:
        return self.overrides.get(rule_name)


class RouteConfig:
    """
    Ordered mapping of route patterns to RouteSettings.

    A pattern matches a page when it equals the URL, or when it matches the
    full URL or the URL path as a glob ('/blog/*'). The first matching
    pattern wins; pages without a match get empty settings.
    """

    def __init__(self, routes: Optional[Dict[str, RouteSettings]] = None):
        self._routes: Dict[str, RouteSettings] = dict(routes or {})
        self._default = RouteSettings()

    @property
    def patterns(self):
        return list(self._routes.keys())

    def add_route(self, pattern: str, settings: RouteSettings) -> None:
        self._routes[pattern] = settings

    def settings_for(self, url: str) -> RouteSettings:
        path = urlparse(url).path or "/"
        for pattern, settings in self._routes.items():
            if pattern == url or fnmatchcase(url, pattern) or fnmatchcase(path, pattern):
                return settings
        return self._default

    def __len__(self) -> int:
        return len(self._routes)
