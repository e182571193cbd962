# src/seo_linter/managers/route_config_manager.py
"""
Builds a RouteConfig from plain configuration data.

Expected structure (JSON or an equivalent dict):

    {
      "routes": {
        "/blog/*": {
          "rules": ["h1"],
          "overrides": {
            "title": {"renderer": "client"},
            "description": {"validator": "my_rules.lenient:check_description"}
          }
        }
      }
    }

"rules" lists the rules excluded for the route. A validator is either a
callable or a "module:attribute" reference resolved with importlib.
"""
import importlib
import json
import logging
from pathlib import Path
from typing import Any, Callable, Dict, Mapping, Union

from pydantic import ValidationError

from seo_linter.engine.routes import RouteConfig, RouteSettings, RuleOverride
from seo_linter.model import Renderer

logger = logging.getLogger(__name__)


class RouteConfigError(Exception):
    """The route configuration is malformed."""


def resolve_validator(reference: Union[str, Callable]) -> Callable:
    """Turns a 'package.module:function' reference into the callable it names."""
    if callable(reference):
        return reference
    if not isinstance(reference, str) or ":" not in reference:
        raise RouteConfigError(f"Validator reference must look like 'module:function', got {reference!r}")

    module_name, _, attr_path = reference.partition(":")
    try:
        target: Any = importlib.import_module(module_name)
        for attr in attr_path.split("."):
            target = getattr(target, attr)
    except (ImportError, AttributeError) as e:
        raise RouteConfigError(f"Cannot resolve validator '{reference}': {e}") from e

    if not callable(target):
        raise RouteConfigError(f"Validator '{reference}' is not callable.")
    return target


def _build_override(rule_name: str, data: Any) -> RuleOverride:
    if not isinstance(data, Mapping):
        raise RouteConfigError(f"Override for rule '{rule_name}' must be a mapping.")

    renderer = data.get("renderer")
    if renderer is not None:
        try:
            renderer = Renderer(renderer)
        except ValueError:
            raise RouteConfigError(
                f"Unknown renderer {renderer!r} for rule '{rule_name}' (expected 'server' or 'client')."
            ) from None

    validator = data.get("validator")
    if validator is not None:
        validator = resolve_validator(validator)

    return RuleOverride(renderer=renderer, validator=validator)


def _build_settings(pattern: str, data: Any) -> RouteSettings:
    if not isinstance(data, Mapping):
        raise RouteConfigError(f"Settings for route '{pattern}' must be a mapping.")

    excluded = data.get("rules") or []
    if not isinstance(excluded, (list, tuple, set)) or not all(isinstance(name, str) for name in excluded):
        raise RouteConfigError(f"'rules' for route '{pattern}' must be a list of rule names.")

    overrides_data = data.get("overrides") or {}
    if not isinstance(overrides_data, Mapping):
        raise RouteConfigError(f"'overrides' for route '{pattern}' must be a mapping.")

    overrides = {name: _build_override(name, value) for name, value in overrides_data.items()}
    try:
        return RouteSettings(excluded_rules=set(excluded), overrides=overrides)
    except ValidationError as e:
        raise RouteConfigError(f"Invalid settings for route '{pattern}': {e}") from e


def build_route_config(data: Mapping[str, Any]) -> RouteConfig:
    """Builds a RouteConfig, keeping the routes in the order they were declared."""
    routes = (data or {}).get("routes") or {}
    if not isinstance(routes, Mapping):
        raise RouteConfigError("'routes' must be a mapping of URL patterns to settings.")

    config = RouteConfig()
    for pattern, settings in routes.items():
        config.add_route(pattern, _build_settings(pattern, settings))
        logger.debug("Route '%s' configured", pattern)

    logger.info("Route config built with %d route(s)", len(config))
    return config


def load_route_config(path: Union[str, Path]) -> RouteConfig:
    """Reads a JSON route configuration file."""
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            data: Dict[str, Any] = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise RouteConfigError(f"Failed to read route config {path}: {e}") from e
    return build_route_config(data)
