# tests/core/test_route_config_manager.py
import json

import pytest

from seo_linter.managers.route_config_manager import (
    RouteConfigError,
    build_route_config,
    load_route_config,
    resolve_validator,
)
from seo_linter.model import Renderer
from seo_linter.rules.builtin.title import check_title

CONFIG_DATA = {
    "routes": {
        "https://example.com/": {"rules": ["h1", "hrefs"]},
        "/blog/*": {
            "overrides": {
                "title": {"renderer": "client"},
                "description": {"validator": "seo_linter.rules.builtin.title:check_title"},
            }
        },
    }
}


def test_build_route_config():
    config = build_route_config(CONFIG_DATA)

    assert config.patterns == ["https://example.com/", "/blog/*"]

    home = config.settings_for("https://example.com/")
    assert home.excluded_rules == {"h1", "hrefs"}

    blog = config.settings_for("https://example.com/blog/first-post")
    assert blog.override_for("title").renderer == Renderer.CLIENT
    assert blog.override_for("title").validator is None
    assert blog.override_for("description").validator is check_title


def test_empty_config():
    assert len(build_route_config({})) == 0


def test_load_route_config_from_file(tmp_path):
    path = tmp_path / "routes.json"
    path.write_text(json.dumps(CONFIG_DATA))
    assert load_route_config(path).patterns == ["https://example.com/", "/blog/*"]


def test_load_route_config_invalid_json(tmp_path):
    path = tmp_path / "routes.json"
    path.write_text("{not json")
    with pytest.raises(RouteConfigError):
        load_route_config(path)


def test_resolve_validator_accepts_callables():
    assert resolve_validator(check_title) is check_title


@pytest.mark.parametrize("reference", [
    "no_colon_here",
    "seo_linter.rules.builtin.title:does_not_exist",
    "no.such.module:func",
    "seo_linter.rules.builtin.title:RULE.name",
    42,
])
def test_resolve_validator_errors(reference):
    with pytest.raises(RouteConfigError):
        resolve_validator(reference)


@pytest.mark.parametrize("data", [
    {"routes": ["/blog"]},
    {"routes": {"/blog": "all"}},
    {"routes": {"/blog": {"rules": "h1"}}},
    {"routes": {"/blog": {"rules": 5}}},
    {"routes": {"/blog": {"overrides": ["title"]}}},
    {"routes": {"/blog": {"overrides": {"title": {"renderer": "edge"}}}}},
])
def test_malformed_config_raises(data):
    with pytest.raises(RouteConfigError):
        build_route_config(data)
