# src/seo_linter/rules/builtin/description.py
from bs4 import BeautifulSoup

from seo_linter.dom.facts import get_description
from seo_linter.model import Renderer, RuleContext
from seo_linter.rules.core import Rule, rule_spec, ok, warning, error
from seo_linter.utils.config_loader import get_nested_config


@rule_spec(name="description", renderer=Renderer.SERVER)
def check_description(doc: BeautifulSoup, context: RuleContext):
    """Validates the presence and length of the meta description."""
    description = get_description(doc)
    if description is None:
        return error("Document missing meta description")

    text = description.strip()
    if not text:
        return error("Meta description present but empty")

    min_len = get_nested_config("rules.description.min_length", 50)
    max_len = get_nested_config("rules.description.max_length", 160)

    if len(text) < min_len:
        return warning(f"Meta description too short ({len(text)} < {min_len}): '{text}'")
    if len(text) > max_len:
        return warning(f"Meta description too long ({len(text)} > {max_len}): '{text[:50]}...'")
    return ok()


RULE = Rule.from_function(check_description)
