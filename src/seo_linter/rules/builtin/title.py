# src/seo_linter/rules/builtin/title.py
from bs4 import BeautifulSoup

from seo_linter.dom.facts import get_title
from seo_linter.model import Renderer, RuleContext
from seo_linter.rules.core import Rule, rule_spec, ok, warning, error
from seo_linter.utils.config_loader import get_nested_config


@rule_spec(name="title", renderer=Renderer.SERVER)
def check_title(doc: BeautifulSoup, context: RuleContext):
    """Validates the presence and length of the <title> tag."""
    title = get_title(doc)
    if title is None:
        return error("Document missing <title> tag")
    if not title:
        return error("Title tag is present but empty")

    min_len = get_nested_config("rules.title.min_length", 10)
    max_len = get_nested_config("rules.title.max_length", 60)

    if len(title) < min_len:
        return warning(f"Title too short ({len(title)} < {min_len}): '{title}'")
    if len(title) > max_len:
        return warning(f"Title too long ({len(title)} > {max_len}): '{title[:50]}...'")
    return ok()


RULE = Rule.from_function(check_title)
