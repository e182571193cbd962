# src/seo_linter/rules/builtin/hrefs.py
from bs4 import BeautifulSoup

from seo_linter.dom.facts import get_hrefs
from seo_linter.model import Renderer, RuleContext
from seo_linter.rules.core import Rule, rule_spec, collect_outcome


@rule_spec(name="hrefs", renderer=Renderer.CLIENT)
def check_hrefs(doc: BeautifulSoup, context: RuleContext):
    """Flags anchors crawlers cannot follow cleanly (empty or whitespace-containing hrefs)."""
    warnings = []

    for href in get_hrefs(doc):
        if not href.strip():
            warnings.append("Link href is empty or whitespace")
        elif any(c.isspace() for c in href.strip()):
            warnings.append(f"Link href contains whitespace: '{href}'")

    return collect_outcome([], warnings)


RULE = Rule.from_function(check_hrefs)
