# src/seo_linter/rules/builtin/canonical.py
from bs4 import BeautifulSoup

from seo_linter.dom.facts import get_canonicals
from seo_linter.model import Renderer, RuleContext
from seo_linter.rules.core import Rule, rule_spec, collect_outcome


@rule_spec(name="canonical", renderer=Renderer.SERVER)
def check_canonical(doc: BeautifulSoup, context: RuleContext):
    """Ensures exactly one canonical URL is defined in <head>."""
    errors, warnings = [], []

    head_canonicals = get_canonicals(doc, "head")
    all_canonicals = get_canonicals(doc)

    if not head_canonicals:
        errors.append("Document missing canonical link in <head>")
    elif len(head_canonicals) > 1:
        errors.append(f"Document has {len(head_canonicals)} canonical links in <head>, expected one")
    elif head_canonicals[0] is None:
        errors.append("Canonical link has no href attribute")
    elif not head_canonicals[0].strip():
        errors.append("Canonical tag present but href is empty")

    outside_head = len(all_canonicals) - len(head_canonicals)
    if outside_head > 0:
        warnings.append(f"{outside_head} canonical link(s) found outside <head> are ignored by search engines")

    return collect_outcome(errors, warnings)


RULE = Rule.from_function(check_canonical)
