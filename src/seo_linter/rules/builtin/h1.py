# src/seo_linter/rules/builtin/h1.py
from bs4 import BeautifulSoup

from seo_linter.dom.facts import get_h1s
from seo_linter.model import Renderer, RuleContext
from seo_linter.rules.core import Rule, rule_spec, collect_outcome


@rule_spec(name="h1", renderer=Renderer.CLIENT)
def check_h1(doc: BeautifulSoup, context: RuleContext):
    """
    Rule: a page has exactly one non-empty <h1>.
    Headings are usually rendered by the client, so this runs on the client document.
    """
    h1s = get_h1s(doc)
    errors, warnings = [], []

    if not h1s:
        errors.append("Document does not contain an <h1> tag")
    else:
        empty = sum(1 for text in h1s if not text.strip())
        if empty:
            errors.append(f"{empty} <h1> tag(s) are empty")
        if len(h1s) > 1:
            warnings.append(f"Document contains {len(h1s)} <h1> tags, expected one")

    return collect_outcome(errors, warnings)


RULE = Rule.from_function(check_h1)
