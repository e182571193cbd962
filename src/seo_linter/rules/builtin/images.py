# src/seo_linter/rules/builtin/images.py
from bs4 import BeautifulSoup

from seo_linter.dom.facts import get_images
from seo_linter.model import Renderer, RuleContext
from seo_linter.rules.core import Rule, rule_spec, collect_outcome


@rule_spec(name="img-alt", renderer=Renderer.CLIENT)
def check_alt_text(doc: BeautifulSoup, context: RuleContext):
    """Every image needs an alt attribute; an empty alt is only flagged as a warning."""
    errors, warnings = [], []

    for image in get_images(doc):
        src = image["src"] if image["src"] is not None else "(no src)"
        # alt=None means the attribute is missing
        if image["alt"] is None:
            errors.append(f"Image missing alt attribute: {src}")
        # alt="" is valid for decorative images, but worth a look
        elif not image["alt"].strip():
            warnings.append(f"Image has empty alt text: {src}")

    return collect_outcome(errors, warnings)


RULE = Rule.from_function(check_alt_text)
