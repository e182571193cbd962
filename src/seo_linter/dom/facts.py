# src/seo_linter/dom/facts.py
"""
Fact extractors shared by all rules.

Every function is a read-only query over a parsed document. Absence is
reported as None or an empty list, never as an exception, and an absent
attribute (None) is kept distinct from an empty one ("").
"""
from typing import Dict, List, Optional

from bs4 import BeautifulSoup


def get_title(doc: BeautifulSoup) -> Optional[str]:
    """Returns the trimmed document title, ignoring <title> elements inside inline SVGs."""
    for title_tag in doc.find_all('title'):
        if title_tag.find_parent('svg') is None:
            return title_tag.get_text().strip()
    return None


def get_h1s(doc: BeautifulSoup) -> List[str]:
    return [h1.get_text() for h1 in doc.find_all('h1')]


def get_description(doc: BeautifulSoup) -> Optional[str]:
    meta_desc = doc.find('meta', attrs={'name': 'description'})
    if meta_desc is None:
        return None
    return meta_desc.get('content')


def get_images(doc: BeautifulSoup) -> List[Dict[str, Optional[str]]]:
    """Returns src/alt pairs for every <img>; a missing attribute is None."""
    return [{"src": img.get('src'), "alt": img.get('alt')} for img in doc.find_all('img')]


def get_hrefs(doc: BeautifulSoup) -> List[str]:
    """
    Returns the href of every anchor, verbatim.

    Anchors without an href and `javascript:` pseudo-links are skipped;
    relative, fragment, scheme-relative and empty hrefs are kept as-is.
    """
    hrefs = []
    for anchor in doc.find_all('a'):
        href = anchor.get('href')
        if href is None:
            continue
        if href.startswith('javascript:'):
            continue
        hrefs.append(href)
    return hrefs


def get_canonicals(doc: BeautifulSoup, scope: Optional[str] = None) -> List[Optional[str]]:
    """
    Returns the href of every <link rel="canonical"> in document order.

    Args:
        doc: The parsed document.
        scope: Optional CSS selector restricting the search (e.g. 'head').

    Returns:
        A list of href values; None where the link has no href.
    """
    selector = "link[rel~=canonical]"
    if scope:
        # :is() keeps selector lists ('head, body') scoped as a whole
        selector = f":is({scope}) {selector}"
    return [link.get('href') for link in doc.select(selector)]
