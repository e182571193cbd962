# src/seo_linter/dom/builder.py
from typing import Optional

from bs4 import BeautifulSoup


def parse_document(html: Optional[str]) -> BeautifulSoup:
    """
    Parses raw HTML into the document tree every fact extractor reads from.

    lxml builds the implied <html>/<head>/<body> elements the way a browser
    does, so head-less pages still expose their <title> and <link> tags
    under <head>. Empty or missing markup yields an empty document rather
    than an error, so extractors simply report absence.
    """
    if not html:
        return BeautifulSoup("", "lxml")

    # Basic cleanup of potentially dirty HTML (e.g., BOM)
    clean_html = html.replace('\ufeff', '').strip()
    return BeautifulSoup(clean_html, 'lxml')
