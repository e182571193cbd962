# tests/core/test_facts.py
import pytest

from seo_linter.dom.builder import parse_document
from seo_linter.dom.facts import (
    get_title,
    get_h1s,
    get_description,
    get_images,
    get_hrefs,
    get_canonicals,
)


def doc(html):
    return parse_document(html)


# --- get_h1s ---

def test_get_h1s_multiple():
    assert get_h1s(doc('<html><body><h1>Foo</h1><h1>Bar</h1></body></html>')) == ['Foo', 'Bar']


def test_get_h1s_none():
    assert get_h1s(doc('<html><body></body></html>')) == []


def test_get_h1s_single():
    assert get_h1s(doc('<html><body><h1>Baz</h1></body></html>')) == ['Baz']


def test_get_h1s_empty_element_is_kept():
    assert get_h1s(doc('<html><body><h1></h1></body></html>')) == ['']


# --- get_title ---

def test_get_title_present():
    assert get_title(doc('<html><head><title>Title!</title></head><body></body></html>')) == 'Title!'


def test_get_title_absent():
    assert get_title(doc('<html><head></head><body></body></html>')) is None


def test_get_title_empty():
    assert get_title(doc('<html><head><title></title></head><body></body></html>')) == ''


def test_get_title_ignores_svg_title():
    """Een <title> binnen een inline svg is geen paginatitel."""
    html = (
        '<html><head><title>Page title</title></head><body>'
        '<svg xmlns="http://www.w3.org/2000/svg"><title>This is an svg title</title></svg>'
        '</body></html>'
    )
    assert get_title(doc(html)) == 'Page title'


def test_get_title_only_svg_title():
    html = '<html><head></head><body><svg><title>Icon</title></svg></body></html>'
    assert get_title(doc(html)) is None


def test_get_title_is_trimmed():
    html = (
        '<html><head><title>      Page title      </title></head><body>'
        '<svg xmlns="http://www.w3.org/2000/svg"><title>This is an svg title</title></svg>'
        '</body></html>'
    )
    assert get_title(doc(html)) == 'Page title'


# --- get_description ---

def test_get_description_present():
    html = '<html><head><meta name="description" content="This is the meta description" /></head><body></body></html>'
    assert get_description(doc(html)) == 'This is the meta description'


def test_get_description_absent():
    assert get_description(doc('<html><head></head><body></body></html>')) is None


def test_get_description_empty():
    html = '<html><head><meta name="description" content="" /></head><body></body></html>'
    assert get_description(doc(html)) == ''


# --- get_images ---

def test_get_images_multiple():
    html = '<html><head></head><body><img src="foo.png" alt="foo"><img src="bar.png" alt="bar"></body></html>'
    assert get_images(doc(html)) == [{'src': 'foo.png', 'alt': 'foo'}, {'src': 'bar.png', 'alt': 'bar'}]


def test_get_images_none():
    assert get_images(doc('<html><head></head><body></body></html>')) == []


def test_get_images_missing_attributes():
    assert get_images(doc('<html><head></head><body><img></body></html>')) == [{'src': None, 'alt': None}]


def test_get_images_empty_attributes():
    """Een leeg attribuut is iets anders dan een ontbrekend attribuut."""
    assert get_images(doc('<html><head></head><body><img src="" alt=""></body></html>')) == [{'src': '', 'alt': ''}]


# --- get_hrefs ---

@pytest.mark.parametrize("body, expected", [
    ('<a>test</a>', []),
    ('<a href="javascript:alert(1)">Alert 1</a>', []),
    ('', []),
    ('<a href="https://www.zillow.com/">zillow</a><a href="http://www.example.com/">Example</a>',
     ['https://www.zillow.com/', 'http://www.example.com/']),
    ('<a href="/foo">/foo</a>', ['/foo']),
    ('<a href="bar.html">bar.html</a>', ['bar.html']),
    ('<a href="#anchor">#anchor</a>', ['#anchor']),
    ('<a href="//cdn.example.com/x">cdn</a>', ['//cdn.example.com/x']),
    ('<a href="">#anchor</a>', ['']),
    ('<a href="JavaScript:alert(1)">x</a>', ['JavaScript:alert(1)']),
    ('<a href=" javascript:void(0)">x</a>', [' javascript:void(0)']),
])
def test_get_hrefs(body, expected):
    assert get_hrefs(doc(f'<html><head></head><body>{body}</body></html>')) == expected


# --- get_canonicals ---

def test_get_canonicals_none():
    assert get_canonicals(doc('<html><head></head><body></body></html>')) == []


def test_get_canonicals_without_href():
    assert get_canonicals(doc('<html><head><link rel="canonical" /></head><body></body></html>')) == [None]


def test_get_canonicals_empty_href():
    assert get_canonicals(doc('<html><head><link rel="canonical" href="" /></head><body></body></html>')) == ['']


def test_get_canonicals_whole_document():
    html = '<html><head><link rel="canonical" href="foo" /></head><body><link rel="canonical" href="bar" /></body></html>'
    assert get_canonicals(doc(html)) == ['foo', 'bar']


def test_get_canonicals_limited_to_scope():
    html = '<html><head><link rel="canonical" href="foo" /></head><body><link rel="canonical" href="bar" /></body></html>'
    assert get_canonicals(doc(html), 'head') == ['foo']


def test_get_canonicals_selector_list_scope():
    html = '<html><head><link rel="canonical" href="foo" /></head><body><link rel="canonical" href="bar" /></body></html>'
    assert get_canonicals(doc(html), 'head, body') == ['foo', 'bar']


def test_get_canonicals_in_implied_head():
    """Zonder <head>-tag horen title en link toch bij de impliciete head."""
    document = doc('<!doctype html><title>Some page title</title><link rel="canonical" href="/x"><p>hi</p>')
    assert get_title(document) == 'Some page title'
    assert get_canonicals(document, 'head') == ['/x']


# --- purity ---

def test_extractors_are_repeatable_and_do_not_mutate():
    """Twee keer extraheren geeft hetzelfde resultaat en laat het document ongemoeid."""
    document = doc(
        '<html><head><title> T </title><meta name="description" content="d">'
        '<link rel="canonical" href="/c"></head>'
        '<body><h1>A</h1><img src="a.png"><a href="/x">x</a></body></html>'
    )
    before = str(document)
    for extractor in (get_title, get_h1s, get_description, get_images, get_hrefs, get_canonicals):
        assert extractor(document) == extractor(document)
    assert str(document) == before


def test_parse_document_handles_empty_markup():
    empty = parse_document(None)
    assert get_title(empty) is None
    assert get_h1s(empty) == []
    assert get_canonicals(empty, 'head') == []
