"""
Tests for the tokenizer and the DC meta tag extractor.

The extractor is exercised both directly (feeding handle_starttag by hand,
so attribute casing and ordering are under our control) and through the
BeautifulSoup-backed Tokenizer.
"""

import logging

import pytest

from html_dublincore.extractor import Extractor
from html_dublincore.tokenizer import StartTagHandler, Tokenizer, detect_charset_from_bytes
from html_dublincore.exceptions import TokenizerError
from html_dublincore.schemas import DC_ELEMENTS


class RecordingHandler(StartTagHandler):
    """Remembers every start tag it is given."""

    def __init__(self):
        self.tags = []

    def handle_starttag(self, tag, attrs):
        self.tags.append((tag, attrs))


# --- Tokenizer ---

def test_tokenizer_reports_start_tags_in_document_order():
    handler = RecordingHandler()
    html = '<div><p class="a b">x</p><meta name="DC.Title" content="T"><br></div>'

    count = Tokenizer(features="html.parser").feed(html, handler)

    assert [tag for tag, _ in handler.tags] == ["div", "p", "meta", "br"]
    assert count == 4


def test_tokenizer_keeps_attribute_values_verbatim():
    handler = RecordingHandler()
    Tokenizer(features="html.parser").feed('<p class="a b" data-x="Y">x</p>', handler)

    _, attrs = handler.tags[0]
    assert attrs == [("class", "a b"), ("data-x", "Y")]


@pytest.mark.parametrize("backend", ["html5lib", "lxml", "html.parser"])
def test_every_backend_sees_meta_tags(backend):
    handler = RecordingHandler()
    html = '<html><head><meta name="DC.Title" content="T"></head><body><p>x</p></body></html>'

    Tokenizer(features=backend).feed(html, handler)

    metas = [attrs for tag, attrs in handler.tags if tag == "meta"]
    assert metas == [[("name", "DC.Title"), ("content", "T")]]


def test_default_chain_starts_with_html5lib():
    assert Tokenizer().backends == ("html5lib", "lxml", "html.parser")
    assert Tokenizer(features="lxml").backends == ("lxml",)


def test_unknown_backend_raises_tokenizer_error():
    with pytest.raises(TokenizerError) as exc_info:
        Tokenizer(features="no-such-parser").feed("<p>x</p>", RecordingHandler())

    assert exc_info.value.backends == ["no-such-parser"]
    assert "no-such-parser" in exc_info.value.details["errors"]


def test_detect_charset_from_meta_charset():
    raw = b'<html><head><meta charset="UTF-8"></head></html>'
    assert detect_charset_from_bytes(raw) == "utf-8"


def test_detect_charset_from_http_equiv_applies_whatwg_mapping():
    raw = b'<meta http-equiv="Content-Type" content="text/html; charset=ISO-8859-1">'
    assert detect_charset_from_bytes(raw) == "windows-1252"


def test_detect_charset_defaults_to_utf8():
    assert detect_charset_from_bytes(b"<html><body>plain</body></html>") == "utf-8"


# --- Extractor (direct events) ---

def test_extractor_starts_with_every_vocabulary_name():
    extractor = Extractor()
    assert list(extractor.elements) == list(DC_ELEMENTS)
    assert all(found == [] for found in extractor.elements.values())
    assert extractor.errors == []


def test_non_meta_tags_are_ignored():
    extractor = Extractor()
    extractor.handle_starttag("link", [("name", "DC.Title"), ("content", "T")])

    assert extractor.elements["title"] == []
    assert extractor.errors == []


def test_attribute_names_are_case_insensitive():
    extractor = Extractor()
    extractor.handle_starttag("META", [("NAME", "DC.Title"), ("Content", "Mixed Case"), ("LANG", "en")])

    [title] = extractor.elements["title"]
    assert title.content == "Mixed Case"
    assert title.language == "en"


def test_meta_without_name_is_ignored_silently():
    extractor = Extractor()
    extractor.handle_starttag("meta", [("charset", "utf-8")])
    extractor.handle_starttag("meta", [("http-equiv", "refresh"), ("content", "5")])

    assert sum(len(v) for v in extractor.elements.values()) == 0
    assert extractor.errors == []


@pytest.mark.parametrize("name", ["description", "og.title", "DCTERMS.title", "schema.DC.Title"])
def test_other_namespaces_are_ignored_silently(name):
    extractor = Extractor()
    extractor.handle_starttag("meta", [("name", name), ("content", "x")])

    assert sum(len(v) for v in extractor.elements.values()) == 0
    assert extractor.errors == []


def test_unknown_element_is_reported_and_skipped():
    extractor = Extractor()
    extractor.handle_starttag("meta", [("name", "DC.Bogus"), ("content", "x")])

    assert sum(len(v) for v in extractor.elements.values()) == 0
    assert extractor.errors == ["invalid element: Bogus found"]


def test_missing_content_is_reported_and_skipped():
    extractor = Extractor()
    extractor.handle_starttag("meta", [("name", "DC.Title")])

    assert extractor.elements["title"] == []
    assert extractor.errors == ["element title lacks content"]


def test_empty_content_attribute_still_counts_as_content():
    extractor = Extractor()
    extractor.handle_starttag("meta", [("name", "DC.Title"), ("content", "")])

    assert len(extractor.elements["title"]) == 1
    assert extractor.errors == []


def test_qualifier_keeps_its_original_case():
    extractor = Extractor()
    extractor.handle_starttag("meta", [("name", "dc.IDENTIFIER.ISBN"), ("content", "0-123")])

    [identifier] = extractor.elements["identifier"]
    assert identifier.name == "identifier"
    assert identifier.qualifier == "ISBN"


def test_qualifier_keeps_extra_dots():
    extractor = Extractor()
    extractor.handle_starttag("meta", [("name", "DC.Relation.isPartOf.v2"), ("content", "x")])

    assert extractor.elements["relation"][0].qualifier == "isPartOf.v2"


def test_qualifiers_are_not_validated():
    extractor = Extractor()
    extractor.handle_starttag("meta", [("name", "DC.Date.whenever I feel like it"), ("content", "x")])

    assert extractor.elements["date"][0].qualifier == "whenever I feel like it"
    assert extractor.errors == []


def test_scheme_and_lang_are_optional():
    extractor = Extractor()
    extractor.handle_starttag("meta", [("name", "DC.Date"), ("content", "2003"), ("scheme", "W3CDTF")])
    extractor.handle_starttag("meta", [("name", "DC.Date"), ("content", "2004")])

    first, second = extractor.elements["date"]
    assert (first.scheme, first.language) == ("W3CDTF", "")
    assert (second.scheme, second.language) == ("", "")


def test_diagnostics_are_logged_as_warnings(caplog):
    extractor = Extractor()
    with caplog.at_level(logging.WARNING, logger="html_dublincore.extractor"):
        extractor.handle_starttag("meta", [("name", "DC.Nonsense"), ("content", "x")])

    assert "invalid element: Nonsense found" in caplog.text


def test_scan_continues_after_bad_tags():
    html = """
    <html><head>
      <meta name="DC.Bogus" content="nope">
      <meta name="DC.Creator">
      <meta name="DC.Creator" content="Ed Summers">
      <meta name="keywords" content="perl, metadata">
      <meta name="DC.Subject" content="Metadata">
    </head><body></body></html>
    """
    extractor = Extractor()
    Tokenizer().feed(html, extractor)

    assert [e.content for e in extractor.elements["creator"]] == ["Ed Summers"]
    assert [e.content for e in extractor.elements["subject"]] == ["Metadata"]
    assert extractor.errors == ["invalid element: Bogus found", "element creator lacks content"]
