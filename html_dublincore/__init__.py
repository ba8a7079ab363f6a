"""
HTML Dublin Core extractor

Pulls Dublin Core metadata out of <meta name="DC.*"> tags (RFC 2731) and
writes it back out as HTML.
- Tokenizer: BeautifulSoup-backed start-tag event source
- Extractor: DC.Element[.Qualifier] parsing, validation, diagnostics
- DublinCore: per-element storage, lookups and serialization

Public API surface:
  Document            — DublinCore, parse_html, parse_html_file
  Data models         — Element, DublinCoreRecord, DC_ELEMENTS
  Error types         — DublinCoreError, InvalidHTMLError, UnknownElementError, TokenizerError
"""

# --- Document object and convenience entry points ---
from .main import DublinCore, parse_html, parse_html_file

# --- Data models ---
from .schemas import Element, DublinCoreRecord, DC_ELEMENTS

# --- Exceptions ---
from .exceptions import DublinCoreError, InvalidHTMLError, UnknownElementError, TokenizerError

__version__ = "0.1.0"
__all__ = [
    "DublinCore",
    "parse_html",
    "parse_html_file",
    "Element",
    "DublinCoreRecord",
    "DC_ELEMENTS",
    "DublinCoreError",
    "InvalidHTMLError",
    "UnknownElementError",
    "TokenizerError",
]
