"""
Start-tag tokenizer backed by BeautifulSoup.

Parses an HTML string once and replays every start tag, in document order,
to a StartTagHandler. The Extractor only ever needs start tags, so end tags,
text and comments are never reported.

Also hosts the byte-level charset sniffing used when reading HTML from disk.
"""

import re
from abc import ABC, abstractmethod
from typing import Optional

from bs4 import BeautifulSoup

from .exceptions import TokenizerError
from .logger import get_module_logger

logger = get_module_logger("tokenizer")


# --- Parser fallback chain: html5lib → lxml → html.parser ---
# html5lib follows the WHATWG parsing algorithm and copes best with tag soup;
# lxml is faster and nearly as forgiving; html.parser ships with Python and
# is the last resort.
DEFAULT_BACKENDS = ("html5lib", "lxml", "html.parser")

# WHATWG encoding spec: browsers silently remap these charsets.
# https://encoding.spec.whatwg.org/#names-and-labels
WHATWG_CHARSET_MAP = {
    'iso-8859-1': 'windows-1252',
    'iso8859-1': 'windows-1252',
    'iso88591': 'windows-1252',
    'latin-1': 'windows-1252',
    'latin1': 'windows-1252',
    'us-ascii': 'windows-1252',
    'ascii': 'windows-1252',
    'iso-8859-9': 'windows-1254',
    'iso-8859-11': 'windows-874',
}


def detect_charset_from_bytes(raw_bytes: bytes) -> str:
    """
    Detect charset from raw HTML bytes by scanning the first 2048 bytes
    for <meta charset=...> or <meta http-equiv="Content-Type" content="...; charset=...">.

    Returns the browser-equivalent charset or 'utf-8' as default.
    """
    # Declarations must sit in the first 1024 bytes; scan 2048 to be lenient
    head_str = raw_bytes[:2048].decode('ascii', errors='ignore')

    charset = None

    m = re.search(r'<meta[^>]+charset=["\']?\s*([^\s"\';>]+)', head_str, re.IGNORECASE)
    if m:
        charset = m.group(1).strip().lower()

    if not charset:
        m = re.search(
            r'<meta[^>]+content=["\'][^"\']*charset=([^\s"\';>]+)',
            head_str, re.IGNORECASE
        )
        if m:
            charset = m.group(1).strip().lower()

    if not charset:
        return 'utf-8'

    return WHATWG_CHARSET_MAP.get(charset, charset)


class StartTagHandler(ABC):
    """Receives start-tag events from a Tokenizer."""

    @abstractmethod
    def handle_starttag(self, tag: str, attrs: list[tuple[str, str]]) -> None:
        """
        Called once per start tag, in document order.

        Args:
            tag: Tag name as reported by the parser backend
            attrs: Ordered (attribute name, value) pairs
        """
        pass


class Tokenizer:
    """
    Feeds start-tag events from an HTML string to a handler.

    The handler is passed per call, so one Tokenizer can serve any number of
    documents and holds no per-document state.
    """

    def __init__(self, features: Optional[str] = None):
        """
        Args:
            features: Force a single BeautifulSoup backend ("html5lib",
                      "lxml" or "html.parser"). None tries them in order.
        """
        self.backends = (features,) if features else DEFAULT_BACKENDS

    def _build_soup(self, html: str) -> BeautifulSoup:
        errors = {}
        for backend in self.backends:
            try:
                # Keep class/rel/... as plain strings; we want attribute values verbatim
                soup = BeautifulSoup(html, backend, multi_valued_attributes=None)
                logger.debug(f"Parsed with {backend}")
                return soup
            except Exception as e:
                logger.warning(f"{backend} parsing failed: {e}")
                errors[backend] = str(e)

        raise TokenizerError(
            "No parser backend could read the HTML",
            backends=list(self.backends),
            details={"errors": errors}
        )

    def feed(self, html: str, handler: StartTagHandler) -> int:
        """
        Parse html and report every start tag to handler.

        Returns:
            Number of start tags reported
        """
        soup = self._build_soup(html)
        count = 0
        # find_all(True) walks the tree depth-first, i.e. in source order
        for tag in soup.find_all(True):
            handler.handle_starttag(tag.name, list(tag.attrs.items()))
            count += 1
        logger.debug(f"Reported {count} start tags")
        return count
