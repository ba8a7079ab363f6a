"""
DublinCore: the parsed-document object.

Wires the Tokenizer and Extractor together, keeps the extracted elements
per vocabulary name and answers lookups:

    dc = DublinCore(html)
    dc.title().content            # first title, or "" via a placeholder
    dc.creator_list()             # every creator, in document order
    dc.elements("Date.created")   # qualifier-filtered lookup
    print(dc.to_html())           # back to <meta> tags
"""

from pathlib import Path
from typing import Iterator, Optional, Union

from .schemas import DC_ELEMENTS, Element, DublinCoreRecord, resolve_element_name
from .tokenizer import Tokenizer, detect_charset_from_bytes
from .extractor import Extractor
from .exceptions import InvalidHTMLError, UnknownElementError
from .logger import get_module_logger, setup_logger

logger = get_module_logger("main")


def _first(name: str):
    def lookup(self) -> Element:
        return self.lookup_first(name)
    lookup.__name__ = name
    lookup.__doc__ = f"First {name} element, or a placeholder Element if there is none."
    return lookup


def _all(name: str):
    def lookup(self) -> list[Element]:
        return self.lookup_all(name)
    lookup.__name__ = f"{name}_list"
    lookup.__doc__ = f"All {name} elements in document order."
    return lookup


class DublinCore:
    """
    Dublin Core metadata extracted from one HTML document.

    Built once by scanning the whole document; read-only afterwards.
    Every vocabulary name is always present (possibly with no elements).
    """

    def __init__(
        self,
        html: str,
        features: Optional[str] = None,
        log_level: int = None,
        source_name: Optional[str] = None
    ):
        """
        Args:
            html: HTML document text
            features: Force a BeautifulSoup backend (default: html5lib → lxml → html.parser)
            log_level: Reconfigure the package logger level
            source_name: Optional label (e.g. file name) carried into to_record()

        Raises:
            InvalidHTMLError: html is empty or not a string
        """
        if log_level is not None:
            setup_logger(level=log_level)

        if not isinstance(html, str) or not html:
            raise InvalidHTMLError(
                "please supply a string of HTML to DublinCore()",
                details={"type": type(html).__name__}
            )

        self.source_name = source_name
        extractor = Extractor()
        Tokenizer(features=features).feed(html, extractor)

        self._elements = extractor.elements
        self._errors = tuple(extractor.errors)

        logger.info(
            f"Extracted {len(self)} Dublin Core elements"
            + (f" from {source_name}" if source_name else "")
            + (f", {len(self._errors)} diagnostics" if self._errors else "")
        )

    @classmethod
    def from_file(
        cls,
        file_path: Union[str, Path],
        features: Optional[str] = None,
        log_level: int = None
    ) -> "DublinCore":
        """Parse an HTML file, decoding it with the charset the page declares."""
        file_path = Path(file_path)
        raw_bytes = file_path.read_bytes()
        charset = detect_charset_from_bytes(raw_bytes)
        try:
            html = raw_bytes.decode(charset, errors='replace')
        except LookupError:
            logger.warning(f"Unknown charset {charset!r} in {file_path.name}, using utf-8")
            html = raw_bytes.decode('utf-8', errors='replace')
        return cls(html, features=features, log_level=log_level, source_name=file_path.name)

    # --- Diagnostics ---

    @property
    def errors(self) -> tuple[str, ...]:
        """Diagnostics for skipped DC meta tags, in document order."""
        return self._errors

    # --- Lookups ---

    def lookup_all(self, name: str) -> list[Element]:
        """All elements stored under an exact vocabulary name."""
        key = str(name).lower()
        if key not in self._elements:
            raise UnknownElementError(name)
        return list(self._elements[key])

    def lookup_first(self, name: str) -> Element:
        """First element stored under an exact vocabulary name, or a placeholder."""
        found = self.lookup_all(name)
        return found[0] if found else Element()

    def elements(self, name: str) -> list[Element]:
        """
        All elements matching "Name" or "Name.qualifier".

        The base name is matched case-insensitively against the vocabulary
        (a unique-looking prefix such as "desc" is accepted). With a
        qualifier, only elements whose qualifier *contains* it, ignoring
        case, are kept: "Date.create" matches DC.Date.created.

        Raises:
            UnknownElementError: the base name is not a Dublin Core element
        """
        base, _, qualifier = (name or "").partition(".")
        resolved = resolve_element_name(base)
        if resolved is None:
            raise UnknownElementError(name)

        found = self._elements[resolved]
        if not qualifier:
            return list(found)

        wanted = qualifier.lower()
        return [e for e in found if wanted in (e.raw_qualifier or "").lower()]

    def element(self, name: str) -> Element:
        """Like elements(), but only the first match, or a placeholder Element."""
        found = self.elements(name)
        return found[0] if found else Element()

    def all(self) -> list[Element]:
        """Every element, in vocabulary order and then document order."""
        return [e for name in DC_ELEMENTS for e in self._elements[name]]

    def __iter__(self) -> Iterator[Element]:
        return iter(self.all())

    def __len__(self) -> int:
        return sum(len(found) for found in self._elements.values())

    title, title_list = _first("title"), _all("title")
    creator, creator_list = _first("creator"), _all("creator")
    subject, subject_list = _first("subject"), _all("subject")
    description, description_list = _first("description"), _all("description")
    publisher, publisher_list = _first("publisher"), _all("publisher")
    contributor, contributor_list = _first("contributor"), _all("contributor")
    date, date_list = _first("date"), _all("date")
    type, type_list = _first("type"), _all("type")
    format, format_list = _first("format"), _all("format")
    identifier, identifier_list = _first("identifier"), _all("identifier")
    source, source_list = _first("source"), _all("source")
    language, language_list = _first("language"), _all("language")
    relation, relation_list = _first("relation"), _all("relation")
    coverage, coverage_list = _first("coverage"), _all("coverage")
    rights, rights_list = _first("rights"), _all("rights")

    # --- Output ---

    def to_html(self) -> str:
        """All elements as <meta> tags, one per line."""
        return "".join(e.to_html() + "\n" for e in self.all())

    def to_record(self) -> DublinCoreRecord:
        return DublinCoreRecord(
            source=self.source_name,
            elements={name: list(self._elements[name]) for name in DC_ELEMENTS},
            errors=list(self._errors),
        )


def parse_html(html: str, features: Optional[str] = None) -> DublinCore:
    """Convenience function to extract Dublin Core from an HTML string."""
    return DublinCore(html, features=features)


def parse_html_file(file_path: Union[str, Path], features: Optional[str] = None) -> DublinCore:
    """Convenience function to extract Dublin Core from an HTML file."""
    return DublinCore.from_file(file_path, features=features)
