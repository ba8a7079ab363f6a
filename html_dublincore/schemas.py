"""
Pydantic schemas and the fixed Dublin Core vocabulary.

Element: one metadata item found in (or serialized back to) a <meta> tag
DublinCoreRecord: JSON-friendly snapshot of a whole parsed document

Data flow:
  Tokenizer → start-tag events → Extractor builds Element objects
  DublinCore stores them per name and exports DublinCoreRecord on request
"""

import html
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


# --- Vocabulary ---
# Order matters: DublinCore.all() and DublinCore.to_html() iterate in this order.
# See http://www.dublincore.org/documents/dces/ and RFC 2731.

DC_ELEMENTS: tuple[str, ...] = (
    "title",
    "creator",
    "subject",
    "description",
    "publisher",
    "contributor",
    "date",
    "type",
    "format",
    "identifier",
    "source",
    "language",
    "relation",
    "coverage",
    "rights",
)

DC_NAMESPACE = "dc"

ELEMENT_FIELDS: tuple[str, ...] = ("name", "qualifier", "content", "language", "scheme")


def resolve_element_name(name: Optional[str]) -> Optional[str]:
    """
    Resolve a (case-insensitive) base name to a vocabulary entry.

    An exact match wins. Otherwise the first entry, in vocabulary order,
    that starts with the given text is returned, so "desc" resolves to
    "description". Returns None when nothing matches.
    """
    if not name:
        return None
    wanted = name.strip().lower()
    if not wanted:
        return None
    if wanted in DC_ELEMENTS:
        return wanted
    for candidate in DC_ELEMENTS:
        if candidate.startswith(wanted):
            return candidate
    return None


def escape_value(value: Optional[str]) -> str:
    """Minimal HTML escape (&, <, >) used on every field read."""
    return html.escape(value or "", quote=False)


# --- Element record ---

class Element(BaseModel):
    """
    A single Dublin Core element, e.g. <meta name="DC.Date.created" content="2003-01-01">.

    The model stores raw values exactly as they were set. Reading a field
    through its property (element.content, element.scheme, ...) returns the
    HTML-escaped form, or "" when unset; assigning to the property stores the
    new value verbatim. Use raw() when the unescaped value is needed.

    An Element with no name is a placeholder: lookups that find nothing hand
    one back so callers can write dc.element("title").content without
    checking for None first.
    """
    model_config = ConfigDict(populate_by_name=True, validate_assignment=True)

    # Raw storage; the aliases let callers build Element(name=..., content=...)
    raw_name: Optional[str] = Field(default=None, alias="name")
    raw_qualifier: Optional[str] = Field(default=None, alias="qualifier")
    raw_content: Optional[str] = Field(default=None, alias="content")
    raw_language: Optional[str] = Field(default=None, alias="language")
    raw_scheme: Optional[str] = Field(default=None, alias="scheme")

    @property
    def name(self) -> str:
        """Element name (title, creator, date, ...)."""
        return escape_value(self.raw_name)

    @name.setter
    def name(self, value: str) -> None:
        self.raw_name = value

    @property
    def qualifier(self) -> str:
        """Refinement of the element, e.g. "created" for DC.Date.created."""
        return escape_value(self.raw_qualifier)

    @qualifier.setter
    def qualifier(self, value: str) -> None:
        self.raw_qualifier = value

    @property
    def content(self) -> str:
        """The metadata value itself."""
        return escape_value(self.raw_content)

    @content.setter
    def content(self, value: str) -> None:
        self.raw_content = value

    @property
    def language(self) -> str:
        """Language tag from the lang attribute."""
        return escape_value(self.raw_language)

    @language.setter
    def language(self, value: str) -> None:
        self.raw_language = value

    @property
    def scheme(self) -> str:
        """Encoding scheme from the scheme attribute, e.g. W3CDTF."""
        return escape_value(self.raw_scheme)

    @scheme.setter
    def scheme(self, value: str) -> None:
        self.raw_scheme = value

    def set(self, field: str, value: Optional[str] = None) -> str:
        """
        Get-or-set a field by name.

        With a value, store it verbatim first. Either way, return the
        escaped current value.
        """
        if field not in ELEMENT_FIELDS:
            raise AttributeError(f"Element has no field {field!r}")
        if value is not None:
            setattr(self, f"raw_{field}", value)
        return getattr(self, field)

    def raw(self, field: str) -> str:
        """Unescaped stored value of a field, "" when unset."""
        if field not in ELEMENT_FIELDS:
            raise AttributeError(f"Element has no field {field!r}")
        return getattr(self, f"raw_{field}") or ""

    @property
    def is_placeholder(self) -> bool:
        return not self.raw_name

    def to_html(self) -> str:
        """Render as a single <meta> tag (no trailing newline)."""
        name = self.name
        name = name[:1].upper() + name[1:]
        if self.raw_qualifier:
            name += "." + self.raw_qualifier

        tag = f'<meta name="DC.{name}" content="{self.content}"'
        if self.scheme:
            tag += f' scheme="{self.scheme}"'
        if self.language:
            tag += f' lang="{self.language}"'
        return tag + ">"


# --- Whole-document snapshot ---

class DublinCoreRecord(BaseModel):
    """Output of DublinCore.to_record(), suitable for JSON dumps."""
    source: Optional[str] = None                                   # File name, when parsed from disk
    elements: dict[str, list[Element]] = Field(default_factory=dict)
    errors: list[str] = Field(default_factory=list)                # Scan diagnostics in document order

    def to_json_dict(self) -> dict:
        """Plain dict with raw field values under their short names."""
        return self.model_dump(by_alias=True, exclude_none=True)
