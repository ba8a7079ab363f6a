"""
Dublin Core meta tag extractor.

Listens to start-tag events from the Tokenizer and turns
<meta name="DC.Element[.Qualifier]" content="..."> tags into Element objects.

Recognised name layouts:
  DC.Title                 → element "title", no qualifier
  DC.Date.created          → element "date", qualifier "created"
  dc.identifier.ISBN       → element "identifier", qualifier "ISBN" (case kept)

Anything outside the DC namespace is skipped silently. DC tags that name an
unknown element or have no content attribute are skipped and reported as
diagnostics; the scan never stops early.
"""

from typing import Optional

from .schemas import DC_ELEMENTS, DC_NAMESPACE, Element
from .tokenizer import StartTagHandler
from .logger import get_module_logger

logger = get_module_logger("extractor")


class Extractor(StartTagHandler):
    """Collects Dublin Core elements and diagnostics from start-tag events."""

    def __init__(self):
        # One list per vocabulary name, in document order
        self.elements: dict[str, list[Element]] = {name: [] for name in DC_ELEMENTS}
        self.errors: list[str] = []

    def _error(self, message: str) -> None:
        logger.warning(message)
        self.errors.append(message)

    def handle_starttag(self, tag: str, attrs: list[tuple[str, str]]) -> None:
        if tag.lower() != "meta":
            return

        # Attribute names are case-insensitive in HTML; values are not touched
        attributes = {key.lower(): value for key, value in attrs}

        name = attributes.get("name")
        if name is None:
            return  # charset / http-equiv / og: tags and the like

        element = self.build_element(name, attributes)
        if element is not None:
            self.elements[element.raw_name].append(element)

    def build_element(self, name: str, attributes: dict[str, str]) -> Optional[Element]:
        """
        Build an Element from a meta tag's name value and lowercased attributes.

        Returns None when the tag is not Dublin Core or is malformed.
        """
        # "DC.Identifier.ISBN" → ("DC", "Identifier", "ISBN"); the qualifier
        # keeps any further dots
        parts = name.split(".", 2)
        namespace = parts[0]
        element_name = parts[1] if len(parts) > 1 else ""
        qualifier = parts[2] if len(parts) > 2 else None

        if namespace.lower() != DC_NAMESPACE:
            return None

        if element_name.lower() not in DC_ELEMENTS:
            self._error(f"invalid element: {element_name} found")
            return None

        element_name = element_name.lower()

        if "content" not in attributes:
            self._error(f"element {element_name} lacks content")
            return None

        element = Element(
            name=element_name,
            qualifier=qualifier,
            content=attributes["content"],
            scheme=attributes.get("scheme"),
            language=attributes.get("lang"),
        )
        logger.debug(f"Found DC.{element_name}" + (f".{qualifier}" if qualifier else ""))
        return element
