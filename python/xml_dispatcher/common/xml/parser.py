"""XML decoding helpers built on lxml.

Handlers call these helpers independently for every payload; nothing here
caches a parsed tree.
"""

from typing import Any, Dict, Optional

from lxml import etree

from ...config import DispatcherConfig
from ...logging_config import logger

ATTRIBUTE_PREFIX = "@"
TEXT_KEY = "#text"


def make_parser(config: Optional[DispatcherConfig] = None) -> etree.XMLParser:
    """Create an lxml parser honouring the dispatcher configuration.

    Network access is always disabled.
    """
    config = config or DispatcherConfig()
    return etree.XMLParser(
        resolve_entities=config.resolve_entities,
        huge_tree=config.huge_tree,
        no_network=True,
    )


def parse_payload(
    payload: bytes, config: Optional[DispatcherConfig] = None
) -> etree._Element:
    """Parse one XML document and return its root element.

    Raises:
        lxml.etree.XMLSyntaxError: If the payload is not well-formed XML
        ValueError: If the payload is a str carrying an encoding declaration
    """
    return etree.fromstring(payload, parser=make_parser(config))


def local_name(element: etree._Element) -> str:
    """Return the tag of ``element`` without its namespace."""
    return etree.QName(element).localname


def element_text(element: etree._Element) -> str:
    """Return the element's own character data.

    Direct text nodes are joined, including text that follows a comment or
    processing instruction. Text inside child elements is not included.
    """
    return "".join(element.xpath("text()"))


def element_to_dict(element: etree._Element) -> Any:
    """Convert an element into plain Python data for JMESPath queries.

    Elements without attributes or children become their text ("" when empty).
    Other elements become a dict: attributes under ``@name``, text under
    ``#text``, children under their local name. When a child name repeats, the
    last occurrence wins.
    """
    attributes = {
        f"{ATTRIBUTE_PREFIX}{etree.QName(name).localname}": value
        for name, value in element.attrib.items()
    }
    children = [child for child in element if isinstance(child.tag, str)]
    text = element_text(element)

    if not attributes and not children:
        return text

    result: Dict[str, Any] = dict(attributes)
    if text:
        result[TEXT_KEY] = text
    for child in children:
        name = local_name(child)
        if name in result:
            logger.debug(f"Replacing repeated <{name}> inside <{local_name(element)}>")
        result[name] = element_to_dict(child)
    return result


def document_to_dict(root: etree._Element) -> Dict[str, Any]:
    """Wrap ``element_to_dict`` under the root's local name."""
    return {local_name(root): element_to_dict(root)}
