#!/usr/bin/env python3
"""Element-building primitives shared by the EAC-CPF mappers.

Two omission rules hold for every document produced here: an element is never
written with empty text, and an attribute whose value is None is never
written. ``create_node`` and ``clean_attrs`` are the only places that enforce
them, so mappers go through these helpers instead of touching ElementTree
directly.
"""

import xml.etree.ElementTree as ET
from enum import Enum
from typing import Any, Iterable, Mapping, Optional

from xml.etree.ElementTree import Element

from ....models.models import XlinkAttributes


class FillMode(str, Enum):
    """Policies for ``filled_out``."""
    ANY = "any"
    ALL = "all"


def is_blank(value: Any) -> bool:
    """True for None and for values whose string form is empty or whitespace."""
    return value is None or str(value).strip() == ""


def filled_out(values: Iterable[Any], mode: FillMode = FillMode.ANY) -> bool:
    """Check whether a group of optional values carries any content.

    Args:
        values: Field values making up the group
        mode: ANY passes when at least one value is non-blank, ALL only when
            every value is non-blank

    Returns:
        True if the group should be emitted
    """
    values = list(values)
    present = [v for v in values if not is_blank(v)]
    if mode == FillMode.ALL:
        return len(present) == len(values)
    return len(present) > 0


def clean_attrs(attrs: Optional[Mapping[str, Any]]) -> dict[str, str]:
    """Drop None-valued attributes and stringify the rest."""
    if not attrs:
        return {}
    return {name: str(value) for name, value in attrs.items() if value is not None}


def sub_element(parent: Element, tag: str, attrs: Optional[Mapping[str, Any]] = None) -> Element:
    """Append a container element with cleaned attributes."""
    return ET.SubElement(parent, tag, clean_attrs(attrs))


def create_node(
    parent: Element,
    tag: str,
    attrs: Optional[Mapping[str, Any]],
    text: Optional[str]
) -> Optional[Element]:
    """Append a text element, or nothing when the text is missing.

    Args:
        parent: Element to append to
        tag: Element name (prefixed names such as "xlink:href" are kept literally)
        attrs: Attributes, None values dropped
        text: Element text

    Returns:
        The new element, or None if it was omitted
    """
    if text is None or text == "":
        return None

    element = sub_element(parent, tag, attrs)
    element.text = text
    return element


def prune_if_empty(parent: Element, element: Element) -> Optional[Element]:
    """Remove a just-built container again if nothing ended up inside it."""
    if len(element) == 0 and not element.text:
        parent.remove(element)
        return None
    return element


def xlink_attrs(source: XlinkAttributes) -> dict[str, Optional[str]]:
    """Cross-reference attribute set of a linked subrecord (uncleaned)."""
    return {
        "xlink:href": source.file_uri,
        "xlink:actuate": source.file_version_xlink_actuate_attribute,
        "xlink:show": source.file_version_xlink_show_attribute,
        "xlink:title": source.xlink_title_attribute,
        "xlink:role": source.xlink_role_attribute,
        "xlink:arcrole": source.xlink_arcrole_attribute,
        "lastDateTimeVerified": source.last_verified_date,
    }


def descriptive_note(parent: Element, note: Optional[str]) -> Optional[Element]:
    """Append descriptiveNote/p holding the note text, omitted when blank."""
    if is_blank(note):
        return None

    wrapper = sub_element(parent, "descriptiveNote")
    create_node(wrapper, "p", {}, note)
    return wrapper


def join_uri(base_url: str, relative_uri: Optional[str]) -> Optional[str]:
    """Absolute URI for a record URI relative to the public interface."""
    if relative_uri is None:
        return None
    if relative_uri.startswith("/"):
        return base_url.rstrip("/") + relative_uri
    return base_url + relative_uri


def to_xml(root: Element, pretty: bool = True) -> str:
    """Serialize a document tree to a UTF-8 XML string with declaration."""
    if pretty:
        ET.indent(root)
    return ET.tostring(root, encoding="UTF-8", xml_declaration=True).decode("utf-8")
