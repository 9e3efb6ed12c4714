#!/usr/bin/env python3
"""Agent notes and their subnotes.

Each top-level note maps to a fixed description element (biogHist, mandate,
...). Its subnotes are rendered in order by kind: abstract, citation, defined
list, ordered list, chronology, outline and plain text.
"""

import logging
from typing import Callable, Optional

from xml.etree.ElementTree import Element

from ....models.models import (
    NoteAbstract,
    NoteChronology,
    NoteCitation,
    NoteDefinedList,
    NoteOrderedList,
    NoteOutline,
    NoteText,
    OutlineLevel,
)
from .builder import create_node, sub_element
from .errors import OutlineDepthError, UnrecognizedKindError

logger = logging.getLogger(__name__)

NOTE_TAGS = {
    "note_bioghist": "biogHist",
    "note_general_context": "generalContext",
    "note_mandate": "mandate",
    "note_legal_status": "legalStatus",
    "note_structure_or_genealogy": "structureOrGenealogy",
}

# Outline levels nested deeper than this are treated as malformed input
MAX_OUTLINE_DEPTH = 64

CONTENT_SEPARATOR = "--"


def build_note(parent: Element, note) -> Element:
    """Append a top-level agent note with all of its subnotes."""
    tag = NOTE_TAGS.get(getattr(note, "jsonmodel_type", None))
    if tag is None:
        raise UnrecognizedKindError("note", getattr(note, "jsonmodel_type", None))

    element = sub_element(parent, tag)
    for subnote in note.subnotes:
        build_subnote(element, subnote)
    return element


def build_subnote(parent: Element, subnote) -> Optional[Element]:
    """Render one subnote with the builder for its kind."""
    builder = _SUBNOTE_BUILDERS.get(type(subnote))
    if builder is None:
        raise UnrecognizedKindError("subnote", getattr(subnote, "jsonmodel_type", type(subnote).__name__))
    return builder(parent, subnote)


def _build_abstract(parent: Element, sn: NoteAbstract) -> Optional[Element]:
    return create_node(parent, "abstract", {}, CONTENT_SEPARATOR.join(sn.content))


def _build_citation(parent: Element, sn: NoteCitation) -> Optional[Element]:
    attrs = {f"xlink:{name}": value for name, value in sn.xlink.items()}
    return create_node(parent, "citation", attrs, CONTENT_SEPARATOR.join(sn.content))


def _build_defined_list(parent: Element, sn: NoteDefinedList) -> Element:
    element = sub_element(parent, "list", {"localType": f"defined:{sn.title or ''}"})
    for item in sn.items:
        create_node(element, "item", {"localType": item.label}, item.value)
    return element


def _build_ordered_list(parent: Element, sn: NoteOrderedList) -> Element:
    element = sub_element(parent, "list", {"localType": f"ordered:{sn.title or ''}"})
    for item in sn.items:
        # every item shares the list's enumeration style as its localType
        create_node(element, "item", {"localType": sn.enumeration}, item)
    return element


def _build_chronology(parent: Element, sn: NoteChronology) -> Element:
    element = sub_element(parent, "chronList", {"localType": sn.title or None})
    pairs = [(item.event_date, event) for item in sn.items for event in item.events]
    for date, event in pairs:
        chron_item = sub_element(element, "chronItem", {"standardDate": date or None})
        create_node(chron_item, "event", {}, event)
    return element


def _build_outline(parent: Element, sn: NoteOutline) -> Element:
    element = sub_element(parent, "outline")
    for level in sn.levels:
        expand_level(element, level)
    return element


def expand_level(parent: Element, level: OutlineLevel, depth: int = 1) -> Element:
    """Append an outline level; text items become item elements, nested
    levels are expanded recursively."""
    if depth > MAX_OUTLINE_DEPTH:
        raise OutlineDepthError(f"Outline nested deeper than {MAX_OUTLINE_DEPTH} levels")

    element = sub_element(parent, "level")
    for item in level.items:
        if isinstance(item, str):
            create_node(element, "item", {}, item)
        else:
            expand_level(element, item, depth + 1)
    return element


def _build_text(parent: Element, sn: NoteText) -> Optional[Element]:
    return create_node(parent, "p", {}, sn.content)


_SUBNOTE_BUILDERS: dict[type, Callable[[Element, object], Optional[Element]]] = {
    NoteAbstract: _build_abstract,
    NoteCitation: _build_citation,
    NoteDefinedList: _build_defined_list,
    NoteOrderedList: _build_ordered_list,
    NoteChronology: _build_chronology,
    NoteOutline: _build_outline,
    NoteText: _build_text,
}
