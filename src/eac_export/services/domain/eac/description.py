#!/usr/bin/env python3
"""Description section: existence dates, languages, subjects and notes."""

import logging
from typing import Optional

from xml.etree.ElementTree import Element

from ....models.models import (
    AgentGender,
    AgentPlace,
    AgentRecord,
    AgentTopic,
    SubjectSubrecord,
)
from .builder import create_node, descriptive_note, filled_out, prune_if_empty, sub_element
from .context import MappingContext
from .control import build_language_and_script
from .dates import build_date, build_dates, collect_dates
from .notes import build_note

logger = logging.getLogger(__name__)


def build_description(parent: Element, record: AgentRecord, ctx: MappingContext) -> Element:
    """Append the description element for an agent record.

    Args:
        parent: The cpfDescription element
        record: Source agent record
        ctx: Mapping context (label lookup)

    Returns:
        The description element
    """
    description = sub_element(parent, "description")

    exist_dates = collect_dates(record.dates_of_existence)
    if exist_dates:
        build_dates(sub_element(description, "existDates"), exist_dates)

    for lang in record.used_languages:
        wrapper = sub_element(description, "languagesUsed")
        build_language_and_script(
            wrapper,
            "languageUsed",
            lang.language,
            lang.script,
            [n.content for n in lang.notes],
            ctx,
        )
        prune_if_empty(description, wrapper)

    for place in record.agent_places:
        _wrapped_subject_subrecord(description, "places", "place", place)

    for occupation in record.agent_occupations:
        _wrapped_subject_subrecord(description, "occupations", "occupation", occupation)

    for function in record.agent_functions:
        _wrapped_subject_subrecord(description, "functions", "function", function)

    if record.agent_topics or record.agent_genders:
        local_descriptions = sub_element(description, "localDescriptions")
        for topic in record.agent_topics:
            build_subject_subrecord(local_descriptions, "localDescription", topic)
        for gender in record.agent_genders:
            build_gender(local_descriptions, gender)

    for note in record.notes:
        build_note(description, note)

    return description


def _wrapped_subject_subrecord(parent: Element, wrapper_tag: str, tag: str, record: SubjectSubrecord) -> None:
    wrapper = sub_element(parent, wrapper_tag)
    build_subject_subrecord(wrapper, tag, record)
    prune_if_empty(parent, wrapper)


def build_subject_subrecord(parent: Element, tag: str, record: SubjectSubrecord) -> list[Element]:
    """Append one element per resolved subject of a place/occupation/function/topic.

    Only the first term of each subject is used. Each element also receives
    the record's first usable date and first note; later dates and notes are
    not exported.

    Args:
        parent: Element to append to
        tag: Element name (place, occupation, function, localDescription)
        record: The subject subrecord

    Returns:
        The elements written, one per subject
    """
    attrs = {"localType": "associatedSubject"} if isinstance(record, AgentTopic) else {}
    first_date = next(iter(collect_dates(record.dates)), None)
    first_note = record.notes[0] if record.notes else None

    elements = []
    for link in record.subjects:
        subject = link.resolved
        element = sub_element(parent, tag, attrs)

        if isinstance(record, AgentPlace):
            create_node(element, "placeRole", {}, record.place_role)
            create_node(element, "placeEntry", {"vocabularySource": subject.source}, subject.first_term)
        else:
            create_node(element, "term", {}, subject.first_term)

        if first_date is not None:
            build_date(element, first_date)
        if first_note is not None:
            descriptive_note(element, first_note.content)

        elements.append(element)

    return elements


def build_gender(parent: Element, gender: AgentGender) -> Optional[Element]:
    """Append a gender localDescription with every date and every note."""
    if not filled_out([gender.gender]):
        return None

    element = sub_element(parent, "localDescription", {"localType": "gender"})
    create_node(element, "term", {}, gender.gender)
    build_dates(element, gender.dates)
    for note in gender.notes:
        descriptive_note(element, note.content)

    return element
