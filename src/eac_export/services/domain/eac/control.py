#!/usr/bin/env python3
"""Control section: record identity, maintenance and provenance metadata."""

import logging
from typing import Optional

from xml.etree.ElementTree import Element

from ....models.models import (
    AgentRecord,
    AgentSource,
    ConventionsDeclaration,
    MaintenanceHistory,
    RecordControl,
    RecordIdentifier,
)
from .builder import (
    FillMode,
    create_node,
    descriptive_note,
    filled_out,
    sub_element,
    xlink_attrs,
)
from .context import MappingContext

logger = logging.getLogger(__name__)


def build_control(parent: Element, record: AgentRecord, ctx: MappingContext) -> Element:
    """Append the control element for an agent record.

    Args:
        parent: The eac-cpf root element
        record: Source agent record
        ctx: Mapping context (config and label lookup)

    Returns:
        The control element
    """
    control = sub_element(parent, "control")

    for identifier in record.agent_record_identifiers:
        _build_record_identifier(control, identifier)

    if record.agent_record_controls:
        # Only one record control is expected per agent
        _build_record_control(control, record.agent_record_controls[0], ctx)

    for declaration in record.agent_conventions_declarations:
        _build_conventions_declaration(control, declaration)

    _build_maintenance_history(control, record.agent_maintenance_histories)
    _build_sources(control, record.agent_sources)

    return control


def _build_record_identifier(parent: Element, identifier: RecordIdentifier) -> Optional[Element]:
    if identifier.primary_identifier:
        return create_node(parent, "recordId", {}, identifier.record_identifier)

    attrs = {"localType": identifier.identifier_type}
    return create_node(parent, "otherRecordId", attrs, identifier.record_identifier)


def _build_record_control(parent: Element, arc: RecordControl, ctx: MappingContext) -> None:
    create_node(parent, "maintenanceStatus", {}, arc.maintenance_status)
    create_node(parent, "publicationStatus", {}, arc.publication_status)

    if filled_out([arc.maintenance_agency, arc.agency_name, arc.maintenance_agency_note]):
        agency = sub_element(parent, "maintenanceAgency")
        if ctx.config.export_eac_agency_code:
            create_node(agency, "agencyCode", {}, arc.maintenance_agency)
        create_node(agency, "agencyName", {}, arc.agency_name)
        descriptive_note(agency, arc.maintenance_agency_note)

    build_language_and_script(
        parent,
        "languageDeclaration",
        arc.language,
        arc.script,
        [arc.language_note],
        ctx,
    )


def _build_conventions_declaration(parent: Element, cd: ConventionsDeclaration) -> Optional[Element]:
    if not filled_out([cd.name_rule, cd.citation, cd.descriptive_note]):
        return None

    declaration = sub_element(parent, "conventionDeclaration")
    create_node(declaration, "abbreviation", {}, cd.name_rule)
    create_node(declaration, "citation", xlink_attrs(cd), cd.citation)
    descriptive_note(declaration, cd.descriptive_note)
    return declaration


def _build_maintenance_history(parent: Element, histories: list[MaintenanceHistory]) -> Optional[Element]:
    events = [
        mh for mh in histories
        if filled_out([
            mh.maintenance_event_type,
            mh.event_date,
            mh.maintenance_agent_type,
            mh.agent,
            mh.descriptive_note,
        ])
    ]
    if not events:
        return None

    history = sub_element(parent, "maintenanceHistory")
    for mh in events:
        event = sub_element(history, "maintenanceEvent")
        create_node(event, "eventType", {}, mh.maintenance_event_type)

        if filled_out([mh.event_date], FillMode.ALL):
            sub_element(event, "eventDateTime", {"standardDateTime": mh.event_date})

        create_node(event, "agentType", {}, mh.maintenance_agent_type)
        create_node(event, "agent", {}, mh.agent)
        create_node(event, "eventDescription", {}, mh.descriptive_note)

    return history


def _build_sources(parent: Element, agent_sources: list[AgentSource]) -> Optional[Element]:
    kept = [src for src in agent_sources if filled_out([src.source_entry, src.descriptive_note])]
    if not kept:
        return None

    sources = sub_element(parent, "sources")
    for src in kept:
        source = sub_element(sources, "source", xlink_attrs(src))
        create_node(source, "sourceEntry", {}, src.source_entry)
        descriptive_note(source, src.descriptive_note)

    return sources


def build_language_and_script(
    parent: Element,
    tag: str,
    language: Optional[str],
    script: Optional[str],
    notes: list[Optional[str]],
    ctx: MappingContext
) -> Optional[Element]:
    """Append a languageDeclaration / languageUsed style block.

    Language and script codes are written as attributes with their display
    labels as text; notes are joined by newline into one descriptive note.
    Nothing is written when language, script and notes are all absent.

    Args:
        parent: Element to append to
        tag: Name of the block element
        language: ISO 639-2 language code
        script: ISO 15924 script code
        notes: Note texts, None entries ignored
        ctx: Mapping context providing the label lookup

    Returns:
        The block element, or None if omitted
    """
    notes = [n for n in notes if n]
    if not (language or script or notes):
        return None

    block = sub_element(parent, tag)
    if language:
        label = ctx.labels.lookup("language_iso639_2", language)
        create_node(block, "language", {"languageCode": language}, label)
    if script:
        label = ctx.labels.lookup("script_iso15924", script)
        create_node(block, "script", {"scriptCode": script}, label)
    descriptive_note(block, "\n".join(notes))

    return block
