#!/usr/bin/env python3
"""Identity section: entity identifiers, entity type and name entries."""

import logging
from typing import Optional

from xml.etree.ElementTree import Element

from ....models.models import AgentKind, AgentRecord, NameEntry
from .builder import create_node, sub_element
from .context import MappingContext
from .dates import build_dates, collect_dates
from .errors import UnrecognizedKindError

logger = logging.getLogger(__name__)

ENTITY_TYPES = {
    AgentKind.PERSON: "person",
    AgentKind.FAMILY: "family",
    AgentKind.CORPORATE_ENTITY: "corporateBody",
    AgentKind.SOFTWARE: "software",
}


def entity_type(kind: AgentKind) -> str:
    """EAC-CPF entityType value for an agent kind."""
    try:
        return ENTITY_TYPES[AgentKind(kind)]
    except (KeyError, ValueError):
        raise UnrecognizedKindError("agent", kind) from None


def build_identity(parent: Element, record: AgentRecord, ctx: MappingContext) -> Element:
    """Append the identity element: entityId, entityType and names."""
    identity = sub_element(parent, "identity")

    for ad in record.agent_identifiers:
        create_node(identity, "entityId", {"localType": ad.identifier_type}, ad.entity_identifier)

    create_node(identity, "entityType", {}, entity_type(record.jsonmodel_type))

    for name in record.names:
        if name.parallel_names:
            group = sub_element(identity, "nameEntryParallel")
            build_name_entry(group, name, ctx)
            for parallel in name.parallel_names:
                build_name_entry(group, parallel, ctx)
        else:
            build_name_entry(identity, name, ctx)

    return identity


def build_name_entry(parent: Element, name: NameEntry, ctx: MappingContext) -> Element:
    """Append one nameEntry.

    Parts are written in the order of the kind's name-part fields, each tagged
    with its label (or the field name when no label is configured). The source
    label becomes authorizedForm or alternativeForm depending on the
    authorized flag.

    Args:
        parent: identity or nameEntryParallel element
        name: Name (or parallel name) to write
        ctx: Mapping context holding the name-part fields

    Returns:
        The nameEntry element
    """
    attrs = {
        "xml:lang": name.language,
        "scriptCode": name.script,
        "transliteration": name.transliteration,
    }
    entry = sub_element(parent, "nameEntry", attrs)

    for field, local_type in ctx.name_part_fields.items():
        value = _name_part_value(name, field)
        if not value:
            continue
        create_node(entry, "part", {"localType": local_type or field}, value)

    use_dates = collect_dates(name.use_dates)
    if use_dates:
        build_dates(sub_element(entry, "useDates"), use_dates)

    form = "authorizedForm" if name.authorized else "alternativeForm"
    create_node(entry, form, {}, name.source)

    return entry


def _name_part_value(name: NameEntry, field: str) -> Optional[str]:
    # undeclared part fields are kept as model extras
    value = getattr(name, field, None)
    return None if value is None else str(value)
