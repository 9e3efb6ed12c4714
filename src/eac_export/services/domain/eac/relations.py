#!/usr/bin/env python3
"""Relations section and alternative set.

Three source relation kinds map onto two EAC-CPF elements: linked resources
and related records become resourceRelation, related agents become
cpfRelation.
"""

import logging
from typing import Optional

from xml.etree.ElementTree import Element

from ....models.models import (
    AgentKind,
    AgentRecord,
    AgentResource,
    AlternateSet,
    RelatedAgent,
    RelatedRecord,
    ResolvedAgent,
)
from .builder import (
    create_node,
    descriptive_note,
    filled_out,
    join_uri,
    sub_element,
    xlink_attrs,
)
from .context import MappingContext
from .dates import build_date, build_dates

logger = logging.getLogger(__name__)

RESOURCE_ROLES = {
    "creator": "creatorOf",
    "subject": "subjectOf",
}


def resource_relation_type(role: Optional[str]) -> str:
    """resourceRelationType for a linked agent role; unknown roles become "other"."""
    return RESOURCE_ROLES.get(role, "other")


def build_relations(parent: Element, record: AgentRecord, ctx: MappingContext) -> Element:
    """Append the relations element: resources, related agents, related records."""
    relations = sub_element(parent, "relations")

    for resource in record.agent_resources:
        build_resource_relation(relations, resource)

    for related in record.related_agents:
        build_cpf_relation(relations, related, ctx)

    for related_record in ctx.related_records:
        build_related_record(relations, related_record, ctx)

    return relations


def build_resource_relation(parent: Element, ar: AgentResource) -> Optional[Element]:
    """Append a resourceRelation for a linked resource, skipped without a title."""
    if not filled_out([ar.linked_resource]):
        return None

    attrs = {"resourceRelationType": resource_relation_type(ar.linked_agent_role)}
    attrs.update(xlink_attrs(ar))
    relation = sub_element(parent, "resourceRelation", attrs)
    create_node(relation, "relationEntry", {}, ar.linked_resource)

    if ar.places:
        places = sub_element(relation, "places")
        for link in ar.places:
            subject = link.resolved
            place = sub_element(places, "place")
            create_node(place, "placeEntry", {"vocabularySource": subject.source}, subject.first_term)

    build_dates(relation, ar.dates)
    return relation


def related_agent_name(agent: ResolvedAgent) -> Optional[str]:
    """Display name of a related agent, chosen by the agent's kind."""
    display_name = agent.display_name
    if agent.jsonmodel_type == AgentKind.SOFTWARE:
        return display_name.software_name
    if agent.jsonmodel_type == AgentKind.FAMILY:
        return display_name.family_name
    return display_name.primary_name


def build_cpf_relation(parent: Element, ra: RelatedAgent, ctx: MappingContext) -> Optional[Element]:
    """Append a cpfRelation pointing at the related agent's public URI."""
    name = related_agent_name(ra.resolved)
    if not filled_out([name]):
        return None

    attrs = {
        "cpfRelationType": ra.relator,
        "xlink:type": "simple",
        "xlink:href": join_uri(ctx.config.public_proxy_url, ra.resolved.uri),
    }
    relation = sub_element(parent, "cpfRelation", attrs)
    create_node(relation, "relationEntry", {}, name)

    if ra.dates is not None:
        build_date(relation, ra.dates)

    return relation


def build_related_record(parent: Element, related: RelatedRecord, ctx: MappingContext) -> Element:
    """Append a resourceRelation for a record linked to the agent."""
    attrs = {
        "resourceRelationType": f"{related.role}Of",
        "xlink:type": "simple",
        "xlink:href": join_uri(ctx.config.public_proxy_url, related.record.uri),
    }
    relation = sub_element(parent, "resourceRelation", attrs)
    create_node(relation, "relationEntry", {}, related.record.title)
    return relation


def build_alternative_set(parent: Element, alternate_sets: list[AlternateSet]) -> Optional[Element]:
    """Append alternativeSet with one setComponent per non-empty alternate set."""
    kept = [aas for aas in alternate_sets if filled_out([aas.set_component, aas.descriptive_note])]
    if not kept:
        return None

    alternative_set = sub_element(parent, "alternativeSet")
    for aas in kept:
        component = sub_element(alternative_set, "setComponent", xlink_attrs(aas))
        create_node(component, "componentEntry", {}, aas.set_component)
        descriptive_note(component, aas.descriptive_note)

    return alternative_set
