#!/usr/bin/env python3
"""EAC-CPF serializer for agent records.

Assembles the eac-cpf document from the control, identity, description and
relations mappers. Each call works on its own freshly built tree and only
reads the record, so one serializer can be shared across threads as long as
its label lookup is thread-safe.
"""

import logging
from typing import TYPE_CHECKING, Any, Iterable, Mapping, Optional

from pydantic import ValidationError
from xml.etree.ElementTree import Element

from ....core.config import ExportConfig
from ....models.models import AgentKind, AgentRecord, RelatedRecord
from .builder import sub_element, to_xml
from .context import DEFAULT_NAME_PART_FIELDS, MappingContext
from .control import build_control
from .description import build_description
from .errors import RecordValidationError, UnrecognizedKindError
from .identity import build_identity
from .relations import build_alternative_set, build_relations

if TYPE_CHECKING:
    from ....clients.label_client import LabelLookup

logger = logging.getLogger(__name__)

EAC_NS = "urn:isbn:1-931666-33-4"
XLINK_NS = "http://www.w3.org/1999/xlink"
XSI_NS = "http://www.w3.org/2001/XMLSchema-instance"
HTML_NS = "http://www.w3.org/1999/xhtml"
SCHEMA_LOCATION = f"{EAC_NS} http://eac.staatsbibliothek-berlin.de/schema/cpf.xsd"

ROOT_ATTRIBUTES = {
    "xmlns": EAC_NS,
    "xmlns:html": HTML_NS,
    "xmlns:xlink": XLINK_NS,
    "xmlns:xsi": XSI_NS,
    "xsi:schemaLocation": SCHEMA_LOCATION,
    "xml:lang": "eng",
}

# pydantic error types that mean a discriminator value has no model
_KIND_ERROR_TYPES = {"union_tag_invalid", "union_tag_not_found", "enum"}


def load_agent_record(data: Mapping[str, Any]) -> AgentRecord:
    """Validate a JSON-like agent record.

    Args:
        data: Agent record as delivered by the export pipeline

    Returns:
        The validated AgentRecord

    Raises:
        UnrecognizedKindError: If the agent, a note, a subnote or a date
            carries a missing or unknown kind
        RecordValidationError: If the record is otherwise malformed
    """
    try:
        return AgentRecord.model_validate(data)
    except ValidationError as e:
        for error in e.errors():
            kind_error = _as_kind_error(error)
            if kind_error is not None:
                raise kind_error from e
        raise RecordValidationError(f"Invalid agent record: {e}") from e


def _as_kind_error(error: dict) -> Optional[UnrecognizedKindError]:
    loc = tuple(error.get("loc", ()))
    error_type = error.get("type")

    if error_type == "missing" and loc == ("jsonmodel_type",):
        return UnrecognizedKindError("agent", None)
    if error_type not in _KIND_ERROR_TYPES:
        return None
    if error_type == "enum" and (not loc or loc[-1] != "jsonmodel_type"):
        return None

    ctx = error.get("ctx") or {}
    kind = ctx.get("tag", error.get("input"))
    if "subnotes" in loc:
        category = "subnote"
    elif loc and loc[0] == "notes":
        category = "note"
    elif error_type == "enum":
        category = "agent"
    else:
        category = "date"
    return UnrecognizedKindError(category, kind)


class EacSerializer:
    """Turns one agent record into one EAC-CPF document.

    Configuration and label lookup are injected so tests and callers can
    supply fixed fakes.
    """

    def __init__(self, config: ExportConfig, labels: "LabelLookup"):
        self.config = config
        self.labels = labels

    def build_document(
        self,
        record: AgentRecord,
        related_records: Iterable[RelatedRecord] = (),
        name_part_fields: Optional[Mapping[AgentKind, Mapping[str, Optional[str]]]] = None
    ) -> Element:
        """Build the eac-cpf element tree for a record.

        Args:
            record: Validated agent record (never modified)
            related_records: Records linked to the agent, already resolved
            name_part_fields: Per-kind name-part field to label mapping,
                defaults to DEFAULT_NAME_PART_FIELDS

        Returns:
            Root eac-cpf element
        """
        part_fields = (name_part_fields or DEFAULT_NAME_PART_FIELDS).get(record.jsonmodel_type)
        if part_fields is None:
            raise UnrecognizedKindError("agent", record.jsonmodel_type)

        ctx = MappingContext(
            config=self.config,
            labels=self.labels,
            name_part_fields=dict(part_fields),
            related_records=tuple(related_records),
        )

        logger.debug(
            f"Building EAC-CPF document for {record.jsonmodel_type.value}",
            extra={"agent_uri": record.uri},
        )

        root = Element("eac-cpf", dict(ROOT_ATTRIBUTES))
        build_control(root, record, ctx)

        cpf_description = sub_element(root, "cpfDescription")
        build_identity(cpf_description, record, ctx)
        build_description(cpf_description, record, ctx)
        build_relations(cpf_description, record, ctx)
        build_alternative_set(cpf_description, record.agent_alternate_sets)

        return root

    def serialize(
        self,
        record: AgentRecord | Mapping[str, Any],
        related_records: Iterable[RelatedRecord] = (),
        name_part_fields: Optional[Mapping[AgentKind, Mapping[str, Optional[str]]]] = None,
        pretty: bool = True
    ) -> str:
        """Serialize a record to an EAC-CPF XML string.

        Args:
            record: AgentRecord, or a raw record dict to validate first
            related_records: Records linked to the agent, already resolved
            name_part_fields: Optional per-kind name-part overrides
            pretty: Indent the output

        Returns:
            The XML document, with declaration
        """
        if not isinstance(record, AgentRecord):
            record = load_agent_record(record)

        root = self.build_document(record, related_records, name_part_fields)
        xml = to_xml(root, pretty=pretty)

        logger.info(
            f"Serialized EAC-CPF document ({len(xml)} chars)",
            extra={"agent_uri": record.uri},
        )
        return xml
