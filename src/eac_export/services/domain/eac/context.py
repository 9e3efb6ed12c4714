#!/usr/bin/env python3
"""Read-only inputs shared by the mappers during one export."""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional, Sequence

from ....core.config import ExportConfig
from ....models.models import AgentKind, RelatedRecord

if TYPE_CHECKING:
    from ....clients.label_client import LabelLookup


# Name part fields exported per agent kind, in output order. A label of None
# means the field name itself is used as the part's localType.
DEFAULT_NAME_PART_FIELDS: dict[AgentKind, dict[str, Optional[str]]] = {
    AgentKind.PERSON: {
        "primary_name": "surname",
        "title": None,
        "prefix": None,
        "rest_of_name": "forename",
        "suffix": None,
        "fuller_form": None,
        "number": None,
        "qualifier": None,
        "dates": None,
    },
    AgentKind.FAMILY: {
        "family_name": "surname",
        "prefix": None,
        "family_type": None,
        "location": None,
        "qualifier": None,
        "dates": None,
    },
    AgentKind.CORPORATE_ENTITY: {
        "primary_name": None,
        "subordinate_name_1": None,
        "subordinate_name_2": None,
        "number": None,
        "location": None,
        "qualifier": None,
        "dates": None,
    },
    AgentKind.SOFTWARE: {
        "software_name": None,
        "version": None,
        "manufacturer": None,
        "qualifier": None,
        "dates": None,
    },
}


@dataclass(frozen=True)
class MappingContext:
    """Collaborators and side-channel data for one record export.

    Attributes:
        config: Export configuration (agency code flag, public proxy URL)
        labels: Locale label lookup for language and script codes
        name_part_fields: Ordered name-part field to label mapping for the agent kind
        related_records: Records linked to the agent, already resolved
    """

    config: ExportConfig
    labels: "LabelLookup"
    name_part_fields: dict[str, Optional[str]] = field(default_factory=dict)
    related_records: Sequence[RelatedRecord] = ()
