#!/usr/bin/env python3

from enum import Enum
from typing import Annotated, Any, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

# Pydantic Models
#
# Field names follow the ArchivesSpace agent JSON so a record serialized by
# the backend validates as-is. Resolved links arrive under "_resolved".


class AgentKind(str, Enum):
    PERSON = "agent_person"
    FAMILY = "agent_family"
    CORPORATE_ENTITY = "agent_corporate_entity"
    SOFTWARE = "agent_software"


class XlinkAttributes(BaseModel):
    """Cross-reference attribute set shared by linked subrecords."""

    file_uri: str | None = None
    file_version_xlink_actuate_attribute: str | None = None
    file_version_xlink_show_attribute: str | None = None
    xlink_title_attribute: str | None = None
    xlink_role_attribute: str | None = None
    xlink_arcrole_attribute: str | None = None
    last_verified_date: str | None = None


# Dates


class DateSingleValues(BaseModel):
    date_expression: str | None = None
    date_standardized: str | None = None
    date_role: str | None = None


class DateRangeValues(BaseModel):
    begin_date_expression: str | None = None
    begin_date_standardized: str | None = None
    end_date_expression: str | None = None
    end_date_standardized: str | None = None


class SingleDate(BaseModel):
    date_type_structured: Literal["single"]
    date_label: str | None = None
    structured_date_single: DateSingleValues = Field(default_factory=DateSingleValues)


class RangeDate(BaseModel):
    date_type_structured: Literal["range"]
    date_label: str | None = None
    structured_date_range: DateRangeValues = Field(default_factory=DateRangeValues)


StructuredDate = Annotated[Union[SingleDate, RangeDate], Field(discriminator="date_type_structured")]


# Control section


class RecordIdentifier(BaseModel):
    record_identifier: str | None = None
    identifier_type: str | None = None
    primary_identifier: bool = False
    source: str | None = None


class RecordControl(BaseModel):
    maintenance_status: str | None = None
    publication_status: str | None = None
    maintenance_agency: str | None = None  # agency code
    agency_name: str | None = None
    maintenance_agency_note: str | None = None
    language: str | None = None
    script: str | None = None
    language_note: str | None = None


class ConventionsDeclaration(XlinkAttributes):
    name_rule: str | None = None
    citation: str | None = None
    descriptive_note: str | None = None


class MaintenanceHistory(BaseModel):
    maintenance_event_type: str | None = None
    event_date: str | None = None
    maintenance_agent_type: str | None = None
    agent: str | None = None
    descriptive_note: str | None = None


class AgentSource(XlinkAttributes):
    source_entry: str | None = None
    descriptive_note: str | None = None


# Identity section


class AgentIdentifier(BaseModel):
    entity_identifier: str | None = None
    identifier_type: str | None = None


class NameEntry(BaseModel):
    """A name form. Part fields cover every agent kind; unused ones stay None."""

    model_config = ConfigDict(extra="allow")

    language: str | None = None
    script: str | None = None
    transliteration: str | None = None
    authorized: bool = False
    is_display_name: bool = False
    source: str | None = None
    rules: str | None = None
    use_dates: list[StructuredDate] = []
    parallel_names: list["NameEntry"] = []

    # person / corporate entity
    primary_name: str | None = None
    title: str | None = None
    prefix: str | None = None
    rest_of_name: str | None = None
    suffix: str | None = None
    fuller_form: str | None = None
    number: str | None = None
    subordinate_name_1: str | None = None
    subordinate_name_2: str | None = None
    # family
    family_name: str | None = None
    family_type: str | None = None
    # software
    software_name: str | None = None
    version: str | None = None
    manufacturer: str | None = None
    # shared
    qualifier: str | None = None
    location: str | None = None
    dates: str | None = None


NameEntry.model_rebuild()


# Description section


class SubrecordNote(BaseModel):
    content: str | None = None


class Term(BaseModel):
    term: str | None = None
    term_type: str | None = None


class ResolvedSubject(BaseModel):
    title: str | None = None
    source: str | None = None
    terms: list[Term] = []

    @property
    def first_term(self) -> Optional[str]:
        return self.terms[0].term if self.terms else None


class SubjectLink(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    ref: str | None = None
    resolved: ResolvedSubject = Field(default_factory=ResolvedSubject, alias="_resolved")


class UsedLanguage(BaseModel):
    language: str | None = None
    script: str | None = None
    notes: list[SubrecordNote] = []


class SubjectSubrecord(BaseModel):
    subjects: list[SubjectLink] = []
    dates: list[StructuredDate] = []
    notes: list[SubrecordNote] = []


class AgentPlace(SubjectSubrecord):
    jsonmodel_type: Literal["agent_place"] = "agent_place"
    place_role: str | None = None


class AgentOccupation(SubjectSubrecord):
    jsonmodel_type: Literal["agent_occupation"] = "agent_occupation"


class AgentFunction(SubjectSubrecord):
    jsonmodel_type: Literal["agent_function"] = "agent_function"


class AgentTopic(SubjectSubrecord):
    jsonmodel_type: Literal["agent_topic"] = "agent_topic"


class AgentGender(BaseModel):
    gender: str | None = None
    dates: list[StructuredDate] = []
    notes: list[SubrecordNote] = []


# Notes and subnotes


class NoteAbstract(BaseModel):
    jsonmodel_type: Literal["note_abstract"]
    content: list[str] = []


class NoteCitation(BaseModel):
    jsonmodel_type: Literal["note_citation"]
    content: list[str] = []
    xlink: dict[str, str | None] = {}


class DefinedListItem(BaseModel):
    label: str | None = None
    value: str | None = None


class NoteDefinedList(BaseModel):
    jsonmodel_type: Literal["note_definedlist"]
    title: str | None = None
    items: list[DefinedListItem] = []


class NoteOrderedList(BaseModel):
    jsonmodel_type: Literal["note_orderedlist"]
    title: str | None = None
    enumeration: str | None = None
    items: list[str] = []


class ChronologyItem(BaseModel):
    event_date: str | None = None
    events: list[str] = []


class NoteChronology(BaseModel):
    jsonmodel_type: Literal["note_chronology"]
    title: str | None = None
    items: list[ChronologyItem] = []


class OutlineLevel(BaseModel):
    items: list[Union[str, "OutlineLevel"]] = []


OutlineLevel.model_rebuild()


class NoteOutline(BaseModel):
    jsonmodel_type: Literal["note_outline"]
    levels: list[OutlineLevel] = []


class NoteText(BaseModel):
    jsonmodel_type: Literal["note_text"]
    content: str | None = None


Subnote = Annotated[
    Union[
        NoteAbstract,
        NoteCitation,
        NoteDefinedList,
        NoteOrderedList,
        NoteChronology,
        NoteOutline,
        NoteText,
    ],
    Field(discriminator="jsonmodel_type"),
]


class _AgentNoteBase(BaseModel):
    label: str | None = None
    publish: bool | None = None
    subnotes: list[Subnote] = []


class NoteBiogHist(_AgentNoteBase):
    jsonmodel_type: Literal["note_bioghist"]


class NoteGeneralContext(_AgentNoteBase):
    jsonmodel_type: Literal["note_general_context"]


class NoteMandate(_AgentNoteBase):
    jsonmodel_type: Literal["note_mandate"]


class NoteLegalStatus(_AgentNoteBase):
    jsonmodel_type: Literal["note_legal_status"]


class NoteStructureOrGenealogy(_AgentNoteBase):
    jsonmodel_type: Literal["note_structure_or_genealogy"]


AgentNote = Annotated[
    Union[
        NoteBiogHist,
        NoteGeneralContext,
        NoteMandate,
        NoteLegalStatus,
        NoteStructureOrGenealogy,
    ],
    Field(discriminator="jsonmodel_type"),
]


# Relations


class AgentResource(XlinkAttributes):
    linked_resource: str | None = None  # resource title
    linked_agent_role: str | None = None
    places: list[SubjectLink] = []
    dates: list[StructuredDate] = []


class ResolvedAgent(BaseModel):
    jsonmodel_type: AgentKind
    uri: str | None = None
    title: str | None = None
    display_name: NameEntry = Field(default_factory=NameEntry)


class RelatedAgent(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    jsonmodel_type: str | None = None  # relationship type, e.g. agent_relationship_parentchild
    relator: str | None = None
    ref: str | None = None
    dates: StructuredDate | None = None
    resolved: ResolvedAgent = Field(alias="_resolved")


class AlternateSet(XlinkAttributes):
    set_component: str | None = None
    descriptive_note: str | None = None


class AgentRecord(BaseModel):
    """An agent as delivered by the export pipeline, links already resolved."""

    jsonmodel_type: AgentKind
    uri: str | None = None
    title: str | None = None

    agent_record_identifiers: list[RecordIdentifier] = []
    agent_record_controls: list[RecordControl] = []
    agent_conventions_declarations: list[ConventionsDeclaration] = []
    agent_maintenance_histories: list[MaintenanceHistory] = []
    agent_sources: list[AgentSource] = []

    agent_identifiers: list[AgentIdentifier] = []
    names: list[NameEntry] = []

    dates_of_existence: list[StructuredDate] = []
    used_languages: list[UsedLanguage] = []
    agent_places: list[AgentPlace] = []
    agent_occupations: list[AgentOccupation] = []
    agent_functions: list[AgentFunction] = []
    agent_topics: list[AgentTopic] = []
    agent_genders: list[AgentGender] = []
    notes: list[AgentNote] = []

    agent_resources: list[AgentResource] = []
    related_agents: list[RelatedAgent] = []
    agent_alternate_sets: list[AlternateSet] = []


# Side channel: records linked to the agent, resolved by the export pipeline


class LinkedRecord(BaseModel):
    title: str | None = None
    uri: str | None = None


class RelatedRecord(BaseModel):
    role: str  # creator, subject, source
    record: LinkedRecord


# Request Models


class ExportRequest(BaseModel):
    """Body of an EAC-CPF export request."""
    record: dict[str, Any]
    related_records: list[RelatedRecord] = []
