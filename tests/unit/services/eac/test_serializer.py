#!/usr/bin/env python3

import copy
import logging

import pytest

from eac_export.models.models import AgentKind, LinkedRecord, NameEntry, RelatedRecord
from eac_export.services.domain.eac import (
    EacSerializer,
    LabelLookupError,
    RecordValidationError,
    UnrecognizedKindError,
    load_agent_record,
)
from eac_export.services.domain.eac.serializer import EAC_NS
from utils.eac_helpers import NS, XML_NS, XSI_NS, child_tags, parse_eac, texts, xlink
from utils.factories import AgentRecordFactory, SingleDateFactory
from utils.fakes import FailingLabelLookup


def local_tags(element):
    """Child tags without the EAC namespace"""
    return [tag.replace(f"{{{EAC_NS}}}", "") for tag in child_tags(element)]


@pytest.mark.integration
class TestSerializeDocument:
    """End-to-end tests serializing a full person record"""

    def test_minimal_person(self, serializer):
        """Test a person with one authorized name and one existence date"""
        record = AgentRecordFactory(
            names=[NameEntry(primary_name="Jane Doe", authorized=True, source="LCNAF")],
            dates_of_existence=[SingleDateFactory(expression="1900-1950", standardized="1900/1950")],
        )

        doc = parse_eac(serializer.serialize(record))

        identity = doc.find("eac:cpfDescription/eac:identity", NS)
        assert identity.find("eac:entityType", NS).text == "person"
        name_entries = identity.findall("eac:nameEntry", NS)
        assert len(name_entries) == 1
        assert name_entries[0].find("eac:authorizedForm", NS).text == "LCNAF"
        assert name_entries[0].find("eac:alternativeForm", NS) is None

        dates = doc.findall("eac:cpfDescription/eac:description/eac:existDates/eac:date", NS)
        assert len(dates) == 1
        assert dates[0].get("standardDate") == "1900/1950"
        assert dates[0].text == "1900-1950"

    def test_root_element(self, serializer):
        xml = serializer.serialize(AgentRecordFactory())

        assert xml.startswith("<?xml version='1.0' encoding='UTF-8'?>")
        doc = parse_eac(xml)
        assert doc.tag == f"{{{EAC_NS}}}eac-cpf"
        assert doc.get(f"{{{XML_NS}}}lang") == "eng"
        assert doc.get(f"{{{XSI_NS}}}schemaLocation").startswith(f"{EAC_NS} ")
        assert local_tags(doc) == ["control", "cpfDescription"]

    def test_full_record(self, serializer, agent_person_data, labels):
        related_records = [
            RelatedRecord(role="creator", record=LinkedRecord(title="Doe family papers", uri="/repositories/2/resources/1")),
        ]

        doc = parse_eac(serializer.serialize(agent_person_data, related_records=related_records))

        control = doc.find("eac:control", NS)
        assert local_tags(control) == ["recordId", "maintenanceStatus", "maintenanceAgency", "languageDeclaration"]
        assert control.find("eac:maintenanceAgency/eac:agencyCode", NS).text == "US-DLC"
        language = control.find("eac:languageDeclaration/eac:language", NS)
        assert language.get("languageCode") == "eng"
        assert language.text == "English"
        assert ("language_iso639_2", "eng") in labels.calls

        cpf_description = doc.find("eac:cpfDescription", NS)
        assert local_tags(cpf_description) == ["identity", "description", "relations"]

        part = cpf_description.find("eac:identity/eac:nameEntry/eac:part", NS)
        assert part.get("localType") == "surname"
        assert part.text == "Jane Doe"

        description = cpf_description.find("eac:description", NS)
        assert local_tags(description) == ["existDates", "localDescriptions", "biogHist"]
        topic = description.find("eac:localDescriptions/eac:localDescription", NS)
        assert topic.get("localType") == "associatedSubject"
        assert topic.find("eac:term", NS).text == "Archivists"

        bioghist = description.find("eac:biogHist", NS)
        assert local_tags(bioghist) == ["p", "outline"]
        assert texts(bioghist.findall("eac:outline/eac:level/eac:item", NS)) == ["Early life"]
        assert texts(bioghist.findall("eac:outline/eac:level/eac:level/eac:item", NS)) == ["School"]

        relations = cpf_description.find("eac:relations", NS)
        assert local_tags(relations) == ["cpfRelation", "resourceRelation"]
        cpf_relation = relations.find("eac:cpfRelation", NS)
        assert cpf_relation.get("cpfRelationType") == "is_child_of"
        assert cpf_relation.get(xlink("href")) == "http://public.example.org/agents/people/6"
        assert cpf_relation.find("eac:relationEntry", NS).text == "Doe, John"
        resource_relation = relations.find("eac:resourceRelation", NS)
        assert resource_relation.get("resourceRelationType") == "creatorOf"
        assert resource_relation.get(xlink("href")) == "http://public.example.org/repositories/2/resources/1"

    def test_compact_output(self, serializer):
        xml = serializer.serialize(AgentRecordFactory(), pretty=False)

        declaration, body = xml.split("\n", 1)
        assert declaration.startswith("<?xml")
        assert "\n" not in body

    def test_record_not_modified(self, serializer, agent_person_data):
        original = copy.deepcopy(agent_person_data)
        record = load_agent_record(agent_person_data)
        dumped = record.model_dump()

        serializer.serialize(record)
        serializer.serialize(agent_person_data)

        assert agent_person_data == original
        assert record.model_dump() == dumped

    def test_repeatable(self, serializer, agent_person_data):
        """Test serializing the same record twice yields identical documents"""
        assert serializer.serialize(agent_person_data) == serializer.serialize(agent_person_data)

    def test_name_part_override(self, serializer):
        record = AgentRecordFactory(names=[NameEntry(primary_name="Doe", rest_of_name="Jane")])
        overrides = {AgentKind.PERSON: {"rest_of_name": "given", "primary_name": None}}

        doc = parse_eac(serializer.serialize(record, name_part_fields=overrides))

        parts = doc.findall("eac:cpfDescription/eac:identity/eac:nameEntry/eac:part", NS)
        assert [(p.get("localType"), p.text) for p in parts] == [("given", "Jane"), ("primary_name", "Doe")]

    def test_kind_without_name_part_fields(self, serializer):
        record = AgentRecordFactory(jsonmodel_type=AgentKind.FAMILY)

        with pytest.raises(UnrecognizedKindError) as exc_info:
            serializer.build_document(record, name_part_fields={AgentKind.PERSON: {}})

        assert exc_info.value.category == "agent"

    def test_label_lookup_failure_propagates(self, export_config, agent_person_data):
        serializer = EacSerializer(export_config, FailingLabelLookup())

        with pytest.raises(LabelLookupError):
            serializer.serialize(agent_person_data)

    def test_logs_agent_uri(self, serializer, caplog):
        with caplog.at_level(logging.INFO, logger="eac_export"):
            serializer.serialize(AgentRecordFactory(uri="/agents/people/77"))

        records = [r for r in caplog.records if "Serialized EAC-CPF document" in r.getMessage()]
        assert len(records) == 1
        assert records[0].agent_uri == "/agents/people/77"


@pytest.mark.unit
class TestLoadAgentRecord:
    """Test suite for record validation and kind errors"""

    def test_valid_record(self, agent_person_data):
        record = load_agent_record(agent_person_data)

        assert record.jsonmodel_type == AgentKind.PERSON
        assert record.related_agents[0].resolved.uri == "/agents/people/6"

    def test_unknown_agent_kind(self, agent_person_data):
        agent_person_data["jsonmodel_type"] = "agent_robot"

        with pytest.raises(UnrecognizedKindError) as exc_info:
            load_agent_record(agent_person_data)

        assert exc_info.value.category == "agent"
        assert exc_info.value.kind == "agent_robot"

    def test_missing_agent_kind(self, agent_person_data):
        del agent_person_data["jsonmodel_type"]

        with pytest.raises(UnrecognizedKindError) as exc_info:
            load_agent_record(agent_person_data)

        assert exc_info.value.category == "agent"

    def test_unknown_note_kind(self, agent_person_data):
        agent_person_data["notes"][0]["jsonmodel_type"] = "note_odd"

        with pytest.raises(UnrecognizedKindError) as exc_info:
            load_agent_record(agent_person_data)

        assert exc_info.value.category == "note"
        assert exc_info.value.kind == "note_odd"

    def test_unknown_subnote_kind(self, agent_person_data):
        agent_person_data["notes"][0]["subnotes"].append({"jsonmodel_type": "note_bibliography"})

        with pytest.raises(UnrecognizedKindError) as exc_info:
            load_agent_record(agent_person_data)

        assert exc_info.value.category == "subnote"
        assert exc_info.value.kind == "note_bibliography"

    def test_unknown_date_kind(self, agent_person_data):
        agent_person_data["dates_of_existence"][0]["date_type_structured"] = "bulk"

        with pytest.raises(UnrecognizedKindError) as exc_info:
            load_agent_record(agent_person_data)

        assert exc_info.value.category == "date"
        assert exc_info.value.kind == "bulk"

    def test_malformed_record(self, agent_person_data):
        agent_person_data["names"] = "Jane Doe"

        with pytest.raises(RecordValidationError):
            load_agent_record(agent_person_data)
