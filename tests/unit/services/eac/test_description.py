#!/usr/bin/env python3

from eac_export.models.models import AgentGender, AgentPlace, UsedLanguage
from eac_export.services.domain.eac.description import (
    build_description,
    build_gender,
    build_subject_subrecord,
)
from utils.eac_helpers import child_tags, texts
from utils.factories import (
    AgentFunctionFactory,
    AgentGenderFactory,
    AgentOccupationFactory,
    AgentPlaceFactory,
    AgentRecordFactory,
    AgentTopicFactory,
    NoteFactory,
    RangeDateFactory,
    SingleDateFactory,
    SubjectLinkFactory,
)


class TestExistDatesAndLanguages:
    """Test suite for existence dates and languages used"""

    def test_exist_dates(self, root, mapping_context):
        record = AgentRecordFactory(dates_of_existence=[
            SingleDateFactory(expression=None),
            RangeDateFactory(begin="1900", end="1950"),
        ])

        description = build_description(root, record, mapping_context)

        exist_dates = description.find("existDates")
        assert child_tags(exist_dates) == ["dateRange"]

    def test_exist_dates_omitted_when_none_survive(self, root, mapping_context):
        record = AgentRecordFactory(dates_of_existence=[RangeDateFactory(begin=None, end=None)])

        description = build_description(root, record, mapping_context)

        assert description.find("existDates") is None

    def test_languages_used(self, root, mapping_context):
        """Test each used language gets its own wrapper with joined notes"""
        record = AgentRecordFactory(used_languages=[
            UsedLanguage(language="fre", script="Latn", notes=[NoteFactory(content="one"), NoteFactory(content="two")]),
            UsedLanguage(language="eng"),
            UsedLanguage(),
        ])

        description = build_description(root, record, mapping_context)

        wrappers = description.findall("languagesUsed")
        assert len(wrappers) == 2
        first = wrappers[0].find("languageUsed")
        assert first.find("language").text == "French"
        assert first.find("script").text == "Latin"
        assert first.find("descriptiveNote/p").text == "one\ntwo"
        assert wrappers[1].find("languageUsed/language").get("languageCode") == "eng"


class TestSubjectSubrecords:
    """Test suite for places, occupations, functions and topics"""

    def test_place(self, root):
        place = AgentPlaceFactory(
            place_role="place_of_birth",
            subjects=[SubjectLinkFactory(term="Boston", source="naf")],
            dates=[SingleDateFactory(expression="1900")],
            notes=[NoteFactory(content="Born here")],
        )

        elements = build_subject_subrecord(root, "place", place)

        assert len(elements) == 1
        element = elements[0]
        assert child_tags(element) == ["placeRole", "placeEntry", "date", "descriptiveNote"]
        assert element.find("placeRole").text == "place_of_birth"
        assert element.find("placeEntry").text == "Boston"
        assert element.find("placeEntry").get("vocabularySource") == "naf"

    def test_only_first_date_and_note_are_kept(self, root):
        """Test subject subrecords keep one date and one note even when given more"""
        occupation = AgentOccupationFactory(
            dates=[
                SingleDateFactory(expression=None),
                SingleDateFactory(expression="1930"),
                RangeDateFactory(begin="1940", end="1950"),
            ],
            notes=[NoteFactory(content="first"), NoteFactory(content="second")],
        )

        element = build_subject_subrecord(root, "occupation", occupation)[0]

        assert child_tags(element) == ["term", "date", "descriptiveNote"]
        assert element.find("date").text == "1930"
        assert element.find("descriptiveNote/p").text == "first"

    def test_one_element_per_subject_first_term_only(self, root):
        function = AgentFunctionFactory(subjects=[
            SubjectLinkFactory(term="Cataloging"),
            SubjectLinkFactory(term="Reference"),
        ])
        function.subjects[0].resolved.terms.append(function.subjects[1].resolved.terms[0])

        elements = build_subject_subrecord(root, "function", function)

        assert texts(e.find("term") for e in elements) == ["Cataloging", "Reference"]

    def test_topic_gets_associated_subject_type(self, root):
        element = build_subject_subrecord(root, "localDescription", AgentTopicFactory())[0]

        assert element.get("localType") == "associatedSubject"
        assert element.find("term").text == "Archives"

    def test_wrappers_per_record(self, root, mapping_context):
        record = AgentRecordFactory(
            agent_places=[AgentPlaceFactory(), AgentPlaceFactory(), AgentPlace(subjects=[])],
            agent_occupations=[AgentOccupationFactory()],
            agent_functions=[AgentFunctionFactory()],
        )

        description = build_description(root, record, mapping_context)

        assert child_tags(description) == ["places", "places", "occupations", "functions"]
        assert child_tags(description.find("occupations")) == ["occupation"]
        assert child_tags(description.find("functions")) == ["function"]


class TestGendersAndLocalDescriptions:
    """Test suite for genders and the localDescriptions wrapper"""

    def test_gender_keeps_every_date_and_note(self, root):
        """Test genders loop all dates and notes, unlike subject subrecords"""
        gender = AgentGenderFactory(
            gender="woman",
            dates=[SingleDateFactory(expression="1900"), RangeDateFactory(), SingleDateFactory(expression="1990")],
            notes=[NoteFactory(content="a"), NoteFactory(content="b")],
        )

        element = build_gender(root, gender)

        assert element.get("localType") == "gender"
        assert child_tags(element) == ["term", "date", "dateRange", "date", "descriptiveNote", "descriptiveNote"]
        assert element.find("term").text == "woman"

    def test_blank_gender_skipped(self, root):
        assert build_gender(root, AgentGender(gender="  ")) is None
        assert len(root) == 0

    def test_local_descriptions_holds_topics_then_genders(self, root, mapping_context):
        record = AgentRecordFactory(
            agent_topics=[AgentTopicFactory()],
            agent_genders=[AgentGenderFactory()],
        )

        description = build_description(root, record, mapping_context)

        local_descriptions = description.findall("localDescriptions")
        assert len(local_descriptions) == 1
        types = [e.get("localType") for e in local_descriptions[0]]
        assert types == ["associatedSubject", "gender"]

    def test_local_descriptions_omitted_without_topics_or_genders(self, root, mapping_context):
        description = build_description(root, AgentRecordFactory(), mapping_context)

        assert description.find("localDescriptions") is None
        assert len(description) == 0
