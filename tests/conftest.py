#!/usr/bin/env python3

import json
import xml.etree.ElementTree as ET
from pathlib import Path

import pytest

from eac_export.core.config import ExportConfig
from eac_export.models.models import AgentKind
from eac_export.services.domain.eac import EacSerializer
from eac_export.services.domain.eac.context import DEFAULT_NAME_PART_FIELDS, MappingContext
from utils.fakes import FakeLabelLookup

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def export_config():
    """Config with agency codes enabled and a fixed public URL"""
    return ExportConfig(export_eac_agency_code=True, public_proxy_url="http://public.example.org")


@pytest.fixture
def labels():
    return FakeLabelLookup()


@pytest.fixture
def mapping_context(export_config, labels):
    """Mapping context for a person record"""
    return MappingContext(
        config=export_config,
        labels=labels,
        name_part_fields=dict(DEFAULT_NAME_PART_FIELDS[AgentKind.PERSON]),
    )


@pytest.fixture
def serializer(export_config, labels):
    return EacSerializer(export_config, labels)


@pytest.fixture
def root():
    """Bare parent element for mapper-level tests"""
    return ET.Element("root")


@pytest.fixture
def agent_person_data():
    """Raw JSON for a person record exercising every document section"""
    with open(FIXTURES_DIR / "agent_person.json", "r", encoding="utf-8") as f:
        return json.load(f)
