#!/usr/bin/env python3
"""
Handlers for EAC-CPF export requests.

Validates the incoming agent record, runs the serializer and translates
export errors into HTTP responses.
"""

import logging
import re

from fastapi import HTTPException

from ..models.models import ExportRequest
from ..services.domain.eac import (
    CollaboratorError,
    EacExportError,
    EacSerializer,
    OutlineDepthError,
    RecordValidationError,
    UnrecognizedKindError,
    load_agent_record,
)

logger = logging.getLogger(__name__)


def export_filename(agent_uri: str | None) -> str:
    """Download filename for an agent, e.g. /agents/people/5 -> agent_people_5_eac.xml"""
    if not agent_uri:
        return "agent_eac.xml"
    slug = re.sub(r"[^A-Za-z0-9]+", "_", agent_uri).strip("_")
    slug = re.sub(r"^agents_", "agent_", slug)
    return f"{slug}_eac.xml"


def handle_eac_export(request: ExportRequest, serializer: EacSerializer) -> tuple[str, str]:
    """Export one agent record as EAC-CPF.

    Args:
        request: Export request holding the record and its related records
        serializer: Serializer wired to config and label lookup

    Returns:
        Tuple of (xml document, download filename)

    Raises:
        HTTPException: 422 for records that cannot be mapped, 503 when a
            collaborator is unavailable
    """
    try:
        record = load_agent_record(request.record)
        xml = serializer.serialize(record, related_records=request.related_records)
    except (UnrecognizedKindError, OutlineDepthError, RecordValidationError) as e:
        logger.warning(f"Agent record rejected for EAC-CPF export: {e}")
        raise HTTPException(status_code=422, detail=str(e)) from e
    except CollaboratorError as e:
        logger.error(f"EAC-CPF export collaborator failure: {e}")
        raise HTTPException(status_code=503, detail=str(e)) from e
    except EacExportError as e:
        logger.error(f"EAC-CPF export failed: {e}")
        raise HTTPException(status_code=500, detail=str(e)) from e

    logger.info(f"Exported EAC-CPF for {record.uri}")
    return xml, export_filename(record.uri)
