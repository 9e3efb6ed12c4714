"""
EAC-CPF Export Domain

Maps agent records onto EAC-CPF documents:
- serializer: document assembly and record loading
- control / identity / description / notes / relations: section mappers
- builder / dates: shared element and date primitives
"""

from .errors import (
    CollaboratorError,
    EacExportError,
    LabelLookupError,
    OutlineDepthError,
    RecordValidationError,
    UnrecognizedKindError,
)
from .serializer import EacSerializer, load_agent_record

__all__ = [
    # Serialization
    "EacSerializer",
    "load_agent_record",
    # Errors
    "EacExportError",
    "UnrecognizedKindError",
    "OutlineDepthError",
    "RecordValidationError",
    "CollaboratorError",
    "LabelLookupError",
]
