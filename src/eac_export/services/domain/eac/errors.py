#!/usr/bin/env python3
"""Exceptions raised while exporting agent records as EAC-CPF.

Absent or empty fields are never errors: the mappers drop the field, the
element or the whole group instead. Only unknown discriminators, malformed
input and collaborator failures are raised.
"""


class EacExportError(Exception):
    """Base class for all EAC-CPF export failures."""
    pass


class UnrecognizedKindError(EacExportError):
    """Raised when an agent, note, subnote or date kind has no mapping."""

    def __init__(self, category: str, kind: object):
        self.category = category
        self.kind = kind
        super().__init__(f"Unrecognized {category} kind: {kind!r}")


class OutlineDepthError(EacExportError):
    """Raised when outline levels nest deeper than the allowed ceiling."""
    pass


class RecordValidationError(EacExportError):
    """Raised when the source record does not match the agent model."""
    pass


class CollaboratorError(EacExportError):
    """Raised when an injected collaborator (config, label lookup) fails."""
    pass


class LabelLookupError(CollaboratorError):
    """Raised when the locale label source cannot be loaded."""
    pass
