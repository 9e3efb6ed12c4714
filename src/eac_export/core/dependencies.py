#!/usr/bin/env python3

from ..clients.label_client import YamlLabelLookup
from ..services.domain.eac import EacSerializer
from .config import ExportConfig

# Global collaborator instances, created on first use
_export_config = None
_label_lookup = None


def get_export_config() -> ExportConfig:
    """Get or create the process-wide export configuration"""
    global _export_config
    if _export_config is None:
        _export_config = ExportConfig.from_env()
    return _export_config


def get_label_lookup() -> YamlLabelLookup:
    """Get or create the process-wide locale label lookup"""
    global _label_lookup
    if _label_lookup is None:
        _label_lookup = YamlLabelLookup(get_export_config().locale_file)
    return _label_lookup


def get_serializer() -> EacSerializer:
    """Get an EAC-CPF serializer wired to the global collaborators"""
    return EacSerializer(get_export_config(), get_label_lookup())
