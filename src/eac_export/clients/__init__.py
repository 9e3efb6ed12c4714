"""
Client Layer

Wrappers for collaborators the exporter consumes but does not own.

Modules:
- label_client: locale label lookup for enumeration codes
"""

from .label_client import LabelLookup, YamlLabelLookup

__all__ = [
    'LabelLookup',
    'YamlLabelLookup',
]
