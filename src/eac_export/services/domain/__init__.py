"""
Domain Layer

This package contains the business logic of the exporter, organized by
domain area. Domain services never perform I/O themselves; collaborators
(configuration, label lookup) are passed in by the caller.

Domains:
- eac: agent record to EAC-CPF document mapping
"""
