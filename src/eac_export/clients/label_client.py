#!/usr/bin/env python3
"""
Locale label lookup for enumeration values.

Translates a code within an enumeration category (for example
``language_iso639_2`` / ``fre``) into its display label. Labels come from a
YAML file shaped like the backend locale files::

    enumerations:
      language_iso639_2:
        fre: French
"""

import logging
import threading
from pathlib import Path
from typing import Optional, Protocol

import yaml

from ..services.domain.eac.errors import LabelLookupError

logger = logging.getLogger(__name__)


class LabelLookup(Protocol):
    """Anything that can turn (category, code) into a display label."""

    def lookup(self, category: str, code: str) -> str:
        ...


class YamlLabelLookup:
    """Label lookup backed by a YAML locale file, loaded on first use.

    Unknown codes fall back to the code itself. A missing or unreadable file
    is a collaborator failure and raises LabelLookupError.
    """

    def __init__(self, locale_file: Path):
        self.locale_file = Path(locale_file)
        self._enumerations: Optional[dict[str, dict[str, str]]] = None
        self._lock = threading.Lock()

    def _load(self) -> dict[str, dict[str, str]]:
        with self._lock:
            if self._enumerations is not None:
                return self._enumerations

            try:
                with open(self.locale_file, "r", encoding="utf-8") as f:
                    data = yaml.safe_load(f) or {}
            except OSError as e:
                raise LabelLookupError(f"Cannot read locale file {self.locale_file}: {e}") from e
            except yaml.YAMLError as e:
                raise LabelLookupError(f"Invalid YAML in locale file {self.locale_file}: {e}") from e

            enumerations = data.get("enumerations") if isinstance(data, dict) else None
            if not isinstance(enumerations, dict):
                raise LabelLookupError(f"Locale file {self.locale_file} has no 'enumerations' mapping")

            logger.info(f"Loaded {len(enumerations)} enumeration categories from {self.locale_file}")
            self._enumerations = enumerations
            return self._enumerations

    def lookup(self, category: str, code: str) -> str:
        """Display label for a code, or the code itself when none is defined."""
        labels = self._load().get(category) or {}
        label = labels.get(code)
        if label is None:
            logger.debug(f"No label for {category}.{code}, using raw code")
            return code
        return str(label)
