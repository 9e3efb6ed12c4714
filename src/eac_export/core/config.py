#!/usr/bin/env python3
"""
Configuration for EAC-CPF export.

Values are read once from environment variables and handed to the serializer
as an explicit, read-only object; the mappers never read the environment.
"""

import logging
from pathlib import Path

from pydantic import BaseModel, ConfigDict

from .env_utils import getenv_bool, getenv_clean

logger = logging.getLogger(__name__)

DEFAULT_PUBLIC_PROXY_URL = "http://localhost:8081"

# Packaged enumeration labels used when EAC_LOCALE_FILE is not set
DEFAULT_LOCALE_FILE = Path(__file__).resolve().parent.parent / "config" / "locales" / "en.yml"


class ExportConfig(BaseModel):
    """Settings consulted while mapping a record.

    Attributes:
        export_eac_agency_code: Emit maintenanceAgency/agencyCode when True
        public_proxy_url: Base URL that relative record URIs are appended to
        locale_file: YAML file holding enumeration labels
    """

    model_config = ConfigDict(frozen=True)

    export_eac_agency_code: bool = False
    public_proxy_url: str = DEFAULT_PUBLIC_PROXY_URL
    locale_file: Path = DEFAULT_LOCALE_FILE

    @classmethod
    def from_env(cls) -> "ExportConfig":
        """Build configuration from EXPORT_EAC_AGENCY_CODE, PUBLIC_PROXY_URL and EAC_LOCALE_FILE."""
        locale_file = getenv_clean("EAC_LOCALE_FILE")
        config = cls(
            export_eac_agency_code=getenv_bool("EXPORT_EAC_AGENCY_CODE", False),
            public_proxy_url=getenv_clean("PUBLIC_PROXY_URL", DEFAULT_PUBLIC_PROXY_URL),
            locale_file=Path(locale_file) if locale_file else DEFAULT_LOCALE_FILE,
        )
        logger.info(
            f"Export config loaded: export_eac_agency_code={config.export_eac_agency_code}, "
            f"public_proxy_url={config.public_proxy_url}"
        )
        return config
