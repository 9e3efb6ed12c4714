#!/usr/bin/env python3
"""
Utility functions for reading environment variables with cross-platform support.

Handles Windows CRLF line endings and stray whitespace that can creep into
.env files used to configure the exporter.
"""

import os
import logging
from typing import Optional

logger = logging.getLogger(__name__)


def getenv_clean(key: str, default: str = None) -> Optional[str]:
    """Get environment variable with line endings and whitespace stripped.

    Args:
        key: Environment variable name
        default: Default value if variable is not set

    Returns:
        Cleaned environment variable value, or default if not set

    Example:
        >>> # .env file has: PUBLIC_PROXY_URL=http://localhost:8081\r\n
        >>> getenv_clean("PUBLIC_PROXY_URL")
        'http://localhost:8081'
    """
    raw_value = os.getenv(key, default)

    if raw_value is None:
        return None

    cleaned = raw_value.strip().rstrip("\r\n")

    if raw_value != cleaned:
        logger.warning(
            f"Environment variable {key} had trailing whitespace/line endings: "
            f"raw={repr(raw_value)}, cleaned={repr(cleaned)}"
        )

    return cleaned


def getenv_bool(key: str, default: bool = False) -> bool:
    """Get environment variable as boolean.

    "true", "1", "yes" and "on" (any case) are True; "false", "0", "no",
    "off" and the empty string are False. Anything else falls back to the
    default with a warning.

    Args:
        key: Environment variable name
        default: Default boolean value if variable is not set

    Returns:
        Boolean value
    """
    raw_value = getenv_clean(key, None)

    if raw_value is None:
        return default

    cleaned_lower = raw_value.lower()
    if cleaned_lower in ("true", "1", "yes", "on"):
        return True
    elif cleaned_lower in ("false", "0", "no", "off", ""):
        return False
    else:
        logger.warning(
            f"Environment variable {key} has unexpected boolean value: {repr(raw_value)}. "
            f"Using default: {default}"
        )
        return default
