"""Settings module providing environment-driven configuration for sqlcraft.

Configuration Sources (precedence order):
    1. Environment Variables (highest priority), prefixed ``SQLCRAFT_``
    2. A ``.env`` file in the working directory
    3. Default Values in code (lowest priority)

Quick Start:
    >>> from sqlcraft.settings import get_settings
    >>> settings = get_settings()
    >>> config = settings.default_config(escape_identifiers=True)
"""

from sqlcraft.settings.main import SqlCraftSettings, get_settings

__all__ = [
    "SqlCraftSettings",
    "get_settings",
]
