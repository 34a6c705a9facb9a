"""Core package initializer for clozeterms.

Settings and logging live in :mod:`clozeterms.core.settings`:
    from clozeterms.core.settings import settings, load_settings, Settings, get_logger
"""

from __future__ import annotations
