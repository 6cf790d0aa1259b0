"""
Configuration lives in ``config.settings`` as module-level constants.

Callers import it with ``from config import settings``.
"""

from . import settings

__all__ = ["settings"]
