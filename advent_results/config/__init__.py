from __future__ import annotations

from .settings import Settings

# Load once at import time
settings = Settings.load()

__all__ = ["Settings", "settings"]
