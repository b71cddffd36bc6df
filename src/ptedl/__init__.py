"""ptedl: parser for Pro Tools session-text EDL exports."""

from __future__ import annotations

__version__ = "0.1.0"
