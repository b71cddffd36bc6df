"""Pydantic data models for ptedl."""

from ptedl.models.config import ParserConfig
from ptedl.models.session import (
    EDLClip,
    EDLFileList,
    EDLMarker,
    EDLMediaFile,
    EDLPlugin,
    EDLPluginFormat,
    EDLSession,
    EDLTrack,
    EDLTrackEvent,
    EDLUnit,
)

__all__ = [
    "ParserConfig",
    "EDLClip",
    "EDLFileList",
    "EDLMarker",
    "EDLMediaFile",
    "EDLPlugin",
    "EDLPluginFormat",
    "EDLSession",
    "EDLTrack",
    "EDLTrackEvent",
    "EDLUnit",
]
