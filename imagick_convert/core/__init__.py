"""Core types, errors and the base adapter."""

from .types import (
    CommandOption,
    CoverOrientation,
    ExecutionResult,
    ImageSize,
    MirrorMode,
)
from .errors import (
    ExternalToolFailure,
    ImagickConvertError,
    ResourceUnavailable,
    TempCleanupFailure,
)
from .adapter import ImageAdapter

__all__ = [
    "CommandOption",
    "CoverOrientation",
    "ExecutionResult",
    "ImageSize",
    "MirrorMode",
    "ImagickConvertError",
    "ResourceUnavailable",
    "ExternalToolFailure",
    "TempCleanupFailure",
    "ImageAdapter",
]
