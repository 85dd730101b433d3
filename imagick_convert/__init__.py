"""
imagick-convert: deferred ImageMagick convert command builder.

Operations are recorded on an ImagickConvert adapter and rendered into a
single convert invocation when the image is saved.
"""

__version__ = "0.1.0"

from .core import (
    ExecutionResult,
    ExternalToolFailure,
    ImagickConvertError,
    ResourceUnavailable,
    TempCleanupFailure,
)
from .processing import ImagickConvert, OperationPipeline, OperationStep

__all__ = [
    "ImagickConvert",
    "OperationPipeline",
    "OperationStep",
    "ExecutionResult",
    "ImagickConvertError",
    "ResourceUnavailable",
    "ExternalToolFailure",
    "TempCleanupFailure",
]
