"""
Command building for imagick-convert.

Operations are recorded as ordered convert options and executed as one
subprocess when the image is saved.
"""

from .options import CommandOptions, command_string, format_value
from .executor import CommandExecutor
from .masks import render_rounded_corner_mask, rounded_corner_mask_options
from .builder import ImagickConvert
from .pipeline import OperationPipeline, OperationStep, SUPPORTED_OPERATIONS

__all__ = [
    "CommandOptions",
    "CommandExecutor",
    "ImagickConvert",
    "OperationPipeline",
    "OperationStep",
    "SUPPORTED_OPERATIONS",
    # Helpers
    "command_string",
    "format_value",
    "render_rounded_corner_mask",
    "rounded_corner_mask_options",
]
