"""
Core data types for imagick-convert.

Small dataclasses and enums passed between the builder, the executor
and the source loader. No loose dicts at the internal API boundary.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class MirrorMode(Enum):
    """Axis used by mirror()."""
    VERTICAL = "vertical"
    HORIZONTAL = "horizontal"


class CoverOrientation(Enum):
    """Anchor of the crop box used by cover()."""
    CENTER = "center"
    TOP_LEFT = "topleft"
    TOP_RIGHT = "topright"
    BOTTOM_LEFT = "bottomleft"
    BOTTOM_RIGHT = "bottomright"
    CENTER_LEFT = "centerleft"
    CENTER_RIGHT = "centerright"
    TOP_CENTER = "topcenter"
    BOTTOM_CENTER = "bottomcenter"


@dataclass
class CommandOption:
    """A single command-line option; value None means a bare flag."""
    key: str
    value: Optional[str] = None

    @property
    def is_flag(self) -> bool:
        return self.value is None


@dataclass
class ImageSize:
    """Dimensions read from an image header."""
    width: int
    height: int


@dataclass
class ExecutionResult:
    """Outcome of one external tool invocation."""
    args: List[str] = field(default_factory=list)
    returncode: Optional[int] = None  # None: the process never started
    stdout: str = ""
    stderr: str = ""
    error: str = ""

    @property
    def ok(self) -> bool:
        return self.returncode == 0

    def __str__(self) -> str:
        if self.returncode is None:
            return f"not started: {self.error}"
        return f"exit {self.returncode}"
