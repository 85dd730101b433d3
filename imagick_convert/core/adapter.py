"""
Base image adapter.

Tracks the requested geometry, format and modified flag of an image job and
derives the aspect-preserving operations (contain, cover, scale_by_*) from
the resize/crop primitives a concrete adapter provides.
"""

from typing import Optional, Union

from ..logger import get_logger
from ..services.temp_files import TempFileRegistry
from .errors import TempCleanupFailure
from .types import CoverOrientation

logger = get_logger("adapter")


class ImageAdapter:
    """Geometry bookkeeping shared by image adapters."""

    def __init__(self):
        self.width: int = 0
        self.height: int = 0
        self.format: Optional[str] = None
        self.modified: bool = False
        self.tmp_files = TempFileRegistry()

    # ========== Bookkeeping ==========

    def set_width(self, width) -> "ImageAdapter":
        self.width = width
        return self

    def set_height(self, height) -> "ImageAdapter":
        self.height = height
        return self

    def set_modified(self, modified: bool) -> "ImageAdapter":
        self.modified = modified
        return self

    def _has_geometry(self) -> bool:
        if self.width and self.height:
            return True
        logger.debug("Source geometry unknown, skipping aspect-ratio operation")
        return False

    # ========== Primitives ==========

    def resize(self, width, height) -> "ImageAdapter":
        raise NotImplementedError

    def crop(self, x, y, width, height) -> "ImageAdapter":
        raise NotImplementedError

    # ========== Derived operations ==========

    def scale_by_width(self, width, force_resize: bool = False) -> "ImageAdapter":
        """Resize to the given width, keeping the aspect ratio."""
        if not self._has_geometry():
            return self
        if force_resize or width <= self.width:
            height = int((width / self.width) * self.height)
            self.resize(max(1, width), max(1, height))
        return self

    def scale_by_height(self, height, force_resize: bool = False) -> "ImageAdapter":
        """Resize to the given height, keeping the aspect ratio."""
        if not self._has_geometry():
            return self
        if force_resize or height <= self.height:
            width = int((height / self.height) * self.width)
            self.resize(max(1, width), max(1, height))
        return self

    def contain(self, width, height, force_resize: bool = False) -> "ImageAdapter":
        """Fit the image inside width x height. Smaller images are left alone unless forced."""
        if not self._has_geometry():
            return self

        x = self.width / width
        y = self.height / height
        if not force_resize and x <= 1 and y <= 1:
            return self
        if x > y:
            self.scale_by_width(width, force_resize)
        else:
            self.scale_by_height(height, force_resize)
        return self

    def cover(
        self,
        width,
        height,
        orientation: Union[CoverOrientation, str] = CoverOrientation.CENTER,
        force_resize: bool = False,
    ) -> "ImageAdapter":
        """Scale so width x height is fully covered, then crop at the orientation anchor."""
        if not self._has_geometry():
            return self

        ratio = self.width / self.height
        if (width / height) > ratio:
            self.scale_by_width(width, force_resize)
        else:
            self.scale_by_height(height, force_resize)

        try:
            orientation = CoverOrientation(orientation)
        except ValueError:
            logger.warning("Unknown cover orientation %r, cropping not processed", orientation)
            return self

        spare_x = self.width - width
        spare_y = self.height - height

        offsets = {
            CoverOrientation.TOP_LEFT: (0, 0),
            CoverOrientation.TOP_RIGHT: (spare_x, 0),
            CoverOrientation.BOTTOM_LEFT: (0, spare_y),
            CoverOrientation.BOTTOM_RIGHT: (spare_x, spare_y),
            CoverOrientation.CENTER_LEFT: (0, spare_y // 2),
            CoverOrientation.CENTER_RIGHT: (spare_x, spare_y // 2),
            CoverOrientation.TOP_CENTER: (spare_x // 2, 0),
            CoverOrientation.BOTTOM_CENTER: (spare_x // 2, spare_y),
        }
        crop_x, crop_y = offsets.get(orientation, (spare_x // 2, spare_y // 2))
        self.crop(crop_x, crop_y, width, height)
        return self

    # ========== Teardown ==========

    def cleanup(self) -> Optional[TempCleanupFailure]:
        """Delete every temp file created by this adapter."""
        return self.tmp_files.cleanup()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.cleanup()
