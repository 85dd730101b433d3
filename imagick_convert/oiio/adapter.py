"""
OpenImageIO adapter for reading image headers.

The convert command runs later; until then the tracked geometry of an
adapter is seeded from the source header read here.
"""

from typing import Optional, Tuple

import OpenImageIO as oiio

from ..core.types import ImageSize
from ..logger import get_logger

logger = get_logger("oiio")


class OiioAdapter:
    """Thin wrapper around the OIIO bindings."""

    @staticmethod
    def probe(filepath: str) -> Optional[Tuple[ImageSize, str]]:
        """
        Read size and format name of the first subimage.
        Returns None if the file cannot be read.
        """
        inp = oiio.ImageInput.open(filepath)
        if not inp:
            logger.warning("Cannot read image header of %s: %s", filepath, oiio.geterror())
            return None

        try:
            spec = inp.spec()
            size = ImageSize(width=spec.width, height=spec.height)
            format_name = inp.format_name() if hasattr(inp, "format_name") else ""
        finally:
            inp.close()

        return size, format_name

    @staticmethod
    def probe_size(filepath: str) -> Optional[ImageSize]:
        """Return the image dimensions, or None if unreadable."""
        probed = OiioAdapter.probe(filepath)
        return probed[0] if probed else None

    @staticmethod
    def get_oiio_version() -> str:
        """Return OIIO version string."""
        return str(getattr(oiio, "__version__", "unknown"))
