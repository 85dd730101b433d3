"""
ImageMagick convert adapter.

Operations are not applied when they are called. Each one records named
options in a CommandOptions map; save() serializes them into a single
convert invocation and runs it against the destination file.
"""

import hashlib
import os
from pathlib import Path
from typing import Any, List, Optional, Union

from ..core.adapter import ImageAdapter
from ..core.types import ExecutionResult, MirrorMode
from ..logger import get_logger
from ..oiio import OiioAdapter
from ..services.settings import Settings
from ..services.source_loader import SourceLoader
from .executor import CommandExecutor
from .masks import render_rounded_corner_mask
from .options import CommandOptions, command_string, format_value

logger = get_logger("builder")

MASK_PREFIX = "imagick_mask_"


class ImagickConvert(ImageAdapter):
    """Fluent builder for a single convert command."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        executor: Optional[CommandExecutor] = None,
    ):
        super().__init__()
        self.settings = settings or Settings()
        self.executor = executor or CommandExecutor(self.settings.get_program())
        self.image_path = ""
        self.options = CommandOptions()
        self.last_result: Optional[ExecutionResult] = None

    # ========== Loading & saving ==========

    def load(self, image_path: Union[str, os.PathLike]) -> "ImagickConvert":
        """
        Resolve the source into a local file and read its geometry.

        Raises:
            ResourceUnavailable: the source could not be fetched or copied
        """
        loader = SourceLoader(self.tmp_files, self.settings)
        self.image_path = loader.resolve(image_path)

        probed = OiioAdapter.probe(self.image_path)
        if probed:
            size, format_name = probed
            self.set_width(size.width).set_height(size.height)
            self.format = format_name or None

        logger.debug("Loaded %s (%sx%s)", self.image_path, self.width, self.height)
        self.set_modified(False)
        return self

    def save(
        self,
        path: Union[str, os.PathLike],
        format: Optional[str] = None,
        quality: Optional[int] = None,
        check: bool = False,
    ) -> "ImagickConvert":
        """
        Write the processed image to path.

        format and quality are accepted for interface compatibility and not
        translated into options. The exit status is kept in last_result;
        with check=True a failed run raises ExternalToolFailure.
        """
        self.last_result = self.executor.save(
            self.image_path, self.to_args(), os.fspath(path), check=check
        )
        return self

    # ========== Primitives ==========

    def add_option(self, name: str, value: Any = None) -> "ImagickConvert":
        """Add an option to the command; re-adding a name replaces its value."""
        self.options.add_option(name, value)
        self.set_modified(True)
        return self

    def add_filter(self, option_name: str, filter_value: str) -> "ImagickConvert":
        """Add a raw fragment placed before the flag of option_name."""
        self.options.add_filter(option_name, filter_value)
        return self

    def get_filters(self, option_name: str) -> List[str]:
        return self.options.get_filters(option_name)

    # ========== Geometry ==========

    def resize(self, width, height) -> "ImagickConvert":
        self.add_option("resize", f"{format_value(width)}x{format_value(height)}")
        self.set_width(width).set_height(height)
        return self

    def frame(self, width, height) -> "ImagickConvert":
        """Contain the image in width x height and pad it with borders to the exact size."""
        self.contain(width, height)
        frame_width = 0 if width - self.width == 0 else (width - self.width) / 2
        frame_height = 0 if height - self.height == 0 else (height - self.height) / 2
        self.add_option("frame", f"{format_value(frame_width)}x{format_value(frame_height)}")
        self.add_option("alpha", "Set")
        return self

    def trim(self, tolerance) -> "ImagickConvert":
        self.add_option("trim", tolerance)
        return self

    def rotate(self, angle) -> "ImagickConvert":
        self.add_option("rotate", angle)
        self.add_option("alpha", "Set")
        return self

    def crop(self, x, y, width, height) -> "ImagickConvert":
        """Cut out a width x height box starting at x, y."""
        x, y = format_value(x), format_value(y)
        self.add_option("crop", f"{format_value(width)}x{format_value(height)}+{x}+{y}")
        self.set_width(width).set_height(height)
        return self

    def crop_percent(self, x, y, width, height) -> "ImagickConvert":
        """Like crop(), with width and height given as percentages of the image."""
        x, y = format_value(x), format_value(y)
        self.add_option("crop-percent", f"{format_value(width)}%x{format_value(height)}%+{x}+{y}")
        self.set_width(int(self.width * width / 100)).set_height(int(self.height * height / 100))
        return self

    def mirror(self, mode: Union[MirrorMode, str]) -> "ImagickConvert":
        """Flip (vertical) or flop (horizontal). Unknown modes are ignored."""
        mode = mode.value if isinstance(mode, MirrorMode) else mode
        if mode == MirrorMode.VERTICAL.value:
            self.add_option("flip")
        elif mode == MirrorMode.HORIZONTAL.value:
            self.add_option("flop")
        return self

    # ========== Color & effects ==========

    def set_background_color(self, color: str) -> "ImagickConvert":
        self.add_option("background", color)
        return self

    def grayscale(self, method: str = "Rec709Luminance") -> "ImagickConvert":
        self.add_option("grayscale", method)
        return self

    def sepia(self) -> "ImagickConvert":
        self.add_option("sepia-tone", "85%")
        return self

    def sharpen(self, radius=0, sigma=1.0, amount=1.0, threshold=0.05) -> "ImagickConvert":
        r, s = format_value(radius), format_value(sigma)
        a, t = format_value(amount), format_value(threshold)
        self.add_option("sharpen", f"{r}x{s}+{a}+{t}")
        return self

    def gaussian_blur(self, radius=0, sigma=1.0) -> "ImagickConvert":
        self.add_option("gaussian-blur", f"{format_value(radius)}x{format_value(sigma)}")
        return self

    def brightness_saturation(self, brightness=100, saturation=100, hue=100) -> "ImagickConvert":
        b, s, h = format_value(brightness), format_value(saturation), format_value(hue)
        self.add_option("modulate", f"{b},{s},{h}")
        return self

    # ========== Masks ==========

    def round_corners(self, width, height) -> "ImagickConvert":
        """
        Round the corners with radii width/height.

        Renders a rounded-rectangle mask of the current geometry right away and
        composites the image into it when the command runs.
        """
        token = hashlib.md5(self.image_path.encode("utf-8")).hexdigest()
        target = str(Path(self.settings.get_temp_dir()) / f"{MASK_PREFIX}{token}.png")

        mask_path = render_rounded_corner_mask(
            self.width, self.height, width, height, target, self.executor
        )
        self.tmp_files.register(mask_path)

        self.add_option("matte", mask_path)
        self.add_option("compose", "DstIn")
        self.add_option("composite")
        return self

    def apply_mask(self, image_path: str) -> "ImagickConvert":
        self.add_option("write-mask", image_path)
        return self

    # ========== Serialization ==========

    def to_args(self, destination: Optional[str] = None) -> List[str]:
        """Argument tokens after the program: source, options, destination."""
        args = [self.image_path] if self.image_path else []
        args.extend(self.options.to_args())
        if destination:
            args.append(destination)
        return args

    def get_options_as_string(self) -> str:
        """Source path followed by every option, each token followed by a space."""
        return command_string(self.to_args())

    def command_line(self, destination: Optional[str] = None) -> str:
        """Full command line, as save() would run it for destination."""
        return command_string(self.executor.command_args(self.to_args(destination)))

    def __str__(self) -> str:
        return self.command_line()
