"""Auxiliary images rendered with convert before the main command runs."""

from .executor import CommandExecutor
from .options import CommandOptions, format_value


def rounded_corner_mask_options(width, height, radius_x, radius_y) -> CommandOptions:
    """Options drawing an opaque rounded rectangle on a transparent canvas."""
    w, h = format_value(width), format_value(height)
    rx, ry = format_value(radius_x), format_value(radius_y)

    options = CommandOptions()
    options.add_option("size", f"{w}x{h}")
    options.add_option("draw", f"roundRectangle 0,0 {w},{h} {rx},{ry}")
    options.add_filter("draw", "xc:none")
    return options


def render_rounded_corner_mask(
    width,
    height,
    radius_x,
    radius_y,
    target: str,
    executor: CommandExecutor,
) -> str:
    """Render the mask to target (a .png path) and return the path."""
    options = rounded_corner_mask_options(width, height, radius_x, radius_y)
    executor.run([*options.to_args(), target])
    return target
