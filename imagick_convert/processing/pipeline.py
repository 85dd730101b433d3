"""
Operation pipeline management.

Stores a chain of adapter operations as plain data so a transformation
(e.g. a thumbnail configuration) can be saved and replayed on any adapter.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ..core.adapter import ImageAdapter

# Public adapter methods a step may call, with their accepted argument names
SUPPORTED_OPERATIONS: Dict[str, tuple] = {
    "resize": ("width", "height"),
    "scale_by_width": ("width", "force_resize"),
    "scale_by_height": ("height", "force_resize"),
    "contain": ("width", "height", "force_resize"),
    "cover": ("width", "height", "orientation", "force_resize"),
    "frame": ("width", "height"),
    "trim": ("tolerance",),
    "rotate": ("angle",),
    "crop": ("x", "y", "width", "height"),
    "crop_percent": ("x", "y", "width", "height"),
    "set_background_color": ("color",),
    "grayscale": ("method",),
    "sepia": (),
    "sharpen": ("radius", "sigma", "amount", "threshold"),
    "gaussian_blur": ("radius", "sigma"),
    "brightness_saturation": ("brightness", "saturation", "hue"),
    "mirror": ("mode",),
    "round_corners": ("width", "height"),
    "apply_mask": ("image_path",),
}


@dataclass
class OperationStep:
    """One adapter method call with keyword arguments."""

    method: str
    arguments: Dict[str, Any] = field(default_factory=dict)
    enabled: bool = True

    def __post_init__(self):
        if self.method not in SUPPORTED_OPERATIONS:
            raise ValueError(f"Unsupported operation: {self.method}")
        unknown = set(self.arguments) - set(SUPPORTED_OPERATIONS[self.method])
        if unknown:
            raise ValueError(f"Unknown arguments for {self.method}: {sorted(unknown)}")

    def apply(self, adapter: ImageAdapter) -> ImageAdapter:
        """Call the method on the adapter."""
        getattr(adapter, self.method)(**self.arguments)
        return adapter


@dataclass
class OperationPipeline:
    """Container for a sequence of operation steps."""

    steps: List[OperationStep] = field(default_factory=list)

    def add_step(self, step: OperationStep) -> None:
        """Add a step to the end of the pipeline."""
        self.steps.append(step)

    def add(self, method: str, **arguments) -> "OperationPipeline":
        """Append a step built from a method name and keyword arguments."""
        self.add_step(OperationStep(method, arguments))
        return self

    def remove_step(self, index: int) -> bool:
        """Remove a step by index. Returns success."""
        if 0 <= index < len(self.steps):
            del self.steps[index]
            return True
        return False

    def move_step(self, from_index: int, to_index: int) -> bool:
        """Move a step from one position to another. Returns success."""
        if not (0 <= from_index < len(self.steps) and 0 <= to_index < len(self.steps)):
            return False
        step = self.steps.pop(from_index)
        self.steps.insert(to_index, step)
        return True

    def get_step(self, index: int) -> Optional[OperationStep]:
        """Get a step by index."""
        if 0 <= index < len(self.steps):
            return self.steps[index]
        return None

    def clear(self) -> None:
        """Remove all steps from pipeline."""
        self.steps.clear()

    def is_empty(self) -> bool:
        return len(self.steps) == 0

    def get_enabled_steps(self) -> List[OperationStep]:
        """Get list of enabled steps in order."""
        return [s for s in self.steps if s.enabled]

    def apply(self, adapter: ImageAdapter) -> ImageAdapter:
        """Run every enabled step on the adapter in order."""
        for step in self.get_enabled_steps():
            step.apply(adapter)
        return adapter

    def __len__(self) -> int:
        return len(self.steps)

    def __iter__(self):
        return iter(self.steps)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize pipeline to dictionary."""
        return {
            "steps": [
                {"method": s.method, "arguments": dict(s.arguments), "enabled": s.enabled}
                for s in self.steps
            ],
        }

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> "OperationPipeline":
        """
        Deserialize pipeline from dictionary.

        Raises:
            ValueError: a step names an unsupported method or argument
        """
        pipeline = OperationPipeline()
        for step_data in data.get("steps", []):
            method = step_data.get("method")
            if not method:
                continue
            pipeline.add_step(
                OperationStep(
                    method=method,
                    arguments=dict(step_data.get("arguments", {})),
                    enabled=step_data.get("enabled", True),
                )
            )
        return pipeline
