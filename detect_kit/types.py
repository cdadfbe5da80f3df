from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, NamedTuple, Tuple


def _clamp01(value: float) -> float:
    return max(0.0, min(1.0, float(value)))


class Box(NamedTuple):
    """
    Axis-aligned box with a top-left origin, in whatever space the caller uses
    (model input pixels, original pixels or normalized).
    """

    x: float
    y: float
    width: float
    height: float


@dataclass(frozen=True)
class RgbaImage:
    """
    Captured photo as handed over by the capture layer: interleaved RGBA bytes,
    row-major, `width * height * 4` long.
    """

    width: int
    height: int
    pixels: Any


@dataclass(frozen=True)
class Detection:
    """
    One candidate object, normalized to the original image.

    The corner form is derived from the center form once at construction and
    clamped to [0, 1]; build through `from_corners` when the corners are the
    source of truth so both forms agree exactly.
    """

    class_id: int
    class_name: str
    confidence: float
    x: float
    y: float
    width: float
    height: float
    x1: float = field(init=False)
    y1: float = field(init=False)
    x2: float = field(init=False)
    y2: float = field(init=False)

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError(f"Detection size must be >= 0, got {(self.width, self.height)}")
        object.__setattr__(self, "x1", _clamp01(self.x - self.width / 2))
        object.__setattr__(self, "y1", _clamp01(self.y - self.height / 2))
        object.__setattr__(self, "x2", _clamp01(self.x + self.width / 2))
        object.__setattr__(self, "y2", _clamp01(self.y + self.height / 2))

    @classmethod
    def from_corners(
        cls,
        x1: float,
        y1: float,
        x2: float,
        y2: float,
        *,
        class_id: int,
        class_name: str,
        confidence: float,
    ) -> "Detection":
        # Each corner is clamped independently; boxes fully outside the image
        # collapse to zero area on the edge.
        x1, y1, x2, y2 = _clamp01(x1), _clamp01(y1), _clamp01(x2), _clamp01(y2)
        x2 = max(x1, x2)
        y2 = max(y1, y2)
        det = cls(
            class_id=int(class_id),
            class_name=class_name,
            confidence=float(confidence),
            x=(x1 + x2) / 2,
            y=(y1 + y2) / 2,
            width=x2 - x1,
            height=y2 - y1,
        )
        # Keep the exact corners rather than the center round-trip.
        for name, value in (("x1", x1), ("y1", y1), ("x2", x2), ("y2", y2)):
            object.__setattr__(det, name, value)
        return det

    @property
    def area(self) -> float:
        return (self.x2 - self.x1) * (self.y2 - self.y1)

    def as_xyxy(self) -> Tuple[float, float, float, float]:
        return self.x1, self.y1, self.x2, self.y2
