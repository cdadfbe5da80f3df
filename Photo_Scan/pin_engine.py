"""
Pin placement for a captured step photo.

Pins come from detections when the detector found something, placed with the
object class's layout for the step (its general layout when the step has no
close-up variant). Without detections they come from the step's static
template, or from four generic corners for unknown steps. Both paths go
through the same density policy.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Iterable, List, Optional, Sequence

from detect_kit.runtime import DetectorHost, detect_objects
from detect_kit.types import Detection, RgbaImage

from .config import PinLimits
from .layouts import layout_for
from .models import ObjectClass, Pin, Scenario
from .templates import GENERIC_CORNERS, PIN_TEMPLATES, Spot
from .texts import REPEAT_CORNERS_SUFFIX

logger = logging.getLogger("Photo_Scan.pin_engine")


def _clamp01(value: float) -> float:
    return max(0.0, min(1.0, float(value)))


def _pin_from_spot(x: float, y: float, spot: Spot) -> Pin:
    return Pin(x=_clamp01(x), y=_clamp01(y), label=spot.label, description=spot.why, what_to_look=spot.look)


class PinPlacementEngine:
    def __init__(self, limits: Optional[PinLimits] = None) -> None:
        self.limits = limits or PinLimits()

    def generate_pins(self, scenario_key: str, detections: Optional[Sequence[Detection]] = None) -> List[Pin]:
        """
        Build a fresh, capped list of pins for one step.

        Args:
            scenario_key: step key, e.g. "BED_OVERVIEW"; unknown keys are allowed
            detections: optional detections for the step photo, in decode order
        """

        scenario = Scenario.parse(scenario_key)

        if detections:
            pins = self._pins_from_detections(scenario, detections)
            if pins:
                return self._enforce_limits(scenario, scenario_key, pins)
            logger.debug("No detection layout for %s, using template", scenario_key)

        spots = PIN_TEMPLATES.get(scenario, GENERIC_CORNERS) if scenario is not None else GENERIC_CORNERS
        return self._enforce_limits(scenario, scenario_key, [_pin_from_spot(s.x, s.y, s) for s in spots])

    def _pins_from_detections(self, scenario: Optional[Scenario], detections: Iterable[Detection]) -> List[Pin]:
        pins: List[Pin] = []
        for det in detections:
            spots = layout_for(ObjectClass.from_class_name(det.class_name), scenario)
            box_w = det.x2 - det.x1
            box_h = det.y2 - det.y1
            for spot in spots:
                pins.append(_pin_from_spot(det.x1 + spot.x * box_w, det.y1 + spot.y * box_h, spot))
        return pins

    def _enforce_limits(self, scenario: Optional[Scenario], scenario_key: str, pins: List[Pin]) -> List[Pin]:
        if scenario is not None and self.limits.is_single_corner(scenario) and pins:
            first = pins[0]
            return [replace(first, label=first.label + REPEAT_CORNERS_SUFFIX)]

        # Keep generation order so truncation is reproducible.
        return pins[: self.limits.max_pins(scenario, scenario_key)]


pin_engine = PinPlacementEngine()


def generate_pins(scenario_key: str, detections: Optional[Sequence[Detection]] = None) -> List[Pin]:
    return pin_engine.generate_pins(scenario_key, detections)


def pins_for_image(
    host: DetectorHost,
    scenario_key: str,
    image: RgbaImage,
    engine: Optional[PinPlacementEngine] = None,
) -> List[Pin]:
    """
    Detect objects in a step photo and place pins; falls back to templates when
    detection is unavailable or empty.
    """

    engine = engine or pin_engine
    detections = detect_objects(host, image)
    return engine.generate_pins(scenario_key, detections)
