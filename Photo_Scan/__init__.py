"""
Inspection layer built on top of `detect_kit`.

Keeps the detector runtime inside `detect_kit` and focuses on:
- scenarios (guided steps) and their pin templates
- detection-anchored pin layouts per furniture class
- density policy (pin caps, single-corner steps)
- room step catalogs and the end-of-scan summary
"""

from __future__ import annotations

from .config import PinLimits, load_pin_limits
from .models import ObjectClass, Pin, PinStatus, Scenario
from .pin_engine import PinPlacementEngine, generate_pins, pin_engine, pins_for_image
from .steps import (
    RoomType,
    ScanStep,
    SessionSummary,
    StepDefinition,
    StepStatus,
    common_misses,
    step_definitions,
    steps_for_room,
    summarize_steps,
)

__all__ = [
    "PinLimits",
    "load_pin_limits",
    "ObjectClass",
    "Pin",
    "PinStatus",
    "Scenario",
    "PinPlacementEngine",
    "generate_pins",
    "pin_engine",
    "pins_for_image",
    "RoomType",
    "ScanStep",
    "SessionSummary",
    "StepDefinition",
    "StepStatus",
    "common_misses",
    "step_definitions",
    "steps_for_room",
    "summarize_steps",
]
