from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Sequence, Tuple

from .models import Pin, PinStatus, Scenario
from .pin_engine import PinPlacementEngine, pin_engine
from .texts import INSTRUCTIONS, OUTLET_WARNING, STEP_TITLES


class RoomType(str, Enum):
    BEDROOM = "bedroom"
    LIVING_ROOM = "living_room"
    HOTEL = "hotel"


class StepStatus(str, Enum):
    PENDING = "pending"
    CAPTURED = "captured"
    REVIEWED = "reviewed"


@dataclass(frozen=True)
class StepDefinition:
    scenario: Scenario
    tips: Tuple[str, ...]
    warning: Optional[str] = None

    @property
    def title(self) -> str:
        return STEP_TITLES[self.scenario]

    @property
    def instruction(self) -> str:
        return INSTRUCTIONS[self.scenario]


@dataclass
class ScanStep:
    scenario: Scenario
    title: str
    instruction: str
    tips: Tuple[str, ...]
    pins: List[Pin]
    warning: Optional[str] = None
    status: StepStatus = StepStatus.PENDING
    photo_uri: Optional[str] = None
    id: str = field(default_factory=lambda: str(uuid.uuid4()))


@dataclass(frozen=True)
class SessionSummary:
    total_steps: int
    completed_steps: int
    concerned_pins: int
    photos_count: int
    common_misses: Tuple[str, ...] = ()


_S = Scenario

BEDROOM_STEPS: Tuple[StepDefinition, ...] = (
    StepDefinition(_S.BED_OVERVIEW, ("Include full bed in frame", "Good lighting helps")),
    StepDefinition(_S.MATTRESS_SEAMS, ("Lift sheets to expose seams", "Check all corners", "Include any tags")),
    StepDefinition(_S.BED_SKIRT, ("Check all pleats and folds", "Examine where skirt meets floor", "Look at staple points")),
    StepDefinition(_S.BOX_SPRING, ("Check all corner joints", "Examine staple zones", "Look at fabric folds")),
    StepDefinition(_S.HEADBOARD, ("Pull headboard away from wall if safe", "Check mounting hardware", "Examine crevices")),
    StepDefinition(_S.NIGHTSTAND, ("Open all drawers", "Check rail joints", "Examine back panel")),
    StepDefinition(_S.BASEBOARDS, ("Focus on areas near bed", "Check carpet edge junction", "Look for gaps")),
    StepDefinition(_S.CURTAINS, ("Check all pleats", "Examine hem and bottom edge", "Look at rod attachments")),
    StepDefinition(_S.UPHOLSTERED, ("Check all seams", "Examine cushion edges", "Look at fabric folds")),
)

HOTEL_STEPS: Tuple[StepDefinition, ...] = (
    StepDefinition(_S.BED_OVERVIEW, ("Include full bed in frame", "Good lighting helps")),
    StepDefinition(_S.MATTRESS_SEAMS, ("Lift sheets to expose seams", "Check all corners", "Include any tags")),
    StepDefinition(
        _S.BED_SKIRT,
        ("IMPORTANT: Check all pleats and folds", "Examine where skirt meets floor", "Look at staple points"),
    ),
    StepDefinition(_S.HEADBOARD, ("Hotels often have wall-mounted headboards", "Check gap between headboard and wall")),
    StepDefinition(_S.NIGHTSTAND, ("Open all drawers", "Check rail joints", "Examine back panel")),
    StepDefinition(_S.BASEBOARDS, ("Focus on areas near bed", "Check corners carefully")),
    StepDefinition(_S.CURTAINS, ("Check all pleats", "Examine hem and bottom edge")),
    StepDefinition(_S.LUGGAGE_RACK, ("Check strap attachments", "Examine joints", "Look at underside")),
    StepDefinition(_S.UPHOLSTERED, ("Check desk chair and any lounge furniture", "Examine all seams")),
    StepDefinition(_S.CLOSET, ("Check all corners", "Examine shelf edges", "Look at baseboard areas")),
)

LIVING_ROOM_STEPS: Tuple[StepDefinition, ...] = (
    StepDefinition(_S.COUCH_OVERVIEW, ("Include full couch in frame", "Good lighting helps")),
    StepDefinition(_S.COUCH_SEAMS, ("Remove cushions if possible", "Check all piping seams", "Examine fabric joints")),
    StepDefinition(
        _S.COUCH_UNDERSIDE,
        ("Check lower edge and skirt", "Examine underside if accessible", "Look at floor junction"),
    ),
    StepDefinition(_S.CHAIR_SEAMS, ("Check all upholstered chairs", "Examine seams and joints")),
    StepDefinition(_S.BASEBOARDS, ("Check corners carefully", "Examine carpet edge junction")),
    StepDefinition(_S.CURTAINS, ("Check all pleats", "Examine hem and bottom edge")),
    StepDefinition(_S.RUG_EDGE, ("Lift rug edge if possible", "Check nearby baseboards")),
    StepDefinition(
        _S.OUTLET_AREA,
        ("Photograph area around outlets", "Check nearby baseboards"),
        warning=OUTLET_WARNING,
    ),
)

_ROOM_STEPS: Dict[RoomType, Tuple[StepDefinition, ...]] = {
    RoomType.BEDROOM: BEDROOM_STEPS,
    RoomType.HOTEL: HOTEL_STEPS,
    RoomType.LIVING_ROOM: LIVING_ROOM_STEPS,
}

_SLEEPING_AREA_MISSES = (
    "Bed skirt pleats and floor junction",
    "Behind headboard wall gap",
    "Nightstand drawer rails",
    "Mattress tag/label pockets",
    "Curtain rod mounting areas",
)

_COMMON_MISSES: Dict[RoomType, Tuple[str, ...]] = {
    RoomType.BEDROOM: _SLEEPING_AREA_MISSES,
    RoomType.HOTEL: _SLEEPING_AREA_MISSES,
    RoomType.LIVING_ROOM: (
        "Couch cushion seam piping",
        "Chair seat underside",
        "Baseboard corners",
        "Area rug edges",
        "Behind outlet plates (leave plates in place)",
    ),
}


def _room(room_type: str) -> Optional[RoomType]:
    try:
        return RoomType(room_type)
    except ValueError:
        return None


def step_definitions(room_type: str) -> Tuple[StepDefinition, ...]:
    # Unknown rooms get the bedroom walk-through.
    return _ROOM_STEPS.get(_room(room_type), BEDROOM_STEPS)


def steps_for_room(room_type: str, engine: Optional[PinPlacementEngine] = None) -> List[ScanStep]:
    """
    Fresh steps for a new scan, each pre-seeded with template pins.
    """

    engine = engine or pin_engine
    return [
        ScanStep(
            scenario=d.scenario,
            title=d.title,
            instruction=d.instruction,
            tips=d.tips,
            warning=d.warning,
            pins=engine.generate_pins(d.scenario.value),
        )
        for d in step_definitions(room_type)
    ]


def common_misses(room_type: str) -> Tuple[str, ...]:
    return _COMMON_MISSES.get(_room(room_type), ())


def summarize_steps(room_type: str, steps: Sequence[ScanStep]) -> SessionSummary:
    return SessionSummary(
        total_steps=len(steps),
        completed_steps=sum(1 for s in steps if s.status == StepStatus.REVIEWED),
        concerned_pins=sum(1 for s in steps for p in s.pins if p.status == PinStatus.CONCERNED),
        photos_count=sum(1 for s in steps if s.photo_uri),
        common_misses=common_misses(room_type),
    )
