"""
Hand-authored pin templates, one per scenario, in normalized photo coordinates.

Used whenever detection is off or finds nothing useful for the step.
"""

from __future__ import annotations

from typing import Dict, NamedTuple, Tuple

from .models import Scenario
from .texts import PinLook as LOOK
from .texts import PinWhy as WHY


class Spot(NamedTuple):
    x: float
    y: float
    label: str
    why: str
    look: str


PIN_TEMPLATES: Dict[Scenario, Tuple[Spot, ...]] = {
    Scenario.BED_OVERVIEW: (
        Spot(0.5, 0.2, "Headboard Zone", WHY.MOUNT, LOOK.SPOTS),
        Spot(0.2, 0.5, "Left Edge", WHY.EDGE, LOOK.SKINS),
        Spot(0.8, 0.5, "Right Edge", WHY.EDGE, LOOK.SKINS),
        Spot(0.5, 0.85, "Foot Zone", WHY.SEAM, LOOK.SPOTS),
    ),
    Scenario.MATTRESS_SEAMS: (
        Spot(0.15, 0.2, "Top Left Seam", WHY.SEAM, LOOK.SPOTS),
        Spot(0.85, 0.2, "Top Right Seam", WHY.SEAM, LOOK.SPOTS),
        Spot(0.15, 0.8, "Bottom Left Seam", WHY.SEAM, LOOK.SKINS),
        Spot(0.85, 0.8, "Bottom Right Seam", WHY.SEAM, LOOK.SKINS),
        Spot(0.5, 0.6, "Tag/Label Area", WHY.TAG, LOOK.EGGS),
    ),
    Scenario.BED_SKIRT: (
        Spot(0.15, 0.75, "Left Pleat", WHY.PLEAT, LOOK.SPOTS),
        Spot(0.5, 0.8, "Center Edge", WHY.EDGE, LOOK.SKINS),
        Spot(0.85, 0.75, "Right Pleat", WHY.PLEAT, LOOK.SPOTS),
        Spot(0.3, 0.9, "Floor Junction Left", WHY.EDGE, LOOK.LIVE),
        Spot(0.7, 0.9, "Floor Junction Right", WHY.EDGE, LOOK.LIVE),
    ),
    Scenario.BOX_SPRING: (
        Spot(0.2, 0.3, "Corner Joint 1", WHY.JOINT, LOOK.SPOTS),
        Spot(0.8, 0.3, "Corner Joint 2", WHY.JOINT, LOOK.SPOTS),
        Spot(0.2, 0.7, "Corner Joint 3", WHY.JOINT, LOOK.SKINS),
        Spot(0.8, 0.7, "Corner Joint 4", WHY.JOINT, LOOK.SKINS),
        Spot(0.5, 0.5, "Staple/Tack Zone", WHY.EDGE, LOOK.EGGS),
    ),
    Scenario.HEADBOARD: (
        Spot(0.3, 0.4, "Left Mount Area", WHY.MOUNT, LOOK.SPOTS),
        Spot(0.7, 0.4, "Right Mount Area", WHY.MOUNT, LOOK.SPOTS),
        Spot(0.5, 0.7, "Wall Gap Zone", WHY.EDGE, LOOK.SKINS),
        Spot(0.5, 0.2, "Top Edge", WHY.JOINT, LOOK.LIVE),
    ),
    Scenario.NIGHTSTAND: (
        Spot(0.3, 0.35, "Drawer Rail Left", WHY.RAIL, LOOK.SPOTS),
        Spot(0.7, 0.35, "Drawer Rail Right", WHY.RAIL, LOOK.SPOTS),
        Spot(0.5, 0.6, "Back Panel Edge", WHY.JOINT, LOOK.SKINS),
        Spot(0.5, 0.85, "Base Junction", WHY.EDGE, LOOK.LIVE),
    ),
    Scenario.BASEBOARDS: (
        Spot(0.2, 0.85, "Left Section", WHY.BASEBOARD, LOOK.SPOTS),
        Spot(0.5, 0.85, "Center Section", WHY.BASEBOARD, LOOK.SPOTS),
        Spot(0.8, 0.85, "Right Section", WHY.BASEBOARD, LOOK.SPOTS),
        Spot(0.35, 0.92, "Carpet Edge Left", WHY.EDGE, LOOK.SKINS),
        Spot(0.65, 0.92, "Carpet Edge Right", WHY.EDGE, LOOK.SKINS),
    ),
    Scenario.CURTAINS: (
        Spot(0.3, 0.15, "Left Rod Area", WHY.MOUNT, LOOK.SPOTS),
        Spot(0.7, 0.15, "Right Rod Area", WHY.MOUNT, LOOK.SPOTS),
        Spot(0.25, 0.5, "Left Pleat Zone", WHY.PLEAT, LOOK.SKINS),
        Spot(0.75, 0.5, "Right Pleat Zone", WHY.PLEAT, LOOK.SKINS),
        Spot(0.5, 0.9, "Hem/Floor Area", WHY.EDGE, LOOK.LIVE),
    ),
    Scenario.UPHOLSTERED: (
        Spot(0.2, 0.3, "Left Arm Seam", WHY.SEAM, LOOK.SPOTS),
        Spot(0.8, 0.3, "Right Arm Seam", WHY.SEAM, LOOK.SPOTS),
        Spot(0.5, 0.5, "Cushion Seam", WHY.SEAM, LOOK.SKINS),
        Spot(0.5, 0.85, "Lower Edge", WHY.EDGE, LOOK.LIVE),
    ),
    Scenario.LUGGAGE_RACK: (
        Spot(0.2, 0.4, "Left Strap Attach", WHY.STRAP, LOOK.SPOTS),
        Spot(0.8, 0.4, "Right Strap Attach", WHY.STRAP, LOOK.SPOTS),
        Spot(0.3, 0.7, "Left Joint", WHY.JOINT, LOOK.SKINS),
        Spot(0.7, 0.7, "Right Joint", WHY.JOINT, LOOK.SKINS),
        Spot(0.5, 0.85, "Underside Edge", WHY.EDGE, LOOK.LIVE),
    ),
    Scenario.CLOSET: (
        Spot(0.15, 0.25, "Top Left Corner", WHY.JOINT, LOOK.SPOTS),
        Spot(0.85, 0.25, "Top Right Corner", WHY.JOINT, LOOK.SPOTS),
        Spot(0.15, 0.85, "Bottom Left Corner", WHY.BASEBOARD, LOOK.SKINS),
        Spot(0.85, 0.85, "Bottom Right Corner", WHY.BASEBOARD, LOOK.SKINS),
    ),
    Scenario.COUCH_OVERVIEW: (
        Spot(0.15, 0.4, "Left Arm", WHY.SEAM, LOOK.SPOTS),
        Spot(0.85, 0.4, "Right Arm", WHY.SEAM, LOOK.SPOTS),
        Spot(0.5, 0.5, "Seat Area", WHY.SEAM, LOOK.SKINS),
        Spot(0.5, 0.85, "Lower Edge", WHY.EDGE, LOOK.LIVE),
    ),
    Scenario.COUCH_SEAMS: (
        Spot(0.25, 0.35, "Cushion Seam 1", WHY.SEAM, LOOK.SPOTS),
        Spot(0.5, 0.35, "Cushion Seam 2", WHY.SEAM, LOOK.SPOTS),
        Spot(0.75, 0.35, "Cushion Seam 3", WHY.SEAM, LOOK.SPOTS),
        Spot(0.5, 0.65, "Back Seam", WHY.SEAM, LOOK.SKINS),
    ),
    Scenario.COUCH_UNDERSIDE: (
        Spot(0.2, 0.5, "Left Skirt Edge", WHY.EDGE, LOOK.SPOTS),
        Spot(0.5, 0.5, "Center Underside", WHY.JOINT, LOOK.SKINS),
        Spot(0.8, 0.5, "Right Skirt Edge", WHY.EDGE, LOOK.SPOTS),
        Spot(0.5, 0.8, "Floor Junction", WHY.EDGE, LOOK.LIVE),
    ),
    Scenario.CHAIR_SEAMS: (
        Spot(0.3, 0.35, "Seat Seam Left", WHY.SEAM, LOOK.SPOTS),
        Spot(0.7, 0.35, "Seat Seam Right", WHY.SEAM, LOOK.SPOTS),
        Spot(0.5, 0.6, "Back Seam", WHY.SEAM, LOOK.SKINS),
    ),
    Scenario.RUG_EDGE: (
        Spot(0.2, 0.7, "Left Edge", WHY.EDGE, LOOK.SPOTS),
        Spot(0.5, 0.7, "Center Edge", WHY.EDGE, LOOK.SKINS),
        Spot(0.8, 0.7, "Right Edge", WHY.EDGE, LOOK.SPOTS),
    ),
    Scenario.OUTLET_AREA: (
        Spot(0.5, 0.4, "Plate Edge Top", WHY.EDGE, LOOK.SPOTS),
        Spot(0.5, 0.6, "Plate Edge Bottom", WHY.EDGE, LOOK.SPOTS),
        Spot(0.3, 0.8, "Nearby Baseboard", WHY.BASEBOARD, LOOK.SKINS),
        Spot(0.7, 0.8, "Nearby Baseboard", WHY.BASEBOARD, LOOK.SKINS),
    ),
}

# Unknown scenario keys still get something to inspect.
GENERIC_CORNERS: Tuple[Spot, ...] = (
    Spot(0.2, 0.2, "Top Left Area", WHY.EDGE, LOOK.SPOTS),
    Spot(0.8, 0.2, "Top Right Area", WHY.EDGE, LOOK.SPOTS),
    Spot(0.2, 0.8, "Bottom Left Area", WHY.EDGE, LOOK.SKINS),
    Spot(0.8, 0.8, "Bottom Right Area", WHY.EDGE, LOOK.SKINS),
)

_missing = sorted(s.value for s in Scenario if s not in PIN_TEMPLATES)
if _missing:
    raise RuntimeError(f"Missing pin templates for scenarios: {_missing}")
