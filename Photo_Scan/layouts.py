"""
Pin layouts anchored to a detected object.

Spot coordinates here are fractions of the detection box (0 = left/top edge,
1 = right/bottom edge), so pins follow the object's size and position. Each
object class has a general layout plus close-up variants for specific steps.
"""

from __future__ import annotations

from typing import Dict, Optional, Tuple

from .models import ObjectClass, Scenario
from .templates import Spot
from .texts import PinLook as LOOK
from .texts import PinWhy as WHY

# None holds the class's general layout.
DETECTION_LAYOUTS: Dict[ObjectClass, Dict[Optional[Scenario], Tuple[Spot, ...]]] = {
    ObjectClass.BED: {
        None: (
            Spot(0.1, 0.1, "Headboard Area", WHY.MOUNT, LOOK.SPOTS),
            Spot(0.9, 0.1, "Headboard Right", WHY.MOUNT, LOOK.SPOTS),
            Spot(0.1, 0.5, "Left Edge Seam", WHY.SEAM, LOOK.SKINS),
            Spot(0.9, 0.5, "Right Edge Seam", WHY.SEAM, LOOK.SKINS),
            Spot(0.5, 0.9, "Foot Zone", WHY.SEAM, LOOK.SPOTS),
        ),
        Scenario.MATTRESS_SEAMS: (
            Spot(0.08, 0.1, "Top Left Seam", WHY.SEAM, LOOK.SPOTS),
            Spot(0.92, 0.1, "Top Right Seam", WHY.SEAM, LOOK.SPOTS),
            Spot(0.08, 0.9, "Bottom Left Seam", WHY.SEAM, LOOK.SKINS),
            Spot(0.92, 0.9, "Bottom Right Seam", WHY.SEAM, LOOK.SKINS),
            Spot(0.5, 0.6, "Tag/Label Area", WHY.TAG, LOOK.EGGS),
        ),
        Scenario.HEADBOARD: (
            Spot(0.2, 0.15, "Left Mount Area", WHY.MOUNT, LOOK.SPOTS),
            Spot(0.8, 0.15, "Right Mount Area", WHY.MOUNT, LOOK.SPOTS),
            Spot(0.5, 0.05, "Top Edge", WHY.JOINT, LOOK.LIVE),
            Spot(0.5, 0.3, "Wall Gap Zone", WHY.EDGE, LOOK.SKINS),
        ),
        Scenario.BED_SKIRT: (
            Spot(0.1, 0.85, "Left Pleat", WHY.PLEAT, LOOK.SPOTS),
            Spot(0.5, 0.92, "Center Edge", WHY.EDGE, LOOK.SKINS),
            Spot(0.9, 0.85, "Right Pleat", WHY.PLEAT, LOOK.SPOTS),
            Spot(0.25, 1.0, "Floor Junction Left", WHY.EDGE, LOOK.LIVE),
            Spot(0.75, 1.0, "Floor Junction Right", WHY.EDGE, LOOK.LIVE),
        ),
        Scenario.BOX_SPRING: (
            Spot(0.1, 0.6, "Corner Joint 1", WHY.JOINT, LOOK.SPOTS),
            Spot(0.9, 0.6, "Corner Joint 2", WHY.JOINT, LOOK.SPOTS),
            Spot(0.1, 0.95, "Corner Joint 3", WHY.JOINT, LOOK.SKINS),
            Spot(0.9, 0.95, "Corner Joint 4", WHY.JOINT, LOOK.SKINS),
            Spot(0.5, 0.8, "Staple/Tack Zone", WHY.EDGE, LOOK.EGGS),
        ),
    },
    ObjectClass.COUCH: {
        None: (
            Spot(0.1, 0.3, "Left Arm Seam", WHY.SEAM, LOOK.SPOTS),
            Spot(0.9, 0.3, "Right Arm Seam", WHY.SEAM, LOOK.SPOTS),
            Spot(0.5, 0.5, "Cushion Junction", WHY.SEAM, LOOK.SKINS),
            Spot(0.5, 0.92, "Lower Skirt Edge", WHY.EDGE, LOOK.LIVE),
        ),
        Scenario.COUCH_SEAMS: (
            Spot(0.25, 0.45, "Cushion Seam 1", WHY.SEAM, LOOK.SPOTS),
            Spot(0.5, 0.45, "Cushion Seam 2", WHY.SEAM, LOOK.SPOTS),
            Spot(0.75, 0.45, "Cushion Seam 3", WHY.SEAM, LOOK.SPOTS),
            Spot(0.5, 0.2, "Back Seam", WHY.SEAM, LOOK.SKINS),
        ),
        Scenario.COUCH_UNDERSIDE: (
            Spot(0.15, 0.92, "Left Skirt Edge", WHY.EDGE, LOOK.SPOTS),
            Spot(0.5, 0.95, "Center Underside", WHY.JOINT, LOOK.SKINS),
            Spot(0.85, 0.92, "Right Skirt Edge", WHY.EDGE, LOOK.SPOTS),
            Spot(0.5, 1.0, "Floor Junction", WHY.EDGE, LOOK.LIVE),
        ),
    },
    ObjectClass.CHAIR: {
        None: (
            Spot(0.3, 0.55, "Left Seat Seam", WHY.SEAM, LOOK.SPOTS),
            Spot(0.7, 0.55, "Right Seat Seam", WHY.SEAM, LOOK.SPOTS),
            Spot(0.5, 0.15, "Back Joint", WHY.JOINT, LOOK.SKINS),
        ),
        Scenario.CHAIR_SEAMS: (
            Spot(0.25, 0.55, "Seat Seam Left", WHY.SEAM, LOOK.SPOTS),
            Spot(0.75, 0.55, "Seat Seam Right", WHY.SEAM, LOOK.SPOTS),
            Spot(0.5, 0.25, "Back Seam", WHY.SEAM, LOOK.SKINS),
            Spot(0.5, 0.9, "Leg Joint", WHY.JOINT, LOOK.LIVE),
        ),
    },
    ObjectClass.TABLE: {
        None: (
            Spot(0.5, 0.1, "Top Surface Edge", WHY.EDGE, LOOK.SPOTS),
            Spot(0.5, 0.5, "Drawer/Shelf Area", WHY.RAIL, LOOK.SKINS),
            Spot(0.5, 0.95, "Base Junction", WHY.EDGE, LOOK.LIVE),
        ),
        Scenario.NIGHTSTAND: (
            Spot(0.2, 0.3, "Drawer Rail Left", WHY.RAIL, LOOK.SPOTS),
            Spot(0.8, 0.3, "Drawer Rail Right", WHY.RAIL, LOOK.SPOTS),
            Spot(0.5, 0.6, "Back Panel Edge", WHY.JOINT, LOOK.SKINS),
            Spot(0.5, 0.95, "Base Junction", WHY.EDGE, LOOK.LIVE),
        ),
    },
    ObjectClass.SUITCASE: {
        None: (
            Spot(0.2, 0.5, "Left Handle/Strap", WHY.STRAP, LOOK.SPOTS),
            Spot(0.8, 0.5, "Right Handle/Strap", WHY.STRAP, LOOK.SPOTS),
            Spot(0.5, 0.92, "Bottom Edge", WHY.EDGE, LOOK.SKINS),
        ),
        Scenario.LUGGAGE_RACK: (
            Spot(0.15, 0.3, "Left Strap Attach", WHY.STRAP, LOOK.SPOTS),
            Spot(0.85, 0.3, "Right Strap Attach", WHY.STRAP, LOOK.SPOTS),
            Spot(0.3, 0.8, "Left Joint", WHY.JOINT, LOOK.SKINS),
            Spot(0.7, 0.8, "Right Joint", WHY.JOINT, LOOK.SKINS),
            Spot(0.5, 0.95, "Underside Edge", WHY.EDGE, LOOK.LIVE),
        ),
    },
    ObjectClass.OTHER: {
        None: (
            Spot(0.1, 0.5, "Left Edge", WHY.EDGE, LOOK.SPOTS),
            Spot(0.9, 0.5, "Right Edge", WHY.EDGE, LOOK.SPOTS),
            Spot(0.5, 0.95, "Lower Edge", WHY.EDGE, LOOK.SKINS),
        ),
    },
}

_missing = sorted(c.value for c in ObjectClass if None not in DETECTION_LAYOUTS.get(c, {}))
if _missing:
    raise RuntimeError(f"Missing general detection layouts for classes: {_missing}")


def layout_for(object_class: ObjectClass, scenario: Optional[Scenario]) -> Tuple[Spot, ...]:
    """
    Spots for one detection in one step: the class's close-up variant for the
    step when it has one, its general layout otherwise.
    """

    variants = DETECTION_LAYOUTS[object_class]
    return variants.get(scenario, variants[None])
