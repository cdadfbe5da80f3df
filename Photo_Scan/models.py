from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class PinStatus(str, Enum):
    UNCHECKED = "unchecked"
    CHECKED = "checked"
    CONCERNED = "concerned"


class Scenario(str, Enum):
    """
    Guided inspection steps. The value is the scenario key used by the screen flow.
    """

    BED_OVERVIEW = "BED_OVERVIEW"
    MATTRESS_SEAMS = "MATTRESS_SEAMS"
    BED_SKIRT = "BED_SKIRT"
    BOX_SPRING = "BOX_SPRING"
    HEADBOARD = "HEADBOARD"
    NIGHTSTAND = "NIGHTSTAND"
    BASEBOARDS = "BASEBOARDS"
    CURTAINS = "CURTAINS"
    UPHOLSTERED = "UPHOLSTERED"
    LUGGAGE_RACK = "LUGGAGE_RACK"
    CLOSET = "CLOSET"
    COUCH_OVERVIEW = "COUCH_OVERVIEW"
    COUCH_SEAMS = "COUCH_SEAMS"
    COUCH_UNDERSIDE = "COUCH_UNDERSIDE"
    CHAIR_SEAMS = "CHAIR_SEAMS"
    RUG_EDGE = "RUG_EDGE"
    OUTLET_AREA = "OUTLET_AREA"

    @classmethod
    def parse(cls, key: str) -> Optional["Scenario"]:
        try:
            return cls(key)
        except ValueError:
            return None


class ObjectClass(str, Enum):
    BED = "bed"
    COUCH = "couch"
    CHAIR = "chair"
    TABLE = "table"
    SUITCASE = "suitcase"
    OTHER = "other"

    @classmethod
    def from_class_name(cls, class_name: str) -> "ObjectClass":
        return _CLASS_NAME_MAP.get(class_name.strip().lower(), cls.OTHER)


_CLASS_NAME_MAP = {
    "bed": ObjectClass.BED,
    "couch": ObjectClass.COUCH,
    "sofa": ObjectClass.COUCH,
    "chair": ObjectClass.CHAIR,
    "dining table": ObjectClass.TABLE,
    "suitcase": ObjectClass.SUITCASE,
}


def new_pin_id() -> str:
    return str(uuid.uuid4())


@dataclass
class Pin:
    """
    Inspection marker at a normalized position on a photo.

    Status and position belong to the caller once returned (tap / drag).
    """

    x: float
    y: float
    label: str
    description: str
    what_to_look: str
    status: PinStatus = PinStatus.UNCHECKED
    id: str = field(default_factory=new_pin_id)

    def __post_init__(self) -> None:
        if not (0.0 <= self.x <= 1.0) or not (0.0 <= self.y <= 1.0):
            raise ValueError(f"Pin position must be within [0, 1], got {(self.x, self.y)}")

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "x": self.x,
            "y": self.y,
            "label": self.label,
            "description": self.description,
            "whatToLook": self.what_to_look,
            "status": self.status.value,
        }
