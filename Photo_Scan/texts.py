"""
User-facing copy for the photo scan.

Wording avoids diagnostic claims: pins point at places worth a look, they do
not confirm anything.
"""

from __future__ import annotations

from typing import Dict

from .models import Scenario

OUTLET_WARNING = "Safety: Do not remove electrical outlet or switch plates unless you are qualified to do so."
REPEAT_CORNERS_SUFFIX = " (repeat on other corners)"


class PinWhy:
    SEAM = "Seams and folds provide protected hiding spots close to resting areas."
    JOINT = "Joints and crevices offer dark, undisturbed harborage."
    EDGE = "Edges where materials meet create gaps that may harbor activity."
    TAG = "Mattress tags and labels create small pockets that are often overlooked."
    PLEAT = "Fabric pleats and folds can conceal activity."
    RAIL = "Drawer rails and joints provide hidden crevices."
    MOUNT = "Wall-mounted items create gaps between furniture and wall."
    BASEBOARD = "Baseboards and carpet edges offer protected travel paths."
    STRAP = "Straps and attachment points have crevices that may go unchecked."


class PinLook:
    SPOTS = "Look for possible small dark spots (fecal staining)."
    SKINS = "Look for possible shed skins or shell casings."
    EGGS = "Look for possible tiny pale eggs or egg casings."
    LIVE = "Look for possible live insects (small, flat, reddish-brown)."


STEP_TITLES: Dict[Scenario, str] = {
    Scenario.BED_OVERVIEW: "Bed Overview",
    Scenario.MATTRESS_SEAMS: "Mattress Seams & Tags",
    Scenario.BED_SKIRT: "Bed Skirt / Base Edge",
    Scenario.BOX_SPRING: "Box Spring / Bed Frame",
    Scenario.HEADBOARD: "Headboard & Wall Junction",
    Scenario.NIGHTSTAND: "Nightstand / Dresser Rails",
    Scenario.BASEBOARDS: "Baseboards & Carpet Edge",
    Scenario.CURTAINS: "Curtains (Pleats & Hem)",
    Scenario.UPHOLSTERED: "Upholstered Furniture Seams",
    Scenario.LUGGAGE_RACK: "Luggage Rack / Stand",
    Scenario.CLOSET: "Closet Corners",
    Scenario.COUCH_OVERVIEW: "Couch Overview",
    Scenario.COUCH_SEAMS: "Couch Seams Close-up",
    Scenario.COUCH_UNDERSIDE: "Couch Underside / Skirt",
    Scenario.CHAIR_SEAMS: "Chair Seams",
    Scenario.RUG_EDGE: "Area Rug Edge",
    Scenario.OUTLET_AREA: "Outlet Wall Area",
}

INSTRUCTIONS: Dict[Scenario, str] = {
    Scenario.BED_OVERVIEW: "Take a photo showing the entire bed including headboard and sides.",
    Scenario.MATTRESS_SEAMS: "Focus on mattress corner seams, piping, and manufacturer tags.",
    Scenario.BED_SKIRT: "Photograph the bed skirt pleats, base edge, and where fabric meets floor.",
    Scenario.BOX_SPRING: "Capture the underside edges, joints, and staple points.",
    Scenario.HEADBOARD: "Focus on where headboard meets wall and any mounting hardware.",
    Scenario.NIGHTSTAND: "Open drawers and photograph rail joints and back panel edges.",
    Scenario.BASEBOARDS: "Photograph baseboards near bed, including carpet edge junction.",
    Scenario.CURTAINS: "Capture curtain hems, pleats, and where fabric touches floor or wall.",
    Scenario.UPHOLSTERED: "Photograph seams, cushion edges, and fabric folds.",
    Scenario.LUGGAGE_RACK: "Capture straps, joints, and underside of the luggage rack.",
    Scenario.CLOSET: "Photograph closet corners, shelf edges, and baseboard areas.",
    Scenario.COUCH_OVERVIEW: "Take a photo showing the entire couch/sofa.",
    Scenario.COUCH_SEAMS: "Focus on cushion seams, piping, and fabric joints.",
    Scenario.COUCH_UNDERSIDE: "Photograph the lower edge, skirt, and underside if accessible.",
    Scenario.CHAIR_SEAMS: "Capture seams, joints, and fabric folds on chairs.",
    Scenario.RUG_EDGE: "Photograph where rug edge meets floor and nearby baseboards.",
    Scenario.OUTLET_AREA: "Photograph the wall area around outlets (DO NOT remove plates).",
}
