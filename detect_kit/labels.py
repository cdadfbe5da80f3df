from __future__ import annotations

from typing import Dict, Mapping, Optional

COCO_LABELS = (
    "person", "bicycle", "car", "motorcycle", "airplane", "bus", "train", "truck", "boat",
    "traffic light", "fire hydrant", "stop sign", "parking meter", "bench", "bird", "cat",
    "dog", "horse", "sheep", "cow", "elephant", "bear", "zebra", "giraffe", "backpack",
    "umbrella", "handbag", "tie", "suitcase", "frisbee", "skis", "snowboard", "sports ball",
    "kite", "baseball bat", "baseball glove", "skateboard", "surfboard", "tennis racket",
    "bottle", "wine glass", "cup", "fork", "knife", "spoon", "bowl", "banana", "apple",
    "sandwich", "orange", "broccoli", "carrot", "hot dog", "pizza", "donut", "cake", "chair",
    "couch", "potted plant", "bed", "dining table", "toilet", "tv", "laptop", "mouse",
    "remote", "keyboard", "cell phone", "microwave", "oven", "toaster", "sink",
    "refrigerator", "book", "clock", "vase", "scissors", "teddy bear", "hair drier",
    "toothbrush",
)

# COCO ids that matter around sleeping and seating areas.
RELEVANT_CLASSES: Dict[int, str] = {
    59: "bed",
    57: "couch",
    56: "chair",
    60: "dining table",  # often a nightstand
    58: "potted plant",  # usually near curtains
}

UNKNOWN_LABEL = "unknown"


def coco_class_names() -> Dict[int, str]:
    return {i: name for i, name in enumerate(COCO_LABELS)}


def get_class_name(class_id: int, class_names: Optional[Mapping[int, str]] = None) -> str:
    names = class_names if class_names is not None else coco_class_names()
    return names.get(int(class_id), UNKNOWN_LABEL)


def is_relevant_for_inspection(class_id: int, relevant: Optional[Mapping[int, str]] = None) -> bool:
    allow = RELEVANT_CLASSES if relevant is None else relevant
    return int(class_id) in allow


def load_class_names(metadata_path: str) -> Dict[int, str]:
    """
    Load class names from a lightweight `metadata.yaml` as exported next to
    the model:

        names:
          0: person
          1: bicycle
          ...

    Only the `names:` block is read, so no YAML dependency is needed.
    """

    names: Dict[int, str] = {}
    in_names = False

    with open(metadata_path, "r", encoding="utf-8") as f:
        for raw in f:
            line = raw.strip()
            if not line or line.startswith("#"):
                continue
            if line == "names:":
                in_names = True
                continue
            if not in_names:
                continue

            if ":" not in line:
                continue
            left, right = line.split(":", 1)
            left = left.strip()
            right = right.strip().strip("'").strip('"')
            if not left.isdigit():
                # A new top-level key ends the block.
                if not raw.startswith((" ", "\t")):
                    in_names = False
                continue
            names[int(left)] = right

    return names
