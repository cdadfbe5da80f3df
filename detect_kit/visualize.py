from __future__ import annotations

from typing import Any, Dict, Iterable, Tuple

import numpy as np

from .types import Detection

Color = Tuple[int, int, int]

# BGR per inspection-relevant COCO id; everything else falls back to a seeded color.
_PALETTE: Dict[int, Color] = {
    59: (56, 56, 255),  # bed
    57: (31, 112, 255),  # couch
    56: (29, 178, 255),  # chair
    60: (49, 210, 207),  # dining table
    58: (10, 249, 72),  # potted plant
    28: (187, 212, 0),  # suitcase
}

PIN_COLOR: Color = (255, 191, 0)


def _color_for_class_id(class_id: int) -> Color:
    if class_id in _PALETTE:
        return _PALETTE[class_id]
    rng = np.random.default_rng(int(class_id))
    bgr = rng.integers(0, 256, size=3, dtype=np.uint8)
    return int(bgr[0]), int(bgr[1]), int(bgr[2])


def _require_cv2(caller: str) -> Any:
    try:
        import cv2  # type: ignore
    except Exception as e:  # pragma: no cover
        raise ImportError(f"OpenCV is required for {caller}(). Install with `pip install opencv-python`.") from e
    return cv2


def _checked_copy(image_bgr: np.ndarray) -> np.ndarray:
    if image_bgr is None or not hasattr(image_bgr, "shape"):
        raise TypeError("image_bgr must be a NumPy array (BGR).")
    if image_bgr.ndim != 3 or image_bgr.shape[2] != 3:
        raise ValueError(f"Expected image shape (H, W, 3), got {getattr(image_bgr, 'shape', None)}")
    return image_bgr.copy()


def _to_pixel(x: float, y: float, width: int, height: int) -> Tuple[int, int]:
    return int(np.clip(round(x * width), 0, width - 1)), int(np.clip(round(y * height), 0, height - 1))


def _put_label(
    cv2: Any,
    out: np.ndarray,
    text: str,
    anchor: Tuple[int, int],
    color: Color,
    font_scale: float,
    font_thickness: int,
) -> None:
    """
    Filled label box above `anchor`, moved below it when it would leave the frame.
    """

    h, w = out.shape[:2]
    x, y = anchor
    (tw, th), baseline = cv2.getTextSize(text, cv2.FONT_HERSHEY_SIMPLEX, font_scale, font_thickness)
    top = y - th - baseline if y - th - baseline >= 0 else y
    bottom = min(top + th + baseline, h - 1)

    cv2.rectangle(out, (x, top), (min(x + tw, w - 1), bottom), color, thickness=-1)
    cv2.putText(
        out,
        text,
        (x, min(top + th, h - 1)),
        cv2.FONT_HERSHEY_SIMPLEX,
        font_scale,
        (255, 255, 255),
        thickness=font_thickness,
        lineType=cv2.LINE_AA,
    )


def draw_detections(
    image_bgr: np.ndarray,
    detections: Iterable[Detection],
    *,
    show_score: bool = True,
    box_thickness: int = 2,
    font_scale: float = 0.5,
    font_thickness: int = 1,
) -> np.ndarray:
    """
    Draw normalized detections on an OpenCV BGR image and return a copy.
    """

    cv2 = _require_cv2("draw_detections")
    out = _checked_copy(image_bgr)
    h, w = out.shape[:2]

    for det in detections:
        top_left = _to_pixel(det.x1, det.y1, w, h)
        bottom_right = _to_pixel(det.x2, det.y2, w, h)
        color = _color_for_class_id(det.class_id)
        cv2.rectangle(out, top_left, bottom_right, color, thickness=box_thickness)

        text = f"{det.class_name} {det.confidence:.2f}" if show_score else det.class_name
        _put_label(cv2, out, text, top_left, color, font_scale, font_thickness)

    return out


def draw_points(
    image_bgr: np.ndarray,
    points: Iterable[Tuple[float, float, str]],
    *,
    color: Color = PIN_COLOR,
    radius: int = 8,
    font_scale: float = 0.45,
    font_thickness: int = 1,
) -> np.ndarray:
    """
    Draw labelled markers at normalized (x, y) positions, e.g. inspection pins.
    """

    cv2 = _require_cv2("draw_points")
    out = _checked_copy(image_bgr)
    h, w = out.shape[:2]

    for x, y, text in points:
        center = _to_pixel(x, y, w, h)
        cv2.circle(out, center, radius, color, thickness=-1, lineType=cv2.LINE_AA)
        cv2.circle(out, center, radius, (255, 255, 255), thickness=2, lineType=cv2.LINE_AA)
        if text:
            _put_label(cv2, out, text, (center[0] + radius + 2, center[1]), color, font_scale, font_thickness)

    return out
