from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Optional, Tuple

import numpy as np

from .labels import RELEVANT_CLASSES, coco_class_names, get_class_name
from .nms import NMSConfig, nms
from .tensor import to_normalized, to_original_coords
from .types import Box, Detection

NUM_BOX_CHANNELS = 4


@dataclass
class PostConfig:
    """
    Post-processing settings for YOLOv8-style exports.
    """

    confidence_threshold: float = 0.45
    iou_threshold: float = 0.5
    num_classes: int = 80
    # None infers the anchor count from the buffer size.
    num_candidates: Optional[int] = None
    max_detections: Optional[int] = 300
    filter_relevant: bool = True
    relevant_classes: Mapping[int, str] = field(default_factory=lambda: dict(RELEVANT_CLASSES))
    class_names: Mapping[int, str] = field(default_factory=coco_class_names)

    def __post_init__(self) -> None:
        if self.num_classes <= 0:
            raise ValueError("num_classes must be > 0")
        if not (0.0 <= self.confidence_threshold <= 1.0):
            raise ValueError("confidence_threshold must be within [0, 1]")
        if not (0.0 <= self.iou_threshold <= 1.0):
            raise ValueError("iou_threshold must be within [0, 1]")
        if self.num_candidates is not None and self.num_candidates <= 0:
            raise ValueError("num_candidates must be > 0")
        if self.max_detections is not None and self.max_detections <= 0:
            raise ValueError("max_detections must be > 0")


class YoloPostprocessor:
    """
    Post-process for a single-image YOLOv8 output laid out channel-major:

        (4 + C, N): rows 0..3 are cx, cy, w, h in model-input pixels,
                    rows 4.. are per-class scores; value = out[ch * N + i]

    Accepts the flat buffer, the (4 + C, N) matrix or a batch-1 (1, 4 + C, N)
    array. Anything else is a caller error and raises ValueError.
    """

    def __init__(self, cfg: PostConfig):
        self.cfg = cfg

    def decode(
        self,
        output: np.ndarray,
        image_width: int,
        image_height: int,
        scale: Tuple[float, float] = (1.0, 1.0),
        padding: Tuple[float, float] = (0.0, 0.0),
    ) -> List[Detection]:
        """
        Turn a raw output buffer into normalized detections, highest confidence first.

        Args:
            output: raw model output for one image
            image_width, image_height: original image size in pixels
            scale: (sx, sy) letterbox scale used to build the input tensor
            padding: (pad_x, pad_y) letterbox padding (left/top)
        """

        boxes_cxcywh, scores, class_ids = self._decode(output)

        keep = scores >= self.cfg.confidence_threshold
        boxes_cxcywh, scores, class_ids = boxes_cxcywh[keep], scores[keep], class_ids[keep]

        if self.cfg.filter_relevant:
            allow = np.array(sorted(int(k) for k in self.cfg.relevant_classes), dtype=np.int64)
            mask = np.isin(class_ids, allow)
            boxes_cxcywh, scores, class_ids = boxes_cxcywh[mask], scores[mask], class_ids[mask]

        if scores.size == 0:
            return []

        candidates = [
            self._to_detection(box, float(score), int(cls_id), image_width, image_height, scale, padding)
            for box, score, cls_id in zip(boxes_cxcywh, scores, class_ids)
        ]

        xyxy = np.array([d.as_xyxy() for d in candidates], dtype=np.float64)
        conf = np.array([d.confidence for d in candidates], dtype=np.float64)
        ids = np.array([d.class_id for d in candidates], dtype=np.int64)
        keep_idx = nms(
            xyxy,
            conf,
            ids,
            NMSConfig(iou_threshold=self.cfg.iou_threshold, max_detections=self.cfg.max_detections),
        )
        return [candidates[i] for i in keep_idx]

    # ------------------------------------------------------------------ #
    # Internal helpers
    # ------------------------------------------------------------------ #
    def _decode(self, output: np.ndarray) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
        """
        Split the raw buffer into (N, 4) cxcywh boxes, best scores (N,) and class ids (N,).
        """

        channels = NUM_BOX_CHANNELS + self.cfg.num_classes
        p = np.asarray(output, dtype=np.float32)

        if p.ndim == 3:
            if p.shape[0] != 1:
                raise ValueError(f"Batch > 1 is not supported (got shape {p.shape}). Pass one image at a time.")
            p = p[0]
        if p.ndim == 2:
            if p.shape[0] != channels:
                raise ValueError(f"Expected {channels} channels in output, got shape {p.shape}")
        elif p.ndim == 1:
            if p.size == 0 or p.size % channels != 0:
                raise ValueError(f"Output of size {p.size} is not a multiple of {channels} channels")
            p = p.reshape(channels, -1)
        else:
            raise ValueError(f"Unsupported YOLO output shape: {p.shape}")

        n = p.shape[1]
        if n == 0:
            raise ValueError("Output holds no candidates")
        if self.cfg.num_candidates is not None and n != self.cfg.num_candidates:
            raise ValueError(f"Expected {self.cfg.num_candidates} candidates, got {n}")

        boxes = p[0:NUM_BOX_CHANNELS, :].T  # (N, 4) as cx, cy, w, h
        class_scores = p[NUM_BOX_CHANNELS:, :]  # (C, N)
        # argmax returns the first maximum, so ties go to the lowest class id.
        class_ids = np.argmax(class_scores, axis=0)
        scores = class_scores[class_ids, np.arange(n)]
        return boxes, scores, class_ids.astype(np.int64)

    def _to_detection(
        self,
        box_cxcywh: np.ndarray,
        score: float,
        class_id: int,
        image_width: int,
        image_height: int,
        scale: Tuple[float, float],
        padding: Tuple[float, float],
    ) -> Detection:
        cx, cy, w, h = (float(v) for v in box_cxcywh)
        model_box = Box(x=cx - w / 2, y=cy - h / 2, width=w, height=h)
        norm = to_normalized(to_original_coords(model_box, scale, padding), image_width, image_height)
        return Detection.from_corners(
            norm.x,
            norm.y,
            norm.x + norm.width,
            norm.y + norm.height,
            class_id=class_id,
            class_name=get_class_name(class_id, self.cfg.class_names),
            confidence=score,
        )


def decode(
    output: np.ndarray,
    image_width: int,
    image_height: int,
    scale: Tuple[float, float],
    padding: Tuple[float, float],
    confidence_threshold: float = 0.45,
    iou_threshold: float = 0.5,
    filter_relevant: bool = True,
    relevant_classes: Optional[Dict[int, str]] = None,
) -> List[Detection]:
    cfg = PostConfig(
        confidence_threshold=confidence_threshold,
        iou_threshold=iou_threshold,
        filter_relevant=filter_relevant,
    )
    if relevant_classes is not None:
        cfg.relevant_classes = dict(relevant_classes)
    return YoloPostprocessor(cfg).decode(output, image_width, image_height, scale=scale, padding=padding)
