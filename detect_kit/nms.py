from dataclasses import dataclass
from typing import Optional

import numpy as np


@dataclass
class NMSConfig:
    iou_threshold: float = 0.5
    max_detections: Optional[int] = None


def box_iou(box: np.ndarray, others: np.ndarray) -> np.ndarray:
    """
    IoU of one xyxy box (4,) against others (M, 4). Zero where the union is empty.
    """

    others = np.asarray(others, dtype=np.float64).reshape(-1, 4)
    xx1 = np.maximum(box[0], others[:, 0])
    yy1 = np.maximum(box[1], others[:, 1])
    xx2 = np.minimum(box[2], others[:, 2])
    yy2 = np.minimum(box[3], others[:, 3])

    inter = np.maximum(0.0, xx2 - xx1) * np.maximum(0.0, yy2 - yy1)
    area_a = (box[2] - box[0]) * (box[3] - box[1])
    area_b = (others[:, 2] - others[:, 0]) * (others[:, 3] - others[:, 1])
    union = area_a + area_b - inter
    return np.divide(inter, union, out=np.zeros_like(inter), where=union > 0)


def nms(boxes: np.ndarray, scores: np.ndarray, class_ids: np.ndarray, cfg: NMSConfig) -> np.ndarray:
    """
    Greedy per-class NMS. Expects boxes (N, 4) in xyxy, scores (N,), class_ids (N,).

    Returns indices of kept boxes ordered by descending score (ties keep input
    order). A box only suppresses later boxes of the same class.
    """

    boxes = np.asarray(boxes, dtype=np.float64).reshape(-1, 4)
    scores = np.asarray(scores, dtype=np.float64).reshape(-1)
    class_ids = np.asarray(class_ids).reshape(-1)
    if boxes.shape[0] == 0:
        return np.empty((0,), dtype=np.int32)

    order = np.argsort(-scores, kind="stable")
    suppressed = np.zeros(boxes.shape[0], dtype=bool)
    keep = []

    for pos, i in enumerate(order):
        if suppressed[i]:
            continue
        keep.append(i)
        if cfg.max_detections is not None and len(keep) >= cfg.max_detections:
            break

        rest = order[pos + 1 :]
        rest = rest[(class_ids[rest] == class_ids[i]) & ~suppressed[rest]]
        if rest.size == 0:
            continue
        iou = box_iou(boxes[i], boxes[rest])
        suppressed[rest[iou > cfg.iou_threshold]] = True

    return np.array(keep, dtype=np.int32)
