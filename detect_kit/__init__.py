"""
Detector side of the photo-scan pipeline.

Turns a captured RGBA photo into a letterboxed tensor, decodes YOLOv8 output
into normalized detections with per-class NMS, and hosts the inference
runtime behind a never-raising facade. NumPy only at import time; OpenCV and
ONNX Runtime are imported where they are needed.
"""

from .types import Box, Detection, RgbaImage
from .tensor import TensorResult, image_from_bgr, to_normalized, to_original_coords, to_tensor
from .labels import COCO_LABELS, RELEVANT_CLASSES, get_class_name, is_relevant_for_inspection, load_class_names
from .nms import NMSConfig, box_iou, nms
from .postprocess import PostConfig, YoloPostprocessor, decode
from .config import DetectorConfig, load_detector_config
from .runtime import (
    DetectionOutcome,
    DetectorHost,
    ModelSlot,
    Ready,
    Unavailable,
    detect_objects,
    find_project_root,
    resolve_path,
)
from .visualize import draw_detections, draw_points

__all__ = [
    "Box",
    "Detection",
    "RgbaImage",
    "TensorResult",
    "image_from_bgr",
    "to_normalized",
    "to_original_coords",
    "to_tensor",
    "COCO_LABELS",
    "RELEVANT_CLASSES",
    "get_class_name",
    "is_relevant_for_inspection",
    "load_class_names",
    "NMSConfig",
    "box_iou",
    "nms",
    "PostConfig",
    "YoloPostprocessor",
    "decode",
    "DetectorConfig",
    "load_detector_config",
    "DetectionOutcome",
    "DetectorHost",
    "ModelSlot",
    "Ready",
    "Unavailable",
    "detect_objects",
    "find_project_root",
    "resolve_path",
    "draw_detections",
    "draw_points",
]
