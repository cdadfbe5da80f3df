from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Tuple

from .labels import RELEVANT_CLASSES


@dataclass(frozen=True)
class DetectorConfig:
    # Detection assist stays off until a model file ships with the app.
    enabled: bool = False
    model_path: str = "models/yolov8n-coco.onnx"
    input_size: int = 640
    input_name: str = "images"
    output_name: str = "output0"
    confidence_threshold: float = 0.45
    iou_threshold: float = 0.5
    num_classes: int = 80
    filter_relevant: bool = True
    relevant_classes: Mapping[int, str] = field(default_factory=lambda: dict(RELEVANT_CLASSES))
    labels_path: Optional[str] = None
    onnx_providers: Optional[Tuple[str, ...]] = None

    def __post_init__(self) -> None:
        if self.input_size < 32:
            raise ValueError("input_size must be >= 32")
        if not (0.0 <= self.confidence_threshold <= 1.0):
            raise ValueError("confidence_threshold must be within [0, 1]")
        if not (0.0 <= self.iou_threshold <= 1.0):
            raise ValueError("iou_threshold must be within [0, 1]")
        if self.num_classes <= 0:
            raise ValueError("num_classes must be > 0")
        if not self.model_path:
            raise ValueError("model_path must not be empty")


def _require_bool(payload: Dict[str, Any], key: str) -> bool:
    value = payload[key]
    if not isinstance(value, bool):
        raise ValueError(f"{key} must be a boolean")
    return value


def _require_number(payload: Dict[str, Any], key: str) -> float:
    value = payload[key]
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"{key} must be a number")
    return float(value)


def _require_int(payload: Dict[str, Any], key: str) -> int:
    value = payload[key]
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{key} must be an integer")
    return int(value)


def _require_str(payload: Dict[str, Any], key: str) -> str:
    value = payload[key]
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"{key} must be a non-empty string")
    return value


def _parse_relevant_classes(value: Any) -> Dict[int, str]:
    if not isinstance(value, dict) or not value:
        raise ValueError("relevant_classes must be a non-empty object of {class_id: name}")
    parsed: Dict[int, str] = {}
    for key, name in value.items():
        if not str(key).isdigit():
            raise ValueError(f"relevant_classes key must be a class id, got {key!r}")
        if not isinstance(name, str) or not name.strip():
            raise ValueError(f"relevant_classes[{key}] must be a non-empty string")
        parsed[int(key)] = name
    return parsed


def load_detector_config(path: Path) -> DetectorConfig:
    if not path.exists():
        raise FileNotFoundError(f"Detector config not found: {path}")
    raw = path.read_text(encoding="utf-8")
    try:
        payload = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid detector config JSON: {path}") from exc
    if not isinstance(payload, dict):
        raise ValueError("Detector config must be a JSON object")

    bool_keys = {"enabled", "filter_relevant"}
    number_keys = {"confidence_threshold", "iou_threshold"}
    int_keys = {"input_size", "num_classes"}
    str_keys = {"model_path", "input_name", "output_name", "labels_path"}
    allowed = bool_keys | number_keys | int_keys | str_keys | {"relevant_classes", "onnx_providers"}
    unknown = sorted(set(payload.keys()) - allowed)
    if unknown:
        raise ValueError(f"Unknown detector config keys: {unknown}")

    kwargs: Dict[str, Any] = {}
    for key in payload:
        if payload[key] is None:
            continue
        if key in bool_keys:
            kwargs[key] = _require_bool(payload, key)
        elif key in number_keys:
            kwargs[key] = _require_number(payload, key)
        elif key in int_keys:
            kwargs[key] = _require_int(payload, key)
        elif key in str_keys:
            kwargs[key] = _require_str(payload, key)
        elif key == "relevant_classes":
            kwargs[key] = _parse_relevant_classes(payload[key])
        elif key == "onnx_providers":
            providers = payload[key]
            if isinstance(providers, str):
                providers = [p.strip() for p in providers.split(",") if p.strip()]
            if not isinstance(providers, list) or not all(isinstance(p, str) and p for p in providers):
                raise ValueError("onnx_providers must be a string or list of strings")
            kwargs[key] = tuple(providers)

    return DetectorConfig(**kwargs)
