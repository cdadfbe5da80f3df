from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, List, Optional, Sequence, Tuple, Union

from .config import DetectorConfig
from .labels import coco_class_names, load_class_names
from .postprocess import PostConfig, YoloPostprocessor
from .tensor import to_tensor
from .types import Detection, RgbaImage

logger = logging.getLogger("detect_kit.runtime")

PathLike = Union[str, Path]


def find_project_root(
    start: Optional[PathLike] = None,
    markers: Sequence[str] = ("pyproject.toml", "setup.py", ".git", "requirements.txt"),
) -> Path:
    """
    Best-effort project root discovery, used to resolve relative model paths.
    """

    p = Path(start) if start is not None else Path.cwd()
    p = p.resolve()

    if p.is_file():
        p = p.parent

    for parent in (p, *p.parents):
        for m in markers:
            if (parent / m).exists():
                return parent
    return p


def resolve_path(path: PathLike, root: Optional[PathLike] = "auto") -> Path:
    """
    Resolve `path` to an absolute Path.

    Absolute paths are returned as-is; relative paths resolve against `root`,
    or against the project root when `root` is "auto" or None.
    """

    p = Path(path)
    if p.is_absolute():
        return p

    if root == "auto" or root is None:
        base = find_project_root()
    else:
        base = Path(root).resolve()

    return (base / p).resolve()


@dataclass(frozen=True)
class Ready:
    backend: Any
    class_names: Tuple[Tuple[int, str], ...] = ()


@dataclass(frozen=True)
class Unavailable:
    reason: str


DetectorState = Union[Ready, Unavailable]


@dataclass
class ModelSlot:
    """
    Holds at most one loaded detector for the lifetime of the application.

    Created by the composition root and handed to every `DetectorHost` that
    should share the same model. `state` is None until the first load attempt.
    """

    state: Optional[DetectorState] = None

    def clear(self) -> None:
        self.state = None


@dataclass(frozen=True)
class DetectionOutcome:
    detections: Tuple[Detection, ...] = ()
    # Why the detections are empty when the detector could not run.
    reason: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.reason is None


BackendFactory = Callable[[Path, DetectorConfig], Any]

DISABLED_REASON = "detector disabled"


def onnxruntime_factory(model_path: Path, cfg: DetectorConfig) -> Any:
    from .backends.onnxruntime_backend import OnnxRuntimeBackend, OnnxRuntimeBackendConfig

    return OnnxRuntimeBackend(
        model_path,
        OnnxRuntimeBackendConfig(
            providers=cfg.onnx_providers,
            input_name=cfg.input_name,
            output_name=cfg.output_name,
        ),
    )


@dataclass
class DetectorHost:
    """
    Lazy-loading front for the detector: tensor -> inference -> decode.

    Never raises from `initialize`, `run` or `detect`; load and inference
    problems surface as `Unavailable` / an empty `DetectionOutcome`. A host
    with detection disabled never touches the shared slot.
    """

    slot: ModelSlot
    cfg: DetectorConfig = field(default_factory=DetectorConfig)
    backend_factory: BackendFactory = onnxruntime_factory
    root: Optional[PathLike] = "auto"

    def is_ready(self) -> bool:
        return self.cfg.enabled and isinstance(self.slot.state, Ready)

    @property
    def error(self) -> Optional[str]:
        if not self.cfg.enabled:
            return DISABLED_REASON
        state = self.slot.state
        return state.reason if isinstance(state, Unavailable) else None

    def initialize(self) -> bool:
        if not self.cfg.enabled:
            logger.info("Detection assist disabled, skipping model load")
            return False

        if self.slot.state is not None:
            return self.is_ready()

        model_path = resolve_path(self.cfg.model_path, root=self.root)
        if not model_path.exists():
            logger.warning("Model file not found at %s", model_path)
            self.slot.state = Unavailable(f"model file not found: {model_path}")
            return False

        try:
            backend = self.backend_factory(model_path, self.cfg)
            names = load_class_names(str(resolve_path(self.cfg.labels_path, root=self.root))) if self.cfg.labels_path else {}
        except Exception as exc:
            logger.warning("Failed to load detector from %s: %s", model_path, exc)
            self.slot.state = Unavailable(str(exc) or type(exc).__name__)
            return False

        self.slot.state = Ready(backend=backend, class_names=tuple(sorted(names.items())))
        logger.info("Detector loaded from %s", model_path)
        return True

    def run(self, image: RgbaImage) -> DetectionOutcome:
        if not self.cfg.enabled:
            return DetectionOutcome(reason=DISABLED_REASON)

        state = self.slot.state
        if not isinstance(state, Ready):
            reason = state.reason if isinstance(state, Unavailable) else "detector not initialized"
            logger.debug("Detector not ready (%s), returning empty detections", reason)
            return DetectionOutcome(reason=reason)

        try:
            prep = to_tensor(image, self.cfg.input_size)
            preds = state.backend.infer(prep.tensor[None, ...])
            if preds is None:
                return DetectionOutcome(reason="no output from model")
            detections = self._postprocessor(state).decode(
                preds,
                image.width,
                image.height,
                scale=prep.scale,
                padding=prep.padding,
            )
        except Exception as exc:
            logger.warning("Detection failed: %s", exc)
            return DetectionOutcome(reason=f"inference failed: {exc}")

        logger.debug("Detected %d relevant objects", len(detections))
        return DetectionOutcome(detections=tuple(detections))

    def detect(self, image: RgbaImage) -> List[Detection]:
        return list(self.run(image).detections)

    def dispose(self) -> None:
        self.slot.clear()

    def _postprocessor(self, state: Ready) -> YoloPostprocessor:
        class_names = dict(state.class_names) if state.class_names else coco_class_names()
        return YoloPostprocessor(
            PostConfig(
                confidence_threshold=self.cfg.confidence_threshold,
                iou_threshold=self.cfg.iou_threshold,
                num_classes=self.cfg.num_classes,
                filter_relevant=self.cfg.filter_relevant,
                relevant_classes=dict(self.cfg.relevant_classes),
                class_names=class_names,
            )
        )


def detect_objects(host: DetectorHost, image: RgbaImage) -> List[Detection]:
    """
    Initialize on first use, then detect.
    """

    if not host.is_ready():
        host.initialize()
    return host.detect(image)
