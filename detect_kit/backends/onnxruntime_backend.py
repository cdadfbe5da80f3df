from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence, Union

import numpy as np


PathLike = Union[str, Path]


@dataclass(frozen=True)
class OnnxRuntimeBackendConfig:
    """
    Configuration for ONNX Runtime inference.

    - providers: ORT execution providers (e.g. ["CPUExecutionProvider"]); None lets ORT pick
    - input_name/output_name: graph tensor names; a missing name falls back to the first input/output
    """

    providers: Optional[Sequence[str]] = None
    input_name: Optional[str] = "images"
    output_name: Optional[str] = "output0"


class OnnxRuntimeBackend:
    """
    ONNX Runtime session for a YOLOv8 detector.

    `infer` takes the (3, S, S) or (1, 3, S, S) float32 tensor and returns the
    primary output, typically (1, 84, 8400).
    """

    def __init__(self, model_path: PathLike, cfg: OnnxRuntimeBackendConfig = OnnxRuntimeBackendConfig()):
        try:
            import onnxruntime as ort  # type: ignore
        except Exception as e:  # pragma: no cover
            raise ImportError(
                "onnxruntime is required for the ONNX backend. Install it with `pip install onnxruntime`."
            ) from e

        self.model_path = Path(model_path)
        if not self.model_path.exists():
            raise FileNotFoundError(str(self.model_path))

        providers = list(cfg.providers) if cfg.providers is not None else None
        self.session = ort.InferenceSession(str(self.model_path), sess_options=ort.SessionOptions(), providers=providers)

        input_names = [i.name for i in self.session.get_inputs()]
        output_names = [o.name for o in self.session.get_outputs()]
        self.input_name = cfg.input_name if cfg.input_name in input_names else input_names[0]
        self.output_name = cfg.output_name if cfg.output_name in output_names else output_names[0]

    @property
    def providers_in_use(self) -> Sequence[str]:
        return tuple(self.session.get_providers())

    def infer(self, blob: np.ndarray) -> np.ndarray:
        x = np.asarray(blob, dtype=np.float32)
        if x.ndim == 3:
            x = x[None, ...]
        outputs = self.session.run([self.output_name], {self.input_name: np.ascontiguousarray(x)})
        return outputs[0]
