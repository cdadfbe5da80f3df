from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Tuple

import numpy as np

from .types import Box, RgbaImage

PAD_VALUE = 0.5
DEFAULT_INPUT_SIZE = 640


@dataclass(frozen=True)
class TensorResult:
    """
    Output of `to_tensor`.

    tensor: float32 array shaped (3, S, S), planar RGB in [0, 1]
    scale: (sx, sy) applied to the source image (uniform, so sx == sy)
    padding: (pad_x, pad_y) offset of the resized image inside the square
    orig_size: (width, height) of the source image
    """

    tensor: np.ndarray
    scale: Tuple[float, float]
    padding: Tuple[int, int]
    orig_size: Tuple[int, int]


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _safe_div(num: float, den: float) -> float:
    return num / den if den else 0.0


def _pixels_as_array(image: RgbaImage) -> np.ndarray:
    width, height = int(image.width), int(image.height)
    if isinstance(image.pixels, np.ndarray):
        flat = image.pixels.astype(np.uint8, copy=False).reshape(-1)
    else:
        flat = np.frombuffer(bytes(image.pixels), dtype=np.uint8)
    expected = max(width, 0) * max(height, 0) * 4
    if flat.size != expected:
        raise ValueError(f"Expected {expected} RGBA bytes for {width}x{height}, got {flat.size}")
    return flat.reshape((max(height, 0), max(width, 0), 4))


def letterbox_params(width: int, height: int, target_size: int) -> Tuple[float, Tuple[int, int], Tuple[int, int]]:
    """
    Uniform scale, resized (w, h) and centering padding for a letterbox into
    a `target_size` square.
    """

    scale = min(target_size / max(width, 1), target_size / max(height, 1))
    new_w = _round_half_up(width * scale)
    new_h = _round_half_up(height * scale)
    pad_x = (target_size - new_w) // 2
    pad_y = (target_size - new_h) // 2
    return scale, (new_w, new_h), (pad_x, pad_y)


def to_tensor(image: RgbaImage, target_size: int = DEFAULT_INPUT_SIZE) -> TensorResult:
    """
    Letterbox an RGBA image into a (3, S, S) float32 tensor.

    Padding is neutral gray (0.5); the image area is filled by nearest-neighbour
    sampling, each channel divided by 255. Alpha is dropped.
    """

    if target_size <= 0:
        raise ValueError(f"target_size must be > 0, got {target_size}")

    src = _pixels_as_array(image)
    width, height = int(image.width), int(image.height)
    scale, (new_w, new_h), (pad_x, pad_y) = letterbox_params(width, height, target_size)

    tensor = np.full((3, target_size, target_size), PAD_VALUE, dtype=np.float32)
    if new_w > 0 and new_h > 0 and width > 0 and height > 0:
        xs = np.minimum(np.floor(np.arange(new_w) / scale).astype(np.int64), width - 1)
        ys = np.minimum(np.floor(np.arange(new_h) / scale).astype(np.int64), height - 1)
        sampled = src[ys[:, None], xs[None, :], :3].astype(np.float32) / 255.0  # (new_h, new_w, 3)
        tensor[:, pad_y : pad_y + new_h, pad_x : pad_x + new_w] = np.transpose(sampled, (2, 0, 1))

    return TensorResult(
        tensor=tensor,
        scale=(scale, scale),
        padding=(pad_x, pad_y),
        orig_size=(width, height),
    )


def to_original_coords(box: Box, scale: Tuple[float, float], padding: Tuple[float, float]) -> Box:
    """
    Map a box from model-input space back to source-image pixels.
    """

    sx, sy = scale
    px, py = padding
    return Box(
        x=_safe_div(box.x - px, sx),
        y=_safe_div(box.y - py, sy),
        width=_safe_div(box.width, sx),
        height=_safe_div(box.height, sy),
    )


def to_model_coords(box: Box, scale: Tuple[float, float], padding: Tuple[float, float]) -> Box:
    """
    Forward mapping of a source-image box into model-input space; inverse of
    `to_original_coords`.
    """

    sx, sy = scale
    px, py = padding
    return Box(x=box.x * sx + px, y=box.y * sy + py, width=box.width * sx, height=box.height * sy)


def to_normalized(box: Box, image_width: float, image_height: float) -> Box:
    return Box(
        x=_safe_div(box.x, image_width),
        y=_safe_div(box.y, image_height),
        width=_safe_div(box.width, image_width),
        height=_safe_div(box.height, image_height),
    )


def image_from_bgr(image_bgr: np.ndarray) -> RgbaImage:
    """
    Wrap an OpenCV BGR frame (H, W, 3) as an `RgbaImage`.
    """

    try:
        import cv2  # type: ignore
    except Exception as e:  # pragma: no cover
        raise ImportError("OpenCV is required for image_from_bgr(). Install with `pip install opencv-python`.") from e

    if image_bgr is None or not hasattr(image_bgr, "shape"):
        raise TypeError("image_bgr must be a NumPy array (BGR).")
    if image_bgr.ndim != 3 or image_bgr.shape[2] != 3:
        raise ValueError(f"Expected image shape (H, W, 3), got {getattr(image_bgr, 'shape', None)}")

    rgba = cv2.cvtColor(image_bgr, cv2.COLOR_BGR2RGBA)
    h, w = rgba.shape[:2]
    return RgbaImage(width=int(w), height=int(h), pixels=np.ascontiguousarray(rgba).reshape(-1))
