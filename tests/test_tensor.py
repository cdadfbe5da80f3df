import unittest

import numpy as np

from detect_kit.tensor import (
    PAD_VALUE,
    letterbox_params,
    to_model_coords,
    to_normalized,
    to_original_coords,
    to_tensor,
)
from detect_kit.types import Box, RgbaImage


def _solid_image(width: int, height: int, rgba=(10, 20, 30, 255)) -> RgbaImage:
    pixels = np.tile(np.array(rgba, dtype=np.uint8), width * height)
    return RgbaImage(width=width, height=height, pixels=pixels.tobytes())


class TestLetterboxParams(unittest.TestCase):
    def test_wide_image_is_padded_vertically(self) -> None:
        scale, (new_w, new_h), (pad_x, pad_y) = letterbox_params(1000, 500, 640)
        self.assertAlmostEqual(scale, 0.64)
        self.assertEqual((new_w, new_h), (640, 320))
        self.assertEqual((pad_x, pad_y), (0, 160))

    def test_tall_image_is_padded_horizontally(self) -> None:
        scale, (new_w, new_h), (pad_x, pad_y) = letterbox_params(300, 600, 640)
        self.assertAlmostEqual(scale, 640 / 600)
        self.assertEqual((new_w, new_h), (320, 640))
        self.assertEqual((pad_x, pad_y), (160, 0))


class TestToTensor(unittest.TestCase):
    def test_shape_dtype_and_value_range(self) -> None:
        rng = np.random.default_rng(0)
        pixels = rng.integers(0, 256, size=37 * 23 * 4, dtype=np.uint8)
        prep = to_tensor(RgbaImage(width=37, height=23, pixels=pixels.tobytes()), target_size=64)

        self.assertEqual(prep.tensor.shape, (3, 64, 64))
        self.assertEqual(prep.tensor.dtype, np.float32)
        self.assertGreaterEqual(float(prep.tensor.min()), 0.0)
        self.assertLessEqual(float(prep.tensor.max()), 1.0)
        self.assertEqual(prep.orig_size, (37, 23))

    def test_padding_is_exactly_neutral_gray(self) -> None:
        prep = to_tensor(_solid_image(37, 23), target_size=64)
        _, (new_w, new_h), (pad_x, pad_y) = letterbox_params(37, 23, 64)
        self.assertEqual(prep.padding, (pad_x, pad_y))
        self.assertGreater(pad_y, 0)

        self.assertTrue(np.all(prep.tensor[:, :pad_y, :] == PAD_VALUE))
        self.assertTrue(np.all(prep.tensor[:, pad_y + new_h :, :] == PAD_VALUE))
        inner = prep.tensor[:, pad_y : pad_y + new_h, pad_x : pad_x + new_w]
        self.assertTrue(np.allclose(inner[0], 10 / 255.0))
        self.assertTrue(np.allclose(inner[1], 20 / 255.0))
        self.assertTrue(np.allclose(inner[2], 30 / 255.0))

    def test_nearest_neighbour_sampling(self) -> None:
        # 2x1 image: red pixel then blue pixel, upscaled 2x into a 4x4 square.
        pixels = bytes([255, 0, 0, 255, 0, 0, 255, 255])
        prep = to_tensor(RgbaImage(width=2, height=1, pixels=pixels), target_size=4)

        self.assertEqual(prep.scale, (2.0, 2.0))
        self.assertEqual(prep.padding, (0, 1))
        red, green, blue = prep.tensor
        self.assertEqual(red[1].tolist(), [1.0, 1.0, 0.0, 0.0])
        self.assertEqual(blue[2].tolist(), [0.0, 0.0, 1.0, 1.0])
        self.assertEqual(green[1].tolist(), [0.0, 0.0, 0.0, 0.0])
        self.assertEqual(red[0].tolist(), [PAD_VALUE] * 4)
        self.assertEqual(red[3].tolist(), [PAD_VALUE] * 4)

    def test_accepts_numpy_pixels(self) -> None:
        pixels = np.zeros((4, 6, 4), dtype=np.uint8)
        prep = to_tensor(RgbaImage(width=6, height=4, pixels=pixels), target_size=32)
        self.assertEqual(prep.tensor.shape, (3, 32, 32))

    def test_wrong_buffer_length_raises(self) -> None:
        with self.assertRaises(ValueError):
            to_tensor(RgbaImage(width=4, height=4, pixels=bytes(4 * 4 * 3)), target_size=32)

    def test_zero_sized_image_is_all_padding(self) -> None:
        prep = to_tensor(RgbaImage(width=0, height=0, pixels=b""), target_size=32)
        self.assertTrue(np.all(prep.tensor == PAD_VALUE))


class TestCoordinateMapping(unittest.TestCase):
    def test_model_to_original_round_trip(self) -> None:
        cases = [(1000, 1000, 640), (1920, 1080, 640), (37, 91, 320)]
        for width, height, size in cases:
            scale, _, padding = letterbox_params(width, height, size)
            original = Box(x=width * 0.1, y=height * 0.2, width=width * 0.3, height=height * 0.4)

            back = to_original_coords(to_model_coords(original, (scale, scale), padding), (scale, scale), padding)
            for got, want in zip(back, original):
                self.assertAlmostEqual(got, want, places=6)

    def test_letterbox_padding_is_removed(self) -> None:
        box = to_original_coords(Box(x=288.0, y=288.0, width=64.0, height=64.0), (0.64, 0.64), (0, 160))
        self.assertAlmostEqual(box.x, 450.0)
        self.assertAlmostEqual(box.y, 200.0)
        self.assertAlmostEqual(box.width, 100.0)
        self.assertAlmostEqual(box.height, 100.0)

    def test_normalized_handles_zero_dimensions(self) -> None:
        self.assertEqual(to_normalized(Box(5.0, 5.0, 1.0, 1.0), 0, 0), Box(0.0, 0.0, 0.0, 0.0))
        self.assertEqual(to_normalized(Box(50.0, 25.0, 10.0, 5.0), 100, 50), Box(0.5, 0.5, 0.1, 0.1))


if __name__ == "__main__":
    unittest.main()
