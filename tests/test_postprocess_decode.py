import unittest

import numpy as np

from detect_kit.postprocess import PostConfig, YoloPostprocessor, decode

NUM_CLASSES = 80
CHANNELS = 4 + NUM_CLASSES


def _output(candidates, n=None) -> np.ndarray:
    """
    Build a channel-major (84, N) buffer from (cx, cy, w, h, {class_id: score}).
    """

    n = n or len(candidates)
    out = np.zeros((CHANNELS, n), dtype=np.float32)
    for i, (cx, cy, w, h, scores) in enumerate(candidates):
        out[0:4, i] = (cx, cy, w, h)
        for class_id, score in scores.items():
            out[4 + class_id, i] = score
    return out


class TestYoloPostprocessDecode(unittest.TestCase):
    def test_same_class_overlap_suppressed_other_class_kept(self) -> None:
        out = _output(
            [
                (500, 500, 400, 400, {59: 0.9}),  # bed A
                (520, 500, 400, 400, {59: 0.6}),  # bed B, IoU ~0.9 with A
                (480, 500, 400, 400, {56: 0.8}),  # chair, IoU ~0.9 with A
            ]
        )
        dets = decode(out.reshape(-1), 1000, 1000, (1.0, 1.0), (0.0, 0.0))

        self.assertEqual([d.class_name for d in dets], ["bed", "chair"])
        self.assertAlmostEqual(dets[0].confidence, 0.9, places=6)
        self.assertAlmostEqual(dets[1].confidence, 0.8, places=6)
        self.assertAlmostEqual(dets[0].x1, 0.3, places=6)
        self.assertAlmostEqual(dets[0].x2, 0.7, places=6)
        self.assertAlmostEqual(dets[0].y1, 0.3, places=6)
        self.assertAlmostEqual(dets[0].y2, 0.7, places=6)

    def test_matrix_and_batched_layouts_match_flat(self) -> None:
        out = _output([(100, 100, 50, 50, {59: 0.7}), (300, 300, 60, 60, {57: 0.5})], n=6)
        flat = decode(out.reshape(-1), 640, 640, (1.0, 1.0), (0.0, 0.0))
        matrix = decode(out, 640, 640, (1.0, 1.0), (0.0, 0.0))
        batched = decode(out[None, ...], 640, 640, (1.0, 1.0), (0.0, 0.0))
        self.assertEqual(flat, matrix)
        self.assertEqual(flat, batched)
        self.assertEqual(len(flat), 2)

    def test_confidence_threshold_is_inclusive(self) -> None:
        out = _output([(100, 100, 50, 50, {59: 0.5}), (300, 300, 50, 50, {59: 0.44})])
        dets = decode(out, 640, 640, (1.0, 1.0), (0.0, 0.0), confidence_threshold=0.5)
        self.assertEqual(len(dets), 1)
        self.assertAlmostEqual(dets[0].confidence, 0.5, places=6)

    def test_relevance_filter(self) -> None:
        out = _output([(100, 100, 50, 50, {0: 0.95}), (300, 300, 50, 50, {59: 0.6})])

        filtered = decode(out, 640, 640, (1.0, 1.0), (0.0, 0.0))
        self.assertEqual([d.class_name for d in filtered], ["bed"])

        everything = decode(out, 640, 640, (1.0, 1.0), (0.0, 0.0), filter_relevant=False)
        self.assertEqual([d.class_name for d in everything], ["person", "bed"])

        custom = decode(out, 640, 640, (1.0, 1.0), (0.0, 0.0), relevant_classes={0: "person"})
        self.assertEqual([d.class_id for d in custom], [0])

    def test_argmax_tie_goes_to_lowest_class_id(self) -> None:
        out = _output([(100, 100, 50, 50, {59: 0.7, 56: 0.7})])
        dets = decode(out, 640, 640, (1.0, 1.0), (0.0, 0.0))
        self.assertEqual(len(dets), 1)
        self.assertEqual(dets[0].class_id, 56)
        self.assertEqual(dets[0].class_name, "chair")

    def test_letterbox_mapping_to_normalized(self) -> None:
        out = _output([(320, 320, 64, 64, {59: 0.9})])
        dets = decode(out, 1000, 500, (0.64, 0.64), (0, 160))
        self.assertEqual(len(dets), 1)
        d = dets[0]
        self.assertAlmostEqual(d.x1, 0.45, places=5)
        self.assertAlmostEqual(d.y1, 0.4, places=5)
        self.assertAlmostEqual(d.x2, 0.55, places=5)
        self.assertAlmostEqual(d.y2, 0.6, places=5)
        self.assertAlmostEqual(d.x, 0.5, places=5)
        self.assertAlmostEqual(d.width, 0.1, places=5)

    def test_boxes_are_clamped_to_image(self) -> None:
        out = _output(
            [
                (990, 500, 100, 100, {59: 0.9}),  # overhangs the right edge
                (1200, 200, 100, 100, {57: 0.8}),  # fully outside
            ]
        )
        dets = decode(out, 1000, 1000, (1.0, 1.0), (0.0, 0.0))
        self.assertEqual(len(dets), 2)

        overhang, outside = dets
        self.assertAlmostEqual(overhang.x1, 0.94, places=5)
        self.assertEqual(overhang.x2, 1.0)
        self.assertEqual(outside.x1, 1.0)
        self.assertEqual(outside.x2, 1.0)
        self.assertEqual(outside.width, 0.0)
        for d in dets:
            for v in d.as_xyxy():
                self.assertGreaterEqual(v, 0.0)
                self.assertLessEqual(v, 1.0)

    def test_results_sorted_by_confidence(self) -> None:
        rng = np.random.default_rng(7)
        n = 200
        out = np.zeros((CHANNELS, n), dtype=np.float32)
        out[0:2] = rng.uniform(0, 640, size=(2, n))
        out[2:4] = rng.uniform(5, 120, size=(2, n))
        out[4:] = rng.uniform(0, 1, size=(NUM_CLASSES, n)) ** 4

        dets = decode(out, 640, 640, (1.0, 1.0), (0.0, 0.0), confidence_threshold=0.3, filter_relevant=False)
        self.assertGreater(len(dets), 0)
        confs = [d.confidence for d in dets]
        self.assertEqual(confs, sorted(confs, reverse=True))
        self.assertTrue(all(c >= 0.3 for c in confs))

    def test_no_candidates_above_threshold(self) -> None:
        out = _output([(100, 100, 50, 50, {59: 0.1})], n=4)
        self.assertEqual(decode(out, 640, 640, (1.0, 1.0), (0.0, 0.0)), [])

    def test_max_detections_caps_output(self) -> None:
        out = _output([(100 + 100 * i, 100, 50, 50, {59: 0.9 - 0.1 * i}) for i in range(4)])
        post = YoloPostprocessor(PostConfig(max_detections=2))
        dets = post.decode(out, 640, 640)
        self.assertEqual(len(dets), 2)
        self.assertAlmostEqual(dets[1].confidence, 0.8, places=6)

    def test_custom_class_names(self) -> None:
        out = _output([(100, 100, 50, 50, {59: 0.9})])
        post = YoloPostprocessor(PostConfig(class_names={59: "cot"}))
        self.assertEqual(post.decode(out, 640, 640)[0].class_name, "cot")

    def test_malformed_buffers_raise(self) -> None:
        post = YoloPostprocessor(PostConfig())
        bad = [
            np.zeros(100, dtype=np.float32),  # not a multiple of 84
            np.zeros(0, dtype=np.float32),
            np.zeros((10, 5), dtype=np.float32),  # wrong channel count
            np.zeros((2, CHANNELS, 5), dtype=np.float32),  # batch of two
            np.zeros((1, 1, CHANNELS, 5), dtype=np.float32),
        ]
        for output in bad:
            with self.assertRaises(ValueError):
                post.decode(output, 640, 640)

    def test_candidate_count_is_checked_when_configured(self) -> None:
        post = YoloPostprocessor(PostConfig(num_candidates=8400))
        with self.assertRaises(ValueError):
            post.decode(np.zeros((CHANNELS, 10), dtype=np.float32), 640, 640)

    def test_invalid_config_rejected(self) -> None:
        with self.assertRaises(ValueError):
            PostConfig(confidence_threshold=1.5)
        with self.assertRaises(ValueError):
            PostConfig(num_classes=0)


if __name__ == "__main__":
    unittest.main()
