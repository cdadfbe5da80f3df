import unittest

import numpy as np

from detect_kit.nms import NMSConfig, box_iou, nms


class TestBoxIou(unittest.TestCase):
    def test_identical_and_disjoint(self) -> None:
        box = np.array([0.0, 0.0, 10.0, 10.0])
        others = np.array([[0.0, 0.0, 10.0, 10.0], [20.0, 20.0, 30.0, 30.0]])
        self.assertEqual(box_iou(box, others).tolist(), [1.0, 0.0])

    def test_zero_union_is_zero(self) -> None:
        point = np.array([0.5, 0.5, 0.5, 0.5])
        self.assertEqual(box_iou(point, point[None, :]).tolist(), [0.0])


class TestNms(unittest.TestCase):
    def test_identical_boxes_of_different_classes_both_kept(self) -> None:
        boxes = np.array([[0, 0, 10, 10], [0, 0, 10, 10]], dtype=np.float64)
        keep = nms(boxes, np.array([0.9, 0.8]), np.array([59, 56]), NMSConfig(iou_threshold=0.5))
        self.assertEqual(keep.tolist(), [0, 1])

    def test_suppression_is_strictly_greater_than_threshold(self) -> None:
        # IoU is exactly 0.5.
        boxes = np.array([[0, 0, 1, 1], [0, 0, 1, 0.5]], dtype=np.float64)
        keep = nms(boxes, np.array([0.9, 0.8]), np.array([1, 1]), NMSConfig(iou_threshold=0.5))
        self.assertEqual(keep.tolist(), [0, 1])

        keep = nms(boxes, np.array([0.9, 0.8]), np.array([1, 1]), NMSConfig(iou_threshold=0.49))
        self.assertEqual(keep.tolist(), [0])

    def test_suppressed_box_does_not_suppress_others(self) -> None:
        boxes = np.array([[0, 0, 10, 10], [2, 0, 12, 10], [4, 0, 14, 10]], dtype=np.float64)
        keep = nms(boxes, np.array([0.9, 0.8, 0.7]), np.array([0, 0, 0]), NMSConfig(iou_threshold=0.5))
        self.assertEqual(keep.tolist(), [0, 2])

    def test_output_ordered_by_score_with_stable_ties(self) -> None:
        boxes = np.array([[0, 0, 1, 1], [10, 10, 11, 11], [20, 20, 21, 21], [30, 30, 31, 31]], dtype=np.float64)
        scores = np.array([0.5, 0.9, 0.5, 0.7])
        keep = nms(boxes, scores, np.zeros(4, dtype=np.int64), NMSConfig())
        self.assertEqual(keep.tolist(), [1, 3, 0, 2])

    def test_idempotent(self) -> None:
        rng = np.random.default_rng(3)
        xy = rng.uniform(0, 100, size=(60, 2))
        wh = rng.uniform(5, 40, size=(60, 2))
        boxes = np.concatenate([xy, xy + wh], axis=1)
        scores = rng.uniform(0, 1, size=60)
        class_ids = rng.integers(0, 3, size=60)
        cfg = NMSConfig(iou_threshold=0.4)

        keep = nms(boxes, scores, class_ids, cfg)
        again = nms(boxes[keep], scores[keep], class_ids[keep], cfg)
        self.assertEqual(again.tolist(), list(range(len(keep))))

    def test_max_detections(self) -> None:
        boxes = np.array([[i * 10, 0, i * 10 + 5, 5] for i in range(5)], dtype=np.float64)
        keep = nms(boxes, np.linspace(0.9, 0.5, 5), np.zeros(5), NMSConfig(max_detections=3))
        self.assertEqual(keep.tolist(), [0, 1, 2])

    def test_empty(self) -> None:
        keep = nms(np.zeros((0, 4)), np.zeros(0), np.zeros(0), NMSConfig())
        self.assertEqual(keep.shape, (0,))


if __name__ == "__main__":
    unittest.main()
