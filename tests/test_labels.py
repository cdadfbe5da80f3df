import tempfile
import unittest
from pathlib import Path

from detect_kit.labels import (
    COCO_LABELS,
    UNKNOWN_LABEL,
    get_class_name,
    is_relevant_for_inspection,
    load_class_names,
)


class TestCocoLabels(unittest.TestCase):
    def test_furniture_ids(self) -> None:
        self.assertEqual(len(COCO_LABELS), 80)
        self.assertEqual(get_class_name(59), "bed")
        self.assertEqual(get_class_name(57), "couch")
        self.assertEqual(get_class_name(56), "chair")
        self.assertEqual(get_class_name(60), "dining table")
        self.assertEqual(get_class_name(28), "suitcase")

    def test_unknown_id(self) -> None:
        self.assertEqual(get_class_name(80), UNKNOWN_LABEL)
        self.assertEqual(get_class_name(-1), UNKNOWN_LABEL)
        self.assertEqual(get_class_name(3, {3: "lamp"}), "lamp")

    def test_relevance(self) -> None:
        for class_id in (56, 57, 58, 59, 60):
            self.assertTrue(is_relevant_for_inspection(class_id))
        self.assertFalse(is_relevant_for_inspection(0))
        self.assertFalse(is_relevant_for_inspection(28))
        self.assertTrue(is_relevant_for_inspection(28, {28: "suitcase"}))


class TestLoadClassNames(unittest.TestCase):
    def test_reads_names_block_only(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "metadata.yaml"
            path.write_text(
                "\n".join(
                    [
                        "description: exported model",
                        "stride: 32",
                        "names:",
                        "  0: person",
                        "  # comment",
                        "  59: 'bed'",
                        '  60: "dining table"',
                        "imgsz:",
                        "- 640",
                        "- 640",
                    ]
                ),
                encoding="utf-8",
            )
            names = load_class_names(str(path))
        self.assertEqual(names, {0: "person", 59: "bed", 60: "dining table"})


if __name__ == "__main__":
    unittest.main()
