import argparse
import json
import logging
from dataclasses import replace
from pathlib import Path
from typing import Optional, Sequence

import cv2

from detect_kit import (
    DetectorConfig,
    DetectorHost,
    ModelSlot,
    draw_detections,
    draw_points,
    image_from_bgr,
    load_detector_config,
)
from detect_kit.runtime import detect_objects
from Photo_Scan import PinPlacementEngine, Scenario, load_pin_limits


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Place inspection pins on a step photo (optionally YOLO-assisted).")
    parser.add_argument("--image", required=True, help="Path to the step photo.")
    parser.add_argument(
        "--step",
        default=Scenario.BED_OVERVIEW.value,
        help=f"Scenario key, one of: {', '.join(s.value for s in Scenario)} (unknown keys get corner pins).",
    )
    parser.add_argument("--config", default=None, help="Detector config JSON (see detect_kit.config).")
    parser.add_argument("--pin-limits", default=None, help="Pin limits JSON (see Photo_Scan.config).")
    parser.add_argument("--model", default=None, help="Override model path; also enables detection.")
    parser.add_argument("--metadata", default=None, help="Class metadata (names mapping) overriding COCO names.")
    parser.add_argument("--imgsz", type=int, default=None, help="Letterbox input size (e.g., 640).")
    parser.add_argument(
        "--onnx-providers",
        default=None,
        help='Comma-separated ORT providers, e.g. "CUDAExecutionProvider,CPUExecutionProvider".',
    )
    parser.add_argument("--conf", type=float, default=None, help="Confidence threshold override.")
    parser.add_argument("--iou", type=float, default=None, help="IoU threshold override for NMS.")
    parser.add_argument("--all-classes", action="store_true", help="Keep every COCO class, not only furniture.")
    parser.add_argument("--out", default=None, help="Write the pins/detections report as JSON here.")
    parser.add_argument("--vis", default=None, help="Write an image with detection boxes and pins here.")
    parser.add_argument("--verbose", action="store_true", help="Debug logging.")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    cfg = load_detector_config(Path(args.config)) if args.config else DetectorConfig()
    if args.model:
        cfg = replace(cfg, model_path=args.model, enabled=True)
    if args.metadata:
        cfg = replace(cfg, labels_path=args.metadata)
    if args.imgsz is not None:
        cfg = replace(cfg, input_size=args.imgsz)
    if args.onnx_providers:
        cfg = replace(cfg, onnx_providers=tuple(p.strip() for p in args.onnx_providers.split(",") if p.strip()))
    if args.conf is not None:
        cfg = replace(cfg, confidence_threshold=args.conf)
    if args.iou is not None:
        cfg = replace(cfg, iou_threshold=args.iou)
    if args.all_classes:
        cfg = replace(cfg, filter_relevant=False)

    img = cv2.imread(args.image)
    if img is None:
        raise FileNotFoundError(f"Could not read image at path: {args.image}")

    host = DetectorHost(ModelSlot(), cfg)
    engine = PinPlacementEngine(load_pin_limits(Path(args.pin_limits)) if args.pin_limits else None)

    detections = detect_objects(host, image_from_bgr(img))
    pins = engine.generate_pins(args.step, detections)

    if host.error:
        print(f"Detection unavailable: {host.error}")
    for det in detections:
        print(det.class_name, f"{det.confidence:.3f}", det.as_xyxy())
    for pin in pins:
        print(f"{pin.label}: ({pin.x:.3f}, {pin.y:.3f})")

    if args.out:
        report = {
            "image": args.image,
            "step": args.step,
            "detector_error": host.error,
            "detections": [
                {
                    "class_id": d.class_id,
                    "class_name": d.class_name,
                    "confidence": d.confidence,
                    "xyxy": list(d.as_xyxy()),
                }
                for d in detections
            ],
            "pins": [p.to_dict() for p in pins],
        }
        out_path = Path(args.out)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(json.dumps(report, indent=2), encoding="utf-8")
        print(f"Wrote report: {out_path}")

    if args.vis:
        vis = draw_detections(img, detections, show_score=True)
        vis = draw_points(vis, [(p.x, p.y, p.label) for p in pins])
        if not cv2.imwrite(args.vis, vis):
            raise RuntimeError(f"Failed to write output image: {args.vis}")
        print(f"Wrote visualization: {args.vis}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
