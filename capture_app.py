"""
Launcher for the guided face capture.

    python capture_app.py                 # PyQt6 window
    python capture_app.py --ui opencv     # plain OpenCV window
"""
from __future__ import annotations
import argparse
from pathlib import Path

from app.config import AppConfig


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Guided five-pose face capture")
    parser.add_argument("--ui", choices=["qt", "opencv"], default="qt")
    parser.add_argument("--model", type=Path, default=AppConfig.model_path,
                        help="path to face_landmarker.task")
    parser.add_argument("--camera", type=int, default=0)
    parser.add_argument("--log-level", default="INFO")
    return parser.parse_args()


def main() -> int:
    args = parse_args()
    config = AppConfig(
        model_path=args.model,
        camera_device=args.camera,
        log_level=args.log_level,
    )

    if args.ui == "opencv":
        from app.main import run
        run(config)
        return 0

    from app.window_app import run
    return run(config)


if __name__ == "__main__":
    raise SystemExit(main())
