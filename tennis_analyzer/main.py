"""
CLI entry point for tennis analyzer.
"""
import argparse
import json
import logging
import sys
from pathlib import Path

from .detection import YoloDetector
from .analysis import FrameClassifier
from .errors import AnalyzerError
from .pipeline import Pipeline
from .video import OpenCVVideoSource
from . import config


def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="tennis-analyzer",
        description="Player/ball heatmaps and shot statistics from tennis video",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )

    parser.add_argument(
        "--input", "-i",
        required=True,
        help="Path to input video file"
    )

    parser.add_argument(
        "--model",
        default=config.DETECTION_MODEL,
        help="YOLO weights used for detection"
    )

    parser.add_argument(
        "--fps",
        type=float,
        default=config.SAMPLE_FPS,
        help="Nominal frame rate the stride is measured in"
    )

    parser.add_argument(
        "--stride", "-s",
        type=int,
        default=config.SAMPLE_STRIDE,
        help="Analyse every N-th nominal frame"
    )

    parser.add_argument(
        "--conf",
        type=float,
        default=config.CONFIDENCE_THRESHOLD,
        help="Minimum detection confidence"
    )

    parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail if the detector cannot be loaded instead of analysing with no detections"
    )

    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the full result as JSON instead of a summary"
    )

    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Suppress progress bar and info logging"
    )
    verbosity.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Debug logging"
    )

    return parser.parse_args(argv)


def _configure_logging(args) -> None:
    level = logging.INFO
    if args.quiet:
        level = logging.WARNING
    elif args.verbose:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def _print_summary(result) -> None:
    stats = result.stats
    print("\n--- Analysis Complete ---")
    print(f"Frames analysed: {stats.frames_analyzed}")
    if not result.detector_available:
        print("Detector unavailable: results contain no detections")
    print(f"Shots:   {stats.shots}")
    print(f"Winners: {stats.winners}")
    print(f"Errors:  {stats.errors}")
    print(f"Ball detections:   {stats.ball_detections}")
    print(f"Player detections: {stats.player_detections} "
          f"({stats.average_players_per_frame:.2f} per frame)")
    for hm in (result.player_heatmap, result.ball_heatmap):
        peak = hm.peak()
        where = f"peak at {peak}" if peak else "empty"
        print(f"Heatmap [{hm.kind.value}]: {hm.total} hits, {where}")


def main(argv=None):
    """Main entry point."""
    args = parse_args(argv)
    _configure_logging(args)

    input_path = Path(args.input)
    if not input_path.exists():
        print(f"Error: Input file not found: {args.input}")
        sys.exit(1)

    try:
        pipeline = Pipeline(
            detector=YoloDetector(model_name=args.model),
            classifier=FrameClassifier(confidence_threshold=args.conf),
            fps=args.fps,
            stride=args.stride,
            strict=args.strict,
            show_progress=not args.quiet,
        )
        with OpenCVVideoSource(str(input_path)) as source:
            result = pipeline.analyze(source)
    except KeyboardInterrupt:
        print("\nAnalysis interrupted by user.")
        sys.exit(0)
    except (AnalyzerError, ValueError) as e:
        print(f"Error: {e}")
        sys.exit(1)

    if args.json:
        print(json.dumps(result.to_dict(), indent=2))
    else:
        _print_summary(result)


if __name__ == "__main__":
    main()
