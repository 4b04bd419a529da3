"""
Main pipeline – samples a video, detects and classifies each frame, then
derives heatmaps and statistics from the full run.

Detector start-up policy:
  - default (degraded): if the detector fails to initialise the run
    still completes, with every frame recorded as empty. Heatmaps come
    out all-zero and stats report zero shots.
  - strict=True: initialisation failure raises DetectorUnavailableError
    before any frame is sampled.

A detector error on a single frame never aborts the run; that frame is
logged and recorded with no detections.
"""
from __future__ import annotations
from typing import Callable, List, Optional
import logging
import numpy as np
from tqdm import tqdm

from .analysis      import FrameClassifier
from .detection     import DetectorAdapter
from .errors        import DetectorUnavailableError, InvalidVideoError
from .models.frame  import AnalysisResult, FrameAnalysis
from .models.stats  import HeatmapKind
from .stats         import HeatmapAggregator, StatsEstimator
from .video         import FrameCanvas, FrameSampler, VideoSource
from . import config

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[float], None]
FrameCallback    = Callable[[FrameAnalysis], None]


class Pipeline:
    """Frame-by-frame tennis video analysis."""

    def __init__(
        self,
        detector:       DetectorAdapter,
        classifier:     Optional[FrameClassifier] = None,
        estimator:      Optional[StatsEstimator]  = None,
        fps:            float = config.SAMPLE_FPS,
        stride:         int   = config.SAMPLE_STRIDE,
        seek_timeout_s: Optional[float] = config.SEEK_TIMEOUT_S,
        strict:         bool  = False,
        show_progress:  bool  = False,
    ):
        self.detector       = detector
        self.classifier     = classifier or FrameClassifier()
        self.estimator      = estimator or StatsEstimator()
        self.fps            = fps
        self.stride         = stride
        self.seek_timeout_s = seek_timeout_s
        self.strict         = strict
        self.show_progress  = show_progress

        # None = not attempted yet
        self._detector_ready: Optional[bool] = None
        self._init_error: Optional[Exception] = None

    # ── Detector ──────────────────────────────────────────────────────────────

    @property
    def detector_available(self) -> bool:
        return bool(self._detector_ready)

    def ensure_detector(self) -> bool:
        """Initialise the detector once; later calls return the cached outcome."""
        if self._detector_ready is not None:
            if not self._detector_ready and self.strict:
                raise DetectorUnavailableError(
                    "Detector failed to initialise") from self._init_error
            return self._detector_ready

        try:
            ok = bool(self.detector.initialize())
        except Exception as e:
            logger.error("[Pipeline] Detector initialisation raised: %s", e)
            self._init_error = e
            ok = False
        self._detector_ready = ok

        if not ok:
            if self.strict:
                raise DetectorUnavailableError(
                    "Detector failed to initialise") from self._init_error
            logger.warning("[Pipeline] Detector unavailable → continuing with "
                           "empty detections for every frame")
        return ok

    # ── Per-frame processing ──────────────────────────────────────────────────

    def process_frame(
        self,
        image: np.ndarray,
        frame_number: int,
        timestamp_s: float,
    ) -> FrameAnalysis:
        if not self._detector_ready:
            return FrameAnalysis.empty(frame_number, timestamp_s)
        try:
            detections = self.detector.detect(image)
        except Exception as e:
            logger.warning("[Pipeline] Detection failed on frame %d (t=%.3fs): %s",
                           frame_number, timestamp_s, e)
            return FrameAnalysis.empty(frame_number, timestamp_s)
        return self.classifier.classify(detections, frame_number, timestamp_s)

    # ── Video ─────────────────────────────────────────────────────────────────

    def process_video(
        self,
        source:      VideoSource,
        canvas:      Optional[FrameCanvas],
        on_progress: Optional[ProgressCallback] = None,
        on_frame:    Optional[FrameCallback]    = None,
        should_stop: Optional[Callable[[], bool]] = None,
    ) -> List[FrameAnalysis]:
        """
        Sample the whole video and return one FrameAnalysis per sampled frame.

        Args:
            source:      Seekable video.
            canvas:      Raster buffer each frame is drawn into before detection.
                         Resized to the video's native resolution.
            on_progress: Called after each frame with percent done (0-100).
            on_frame:    Called after each frame with its analysis.
            should_stop: Polled before each seek; return True to stop early.
        """
        if canvas is None:
            raise InvalidVideoError("No canvas to draw frames into")
        if source.width <= 0 or source.height <= 0:
            raise InvalidVideoError(
                f"Invalid video dimensions {source.width}x{source.height}"
            )
        canvas.resize(source.width, source.height)

        self.ensure_detector()

        duration = source.duration_s
        sampler = FrameSampler(
            source,
            fps=self.fps,
            stride=self.stride,
            seek_timeout_s=self.seek_timeout_s,
            should_stop=should_stop,
        )
        frames_iter = sampler.frames()
        if self.show_progress:
            frames_iter = tqdm(frames_iter, total=len(sampler),
                               desc="Analysing", unit="frames")

        results: List[FrameAnalysis] = []
        for sample in frames_iter:
            image = canvas.draw(sample.image)
            analysis = self.process_frame(image, sample.frame_number, sample.timestamp_s)
            results.append(analysis)

            if on_frame:
                on_frame(analysis)
            if on_progress:
                on_progress(sample.timestamp_s / duration * 100.0)

        logger.info("[Pipeline] Analysed %d frames (%d skipped)",
                    len(results), sampler.skipped)
        return results

    def analyze(
        self,
        source:      VideoSource,
        canvas:      Optional[FrameCanvas] = None,
        on_progress: Optional[ProgressCallback] = None,
        on_frame:    Optional[FrameCallback]    = None,
        should_stop: Optional[Callable[[], bool]] = None,
    ) -> AnalysisResult:
        """process_video() followed by heatmaps and stats at native resolution."""
        canvas = canvas if canvas is not None else FrameCanvas()
        frames = self.process_video(source, canvas, on_progress, on_frame, should_stop)

        heatmaps = HeatmapAggregator(source.width, source.height).update_all(frames)
        return AnalysisResult(
            metadata=source.metadata,
            frames=frames,
            player_heatmap=heatmaps.heatmap(HeatmapKind.PLAYERS),
            ball_heatmap=heatmaps.heatmap(HeatmapKind.BALL),
            stats=self.estimator.calculate(frames),
            detector_available=self.detector_available,
        )
