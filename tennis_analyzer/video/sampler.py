"""
Fixed-stride frame sampling over a seekable video source.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Generator, Iterator, Optional
import logging
import math
import numpy as np

from .source import VideoSource
from ..errors import SeekError
from .. import config

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SampledFrame:
    frame_number: int
    timestamp_s: float
    image: np.ndarray


def sample_times(
    duration_s: float,
    fps: float = config.SAMPLE_FPS,
    stride: int = config.SAMPLE_STRIDE,
) -> Iterator[float]:
    """
    Yield 0, S/F, 2S/F, ... while below duration_s.

    Times are i * S / F rather than a running sum so that long videos
    don't drift.
    """
    if fps <= 0:
        raise ValueError(f"fps must be positive, got {fps}")
    if stride < 1:
        raise ValueError(f"stride must be >= 1, got {stride}")
    if math.isinf(duration_s):
        raise ValueError("Cannot sample a video of unbounded duration")
    if not duration_s > 0:
        return

    step = stride / fps
    i = 0
    while True:
        t = i * step
        if t >= duration_s:
            return
        yield t
        i += 1


class FrameSampler:
    """
    Drives a VideoSource through time, one seek at a time.

    frames() can be consumed exactly once.
    """

    def __init__(
        self,
        source: VideoSource,
        fps: float = config.SAMPLE_FPS,
        stride: int = config.SAMPLE_STRIDE,
        seek_timeout_s: Optional[float] = config.SEEK_TIMEOUT_S,
        should_stop: Optional[Callable[[], bool]] = None,
    ):
        self.source = source
        self.fps = fps
        self.stride = stride
        self.seek_timeout_s = seek_timeout_s
        self.should_stop = should_stop
        self.skipped = 0
        self._started = False

    def __len__(self) -> int:
        return sum(1 for _ in sample_times(self.source.duration_s, self.fps, self.stride))

    def frames(self) -> Iterator[SampledFrame]:
        if self._started:
            raise RuntimeError("FrameSampler can only be iterated once")
        self._started = True
        return self._iter_frames()

    def _iter_frames(self) -> Generator[SampledFrame, None, None]:
        times = sample_times(self.source.duration_s, self.fps, self.stride)
        for fn, t in enumerate(times):
            if self.should_stop is not None and self.should_stop():
                logger.info("[Sampler] Stop requested before frame %d", fn)
                return
            try:
                self.source.seek(t, timeout=self.seek_timeout_s)
            except SeekError as e:
                self.skipped += 1
                logger.warning("[Sampler] Skipping frame %d: %s", fn, e)
                continue
            yield SampledFrame(frame_number=fn, timestamp_s=t,
                               image=self.source.read())
