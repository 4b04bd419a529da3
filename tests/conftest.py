"""
Pytest fixtures for tennis analyzer tests.
"""
import cv2
import numpy as np
import pytest
import tempfile
from pathlib import Path

import sys
sys.path.insert(0, str(Path(__file__).parent.parent))

from tennis_analyzer.detection.base import DetectorAdapter
from tennis_analyzer.errors import SeekError, SeekTimeoutError
from tennis_analyzer.models import BoundingBox, Detection, FrameAnalysis
from tennis_analyzer.video.source import VideoSource


def det(x1, y1, x2, y2, score=0.9, label="person"):
    return Detection(bbox=BoundingBox(x1, y1, x2, y2), score=score, label=label)


def ball_at(cx, cy, score=0.9, label="sports ball"):
    """A small square ball detection centred on (cx, cy)."""
    return det(cx - 2, cy - 2, cx + 2, cy + 2, score=score, label=label)


def frame(n, ball=None, players=(), t=None):
    return FrameAnalysis(
        frame_number=n,
        timestamp_s=n / 6 if t is None else t,
        players=tuple(players),
        ball=ball,
    )


class ScriptedDetector(DetectorAdapter):
    """
    Test double returning a scripted detection list per detect() call.

    Script entries that are exceptions are raised instead of returned.
    Once the script runs out, every further call returns [].
    """

    def __init__(self, script=None, init_ok=True, init_raises=None):
        self.script = list(script or [])
        self.init_ok = init_ok
        self.init_raises = init_raises
        self.init_calls = 0
        self.detect_calls = 0
        self.images = []

    def initialize(self):
        self.init_calls += 1
        if self.init_raises is not None:
            raise self.init_raises
        return self.init_ok

    def detect(self, image):
        self.detect_calls += 1
        self.images.append(image.copy())
        if not self.script:
            return []
        step = self.script.pop(0)
        if isinstance(step, Exception):
            raise step
        return list(step)


class FakeVideoSource(VideoSource):
    """
    In-memory video. Each frame is filled with its seek index so tests
    can tell which frame reached the detector.
    """

    def __init__(self, width=320, height=240, duration_s=2.0, hang_at=(), fail_at=()):
        self._width = width
        self._height = height
        self._duration = duration_s
        self.hang_at = set(hang_at)
        self.fail_at = set(fail_at)
        self.seeks = []
        self._current = None

    @property
    def duration_s(self):
        return self._duration

    @property
    def width(self):
        return self._width

    @property
    def height(self):
        return self._height

    @property
    def fps(self):
        return 30.0

    def seek(self, t, timeout=None):
        self.seeks.append(t)
        if len(self.seeks) - 1 in self.hang_at:
            raise SeekTimeoutError(f"Seek to t={t:.3f}s timed out after {timeout}s")
        if len(self.seeks) - 1 in self.fail_at:
            raise SeekError(f"No frame decoded at t={t:.3f}s")
        self._current = len(self.seeks) - 1

    def read(self):
        return np.full((self._height, self._width, 3), self._current, dtype=np.uint8)


@pytest.fixture
def scripted_detector():
    return ScriptedDetector()


@pytest.fixture
def fake_source():
    # 2 s at 30 fps, stride 15 → samples at 0.0, 0.5, 1.0, 1.5
    return FakeVideoSource(duration_s=2.0)


@pytest.fixture
def sample_bbox():
    return BoundingBox(x1=100, y1=100, x2=200, y2=300)


@pytest.fixture
def temp_video_file():
    """Create a temporary 1 s, 640x480 video file."""
    with tempfile.NamedTemporaryFile(suffix='.mp4', delete=False) as f:
        temp_path = Path(f.name)

    fourcc = cv2.VideoWriter_fourcc(*'mp4v')
    writer = cv2.VideoWriter(str(temp_path), fourcc, 30.0, (640, 480))
    if not writer.isOpened():
        temp_path.unlink()
        pytest.skip("mp4v encoder not available")

    for i in range(30):
        img = np.zeros((480, 640, 3), dtype=np.uint8)
        x = 100 + i * 10
        cv2.rectangle(img, (x, 100), (x + 80, 300), (0, 255, 0), -1)
        writer.write(img)

    writer.release()

    yield temp_path

    if temp_path.exists():
        temp_path.unlink()
