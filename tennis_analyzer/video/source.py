"""
Video sources with a single seekable playback position.
"""
from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Optional
import logging
import threading
import cv2
import numpy as np

from ..errors import InvalidVideoError, SeekError, SeekTimeoutError
from ..models.frame import VideoMetadata
from .. import config

logger = logging.getLogger(__name__)


class VideoSource(ABC):
    """
    A video that can be positioned in time and read one frame at a time.

    seek() blocks until the frame at the new position is ready; read()
    returns that frame. There is one playback position, so callers must
    not seek concurrently.
    """

    @property
    @abstractmethod
    def duration_s(self) -> float: ...

    @property
    @abstractmethod
    def width(self) -> int: ...

    @property
    @abstractmethod
    def height(self) -> int: ...

    @property
    def fps(self) -> float:
        return 0.0

    @property
    def path(self) -> str:
        return ""

    @abstractmethod
    def seek(self, t: float, timeout: Optional[float] = None) -> None:
        """Move to time t (seconds). Raises SeekError (SeekTimeoutError on expiry)."""

    @abstractmethod
    def read(self) -> np.ndarray:
        """Frame at the current position."""

    @property
    def metadata(self) -> VideoMetadata:
        return VideoMetadata(
            width=self.width, height=self.height, fps=self.fps,
            duration_s=self.duration_s, path=self.path,
        )


class OpenCVVideoSource(VideoSource):
    """Wraps OpenCV VideoCapture; use as a context manager."""

    def __init__(self, path: str):
        self._path = path
        self._cap: Optional[cv2.VideoCapture] = None
        self._frame: Optional[np.ndarray] = None
        self._worker: Optional[threading.Thread] = None
        self._width = 0
        self._height = 0
        self._fps = 0.0
        self._duration = 0.0

    def __enter__(self) -> "OpenCVVideoSource":
        self.open()
        return self

    def __exit__(self, *_) -> None:
        self.close()

    def open(self) -> None:
        self.close()
        self._cap = cv2.VideoCapture(self._path)
        if not self._cap.isOpened():
            raise InvalidVideoError(f"Cannot open video: {self._path}")
        cap = self._cap
        self._width  = int(cap.get(cv2.CAP_PROP_FRAME_WIDTH))
        self._height = int(cap.get(cv2.CAP_PROP_FRAME_HEIGHT))
        self._fps    = cap.get(cv2.CAP_PROP_FPS) or 30.0
        n            = int(cap.get(cv2.CAP_PROP_FRAME_COUNT))
        self._duration = n / self._fps if n > 0 else 0.0
        logger.debug("[Video] Opened %s: %dx%d @ %.2f fps, %.2f s",
                     self._path, self._width, self._height,
                     self._fps, self._duration)

    def close(self) -> None:
        worker, self._worker = self._worker, None
        cap, self._cap = self._cap, None
        self._frame = None
        if worker is not None and worker.is_alive():
            worker.join(config.CLOSE_JOIN_TIMEOUT_S)
            if worker.is_alive():
                # Released by its own destructor once the decode returns.
                logger.warning("[Video] Seek still running on close; "
                               "not releasing capture under it")
                return
        if cap is not None:
            cap.release()

    @property
    def duration_s(self) -> float:
        return self._duration

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def fps(self) -> float:
        return self._fps

    @property
    def path(self) -> str:
        return self._path

    def seek(self, t: float, timeout: Optional[float] = None) -> None:
        cap = self._cap
        if cap is None:
            raise RuntimeError("OpenCVVideoSource not opened")
        # A decode that outlived its timeout still owns the capture.
        if self._worker is not None and self._worker.is_alive():
            raise SeekTimeoutError(f"Previous seek still pending at t={t:.3f}s")

        ready = threading.Event()
        grabbed: dict = {"frame": None, "error": None}

        def _grab() -> None:
            try:
                cap.set(cv2.CAP_PROP_POS_MSEC, t * 1000.0)
                ok, frame = cap.read()
                if ok:
                    grabbed["frame"] = frame
            except Exception as e:
                grabbed["error"] = e
            finally:
                ready.set()

        self._frame = None
        self._worker = threading.Thread(target=_grab, daemon=True)
        self._worker.start()
        if not ready.wait(timeout):
            raise SeekTimeoutError(f"Seek to t={t:.3f}s timed out after {timeout}s")
        if grabbed["error"] is not None:
            raise SeekError(
                f"Decoding failed at t={t:.3f}s: {grabbed['error']}"
            ) from grabbed["error"]
        if grabbed["frame"] is None:
            raise SeekError(f"No frame decoded at t={t:.3f}s")
        self._frame = grabbed["frame"]

    def read(self) -> np.ndarray:
        if self._frame is None:
            raise RuntimeError("No frame ready; seek() first")
        return self._frame
