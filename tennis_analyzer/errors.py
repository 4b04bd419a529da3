class AnalyzerError(Exception):
    """Base error for known analysis failures."""


class DetectorUnavailableError(AnalyzerError):
    """Raised when the detector backend cannot be initialised."""


class InvalidVideoError(AnalyzerError):
    """Raised when a video source or canvas cannot be used for sampling."""


class SeekError(AnalyzerError):
    """Raised when a video source cannot deliver the frame at a position."""


class SeekTimeoutError(SeekError):
    """Raised when a video source does not reach the requested position in time."""
