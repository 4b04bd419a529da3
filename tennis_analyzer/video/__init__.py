from .source  import VideoSource, OpenCVVideoSource
from .canvas  import FrameCanvas
from .sampler import FrameSampler, SampledFrame, sample_times

__all__ = [
    "VideoSource", "OpenCVVideoSource", "FrameCanvas",
    "FrameSampler", "SampledFrame", "sample_times",
]
