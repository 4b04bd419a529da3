"""
Configuration for Tennis Analyzer.
"""
import logging

logger = logging.getLogger(__name__)


# ── GPU / Device ──────────────────────────────────────────────────────────────
# Auto-selects CUDA if available, falls back to CPU.
def _resolve_device() -> str:
    try:
        import torch
        if torch.cuda.is_available():
            logger.debug("[Config] GPU detected: %s → using CUDA",
                         torch.cuda.get_device_name(0))
            return "cuda"
    except ImportError:
        pass
    logger.debug("[Config] No GPU / torch not found → using CPU")
    return "cpu"

DEVICE = _resolve_device()

# ── Detection model ───────────────────────────────────────────────────────────
DETECTION_MODEL    = "yolov8n.pt"       # COCO weights: "person" + "sports ball"
DETECTION_IMG_SIZE = 1280 if DEVICE == "cuda" else 640
DETECTION_IOU      = 0.45

# ── Frame sampling ────────────────────────────────────────────────────────────
SAMPLE_FPS      = 30.0      # nominal frame rate the stride is measured in
SAMPLE_STRIDE   = 5         # analyse every 5th nominal frame
SEEK_TIMEOUT_S  = 5.0       # None = wait for the seek forever
CLOSE_JOIN_TIMEOUT_S = 2.0   # wait for an in-flight decode before releasing

# ── Frame classification ──────────────────────────────────────────────────────
CONFIDENCE_THRESHOLD = 0.5
PLAYER_LABEL         = "person"
BALL_LABEL           = "sports ball"
MAX_PLAYERS          = 2    # singles

# Ball: small and roughly square
BALL_MAX_AREA_PX        = 2000
BALL_ASPECT_TOLERANCE   = 0.5    # |w-h| < tol * min(w, h)

# Court: large and wider than tall
COURT_MIN_AREA_PX       = 50000
COURT_MIN_ASPECT        = 1.5    # w > aspect * h

# ── Statistics ────────────────────────────────────────────────────────────────
SHOT_DISTANCE_PX = 50.0     # ball displacement between sightings = one shot
WINNER_RATIO     = 0.15
ERROR_RATIO      = 0.12

# ── Heatmaps ──────────────────────────────────────────────────────────────────
HEATMAP_GRID = (20, 20)     # (cols, rows) for coarse summaries
