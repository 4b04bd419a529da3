"""
YOLO-based object detection.
"""
import logging
import numpy as np
from typing import List, Optional
from ultralytics import YOLO

from .base import DetectorAdapter
from ..models.detection import Detection
from .. import config

logger = logging.getLogger(__name__)


class YoloDetector(DetectorAdapter):
    """Ultralytics YOLO detector over the full COCO label set."""

    def __init__(
        self,
        model_name: str = config.DETECTION_MODEL,
        iou_threshold: float = config.DETECTION_IOU,
        img_size: int = config.DETECTION_IMG_SIZE,
        device: Optional[str] = config.DEVICE,
    ):
        """
        Args:
            model_name: YOLO weights name or path (e.g., 'yolov8n.pt')
            iou_threshold: IOU threshold for NMS
            img_size: Inference image size
            device: Device to run on ('cpu', 'cuda', or None for auto)
        """
        self.model_name = model_name
        self.iou_threshold = iou_threshold
        self.img_size = img_size
        self.device = device
        self.model: Optional[YOLO] = None

    def initialize(self) -> bool:
        if self.model is not None:
            return True
        logger.info("[Detector] Loading %s on %s", self.model_name, self.device)
        try:
            self.model = YOLO(self.model_name)
        except Exception as e:
            logger.error("[Detector] Failed to load %s: %s", self.model_name, e)
            return False
        logger.info("[Detector] Ready")
        return True

    def detect(self, image: np.ndarray) -> List[Detection]:
        if self.model is None:
            raise RuntimeError("Detector not initialized")

        # Near-zero floor; FrameClassifier applies the real threshold.
        results = self.model.predict(
            image,
            conf=0.01,
            iou=self.iou_threshold,
            imgsz=self.img_size,
            device=self.device,
            verbose=False,
        )
        return self._parse_results(results[0])

    def _parse_results(self, result) -> List[Detection]:
        """
        Parse a single YOLO result into Detection objects.
        """
        detections: List[Detection] = []

        if result.boxes is None or len(result.boxes) == 0:
            return detections

        boxes = result.boxes.xyxy.cpu().numpy()
        confidences = result.boxes.conf.cpu().numpy()
        class_ids = result.boxes.cls.cpu().numpy().astype(int)

        for bbox, conf, cls_id in zip(boxes, confidences, class_ids):
            x1, y1, x2, y2 = (float(v) for v in bbox)
            detections.append(Detection.from_xyxy(
                x1, y1, x2, y2,
                score=float(conf),
                label=self.model.names[int(cls_id)],
            ))

        return detections
