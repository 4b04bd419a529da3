"""
Detector-output data models.
"""
from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class BoundingBox:
    x1: float
    y1: float
    x2: float
    y2: float

    @property
    def width(self) -> float:
        return self.x2 - self.x1

    @property
    def height(self) -> float:
        return self.y2 - self.y1

    @property
    def area(self) -> float:
        return self.width * self.height

    @property
    def center(self) -> Tuple[float, float]:
        return ((self.x1 + self.x2) / 2, (self.y1 + self.y2) / 2)

    def to_tuple(self) -> Tuple[float, float, float, float]:
        return (self.x1, self.y1, self.x2, self.y2)


@dataclass(frozen=True)
class Detection:
    """
    A single detector output.

    bbox is in pixel coordinates of the frame passed to the detector;
    label is whatever category name the backend reports.
    """
    bbox: BoundingBox
    score: float
    label: str

    @classmethod
    def from_xyxy(cls, x1: float, y1: float, x2: float, y2: float,
                  score: float, label: str) -> "Detection":
        return cls(bbox=BoundingBox(x1, y1, x2, y2), score=score, label=label)

    def to_dict(self) -> dict:
        cx, cy = self.bbox.center
        return {
            "label": self.label,
            "bbox": [round(v, 1) for v in self.bbox.to_tuple()],
            "center": [round(cx, 1), round(cy, 1)],
            "score": round(self.score, 3),
        }
