"""
YOLO 猫检测器

Wraps a pretrained COCO model from ultralytics behind the ImageClassifier
contract. Frames must already be decoded (numpy HWC arrays); this module
does no decoding or network I/O.
"""

import logging
import time
from typing import Any, Optional

import numpy as np

from .classifier import ImageClassifier

# Ultralytics YOLO
try:
    from ultralytics import YOLO
    HAS_YOLO = True
except ImportError:
    HAS_YOLO = False

logger = logging.getLogger(__name__)

CAT_CLASS_NAME = "cat"


class YOLOCatClassifier(ImageClassifier):
    """
    YOLO 猫检测器

    - 只检测 COCO "cat" 类
    - 阈值以百分比传入 (0-100)，内部换算为 0-1
    """

    def __init__(
        self,
        model_name: str = "yolo11n.pt",
        device: str = "cpu",
        model: Optional[Any] = None,
    ):
        """
        Args:
            model_name: YOLO 模型名称
            device: 'cpu' 或 'cuda'
            model: 已加载的模型 (跳过加载)
        """
        if model is None:
            if not HAS_YOLO:
                raise RuntimeError("ultralytics not installed. Install: pip install home-sentry[vision]")
            logger.info("Loading YOLO model %s", model_name)
            model = YOLO(model_name)
            if device == "cuda":
                model.to("cuda")

        self.model = model
        self.model_name = model_name
        self.device = device

        # COCO 类别 {0: 'person', 15: 'cat', ...}
        self.class_names = self.model.names
        self.cat_class_ids = [
            class_id for class_id, class_name in self.class_names.items()
            if class_name == CAT_CLASS_NAME
        ]
        if not self.cat_class_ids:
            raise ValueError(f"Model {model_name} has no '{CAT_CLASS_NAME}' class")

        # 统计
        self.frame_count = 0
        self.total_inference_time = 0.0

    def contains_cat(self, image: np.ndarray, confidence_threshold: float) -> bool:
        conf = confidence_threshold / 100.0
        start_time = time.time()

        results = self.model(
            image,
            conf=conf,
            classes=self.cat_class_ids,
            verbose=False,
        )

        self.total_inference_time += time.time() - start_time
        self.frame_count += 1

        for result in results:
            boxes = result.boxes
            for i in range(len(boxes)):
                class_id = int(boxes.cls[i])
                confidence = float(boxes.conf[i])
                if class_id in self.cat_class_ids and confidence >= conf:
                    logger.debug("Cat detected (confidence %.2f)", confidence)
                    return True
        return False
