"""
Image classifier interface

The security service only needs one capability from an image backend:
given an image and a confidence threshold (percent), report whether a
cat is present.
"""

import logging
import random
from abc import ABC, abstractmethod
from typing import Any, Optional

logger = logging.getLogger(__name__)


class ImageClassifier(ABC):
    """Cat presence classifier."""

    @abstractmethod
    def contains_cat(self, image: Any, confidence_threshold: float) -> bool:
        """
        Args:
            image: Decoded camera frame
            confidence_threshold: Minimum confidence, 0-100

        Returns:
            True if a cat is detected at or above the threshold
        """
        pass


class FakeImageClassifier(ImageClassifier):
    """Random-outcome classifier for demos without a model."""

    def __init__(self, seed: Optional[int] = None):
        self._rng = random.Random(seed)

    def contains_cat(self, image: Any, confidence_threshold: float) -> bool:
        result = self._rng.random() > 0.5
        logger.debug("Fake classifier result: %s", result)
        return result
