"""Home Sentry Image Classification

YOLOCatClassifier lives in ``home_sentry.image.yolo_classifier`` and
needs the ``vision`` extra.
"""

from .classifier import ImageClassifier, FakeImageClassifier

__all__ = [
    'ImageClassifier',
    'FakeImageClassifier',
]
