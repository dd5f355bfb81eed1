"""sketchshape recognition engine."""

from app.engine.shapes import Bounds, Point, RecognizedShape, ShapeKind, ShapeStyle
from app.engine.config import RecognitionConfig
from app.engine.registry import classifier, get_registry, load_classifiers
from app.engine.recognizer import Recognizer, create_recognizer, describe
from app.engine.scene import Scene

__all__ = [
    "Bounds",
    "Point",
    "RecognizedShape",
    "ShapeKind",
    "ShapeStyle",
    "RecognitionConfig",
    "classifier",
    "get_registry",
    "load_classifiers",
    "Recognizer",
    "create_recognizer",
    "describe",
    "Scene",
]
