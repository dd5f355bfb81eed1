"""Classifier registry — every shape test is a standalone function registered via decorator.

Usage:
    @classifier(id="circle", kind=ShapeKind.CIRCLE, priority=2)
    def detect_circle(points: list[Point], config: RecognitionConfig) -> Detection | None:
        ...

Adding a new shape = creating one file in app/engine/classifiers with the decorator.
Priorities are evaluated ascending; the first classifier returning a Detection wins.
"""

from __future__ import annotations

import importlib
import logging
import pkgutil
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Optional

if TYPE_CHECKING:
    from app.engine.config import RecognitionConfig
    from app.engine.shapes import Detection, Point, ShapeKind

logger = logging.getLogger(__name__)

ClassifierFn = Callable[["list[Point]", "RecognitionConfig"], Optional["Detection"]]

_CLASSIFIER_PACKAGE = "app.engine.classifiers"


@dataclass
class ClassifierSpec:
    id: str
    kind: ShapeKind
    priority: int
    fn: ClassifierFn
    description: str = ""


class ClassifierRegistry:
    """Registry of shape classifiers, ordered by priority."""

    def __init__(self) -> None:
        self._classifiers: dict[str, ClassifierSpec] = {}

    def register(self, spec: ClassifierSpec) -> None:
        if spec.id in self._classifiers:
            raise ValueError(f"Duplicate classifier ID: {spec.id}")
        self._classifiers[spec.id] = spec
        logger.debug("Registered classifier %s (priority %d)", spec.id, spec.priority)

    def get(self, classifier_id: str) -> ClassifierSpec:
        return self._classifiers[classifier_id]

    def ordered(self) -> list[ClassifierSpec]:
        return sorted(self._classifiers.values(), key=lambda s: (s.priority, s.id))

    @property
    def count(self) -> int:
        return len(self._classifiers)


# Module-level singleton
_registry = ClassifierRegistry()


def get_registry() -> ClassifierRegistry:
    return _registry


def classifier(
    *,
    id: str,
    kind: ShapeKind,
    priority: int,
    description: str = "",
):
    """Decorator to register a classifier function."""

    def decorator(fn: ClassifierFn):
        _registry.register(
            ClassifierSpec(id=id, kind=kind, priority=priority, fn=fn, description=description)
        )
        return fn

    return decorator


def load_classifiers() -> ClassifierRegistry:
    """Import every classifier module so @classifier decorators fire.

    Safe to call repeatedly: modules are imported once.
    """
    package = importlib.import_module(_CLASSIFIER_PACKAGE)
    for _, module_name, _ in pkgutil.iter_modules(package.__path__):
        importlib.import_module(f"{_CLASSIFIER_PACKAGE}.{module_name}")
    return _registry
