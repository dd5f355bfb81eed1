"""Scene — append-only, ordered collection of recognized shapes.

Insertion order is paint order: later shapes are drawn on top.
"""

from __future__ import annotations

from collections.abc import Iterator

from app.engine.shapes import RecognizedShape


class Scene:
    def __init__(self) -> None:
        self._shapes: list[RecognizedShape] = []

    def append(self, shape: RecognizedShape) -> None:
        self._shapes.append(shape)

    def clear(self) -> None:
        self._shapes = []

    def snapshot(self) -> tuple[RecognizedShape, ...]:
        """Read-only ordered view for bounds and emission."""
        return tuple(self._shapes)

    def __len__(self) -> int:
        return len(self._shapes)

    def __iter__(self) -> Iterator[RecognizedShape]:
        return iter(self.snapshot())

    def __bool__(self) -> bool:
        return bool(self._shapes)
