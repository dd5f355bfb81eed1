"""Recognition configuration — thresholds for every shape test and the emitter."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class RecognitionConfig:
    """Thresholds are in canvas units unless noted."""

    # Strokes shorter than this skip recognition and stay raw curves
    min_stroke_points: int = 3

    # RDP tolerance applied before any shape test
    simplify_tolerance: float = 8.0
    # RDP tolerance for display-only smoothing
    smooth_tolerance: float = 5.0

    # Line: max interior deviation from the end-to-end chord
    line_max_deviation: float = 15.0

    # Circle
    circle_min_points: int = 8
    circle_radius_variance_ratio: float = 0.2  # RMS deviation / mean radius
    circle_closure_ratio: float = 0.3  # start-end gap / mean radius

    # Rectangle
    rect_min_points: int = 8
    rect_distance_ratio: float = 0.1  # avg distance / min(width, height)
    rect_min_side: float = 20.0
    rect_confidence_scale: float = 20.0

    # Triangle
    triangle_min_points: int = 6
    triangle_angle_tolerance: float = 20.0  # degrees off 180
    triangle_min_side: float = 20.0

    # Fixed confidences
    short_stroke_confidence: float = 0.5
    line_confidence: float = 0.9
    triangle_confidence: float = 0.8
    curve_confidence: float = 0.7
    min_confidence: float = 0.6

    # Emitter auto-trim
    trim_padding: float = 10.0
    min_viewport: float = 100.0
