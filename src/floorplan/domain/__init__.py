"""Domain layer - floor plan geometry and interaction logic."""

from .entities import Table
from .value_objects import (
    AlignmentGuideLine,
    ContainerRect,
    EditorSettings,
    GuideAxis,
    Point2D,
    SeatEdge,
    SeatPosition,
    SeatSections,
    Side,
    TableShape,
    TableSize,
    TableStatus,
)

__all__ = [
    "AlignmentGuideLine",
    "ContainerRect",
    "EditorSettings",
    "GuideAxis",
    "Point2D",
    "SeatEdge",
    "SeatPosition",
    "SeatSections",
    "Side",
    "Table",
    "TableShape",
    "TableSize",
    "TableStatus",
]
