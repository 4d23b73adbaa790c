"""Centre alignment snapping for dragged tables.

While a table is dragged its candidate centre is compared with the centre
of every other table. The x and y axes are searched independently for the
nearest centre; an axis within the snap threshold gets an offset that makes
the centres coincide, plus one guide line marking the aligned coordinate.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Sequence

from ..constants import GUIDE_LINE_EXTENT, SNAP_THRESHOLD
from ..entities import Table
from ..value_objects import AlignmentGuideLine, GuideAxis, Point2D

__all__ = ["SnapResult", "compute_snap", "guide_lines_changed"]


@dataclass(frozen=True)
class SnapResult:
    """Snap offsets and guide lines for one candidate position.

    Attributes:
        offset_x: World-space x correction; 0 when nothing is in range.
        offset_y: World-space y correction; 0 when nothing is in range.
        guide_lines: At most one line per axis.
    """

    offset_x: float = 0.0
    offset_y: float = 0.0
    guide_lines: tuple[AlignmentGuideLine, ...] = field(default_factory=tuple)

    @property
    def snapped(self) -> bool:
        """True if either axis snapped."""
        return bool(self.guide_lines)

    def apply(self, x: float, y: float) -> Point2D:
        """Snapped top-left position for a candidate top-left position."""
        return Point2D(x + self.offset_x, y + self.offset_y)


def compute_snap(
    dragged: Table,
    candidate_x: float,
    candidate_y: float,
    tables: Iterable[Table],
    threshold: float = SNAP_THRESHOLD,
) -> SnapResult:
    """Compute the alignment snap for a dragged table.

    Args:
        dragged: The table being dragged. Tables sharing its id are skipped.
        candidate_x: Candidate world-space left edge.
        candidate_y: Candidate world-space top edge.
        tables: All tables on the floor plan, in stable order.
        threshold: Centre distance below which an axis snaps.

    Returns:
        SnapResult with per-axis offsets and guide lines. Ties in distance go
        to the first table encountered.
    """
    center = dragged.center_at(candidate_x, candidate_y)

    best_dx = threshold
    best_dy = threshold
    target_x: float | None = None
    target_y: float | None = None

    for other in tables:
        if other.id == dragged.id:
            continue
        other_center = other.center

        dx = abs(center.x - other_center.x)
        if dx < best_dx:
            best_dx = dx
            target_x = other_center.x

        dy = abs(center.y - other_center.y)
        if dy < best_dy:
            best_dy = dy
            target_y = other_center.y

    offset_x = 0.0
    offset_y = 0.0
    guide_lines: list[AlignmentGuideLine] = []

    if target_y is not None:
        offset_y = target_y - center.y
        guide_lines.append(
            AlignmentGuideLine(
                axis=GuideAxis.HORIZONTAL,
                position=target_y,
                extent_min=-GUIDE_LINE_EXTENT,
                extent_max=GUIDE_LINE_EXTENT,
            )
        )
    if target_x is not None:
        offset_x = target_x - center.x
        guide_lines.append(
            AlignmentGuideLine(
                axis=GuideAxis.VERTICAL,
                position=target_x,
                extent_min=-GUIDE_LINE_EXTENT,
                extent_max=GUIDE_LINE_EXTENT,
            )
        )

    return SnapResult(offset_x, offset_y, tuple(guide_lines))


def guide_lines_changed(
    previous: Sequence[AlignmentGuideLine],
    current: Sequence[AlignmentGuideLine],
) -> bool:
    """Whether two guide line sets differ in axis or position."""
    if len(previous) != len(current):
        return True
    return any(
        old.axis != new.axis or old.position != new.position
        for old, new in zip(previous, current)
    )
