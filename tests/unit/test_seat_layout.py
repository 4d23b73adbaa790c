"""Unit tests for seat placement around tables.

Covers every shape's placement rule:
- Circle seats at equal angles from 12 o'clock
- Simple rectangular anchors for four or fewer seats
- 60/40 long/short split for larger rectangular tables
- Section-based bars and booths, with explicit and derived sections
"""

import math

import pytest

from floorplan.domain import SeatPosition, SeatSections, Side, TableShape
from floorplan.domain.constants import FIXED_SEAT_SPACING
from floorplan.domain.services import (
    EdgeSeats,
    compute_seat_positions,
    derive_sections,
    resolve_sections,
    seat_layout_for,
)
from floorplan.domain.value_objects import SeatEdge


def positions(layout) -> list[tuple[float, float]]:
    return [(pytest.approx(seat.x), pytest.approx(seat.y)) for seat in layout]


class TestCircleLayout:
    """Tests for circular tables."""

    def test_four_seats_start_at_top_and_go_clockwise(self) -> None:
        layout = compute_seat_positions(TableShape.CIRCLE, 4, 50, 50)

        assert positions(layout) == [(50, -24), (124, 50), (50, 124), (-24, 50)]

    def test_seat_count_matches(self) -> None:
        layout = compute_seat_positions(TableShape.CIRCLE, 7, 60, 60)
        assert len(layout) == 7
        assert len(list(layout)) == 7

    def test_zero_seats_is_empty(self) -> None:
        assert list(compute_seat_positions(TableShape.CIRCLE, 0, 50, 50)) == []

    def test_sections_are_ignored(self) -> None:
        plain = list(compute_seat_positions(TableShape.CIRCLE, 3, 50, 50))
        sectioned = list(
            compute_seat_positions(
                TableShape.CIRCLE, 3, 50, 50, sections=SeatSections(front=1)
            )
        )
        assert plain == sectioned

    def test_seat_radius_moves_seats_outward(self) -> None:
        layout = compute_seat_positions(TableShape.CIRCLE, 1, 50, 50, seat_radius=20)
        assert positions(layout) == [(50, -32)]


class TestRectangularLayout:
    """Tests for rectangular tables."""

    def test_two_seats_use_top_then_right(self) -> None:
        layout = compute_seat_positions(TableShape.RECTANGULAR, 2, 60, 40)

        # Anchors sit at the longer half-dimension plus clearance
        assert positions(layout) == [(60, -44), (144, 40)]

    def test_four_seats_one_per_side(self) -> None:
        layout = compute_seat_positions(TableShape.RECTANGULAR, 4, 60, 40)

        assert positions(layout) == [(60, -44), (144, 40), (60, 124), (-24, 40)]

    def test_six_seats_split_long_and_short_sides(self) -> None:
        layout = compute_seat_positions(TableShape.RECTANGULAR, 6, 64, 59)

        assert positions(layout) == [
            (46, -24),
            (82, -24),
            (152, 59),
            (46, 142),
            (82, 142),
            (-24, 59),
        ]

    @pytest.mark.parametrize(
        "seats, expected",
        [
            (5, (2, 1, 1, 1)),
            (6, (2, 1, 2, 1)),
            (7, (2, 1, 2, 2)),
            (10, (3, 2, 3, 2)),
        ],
    )
    def test_split_preserves_total(self, seats: int, expected: tuple[int, ...]) -> None:
        edges = resolve_sections(TableShape.RECTANGULAR, seats)

        assert [edge.side for edge in edges] == [Side.TOP, Side.RIGHT, Side.BOTTOM, Side.LEFT]
        assert tuple(edge.count for edge in edges) == expected
        assert sum(expected) == seats

    def test_sections_are_ignored(self) -> None:
        assert resolve_sections(
            TableShape.RECTANGULAR, 6, SeatSections(front=6)
        ) == resolve_sections(TableShape.RECTANGULAR, 6)

    def test_zero_seats_is_empty(self) -> None:
        assert len(compute_seat_positions(TableShape.RECTANGULAR, 0, 50, 50)) == 0


class TestSectionedLayouts:
    """Tests for bars and booths."""

    def test_bar_seats_line_the_front_edge(self) -> None:
        layout = compute_seat_positions(TableShape.BAR, 3, 100, 30)

        assert positions(layout) == [(64, 84), (100, 84), (136, 84)]

    def test_l_booth_fills_left_then_front(self) -> None:
        layout = compute_seat_positions(TableShape.L_BOOTH, 5, 50, 50)

        assert positions(layout) == [
            (-24, 14),
            (-24, 50),
            (-24, 86),
            (32, -24),
            (68, -24),
        ]

    def test_corner_booth_uses_left_and_back(self) -> None:
        edges = resolve_sections(TableShape.CORNER_BOOTH, 3)
        assert edges == (EdgeSeats(Side.LEFT, 2), EdgeSeats(Side.BOTTOM, 1))

    def test_explicit_sections_override_total(self) -> None:
        layout = compute_seat_positions(
            TableShape.BAR, 5, 100, 30, sections=SeatSections(front=2)
        )
        assert len(layout) == 2

    def test_explicit_zero_section_is_respected(self) -> None:
        edges = resolve_sections(
            TableShape.U_BOOTH, 6, SeatSections(left=2, front=0)
        )
        # Right is absent and falls back to the derived split
        assert [edge.count for edge in edges] == [2, 0, 2]

    def test_u_booth_inside_stays_empty(self) -> None:
        layout = compute_seat_positions(TableShape.U_BOOTH, 6, 60, 59)
        for seat in layout:
            inside_x = 0 < seat.x < 120
            inside_y = 0 < seat.y < 118
            assert not (inside_x and inside_y)


class TestDeriveSections:
    """Tests for splitting totals into named sections."""

    @pytest.mark.parametrize("seats", [0, 1, 2, 5, 7, 8, 12])
    def test_u_booth_split_preserves_total(self, seats: int) -> None:
        derived = derive_sections(TableShape.U_BOOTH, seats)
        assert sum(derived.values()) == seats

    def test_u_booth_remainder_goes_left_then_front(self) -> None:
        assert derive_sections(TableShape.U_BOOTH, 7) == {
            SeatEdge.LEFT: 3,
            SeatEdge.FRONT: 2,
            SeatEdge.RIGHT: 2,
        }
        assert derive_sections(TableShape.U_BOOTH, 8) == {
            SeatEdge.LEFT: 3,
            SeatEdge.FRONT: 3,
            SeatEdge.RIGHT: 2,
        }

    def test_l_booth_odd_seat_goes_left(self) -> None:
        assert derive_sections(TableShape.L_BOOTH, 5) == {
            SeatEdge.LEFT: 3,
            SeatEdge.FRONT: 2,
        }

    def test_unsectioned_shapes_derive_nothing(self) -> None:
        assert derive_sections(TableShape.CIRCLE, 6) == {}
        assert derive_sections(TableShape.RECTANGULAR, 6) == {}


class TestSeatLayoutObject:
    """Tests for the lazy layout container."""

    def test_layout_can_be_iterated_repeatedly(self) -> None:
        layout = compute_seat_positions(TableShape.RECTANGULAR, 8, 80, 60)
        assert list(layout) == list(layout)

    def test_positions_are_seat_positions(self) -> None:
        seat = next(iter(compute_seat_positions(TableShape.CIRCLE, 1, 50, 50)))
        assert isinstance(seat, SeatPosition)

    def test_seat_layout_for_uses_table_geometry(self, make_table) -> None:
        table = make_table(width=120, height=80, shape=TableShape.RECTANGULAR, seats=2)
        assert list(seat_layout_for(table)) == list(
            compute_seat_positions(TableShape.RECTANGULAR, 2, 60, 40)
        )


class TestLayoutProperties:
    """Properties that hold across shapes and seat counts."""

    @pytest.mark.parametrize("shape", list(TableShape))
    @pytest.mark.parametrize("seats", range(0, 13))
    def test_every_seat_is_placed(self, shape: TableShape, seats: int) -> None:
        layout = compute_seat_positions(shape, seats, 60, 40)
        assert len(list(layout)) == seats

    @pytest.mark.parametrize("seats", range(1, 13))
    def test_circle_seats_are_evenly_spaced(self, seats: int) -> None:
        center = 70
        layout = list(compute_seat_positions(TableShape.CIRCLE, seats, center, center))

        radii = [math.hypot(seat.x - center, seat.y - center) for seat in layout]
        assert radii == pytest.approx([radii[0]] * seats)

        angles = [math.atan2(seat.y - center, seat.x - center) for seat in layout]
        for first, second in zip(angles, angles[1:]):
            step = (second - first) % (2 * math.pi)
            assert step == pytest.approx(2 * math.pi / seats)

    @pytest.mark.parametrize("seats", range(2, 10))
    def test_bar_seats_are_symmetric_and_evenly_spaced(self, seats: int) -> None:
        half_width = 150
        layout = list(compute_seat_positions(TableShape.BAR, seats, half_width, 30))

        assert len({seat.y for seat in layout}) == 1
        xs = sorted(seat.x for seat in layout)
        for left, right in zip(xs, reversed(xs)):
            assert left + right == pytest.approx(2 * half_width)
        for first, second in zip(xs, xs[1:]):
            assert second - first == pytest.approx(FIXED_SEAT_SPACING)
