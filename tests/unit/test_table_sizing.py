"""Unit tests for table footprint sizing."""

import pytest

from floorplan.domain import SeatSections, TableShape, TableSize
from floorplan.domain.services import calculate_table_size, min_edge_length


class TestMinEdgeLength:
    """Tests for the per-edge length rule."""

    @pytest.mark.parametrize(
        "seats, minimum, expected",
        [(0, 40.0, 40.0), (1, 30.0, 30.0), (2, 30.0, 36.0), (5, 40.0, 144.0)],
    )
    def test_min_edge_length(self, seats: int, minimum: float, expected: float) -> None:
        assert min_edge_length(seats, minimum) == expected


class TestCalculateTableSize:
    """Tests for shape-specific sizing."""

    @pytest.mark.parametrize(
        "shape, seats, expected",
        [
            (TableShape.RECTANGULAR, 0, TableSize(118, 118)),
            (TableShape.RECTANGULAR, 4, TableSize(118, 118)),
            (TableShape.RECTANGULAR, 6, TableSize(128, 118)),
            (TableShape.RECTANGULAR, 10, TableSize(140, 118)),
            (TableShape.CIRCLE, 2, TableSize(116, 116)),
            (TableShape.CIRCLE, 20, TableSize(188, 188)),
            (TableShape.BAR, 1, TableSize(98, 98)),
            (TableShape.BAR, 4, TableSize(176, 98)),
            (TableShape.L_BOOTH, 0, TableSize(108, 108)),
            (TableShape.L_BOOTH, 4, TableSize(108, 108)),
            (TableShape.U_BOOTH, 6, TableSize(120, 118)),
            (TableShape.U_BOOTH, 9, TableSize(140, 140)),
            (TableShape.CORNER_BOOTH, 2, TableSize(108, 108)),
            (TableShape.CORNER_BOOTH, 4, TableSize(176, 176)),
        ],
    )
    def test_size_from_seats(
        self, shape: TableShape, seats: int, expected: TableSize
    ) -> None:
        assert calculate_table_size(seats, shape) == expected

    def test_bar_front_section_overrides_total(self) -> None:
        size = calculate_table_size(6, TableShape.BAR, SeatSections(front=2))
        assert size == TableSize(104, 98)

    def test_circle_is_square(self) -> None:
        size = calculate_table_size(9, TableShape.CIRCLE)
        assert size.width == size.height

    def test_more_seats_never_shrink_a_table(self) -> None:
        for shape in TableShape:
            sizes = [calculate_table_size(n, shape) for n in range(0, 16)]
            for smaller, larger in zip(sizes, sizes[1:]):
                assert larger.width >= smaller.width
                assert larger.height >= smaller.height
