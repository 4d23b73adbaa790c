"""Unit tests for the Table entity."""

import pytest

from floorplan.domain import Point2D, Table, TableShape


class TestTable:
    """Tests for Table geometry."""

    def test_center(self, make_table) -> None:
        table = make_table(x=10, y=20, width=100, height=60)
        assert table.center == Point2D(60, 50)

    def test_center_at_ignores_current_position(self, make_table) -> None:
        table = make_table(x=500, y=500, width=100, height=60)
        assert table.center_at(0, 0) == Point2D(50, 30)

    def test_moved_to_keeps_everything_else(self, make_table) -> None:
        table = make_table(shape=TableShape.CIRCLE, seats=2, name="Round")
        moved = table.moved_to(40, 80)

        assert (moved.x, moved.y) == (40, 80)
        assert moved.width == table.width
        assert moved.name == "Round"
        assert (table.x, table.y) == (0, 0)

    @pytest.mark.parametrize("width,height", [(0, 10), (10, 0), (-5, 10)])
    def test_rejects_non_positive_size(self, make_table, width: float, height: float) -> None:
        with pytest.raises(ValueError, match="dimensions"):
            make_table(width=width, height=height)

    def test_rejects_negative_seats(self, make_table) -> None:
        with pytest.raises(ValueError, match="Seat count"):
            make_table(seats=-1)

    def test_is_immutable(self, make_table) -> None:
        table = make_table()
        with pytest.raises(AttributeError):
            table.x = 5  # type: ignore[misc]
