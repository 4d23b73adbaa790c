"""Unit tests for domain value objects."""

import pytest

from floorplan.domain import ContainerRect, EditorSettings, SeatSections
from floorplan.domain.value_objects import SeatEdge


class TestSeatSections:
    """Tests for per-edge seat counts."""

    def test_absent_and_empty_differ(self) -> None:
        sections = SeatSections(front=0)
        assert sections.get(SeatEdge.FRONT) == 0
        assert sections.get(SeatEdge.BACK) is None

    def test_total_counts_defined_sections(self) -> None:
        assert SeatSections(front=2, left=1, right=None).total == 3

    def test_to_dict_drops_absent(self) -> None:
        assert SeatSections(back=3, right=0).to_dict() == {"back": 3, "right": 0}

    def test_from_mapping(self) -> None:
        sections = SeatSections.from_mapping({"left": 2, "unknown": 9})
        assert sections == SeatSections(left=2)

    def test_from_none(self) -> None:
        assert SeatSections.from_mapping(None) is None


class TestContainerRect:
    """Tests for the canvas rectangle."""

    def test_aspect_ratio(self) -> None:
        assert ContainerRect(1000, 500).aspect_ratio == 2.0

    def test_rejects_zero_size(self) -> None:
        with pytest.raises(ValueError):
            ContainerRect(0, 500)


class TestEditorSettings:
    """Tests for editor parameters."""

    def test_available_height_fraction(self) -> None:
        assert EditorSettings(details_panel_fraction=0.25).available_height_fraction == 0.75

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"seat_radius": 0},
            {"snap_threshold": -1},
            {"move_threshold": -1},
            {"details_panel_fraction": 1.0},
        ],
    )
    def test_rejects_invalid(self, kwargs: dict) -> None:
        with pytest.raises(ValueError):
            EditorSettings(**kwargs)
