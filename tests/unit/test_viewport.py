"""Unit tests for the viewport transform."""

import pytest

from floorplan.domain import ContainerRect, Point2D, TableSize
from floorplan.domain.constants import FIT_PADDING_FRACTION, MAX_ZOOM, MIN_ZOOM
from floorplan.domain.services import (
    Bounds,
    ViewportTransform,
    clamp_zoom,
    content_bounds,
    seat_overhang,
)


@pytest.fixture
def viewport(container: ContainerRect) -> ViewportTransform:
    return ViewportTransform(container)


class TestHelpers:
    """Tests for zoom clamping and content bounds."""

    @pytest.mark.parametrize(
        "zoom, expected", [(0.1, MIN_ZOOM), (1.2, 1.2), (5.0, MAX_ZOOM)]
    )
    def test_clamp_zoom(self, zoom: float, expected: float) -> None:
        assert clamp_zoom(zoom) == expected

    def test_seat_overhang(self, make_table) -> None:
        table = make_table(width=100, height=60)
        assert seat_overhang(table) == 50 + 12 + 12

    def test_content_bounds_empty(self) -> None:
        assert content_bounds([]) is None

    def test_content_bounds_includes_overhang(self, two_tables) -> None:
        assert content_bounds(two_tables) == Bounds(-74, -74, 374, 174)

    def test_padded_bounds(self) -> None:
        assert Bounds(0, 0, 100, 50).padded(0.1) == Bounds(-10, -5, 110, 55)


class TestCoordinateConversion:
    """Tests for screen/world conversion."""

    def test_screen_to_world_at_zoom_one(self, viewport: ViewportTransform) -> None:
        # 2000 world units across 1000 pixels
        assert viewport.screen_to_world(500, 250) == Point2D(1000, 500)

    def test_container_offset_is_subtracted(self) -> None:
        viewport = ViewportTransform(
            ContainerRect(1000, 500, left=100, top=50), origin_x=30, origin_y=40
        )
        assert viewport.screen_to_world(100, 50) == Point2D(30, 40)

    def test_round_trip(self, viewport: ViewportTransform) -> None:
        viewport.zoom_at_point(1.7, 123, 45)
        world = viewport.screen_to_world(321, 210)
        screen = viewport.world_to_screen(world.x, world.y)
        assert screen.x == pytest.approx(321)
        assert screen.y == pytest.approx(210)

    def test_scale_factors_follow_zoom(self, viewport: ViewportTransform) -> None:
        viewport.step_zoom(1.0)
        assert viewport.scale_factors() == (pytest.approx(1.0), pytest.approx(1.0))


class TestAutoFit:
    """Tests for fitting all tables into view."""

    def test_single_table(self, viewport: ViewportTransform, make_table) -> None:
        state = viewport.auto_fit([make_table(x=0, y=0)])

        # Content 248 wide padded 20% per side to 347.2; height limits
        assert state.zoom == pytest.approx(1000 / 347.2)
        assert state.origin_x + state.view_width / 2 == pytest.approx(50)
        assert state.origin_y + state.view_height / 2 == pytest.approx(50)

    def test_padded_content_is_fully_visible(
        self, viewport: ViewportTransform, two_tables
    ) -> None:
        state = viewport.auto_fit(two_tables)
        padded = content_bounds(two_tables).padded(FIT_PADDING_FRACTION)
        assert state.visible_bounds.contains(padded)

    def test_explicit_aspect_ratio_reshapes_container(
        self, viewport: ViewportTransform, make_table
    ) -> None:
        tall = [make_table(x=0, y=0, width=100, height=400)]
        state = viewport.auto_fit(tall, aspect_ratio=0.5)

        assert viewport.container.width == 1000
        assert viewport.container.aspect_ratio == pytest.approx(0.5)
        assert state.view_height == pytest.approx(state.view_width * 2)
        padded = content_bounds(tall).padded(FIT_PADDING_FRACTION)
        assert state.visible_bounds.contains(padded, tolerance=1e-6)

        # Later commits keep the same shape, so the content stays in view
        viewport.pan_to(state.origin_x, state.origin_y)
        assert viewport.state.visible_bounds.contains(padded, tolerance=1e-6)

    def test_invalid_aspect_ratio_is_ignored(
        self, viewport: ViewportTransform, two_tables
    ) -> None:
        viewport.auto_fit(two_tables, aspect_ratio=-1)
        assert viewport.container.aspect_ratio == 2.0

    def test_zoom_is_clamped(self, viewport: ViewportTransform, make_table) -> None:
        spread = [make_table("a", 0, 0), make_table("b", 20000, 20000)]
        assert viewport.auto_fit(spread).zoom == MIN_ZOOM

    def test_empty_resets_origin_and_keeps_zoom(self, viewport: ViewportTransform) -> None:
        viewport.step_zoom(0.5)
        viewport.pan_to(300, 200)

        state = viewport.auto_fit([])
        assert (state.origin_x, state.origin_y) == (0, 0)
        assert state.zoom == 1.5

    def test_sync_only_refits_on_count_change(
        self, viewport: ViewportTransform, two_tables
    ) -> None:
        assert viewport.sync_table_count(two_tables) is True
        fitted = viewport.state

        moved = [two_tables[0].moved_to(900, 900), two_tables[1]]
        assert viewport.sync_table_count(moved) is False
        assert viewport.state == fitted

        assert viewport.sync_table_count(moved[:1]) is True
        assert viewport.state != fitted


class TestZoomToRegion:
    """Tests for focusing a region above the details panel."""

    def test_center_lands_in_unobscured_area(self, viewport: ViewportTransform) -> None:
        center = Point2D(500, 500)
        viewport.zoom_to_region(center, TableSize(200, 100), 0.6)

        screen = viewport.world_to_screen(center.x, center.y)
        assert screen.x == pytest.approx(500)
        assert screen.y == pytest.approx(150)  # middle of the top 300 pixels

    def test_zoom_is_limited(self, viewport: ViewportTransform) -> None:
        state = viewport.zoom_to_region(Point2D(0, 0), TableSize(10, 10), 0.6)
        assert state.zoom == MAX_ZOOM

    def test_invalid_fraction_uses_full_height(self, viewport: ViewportTransform) -> None:
        center = Point2D(100, 100)
        viewport.zoom_to_region(center, TableSize(400, 400), 0)

        assert viewport.world_to_screen(100, 100).y == pytest.approx(250)

    def test_zero_size_keeps_zoom(self, viewport: ViewportTransform) -> None:
        viewport.step_zoom(0.25)
        state = viewport.zoom_to_region(Point2D(10, 10), TableSize(0, 0))
        assert state.zoom == 1.25

    def test_zoom_to_table_keeps_seats_visible(
        self, viewport: ViewportTransform, make_table
    ) -> None:
        table = make_table(x=400, y=300, width=120, height=80)
        viewport.zoom_to_table(table, 0.6)

        screen = viewport.world_to_screen(table.center.x, table.center.y)
        assert screen.y == pytest.approx(150)
        top_seat = viewport.world_to_screen(table.center.x, table.y - 36)
        assert top_seat.y >= 0


class TestZoomAndPan:
    """Tests for anchored zoom, stepping and panning."""

    def test_zoom_at_point_keeps_anchor_fixed(self, viewport: ViewportTransform) -> None:
        before = viewport.screen_to_world(200, 100)
        viewport.zoom_at_point(2.0, 200, 100)
        after = viewport.screen_to_world(200, 100)

        assert viewport.zoom == 2.0
        assert after.x == pytest.approx(before.x)
        assert after.y == pytest.approx(before.y)

    def test_zoom_at_point_is_idempotent(self, viewport: ViewportTransform) -> None:
        first = viewport.zoom_at_point(1.7, 320, 140)
        second = viewport.zoom_at_point(1.7, 320, 140)

        assert second.zoom == first.zoom
        assert second.origin_x == pytest.approx(first.origin_x)
        assert second.origin_y == pytest.approx(first.origin_y)

    def test_zoom_at_point_clamps(self, viewport: ViewportTransform) -> None:
        assert viewport.zoom_at_point(10, 0, 0).zoom == MAX_ZOOM

    def test_step_zoom_keeps_origin(self, viewport: ViewportTransform) -> None:
        viewport.pan_to(40, 60)
        state = viewport.zoom_in()

        assert state.zoom == 1.25
        assert (state.origin_x, state.origin_y) == (40, 60)

    def test_zoom_limits(self, viewport: ViewportTransform) -> None:
        viewport.step_zoom(10)
        assert viewport.zoom == MAX_ZOOM
        assert not viewport.can_zoom_in
        assert viewport.can_zoom_out

        viewport.step_zoom(-10)
        assert viewport.zoom == MIN_ZOOM
        assert not viewport.can_zoom_out

    def test_pan_by_screen(self, viewport: ViewportTransform) -> None:
        state = viewport.pan_by_screen(Point2D(0, 0), 10, 5)
        # Content follows the pointer, so the origin moves the other way
        assert (state.origin_x, state.origin_y) == (-20, -10)

    def test_on_change_only_fires_on_real_changes(self, container: ContainerRect) -> None:
        seen = []
        viewport = ViewportTransform(container, on_change=seen.append)

        viewport.pan_to(0, 0)
        viewport.resize(1000, 500)
        assert seen == []

        viewport.pan_to(5, 5)
        assert len(seen) == 1
        assert seen[0].origin_x == 5

    def test_resize_changes_aspect(self, viewport: ViewportTransform) -> None:
        state = viewport.resize(1000, 1000)
        assert state.view_height == state.view_width
