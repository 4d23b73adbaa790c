"""End-to-end editing sessions driven through the window event target."""

from __future__ import annotations

import math

import pytest

from floorplan.application import FloorPlanEditor, FloorPlanStore, TableNotFoundError
from floorplan.application.config import load_config
from floorplan.domain import ContainerRect, GuideAxis, TableShape
from floorplan.domain.services import ViewportTransform, WindowEvents

pytestmark = pytest.mark.integration


@pytest.fixture
def session(make_table, container: ContainerRect, window: WindowEvents) -> FloorPlanEditor:
    """Editor over two tables 400 units apart on the same row."""
    store = FloorPlanStore([make_table("a", 0, 0), make_table("b", 400, 0)], "b")
    return FloorPlanEditor(store=store, container=container, window=window)


def _half_up(value: float) -> int:
    return math.floor(value + 0.5)


class TestDragSession:
    """A table dragged with the pointer ends up in the store."""

    def test_drag_commits_rounded_position(self, session: FloorPlanEditor) -> None:
        _, scale_y = session.viewport.scale_factors()

        session.controller.pointer_down_on_table("a", 100, 100)
        session.controller.pointer_move(100, 300)
        session.controller.pointer_up(100, 300)

        moved = session.store.get("a")
        assert (moved.x, moved.y) == (0, _half_up(200 * scale_y))
        assert session.store.selected_table_id == "a"

    def test_guides_shown_while_dragging(self, session: FloorPlanEditor) -> None:
        session.controller.pointer_down_on_table("a", 100, 100)
        session.controller.pointer_move(200, 100)

        assert [line.axis for line in session.guide_lines] == [GuideAxis.HORIZONTAL]
        assert session.snapshot().drag_preview is not None
        # Nothing is committed until release
        assert session.store.get("a").x == 0

        session.controller.pointer_up(200, 100)
        assert session.guide_lines == ()
        assert session.store.get("a").x > 0

    def test_click_selects_without_moving(self, session: FloorPlanEditor) -> None:
        session.controller.pointer_down_on_table("a", 100, 100)
        session.controller.pointer_move(103, 102)
        session.controller.pointer_up(103, 102)

        assert session.store.selected_table_id == "a"
        assert session.store.get("a").x == 0

    def test_canvas_press_deselects(self, session: FloorPlanEditor) -> None:
        session.controller.pointer_down_on_canvas(900, 400)
        assert session.store.selected_table_id is None

    def test_listeners_scoped_to_gesture(
        self, session: FloorPlanEditor, window: WindowEvents
    ) -> None:
        session.controller.pointer_down_on_table("a", 100, 100)
        assert window.listener_count() == 3

        session.controller.pointer_up(100, 100)
        assert window.listener_count() == 0

    def test_close_mid_drag_releases_listeners(
        self, session: FloorPlanEditor, window: WindowEvents
    ) -> None:
        session.controller.pointer_down_on_table("a", 100, 100)
        session.close()

        assert window.listener_count() == 0
        assert session.guide_lines == ()


class TestViewportFollowsStore:
    """The camera refits when tables are added or removed, never on moves."""

    def test_add_table_refits(
        self, editor: FloorPlanEditor, container: ContainerRect
    ) -> None:
        editor.zoom_in()
        editor.store.add_table(TableShape.CIRCLE)

        expected = ViewportTransform(container).auto_fit(editor.tables)
        assert editor.viewport.state == expected

    def test_remove_table_refits(self, editor: FloorPlanEditor) -> None:
        editor.zoom_in()
        zoomed = editor.viewport.state
        editor.store.remove_table("table-4")
        assert editor.viewport.state != zoomed

    def test_move_keeps_camera(self, editor: FloorPlanEditor) -> None:
        editor.zoom_in()
        zoomed = editor.viewport.state
        editor.store.update_table_position("table-1", 500, 500)
        assert editor.viewport.state == zoomed

    def test_zoom_buttons_keep_origin(self, editor: FloorPlanEditor) -> None:
        fitted = editor.viewport.state
        zoomed_out = editor.zoom_out()

        assert zoomed_out.zoom == pytest.approx(fitted.zoom - 0.25)
        assert (zoomed_out.origin_x, zoomed_out.origin_y) == (fitted.origin_x, fitted.origin_y)
        assert editor.zoom_in().zoom == pytest.approx(fitted.zoom)

    def test_closed_editor_ignores_store(self, editor: FloorPlanEditor) -> None:
        editor.zoom_in()
        zoomed = editor.viewport.state
        editor.close()
        editor.store.add_table()
        assert editor.viewport.state == zoomed


class TestFocusAndRender:
    """Focusing and rendering a session."""

    def test_focus_centres_table_horizontally(self, editor: FloorPlanEditor) -> None:
        table = editor.store.get("table-2")
        editor.focus_table("table-2")

        screen = editor.viewport.world_to_screen(table.center.x, table.center.y)
        assert screen.x == pytest.approx(500)
        # Room is left for the details panel below the table
        assert screen.y < 250

    def test_focus_unknown_table(self, editor: FloorPlanEditor) -> None:
        with pytest.raises(TableNotFoundError):
            editor.focus_table("ghost")

    def test_render_shows_selection_and_guides(self, session: FloorPlanEditor) -> None:
        session.controller.pointer_down_on_table("a", 100, 100)
        session.controller.pointer_move(200, 100)

        svg = session.render_svg()
        assert svg.startswith("<svg")
        assert 'class="selection-indicator"' in svg
        assert 'class="guide-line guide-horizontal"' in svg


def test_editor_from_file(floor_plan_file) -> None:
    editor = FloorPlanEditor.from_config(load_config(floor_plan_file))

    assert [t.id for t in editor.tables] == ["t1", "t2", "t3"]
    assert editor.store.selected_table_id == "t1"
    assert editor.viewport.container.width == 1000
    assert sum(t.seats for t in editor.tables) == 12
