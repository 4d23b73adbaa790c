"""In-memory floor plan store.

Holds the ordered table records and the current selection. Table sizes are
never stored by callers; every record's width and height are recomputed
from its shape and seats whenever it changes.
"""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass, replace
from typing import Any, Callable, Iterable

from floorplan.domain import SeatSections, Table, TableShape, TableStatus
from floorplan.domain.services import calculate_table_size

logger = logging.getLogger(__name__)

Listener = Callable[["FloorPlanStore"], None]

NEW_TABLE_POSITION = (60.0, 60.0)
NEW_TABLE_SEATS = 4

# Sections and seat totals new booths and bars start with
DEFAULT_SECTIONS: dict[TableShape, tuple[SeatSections, int]] = {
    TableShape.BAR: (SeatSections(front=4), 4),
    TableShape.L_BOOTH: (SeatSections(left=2, front=2), 4),
    TableShape.U_BOOTH: (SeatSections(left=2, front=2, right=1), 5),
    TableShape.CORNER_BOOTH: (SeatSections(left=2, back=2), 4),
}

_UPDATABLE_FIELDS = frozenset({"name", "seats", "x", "y", "status", "shape", "seat_sections"})


class TableNotFoundError(KeyError):
    """Raised when a table id does not exist in the store."""

    def __init__(self, table_id: str) -> None:
        super().__init__(table_id)
        self.table_id = table_id

    def __str__(self) -> str:
        return f"Table not found: {self.table_id}"


@dataclass(frozen=True)
class TableSpec:
    """Table data without a size, as entered by users."""

    id: str
    name: str
    seats: int
    x: float
    y: float
    status: TableStatus = TableStatus.AVAILABLE
    shape: TableShape = TableShape.RECTANGULAR
    seat_sections: SeatSections | None = None


DEFAULT_TABLES: tuple[TableSpec, ...] = (
    TableSpec("table-1", "Table 1", 4, 80, 80, TableStatus.AVAILABLE, TableShape.RECTANGULAR),
    TableSpec("table-2", "Table 2", 2, 260, 80, TableStatus.RESERVED, TableShape.CIRCLE),
    TableSpec("table-3", "Table 3", 6, 80, 220, TableStatus.AVAILABLE, TableShape.RECTANGULAR),
    TableSpec("table-4", "Booth A", 4, 300, 250, TableStatus.BLOCKED, TableShape.BAR),
)


def sized_table(
    id: str,
    x: float,
    y: float,
    shape: TableShape = TableShape.RECTANGULAR,
    seats: int = NEW_TABLE_SEATS,
    seat_sections: SeatSections | None = None,
    name: str = "",
    status: TableStatus = TableStatus.AVAILABLE,
) -> Table:
    """Build a table whose width and height follow from its seats."""
    size = calculate_table_size(seats, shape, seat_sections)
    return Table(
        id=id,
        x=x,
        y=y,
        width=size.width,
        height=size.height,
        shape=shape,
        seats=seats,
        seat_sections=seat_sections,
        name=name,
        status=status,
    )


def _from_spec(spec: TableSpec) -> Table:
    return sized_table(
        spec.id,
        spec.x,
        spec.y,
        spec.shape,
        spec.seats,
        spec.seat_sections,
        spec.name,
        spec.status,
    )


class FloorPlanStore:
    """Ordered table collection with selection and change notification.

    Args:
        tables: Initial tables; the default layout when omitted.
        selected_table_id: Initial selection; the first table when omitted.
    """

    def __init__(
        self,
        tables: Iterable[Table] | None = None,
        selected_table_id: str | None = None,
    ) -> None:
        if tables is None:
            self._tables = [_from_spec(spec) for spec in DEFAULT_TABLES]
        else:
            self._tables = list(tables)
        if selected_table_id is None and tables is None:
            selected_table_id = self._tables[0].id if self._tables else None
        self._selected_id = selected_table_id
        self._listeners: list[Listener] = []

    # --- Queries ---

    @property
    def tables(self) -> tuple[Table, ...]:
        return tuple(self._tables)

    @property
    def selected_table_id(self) -> str | None:
        return self._selected_id

    @property
    def selected_table(self) -> Table | None:
        if self._selected_id is None:
            return None
        return next((t for t in self._tables if t.id == self._selected_id), None)

    def get(self, table_id: str) -> Table:
        """Look up a table.

        Raises:
            TableNotFoundError: If no table has this id.
        """
        return self._tables[self._index(table_id)]

    def __len__(self) -> int:
        return len(self._tables)

    def __contains__(self, table_id: object) -> bool:
        return any(t.id == table_id for t in self._tables)

    def _index(self, table_id: str) -> int:
        for index, table in enumerate(self._tables):
            if table.id == table_id:
                return index
        raise TableNotFoundError(table_id)

    # --- Listeners ---

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a change listener; returns a function that unregisters it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self)

    # --- Commands ---

    def select_table(self, table_id: str | None) -> None:
        """Select a table, or clear the selection with None.

        Raises:
            TableNotFoundError: If ``table_id`` is not None and unknown.
        """
        if table_id is not None:
            self._index(table_id)
        if table_id == self._selected_id:
            return
        self._selected_id = table_id
        self._notify()

    def add_table(self, shape: TableShape = TableShape.RECTANGULAR) -> Table:
        """Append a new table of the given shape and select it."""
        sections, seats = DEFAULT_SECTIONS.get(shape, (None, NEW_TABLE_SEATS))
        table = sized_table(
            id=str(uuid.uuid4()),
            x=NEW_TABLE_POSITION[0],
            y=NEW_TABLE_POSITION[1],
            shape=shape,
            seats=seats,
            seat_sections=sections,
            name=f"Table {len(self._tables) + 1}",
        )
        self._tables.append(table)
        self._selected_id = table.id
        logger.debug(f"Added {shape.value} table {table.id}")
        self._notify()
        return table

    def update_table(self, table_id: str, **updates: Any) -> Table:
        """Apply field updates to a table and recompute its size.

        Args:
            table_id: Table to update.
            **updates: Any of name, seats, x, y, status, shape, seat_sections.

        Raises:
            TableNotFoundError: If no table has this id.
            ValueError: If an unknown field is given or the result is invalid.
        """
        unknown = set(updates) - _UPDATABLE_FIELDS
        if unknown:
            raise ValueError(f"Cannot update fields: {', '.join(sorted(unknown))}")
        index = self._index(table_id)
        current = self._tables[index]
        merged = replace(current, **updates)
        size = calculate_table_size(merged.seats, merged.shape, merged.seat_sections)
        updated = replace(merged, width=size.width, height=size.height)
        self._tables[index] = updated
        self._notify()
        return updated

    def update_table_position(self, table_id: str, x: float, y: float) -> Table:
        """Move a table; its size and order are unchanged."""
        index = self._index(table_id)
        moved = self._tables[index].moved_to(x, y)
        self._tables[index] = moved
        logger.debug(f"Table {table_id} moved to ({x}, {y})")
        self._notify()
        return moved

    def remove_table(self, table_id: str) -> Table:
        """Remove a table, clearing the selection if it was selected."""
        removed = self._tables.pop(self._index(table_id))
        if self._selected_id == table_id:
            self._selected_id = None
        self._notify()
        return removed

    def reset_layout(self) -> None:
        """Restore the default tables and select the first one."""
        self._tables = [_from_spec(spec) for spec in DEFAULT_TABLES]
        self._selected_id = self._tables[0].id
        self._notify()
