"""Base exporter framework with Protocol, Registry, and Manager."""

from __future__ import annotations

import logging
from abc import abstractmethod
from pathlib import Path
from typing import TYPE_CHECKING, Callable, ClassVar, Protocol, runtime_checkable

if TYPE_CHECKING:
    from floorplan.application.dtos import FloorPlanSnapshot


logger = logging.getLogger(__name__)


@runtime_checkable
class Exporter(Protocol):
    """Protocol for all floor plan exporters.

    Attributes:
        format_name: Registry key for the format (e.g., "svg", "dxf").
        file_extension: File extension without leading dot.
        media_type: MIME type used when serving the export over HTTP.
    """

    format_name: ClassVar[str]
    file_extension: ClassVar[str]
    media_type: ClassVar[str]

    @abstractmethod
    def export(self, snapshot: FloorPlanSnapshot, path: Path) -> None:
        """Write the snapshot to a file."""
        ...

    @abstractmethod
    def export_string(self, snapshot: FloorPlanSnapshot) -> str:
        """Return the exported document as text."""
        ...


class ExporterRegistry:
    """Registry for exporter classes.

    Exporters register themselves with the ``@ExporterRegistry.register``
    decorator when their module is imported.

    Example:
        @ExporterRegistry.register("json")
        class JsonExporter:
            format_name = "json"
            file_extension = "json"
            ...
    """

    _exporters: ClassVar[dict[str, type[Exporter]]] = {}

    @classmethod
    def register(cls, format_name: str) -> Callable[[type[Exporter]], type[Exporter]]:
        """Decorator to register an exporter class under ``format_name``."""

        def decorator(exporter_class: type[Exporter]) -> type[Exporter]:
            if format_name in cls._exporters:
                logger.warning(f"Overwriting existing exporter for format '{format_name}'")
            cls._exporters[format_name] = exporter_class
            logger.debug(f"Registered exporter '{format_name}': {exporter_class.__name__}")
            return exporter_class

        return decorator

    @classmethod
    def get(cls, format_name: str) -> type[Exporter]:
        """Get an exporter class by format name.

        Raises:
            KeyError: If no exporter is registered for the format.
        """
        if format_name not in cls._exporters:
            available = ", ".join(sorted(cls._exporters))
            raise KeyError(
                f"No exporter registered for format '{format_name}'. "
                f"Available formats: {available or 'none'}"
            )
        return cls._exporters[format_name]

    @classmethod
    def available_formats(cls) -> list[str]:
        return sorted(cls._exporters)

    @classmethod
    def is_registered(cls, format_name: str) -> bool:
        return format_name in cls._exporters


class ExportManager:
    """Writes a floor plan snapshot to one or more formats.

    Attributes:
        output_dir: Directory where exported files will be saved.
    """

    def __init__(self, output_dir: Path) -> None:
        self.output_dir = Path(output_dir)

    def export_all(
        self,
        formats: list[str],
        snapshot: FloorPlanSnapshot,
        project_name: str = "floorplan",
    ) -> dict[str, Path]:
        """Export the snapshot to every requested format.

        Files are named ``{project_name}.{extension}``.

        Returns:
            Mapping of format name to written file path.

        Raises:
            KeyError: If any format is not registered. Nothing is written
                in that case.
            OSError: If file operations fail.
        """
        exporter_classes = [(name, ExporterRegistry.get(name)) for name in formats]
        self.output_dir.mkdir(parents=True, exist_ok=True)

        results: dict[str, Path] = {}
        for format_name, exporter_class in exporter_classes:
            exporter = exporter_class()
            filepath = self.output_dir / f"{project_name}.{exporter.file_extension}"
            logger.info(f"Exporting to {format_name}: {filepath}")
            exporter.export(snapshot, filepath)
            results[format_name] = filepath
        return results

    def export_single(
        self,
        format_name: str,
        snapshot: FloorPlanSnapshot,
        project_name: str = "floorplan",
    ) -> Path:
        return self.export_all([format_name], snapshot, project_name)[format_name]
