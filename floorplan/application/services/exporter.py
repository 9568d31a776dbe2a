"""Export services for floor layouts.

Saves the floors of a property to a JSON file and reads them back.
"""

import json
import os
from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from floorplan.core.exceptions import ExportError
from floorplan.core.logging import get_logger
from floorplan.domain.models.floor import FloorPayload

log = get_logger(__name__)


class LayoutExporter:
    """Handles exporting of saved floor layouts."""

    def __init__(self, output_dir: str = "exports"):
        """Initialize exporter.

        Args:
            output_dir: Directory where exports will be saved.
        """
        self.output_dir = output_dir
        self._ensure_dir()

    def _ensure_dir(self):
        """Ensure output directory exists."""
        if not os.path.exists(self.output_dir):
            try:
                os.makedirs(self.output_dir)
                log.info("created_export_directory", path=self.output_dir)
            except OSError as e:
                log.error("export_directory_creation_failed", error=str(e))
                raise ExportError(f"Cannot create {self.output_dir}: {e}") from e

    def save_layouts(
        self,
        floors: List[FloorPayload],
        prefix: str = "layout",
        metadata: Optional[Dict[str, Any]] = None
    ) -> str:
        """Save floor layouts to a JSON file.

        Floors are keyed by their 1-based display number.

        Args:
            floors: Saved floor payloads.
            prefix: Filename prefix.
            metadata: Optional metadata to include (e.g. property id).

        Returns:
            Path to the saved file.
        """
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        filename = f"{prefix}_{timestamp}.json"
        filepath = os.path.join(self.output_dir, filename)

        payload = {
            "metadata": {
                "timestamp": datetime.now().isoformat(),
                "floors": len(floors),
                "units": sum(f.units_total for f in floors),
                **(metadata or {})
            },
            "floors": {
                str(f.floor_no + 1): f.to_request()
                for f in sorted(floors, key=lambda f: f.floor_no)
            }
        }

        try:
            with open(filepath, "w", encoding="utf-8") as f:
                json.dump(payload, f, indent=2, ensure_ascii=False)

            log.info("layouts_saved", path=filepath, floors=len(floors))
            return filepath

        except OSError as e:
            log.error("layouts_save_failed", path=filepath, error=str(e))
            raise ExportError(f"Cannot write {filepath}: {e}") from e

    def load_layouts(self, filepath: str) -> List[FloorPayload]:
        """Read floors back from a file written by ``save_layouts``.

        Returns:
            Floor payloads ordered by floor number.
        """
        try:
            with open(filepath, encoding="utf-8") as f:
                data = json.load(f)
            floors = [FloorPayload.model_validate(item) for item in data.get("floors", {}).values()]
        except (OSError, json.JSONDecodeError, ValidationError, AttributeError) as e:
            log.error("layouts_load_failed", path=filepath, error=str(e))
            raise ExportError(f"Cannot read {filepath}: {e}") from e

        log.info("layouts_loaded", path=filepath, floors=len(floors))
        return sorted(floors, key=lambda f: f.floor_no)
