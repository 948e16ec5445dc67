"""
Car files - Reading and writing single-car JSON documents.

Provides:
- Safe export filenames derived from car names
- UTF-8 .json export to an output directory
- Import from a file path into an ImportResult
"""

from dataclasses import dataclass
from pathlib import Path
import logging
import re

from torquecurve.car.dataset import DataSet
from torquecurve.io.car_data import ImportResult, export_car_to_json, parse_car_json

logger = logging.getLogger(__name__)


READ_ERROR = "Failed to read file"

_UNSAFE_CHARS = re.compile(r"[^a-z0-9]", re.IGNORECASE)


def export_filename(name: str) -> str:
    """Build a filename for a car; anything but ASCII letters/digits becomes '_'."""
    return f"{_UNSAFE_CHARS.sub('_', name)}.json"


@dataclass
class ExporterConfig:
    """Exporter configuration."""
    output_dir: str = "./car_data"
    indent: int | None = 2


class CarFileExporter:
    """Export cars to and import cars from JSON files."""
    
    def __init__(self, config: ExporterConfig | None = None):
        """Initialize exporter.
        
        Args:
            config: Exporter configuration
        """
        self.config = config or ExporterConfig()
        
        self._output_path = Path(self.config.output_dir)
        self._output_path.mkdir(parents=True, exist_ok=True)
    
    @property
    def output_path(self) -> Path:
        """Directory exported files are written to."""
        return self._output_path
    
    def export(self, dataset: DataSet, filename: str | None = None) -> Path:
        """Write a car to a JSON file.
        
        Args:
            dataset: Car to export
            filename: Output filename (derived from the car name if None)
            
        Returns:
            Path to exported file
        """
        output_file = self._output_path / (filename or export_filename(dataset.name))
        output_file.write_text(export_car_to_json(dataset, indent=self.config.indent), encoding="utf-8")
        logger.info("Exported %s to %s", dataset.name, output_file)
        return output_file
    
    def load(self, path: str | Path) -> ImportResult:
        """Import a car from a JSON file.
        
        Args:
            path: File to read
            
        Returns:
            ImportResult; unreadable files fail with READ_ERROR
        """
        try:
            text = Path(path).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning("Could not read car file %s: %s", path, exc)
            return ImportResult.fail(READ_ERROR)
        
        result = parse_car_json(text)
        if not result.success:
            logger.info("Import of %s failed: %s", path, result.error)
        return result
