"""Application configuration model."""

from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, field_serializer

from launchgrid.utils.persistence import PydanticPersistence

from .grid import SurfaceLayout

DEFAULT_CONFIG_DIR = Path.home() / ".launchgrid"
DEFAULT_LOG_DIR = DEFAULT_CONFIG_DIR / "logs"


class AppConfig(BaseModel):
    """Application configuration and settings."""

    # Device discovery
    device_pattern: str = Field(
        default="Launchpad",
        min_length=1,
        description="Substring matched against MIDI port names to find the surface",
    )
    input_port: Optional[str] = Field(
        default=None,
        description="Exact MIDI input port name (None = first port matching device_pattern)",
    )
    output_port: Optional[str] = Field(
        default=None,
        description="Exact MIDI output port name (None = first port matching device_pattern)",
    )

    # Surface addressing
    layout: SurfaceLayout = Field(
        default_factory=SurfaceLayout,
        description="MIDI status codes and key layout of the surface",
    )

    # Logging
    log_dir: Path = Field(
        default_factory=lambda: DEFAULT_LOG_DIR,
        description="Directory for rotating log files",
    )

    @field_serializer("log_dir")
    def serialize_path(self, path: Path) -> str:
        """Serialize Path to string."""
        return str(path)

    @staticmethod
    def default_path() -> Path:
        """Location of the config file when none is given."""
        return DEFAULT_CONFIG_DIR / "config.json"

    @classmethod
    def load_or_default(cls, path: Optional[Path] = None) -> "AppConfig":
        """
        Load config from file or return default.

        Args:
            path: Path to config file. If None, uses ~/.launchgrid/config.json

        Raises:
            ConfigFileInvalidError: If config file has invalid JSON syntax
            ConfigValidationError: If config values fail validation
        """
        if path is None:
            path = cls.default_path()

        return PydanticPersistence.load_json_or_default(path, cls)

    def save(self, path: Optional[Path] = None) -> None:
        """Save config to file."""
        if path is None:
            path = self.default_path()

        PydanticPersistence.save_json(self, path)
