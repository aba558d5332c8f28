"""Shared utilities for Pydantic model persistence.

Stateless helpers for loading and saving Pydantic models to and from JSON
files. Low-level Pydantic errors are converted into LaunchGridError
exceptions with recovery hints.
"""

import logging
from collections.abc import Callable
from pathlib import Path
from typing import Optional, TypeVar

from pydantic import BaseModel, ValidationError

from launchgrid.exceptions import ConfigFileInvalidError, ConfigurationError, wrap_pydantic_error

logger = logging.getLogger(__name__)

# Type variable bound to Pydantic BaseModel
T = TypeVar("T", bound=BaseModel)


class PydanticPersistence:
    """
    Utility class providing shared Pydantic persistence operations.

    Example Usage:
        ```python
        config = PydanticPersistence.load_json(
            path=Path("config.json"),
            model_type=AppConfig
        )

        PydanticPersistence.save_json(
            data=config,
            path=Path("config.json")
        )
        ```
    """

    @staticmethod
    def load_json(path: Path, model_type: type[T]) -> T:
        """
        Load and validate a Pydantic model from a JSON file.

        Args:
            path: Path to the JSON file to load
            model_type: The Pydantic model class to validate against

        Returns:
            Validated model instance

        Raises:
            FileNotFoundError: If the file doesn't exist
            ConfigFileInvalidError: If the JSON syntax is invalid or the file is empty
            ConfigValidationError: If the JSON content fails Pydantic validation
            ConfigurationError: If the file cannot be read
        """
        if not path.exists():
            raise FileNotFoundError(f"File not found: {path}")

        try:
            json_content = path.read_text()
        except OSError as e:
            logger.error(f"Error reading {path}: {e}")
            raise ConfigurationError(
                user_message=f"Could not read configuration file {path}",
                technical_message=f"Error reading {path}: {e}",
            ) from e

        if not json_content.strip():
            raise ConfigFileInvalidError(str(path), "File is empty")

        try:
            model = model_type.model_validate_json(json_content)
        except ValidationError as e:
            logger.error(f"Validation error loading {model_type.__name__} from {path}: {e}")
            raise wrap_pydantic_error(e, str(path)) from e

        logger.debug(f"Loaded {model_type.__name__} from {path}")
        return model

    @staticmethod
    def save_json(
        data: BaseModel,
        path: Path,
        indent: int = 2,
        create_parents: bool = True
    ) -> None:
        """
        Save a Pydantic model to a JSON file.

        Args:
            data: The Pydantic model instance to save
            path: Path where the file should be saved
            indent: JSON indentation level (default: 2 spaces)
            create_parents: Create parent directories if they don't exist

        Raises:
            ConfigurationError: If the file cannot be written
        """
        try:
            if create_parents:
                path.parent.mkdir(parents=True, exist_ok=True)

            path.write_text(data.model_dump_json(indent=indent))
            logger.debug(f"Saved {type(data).__name__} to {path}")

        except OSError as e:
            logger.error(f"Error saving {type(data).__name__} to {path}: {e}")
            raise ConfigurationError(
                user_message=f"Could not write configuration file {path}",
                technical_message=f"Error saving {type(data).__name__} to {path}: {e}",
            ) from e

    @staticmethod
    def load_json_or_default(
        path: Path,
        model_type: type[T],
        default_factory: Optional[Callable[[], T]] = None
    ) -> T:
        """
        Load a model from JSON, or return a default if the file doesn't exist.

        Only a missing file falls back to the default; a file that exists but
        is invalid raises so that it is never silently replaced.

        Args:
            path: Path to the JSON file
            model_type: The Pydantic model class
            default_factory: Optional callable that returns a default instance.
                           If None, calls model_type() to get defaults.
        """
        try:
            return PydanticPersistence.load_json(path, model_type)
        except FileNotFoundError:
            logger.info(f"No {model_type.__name__} at {path}, using defaults")
            if default_factory is not None:
                return default_factory()
            return model_type()
