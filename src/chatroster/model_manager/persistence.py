"""JSON files backed by pydantic models.

Used by AppConfig and the palette CLI. Reads turn every failure other
than a missing file into a ConfigurationError; writes keep a `.bak` copy
of the previous file and replace the target atomically, so a crash
mid-write never leaves a half-written config behind.
"""

import logging
import shutil
from pathlib import Path
from typing import Optional, TypeVar

from pydantic import BaseModel, ValidationError

from chatroster.exceptions import ConfigFileInvalidError, ConfigurationError, wrap_pydantic_error

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)


class PydanticPersistence:
    """Stateless load/save helpers for pydantic models stored as JSON."""

    @staticmethod
    def load_json(path: Path, model_type: type[T]) -> T:
        """
        Read `path` and validate it as `model_type`.

        Raises:
            FileNotFoundError: If `path` does not exist
            ConfigFileInvalidError: Empty, unreadable or non-JSON content
            ConfigValidationError: JSON that `model_type` rejects
        """
        if not path.exists():
            raise FileNotFoundError(f"File not found: {path}")

        try:
            text = path.read_text(encoding="utf-8")
        except OSError as e:
            raise ConfigFileInvalidError(str(path), f"unreadable ({e})") from e

        if not text.strip():
            raise ConfigFileInvalidError(str(path), "file is empty")

        try:
            model = model_type.model_validate_json(text)
        except ValidationError as e:
            logger.error(f"Rejected {path} as {model_type.__name__}: {e}")
            raise wrap_pydantic_error(e, str(path)) from e

        logger.debug(f"Loaded {model_type.__name__} from {path}")
        return model

    @staticmethod
    def save_json(data: BaseModel, path: Path, backup: bool = True) -> None:
        """
        Write `data` to `path` as indented JSON, creating parent directories.

        With `backup`, an existing file is first copied to `<name>.bak`.
        """
        path.parent.mkdir(parents=True, exist_ok=True)

        if backup and path.exists():
            shutil.copy2(path, path.with_suffix(path.suffix + ".bak"))

        temp_path = path.with_suffix(path.suffix + ".tmp")
        try:
            temp_path.write_text(data.model_dump_json(indent=2), encoding="utf-8")
            temp_path.replace(path)
        finally:
            if temp_path.exists():
                temp_path.unlink()

        logger.debug(f"Saved {type(data).__name__} to {path}")

    @staticmethod
    def load_json_or_default(path: Path, model_type: type[T]) -> T:
        """Like load_json, but a missing file gives `model_type()` (nothing is written)."""
        try:
            return PydanticPersistence.load_json(path, model_type)
        except FileNotFoundError:
            logger.info(f"{path} not found, using default {model_type.__name__}")
            return model_type()

    @staticmethod
    def validate_json(path: Path, model_type: type[T]) -> tuple[bool, Optional[str]]:
        """Return (True, None) if `path` loads as `model_type`, else (False, reason)."""
        try:
            PydanticPersistence.load_json(path, model_type)
        except FileNotFoundError:
            return False, f"File not found: {path}"
        except ConfigurationError as e:
            return False, e.user_message
        return True, None
