"""Application configuration model."""

import logging
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, ValidationError

from lifxcolor.exceptions import wrap_config_error
from lifxcolor.models.color import DEFAULT_KELVIN, KELVIN_MAX, KELVIN_MIN

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path.home() / ".lifxcolor" / "config.json"


class AppConfig(BaseModel):
    """Command line settings, stored as JSON."""

    default_kelvin: int = Field(
        default=DEFAULT_KELVIN,
        ge=KELVIN_MIN,
        le=KELVIN_MAX,
        description="Kelvin used when a command does not specify one",
    )
    output_format: Literal["text", "json"] = Field(
        default="text", description="How converted colors are printed"
    )

    @classmethod
    def load(cls, path: Path | None = None) -> "AppConfig":
        """
        Load config from file. A missing file gives the defaults.

        Raises:
            ConfigError: If the file is not valid JSON or a value is invalid
        """
        path = path or DEFAULT_CONFIG_PATH
        if not path.exists():
            logger.debug(f"No config at {path}, using defaults")
            return cls()

        try:
            return cls.model_validate_json(path.read_text(encoding="utf-8"))
        except ValidationError as e:
            raise wrap_config_error(e, path) from e

    def save(self, path: Path | None = None) -> None:
        """
        Save config to file.

        The JSON is written to a sibling temp file which then replaces the
        target, so a failed write never leaves a half-written config.
        """
        path = path or DEFAULT_CONFIG_PATH
        path.parent.mkdir(parents=True, exist_ok=True)
        temp_path = path.with_name(f"{path.name}.tmp")
        try:
            temp_path.write_text(self.model_dump_json(indent=2), encoding="utf-8")
            temp_path.replace(path)
        except OSError:
            temp_path.unlink(missing_ok=True)
            raise
        logger.info(f"Saved config to {path}")
