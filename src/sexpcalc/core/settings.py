"""
Evaluation settings.

Parses the [eval] table from sexpcalc.toml and provides typed limits for the
parser and evaluator.
"""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from sexpcalc.core.errors import SettingsError

logger = logging.getLogger(__name__)

SETTINGS_FILENAME = "sexpcalc.toml"

# Parser and evaluator each recurse once or twice per nesting level.
MAX_DEPTH_LIMIT = 256


class EvalSettings(BaseModel):
    """Limits shared by the parser and the evaluator."""

    max_depth: int = Field(
        default=200,
        ge=1,
        le=MAX_DEPTH_LIMIT,
        description="Maximum parenthesis nesting depth accepted by the parser",
    )
    int_bits: Literal[32, 64] = Field(
        default=32,
        description="Width of the signed two's-complement integers used for arithmetic",
    )

    model_config = ConfigDict(frozen=True, extra="forbid")

    @property
    def int_min(self) -> int:
        return -(1 << (self.int_bits - 1))

    @property
    def int_max(self) -> int:
        return (1 << (self.int_bits - 1)) - 1


DEFAULT_SETTINGS = EvalSettings()


def settings_from_dict(data: dict[str, Any]) -> EvalSettings:
    """Build EvalSettings from a parsed [eval] table."""
    try:
        return EvalSettings.model_validate(data)
    except PydanticValidationError as e:
        raise SettingsError(f"Invalid [eval] settings: {e}") from e


def load_settings(path: Path | None = None) -> EvalSettings:
    """
    Load settings from a TOML file.

    Args:
        path: Explicit settings file. When omitted, ``sexpcalc.toml`` in the
            current directory is used if it exists.

    Returns:
        The parsed settings, or the defaults when no file applies.

    Raises:
        SettingsError: If an explicit file is missing, or any file is
            malformed or holds invalid values.
    """
    if path is None:
        candidate = Path.cwd() / SETTINGS_FILENAME
        if not candidate.exists():
            return DEFAULT_SETTINGS
        path = candidate
    elif not path.exists():
        raise SettingsError(f"Settings file not found: {path}")

    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        raise SettingsError(f"Invalid TOML in {path}: {e}") from e
    except UnicodeDecodeError as e:
        raise SettingsError(f"Settings file {path} is not valid UTF-8: {e}") from e
    except OSError as e:
        raise SettingsError(f"Cannot read settings file {path}: {e}") from e

    settings = settings_from_dict(data.get("eval", {}))
    logger.debug("Loaded settings from %s: %s", path, settings)
    return settings
