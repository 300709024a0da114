"""Converter options and environment loading.

Defaults reproduce the documented conversion behaviour exactly; the
environment is only consulted when a caller asks for ConverterOptions.from_env().
"""

import logging
import os
from pathlib import Path

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, ConfigDict, Field

logger = logging.getLogger(__name__)

ENV_PREFIX = "HTML_TABLE_MD_"

# Columns whose widest cell is below this many code points are elided
DEFAULT_MIN_COLUMN_WIDTH = 2

# Floor on the dash run of each thead separator segment
DEFAULT_MIN_SEPARATOR_DASHES = 3

# Added to the trimmed label length for each thead separator segment
DEFAULT_SEPARATOR_PADDING = 2

_TRUE_VALUES = ("1", "true", "yes", "on")


class ConverterOptions(BaseModel):
    """Tunable knobs for TableConverter."""

    model_config = ConfigDict(frozen=True)

    min_column_width: int = Field(default=DEFAULT_MIN_COLUMN_WIDTH, ge=0)
    min_separator_dashes: int = Field(default=DEFAULT_MIN_SEPARATOR_DASHES, ge=1)
    separator_padding: int = Field(default=DEFAULT_SEPARATOR_PADDING, ge=0)
    escape_pipes: bool = True

    @classmethod
    def from_env(cls, env_file: Path | None = None) -> "ConverterOptions":
        """Build options from HTML_TABLE_MD_* variables, loading a .env file first.

        Without *env_file*, the nearest .env at or above the working directory
        is used, if any.

        Unset variables keep their defaults.  Malformed values surface as a
        pydantic ValidationError.
        """
        dotenv_path = env_file if env_file is not None else find_dotenv(usecwd=True)
        if dotenv_path:
            load_dotenv(dotenv_path)

        overrides: dict[str, object] = {}
        for name in ("min_column_width", "min_separator_dashes", "separator_padding"):
            raw = os.getenv(ENV_PREFIX + name.upper())
            if raw is not None and raw.strip():
                overrides[name] = raw.strip()

        raw_escape = os.getenv(ENV_PREFIX + "ESCAPE_PIPES")
        if raw_escape is not None and raw_escape.strip():
            overrides["escape_pipes"] = raw_escape.strip().lower() in _TRUE_VALUES

        if overrides:
            logger.debug("Converter options overridden from environment: %s", sorted(overrides))
        return cls(**overrides)
