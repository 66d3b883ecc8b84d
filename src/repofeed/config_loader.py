"""Configuration loading for repofeed.

Settings live in an optional YAML file.  Every key is optional; a missing
file path means defaults throughout.
"""

from __future__ import annotations

import codecs
from pathlib import Path
from typing import Annotated, Optional, Tuple

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .discovery.engine import DEFAULT_SKIP_DIRS
from .errors import ConfigurationError
from .supervisor.manager import DEFAULT_MAX_WORKERS

DirName = Annotated[str, Field(min_length=1)]


class Settings(BaseModel):
    model_config = ConfigDict(extra='forbid', frozen=True)

    max_workers: int = Field(default=DEFAULT_MAX_WORKERS, ge=1, strict=True)
    skip_dirs: Tuple[DirName, ...] = DEFAULT_SKIP_DIRS
    encoding: str = 'utf-8'
    decode_errors: str = 'replace'

    @field_validator('encoding')
    @classmethod
    def _known_codec(cls, value: str) -> str:
        try:
            codecs.lookup(value)
        except LookupError as err:
            raise ValueError(f'unknown encoding {value!r}') from err
        return value

    @field_validator('decode_errors')
    @classmethod
    def _known_error_handler(cls, value: str) -> str:
        try:
            codecs.lookup_error(value)
        except LookupError as err:
            raise ValueError(f'unknown decode error handler {value!r}') from err
        return value


def load_config(path: Optional[Path] = None) -> Settings:
    """Load settings from ``path``, or return defaults when it is ``None``."""
    if path is None:
        return Settings()
    try:
        with path.open('r', encoding='utf-8') as f:
            data = yaml.safe_load(f)
    except OSError as err:
        raise ConfigurationError(f'Cannot read configuration file {path}: {err}') from err
    except yaml.YAMLError as err:
        raise ConfigurationError(f'Invalid YAML in {path}: {err}') from err
    if data is None:
        return Settings()
    if not isinstance(data, dict):
        raise ConfigurationError(f'Configuration file {path} must contain a mapping')
    try:
        return Settings(**data)
    except ValidationError as err:
        raise ConfigurationError(f'Invalid configuration in {path}: {err}') from err
