# SPDX-License-Identifier: MIT
"""Utilities for loading configuration and crosshair records from disk.

The helpers in this module centralise file-system access. Application
configuration is cached for the lifetime of the process, and failures are
reported through an :class:`utils.ErrorHandler` before concise exceptions
are raised to the caller.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import TypeVar

import logfire
import yaml
from pydantic import TypeAdapter, ValidationError

from models import AppConfig, ConfigRecord
from utils import ErrorHandler, LoggingErrorHandler

T = TypeVar("T")

DEFAULT_CONFIG_DIR = Path("config")
DEFAULT_CONFIG_FILE = Path("app.yaml")


def _read_file(path: Path, error_handler: ErrorHandler | None = None) -> str:
    """Return the contents of ``path``.

    Args:
        path: File location.
        error_handler: Processor for any errors encountered.

    Returns:
        The file contents.

    Raises:
        FileNotFoundError: If the file does not exist.
        RuntimeError: If the file cannot be read.
    """
    handler = error_handler or LoggingErrorHandler()
    with logfire.span("fs.read_text", attributes={"path": str(path)}):
        try:
            with path.open("r", encoding="utf-8") as file:
                text = file.read().strip()
                logfire.debug("Read text file", path=str(path), bytes=len(text))
                return text
        except FileNotFoundError as exc:
            handler.handle(f"File not found: {path}", exc)
            raise
        except OSError as exc:
            handler.handle(f"Error reading file {path}", exc)
            raise RuntimeError(
                f"An error occurred while reading the file: {exc}"
            ) from exc


def _read_yaml_file(
    path: Path,
    schema: type[T],
    error_handler: ErrorHandler | None = None,
) -> T:
    """Return YAML data loaded from ``path`` validated against ``schema``.

    An empty document validates as an empty mapping so every field falls
    back to its default.

    Args:
        path: File location.
        schema: Pydantic-compatible schema to validate against.
        error_handler: Processor for any errors encountered.
    """
    handler = error_handler or LoggingErrorHandler()
    with logfire.span("fs.read_yaml", attributes={"path": str(path)}):
        try:
            adapter = TypeAdapter(schema)
            data = yaml.safe_load(_read_file(path, handler))
            return adapter.validate_python({} if data is None else data)
        except FileNotFoundError:
            raise
        except (RuntimeError, ValidationError, yaml.YAMLError, ValueError) as exc:
            handler.handle(f"Error reading YAML file {path}", exc)
            raise RuntimeError(
                f"An error occurred while reading the YAML file: {exc}"
            ) from exc


@lru_cache(maxsize=None)
def load_app_config(
    base_dir: Path | str = DEFAULT_CONFIG_DIR,
    filename: Path | str = DEFAULT_CONFIG_FILE,
) -> AppConfig:
    """Return application configuration from ``base_dir``.

    Results are cached for the lifetime of the process.
    """
    path = Path(base_dir) / Path(filename)
    return _read_yaml_file(path, AppConfig)


def parse_record(text: str, error_handler: ErrorHandler | None = None) -> ConfigRecord:
    """Return the crosshair record described by JSON ``text``.

    Raises:
        RuntimeError: If the JSON is malformed or does not match the model.
    """
    handler = error_handler or LoggingErrorHandler()
    try:
        return ConfigRecord.model_validate_json(text)
    except ValidationError as exc:
        handler.handle("Invalid crosshair record", exc)
        raise RuntimeError(f"Invalid crosshair record: {exc}") from exc


def load_record(
    path: Path | str, error_handler: ErrorHandler | None = None
) -> ConfigRecord:
    """Return the crosshair record stored as JSON at ``path``.

    Raises:
        FileNotFoundError: If the file does not exist.
        RuntimeError: If the file cannot be read or validated.
    """
    handler = error_handler or LoggingErrorHandler()
    return parse_record(_read_file(Path(path), handler), handler)


def clear_config_cache() -> None:
    """Forget cached application configuration."""
    load_app_config.cache_clear()


__all__ = [
    "clear_config_cache",
    "load_app_config",
    "load_record",
    "parse_record",
]
