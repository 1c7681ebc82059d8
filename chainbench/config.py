"""Run configuration: defaults, an optional config file, and merging."""

from __future__ import annotations

import dataclasses
import json
import os
import tomllib
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from .logs import NORMAL_FORMAT, LogLevel

_SEARCH_EXTENSIONS = ("json", "toml", "yaml", "yml")
_TRUE = {"1", "t", "T", "TRUE", "true", "True"}
_FALSE = {"0", "f", "F", "FALSE", "false", "False", ""}

# (attribute name, config-file key) pairs for the plain string settings.
_STRING_SETTINGS = (
    ("output_file_path", "output_path"),
    ("output_template_file_path", "output_template_path"),
    ("repository_url", "repository_url"),
    ("access_token", "access_token"),
)


@dataclass
class LogConfiguration:
    log_file_path: str = ""
    log_level: LogLevel | str = ""
    log_format: str = ""
    no_color: bool = False


@dataclass
class Configuration:
    log_configuration: LogConfiguration | None = None
    output_file_path: str = ""
    output_template_file_path: str = ""
    repository_url: str = ""
    access_token: str = ""

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any] | None) -> Configuration:
        """Build a configuration from config-file keys (matched case-insensitively)."""
        values = _lower_keys(data, "configuration")
        logs = values.get("logs")
        strings = {
            attribute: _as_str(values.get(key), key) for attribute, key in _STRING_SETTINGS
        }
        return cls(
            log_configuration=None if logs is None else _log_configuration_from(logs),
            **strings,
        )


def _invalid(detail: str) -> ValueError:
    return ValueError(f"failed to load config to object - {detail}")


def _lower_keys(data: Any, name: str) -> dict[str, Any]:
    if data is None:
        return {}
    if not isinstance(data, Mapping):
        raise _invalid(f"'{name}' expected a map, got '{type(data).__name__}'")
    return {str(key).lower(): value for key, value in data.items()}


def _as_str(value: Any, name: str) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, (str, int, float)):
        return str(value)
    raise _invalid(f"'{name}' expected a string, got '{type(value).__name__}'")


def _as_bool(value: Any, name: str) -> bool:
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return value != 0
    if isinstance(value, str):
        if value in _TRUE:
            return True
        if value in _FALSE:
            return False
    raise _invalid(f"'{name}' expected a bool, got {value!r}")


def _log_configuration_from(data: Any) -> LogConfiguration:
    values = _lower_keys(data, "logs")
    return LogConfiguration(
        log_file_path=_as_str(values.get("log_path"), "log_path"),
        log_level=_as_str(values.get("log_level"), "log_level"),
        log_format=_as_str(values.get("log_format"), "log_format"),
        no_color=_as_bool(values.get("no_color"), "no_color"),
    )


def _parse(path: Path) -> Any:
    extension = path.suffix.lstrip(".").lower()
    if extension not in _SEARCH_EXTENSIONS:
        raise ValueError(f'Unsupported Config Type "{extension}"')
    text = path.read_text(encoding="utf-8")
    try:
        if extension == "json":
            return json.loads(text) if text.strip() else None
        if extension == "toml":
            return tomllib.loads(text)
        return yaml.safe_load(text)
    except (json.JSONDecodeError, tomllib.TOMLDecodeError, yaml.YAMLError) as exc:
        raise ValueError(f"While parsing config: {exc}") from exc


def load_default_configuration() -> Configuration:
    return Configuration(
        log_configuration=LogConfiguration(log_level=LogLevel.INFO, log_format=NORMAL_FORMAT)
    )


def load_config_file(config_file_path: str) -> Configuration | None:
    """Read the given config file, or ``config.<ext>`` in the working directory.

    Returns ``None`` when no path was given and no config file was found.
    An explicitly given file that is missing raises ``FileNotFoundError``.
    """
    if config_file_path:
        path = Path(config_file_path)
    else:
        cwd = Path(os.getcwd())
        path = next(
            (candidate for ext in _SEARCH_EXTENSIONS if (candidate := cwd / f"config.{ext}").is_file()),
            None,
        )
        if path is None:
            return None
    return Configuration.from_mapping(_parse(path))


def _is_empty(value: Any) -> bool:
    return value is None or value is False or value == 0 or value == "" or (
        isinstance(value, (list, dict, tuple, set)) and not value
    )


def merge(dst: Any, src: Any, override: bool = False) -> Any:
    """Fill empty fields of ``dst`` from ``src``, recursing into nested dataclasses.

    With ``override`` a non-empty ``src`` value replaces ``dst``'s as well.
    ``dst`` is changed in place and returned.
    """
    if type(dst) is not type(src):
        raise TypeError(
            f"src and dst must be of same type: {type(dst).__name__} != {type(src).__name__}"
        )
    for f in dataclasses.fields(dst):
        current = getattr(dst, f.name)
        incoming = getattr(src, f.name)
        if (
            dataclasses.is_dataclass(current)
            and dataclasses.is_dataclass(incoming)
            and type(current) is type(incoming)
        ):
            merge(current, incoming, override)
        elif not _is_empty(incoming) and (override or _is_empty(current)):
            setattr(dst, f.name, incoming)
    return dst


def load_configuration(config_file_path: str) -> Configuration:
    """Load the config file (if any) and fill its gaps with the defaults."""
    loaded = load_config_file(config_file_path)
    default = load_default_configuration()
    if loaded is None:
        return default
    return merge(loaded, default)