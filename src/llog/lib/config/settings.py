"""Process-level llog settings loader."""

from __future__ import annotations

import logging
import os
import tomllib
from dataclasses import dataclass, fields
from pathlib import Path
from typing import cast

from llog.lib.colors import COLOR_MODES, Color, ColorMode, parse_color

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILENAME = "llog.toml"
CONFIG_PATH_ENV = "LLOG_CONFIG"


@dataclass(frozen=True, slots=True)
class LlogConfig:
    """Resolved switches for one llog runtime.

    `enabled` gates every entry point; `colors` gates the color driver only.
    Both are off unless explicitly turned on.
    """

    enabled: bool = False
    colors: bool = False
    color_mode: ColorMode = "auto"
    default_color: Color = Color.HIGH_INTENSITY_WHITE


_TOP_LEVEL_KEY_MAP: dict[str, str] = {
    "enabled": "enabled",
    "enable_logging": "enabled",
    "colors": "colors",
    "enable_colors": "colors",
    "color_mode": "color_mode",
    "default_color": "default_color",
}

_ENV_OVERRIDE_MAP: dict[str, str] = {
    "LLOG_ENABLED": "enabled",
    "LLOG_COLORS_ENABLED": "colors",
    "LLOG_COLOR_MODE": "color_mode",
    "LLOG_DEFAULT_COLOR": "default_color",
}

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


def _expected_type_name(field_name: str) -> str:
    if field_name in {"enabled", "colors"}:
        return "bool"
    if field_name == "default_color":
        return "color"
    return "mode"


def _coerce_mode(*, raw_value: str, source: str) -> str:
    normalized = raw_value.strip().lower()
    if normalized not in COLOR_MODES:
        raise ValueError(
            f"Invalid value for '{source}': expected one of {sorted(COLOR_MODES)}, "
            f"got {raw_value!r}."
        )
    return normalized


def _coerce_color(*, raw_value: str, source: str) -> Color:
    try:
        return parse_color(raw_value)
    except ValueError as error:
        raise ValueError(f"Invalid value for '{source}': {error}") from error


def _coerce_file_value(*, field_name: str, raw_value: object, source: str) -> object:
    expected = _expected_type_name(field_name)
    if expected == "bool":
        if not isinstance(raw_value, bool):
            raise ValueError(
                f"Invalid value for '{source}': expected bool, got "
                f"{type(raw_value).__name__} ({raw_value!r})."
            )
        return raw_value

    if not isinstance(raw_value, str):
        raise ValueError(
            f"Invalid value for '{source}': expected str, got "
            f"{type(raw_value).__name__} ({raw_value!r})."
        )
    if expected == "color":
        return _coerce_color(raw_value=raw_value, source=source)
    return _coerce_mode(raw_value=raw_value, source=source)


def _coerce_env_value(*, field_name: str, raw_value: str, env_name: str) -> object:
    expected = _expected_type_name(field_name)
    if expected == "bool":
        normalized = raw_value.strip().lower()
        if normalized in _TRUE_VALUES:
            return True
        if normalized in _FALSE_VALUES:
            return False
        raise ValueError(
            f"Invalid environment override '{env_name}': expected bool, got {raw_value!r}."
        )

    if expected == "color":
        return _coerce_color(raw_value=raw_value, source=env_name)
    return _coerce_mode(raw_value=raw_value, source=env_name)


def _default_values() -> dict[str, object]:
    defaults = LlogConfig()
    return {field.name: getattr(defaults, field.name) for field in fields(LlogConfig)}


def _apply_toml_payload(
    *,
    values: dict[str, object],
    payload: dict[str, object],
    path: Path,
) -> None:
    for key, raw_value in payload.items():
        if key == "llog":
            if not isinstance(raw_value, dict):
                raise ValueError(f"Invalid value for 'llog' in '{path}': expected table.")
            _apply_toml_payload(
                values=values,
                payload=cast("dict[str, object]", raw_value),
                path=path,
            )
            continue

        field_name = _TOP_LEVEL_KEY_MAP.get(key)
        if field_name is None:
            logger.warning("Ignoring unknown llog config key '%s'.", key)
            continue
        values[field_name] = _coerce_file_value(
            field_name=field_name,
            raw_value=raw_value,
            source=key,
        )


def _apply_env_overrides(values: dict[str, object]) -> None:
    for env_name, field_name in _ENV_OVERRIDE_MAP.items():
        raw_value = os.getenv(env_name)
        if raw_value is None:
            continue
        values[field_name] = _coerce_env_value(
            field_name=field_name,
            raw_value=raw_value,
            env_name=env_name,
        )


def _build_config(values: dict[str, object]) -> LlogConfig:
    return LlogConfig(
        enabled=cast("bool", values["enabled"]),
        colors=cast("bool", values["colors"]),
        color_mode=cast("ColorMode", values["color_mode"]),
        default_color=cast("Color", values["default_color"]),
    )


def resolve_config_path(explicit: Path | None = None) -> Path:
    """Resolve the config file location.

    Precedence:
    1. Explicit function argument.
    2. `LLOG_CONFIG` environment variable.
    3. `llog.toml` in the current working directory.
    """

    if explicit is not None:
        return explicit.expanduser()
    env_path = os.getenv(CONFIG_PATH_ENV)
    if env_path:
        return Path(env_path).expanduser()
    return Path.cwd() / DEFAULT_CONFIG_FILENAME


def load_config(path: Path | None = None) -> LlogConfig:
    """Load `llog.toml` and apply environment overrides."""

    values = _default_values()
    config_path = resolve_config_path(path)
    if config_path.is_file():
        payload_obj = tomllib.loads(config_path.read_text(encoding="utf-8"))
        payload = cast("dict[str, object]", payload_obj)
        _apply_toml_payload(values=values, payload=payload, path=config_path)

    _apply_env_overrides(values)
    return _build_config(values)
