"""Process-wide llog runtime: the resolved gate plus the selected color driver."""

from __future__ import annotations

import threading
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

from llog.lib.colors import COLOR_MODES, Color, ColorDriver, select_color_driver
from llog.lib.config.settings import LlogConfig, load_config
from llog.lib.logging import get_logger

if TYPE_CHECKING:
    from pathlib import Path

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class Runtime:
    config: LlogConfig
    driver: ColorDriver

    @property
    def enabled(self) -> bool:
        return self.config.enabled

    @property
    def default_color(self) -> Color:
        return self.config.default_color

    def set_color(self, color: Color | None = None) -> None:
        self.driver.apply(self.default_color if color is None else color)


_runtime: Runtime | None = None
_init_lock = threading.Lock()


def build_runtime(config: LlogConfig) -> Runtime:
    return Runtime(config=config, driver=select_color_driver(config))


def _load_config_or_defaults() -> LlogConfig:
    try:
        return load_config()
    except (OSError, ValueError) as exc:
        # Implicit setup must not break the caller; llog stays disabled.
        logger.warning("llog config unusable, logging disabled", error=str(exc))
        return LlogConfig()


def get_runtime() -> Runtime:
    """Return the current runtime, initializing it from config on first use.

    A config file or environment override that cannot be loaded leaves the
    runtime on the disabled defaults; `configure()` still raises for it.
    """

    global _runtime
    current = _runtime
    if current is not None:
        return current
    with _init_lock:
        if _runtime is None:
            _runtime = build_runtime(_load_config_or_defaults())
            logger.debug(
                "llog initialized",
                enabled=_runtime.config.enabled,
                colors=_runtime.config.colors,
            )
        return _runtime


def configure(
    config: LlogConfig | None = None,
    *,
    config_path: Path | None = None,
    enabled: bool | None = None,
    colors: bool | None = None,
    color_mode: str | None = None,
    default_color: Color | None = None,
) -> Runtime:
    """Rebuild the runtime from `config` (or loaded config) plus overrides."""

    global _runtime
    base = config if config is not None else load_config(config_path)
    overrides: dict[str, object] = {}
    if enabled is not None:
        overrides["enabled"] = enabled
    if colors is not None:
        overrides["colors"] = colors
    if color_mode is not None:
        if color_mode not in COLOR_MODES:
            raise ValueError(
                f"Unknown color mode {color_mode!r}; expected one of: {sorted(COLOR_MODES)}."
            )
        overrides["color_mode"] = color_mode
    if default_color is not None:
        overrides["default_color"] = default_color
    resolved = replace(base, **overrides) if overrides else base
    runtime = build_runtime(resolved)
    with _init_lock:
        _runtime = runtime
    return runtime


def reset() -> None:
    """Drop the runtime so the next call re-reads configuration."""

    global _runtime
    with _init_lock:
        _runtime = None


def set_color(color: Color | None = None) -> None:
    """Apply `color`, or restore the process-wide default color when None."""

    runtime = get_runtime()
    if not runtime.enabled:
        return
    runtime.set_color(color)
