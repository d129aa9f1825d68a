"""Shared pytest fixtures for llog."""

from __future__ import annotations

import os
import subprocess
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

import pytest

import llog
from llog.lib.config.settings import LlogConfig

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator

    from llog.lib.runtime import Runtime

PACKAGE_ROOT = Path(__file__).resolve().parents[1]

_LLOG_ENV_VARS = (
    "LLOG_CONFIG",
    "LLOG_ENABLED",
    "LLOG_COLORS_ENABLED",
    "LLOG_COLOR_MODE",
    "LLOG_DEFAULT_COLOR",
)


@dataclass(frozen=True, slots=True)
class CliResult:
    args: tuple[str, ...]
    returncode: int
    stdout: str
    stderr: str


@pytest.fixture(autouse=True)
def _isolated_runtime(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Iterator[None]:
    for name in _LLOG_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    # Keep a stray llog.toml in the invoking directory out of the tests.
    monkeypatch.chdir(tmp_path)
    llog.reset()
    yield
    llog.reset()


@pytest.fixture
def enabled() -> Runtime:
    return llog.configure(LlogConfig(enabled=True))


@pytest.fixture
def ansi() -> Runtime:
    return llog.configure(LlogConfig(enabled=True, colors=True, color_mode="ansi"))


@pytest.fixture
def package_root() -> Path:
    return PACKAGE_ROOT


@pytest.fixture
def cli_env(package_root: Path) -> dict[str, str]:
    env = os.environ.copy()
    for name in _LLOG_ENV_VARS:
        env.pop(name, None)
    existing = env.get("PYTHONPATH", "")
    root = str(package_root / "src")
    env["PYTHONPATH"] = root if not existing else f"{root}{os.pathsep}{existing}"
    env["PYTHONIOENCODING"] = "utf-8"
    return env


@pytest.fixture
def run_llog(tmp_path: Path, cli_env: dict[str, str]) -> Callable[..., CliResult]:
    def _run(args: list[str], timeout: float = 15.0) -> CliResult:
        completed = subprocess.run(
            [sys.executable, "-m", "llog", *args],
            cwd=tmp_path,
            env=cli_env,
            capture_output=True,
            text=True,
            check=False,
            timeout=timeout,
        )
        return CliResult(
            args=tuple(args),
            returncode=completed.returncode,
            stdout=completed.stdout,
            stderr=completed.stderr,
        )

    return _run
