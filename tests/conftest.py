"""Pytest configuration and shared fixtures."""

import json
import logging
import os
import shutil
import tempfile
from collections.abc import Callable
from pathlib import Path
from typing import Any, Generator

import pytest

import stdprobe.core.config.settings as settings_module
from stdprobe.core.config.settings import DetectorSettings, Settings, get_settings
from stdprobe.core.logger.logger import LOGGER_NAMESPACE


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory that is cleaned up after the test.

    Yields:
        Path to the temporary directory.
    """
    temp_path = Path(tempfile.mkdtemp())
    yield temp_path
    shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture(autouse=True)
def isolated_settings(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> Generator[None, None, None]:
    """Keep STDPROBE_* variables and settings files out of tests.

    Also resets the stdprobe logger configured by CLI invocations.
    """
    for key in list(os.environ):
        if key.startswith("STDPROBE_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(settings_module, "DEFAULT_CONFIG_PATHS", [Path("stdprobe.yaml")])
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()

    logger = logging.getLogger(LOGGER_NAMESPACE)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


@pytest.fixture
def detector_settings() -> DetectorSettings:
    """Detector settings with built-in defaults."""
    return DetectorSettings()


@pytest.fixture
def settings() -> Settings:
    """Application settings with built-in defaults."""
    return Settings()


@pytest.fixture
def write_compile_commands() -> Callable[[Path, Any], Path]:
    """Return a helper that writes compile_commands.json into a directory."""

    def _write(directory: Path, records: Any) -> Path:
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / "compile_commands.json"
        if isinstance(records, str):
            path.write_text(records, encoding="utf-8")
        else:
            path.write_text(json.dumps(records), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def write_cmake() -> Callable[[Path, str], Path]:
    """Return a helper that writes CMakeLists.txt into a directory."""

    def _write(directory: Path, content: str) -> Path:
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / "CMakeLists.txt"
        path.write_text(content, encoding="utf-8")
        return path

    return _write
