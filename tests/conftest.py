"""Shared fixtures: isolated settings, a fake convert process and a fixed probe."""

from __future__ import annotations

import subprocess
from pathlib import Path

import pytest

from imagick_convert.core import ImageSize
from imagick_convert.logger import setup_logger
from imagick_convert.oiio import OiioAdapter
from imagick_convert.services import Settings


class FakeRun:
    """Stand-in for subprocess.run that records every argv."""

    def __init__(self):
        self.calls: list[list[str]] = []
        self.returncode = 0
        self.stderr = ""
        self.raise_exc: Exception | None = None

    def __call__(self, argv, **kwargs):
        self.calls.append(list(argv))
        if self.raise_exc is not None:
            raise self.raise_exc
        return subprocess.CompletedProcess(argv, self.returncode, stdout="", stderr=self.stderr)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for var in ("IMAGICK_CONVERT_PROGRAM", "IMAGICK_CONVERT_TEMP_DIR", "IMAGICK_CONVERT_LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)
    # caplog listens on the root logger
    monkeypatch.setattr(setup_logger(), "propagate", True)


@pytest.fixture
def temp_dir(tmp_path: Path) -> Path:
    path = tmp_path / "system-temp"
    path.mkdir()
    return path


@pytest.fixture
def settings(tmp_path: Path, temp_dir: Path) -> Settings:
    s = Settings(tmp_path / "settings.ini")
    s.set_temp_dir(str(temp_dir))
    return s


@pytest.fixture
def fake_run(monkeypatch) -> FakeRun:
    fake = FakeRun()
    monkeypatch.setattr(subprocess, "run", fake)
    return fake


@pytest.fixture
def probe(monkeypatch):
    """Make every probed image report 400x300 PNG unless the test changes it."""
    state = {"size": ImageSize(400, 300), "format": "png"}

    def fake_probe(filepath):
        if state["size"] is None:
            return None
        return state["size"], state["format"]

    monkeypatch.setattr(OiioAdapter, "probe", staticmethod(fake_probe))
    return state


@pytest.fixture
def fixture_image(tmp_path: Path) -> Path:
    path = tmp_path / "fixture.png"
    path.write_bytes(b"\x89PNG fake image bytes")
    return path
