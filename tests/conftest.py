"""Shared test fixtures."""

from __future__ import annotations

import os
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from filekit.directories import Directories
from filekit.files import Files
from filekit.filesystem import RealFileSystem

# Root bypasses permission bits, so denial cannot be observed
requires_non_root = pytest.mark.skipif(
    hasattr(os, "geteuid") and os.geteuid() == 0,
    reason="permission checks are bypassed for root",
)

posix_only = pytest.mark.skipif(os.name != "posix", reason="requires POSIX ids and modes")


@pytest.fixture
def temp_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Override home directory and default config location for testing."""
    from filekit import config

    monkeypatch.setattr(Path, "home", lambda: tmp_path)
    monkeypatch.setattr(config, "CONFIG_DIR", tmp_path / ".filekit")
    return tmp_path


# ============================================================================
# Real Filesystem Fixtures
# ============================================================================


@pytest.fixture
def fs() -> RealFileSystem:
    """Create a real filesystem."""
    return RealFileSystem()


@pytest.fixture
def directories(fs: RealFileSystem) -> Directories:
    """Create directory helpers over the real filesystem."""
    return Directories.create(fs)


@pytest.fixture
def files(fs: RealFileSystem, directories: Directories) -> Files:
    """Create file helpers over the real filesystem."""
    return Files.create(fs, directories=directories)


@pytest.fixture
def test_file(tmp_path: Path) -> Path:
    """Path of a file that does not exist yet."""
    return tmp_path / "file.txt"


@pytest.fixture
def restore_modes():
    """Collect paths whose mode a test changes and make them writable again."""
    paths: list[Path] = []
    yield paths
    for path in paths:
        if path.exists():
            os.chmod(path, 0o755 if path.is_dir() else 0o644)


# ============================================================================
# Mock FileSystem Fixture
# ============================================================================


@pytest.fixture
def mock_filesystem() -> MagicMock:
    """Create a mock FileSystem for testing.

    The mock tracks all filesystem operations without touching real files.
    """
    mock_fs = MagicMock()
    mock_fs.is_file.return_value = False
    mock_fs.is_dir.return_value = False
    mock_fs.access.return_value = True
    mock_fs.read_bytes.return_value = b""
    return mock_fs
