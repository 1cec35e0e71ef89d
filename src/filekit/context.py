"""Application context for dependency injection.

This module separates object creation from object use. The CLI builds one
AppContext per invocation; tests construct it directly with test doubles.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from filekit.config import Settings, load_settings
from filekit.directories import Directories
from filekit.files import Files
from filekit.protocols import FileSystem


def _default_filesystem() -> FileSystem:
    """Create the default filesystem implementation."""
    from filekit.filesystem import RealFileSystem
    return RealFileSystem()


@dataclass
class AppContext:
    """Container for application dependencies.

    The collections are typed concretely; the filesystem beneath them is
    typed by its Protocol so any test double can be injected.
    """

    files: Files
    directories: Directories
    settings: Settings = field(default_factory=Settings)
    filesystem: FileSystem = field(default_factory=_default_filesystem)


def create_context(
    config_path: Path | None = None,
    filesystem: FileSystem | None = None,
) -> AppContext:
    """Factory for application dependencies.

    Args:
        config_path: Override config file (defaults to ~/.filekit/config.json
            when present).
        filesystem: Override the filesystem implementation.

    Returns:
        Configured AppContext with all dependencies sharing one filesystem.
    """
    settings = load_settings(config_path)
    fs = filesystem or _default_filesystem()
    directories = Directories.create(fs, default_mode=settings.directory_mode)
    files = Files.create(
        fs,
        directories=directories,
        encoding=settings.encoding,
        lock_writes=settings.lock_writes,
    )

    return AppContext(
        files=files,
        directories=directories,
        settings=settings,
        filesystem=fs,
    )
