"""Directory helpers.

File operations are intentionally left to filekit.files.
"""

from __future__ import annotations

import logging
import os

from filekit.filesystem import RealFileSystem
from filekit.protocols import FileSystem
from filekit.types import PathArg

logger = logging.getLogger(__name__)

DEFAULT_MODE = 0o777


class Directories:
    """Existence, permission and creation helpers for directories.

    Every method returns a boolean. OS failures are logged and reported as
    False instead of raising.
    """

    def __init__(self, filesystem: FileSystem, default_mode: int = DEFAULT_MODE) -> None:
        """Initialize with a filesystem.

        Args:
            filesystem: Filesystem abstraction (required).
            default_mode: Mode used by mkdir when none is given.

        Note:
            Use factory method `create()` for production code.
        """
        self.fs = filesystem
        self.default_mode = default_mode

    @classmethod
    def create(
        cls, filesystem: FileSystem | None = None, default_mode: int = DEFAULT_MODE
    ) -> Directories:
        """Factory method for production instantiation.

        Args:
            filesystem: Optional filesystem abstraction (created if not provided).
            default_mode: Mode used by mkdir when none is given.

        Returns:
            Configured Directories instance.
        """
        return cls(filesystem=filesystem or RealFileSystem(), default_mode=default_mode)

    def exists(self, path: PathArg) -> bool:
        """Check if a directory exists."""
        return self.fs.is_dir(path)

    def is_readable(self, path: PathArg) -> bool:
        """Check if the path is a directory that can be read."""
        return self.fs.is_dir(path) and self.fs.access(path, os.R_OK)

    def is_writable(self, path: PathArg) -> bool:
        """Check if the path is a directory that can be written to."""
        return self.fs.is_dir(path) and self.fs.access(path, os.W_OK)

    def mkdir(self, path: PathArg, mode: int | None = None) -> bool:
        """Create a directory along with any missing parents.

        Args:
            path: Directory to create.
            mode: Permission bits for created directories. The process
                umask still applies. Defaults to `default_mode`.

        Returns:
            True if the directory exists afterwards, False on failure.
        """
        if self.fs.is_dir(path):
            return True

        try:
            self.fs.mkdir(
                path,
                mode=self.default_mode if mode is None else mode,
                parents=True,
                exist_ok=True,
            )
        except OSError as e:
            logger.debug("mkdir failed for %s: %s", path, e)
            return False
        return True

    def chmod(self, path: PathArg, mode: int) -> bool:
        """Change the mode of a directory.

        Args:
            path: Directory to change.
            mode: New permission bits.

        Returns:
            True on success, False if path is not a directory or chmod fails.
        """
        if not self.fs.is_dir(path):
            return False

        try:
            self.fs.chmod(path, mode)
        except OSError as e:
            logger.debug("chmod failed for directory %s: %s", path, e)
            return False
        return True
