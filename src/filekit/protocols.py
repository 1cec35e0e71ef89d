"""Protocol definitions for core abstractions.

The collections in filekit never touch the os module directly. They talk to
a FileSystem, which keeps the OS behind an interface that can be replaced
with a test double.

All concrete implementations satisfy these protocols structurally (duck typing).
"""

from __future__ import annotations

import os
from typing import Protocol, runtime_checkable

from filekit.types import PathArg


@runtime_checkable
class FileSystem(Protocol):
    """Protocol for filesystem operations.

    Implementations raise OSError (or a subclass) when the OS call fails.
    Translating failures into sentinel results is the caller's job.
    """

    def is_file(self, path: PathArg) -> bool:
        """Check if a path is a regular file.

        Args:
            path: Path to check.

        Returns:
            True if path is a file, False otherwise.
        """
        ...

    def is_dir(self, path: PathArg) -> bool:
        """Check if a path is a directory.

        Args:
            path: Path to check.

        Returns:
            True if path is a directory, False otherwise.
        """
        ...

    def access(self, path: PathArg, mode: int) -> bool:
        """Check the calling user's access to a path.

        Args:
            path: Path to check.
            mode: Access flags (os.R_OK, os.W_OK, os.X_OK).

        Returns:
            True if access is granted.
        """
        ...

    def read_bytes(self, path: PathArg) -> bytes:
        """Read the full contents of a file.

        Args:
            path: Path to the file.

        Returns:
            File content as bytes.

        Raises:
            FileNotFoundError: If file does not exist.
        """
        ...

    def write_bytes(
        self, path: PathArg, data: bytes, append: bool = False, lock: bool = True
    ) -> int:
        """Write bytes to a file, creating it if absent.

        Args:
            path: Path to the file.
            data: Content to write.
            append: Append instead of replacing the content.
            lock: Hold an exclusive lock while writing.

        Returns:
            Number of bytes written.
        """
        ...

    def mkdir(
        self, path: PathArg, mode: int = 0o777, parents: bool = False, exist_ok: bool = False
    ) -> None:
        """Create a directory.

        Args:
            path: Path to create.
            mode: Permission bits for created directories (umask applies).
            parents: Create parent directories if needed.
            exist_ok: Don't raise if directory exists.
        """
        ...

    def chmod(self, path: PathArg, mode: int) -> None:
        """Change permission bits of a path.

        Args:
            path: Path to change.
            mode: New permission bits.
        """
        ...

    def chown(
        self, path: PathArg, user: str | int | None = None, group: str | int | None = None
    ) -> None:
        """Change owner and/or group of a path.

        Args:
            path: Path to change.
            user: User name or uid, None to leave unchanged.
            group: Group name or gid, None to leave unchanged.
        """
        ...

    def stat(self, path: PathArg) -> os.stat_result:
        """Return stat information for a path.

        Args:
            path: Path to inspect.

        Returns:
            The os.stat_result for the path.
        """
        ...

    def user_name(self, uid: int) -> str:
        """Return the user name for a uid.

        Raises:
            KeyError: If the uid has no name.
        """
        ...

    def group_name(self, gid: int) -> str:
        """Return the group name for a gid.

        Raises:
            KeyError: If the gid has no name.
        """
        ...

    def unlink(self, path: PathArg) -> None:
        """Remove a file.

        Args:
            path: Path to remove.
        """
        ...

    def copy_file(self, src: PathArg, dst: PathArg) -> None:
        """Copy file contents only. The destination keeps its own mode.

        A new destination gets the default mode for new files.

        Args:
            src: Source file.
            dst: Destination file.
        """
        ...

    def move(self, src: PathArg, dst: PathArg) -> None:
        """Move a file, replacing the destination if present.

        Args:
            src: Source file.
            dst: Destination path.
        """
        ...
