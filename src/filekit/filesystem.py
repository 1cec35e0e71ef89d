"""Filesystem abstraction for testability.

This module provides the production FileSystem. RealFileSystem wraps the
standard library os, shutil and pathlib operations and lets their errors
propagate.
"""

from __future__ import annotations

import errno
import os
import shutil
from pathlib import Path

from filekit.types import PathArg

try:
    import fcntl
    import grp
    import pwd
except ImportError:  # Windows has no advisory flock or user database
    fcntl = grp = pwd = None


class RealFileSystem:
    """Production filesystem implementation.

    Wraps standard library Path, os and shutil operations.
    Satisfies the FileSystem protocol structurally.
    """

    def is_file(self, path: PathArg) -> bool:
        """Check if a path is a regular file."""
        return os.path.isfile(path)

    def is_dir(self, path: PathArg) -> bool:
        """Check if a path is a directory."""
        return os.path.isdir(path)

    def access(self, path: PathArg, mode: int) -> bool:
        """Check the calling user's access to a path."""
        return os.access(path, mode)

    def read_bytes(self, path: PathArg) -> bytes:
        """Read the full contents of a file."""
        return Path(path).read_bytes()

    def write_bytes(
        self, path: PathArg, data: bytes, append: bool = False, lock: bool = True
    ) -> int:
        """Write bytes to a file under an optional exclusive lock.

        The file is opened without O_TRUNC so that truncation only happens
        once the lock is held.
        """
        flags = os.O_WRONLY | os.O_CREAT
        if append:
            flags |= os.O_APPEND
        fd = os.open(path, flags, 0o666)
        with os.fdopen(fd, "wb") as fh:
            if lock and fcntl is not None:
                fcntl.flock(fh.fileno(), fcntl.LOCK_EX)
            if not append:
                fh.truncate(0)
            written = fh.write(data)
            fh.flush()
        return written

    def mkdir(
        self, path: PathArg, mode: int = 0o777, parents: bool = False, exist_ok: bool = False
    ) -> None:
        """Create a directory.

        With parents, every missing ancestor is created top-down with the
        same mode. Path.mkdir would give ancestors the default mode.
        """
        target = Path(path)
        if not parents:
            target.mkdir(mode=mode, exist_ok=exist_ok)
            return

        missing: list[Path] = []
        current = Path(os.path.abspath(target))
        while not current.is_dir():
            missing.append(current)
            if current.parent == current:
                break
            current = current.parent

        if not missing and not exist_ok:
            raise FileExistsError(errno.EEXIST, os.strerror(errno.EEXIST), os.fspath(path))

        for directory in reversed(missing):
            try:
                directory.mkdir(mode=mode)
            except FileExistsError:
                # Lost a race to another creator; only a directory is acceptable
                if not directory.is_dir():
                    raise

    def chmod(self, path: PathArg, mode: int) -> None:
        """Change permission bits of a path."""
        os.chmod(path, mode)

    def chown(
        self, path: PathArg, user: str | int | None = None, group: str | int | None = None
    ) -> None:
        """Change owner and/or group of a path."""
        shutil.chown(path, user=user, group=group)

    def stat(self, path: PathArg) -> os.stat_result:
        """Return stat information for a path."""
        return os.stat(path)

    def user_name(self, uid: int) -> str:
        """Return the user name for a uid."""
        if pwd is None:
            raise KeyError(f"no user database: {uid}")
        return pwd.getpwuid(uid).pw_name

    def group_name(self, gid: int) -> str:
        """Return the group name for a gid."""
        if grp is None:
            raise KeyError(f"no group database: {gid}")
        return grp.getgrgid(gid).gr_name

    def unlink(self, path: PathArg) -> None:
        """Remove a file."""
        os.unlink(path)

    def copy_file(self, src: PathArg, dst: PathArg) -> None:
        """Copy file contents only."""
        shutil.copyfile(src, dst)

    def move(self, src: PathArg, dst: PathArg) -> None:
        """Move a file, replacing the destination if present."""
        shutil.move(os.fspath(src), os.fspath(dst))
