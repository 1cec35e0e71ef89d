"""File helpers.

Directory operations are intentionally left to filekit.directories, except
that copy and move create the destination's parent directories.
"""

from __future__ import annotations

import logging
import os
import stat
from typing import TypeVar

from filekit.directories import Directories
from filekit.filesystem import RealFileSystem
from filekit.protocols import FileSystem
from filekit.types import FileInfo, PathArg

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Files:
    """Read, write and metadata helpers for regular files.

    Expected failures (missing file, denied permission, a directory where a
    file was expected) never raise. Predicates and mutations return False,
    value-returning queries return None or the caller's default.
    """

    def __init__(
        self,
        filesystem: FileSystem,
        directories: Directories,
        encoding: str = "utf-8",
        lock_writes: bool = True,
    ) -> None:
        """Initialize with required dependencies.

        Args:
            filesystem: Filesystem abstraction (required).
            directories: Used by copy and move to create destination parents.
            encoding: Encoding for str content in get, put and append.
            lock_writes: Take an exclusive lock while writing.

        Note:
            Use factory method `create()` for production code.
            Direct construction is for testing with explicit dependencies.
        """
        self.fs = filesystem
        self.directories = directories
        self.encoding = encoding
        self.lock_writes = lock_writes

    @classmethod
    def create(
        cls,
        filesystem: FileSystem | None = None,
        directories: Directories | None = None,
        encoding: str = "utf-8",
        lock_writes: bool = True,
    ) -> Files:
        """Factory method for production instantiation.

        Args:
            filesystem: Optional filesystem abstraction (created if not provided).
            directories: Optional directory helpers sharing the same filesystem.
            encoding: Encoding for str content.
            lock_writes: Take an exclusive lock while writing.

        Returns:
            Configured Files instance.
        """
        fs = filesystem or RealFileSystem()
        return cls(
            filesystem=fs,
            directories=directories or Directories.create(fs),
            encoding=encoding,
            lock_writes=lock_writes,
        )

    # ------------------------------------------------------------------
    # Checks
    # ------------------------------------------------------------------

    def exists(self, path: PathArg) -> bool:
        """Check if the file exists. Directories do not count."""
        return self.fs.is_file(path)

    def is_readable(self, path: PathArg) -> bool:
        """Check if the file exists and can be opened for reading."""
        return self.fs.is_file(path) and self.fs.access(path, os.R_OK)

    def is_writable(self, path: PathArg) -> bool:
        """Check if the file exists and can be written to."""
        return self.fs.is_file(path) and self.fs.access(path, os.W_OK)

    # ------------------------------------------------------------------
    # Content
    # ------------------------------------------------------------------

    def get_bytes(self, path: PathArg, default: T | None = None) -> bytes | T | None:
        """Get the exact contents of a file.

        Args:
            path: File to read.
            default: Returned when the file is missing or unreadable.

        Returns:
            File content as bytes, or default.
        """
        if not self.is_readable(path):
            return default

        try:
            return self.fs.read_bytes(path)
        except OSError as e:
            logger.debug("read failed for %s: %s", path, e)
            return default

    def get(self, path: PathArg, default: T | None = None) -> str | T | None:
        """Get the text contents of a file.

        Args:
            path: File to read.
            default: Returned when the file is missing, unreadable or
                cannot be decoded with the configured encoding.

        Returns:
            File content as str, or default.
        """
        data = self.get_bytes(path)
        if data is None:
            return default

        try:
            return data.decode(self.encoding)
        except UnicodeDecodeError as e:
            logger.debug("cannot decode %s as %s: %s", path, self.encoding, e)
            return default

    read = get

    def _encode(self, data: str | bytes) -> bytes:
        if isinstance(data, str):
            return data.encode(self.encoding)
        if isinstance(data, (bytes, bytearray, memoryview)):
            return bytes(data)
        raise TypeError(f"data must be str or bytes, not {type(data).__name__}")

    def put(self, path: PathArg, data: str | bytes, mode: int | None = None) -> int | None:
        """Write data to a file, replacing its content.

        If mode is given, it is applied ONLY when the file did not exist
        before the call. The file is created first and chmod-ed afterwards,
        so another process may briefly see it with default permissions.

        Args:
            path: File to write.
            data: Text (encoded with the configured encoding) or bytes.
            mode: Permission bits for a newly created file.

        Returns:
            Number of bytes (not characters) written, or None on failure.
        """
        apply_mode = mode is not None and not self.fs.is_file(path)

        try:
            written = self.fs.write_bytes(path, self._encode(data), lock=self.lock_writes)
        except OSError as e:
            logger.debug("write failed for %s: %s", path, e)
            return None

        if apply_mode and not self.chmod(path, mode):
            logger.debug("could not apply mode %o to new file %s", mode, path)
        return written

    write = put

    def append(self, path: PathArg, data: str | bytes) -> int | None:
        """Append data to a file, creating it if absent.

        Args:
            path: File to append to.
            data: Text or bytes.

        Returns:
            Number of bytes written, or None on failure.
        """
        try:
            return self.fs.write_bytes(
                path, self._encode(data), append=True, lock=self.lock_writes
            )
        except OSError as e:
            logger.debug("append failed for %s: %s", path, e)
            return None

    # ------------------------------------------------------------------
    # Copy, move, delete
    # ------------------------------------------------------------------

    def _prepare_destination(self, destination: PathArg, overwrite: bool) -> bool:
        if self.fs.is_dir(destination):
            return False
        if self.fs.is_file(destination) and not overwrite:
            return False
        parent = os.path.dirname(os.path.abspath(destination))
        return self.directories.mkdir(parent)

    def copy(self, source: PathArg, destination: PathArg, overwrite: bool = False) -> bool:
        """Copy a file.

        Args:
            source: File to copy. Must be readable.
            destination: Target path. Missing parent directories are created.
            overwrite: Replace destination if it already exists.

        Returns:
            True on success. False if source is unreadable, destination
            exists and overwrite is False, or the copy fails.
        """
        if not self.is_readable(source):
            return False
        if not self._prepare_destination(destination, overwrite):
            return False

        try:
            self.fs.copy_file(source, destination)
        except OSError as e:
            logger.debug("copy %s -> %s failed: %s", source, destination, e)
            return False
        return True

    def move(self, source: PathArg, destination: PathArg, overwrite: bool = False) -> bool:
        """Move a file.

        Args:
            source: File to move. Must exist.
            destination: Target path. Missing parent directories are created.
            overwrite: Replace destination if it already exists.

        Returns:
            True on success, after which source no longer exists.
        """
        if not self.fs.is_file(source):
            return False
        if not self._prepare_destination(destination, overwrite):
            return False

        try:
            self.fs.move(source, destination)
        except OSError as e:
            logger.debug("move %s -> %s failed: %s", source, destination, e)
            return False
        return True

    def delete(self, path: PathArg) -> bool:
        """Delete a file.

        Returns:
            True if the file was removed or was not there to begin with.
        """
        if not self.fs.is_file(path):
            return True

        try:
            self.fs.unlink(path)
        except OSError as e:
            logger.debug("delete failed for %s: %s", path, e)
            return False
        return True

    # ------------------------------------------------------------------
    # Mode and ownership
    # ------------------------------------------------------------------

    def chmod(self, path: PathArg, mode: int) -> bool:
        """Change file mode.

        Paths that are not files are rejected, since os.chmod would happily
        change a directory too.

        Returns:
            True on success, False on failure.
        """
        if not self.fs.is_file(path):
            return False

        try:
            self.fs.chmod(path, mode)
        except OSError as e:
            logger.debug("chmod failed for %s: %s", path, e)
            return False
        return True

    def chown(self, path: PathArg, user: str | int | None) -> bool:
        """Change file owner.

        Args:
            path: File to change.
            user: User name or uid.

        Returns:
            True on success, False on failure.
        """
        if user is None or not self.fs.is_file(path):
            return False

        try:
            self.fs.chown(path, user=user)
        except (OSError, LookupError) as e:
            logger.debug("chown failed for %s: %s", path, e)
            return False
        return True

    def chgrp(self, path: PathArg, group: str | int | None) -> bool:
        """Change file group.

        Args:
            path: File to change.
            group: Group name or gid.

        Returns:
            True on success, False on failure.
        """
        if group is None or not self.fs.is_file(path):
            return False

        try:
            self.fs.chown(path, group=group)
        except (OSError, LookupError) as e:
            logger.debug("chgrp failed for %s: %s", path, e)
            return False
        return True

    # ------------------------------------------------------------------
    # Metadata
    # ------------------------------------------------------------------

    def _stat(self, path: PathArg) -> os.stat_result | None:
        if not self.fs.is_file(path):
            return None
        try:
            return self.fs.stat(path)
        except OSError as e:
            logger.debug("stat failed for %s: %s", path, e)
            return None

    def mtime(self, path: PathArg) -> int | None:
        """Get last modification time in whole seconds, None on failure."""
        st = self._stat(path)
        return int(st.st_mtime) if st else None

    modified = mtime

    def ext(self, path: PathArg) -> str | None:
        """Get the file extension.

        Returns:
            Text after the last dot of the file name ("" if there is none),
            or None if path is not an existing file.
        """
        if not self.fs.is_file(path):
            return None
        name = os.path.basename(os.fspath(path))
        if "." not in name:
            return ""
        return name.rsplit(".", 1)[1]

    def get_uid(self, path: PathArg) -> int | None:
        """Get the numeric owner id."""
        st = self._stat(path)
        return st.st_uid if st else None

    def get_gid(self, path: PathArg) -> int | None:
        """Get the numeric group id."""
        st = self._stat(path)
        return st.st_gid if st else None

    def _user_name(self, uid: int) -> str | None:
        try:
            return self.fs.user_name(uid)
        except KeyError as e:
            logger.debug("no user name for uid %s: %s", uid, e)
            return None

    def _group_name(self, gid: int) -> str | None:
        try:
            return self.fs.group_name(gid)
        except KeyError as e:
            logger.debug("no group name for gid %s: %s", gid, e)
            return None

    def get_owner(self, path: PathArg) -> str | None:
        """Get the owner name, None if missing or the uid has no name."""
        st = self._stat(path)
        return self._user_name(st.st_uid) if st else None

    def get_group(self, path: PathArg) -> str | None:
        """Get the group name, None if missing or the gid has no name."""
        st = self._stat(path)
        return self._group_name(st.st_gid) if st else None

    def info(self, path: PathArg) -> FileInfo | None:
        """Collect file metadata from a single stat call.

        Returns:
            FileInfo, or None if path is not an existing file.
        """
        st = self._stat(path)
        if st is None:
            return None
        return FileInfo(
            path=os.fspath(path),
            size=st.st_size,
            mode=stat.S_IMODE(st.st_mode),
            mtime=int(st.st_mtime),
            uid=st.st_uid,
            gid=st.st_gid,
            owner=self._user_name(st.st_uid),
            group=self._group_name(st.st_gid),
        )
