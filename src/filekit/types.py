"""Shared data types for filekit."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Union

__all__ = ["FileInfo", "PathArg"]

# Anything the os module accepts as a path
PathArg = Union[str, os.PathLike]


@dataclass(frozen=True)
class FileInfo:
    """Metadata snapshot of a single file.

    Attributes:
        path: Path the snapshot was taken from.
        size: Size in bytes.
        mode: Permission bits only (e.g. 0o644).
        mtime: Last modification time in whole seconds.
        uid: Numeric owner id.
        gid: Numeric group id.
        owner: Owner name, None if the uid has no name.
        group: Group name, None if the gid has no name.
    """

    path: str
    size: int
    mode: int
    mtime: int
    uid: int
    gid: int
    owner: str | None = None
    group: str | None = None

    def __post_init__(self) -> None:
        """Validate invariants."""
        if not self.path:
            raise ValueError("path cannot be empty")
        if self.size < 0:
            raise ValueError("size cannot be negative")

    @property
    def mode_octal(self) -> str:
        """Mode formatted as a four digit octal string."""
        return f"{self.mode:04o}"
