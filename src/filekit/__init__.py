"""Defensive helpers around OS file and directory primitives."""

__version__ = "0.1.0"

# Export the collections and the filesystem interface for dependency injection
from filekit.config import Settings
from filekit.context import AppContext, create_context
from filekit.directories import Directories
from filekit.files import Files
from filekit.filesystem import RealFileSystem
from filekit.protocols import FileSystem
from filekit.types import FileInfo

__all__ = [
    "__version__",
    "AppContext",
    "Directories",
    "FileInfo",
    "FileSystem",
    "Files",
    "RealFileSystem",
    "Settings",
    "create_context",
]
