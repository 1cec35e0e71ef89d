"""CLI commands using Typer."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler

from filekit import __version__
from filekit.config import ConfigError
from filekit.console import TUI
from filekit.context import AppContext, create_context
from filekit.validation import parse_mode

app = typer.Typer(
    name="filekit",
    help="Defensive helpers for file and directory operations",
    no_args_is_help=True,
)

console = Console()
err_console = Console(stderr=True)
tui = TUI(console)


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        console.print(f"filekit v{__version__}")
        raise typer.Exit()


def _configure_logging(level: int | str) -> None:
    """Route library logging through rich on stderr."""
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


@app.callback()
def main(
    cli_ctx: typer.Context,
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit",
        ),
    ] = False,
    config: Annotated[
        Path | None, typer.Option("--config", "-c", help="Path to a JSON or YAML config file")
    ] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log debug output")] = False,
) -> None:
    """Defensive helpers for file and directory operations."""
    cli_ctx.obj = {"config": config, "verbose": verbose}


def _get_context(cli_ctx: typer.Context, _context: AppContext | None) -> AppContext:
    """Return the injected context or build one from the global options.

    The global options are stored on the Typer context by the callback.

    Raises:
        typer.Exit: If the configuration cannot be loaded.
    """
    if _context is not None:
        return _context

    options = cli_ctx.obj or {}
    try:
        ctx = create_context(config_path=options.get("config"))
    except (ConfigError, FileNotFoundError) as e:
        tui.show_error(f"Configuration error: {e}")
        raise typer.Exit(1) from e

    _configure_logging(logging.DEBUG if options.get("verbose") else ctx.settings.log_level)
    return ctx


def _parse_mode_option(value: str | None) -> int | None:
    """Parse an octal mode option.

    Raises:
        typer.Exit: If the mode is invalid.
    """
    if value is None:
        return None
    try:
        return parse_mode(value)
    except ValueError as e:
        tui.show_error(str(e))
        raise typer.Exit(1) from e


# ============================================================================
# Query Commands
# ============================================================================


@app.command("exists")
def exists(
    cli_ctx: typer.Context,
    path: Annotated[Path, typer.Argument(help="Path to check")],
    directory: Annotated[bool, typer.Option("--dir", "-d", help="Check for a directory")] = False,
    _context=None,
) -> None:
    """Check whether a file (or directory) exists."""
    ctx = _get_context(cli_ctx, _context)
    kind = "Directory" if directory else "File"
    found = ctx.directories.exists(path) if directory else ctx.files.exists(path)

    if not found:
        tui.show_warning(f"{kind} '{path}' does not exist")
        raise typer.Exit(1)
    tui.show_success(f"{kind} '{path}' exists")


@app.command("read")
def read(
    cli_ctx: typer.Context,
    path: Annotated[Path, typer.Argument(help="File to read")],
    _context=None,
) -> None:
    """Print the contents of a file."""
    ctx = _get_context(cli_ctx, _context)
    content = ctx.files.get(path)
    if content is None:
        tui.show_error(f"Cannot read '{path}'")
        raise typer.Exit(1)
    tui.show_content(content)


@app.command("info")
def info(
    cli_ctx: typer.Context,
    path: Annotated[Path, typer.Argument(help="File to inspect")],
    _context=None,
) -> None:
    """Show file metadata."""
    ctx = _get_context(cli_ctx, _context)
    file_info = ctx.files.info(path)
    if file_info is None:
        tui.show_error(f"'{path}' is not an existing file")
        raise typer.Exit(1)
    tui.show_info(file_info)


# ============================================================================
# Write Commands
# ============================================================================


@app.command("write")
def write(
    cli_ctx: typer.Context,
    path: Annotated[Path, typer.Argument(help="File to write")],
    data: Annotated[str, typer.Argument(help="Content to write")],
    mode: Annotated[
        str | None, typer.Option("--mode", "-m", help="Octal mode for a newly created file")
    ] = None,
    _context=None,
) -> None:
    """Write content to a file, replacing what was there."""
    parsed_mode = _parse_mode_option(mode)
    ctx = _get_context(cli_ctx, _context)

    written = ctx.files.put(path, data, parsed_mode)
    if written is None:
        tui.show_error(f"Cannot write to '{path}'")
        raise typer.Exit(1)
    tui.show_success(f"Wrote {written} bytes to '{path}'")


@app.command("append")
def append(
    cli_ctx: typer.Context,
    path: Annotated[Path, typer.Argument(help="File to append to")],
    data: Annotated[str, typer.Argument(help="Content to append")],
    _context=None,
) -> None:
    """Append content to a file, creating it if needed."""
    ctx = _get_context(cli_ctx, _context)

    written = ctx.files.append(path, data)
    if written is None:
        tui.show_error(f"Cannot append to '{path}'")
        raise typer.Exit(1)
    tui.show_success(f"Appended {written} bytes to '{path}'")


@app.command("copy")
def copy(
    cli_ctx: typer.Context,
    source: Annotated[Path, typer.Argument(help="File to copy")],
    destination: Annotated[Path, typer.Argument(help="Destination path")],
    overwrite: Annotated[
        bool, typer.Option("--overwrite", "-f", help="Replace an existing destination")
    ] = False,
    _context=None,
) -> None:
    """Copy a file."""
    ctx = _get_context(cli_ctx, _context)

    if not ctx.files.copy(source, destination, overwrite):
        hint = "" if overwrite else " (use --overwrite to replace)"
        tui.show_error(f"Cannot copy '{source}' to '{destination}'{hint}")
        raise typer.Exit(1)
    tui.show_success(f"Copied '{source}' to '{destination}'")


@app.command("move")
def move(
    cli_ctx: typer.Context,
    source: Annotated[Path, typer.Argument(help="File to move")],
    destination: Annotated[Path, typer.Argument(help="Destination path")],
    overwrite: Annotated[
        bool, typer.Option("--overwrite", "-f", help="Replace an existing destination")
    ] = False,
    _context=None,
) -> None:
    """Move a file."""
    ctx = _get_context(cli_ctx, _context)

    if not ctx.files.move(source, destination, overwrite):
        hint = "" if overwrite else " (use --overwrite to replace)"
        tui.show_error(f"Cannot move '{source}' to '{destination}'{hint}")
        raise typer.Exit(1)
    tui.show_success(f"Moved '{source}' to '{destination}'")


@app.command("delete")
def delete(
    cli_ctx: typer.Context,
    path: Annotated[Path, typer.Argument(help="File to delete")],
    _context=None,
) -> None:
    """Delete a file. Succeeds if the file is already gone."""
    ctx = _get_context(cli_ctx, _context)

    if not ctx.files.delete(path):
        tui.show_error(f"Cannot delete '{path}'")
        raise typer.Exit(1)
    tui.show_success(f"Deleted '{path}'")


# ============================================================================
# Directory and Mode Commands
# ============================================================================


@app.command("mkdir")
def mkdir(
    cli_ctx: typer.Context,
    path: Annotated[Path, typer.Argument(help="Directory to create")],
    mode: Annotated[
        str | None, typer.Option("--mode", "-m", help="Octal mode for created directories")
    ] = None,
    _context=None,
) -> None:
    """Create a directory and any missing parents."""
    parsed_mode = _parse_mode_option(mode)
    ctx = _get_context(cli_ctx, _context)

    if not ctx.directories.mkdir(path, parsed_mode):
        tui.show_error(f"Cannot create directory '{path}'")
        raise typer.Exit(1)
    tui.show_success(f"Directory '{path}' is ready")


@app.command("chmod")
def chmod(
    cli_ctx: typer.Context,
    path: Annotated[Path, typer.Argument(help="File or directory")],
    mode: Annotated[str, typer.Argument(help="Octal mode, e.g. 644")],
    directory: Annotated[bool, typer.Option("--dir", "-d", help="Target is a directory")] = False,
    _context=None,
) -> None:
    """Change the mode of a file (or directory)."""
    parsed_mode = _parse_mode_option(mode)
    ctx = _get_context(cli_ctx, _context)

    changed = (
        ctx.directories.chmod(path, parsed_mode)
        if directory
        else ctx.files.chmod(path, parsed_mode)
    )
    if not changed:
        tui.show_error(f"Cannot change mode of '{path}'")
        raise typer.Exit(1)
    tui.show_success(f"Mode of '{path}' set to {parsed_mode:04o}")


if __name__ == "__main__":
    app()
