"""Validation utilities for filekit.

Modes arrive as ints from library callers and as strings from the CLI and
config files. Both paths go through parse_mode.
"""

from __future__ import annotations

import re

# Highest value chmod accepts: setuid, setgid and sticky plus rwx for all
MAX_MODE = 0o7777

_OCTAL_RE = re.compile(r"^(?:0o|0)?([0-7]{1,4})$", re.IGNORECASE)


def parse_mode(value: str | int) -> int:
    """Parse a permission mode.

    Args:
        value: An int (e.g. 0o644) or an octal string ("644", "0644", "0o644").

    Returns:
        The mode as an int.

    Raises:
        ValueError: If the value is not a valid octal mode.

    Example:
        >>> parse_mode("0755") == 0o755
        True
    """
    if isinstance(value, bool) or not isinstance(value, (int, str)):
        raise ValueError(f"Invalid mode: {value!r}")
    if isinstance(value, int):
        mode = value
    else:
        match = _OCTAL_RE.match(value.strip())
        if not match:
            raise ValueError(f"Invalid octal mode: {value!r}")
        mode = int(match.group(1), 8)

    if not 0 <= mode <= MAX_MODE:
        raise ValueError(f"Mode out of range: {oct(mode)}")
    return mode
