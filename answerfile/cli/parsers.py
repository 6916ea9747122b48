"""CLI argument parsers and validators."""

from __future__ import annotations

from pathlib import Path

import typer


def parse_file_mode(value: str) -> int:
    """Parse octal file mode string."""
    try:
        mode = int(value, 8)
    except ValueError as e:
        raise typer.BadParameter(f"Invalid octal mode: {value!r}") from e
    if not 0 <= mode <= 0o777:
        raise typer.BadParameter(f"Mode out of range: {value!r}")
    return mode


def parse_path(value: str, default: Path) -> Path:
    """Return ``value`` as a path, or ``default`` when it is blank."""
    value = value.strip()
    return Path(value) if value else default
