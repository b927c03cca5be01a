"""Path and file helpers shared by the build modules."""

from __future__ import annotations

from pathlib import Path


def resolve_cli_path(value: str) -> Path:
    """Resolve a command-line path against the current working directory."""
    return Path(value).expanduser().resolve()


def ensure_output_dir(path: Path) -> bool:
    """Create the output directory (one level only) and report whether it was new."""
    if path.is_dir():
        return False
    path.mkdir()
    return True


def read_docs_json(path: Path) -> str:
    """Read the documentation payload as UTF-8 text, line endings untouched."""
    with path.open("r", encoding="utf-8", newline="") as handle:
        return handle.read()
