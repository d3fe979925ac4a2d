"""Filesystem helpers that create parent directories before writing."""

from pathlib import Path


def ensure_dir(path: Path) -> Path:
    """Create a directory (and its parents) if missing."""
    path.mkdir(parents=True, exist_ok=True)
    return path


def read_text(path: Path) -> str:
    """Read UTF-8 text, keeping line endings as they are on disk."""
    with path.open(encoding="utf-8", newline="") as f:
        return f.read()


def write_text(path: Path, text: str) -> None:
    """Write UTF-8 text without newline translation, replacing any existing file."""
    ensure_dir(path.parent)
    with path.open("w", encoding="utf-8", newline="") as f:
        f.write(text)


def write_bytes(path: Path, data: bytes) -> None:
    """Write raw bytes, replacing any existing file."""
    ensure_dir(path.parent)
    path.write_bytes(data)
