"""Whole-file reads and writes, with OS errors raised as CodecIOError."""

from pathlib import Path

from kps9566.core.errors import CodecIOError


def read_bytes(path: str | Path) -> bytes:
    path = Path(path)
    try:
        return path.read_bytes()
    except OSError as e:
        raise CodecIOError(f"Cannot read {path}: {e.strerror or e}", path) from e


def write_bytes(data: bytes, path: str | Path) -> None:
    """Overwrite path with data. A failed write may leave a truncated file."""
    path = Path(path)
    try:
        path.write_bytes(data)
    except OSError as e:
        raise CodecIOError(f"Cannot write {path}: {e.strerror or e}", path) from e


def read_utf8(path: str | Path) -> str:
    path = Path(path)
    try:
        return path.read_text(encoding="utf-8")
    except OSError as e:
        raise CodecIOError(f"Cannot read {path}: {e.strerror or e}", path) from e
    except UnicodeDecodeError as e:
        raise CodecIOError(f"{path} is not valid UTF-8: {e.reason} at byte {e.start}", path) from e


def write_utf8(text: str, path: str | Path) -> None:
    path = Path(path)
    try:
        path.write_text(text, encoding="utf-8")
    except OSError as e:
        raise CodecIOError(f"Cannot write {path}: {e.strerror or e}", path) from e
