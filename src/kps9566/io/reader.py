"""Read text files."""

from pathlib import Path
from typing import Optional

from kps9566.codec.codec import Kps9566Codec, default_codec
from kps9566.core.files import read_utf8


def load(path: str | Path, codec: Optional[Kps9566Codec] = None) -> str:
    """
    Load a KPS 9566 encoded file from disk as a string.

    Units missing from the mapping table come back as U+FFFD.
    """
    codec = codec or default_codec()
    return codec.decode_file(path)


def read_text(path: str | Path) -> str:
    """Read a UTF-8 text file, e.g. as input for encoding."""
    return read_utf8(path)
