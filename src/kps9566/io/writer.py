"""Write text files."""

from pathlib import Path
from typing import Optional

from kps9566.codec.codec import Kps9566Codec, default_codec
from kps9566.core.files import write_utf8


def save(text: str, path: str | Path, codec: Optional[Kps9566Codec] = None) -> None:
    """
    Save a string to disk as KPS 9566, overwriting any existing file.

    Characters outside the table are written as placeholders.
    """
    codec = codec or default_codec()
    codec.encode_to_file(text, path)


def write_text(text: str, path: str | Path) -> None:
    """Write a string as UTF-8, e.g. the result of decoding."""
    write_utf8(text, path)
