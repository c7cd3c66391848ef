"""File I/O for KPS 9566 and UTF-8 text files."""

from kps9566.io.reader import load, read_text
from kps9566.io.writer import save, write_text

__all__ = ["load", "save", "read_text", "write_text"]
