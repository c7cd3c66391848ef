"""
kps9566: KPS 9566 <-> Unicode transcoder

Read and write text in KPS 9566, the DPRK national double-byte
character set, and convert it to and from ordinary Python strings.

Quick Start:
    >>> import kps9566
    >>> text = kps9566.load("notice.txt")
    >>> kps9566.save(text, "copy.txt")
    >>> kps9566.encode("Hello 세계")
    b'Hello \\xba\\xa3\\xb1\\xc2'

Features:
    - ASCII passes through unchanged, two-byte units via the mapping table
    - Never fails on bad data: U+FFFD on decode, placeholder on encode
    - Substitution reports for lossy conversions
    - Pluggable mapping artifact (KPS9566_MAPPING)
    - Command line tool: kps9566 decode / encode / encode-file / info
"""

__version__ = "0.1.0"

# Errors
from kps9566.core.errors import ErrorKind, Kps9566Error, InitializationError, CodecIOError

# Mapping
from kps9566.mapping.table import MappingTable, build_forward, default_table

# Codec
from kps9566.codec.decoder import Kps9566Decoder
from kps9566.codec.encoder import Kps9566Encoder, Resolution
from kps9566.codec.codec import Kps9566Codec, default_codec
from kps9566.codec.result import TranscodeResult

# Convenience functions
from kps9566.io.reader import load
from kps9566.io.writer import save


def decode(data: bytes) -> str:
    """Decode KPS 9566 bytes with the default table."""
    return default_codec().decode(data)


def encode(text: str) -> bytes:
    """Encode a string as KPS 9566 with the default table."""
    return default_codec().encode(text)


__all__ = [
    # Version
    "__version__",
    # Errors
    "ErrorKind",
    "Kps9566Error",
    "InitializationError",
    "CodecIOError",
    # Mapping
    "MappingTable",
    "build_forward",
    "default_table",
    # Codec
    "Kps9566Decoder",
    "Kps9566Encoder",
    "Kps9566Codec",
    "default_codec",
    "Resolution",
    "TranscodeResult",
    # I/O
    "load",
    "save",
    "decode",
    "encode",
]
