"""KPS 9566 bytes -> Unicode text."""

import logging
from pathlib import Path
from typing import Optional, Union

from kps9566.codec.result import TranscodeResult
from kps9566.core.constants import ASCII_MAX, REPLACEMENT_CHAR
from kps9566.core.files import read_bytes
from kps9566.mapping.table import MappingTable, default_table

logger = logging.getLogger(__name__)

BytesLike = Union[bytes, bytearray, memoryview]


class Kps9566Decoder:
    """
    Decode KPS 9566 byte strings.

    Bytes up to 0x7F are ASCII. A byte with the high bit set starts a
    two-byte unit looked up as ``(lead << 8) | trail``; unknown units and
    a lone lead byte at the end of input become U+FFFD. Decoding never
    fails.
    """

    def __init__(self, table: Optional[MappingTable] = None):
        self.table = table if table is not None else default_table()
        self._mapping = self.table.forward

    def decode(self, data: BytesLike) -> str:
        """Decode bytes to a string, substituting U+FFFD for bad units."""
        text, _ = self.decode_with_result(data)
        return text

    def decode_with_result(self, data: BytesLike) -> tuple[str, TranscodeResult]:
        """
        Decode bytes and report substitutions.

        Returns:
            Tuple of (text, TranscodeResult) with byte offsets of every
            unit that was replaced.
        """
        data = bytes(data)
        mapping = self._mapping
        size = len(data)
        chars: list[str] = []
        result = TranscodeResult(input_size=size, output_size=0)

        i = 0
        while i < size:
            byte = data[i]

            if byte <= ASCII_MAX:
                chars.append(chr(byte))
                i += 1
            elif i + 1 < size:
                char = mapping.get((byte << 8) | data[i + 1])
                if char is None:
                    char = REPLACEMENT_CHAR
                    result.record(i)
                chars.append(char)
                i += 2
            else:
                # Truncated unit at end of input
                chars.append(REPLACEMENT_CHAR)
                result.record(i)
                i += 1

        text = ''.join(chars)
        result.output_size = len(text)
        if result.was_lossy:
            logger.debug(
                "Decoded %d bytes with %d substitution(s), first at offset %d",
                size, result.substitutions, result.offsets[0],
            )
        return text, result

    def decode_file(self, path: str | Path) -> str:
        """Read a whole KPS 9566 file and decode it."""
        return self.decode(read_bytes(path))
