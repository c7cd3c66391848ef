"""Unicode text -> KPS 9566 bytes."""

import logging
from enum import Enum
from pathlib import Path
from typing import Callable, Optional

from kps9566.codec.result import TranscodeResult
from kps9566.core.constants import ASCII_MAX, FALLBACK_BYTE
from kps9566.core.files import write_bytes
from kps9566.mapping.table import MappingTable, default_table

logger = logging.getLogger(__name__)


class Resolution(Enum):
    """How a non-ASCII character was turned into bytes, in fallback order."""
    EXACT = "exact"
    REPLACEMENT = "replacement"
    QUESTION_MARK = "question_mark"


def _unit(code: int) -> bytes:
    # High byte first, mirroring the decoder's (lead << 8) | trail
    return bytes(((code >> 8) & 0xFF, code & 0xFF))


class Kps9566Encoder:
    """
    Encode text as KPS 9566.

    ASCII characters become single bytes. Anything else is resolved by
    trying each entry of ``tiers`` in order:

    1. EXACT - the character's own code
    2. REPLACEMENT - the code of U+FFFD, when the table has one
    3. QUESTION_MARK - the single byte '?'

    The last tier always succeeds, so encoding never fails.
    """

    def __init__(self, table: Optional[MappingTable] = None):
        self.table = table if table is not None else default_table()
        self._reverse = self.table.reverse

        replacement = self.table.replacement_code
        self._replacement_unit = _unit(replacement) if replacement is not None else None

        self.tiers: tuple[tuple[Resolution, Callable[[str], Optional[bytes]]], ...] = (
            (Resolution.EXACT, self._exact),
            (Resolution.REPLACEMENT, self._replacement),
            (Resolution.QUESTION_MARK, self._question_mark),
        )

    def _exact(self, char: str) -> Optional[bytes]:
        code = self._reverse.get(char)
        return _unit(code) if code is not None else None

    def _replacement(self, char: str) -> Optional[bytes]:
        return self._replacement_unit

    def _question_mark(self, char: str) -> Optional[bytes]:
        return bytes((FALLBACK_BYTE,))

    def resolve(self, char: str) -> tuple[bytes, Resolution]:
        """Return the bytes for one non-ASCII character and the tier that produced them."""
        for resolution, tier in self.tiers:
            encoded = tier(char)
            if encoded is not None:
                return encoded, resolution
        raise AssertionError("QUESTION_MARK tier must always resolve")

    def encode(self, text: str) -> bytes:
        """Encode a string, substituting placeholders for unmapped characters."""
        data, _ = self.encode_with_result(text)
        return data

    def encode_with_result(self, text: str) -> tuple[bytes, TranscodeResult]:
        """
        Encode a string and report substitutions.

        Returns:
            Tuple of (bytes, TranscodeResult) with character offsets of
            every character that missed the EXACT tier.
        """
        out = bytearray()
        result = TranscodeResult(input_size=len(text), output_size=0)

        for index, char in enumerate(text):
            if ord(char) <= ASCII_MAX:
                out.append(ord(char))
                continue

            encoded, resolution = self.resolve(char)
            if resolution is not Resolution.EXACT:
                result.record(index)
            out += encoded

        data = bytes(out)
        result.output_size = len(data)
        if result.was_lossy:
            logger.debug(
                "Encoded %d characters with %d substitution(s), first at index %d",
                len(text), result.substitutions, result.offsets[0],
            )
        return data, result

    def encode_to_file(self, text: str, path: str | Path) -> None:
        """Encode text and overwrite path with the result."""
        write_bytes(self.encode(text), path)
