"""Immutable bidirectional KPS 9566 mapping table."""

import logging
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Iterable, Iterator, Mapping

from kps9566.core.config import mapping_path_from_env
from kps9566.core.constants import REPLACEMENT_CHAR
from kps9566.core.errors import InitializationError
from kps9566.mapping.loader import iter_artifact_pairs

logger = logging.getLogger(__name__)


class MappingTable:
    """
    Legacy code <-> Unicode character association.

    Built once from (code, char) pairs and never mutated afterwards, so a
    single instance may be shared by any number of decoders and encoders
    across threads.

    Codes are ``(lead << 8) | trail`` for two-byte sequences whose lead
    byte is above 0x7F. When several codes map to the same character, the
    reverse direction keeps the lowest code.
    """

    __slots__ = ("_forward", "_reverse", "source")

    def __init__(self, pairs: Iterable[tuple[int, str]], source: str = "<pairs>"):
        forward: dict[int, str] = {}
        reverse: dict[str, int] = {}

        for code, char in pairs:
            existing = forward.get(code)
            if existing is not None and existing != char:
                raise InitializationError(
                    f"code 0x{code:04X} mapped to both U+{ord(existing):04X} and U+{ord(char):04X}",
                    source,
                )
            forward[code] = char

            kept = reverse.get(char)
            if kept is None or code < kept:
                reverse[char] = code
            if kept is not None and kept != code:
                logger.debug(
                    "U+%04X is produced by 0x%04X and 0x%04X; encoding uses 0x%04X",
                    ord(char), min(kept, code), max(kept, code), reverse[char],
                )

        if not forward:
            raise InitializationError("mapping artifact defines no characters", source)

        self._forward: Mapping[int, str] = MappingProxyType(forward)
        self._reverse: Mapping[str, int] = MappingProxyType(reverse)
        self.source = source

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[int, str]], source: str = "<pairs>") -> "MappingTable":
        """Build a table from explicit (code, char) pairs."""
        return cls(pairs, source=source)

    @classmethod
    def from_artifact(cls, path: str | Path | None = None) -> "MappingTable":
        """Build a table from a mapping artifact (the bundled one when path is None)."""
        source, pairs = iter_artifact_pairs(path)
        table = cls(pairs, source=source)
        logger.info("Loaded %d KPS 9566 mappings from %s", len(table), source)
        return table

    @property
    def forward(self) -> Mapping[int, str]:
        """Read-only code -> char view."""
        return self._forward

    @property
    def reverse(self) -> Mapping[str, int]:
        """Read-only char -> code view."""
        return self._reverse

    @property
    def replacement_code(self) -> int | None:
        """Code for U+FFFD, if the table maps it."""
        return self._reverse.get(REPLACEMENT_CHAR)

    def decode_unit(self, code: int) -> str | None:
        return self._forward.get(code)

    def encode_unit(self, char: str) -> int | None:
        return self._reverse.get(char)

    def items(self) -> Iterator[tuple[int, str]]:
        return iter(self._forward.items())

    def __len__(self) -> int:
        return len(self._forward)

    def __contains__(self, code: object) -> bool:
        return code in self._forward

    def __iter__(self) -> Iterator[int]:
        return iter(self._forward)

    def __repr__(self) -> str:
        return f"MappingTable(source={self.source!r}, entries={len(self)})"


def build_forward(path: str | Path | None = None) -> Mapping[int, str]:
    """Return the complete code -> char mapping defined by an artifact."""
    if path is None:
        return default_table().forward
    return MappingTable.from_artifact(path).forward


@lru_cache(maxsize=None)
def _cached_table(path: Path | None) -> MappingTable:
    return MappingTable.from_artifact(path)


def default_table() -> MappingTable:
    """
    Process-wide table, built on first use.

    The artifact comes from KPS9566_MAPPING when set, otherwise the one
    bundled with the package.
    """
    return _cached_table(mapping_path_from_env())
