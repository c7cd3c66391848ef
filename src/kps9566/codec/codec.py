"""Kps9566Codec - decoder and encoder behind one object."""

from functools import lru_cache
from pathlib import Path
from typing import Optional

from kps9566.codec.decoder import BytesLike, Kps9566Decoder
from kps9566.codec.encoder import Kps9566Encoder
from kps9566.codec.result import TranscodeResult
from kps9566.mapping.table import MappingTable, default_table


class Kps9566Codec:
    """Owns one decoder and one encoder over the same table and forwards to them."""

    def __init__(self, table: Optional[MappingTable] = None):
        table = table if table is not None else default_table()
        self.decoder = Kps9566Decoder(table)
        self.encoder = Kps9566Encoder(table)

    @property
    def table(self) -> MappingTable:
        return self.decoder.table

    def decode(self, data: BytesLike) -> str:
        return self.decoder.decode(data)

    def decode_with_result(self, data: BytesLike) -> tuple[str, TranscodeResult]:
        return self.decoder.decode_with_result(data)

    def encode(self, text: str) -> bytes:
        return self.encoder.encode(text)

    def encode_with_result(self, text: str) -> tuple[bytes, TranscodeResult]:
        return self.encoder.encode_with_result(text)

    def decode_file(self, path: str | Path) -> str:
        return self.decoder.decode_file(path)

    def encode_to_file(self, text: str, path: str | Path) -> None:
        self.encoder.encode_to_file(text, path)


@lru_cache(maxsize=None)
def _codec_for(table: MappingTable) -> Kps9566Codec:
    return Kps9566Codec(table)


def default_codec() -> Kps9566Codec:
    """Process-wide codec over default_table(), built on first use."""
    return _codec_for(default_table())
