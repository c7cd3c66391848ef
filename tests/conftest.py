"""Shared fixtures: small hand-built tables and a clean environment."""

from pathlib import Path

import pytest

from kps9566.codec import codec as codec_module
from kps9566.codec.codec import Kps9566Codec
from kps9566.codec.decoder import Kps9566Decoder
from kps9566.codec.encoder import Kps9566Encoder
from kps9566.core.constants import ENV_LOG_LEVEL, ENV_MAPPING, REPLACEMENT_CHAR
from kps9566.mapping import table as table_module
from kps9566.mapping.table import MappingTable


SAMPLE_PAIRS: list[tuple[int, str]] = [
    (0x8141, '갂'),
    (0xB0A1, '가'),
    (0xB0A2, '각'),
    (0xC6ED, '안'),
    (0xB2BA, '녕'),
    (0xBAA3, '세'),
    (0xB1C2, '계'),
]

# Code used for U+FFFD in tables that map it
REPLACEMENT_CODE = 0xA1FE

SAMPLE_ARTIFACT = """\
# Sample KPS 9566 mapping
0x8141\t0xAC02\t# 갂
0xB0A1\t0xAC00\t# 가
0xB0A2\tU+AC01\t# 각

0xB0A3\t\t# undefined position
0xC6ED\t0xC548
"""


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch):
    """Isolate tests from the caller's environment and the table cache."""
    monkeypatch.delenv(ENV_MAPPING, raising=False)
    monkeypatch.delenv(ENV_LOG_LEVEL, raising=False)
    table_module._cached_table.cache_clear()
    codec_module._codec_for.cache_clear()
    yield
    table_module._cached_table.cache_clear()
    codec_module._codec_for.cache_clear()


@pytest.fixture
def small_table() -> MappingTable:
    return MappingTable.from_pairs(SAMPLE_PAIRS, source="sample")


@pytest.fixture
def replacement_table() -> MappingTable:
    """Sample table that also maps U+FFFD."""
    return MappingTable.from_pairs(SAMPLE_PAIRS + [(REPLACEMENT_CODE, REPLACEMENT_CHAR)], source="sample+fffd")


@pytest.fixture
def decoder(small_table: MappingTable) -> Kps9566Decoder:
    return Kps9566Decoder(small_table)


@pytest.fixture
def encoder(small_table: MappingTable) -> Kps9566Encoder:
    return Kps9566Encoder(small_table)


@pytest.fixture
def codec(small_table: MappingTable) -> Kps9566Codec:
    return Kps9566Codec(small_table)


@pytest.fixture
def artifact_file(tmp_path: Path) -> Path:
    path = tmp_path / "KPS_9566.txt"
    path.write_text(SAMPLE_ARTIFACT, encoding="utf-8")
    return path
