"""Tests for Kps9566Encoder and its fallback tiers."""

from kps9566.codec.encoder import Kps9566Encoder, Resolution
from kps9566.core.constants import REPLACEMENT_CHAR
from kps9566.mapping.table import MappingTable


class TestEncode:
    """Test encode on a small table."""

    def test_empty(self, encoder: Kps9566Encoder) -> None:
        assert encoder.encode('') == b''

    def test_ascii_passthrough(self, encoder: Kps9566Encoder) -> None:
        text = ''.join(chr(c) for c in range(0x80))
        assert encoder.encode(text) == text.encode('ascii')

    def test_high_byte_first(self, encoder: Kps9566Encoder) -> None:
        assert encoder.encode('안') == b'\xc6\xed'
        assert encoder.encode('갂') == b'\x81\x41'

    def test_mixed(self, encoder: Kps9566Encoder) -> None:
        assert encoder.encode('Hello 세계') == b'Hello \xba\xa3\xb1\xc2'

    def test_unmapped_without_replacement_uses_question_mark(self, encoder: Kps9566Encoder) -> None:
        assert encoder.encode('a🌟b') == b'a?b'

    def test_unmapped_with_replacement_uses_its_code(self, replacement_table: MappingTable) -> None:
        encoder = Kps9566Encoder(replacement_table)
        assert encoder.encode('a🌟b') == b'a\xa1\xfeb'

    def test_latin1_is_not_passed_through(self, encoder: Kps9566Encoder) -> None:
        assert encoder.encode('é') == b'?'


class TestResolutionTiers:
    """The three-tier fallback policy."""

    def test_tier_order(self, encoder: Kps9566Encoder) -> None:
        assert [resolution for resolution, _ in encoder.tiers] == [
            Resolution.EXACT,
            Resolution.REPLACEMENT,
            Resolution.QUESTION_MARK,
        ]

    def test_exact(self, replacement_table: MappingTable) -> None:
        encoder = Kps9566Encoder(replacement_table)
        assert encoder.resolve('가') == (b'\xb0\xa1', Resolution.EXACT)

    def test_replacement(self, replacement_table: MappingTable) -> None:
        encoder = Kps9566Encoder(replacement_table)
        code = replacement_table.replacement_code
        high, low = code >> 8, code & 0xFF
        assert encoder.resolve('🌟') == (bytes([high, low]), Resolution.REPLACEMENT)

    def test_replacement_char_itself_is_exact(self, replacement_table: MappingTable) -> None:
        encoder = Kps9566Encoder(replacement_table)
        assert encoder.resolve(REPLACEMENT_CHAR)[1] is Resolution.EXACT

    def test_question_mark(self, encoder: Kps9566Encoder) -> None:
        assert encoder.resolve('🌟') == (b'?', Resolution.QUESTION_MARK)


class TestEncodeWithResult:
    """Test substitution reporting."""

    def test_clean_encode(self, encoder: Kps9566Encoder) -> None:
        data, result = encoder.encode_with_result('Hi 가')
        assert data == b'Hi \xb0\xa1'
        assert result.input_size == 4
        assert result.output_size == 5
        assert result.was_lossy is False

    def test_reports_character_offsets(self, encoder: Kps9566Encoder) -> None:
        _, result = encoder.encode_with_result('가🌟x€')
        assert result.substitutions == 2
        assert result.offsets == [1, 3]

    def test_duplicate_characters_encode_to_lowest_code(self) -> None:
        table = MappingTable.from_pairs([(0xB0A5, '가'), (0xB0A1, '가')])
        assert Kps9566Encoder(table).encode('가') == b'\xb0\xa1'
