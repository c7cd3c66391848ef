"""
Read KPS 9566 mapping artifacts.

The artifact uses the layout of the Unicode consortium MAPPINGS files
(and the published KPS_9566.txt)::

    0xB0A1	0xAC00	# HANGUL SYLLABLE GA

Columns are separated by whitespace, '#' starts a comment, and a code
with no Unicode column is an undefined position and is skipped.
"""

import re
from importlib import resources
from pathlib import Path
from typing import Iterator, Optional

from kps9566.core.constants import ASCII_MAX, BUNDLED_ARTIFACT, BUNDLED_SOURCE, CODE_MAX
from kps9566.core.errors import InitializationError


HEX_PATTERN = re.compile(r'^(?:0[xX]|[uU]\+)([0-9A-Fa-f]+)$')

# Unicode scalar values exclude the surrogate block
SURROGATES = range(0xD800, 0xE000)


def _parse_hex(token: str) -> Optional[int]:
    match = HEX_PATTERN.match(token)
    if not match:
        return None
    return int(match.group(1), 16)


def read_artifact(path: str | Path | None = None) -> tuple[str, str]:
    """
    Read a mapping artifact.

    Reads the artifact bundled with the package when path is None.

    Returns:
        Tuple of (source_name, text)
    """
    if path is None:
        source = BUNDLED_SOURCE
        try:
            text = resources.files("kps9566.data").joinpath(BUNDLED_ARTIFACT).read_text(encoding="utf-8")
        except (OSError, ModuleNotFoundError) as e:
            raise InitializationError(f"bundled mapping artifact unavailable ({e})", source) from e
        return source, text

    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise InitializationError("mapping artifact not found", str(path)) from e
    except (OSError, UnicodeDecodeError) as e:
        raise InitializationError(f"cannot read mapping artifact ({e})", str(path)) from e
    return str(path), text


def parse_mapping_text(text: str, source: str = "<string>") -> Iterator[tuple[int, str]]:
    """
    Yield (code, char) pairs from artifact text.

    Raises InitializationError on the first malformed line.
    """
    for lineno, raw in enumerate(text.splitlines(), start=1):
        line = raw.split('#', 1)[0].strip()
        if not line:
            continue

        fields = line.split()
        code = _parse_hex(fields[0])
        if code is None:
            raise InitializationError(f"malformed code {fields[0]!r}", source, lineno)

        if len(fields) < 2:
            # Undefined position
            continue

        scalar = _parse_hex(fields[1])
        if scalar is None:
            raise InitializationError(f"malformed Unicode value {fields[1]!r}", source, lineno)

        if code > CODE_MAX or (code >> 8) <= ASCII_MAX:
            raise InitializationError(
                f"code 0x{code:04X} is not a two-byte sequence with a high-bit lead byte",
                source, lineno,
            )
        if scalar > 0x10FFFF or scalar in SURROGATES:
            raise InitializationError(f"U+{scalar:04X} is not a Unicode scalar value", source, lineno)

        yield code, chr(scalar)


def iter_artifact_pairs(path: str | Path | None = None) -> tuple[str, Iterator[tuple[int, str]]]:
    """Read an artifact and return (source_name, pair iterator)."""
    source, text = read_artifact(path)
    return source, parse_mapping_text(text, source)
