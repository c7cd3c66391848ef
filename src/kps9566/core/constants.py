"""Shared constants for KPS 9566 transcoding."""

# Single-byte range passed through unchanged
ASCII_MAX = 0x7F

# Largest legacy code value (two bytes)
CODE_MAX = 0xFFFF

# Substituted for undecodable units
REPLACEMENT_CHAR = '\uFFFD'

# Last-resort encoder output when U+FFFD itself is unmapped
FALLBACK_BYTE = 0x3F  # '?'

# Bundled mapping artifact, relative to the kps9566.data package
BUNDLED_ARTIFACT = "kps9566.txt"

# MappingTable.source of the bundled artifact
BUNDLED_SOURCE = f"kps9566.data/{BUNDLED_ARTIFACT}"

# Environment variables read by load_config()
ENV_MAPPING = "KPS9566_MAPPING"
ENV_LOG_LEVEL = "KPS9566_LOG_LEVEL"

DEFAULT_LOG_LEVEL = "WARNING"
