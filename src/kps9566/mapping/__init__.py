"""KPS 9566 <-> Unicode mapping table."""

from kps9566.mapping.loader import iter_artifact_pairs, parse_mapping_text, read_artifact
from kps9566.mapping.table import MappingTable, build_forward, default_table

__all__ = [
    "MappingTable",
    "build_forward",
    "default_table",
    "iter_artifact_pairs",
    "parse_mapping_text",
    "read_artifact",
]
