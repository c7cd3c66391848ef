"""Core constants, errors and configuration."""

from kps9566.core.errors import ErrorKind, Kps9566Error, InitializationError, CodecIOError
from kps9566.core.config import CodecConfig, load_config, mapping_path_from_env

__all__ = [
    "ErrorKind",
    "Kps9566Error",
    "InitializationError",
    "CodecIOError",
    "CodecConfig",
    "load_config",
    "mapping_path_from_env",
]
