"""Environment-driven configuration."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from kps9566.core.constants import DEFAULT_LOG_LEVEL, ENV_LOG_LEVEL, ENV_MAPPING


@dataclass(frozen=True)
class CodecConfig:
    """
    Runtime settings.

    mapping_path of None selects the artifact bundled with the package.
    """
    mapping_path: Optional[Path] = None
    log_level: str = DEFAULT_LOG_LEVEL

    @property
    def log_level_value(self) -> int:
        """Numeric logging level for log_level."""
        return logging.getLevelName(self.log_level)


def mapping_path_from_env(environ: Optional[Mapping[str, str]] = None) -> Optional[Path]:
    """
    Absolute artifact path from KPS9566_MAPPING, or None for the bundled one.

    Only KPS9566_MAPPING is read.
    """
    env = os.environ if environ is None else environ
    mapping = env.get(ENV_MAPPING, "").strip()
    return Path(mapping).expanduser().resolve() if mapping else None


def load_config(environ: Optional[Mapping[str, str]] = None) -> CodecConfig:
    """Build a CodecConfig from environment variables."""
    env = os.environ if environ is None else environ

    level = env.get(ENV_LOG_LEVEL, DEFAULT_LOG_LEVEL).strip().upper() or DEFAULT_LOG_LEVEL

    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f"Invalid {ENV_LOG_LEVEL}: {level!r}")

    return CodecConfig(
        mapping_path=mapping_path_from_env(env),
        log_level=level,
    )
