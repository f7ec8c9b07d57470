"""
Configuration management for the deal message parser.

Loads DEAL_PARSER_* settings from environment variables with sensible
defaults. The parser itself needs no credentials; everything here tunes
logging, input limits, and matching thresholds.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env file from project root
_project_root = Path(__file__).parent.parent.parent
_env_file = _project_root / '.env'
if _env_file.exists():
    load_dotenv(_env_file)


def _env_flag(name: str, default: str = 'false') -> bool:
    return os.getenv(name, default).strip().lower() in ('1', 'true', 'yes', 'on')


def _env_optional_int(name: str) -> int | None:
    value = os.getenv(name, '').strip()
    return int(value) if value else None


class Config:
    """Configuration settings loaded from environment."""

    # Logging
    LOG_LEVEL: str = os.getenv('DEAL_PARSER_LOG_LEVEL', 'INFO')
    LOG_JSON: bool = _env_flag('DEAL_PARSER_LOG_JSON')

    # Optional input guard; unset means messages of any length are parsed
    MAX_MESSAGE_LENGTH: int | None = _env_optional_int('DEAL_PARSER_MAX_MESSAGE_LENGTH')

    # Matching thresholds
    BRAND_OVERLAP_THRESHOLD: float = float(
        os.getenv('DEAL_PARSER_BRAND_OVERLAP_THRESHOLD', '0.4')
    )
    PLATFORM_LOOKBACK_CHARS: int = int(os.getenv('DEAL_PARSER_PLATFORM_LOOKBACK_CHARS', '30'))

    @classmethod
    def validate(cls) -> list[str]:
        """
        Validate that configured values are usable.

        Returns:
            List of problems, one per offending DEAL_PARSER_* key
        """
        problems = []
        if cls.MAX_MESSAGE_LENGTH is not None and cls.MAX_MESSAGE_LENGTH <= 0:
            problems.append('DEAL_PARSER_MAX_MESSAGE_LENGTH must be positive')
        if not 0.0 < cls.BRAND_OVERLAP_THRESHOLD <= 1.0:
            problems.append('DEAL_PARSER_BRAND_OVERLAP_THRESHOLD must be in (0, 1]')
        if cls.PLATFORM_LOOKBACK_CHARS < 0:
            problems.append('DEAL_PARSER_PLATFORM_LOOKBACK_CHARS must not be negative')
        return problems


# Singleton config instance
config = Config()
