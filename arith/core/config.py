"""
Library configuration.

Centralized configuration management with environment variables
(prefix ``ARITH_``, optional ``.env`` file).
"""

from pydantic_settings import BaseSettings
from functools import lru_cache
from typing import Optional


class Settings(BaseSettings):
    """Library settings"""

    # Logging
    LOG_LEVEL: str = "WARNING"
    LOG_FORMAT: str = "text"  # json or text
    LOG_FILE: Optional[str] = None

    # Formatting
    DECIMAL_SEPARATOR: str = "."

    # Decimal codec: largest |exponent| accepted by reconstruct_decimal
    DECIMAL_EXPONENT_BAND: int = 1000

    # Parser: largest |exponent| accepted in "1.5e<EXP>" notation
    PARSE_EXPONENT_LIMIT: int = 1_000_000_000

    # Table cache: number of powers precomputed by a fresh PowerTable
    POWER_TABLE_SIZE: int = 64

    class Config:
        env_prefix = "ARITH_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = True
        extra = "ignore"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()
