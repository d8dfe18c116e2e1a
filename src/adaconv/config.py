"""Runtime configuration."""

import logging
from functools import lru_cache

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class ConverterSettings(BaseSettings):
    """Settings read from ``ADACONV_*`` environment variables or ``.env``."""

    strict_hex: bool = Field(
        default=False,
        description="Reject address hex with an undecodable tail instead of truncating it",
    )
    log_level: str = Field(default="WARNING", description="Logging level used by the CLI")
    itn_verification_key_hrp: str = "ed25519_pk"
    itn_signing_key_hrp: str = "ed25519_sk"

    model_config = SettingsConfigDict(
        env_prefix="ADACONV_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )


@lru_cache(maxsize=1)
def get_settings() -> ConverterSettings:
    """
    Load settings once.

    Malformed values fall back to the defaults so that conversion functions
    never raise on a bad environment.
    """
    try:
        return ConverterSettings()
    except ValidationError as e:
        logger.warning(f"Ignoring invalid ADACONV_* settings, using defaults: {e}")
        return ConverterSettings.model_construct()
