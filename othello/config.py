import logging
import sys
from functools import lru_cache

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="OTHELLO_",
        extra="ignore",
    )

    # App config
    DEBUG: bool = False

    # Board rendering
    EMPTY_GLYPH: str = " "
    PLAYER_1_GLYPH: str = "O"
    PLAYER_2_GLYPH: str = "X"

    @field_validator("EMPTY_GLYPH", "PLAYER_1_GLYPH", "PLAYER_2_GLYPH")
    @classmethod
    def validate_glyph(cls, v: str) -> str:
        if len(v) != 1:
            raise ValueError("Board glyphs must be exactly one character")
        return v

    @model_validator(mode="after")
    def validate_glyphs_distinct(self) -> "Settings":
        glyphs = (self.EMPTY_GLYPH, self.PLAYER_1_GLYPH, self.PLAYER_2_GLYPH)
        if len(set(glyphs)) != len(glyphs):
            raise ValueError(f"Board glyphs must be distinct, got {glyphs!r}")
        return self


def configure_logging(debug: bool = False) -> None:
    """Configure logging for the application."""
    log_level = logging.DEBUG if debug else logging.INFO
    log_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    logging.basicConfig(
        level=log_level,
        format=log_format,
        handlers=[logging.StreamHandler(sys.stdout)],
    )


@lru_cache
def load_settings() -> Settings:
    """Read settings without touching logging; safe to call from library code."""
    return Settings()


@lru_cache
def get_settings() -> Settings:
    """Read settings and configure logging. Call once at application startup."""
    settings = load_settings()
    configure_logging(settings.DEBUG)
    logger.info("Settings loaded successfully")
    logger.debug(
        "Glyphs: empty=%r, player_1=%r, player_2=%r",
        settings.EMPTY_GLYPH,
        settings.PLAYER_1_GLYPH,
        settings.PLAYER_2_GLYPH,
    )
    return settings
