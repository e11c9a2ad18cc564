import logging

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


logger = logging.getLogger(__name__)


class ReaderSettings(BaseSettings):
    """Reader settings loaded from environment variables (XMLTV_ prefix)."""

    language: str | None = None  # Preferred language, None keeps untagged values
    log_level: str = "INFO"
    huge_tree: bool = False  # Lift libxml2 limits for very large text nodes

    model_config = SettingsConfigDict(
        env_prefix="XMLTV_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("language", mode="before")
    @classmethod
    def parse_language(cls, value):
        """Treat a blank language as unset."""
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Validate log level names."""
        normalized = value.upper()
        allowed = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}
        if normalized not in allowed:
            raise ValueError(f"log_level must be one of {sorted(allowed)}")
        return normalized

    def __init__(self, **data):
        """Initialize settings and log configuration."""
        super().__init__(**data)

        logger.debug("Configuration loaded:")
        logger.debug("  Language: %s", self.language or "untagged")
        logger.debug("  Log Level: %s", self.log_level)
        logger.debug("  Huge Tree: %s", self.huge_tree)


settings = ReaderSettings()


def setup_logging(level: str | None = None) -> None:
    """Configure application logging."""
    logging.basicConfig(
        level=getattr(logging, (level or settings.log_level).upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
