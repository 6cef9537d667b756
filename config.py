"""Configuration management using pydantic-settings."""
from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class Settings(BaseSettings):
    """Tool settings loaded from MOBILE_BUMP_* environment variables."""

    # Project layout
    project_root: Path = Path(".")
    android_build_gradle: str = "android/app/build.gradle"
    ios_project_glob: str = "ios/*.xcodeproj/project.pbxproj"

    # Logging
    log_level: str = "WARNING"

    model_config = SettingsConfigDict(
        env_prefix="MOBILE_BUMP_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    @field_validator("log_level")
    @classmethod
    def check_log_level(cls, value: str) -> str:
        """Normalize to an upper-case level name logging understands."""
        level = value.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}, got {value!r}")
        return level

    def resolve(self, relative: str) -> Path:
        """Resolve a path relative to the configured project root."""
        return self.project_root / relative


# Global settings instance
settings = Settings()
