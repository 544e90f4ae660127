from datetime import date
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

from plato.schemas.course import PointPolicy


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # App settings
    app_name: str = "Plato LMS"
    debug: bool = False
    log_level: str = "INFO"
    seed_sample_courses: bool = True

    # Semester used when enhancing existing courses (Spring 2025)
    default_semester_start: date = date(2025, 1, 13)
    default_semester_end: date = date(2025, 5, 2)
    default_term: str = "Spring 2025"

    # Defaults for prompt-driven generation
    prompt_default_start: date = date(2025, 5, 30)
    prompt_default_weeks: int = 16
    prompt_default_term: str = "Summer 2025"

    # Points
    point_policy: PointPolicy = PointPolicy.linear
    default_total_points: int = 1000
    points_per_unit: int = 350

    # Module count band
    min_modules: int = 4
    max_modules: int = 8

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="PLATO_",
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance."""
    return Settings()
