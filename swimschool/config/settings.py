"""
Application configuration using Pydantic settings.

Configuration is loaded from environment variables with sensible defaults.
Using Pydantic's BaseSettings means we get:
- Type validation at startup (fail fast if config is wrong)
- Documentation of every knob in one place
- Easy testing with different configurations
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings can be overridden via environment variables
    (e.g. TIMETABLE_WEEKS=6) or a local .env file.
    """

    school_name: str = Field(
        default="Hatfield Junior Swimming School",
        description="Name shown in the console banner"
    )

    # Demo data
    seed_demo_data: bool = Field(
        default=True,
        description="Fill the school with demo coaches, lessons, learners and bookings on startup."
    )
    timetable_weeks: int = Field(
        default=4,
        description="Number of upcoming weeks of lessons generated by the seeder."
    )
    lesson_capacity: int = Field(
        default=4,
        description="Seats per seeded lesson."
    )

    # Logging
    log_level: str = Field(
        default="WARNING",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    def validate_required_fields(self) -> list[str]:
        """
        Return a list of configuration problems.

        Empty when the settings are usable. Kept separate from Pydantic
        validation so startup can report every problem at once.
        """
        problems = []

        if self.timetable_weeks < 0:
            problems.append("TIMETABLE_WEEKS must not be negative")

        if self.lesson_capacity < 1:
            problems.append("LESSON_CAPACITY must be at least 1")

        if self.log_level.upper() not in LOG_LEVELS:
            problems.append(f"LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}")

        return problems


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Settings are loaded once per process. For tests, call
    get_settings.cache_clear() to reset.
    """
    return Settings()
