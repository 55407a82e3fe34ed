"""Unit tests for the settings layer."""

import pytest

from swimschool.config.settings import Settings, get_settings


@pytest.fixture(autouse=True)
def fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


class TestSettings:

    def test_defaults(self):
        settings = Settings(_env_file=None)

        assert settings.seed_demo_data is True
        assert settings.timetable_weeks == 4
        assert settings.lesson_capacity == 4
        assert settings.log_level == "WARNING"
        assert settings.validate_required_fields() == []

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("TIMETABLE_WEEKS", "6")
        monkeypatch.setenv("seed_demo_data", "false")

        settings = Settings(_env_file=None)

        assert settings.timetable_weeks == 6
        assert settings.seed_demo_data is False

    def test_every_problem_is_reported(self):
        settings = Settings(
            _env_file=None,
            timetable_weeks=-1,
            lesson_capacity=0,
            log_level="LOUD",
        )

        problems = settings.validate_required_fields()

        assert len(problems) == 3
        assert any("LESSON_CAPACITY" in problem for problem in problems)

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()
