from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # App
    APP_ENV: str = "development"
    DEBUG: bool = True
    LOG_LEVEL: str = "INFO"
    ALLOWED_ORIGINS: str = "http://localhost:3000"

    # Public holidays – ISO code understood by workalendar's registry ("ES", "ES-MD", ...).
    # Leave empty to disable holiday notices.
    HOLIDAY_CALENDAR: str = "ES"

    # Shift rules
    SHIFT_MIN_REST_HOURS: float = 12
    SHIFT_MAX_WEEKLY_HOURS_PERCENTAGE: float = 150
    SHIFT_MIN_DURATION_HOURS: float = 0.5
    SHIFT_MAX_DURATION_HOURS: float = 16
    # 09:00–12:00 + 12:00–15:00 count as one span when True
    SHIFT_MERGE_TOUCHING_INTERVALS: bool = True

    # Weekly hours traffic light (% of contract hours)
    HOURS_UNDER_PERCENTAGE: float = 70
    HOURS_OVER_PERCENTAGE: float = 130

    # Dashboard alerts
    COVERAGE_ALERT_PERCENTAGE: float = 70
    UNPUBLISHED_ALERT_DAYS: int = 7

    @property
    def allowed_origins_list(self) -> list[str]:
        return [o.strip() for o in self.ALLOWED_ORIGINS.split(",")]

    model_config = {"env_file": ".env", "extra": "ignore"}


settings = Settings()
