"""Configuration management using Pydantic Settings"""

from pydantic_settings import BaseSettings, SettingsConfigDict

from budgetmate.domain.models import InsightThresholds


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Database
    database_url: str = "sqlite:///./budgetmate.db"

    # Service
    service_name: str = "budgetmate-insights"
    log_level: str = "INFO"
    default_timeframe: str = "month"  # week | month | quarter

    # Insight rule thresholds
    small_transaction_ceiling: float = 10.0
    small_transaction_count_floor: int = 10
    good_savings_rate: float = 20.0
    low_savings_rate: float = 10.0
    daily_spending_ceiling: float = 50.0
    recent_window_days: int = 7

    # Budgets and patterns
    budget_warning_percentage: float = 80.0
    pattern_limit: int = 6
    trend_stable_band: float = 5.0  # percent change treated as "stable"

    def insight_thresholds(self) -> InsightThresholds:
        return InsightThresholds(
            small_transaction_ceiling=self.small_transaction_ceiling,
            small_transaction_count_floor=self.small_transaction_count_floor,
            good_savings_rate=self.good_savings_rate,
            low_savings_rate=self.low_savings_rate,
            daily_spending_ceiling=self.daily_spending_ceiling,
            recent_window_days=self.recent_window_days,
        )


settings = Settings()
