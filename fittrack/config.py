from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Local state file (profile, activities, goals). Override via env.
    tracker_data_file: str = "fitness_tracker_data.txt"
    tracker_export_file: str = "fitness_export.csv"  # Suggested name for the CSV save dialog

    tracker_report_days: int = 7  # Weekly window is [today - N, today], inclusive

    log_level: str = "INFO"

    model_config = {"env_file": ".env", "extra": "ignore"}


settings = Settings()
