from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Engine settings loaded from environment."""

    model_config = SettingsConfigDict(env_file=".env", env_prefix="CATALOGFILTER_")

    # Mirrors the application-wide fuzzy search toggle.
    # When True, the search stage delegates to the configured FuzzySearcher
    # instead of substring-matching entry names.
    fuzzy_search: bool = False

    # When True, every pipeline run appends a PipelineRunMetrics record.
    # Off by default: filtering leaves no state behind unless asked to.
    record_metrics: bool = False


settings = Settings()


# Maximum number of PipelineRunMetrics kept; older records are dropped
MAX_METRICS_HISTORY = 1000
