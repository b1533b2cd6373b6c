import os

from pydantic_settings import BaseSettings

from models.schemas.scoring_config import ScoringConfig


def _parse_cors_origins() -> list[str] | None:
    """Parse CORS_ORIGINS env var as comma-separated string or JSON list."""
    raw = os.environ.get("CORS_ORIGINS")
    if not raw:
        return None
    if raw.startswith("["):
        import json
        return json.loads(raw)
    return [o.strip() for o in raw.split(",") if o.strip()]


class Settings(BaseSettings):
    cors_origins: list[str] = [
        "http://localhost:5173",
        "http://localhost:3000",
    ]
    debug: bool = False
    log_level: str = "INFO"
    rate_limit: str = "120/minute"
    max_batch_size: int = 5000

    # Scoring engine
    scoring: ScoringConfig = ScoringConfig()
    recommendation_window_days: int = 90
    recommendation_top_percentile: float = 0.1  # fraction of eligible jobs returned
    admin_match_limit: int = 10

    # Optional memoization of pairwise scores
    score_cache_enabled: bool = False
    score_cache_size: int = 4096

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_nested_delimiter": "__",
        "extra": "ignore",
    }


_cors_override = _parse_cors_origins()
settings = Settings(**{"cors_origins": _cors_override} if _cors_override else {})
