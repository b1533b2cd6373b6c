"""Lazy-loading registry for the matching services.

One instance per service, built from application settings on first use and
shared by every request (the services hold no per-request state).
"""

import logging

from config import settings
from services.matching.base import BaseMatchService

logger = logging.getLogger(__name__)

_registry: dict[str, BaseMatchService] = {}


def _create_service(name: str) -> BaseMatchService:
    """Factory: create a matching service by name with deferred imports."""
    if name == "compatibility_scorer":
        from services.matching.compatibility_scorer import CompatibilityScorer
        scorer = CompatibilityScorer(settings.scoring)
        if settings.score_cache_enabled:
            from services.matching.score_cache import CachingScorer, ScoreCache
            logger.info("Score cache enabled (maxsize=%d)", settings.score_cache_size)
            return CachingScorer(scorer, ScoreCache(settings.score_cache_size))
        return scorer
    elif name == "job_ranker":
        from services.matching.job_ranker import JobRanker
        return JobRanker(
            settings.scoring,
            scorer=get_service("compatibility_scorer"),
            window_days=settings.recommendation_window_days,
            top_percentile=settings.recommendation_top_percentile,
        )
    elif name == "admin_match_finder":
        from services.matching.admin_match_finder import AdminMatchFinder
        return AdminMatchFinder(
            settings.scoring,
            scorer=get_service("compatibility_scorer"),
            limit=settings.admin_match_limit,
        )
    else:
        raise ValueError(f"Unknown matching service: {name}")


def get_service(name: str) -> BaseMatchService:
    """Get a matching service by name, creating and loading it on first access."""
    if name not in _registry:
        _registry[name] = _create_service(name)
    svc = _registry[name]
    svc.ensure_loaded()
    return svc


def preload(*names: str) -> None:
    """Pre-load multiple services (e.g. at startup)."""
    for name in names:
        get_service(name)


def clear() -> None:
    """Drop all services so the next access rebuilds them from settings. Useful for testing."""
    _registry.clear()
