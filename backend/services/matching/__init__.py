"""Deterministic job-candidate compatibility scoring, ranking and admin matching."""

from services.matching.admin_match_finder import AdminMatchFinder
from services.matching.compatibility_scorer import CompatibilityScorer
from services.matching.job_ranker import JobRanker
from services.matching.score_cache import CachingScorer, ScoreCache

__all__ = [
    "AdminMatchFinder",
    "CachingScorer",
    "CompatibilityScorer",
    "JobRanker",
    "ScoreCache",
]
