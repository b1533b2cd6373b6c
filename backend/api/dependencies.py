"""Shared dependencies for API routes."""

from services.matching.admin_match_finder import AdminMatchFinder
from services.matching.job_ranker import JobRanker
from services.matching.registry import get_service


def get_scorer():
    return get_service("compatibility_scorer")


def get_job_ranker() -> JobRanker:
    return get_service("job_ranker")


def get_admin_match_finder() -> AdminMatchFinder:
    return get_service("admin_match_finder")
