"""Shared test configuration, record factories and pytest markers."""

from datetime import datetime, timedelta, timezone

import pytest

from models.schemas.candidate_profile import CandidateProfile
from models.schemas.job_posting import JobPosting
from services.matching.registry import clear as clear_registry

NOW = datetime(2026, 10, 18, 12, 0, tzinfo=timezone.utc)


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "api: exercises the HTTP layer through TestClient"
    )


def make_job(id=1, days_old=1, **fields) -> JobPosting:
    """A job posting created *days_old* days before NOW, active and open."""
    fields.setdefault("created_at", NOW - timedelta(days=days_old))
    return JobPosting(id=id, **fields)


def make_candidate(id=1, **fields) -> CandidateProfile:
    return CandidateProfile(id=id, **fields)


@pytest.fixture
def now() -> datetime:
    return NOW


@pytest.fixture
def job_factory():
    return make_job


@pytest.fixture
def candidate_factory():
    return make_candidate


@pytest.fixture
def scenario_job() -> JobPosting:
    return make_job(
        id=101,
        skills="react,node,sql",
        experience_required="3-5 years",
        salary_range="6-10 LPA",
        location="Remote",
        min_qualification="Bachelor's Degree",
    )


@pytest.fixture
def scenario_candidate() -> CandidateProfile:
    return make_candidate(
        id=7,
        skills=["react", "sql"],
        experience=[{"duration": 4}],
        expected_salary=9,
        qualifications=[{"degree": "Bachelor"}],
        address="Remote",
    )


@pytest.fixture
def _reset_registry():
    """Clear the matching service registry around a test."""
    clear_registry()
    yield
    clear_registry()
