from datetime import datetime

from pydantic import Field

from config import settings
from models.schemas.base import CamelModel
from models.schemas.candidate_profile import CandidateProfile
from models.schemas.job_posting import JobPosting

MAX_BATCH_SIZE = settings.max_batch_size


class CompatibilityRequest(CamelModel):
    job: JobPosting
    candidate: CandidateProfile


class RecommendationRequest(CamelModel):
    candidate: CandidateProfile
    jobs: list[JobPosting] = Field(default_factory=list, max_length=MAX_BATCH_SIZE)
    now: datetime | None = Field(default=None, description="Reference time for the recency window")


class JobMatchesRequest(CamelModel):
    job: JobPosting
    candidates: list[CandidateProfile] = Field(default_factory=list, max_length=MAX_BATCH_SIZE)
    limit: int | None = Field(default=None, ge=1, le=100)


class CandidateMatchesRequest(CamelModel):
    candidate: CandidateProfile
    jobs: list[JobPosting] = Field(default_factory=list, max_length=MAX_BATCH_SIZE)
    limit: int | None = Field(default=None, ge=1, le=100)
