"""Candidate-facing job recommendation.

Flow:
    jobs
      ├─ is_eligible()   active, unfulfilled, created within the window
      ├─ scorer.score()  → compatibilityScore + matchFactors per job
      ├─ sort            score desc, then createdAt desc
      └─ truncate        top percentile by count, rounded up, at least 1
"""

from datetime import datetime, timedelta, timezone
import logging
import math

from models.responses import RecommendedJob
from models.schemas.candidate_profile import CandidateProfile
from models.schemas.job_posting import JobPosting
from models.schemas.scoring_config import ScoringConfig
from services.matching.base import BaseMatchService
from services.matching.compatibility_scorer import CompatibilityScorer
from services.matching.score_cache import CachingScorer

logger = logging.getLogger(__name__)

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def as_utc(value: datetime) -> datetime:
    """Treat naive timestamps as UTC so they compare with aware ones."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def percentile_count(total: int, fraction: float) -> int:
    """How many of *total* ranked items make the top *fraction*, rounded up, at least 1."""
    if total <= 0:
        return 0
    return max(1, math.ceil(total * fraction))


class JobRanker(BaseMatchService):
    service_name = "job_ranker"

    def __init__(
        self,
        config: ScoringConfig | None = None,
        scorer: CompatibilityScorer | CachingScorer | None = None,
        window_days: int = 90,
        top_percentile: float = 0.1,
    ) -> None:
        super().__init__(config)
        self.scorer = scorer or CompatibilityScorer(self.config)
        self.window = timedelta(days=window_days)
        self.top_percentile = top_percentile

    def load(self) -> None:
        if not 0 < self.top_percentile <= 1:
            raise ValueError(f"top_percentile must be in (0, 1], got {self.top_percentile}")
        self.scorer.ensure_loaded()

    def is_eligible(self, job: JobPosting, now: datetime) -> bool:
        """Active, unfulfilled and created no earlier than ``now - window``."""
        if not job.is_active or job.fulfilled or job.created_at is None:
            return False
        return as_utc(job.created_at) >= as_utc(now) - self.window

    def rank(self, candidate: CandidateProfile, jobs: list[JobPosting]) -> list[RecommendedJob]:
        """Score and sort *jobs* for *candidate* without filtering or truncating."""
        self.ensure_loaded()
        scored = []
        for job in jobs:
            result = self.scorer.score(job, candidate)
            scored.append(RecommendedJob.model_validate({
                **job.model_dump(),
                "compatibility_score": result.overall_score,
                "match_factors": result.factors,
            }))

        scored.sort(
            key=lambda j: (
                j.compatibility_score,
                as_utc(j.created_at) if j.created_at else _EPOCH,
            ),
            reverse=True,
        )
        return scored

    def recommend(
        self,
        candidate: CandidateProfile,
        jobs: list[JobPosting],
        now: datetime | None = None,
    ) -> list[RecommendedJob]:
        """Top-percentile eligible jobs for *candidate*, best first."""
        self.ensure_loaded()
        now = now or datetime.now(timezone.utc)

        eligible = [job for job in jobs if self.is_eligible(job, now)]
        if not eligible:
            logger.info("Candidate %s: 0/%d jobs eligible, nothing to recommend", candidate.id, len(jobs))
            return []

        ranked = self.rank(candidate, eligible)
        take = percentile_count(len(ranked), self.top_percentile)
        logger.info(
            "Candidate %s: %d/%d jobs eligible, returning top %d",
            candidate.id, len(eligible), len(jobs), take,
        )
        return ranked[:take]
