"""Admin shortlisting: top-N matches in either direction.

Unlike the candidate-facing ranker there is no eligibility window and no
percentile cut; the caller decides which records to compare.
"""

import logging

from models.responses import CandidateMatch, JobMatch, SkillMatch
from models.schemas.candidate_profile import CandidateProfile
from models.schemas.job_posting import JobPosting
from models.schemas.scoring_config import ScoringConfig
from services.matching.base import BaseMatchService
from services.matching.compatibility_scorer import CompatibilityScorer
from services.matching.score_cache import CachingScorer

logger = logging.getLogger(__name__)


def job_skill_list(job: JobPosting) -> list[str]:
    """The job's skills as written (trimmed, case preserved)."""
    return [s.strip() for s in (job.skills or "").split(",") if s.strip()]


def skill_breakdown(job: JobPosting, candidate: CandidateProfile) -> list[SkillMatch]:
    """Per candidate skill, whether the job lists it verbatim."""
    listed = set(job_skill_list(job))
    return [SkillMatch(name=skill, matches=skill in listed) for skill in candidate.skills]


class AdminMatchFinder(BaseMatchService):
    service_name = "admin_match_finder"

    def __init__(
        self,
        config: ScoringConfig | None = None,
        scorer: CompatibilityScorer | CachingScorer | None = None,
        limit: int = 10,
    ) -> None:
        super().__init__(config)
        self.scorer = scorer or CompatibilityScorer(self.config)
        self.limit = limit

    def load(self) -> None:
        if self.limit < 1:
            raise ValueError(f"limit must be at least 1, got {self.limit}")
        self.scorer.ensure_loaded()

    def matches_for_job(
        self,
        job: JobPosting,
        candidates: list[CandidateProfile],
        limit: int | None = None,
    ) -> list[CandidateMatch]:
        """Best candidates for one job, highest score first."""
        self.ensure_loaded()
        matches = [
            CandidateMatch(
                candidate_id=candidate.id,
                candidate=candidate.model_copy(deep=True),
                score=self.scorer.score(job, candidate).overall_score,
                skills_match=skill_breakdown(job, candidate),
            )
            for candidate in candidates
        ]
        matches.sort(key=lambda m: m.score, reverse=True)
        top = matches[: self.limit if limit is None else limit]
        logger.info("Job %s: scored %d candidates, returning %d", job.id, len(candidates), len(top))
        return top

    def matches_for_candidate(
        self,
        candidate: CandidateProfile,
        jobs: list[JobPosting],
        limit: int | None = None,
    ) -> list[JobMatch]:
        """Best jobs for one candidate, highest score first."""
        self.ensure_loaded()
        matches = [
            JobMatch(
                job_id=job.id,
                job=job.model_copy(deep=True),
                score=self.scorer.score(job, candidate).overall_score,
            )
            for job in jobs
        ]
        matches.sort(key=lambda m: m.score, reverse=True)
        top = matches[: self.limit if limit is None else limit]
        logger.info("Candidate %s: scored %d jobs, returning %d", candidate.id, len(jobs), len(top))
        return top
