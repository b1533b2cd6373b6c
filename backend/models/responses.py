from models.schemas.base import CamelModel
from models.schemas.candidate_profile import CandidateProfile
from models.schemas.compatibility import MatchFactors
from models.schemas.job_posting import JobPosting
from models.schemas.scoring_config import ScoringWeights


class RecommendedJob(JobPosting):
    """A job posting annotated with its compatibility for one candidate."""
    compatibility_score: int = 0
    match_factors: MatchFactors = MatchFactors()


class SkillMatch(CamelModel):
    name: str
    matches: bool = False


class CandidateMatch(CamelModel):
    candidate_id: int | str
    candidate: CandidateProfile
    score: int = 0
    skills_match: list[SkillMatch] = []
    # Placeholders: always True until product defines these checks
    experience_match: bool = True
    salary_match: bool = True


class JobMatch(CamelModel):
    job_id: int | str
    job: JobPosting
    score: int = 0


class HealthResponse(CamelModel):
    status: str = "ok"
    weights: ScoringWeights = ScoringWeights()
    score_cache_enabled: bool = False
