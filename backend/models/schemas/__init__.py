"""Records consumed and produced by the matching engine."""

from models.schemas.candidate_profile import CandidateProfile, ExperienceEntry, QualificationEntry
from models.schemas.compatibility import CompatibilityResult, MatchFactors
from models.schemas.job_posting import JobPosting
from models.schemas.scoring_config import ScoringConfig, ScoringWeights

__all__ = [
    "CandidateProfile",
    "ExperienceEntry",
    "QualificationEntry",
    "CompatibilityResult",
    "MatchFactors",
    "JobPosting",
    "ScoringConfig",
    "ScoringWeights",
]
