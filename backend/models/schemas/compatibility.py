"""Scorer output: overall compatibility plus the five explainable factors."""

from models.schemas.base import CamelModel


class MatchFactors(CamelModel):
    skills_score: int = 0  # 0-100
    experience_score: int = 0  # 0-100
    salary_score: int = 0  # 0-100
    location_score: int = 0  # 0-100
    qualification_score: int = 0  # 0-100


class CompatibilityResult(CamelModel):
    """Structured output of the CompatibilityScorer.

    All values are rounded once, at the boundary; the weighted overall score
    is computed from the unrounded factors.
    """
    overall_score: int = 0  # 0-100
    factors: MatchFactors = MatchFactors()
