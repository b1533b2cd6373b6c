"""Job-candidate compatibility scorer.

Five independent factors, each 0-100, combined by fixed weights:

    skills         30%  candidate skills found in the job's comma-separated list
    experience     25%  summed years vs. first number in the requirement text
    qualification  20%  position on the education ladder vs. the minimum
    salary         15%  distance of the expectation from the top of the range
    location       10%  substring match between address and job location

A factor whose inputs are missing falls back to the neutral score (50)
instead of failing. Rounding happens once, on the way out, so the overall
score is computed from full-precision factors.
"""

import logging
import math

from models.schemas.candidate_profile import CandidateProfile
from models.schemas.compatibility import CompatibilityResult, MatchFactors
from models.schemas.job_posting import JobPosting
from services.matching.base import BaseMatchService
from services.matching.text_parsing import first_int, last_int, leading_int, normalize, split_tokens

logger = logging.getLogger(__name__)


def round_score(value: float) -> int:
    """Round half up and clamp to 0-100."""
    return min(100, max(0, math.floor(value + 0.5)))


def ladder_level(text: str | None, ladder: tuple[str, ...]) -> int:
    """Index of the first ladder term contained in *text*, or -1."""
    normalized = normalize(text)
    if not normalized:
        return -1
    for level, term in enumerate(ladder):
        if term in normalized:
            return level
    return -1


def calculate_skills_score(job_skills: str | None, candidate_skills: list[str], neutral: float) -> float:
    """Share of job skill tokens covered by the candidate, 0-100.

    A candidate skill counts when it appears inside any job token
    ("react" matches "react native"). Candidate skills are lowercased but
    not trimmed, so a blank skill is contained in every token and counts.
    """
    job_tokens = split_tokens(job_skills)
    if not job_tokens:
        return neutral

    matched = 0
    for skill in candidate_skills:
        needle = normalize(skill)
        if any(needle in token for token in job_tokens):
            matched += 1

    score = min(matched / len(job_tokens) * 100, 100.0)
    logger.debug("Skills: %d/%d job tokens matched, score = %.2f", matched, len(job_tokens), score)
    return score


def calculate_experience_score(experience_required: str | None, durations: list, neutral: float) -> float:
    total = sum(leading_int(d) for d in durations)
    required = first_int(experience_required)

    if required > 0:
        score = min(total / required * 100, 100.0)
    elif total > 0:
        score = 100.0
    else:
        score = neutral
    logger.debug("Experience: %d years vs %d required, score = %.2f", total, required, score)
    return max(0.0, score)


def calculate_salary_score(salary_range: str | None, expected_salary: int | None, neutral: float) -> float:
    max_salary = last_int(salary_range)
    expected = expected_salary or 0

    if expected > 0 and max_salary > 0:
        score = max(0.0, 100 - abs(expected - max_salary) / max_salary * 100)
    else:
        score = neutral
    logger.debug("Salary: expected %d vs max %d, score = %.2f", expected, max_salary, score)
    return score


def calculate_location_score(
    candidate_address: str | None,
    job_location: str | None,
    neutral: float,
    mismatch: float,
) -> float:
    candidate_loc = normalize(candidate_address)
    job_loc = normalize(job_location)

    if not candidate_loc or not job_loc:
        return neutral
    if candidate_loc in job_loc or job_loc in candidate_loc:
        return 100.0
    return mismatch


def calculate_qualification_score(
    candidate_degree: str | None,
    min_qualification: str | None,
    ladder: tuple[str, ...],
    neutral: float,
    step_penalty: float,
) -> float:
    """Ladder comparison: meeting the minimum scores 100, each level short costs *step_penalty*."""
    candidate_level = ladder_level(candidate_degree, ladder)
    required_level = ladder_level(min_qualification, ladder)

    if candidate_level < 0 or required_level < 0:
        score = neutral
    elif candidate_level >= required_level:
        score = 100.0
    else:
        score = max(0.0, 100 - (required_level - candidate_level) * step_penalty)
    logger.debug(
        "Qualification: level %d vs %d required, score = %.2f",
        candidate_level, required_level, score,
    )
    return score


class CompatibilityScorer(BaseMatchService):
    service_name = "compatibility_scorer"

    def load(self) -> None:
        self._ladder = tuple(self.config.qualification_ladder)
        self._weights = self.config.weights

    def score(self, job: JobPosting, candidate: CandidateProfile) -> CompatibilityResult:
        """Score one job against one candidate. Never raises on missing data."""
        self.ensure_loaded()
        cfg = self.config
        neutral = cfg.neutral_score

        highest_degree = candidate.qualifications[-1].degree if candidate.qualifications else None

        skills = calculate_skills_score(job.skills, candidate.skills, neutral)
        experience = calculate_experience_score(
            job.experience_required,
            [entry.duration for entry in candidate.experience],
            neutral,
        )
        salary = calculate_salary_score(job.salary_range, candidate.expected_salary, neutral)
        location = calculate_location_score(
            candidate.address, job.location, neutral, cfg.location_mismatch_score,
        )
        qualification = calculate_qualification_score(
            highest_degree, job.min_qualification, self._ladder, neutral, cfg.qualification_step_penalty,
        )

        w = self._weights
        overall = (
            skills * w.skills
            + experience * w.experience
            + qualification * w.qualification
            + salary * w.salary
            + location * w.location
        )
        logger.debug("Job %s / candidate %s: overall = %.2f", job.id, candidate.id, overall)

        return CompatibilityResult(
            overall_score=round_score(overall),
            factors=MatchFactors(
                skills_score=round_score(skills),
                experience_score=round_score(experience),
                salary_score=round_score(salary),
                location_score=round_score(location),
                qualification_score=round_score(qualification),
            ),
        )
