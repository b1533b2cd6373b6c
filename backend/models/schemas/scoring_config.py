"""Tunable scoring parameters: factor weights and the qualification ladder."""

import math

from pydantic import BaseModel, field_validator, model_validator


class ScoringWeights(BaseModel):
    skills: float = 0.30
    experience: float = 0.25
    qualification: float = 0.20
    salary: float = 0.15
    location: float = 0.10

    @model_validator(mode="after")
    def _check_weights(self) -> "ScoringWeights":
        values = self.model_dump()
        negative = [name for name, w in values.items() if w < 0]
        if negative:
            raise ValueError(f"Weights must be non-negative: {', '.join(negative)}")
        total = sum(values.values())
        if not math.isclose(total, 1.0, abs_tol=1e-6):
            raise ValueError(f"Weights must sum to 1.0 (got {total:.4f})")
        return self


class ScoringConfig(BaseModel):
    """Everything the scorer needs besides the two records being compared."""
    weights: ScoringWeights = ScoringWeights()
    # Ordered lowest -> highest; matched by substring against lowercased text
    qualification_ladder: list[str] = ["high school", "diploma", "bachelor", "master", "phd"]
    neutral_score: float = 50.0
    location_mismatch_score: float = 30.0
    qualification_step_penalty: float = 25.0

    @field_validator("qualification_ladder")
    @classmethod
    def _normalize_ladder(cls, v: list[str]) -> list[str]:
        ladder = [term.strip().lower() for term in v if term.strip()]
        if not ladder:
            raise ValueError("Qualification ladder must not be empty")
        return ladder
