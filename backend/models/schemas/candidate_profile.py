"""Candidate profile record as supplied by the data layer."""

from datetime import datetime

from pydantic import ConfigDict, field_validator

from models.schemas.base import CamelModel


class ExperienceEntry(CamelModel):
    """A single experience entry. Only ``duration`` (years) is scored."""
    model_config = ConfigDict(extra="allow")

    duration: str | int | float | None = None


class QualificationEntry(CamelModel):
    """A single qualification entry. Only ``degree`` is scored."""
    model_config = ConfigDict(extra="allow")

    degree: str | None = None


class CandidateProfile(CamelModel):
    """A candidate profile, read-only to the matching engine.

    ``qualifications`` is ordered oldest -> highest; the last entry is taken
    as the candidate's highest qualification.
    """
    model_config = ConfigDict(extra="allow")

    id: int | str
    skills: list[str] = []
    experience: list[ExperienceEntry] = []
    qualifications: list[QualificationEntry] = []
    expected_salary: int | None = None
    address: str | None = None
    updated_at: datetime | None = None

    @field_validator("skills", "experience", "qualifications", mode="before")
    @classmethod
    def _none_as_empty(cls, v):
        return [] if v is None else v
