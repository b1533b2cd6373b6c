"""Job posting record as supplied by the data layer."""

from datetime import datetime

from pydantic import ConfigDict

from models.schemas.base import CamelModel


class JobPosting(CamelModel):
    """A job posting, read-only to the matching engine.

    The free-text fields are parsed heuristically by the scorer:
        skills              "react, node, sql"  -> comma-separated tokens
        experience_required "3-5 years"         -> first integer (3)
        salary_range        "6-10 LPA"          -> last integer (10)

    Extra fields (employer, description, ...) are kept so they pass through
    ranking results unchanged.
    """
    model_config = ConfigDict(extra="allow")

    id: int | str
    title: str = ""
    skills: str | None = None
    experience_required: str | None = None
    salary_range: str | None = None
    location: str | None = None
    min_qualification: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    is_active: bool = True
    fulfilled: bool = False
