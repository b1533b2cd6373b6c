from fastapi import APIRouter, Depends, Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from api.dependencies import get_admin_match_finder, get_job_ranker, get_scorer
from config import settings
from models.requests import (
    CandidateMatchesRequest,
    CompatibilityRequest,
    JobMatchesRequest,
    RecommendationRequest,
)
from models.responses import CandidateMatch, HealthResponse, JobMatch, RecommendedJob
from models.schemas.compatibility import CompatibilityResult
from services.matching.admin_match_finder import AdminMatchFinder
from services.matching.job_ranker import JobRanker

router = APIRouter()
limiter = Limiter(key_func=get_remote_address)


@router.get("/health", response_model=HealthResponse)
async def health():
    return HealthResponse(
        status="ok",
        weights=settings.scoring.weights,
        score_cache_enabled=settings.score_cache_enabled,
    )


@router.post("/compatibility", response_model=CompatibilityResult)
@limiter.limit(settings.rate_limit)
async def compatibility(request: Request, body: CompatibilityRequest, scorer=Depends(get_scorer)):
    return scorer.score(body.job, body.candidate)


@router.post("/candidates/recommended-jobs", response_model=list[RecommendedJob])
@limiter.limit(settings.rate_limit)
async def recommended_jobs(
    request: Request,
    body: RecommendationRequest,
    ranker: JobRanker = Depends(get_job_ranker),
):
    return ranker.recommend(body.candidate, body.jobs, now=body.now)


@router.post("/admin/jobs/matches", response_model=list[CandidateMatch])
@limiter.limit(settings.rate_limit)
async def job_matches(
    request: Request,
    body: JobMatchesRequest,
    finder: AdminMatchFinder = Depends(get_admin_match_finder),
):
    return finder.matches_for_job(body.job, body.candidates, limit=body.limit)


@router.post("/admin/candidates/matches", response_model=list[JobMatch])
@limiter.limit(settings.rate_limit)
async def candidate_matches(
    request: Request,
    body: CandidateMatchesRequest,
    finder: AdminMatchFinder = Depends(get_admin_match_finder),
):
    return finder.matches_for_candidate(body.candidate, body.jobs, limit=body.limit)
