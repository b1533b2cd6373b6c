"""Optional memoization of pairwise compatibility scores.

The scorer itself stays pure; this layer sits in front of it and keys each
result by both record ids plus both ``updated_at`` stamps, so editing either
record naturally misses the old entry. Records without an ``updated_at``
are never cached: there is no way to tell whether they changed.
"""

from collections import OrderedDict
from datetime import datetime
import logging
import threading

from models.schemas.candidate_profile import CandidateProfile
from models.schemas.compatibility import CompatibilityResult
from models.schemas.job_posting import JobPosting
from services.matching.base import BaseMatchService
from services.matching.compatibility_scorer import CompatibilityScorer

logger = logging.getLogger(__name__)

CacheKey = tuple[int | str, int | str, datetime, datetime]


def cache_key(job: JobPosting, candidate: CandidateProfile) -> CacheKey | None:
    if job.updated_at is None or candidate.updated_at is None:
        return None
    return (job.id, candidate.id, job.updated_at, candidate.updated_at)


class ScoreCache:
    """Thread-safe LRU map of cache key -> CompatibilityResult."""

    def __init__(self, maxsize: int = 4096) -> None:
        if maxsize < 1:
            raise ValueError("maxsize must be at least 1")
        self.maxsize = maxsize
        self._entries: OrderedDict[CacheKey, CompatibilityResult] = OrderedDict()
        self._lock = threading.Lock()
        self.hits = 0
        self.misses = 0

    def get(self, key: CacheKey) -> CompatibilityResult | None:
        with self._lock:
            result = self._entries.get(key)
            if result is None:
                self.misses += 1
                return None
            self._entries.move_to_end(key)
            self.hits += 1
            return result

    def put(self, key: CacheKey, result: CompatibilityResult) -> None:
        with self._lock:
            self._entries[key] = result
            self._entries.move_to_end(key)
            while len(self._entries) > self.maxsize:
                self._entries.popitem(last=False)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()
            self.hits = 0
            self.misses = 0

    def __len__(self) -> int:
        return len(self._entries)


class CachingScorer(BaseMatchService):
    """Drop-in replacement for CompatibilityScorer that consults a ScoreCache."""

    service_name = "caching_scorer"

    def __init__(self, scorer: CompatibilityScorer, cache: ScoreCache | None = None) -> None:
        super().__init__(scorer.config)
        self.scorer = scorer
        self.cache = cache if cache is not None else ScoreCache()

    def load(self) -> None:
        self.scorer.ensure_loaded()

    def score(self, job: JobPosting, candidate: CandidateProfile) -> CompatibilityResult:
        self.ensure_loaded()
        key = cache_key(job, candidate)
        if key is None:
            return self.scorer.score(job, candidate)

        cached = self.cache.get(key)
        if cached is not None:
            return cached.model_copy(deep=True)

        result = self.scorer.score(job, candidate)
        self.cache.put(key, result.model_copy(deep=True))
        return result
