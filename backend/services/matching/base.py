"""Abstract base class for all matching services."""

from abc import ABC, abstractmethod
import logging

from models.schemas.scoring_config import ScoringConfig

logger = logging.getLogger(__name__)


class BaseMatchService(ABC):
    """Base class for the scorer, ranker and admin finder.

    Subclasses must implement:
        - service_name: identifier used in the registry
        - load(): derive any lookup tables from the scoring config

    Services are immutable once loaded, so one instance can serve
    concurrent requests.
    """

    service_name: str = ""

    def __init__(self, config: ScoringConfig | None = None) -> None:
        self.config = config or ScoringConfig()
        self._loaded = False

    @abstractmethod
    def load(self) -> None:
        """Prepare derived state. Called once, before first use."""

    @property
    def is_loaded(self) -> bool:
        return self._loaded

    def ensure_loaded(self) -> None:
        """Load the service if not already loaded."""
        if not self._loaded:
            self.load()
            self._loaded = True
            logger.info("Matching service ready: %s", self.service_name)
