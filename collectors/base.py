"""
Base collector interface. All collectors must implement this.
"""

from abc import ABC, abstractmethod

from models import FetchResult


class Collector(ABC):
    """
    A collector pulls technology names from one kind of external resource.

    Contract:
    - collect() never raises. Every failure becomes a FetchResult with
      an empty technology list and `error` set.
    - One request per call. No retries, no follow-up requests.
    - Extraction is deterministic. No guessing beyond the known shapes.
    """

    @abstractmethod
    def collect(self, url: str) -> FetchResult:
        """Fetch `url` and return the technologies found there."""
        ...

    @abstractmethod
    def name(self) -> str:
        """Collector name, used for logging."""
        ...

    def technologies(self, url: str) -> list[str]:
        """Just the list. Empty on any failure."""
        return self.collect(url).technologies
