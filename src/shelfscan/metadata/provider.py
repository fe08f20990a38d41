# ABOUTME: BookSearchProvider protocol defining the contract for bibliographic search sources.
# ABOUTME: Providers report failures as a SearchOutcome value instead of raising.

from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from shelfscan.metadata.types import CandidateBook


@dataclass(frozen=True)
class ProviderError:
    """Why a search against a provider produced no usable candidates."""

    provider: str
    message: str

    def __str__(self) -> str:
        return f"{self.provider}: {self.message}"


@dataclass(frozen=True)
class SearchOutcome:
    """Result of one provider search: either candidates or an error, never both."""

    candidates: tuple[CandidateBook, ...] = ()
    error: ProviderError | None = None

    @classmethod
    def success(cls, candidates: list[CandidateBook]) -> "SearchOutcome":
        return cls(candidates=tuple(candidates))

    @classmethod
    def failure(cls, provider: str, message: str) -> "SearchOutcome":
        return cls(error=ProviderError(provider=provider, message=message))

    @property
    def ok(self) -> bool:
        return self.error is None


@runtime_checkable
class BookSearchProvider(Protocol):
    """Protocol for free-text bibliographic search services.

    Implementations return candidates in their own relevance order; callers
    re-score every candidate themselves and do not rely on that order.
    """

    @property
    def name(self) -> str: ...

    def search(self, query: str, max_results: int = 3) -> SearchOutcome: ...
