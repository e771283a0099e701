from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar


T = TypeVar("T")


@dataclass(frozen=True)
class SubgraphQueryResult:
    data: dict[str, Any] | None
    error: str | None = None
    loading: bool = False


@dataclass(frozen=True)
class FetchResult(Generic[T]):
    """Outcome of a subgraph fetch; `data` is only meaningful when neither flag is set."""

    data: T | None
    error: bool = False
    loading: bool = False

    @property
    def ready(self) -> bool:
        return not self.error and not self.loading
