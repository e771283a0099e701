from __future__ import annotations

from typing import Protocol

from tickdepth.application.dto.subgraph import FetchResult
from tickdepth.domain.entities.pool import PoolState
from tickdepth.domain.entities.tick import InitializedTick


class PoolStatePort(Protocol):
    def fetch_pool(self, *, pool_address: str) -> FetchResult[PoolState]:
        ...


class InitializedTickPort(Protocol):
    def fetch_initialized_ticks(self, *, pool_address: str) -> FetchResult[list[InitializedTick]]:
        ...
