from __future__ import annotations

from typing import Any, Protocol

from tickdepth.application.dto.subgraph import SubgraphQueryResult


class SubgraphQueryPort(Protocol):
    def query(self, *, query: str, variables: dict[str, Any]) -> SubgraphQueryResult:
        ...
