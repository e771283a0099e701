from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Any

import httpx

from tickdepth.application.dto.subgraph import SubgraphQueryResult


logger = logging.getLogger(__name__)


class SubgraphResolutionError(RuntimeError):
    pass


@dataclass(frozen=True)
class SubgraphClientSettings:
    graph_gateway_base: str
    graph_api_key: str
    graph_subgraph_id: str
    timeout_seconds: float


class SubgraphClient:
    """GraphQL client for the Uniswap v3 subgraph.

    Transport and GraphQL failures come back as `SubgraphQueryResult.error`;
    nothing is retried.
    """

    def __init__(self, settings: SubgraphClientSettings):
        self._settings = settings

    def query(self, *, query: str, variables: dict[str, Any]) -> SubgraphQueryResult:
        try:
            url = self._resolve_subgraph_url()
        except SubgraphResolutionError as exc:
            logger.warning("subgraph_client: subgraph_not_configured error=%s", exc)
            return SubgraphQueryResult(data=None, error=str(exc))

        try:
            with httpx.Client(timeout=self._settings.timeout_seconds) as client:
                response = client.post(
                    url,
                    json={"query": query, "variables": variables},
                )
                response.raise_for_status()
                payload = response.json()
        except (httpx.HTTPError, ValueError) as exc:
            logger.warning(
                "subgraph_client: request_failed url=%s error=%s",
                url,
                exc,
            )
            return SubgraphQueryResult(data=None, error=str(exc) or exc.__class__.__name__)

        if not isinstance(payload, dict):
            logger.warning(
                "subgraph_client: unexpected_payload url=%s type=%s",
                url,
                type(payload).__name__,
            )
            return SubgraphQueryResult(data=None, error="GraphQL response is not a JSON object.")

        errors = payload.get("errors") or []
        if errors:
            if not isinstance(errors, list):
                errors = [errors]
            message = " | ".join(
                str(err.get("message", err)) if isinstance(err, dict) else str(err)
                for err in errors
            )
            logger.warning("subgraph_client: graphql_errors url=%s errors=%s", url, message)
            data = payload.get("data")
            return SubgraphQueryResult(data=data if isinstance(data, dict) else None, error=message)

        data = payload.get("data")
        if not isinstance(data, dict):
            return SubgraphQueryResult(data=None, error="GraphQL response without data.")
        return SubgraphQueryResult(data=data)

    def _resolve_subgraph_url(self) -> str:
        subgraph_id = self._settings.graph_subgraph_id.strip()
        if not subgraph_id:
            raise SubgraphResolutionError("Missing GRAPH_SUBGRAPH_ID.")
        return self._build_gateway_url(subgraph_id)

    def _build_gateway_url(self, subgraph_id: str) -> str:
        if subgraph_id.startswith("http://") or subgraph_id.startswith("https://"):
            return subgraph_id.rstrip("/")
        base = self._settings.graph_gateway_base.rstrip("/")
        api_key = self._settings.graph_api_key.strip()
        if api_key:
            return f"{base}/{api_key}/subgraphs/id/{subgraph_id}"
        return f"{base}/subgraphs/id/{subgraph_id}"
