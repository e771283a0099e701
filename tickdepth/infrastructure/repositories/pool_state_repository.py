from __future__ import annotations

import logging

from tickdepth.application.dto.subgraph import FetchResult
from tickdepth.application.ports.subgraph_query_port import SubgraphQueryPort
from tickdepth.domain.entities.pool import PoolState
from tickdepth.infrastructure.mappers.subgraph_mapper import map_row_to_pool_state


logger = logging.getLogger(__name__)


POOL_QUERY = """
query pool($poolAddress: ID!) {
  pool(id: $poolAddress) {
    tick
    token0 {
      symbol
      id
      decimals
    }
    token1 {
      symbol
      id
      decimals
    }
    feeTier
    sqrtPrice
    liquidity
  }
}
"""


class SubgraphPoolStateRepository:
    def __init__(self, query_port: SubgraphQueryPort):
        self._query_port = query_port

    def fetch_pool(self, *, pool_address: str) -> FetchResult[PoolState]:
        pool_id = pool_address.lower()
        result = self._query_port.query(query=POOL_QUERY, variables={"poolAddress": pool_id})
        if result.loading:
            return FetchResult(data=None, loading=True)
        if result.error is not None or result.data is None:
            logger.warning(
                "pool_state_repository: fetch_failed pool=%s error=%s",
                pool_id,
                result.error,
            )
            return FetchResult(data=None, error=True)

        row = result.data.get("pool")
        if not row:
            return FetchResult(data=None)
        return FetchResult(data=map_row_to_pool_state(pool_id, row))
