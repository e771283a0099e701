from __future__ import annotations

import logging

from tickdepth.application.dto.subgraph import FetchResult
from tickdepth.application.ports.subgraph_query_port import SubgraphQueryPort
from tickdepth.domain.entities.tick import InitializedTick
from tickdepth.infrastructure.mappers.subgraph_mapper import map_row_to_initialized_tick


logger = logging.getLogger(__name__)


TICKS_QUERY = """
query surroundingTicks($poolAddress: String!, $skip: Int!, $pageSize: Int!) {
  ticks(
    first: $pageSize
    skip: $skip
    orderBy: tickIdx
    orderDirection: asc
    where: { pool: $poolAddress }
  ) {
    tickIdx
    liquidityGross
    liquidityNet
    price0
    price1
  }
}
"""


class SubgraphInitializedTickRepository:
    """Fetches every initialized tick of a pool, one `skip` page at a time.

    Paging stops on the first empty page. A page that reports `loading` is
    requested again. Every request, repeated ones included, counts toward
    `max_pages`; reaching it yields an error result instead of a partial set.
    """

    def __init__(self, query_port: SubgraphQueryPort, *, page_size: int = 1000, max_pages: int = 200):
        if page_size < 1:
            raise ValueError("page_size must be >= 1.")
        if max_pages < 1:
            raise ValueError("max_pages must be >= 1.")
        self._query_port = query_port
        self._page_size = page_size
        self._max_pages = max_pages

    def fetch_initialized_ticks(self, *, pool_address: str) -> FetchResult[list[InitializedTick]]:
        pool_id = pool_address.lower()
        ticks: list[InitializedTick] = []
        skip = 0
        requests = 0

        while requests < self._max_pages:
            requests += 1
            result = self._query_port.query(
                query=TICKS_QUERY,
                variables={"poolAddress": pool_id, "skip": skip, "pageSize": self._page_size},
            )
            if result.loading:
                continue
            if result.error is not None or result.data is None:
                logger.warning(
                    "initialized_tick_repository: page_failed pool=%s skip=%s fetched=%s error=%s",
                    pool_id,
                    skip,
                    len(ticks),
                    result.error,
                )
                return FetchResult(data=ticks, error=True)

            rows = result.data.get("ticks") or []
            if not rows:
                logger.info(
                    "initialized_tick_repository: fetched_initialized_ticks pool=%s fetched=%s requests=%s",
                    pool_id,
                    len(ticks),
                    requests,
                )
                return FetchResult(data=ticks)

            ticks.extend(map_row_to_initialized_tick(row) for row in rows)
            skip += self._page_size

        logger.warning(
            "initialized_tick_repository: pagination_ceiling_reached pool=%s max_pages=%s fetched=%s",
            pool_id,
            self._max_pages,
            len(ticks),
        )
        return FetchResult(data=ticks, error=True)
