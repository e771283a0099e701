from __future__ import annotations

from functools import lru_cache

from tickdepth.application.use_cases.get_formatted_liquidity import GetFormattedLiquidityUseCase
from tickdepth.application.use_cases.get_position_amounts import GetPositionAmountsUseCase
from tickdepth.application.use_cases.get_surrounding_ticks import GetSurroundingTicksUseCase
from tickdepth.infrastructure.clients.subgraph_client import SubgraphClient, SubgraphClientSettings
from tickdepth.infrastructure.repositories.initialized_tick_repository import (
    SubgraphInitializedTickRepository,
)
from tickdepth.infrastructure.repositories.pool_state_repository import SubgraphPoolStateRepository
from tickdepth.shared.config import Settings, get_settings


@lru_cache(maxsize=1)
def get_cached_settings() -> Settings:
    return get_settings()


@lru_cache(maxsize=1)
def _get_subgraph_client() -> SubgraphClient:
    settings = get_cached_settings()
    return SubgraphClient(
        SubgraphClientSettings(
            graph_gateway_base=settings.graph_gateway_base,
            graph_api_key=settings.graph_api_key,
            graph_subgraph_id=settings.graph_subgraph_id,
            timeout_seconds=settings.graph_request_timeout_seconds,
        )
    )


def _get_pool_state_repository() -> SubgraphPoolStateRepository:
    return SubgraphPoolStateRepository(_get_subgraph_client())


def _get_initialized_tick_repository() -> SubgraphInitializedTickRepository:
    settings = get_cached_settings()
    return SubgraphInitializedTickRepository(
        _get_subgraph_client(),
        page_size=settings.ticks_page_size,
        max_pages=settings.ticks_max_pages,
    )


def get_surrounding_ticks_use_case() -> GetSurroundingTicksUseCase:
    return GetSurroundingTicksUseCase(
        pool_state_port=_get_pool_state_repository(),
        tick_port=_get_initialized_tick_repository(),
        price_fixed_digits=get_cached_settings().price_fixed_digits,
    )


def get_formatted_liquidity_use_case() -> GetFormattedLiquidityUseCase:
    return GetFormattedLiquidityUseCase(surrounding_ticks_use_case=get_surrounding_ticks_use_case())


def get_position_amounts_use_case() -> GetPositionAmountsUseCase:
    return GetPositionAmountsUseCase(pool_state_port=_get_pool_state_repository())
