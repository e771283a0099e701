from __future__ import annotations

import logging

from tickdepth.application.dto.tick_liquidity import (
    GetSurroundingTicksInput,
    GetSurroundingTicksOutput,
    SurroundingTicksData,
)
from tickdepth.application.ports.pool_data_port import InitializedTickPort, PoolStatePort
from tickdepth.application.use_cases.pool_address import normalize_pool_address
from tickdepth.domain.exceptions import (
    LiquidityInputError,
    PoolNotFoundError,
    PoolStateUnavailableError,
)
from tickdepth.domain.services.tick_liquidity import reconstruct_surrounding_ticks
from tickdepth.domain.services.univ3_math import align_tick_floor, fee_tier_to_tick_spacing


logger = logging.getLogger(__name__)


class GetSurroundingTicksUseCase:
    def __init__(
        self,
        *,
        pool_state_port: PoolStatePort,
        tick_port: InitializedTickPort,
        price_fixed_digits: int = 4,
    ):
        self._pool_state_port = pool_state_port
        self._tick_port = tick_port
        self._price_fixed_digits = price_fixed_digits

    def execute(self, command: GetSurroundingTicksInput) -> GetSurroundingTicksOutput:
        if command.surrounding_ticks < 1:
            raise LiquidityInputError("surrounding_ticks must be >= 1.")
        pool_address = normalize_pool_address(command.pool_address)

        pool_result = self._pool_state_port.fetch_pool(pool_address=pool_address)
        if not pool_result.ready:
            return GetSurroundingTicksOutput(
                data=None,
                error=pool_result.error,
                loading=pool_result.loading,
            )

        pool = pool_result.data
        if pool is None:
            raise PoolNotFoundError("Pool not found.")
        if pool.tick is None:
            raise PoolStateUnavailableError("Pool current tick not found.")

        tick_spacing = fee_tier_to_tick_spacing(pool.fee_tier)

        ticks_result = self._tick_port.fetch_initialized_ticks(pool_address=pool_address)
        if not ticks_result.ready:
            return GetSurroundingTicksOutput(
                data=None,
                error=ticks_result.error,
                loading=ticks_result.loading,
            )

        initialized_ticks = ticks_result.data or []
        ticks_processed = reconstruct_surrounding_ticks(
            pool_active_tick=pool.tick,
            tick_spacing=tick_spacing,
            total_liquidity=pool.liquidity,
            initialized_ticks=initialized_ticks,
            window_size=command.surrounding_ticks,
            token0=pool.token0,
            token1=pool.token1,
            price_digits=self._price_fixed_digits,
        )
        active_tick_idx = align_tick_floor(pool.tick, tick_spacing)

        logger.info(
            "get_surrounding_ticks: reconstructed pool=%s pool_tick=%s active_tick=%s tick_spacing=%s initialized=%s processed=%s",
            pool_address,
            pool.tick,
            active_tick_idx,
            tick_spacing,
            len(initialized_ticks),
            len(ticks_processed),
        )
        return GetSurroundingTicksOutput(
            data=SurroundingTicksData(
                ticks_processed=ticks_processed,
                fee_tier=pool.fee_tier,
                tick_spacing=tick_spacing,
                active_tick_idx=active_tick_idx,
                token0=pool.token0,
                token1=pool.token1,
            )
        )
