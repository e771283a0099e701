from __future__ import annotations

from tickdepth.application.dto.position_amounts import (
    GetPositionAmountsInput,
    GetPositionAmountsOutput,
    TokenAmountOutput,
)
from tickdepth.application.ports.pool_data_port import PoolStatePort
from tickdepth.application.use_cases.pool_address import normalize_pool_address
from tickdepth.domain.entities.position import Position
from tickdepth.domain.exceptions import (
    LiquidityInputError,
    PoolNotFoundError,
    PoolStateUnavailableError,
)
from tickdepth.domain.services.position_amounts import amounts_for_position, to_token_units
from tickdepth.domain.services.univ3_math import MAX_TICK, MIN_TICK


class GetPositionAmountsUseCase:
    def __init__(self, *, pool_state_port: PoolStatePort):
        self._pool_state_port = pool_state_port

    def execute(self, command: GetPositionAmountsInput) -> GetPositionAmountsOutput | None:
        if command.liquidity < 0:
            raise LiquidityInputError("liquidity must be >= 0.")
        for tick in (command.tick_lower, command.tick_upper):
            if tick < MIN_TICK or tick > MAX_TICK:
                raise LiquidityInputError(f"tick must be within [{MIN_TICK}, {MAX_TICK}].")
        pool_address = normalize_pool_address(command.pool_address)

        pool_result = self._pool_state_port.fetch_pool(pool_address=pool_address)
        if not pool_result.ready:
            return None
        pool = pool_result.data
        if pool is None:
            raise PoolNotFoundError("Pool not found.")
        if pool.tick is None or pool.sqrt_price_x96 <= 0:
            raise PoolStateUnavailableError("Pool price not found.")

        position = Position(
            token0=pool.token0,
            token1=pool.token1,
            tick_lower=command.tick_lower,
            tick_upper=command.tick_upper,
            liquidity=command.liquidity,
        )
        amounts = amounts_for_position(
            position=position,
            current_tick=pool.tick,
            sqrt_ratio_current_x96=pool.sqrt_price_x96,
        )

        return GetPositionAmountsOutput(
            current_tick=pool.tick,
            token0=TokenAmountOutput(
                address=pool.token0.address,
                symbol=pool.token0.symbol,
                raw=amounts.amount0,
                amount=to_token_units(amounts.amount0, pool.token0),
            ),
            token1=TokenAmountOutput(
                address=pool.token1.address,
                symbol=pool.token1.symbol,
                raw=amounts.amount1,
                amount=to_token_units(amounts.amount1, pool.token1),
            ),
        )
