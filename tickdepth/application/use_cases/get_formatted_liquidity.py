from __future__ import annotations

from tickdepth.application.dto.tick_liquidity import (
    GetFormattedLiquidityInput,
    GetSurroundingTicksInput,
)
from tickdepth.application.use_cases.get_surrounding_ticks import GetSurroundingTicksUseCase
from tickdepth.domain.entities.tick import TickBucket
from tickdepth.domain.exceptions import LiquidityInputError
from tickdepth.domain.services.tick_window import format_tick_window


class GetFormattedLiquidityUseCase:
    def __init__(self, *, surrounding_ticks_use_case: GetSurroundingTicksUseCase):
        self._surrounding_ticks_use_case = surrounding_ticks_use_case

    def execute(self, command: GetFormattedLiquidityInput) -> list[TickBucket] | None:
        """Buckets of the liquidity window, or None when upstream data is not available yet."""
        if command.ticks_per_group < 1:
            raise LiquidityInputError("ticks_per_group must be >= 1.")

        result = self._surrounding_ticks_use_case.execute(
            GetSurroundingTicksInput(
                pool_address=command.pool_address,
                surrounding_ticks=command.surrounding_ticks,
            )
        )
        if result.data is None:
            return None

        return format_tick_window(
            ticks=result.data.ticks_processed,
            active_tick_idx=result.data.active_tick_idx,
            group_size=command.ticks_per_group,
        )
