from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query

from tickdepth.api.deps import (
    get_cached_settings,
    get_formatted_liquidity_use_case,
    get_surrounding_ticks_use_case,
)
from tickdepth.api.schemas.tick_liquidity import (
    FormattedLiquidityResponse,
    ProcessedTickResponse,
    SurroundingTicksResponse,
    TickBucketResponse,
    TokenResponse,
)
from tickdepth.application.dto.tick_liquidity import (
    GetFormattedLiquidityInput,
    GetSurroundingTicksInput,
)
from tickdepth.application.use_cases.get_formatted_liquidity import GetFormattedLiquidityUseCase
from tickdepth.application.use_cases.get_surrounding_ticks import GetSurroundingTicksUseCase
from tickdepth.domain.entities.pool import Token
from tickdepth.domain.exceptions import (
    LiquidityInputError,
    PoolNotFoundError,
    PoolStateUnavailableError,
    UnknownFeeTierError,
)
from tickdepth.shared.config import Settings

MAX_SURROUNDING_TICKS = 5000

router = APIRouter()


def _token_response(token: Token) -> TokenResponse:
    return TokenResponse(address=token.address, symbol=token.symbol, decimals=token.decimals)


@router.get("/v1/pools/{pool_address}/ticks", response_model=SurroundingTicksResponse)
def get_surrounding_ticks(
    pool_address: str,
    surrounding_ticks: int | None = Query(
        None,
        ge=1,
        le=MAX_SURROUNDING_TICKS,
        description="Ticks on each side of the active tick.",
    ),
    settings: Settings = Depends(get_cached_settings),
    use_case: GetSurroundingTicksUseCase = Depends(get_surrounding_ticks_use_case),
):
    try:
        result = use_case.execute(
            GetSurroundingTicksInput(
                pool_address=pool_address,
                surrounding_ticks=surrounding_ticks or settings.surrounding_ticks,
            )
        )
    except (PoolNotFoundError, PoolStateUnavailableError) as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except LiquidityInputError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except UnknownFeeTierError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc

    if result.data is None:
        detail = "Subgraph data is still loading." if result.loading else "Subgraph data unavailable."
        raise HTTPException(status_code=503, detail=detail)

    data = result.data
    return SurroundingTicksResponse(
        pool_address=pool_address.strip().lower(),
        fee_tier=data.fee_tier,
        tick_spacing=data.tick_spacing,
        active_tick_idx=data.active_tick_idx,
        token0=_token_response(data.token0),
        token1=_token_response(data.token1),
        ticks_processed=[
            ProcessedTickResponse(
                tick_idx=tick.tick_idx,
                liquidity_active=str(tick.liquidity_active),
                liquidity_net=str(tick.liquidity_net),
                liquidity_gross=str(tick.liquidity_gross),
                price0=tick.price0,
                price1=tick.price1,
            )
            for tick in data.ticks_processed
        ],
    )


@router.get("/v1/pools/{pool_address}/liquidity", response_model=FormattedLiquidityResponse)
def get_formatted_liquidity(
    pool_address: str,
    surrounding_ticks: int | None = Query(
        None,
        ge=1,
        le=MAX_SURROUNDING_TICKS,
        description="Ticks on each side of the active tick.",
    ),
    ticks_per_group: int | None = Query(None, ge=1, description="Ticks aggregated per bucket."),
    settings: Settings = Depends(get_cached_settings),
    use_case: GetFormattedLiquidityUseCase = Depends(get_formatted_liquidity_use_case),
):
    try:
        buckets = use_case.execute(
            GetFormattedLiquidityInput(
                pool_address=pool_address,
                surrounding_ticks=surrounding_ticks or settings.surrounding_ticks,
                ticks_per_group=ticks_per_group or settings.ticks_per_group,
            )
        )
    except (PoolNotFoundError, PoolStateUnavailableError) as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except LiquidityInputError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except UnknownFeeTierError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc

    if buckets is None:
        raise HTTPException(status_code=503, detail="Subgraph data unavailable.")

    return FormattedLiquidityResponse(
        pool_address=pool_address.strip().lower(),
        data=[
            TickBucketResponse(
                index=bucket.index,
                is_current=str(bucket.current_liquidity),
                active_liquidity=str(bucket.active_liquidity),
                price0=str(bucket.price0),
                price1=str(bucket.price1),
            )
            for bucket in buckets
        ],
    )
