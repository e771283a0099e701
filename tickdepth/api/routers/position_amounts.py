from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from tickdepth.api.deps import get_position_amounts_use_case
from tickdepth.api.schemas.position_amounts import (
    PositionAmountsRequest,
    PositionAmountsResponse,
    TokenAmountResponse,
)
from tickdepth.application.dto.position_amounts import GetPositionAmountsInput, TokenAmountOutput
from tickdepth.application.use_cases.get_position_amounts import GetPositionAmountsUseCase
from tickdepth.domain.exceptions import (
    LiquidityInputError,
    PoolNotFoundError,
    PoolStateUnavailableError,
)

router = APIRouter()


def _amount_response(item: TokenAmountOutput) -> TokenAmountResponse:
    return TokenAmountResponse(
        address=item.address,
        symbol=item.symbol,
        raw=str(item.raw),
        amount=format(item.amount.normalize(), "f"),
    )


@router.post("/v1/positions/amounts", response_model=PositionAmountsResponse)
def get_position_amounts(
    req: PositionAmountsRequest,
    use_case: GetPositionAmountsUseCase = Depends(get_position_amounts_use_case),
):
    try:
        result = use_case.execute(
            GetPositionAmountsInput(
                pool_address=req.pool_address,
                tick_lower=req.tick_lower,
                tick_upper=req.tick_upper,
                liquidity=req.liquidity,
            )
        )
    except (PoolNotFoundError, PoolStateUnavailableError) as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except LiquidityInputError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc

    if result is None:
        raise HTTPException(status_code=503, detail="Subgraph data unavailable.")

    return PositionAmountsResponse(
        current_tick=result.current_tick,
        token0=_amount_response(result.token0),
        token1=_amount_response(result.token1),
    )
