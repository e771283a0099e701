from __future__ import annotations

from tickdepth.domain.exceptions import LiquidityInputError


def normalize_pool_address(pool_address: str) -> str:
    normalized = pool_address.strip().lower()
    if not normalized.startswith("0x") or len(normalized) < 3:
        raise LiquidityInputError("pool_address must be a 0x-prefixed address.")
    return normalized
