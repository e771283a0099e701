from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from tickdepth.api.routers.position_amounts import router as position_amounts_router
from tickdepth.api.routers.tick_liquidity import router as tick_liquidity_router
from tickdepth.shared.config import get_settings


logging.basicConfig(
    level=get_settings().log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
)

app = FastAPI(title="Tick Depth API")
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)
app.include_router(tick_liquidity_router)
app.include_router(position_amounts_router)


@app.get("/health")
def health():
    return {"status": "ok"}
