from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv


load_dotenv()


def _env(name: str, default: str | None = None) -> str | None:
    return os.getenv(name, default)


@dataclass(frozen=True)
class Settings:
    graph_gateway_base: str
    graph_api_key: str
    graph_subgraph_id: str
    graph_request_timeout_seconds: float
    ticks_page_size: int
    ticks_max_pages: int
    surrounding_ticks: int
    ticks_per_group: int
    price_fixed_digits: int
    log_level: str


def get_settings() -> Settings:
    return Settings(
        graph_gateway_base=_env("GRAPH_GATEWAY_BASE", "https://gateway.thegraph.com/api"),
        graph_api_key=_env("GRAPH_API_KEY", ""),
        graph_subgraph_id=_env("GRAPH_SUBGRAPH_ID", ""),
        graph_request_timeout_seconds=float(_env("GRAPH_REQUEST_TIMEOUT_SECONDS", "10")),
        ticks_page_size=int(_env("TICKS_PAGE_SIZE", "1000")),
        ticks_max_pages=int(_env("TICKS_MAX_PAGES", "200")),
        surrounding_ticks=int(_env("SURROUNDING_TICKS", "300")),
        ticks_per_group=int(_env("TICKS_PER_GROUP", "1")),
        price_fixed_digits=int(_env("PRICE_FIXED_DIGITS", "4")),
        log_level=_env("LOG_LEVEL", "INFO"),
    )
