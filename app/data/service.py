from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Generic, Optional, TypeVar

from supabase import Client

from config import AppConfig
from data import fetchers
from data import mock_data
from data.connection import get_store_client
from data.models import Asset, Contractor, ElectricityMeter, Page, STPOperation, WaterMeter
from data.queries import clean_search_term, page_range
from data.transforms import filter_assets

logger = logging.getLogger(__name__)

LIVE = "live"
DEMO = "demo"

T = TypeVar("T")


@dataclass(frozen=True)
class DataResult(Generic[T]):
    data: T
    source: str  # "live" | "demo"
    warning: str | None = None

    @property
    def is_live(self) -> bool:
        return self.source == LIVE


def _is_empty(data: Any) -> bool:
    if isinstance(data, Page):
        # A page past the end of a non-empty table is not an empty table.
        return not data.data and not data.count
    return not data


def _fallback(
    use_mock: bool,
    client: Optional[Client],
    fn_live: Callable[[Client], T],
    fn_demo: Callable[[], T],
    allow_empty: bool = False,
) -> DataResult[T]:
    """
    Try the store, else local demo data. The warning says why demo was chosen.
    With allow_empty, an empty live answer is kept (e.g. a search with no hits).
    """
    if use_mock:
        return DataResult(data=fn_demo(), source=DEMO)
    if client is None:
        return DataResult(data=fn_demo(), source=DEMO, warning="Supabase not configured; showing demo data.")
    try:
        data = fn_live(client)
    except Exception as e:
        logger.warning("Live query failed, falling back to demo data: %s: %s", type(e).__name__, e)
        return DataResult(data=fn_demo(), source=DEMO, warning=f"Fell back to demo data: {type(e).__name__}")
    if _is_empty(data) and not allow_empty:
        return DataResult(data=fn_demo(), source=DEMO, warning="Supabase returned no rows; showing demo data.")
    return DataResult(data=data, source=LIVE)


def _demo_assets_page(page: int, page_size: int, search: str) -> Page[Asset]:
    matched = filter_assets(mock_data.assets_mock(), clean_search_term(search))
    start, end = page_range(page, page_size)
    return Page(data=matched[start : end + 1], count=len(matched))


def get_assets(cfg: AppConfig, use_mock: bool, page: int = 1, page_size: int = 50, search: str = "") -> DataResult[Page[Asset]]:
    return _fallback(
        use_mock,
        get_store_client(cfg),
        fn_live=lambda c: fetchers.load_assets(c, page=page, page_size=page_size, search=search),
        fn_demo=lambda: _demo_assets_page(page, page_size, search),
        allow_empty=bool(clean_search_term(search)),
    )


def get_contractors(cfg: AppConfig, use_mock: bool) -> DataResult[list[Contractor]]:
    return _fallback(
        use_mock,
        get_store_client(cfg),
        fn_live=fetchers.load_contractors,
        fn_demo=mock_data.contractors_mock,
    )


def get_electricity_meters(cfg: AppConfig, use_mock: bool) -> DataResult[list[ElectricityMeter]]:
    return _fallback(
        use_mock,
        get_store_client(cfg),
        fn_live=fetchers.load_electricity_meters,
        fn_demo=mock_data.electricity_meters_mock,
    )


def get_stp_operations(cfg: AppConfig, use_mock: bool) -> DataResult[list[STPOperation]]:
    return _fallback(
        use_mock,
        get_store_client(cfg),
        fn_live=lambda c: fetchers.load_stp_operations(c, cfg.stp_tanker_fee, cfg.stp_tse_saving_rate),
        fn_demo=lambda: mock_data.stp_operations_mock(
            tanker_fee=cfg.stp_tanker_fee, tse_saving_rate=cfg.stp_tse_saving_rate
        ),
    )


def get_water_meters(cfg: AppConfig, use_mock: bool) -> DataResult[list[WaterMeter]]:
    return _fallback(
        use_mock,
        get_store_client(cfg),
        fn_live=fetchers.load_water_meters,
        fn_demo=mock_data.water_meters_mock,
    )
