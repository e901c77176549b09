"""
Domain fetchers, one per dataset.

Two flavours per dataset:
- `load_*(client, ...)` runs the query and raises on any store error. Rows that fail
  validation are logged and skipped. The live/demo service uses these so it can
  tell "failed" from "empty".
- `fetch_*(client, ...)` is the read-path contract the pages rely on: a missing
  client or any failure yields the dataset's neutral empty value, never an exception.
"""

from __future__ import annotations

import functools
import logging
from typing import Any, Callable, Optional, TypeVar

from pydantic import BaseModel, ValidationError
from supabase import Client

from data import queries
from data import transforms
from data.models import (
    AmcContactRow,
    AmcContractRow,
    AmcExpiryRow,
    AmcPricingRow,
    Asset,
    AssetRow,
    Contractor,
    ContractorDetailsRow,
    ContractorExpiryRow,
    ContractorPricingRow,
    ContractorSummaryRow,
    ContractorTrackerRow,
    ElectricityMeter,
    ElectricityMeterRow,
    ElectricityReadingRow,
    Page,
    STPOperation,
    STPOperationRow,
    WaterMeter,
    WaterMeterRow,
)

logger = logging.getLogger(__name__)

R = TypeVar("R")
M = TypeVar("M", bound=BaseModel)


def _rows(resp: Any) -> list[dict]:
    return list(getattr(resp, "data", None) or [])


def _validated(model: type[M], resp: Any, dataset: str) -> list[M]:
    """Validate row by row. A row that fails is logged and skipped; the rest are kept."""
    out = []
    for i, raw in enumerate(_rows(resp)):
        try:
            out.append(model.model_validate(raw))
        except ValidationError as e:
            logger.warning("Skipping invalid %s row %d: %s", dataset, i, e)
    return out


def _neutral(dataset: str, empty: Callable[[], R]):
    """Wrap a raising loader into a fetcher that returns `empty()` instead."""

    def deco(loader: Callable[..., R]) -> Callable[..., R]:
        @functools.wraps(loader)
        def wrapper(client: Optional[Client], *args, **kwargs) -> R:
            if client is None:
                return empty()
            try:
                return loader(client, *args, **kwargs)
            except Exception as e:
                logger.warning("Error fetching %s: %s: %s", dataset, type(e).__name__, e)
                return empty()

        return wrapper

    return deco


# --- Assets -----------------------------------------------------------------

def load_assets(client: Client, page: int = 1, page_size: int = 50, search: str = "") -> Page[Asset]:
    resp = queries.q_assets(client, page=page, page_size=page_size, search=search).execute()
    data = [transforms.transform_asset(r) for r in _validated(AssetRow, resp, "assets")]
    return Page(data=data, count=getattr(resp, "count", None) or 0)


fetch_assets = _neutral("assets", lambda: Page(data=[], count=0))(load_assets)


# --- Contractors ------------------------------------------------------------

def load_contractor_tracker(client: Client) -> list[ContractorTrackerRow]:
    return _validated(ContractorTrackerRow, queries.q_contractor_tracker(client).execute(), queries.T_CONTRACTOR_TRACKER)


def load_contractor_summary(client: Client) -> list[ContractorSummaryRow]:
    return _validated(ContractorSummaryRow, queries.q_contractor_summary(client).execute(), queries.T_CONTRACTOR_SUMMARY)


def load_contractor_details(client: Client) -> list[ContractorDetailsRow]:
    return _validated(ContractorDetailsRow, queries.q_contractor_details(client).execute(), queries.T_CONTRACTOR_DETAILS)


def load_contractor_expiry(client: Client) -> list[ContractorExpiryRow]:
    return _validated(ContractorExpiryRow, queries.q_contractor_expiry(client).execute(), queries.T_CONTRACTOR_EXPIRY)


def load_contractor_pricing(client: Client) -> list[ContractorPricingRow]:
    return _validated(ContractorPricingRow, queries.q_contractor_pricing(client).execute(), queries.T_CONTRACTOR_PRICING)


def load_amc_contracts(client: Client) -> list[AmcContractRow]:
    return _validated(AmcContractRow, queries.q_amc_contracts(client).execute(), queries.T_AMC_CONTRACTS)


def load_amc_expiry(client: Client) -> list[AmcExpiryRow]:
    return _validated(AmcExpiryRow, queries.q_amc_expiry(client).execute(), queries.T_AMC_EXPIRY)


def load_amc_contacts(client: Client) -> list[AmcContactRow]:
    return _validated(AmcContactRow, queries.q_amc_contacts(client).execute(), queries.T_AMC_CONTACTS)


def load_amc_pricing(client: Client) -> list[AmcPricingRow]:
    return _validated(AmcPricingRow, queries.q_amc_pricing(client).execute(), queries.T_AMC_PRICING)


def load_contractors(client: Client) -> list[Contractor]:
    """
    UI contractor list: current summary table, else the Contractor_Tracker sheet,
    else the legacy amc_contracts table. Each step queries only if the previous
    one came back empty.
    """
    summary = load_contractor_summary(client)
    if summary:
        return [transforms.transform_contractor_summary(r) for r in summary]
    tracker = load_contractor_tracker(client)
    if tracker:
        return [transforms.transform_contractor_tracker(r) for r in tracker]
    return [transforms.transform_legacy_contract(r) for r in load_amc_contracts(client)]


fetch_contractor_tracker = _neutral("contractor tracker", list)(load_contractor_tracker)
fetch_contractor_summary = _neutral("contractor summary", list)(load_contractor_summary)
fetch_contractor_details = _neutral("contractor details", list)(load_contractor_details)
fetch_contractor_expiry = _neutral("contractor expiry", list)(load_contractor_expiry)
fetch_contractor_pricing = _neutral("contractor pricing", list)(load_contractor_pricing)
fetch_amc_contracts = _neutral("amc contracts", list)(load_amc_contracts)
fetch_amc_expiry = _neutral("amc expiry", list)(load_amc_expiry)
fetch_amc_contacts = _neutral("amc contacts", list)(load_amc_contacts)
fetch_amc_pricing = _neutral("amc pricing", list)(load_amc_pricing)
fetch_contractors = _neutral("contractors", list)(load_contractors)


# --- Electricity ------------------------------------------------------------

def load_electricity_meters(client: Client) -> list[ElectricityMeter]:
    meters = _validated(ElectricityMeterRow, queries.q_electricity_meters(client).execute(), "electricity meter")
    if not meters:
        return []
    # Readings are a separate collection; joined here by meter id.
    readings = _validated(ElectricityReadingRow, queries.q_electricity_readings(client).execute(), "electricity reading")
    return transforms.join_electricity_readings(meters, readings)


fetch_electricity_meters = _neutral("electricity meters", list)(load_electricity_meters)


# --- STP --------------------------------------------------------------------

def load_stp_operations(client: Client, tanker_fee: float, tse_saving_rate: float) -> list[STPOperation]:
    return [
        transforms.transform_stp_operation(r, tanker_fee, tse_saving_rate)
        for r in _validated(STPOperationRow, queries.q_stp_operations(client).execute(), "STP operation")
    ]


fetch_stp_operations = _neutral("STP operations", list)(load_stp_operations)


# --- Water ------------------------------------------------------------------

def load_water_meters(client: Client) -> list[WaterMeter]:
    return [
        transforms.transform_water_meter(r)
        for r in _validated(WaterMeterRow, queries.q_water_meters(client).execute(), "water meter")
    ]


fetch_water_meters = _neutral("water meters", list)(load_water_meters)
