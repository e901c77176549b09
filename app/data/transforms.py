"""
Row -> view-model transforms.

All functions here are pure: same input, same output, no module state.
"""

from __future__ import annotations

import math
import re
from typing import Any, Iterable, Optional

from data.models import (
    WATER_MONTH_COLUMNS,
    AmcContractRow,
    Asset,
    AssetRow,
    Contractor,
    ContractorSummaryRow,
    ContractorTrackerRow,
    ElectricityMeter,
    ElectricityMeterRow,
    ElectricityReadingRow,
    ProfileRow,
    STPOperation,
    STPOperationRow,
    UserProfile,
    WaterMeter,
    WaterMeterRow,
)


_MONEY_STRIP = re.compile(r"[^0-9.\-]")


def to_number(value: Any, default: float = 0.0) -> float:
    """Numeric-like text or numbers -> float; anything else -> default."""
    if value is None or isinstance(value, bool):
        return default
    try:
        n = float(value)
    except (TypeError, ValueError):
        return default
    return default if math.isnan(n) else n


def parse_money(text: Any) -> Optional[float]:
    """'1,250.500 OMR' -> 1250.5. Returns None when no number can be read."""
    if text is None:
        return None
    if isinstance(text, (int, float)) and not isinstance(text, bool):
        return float(text)
    cleaned = _MONEY_STRIP.sub("", str(text))
    if cleaned in ("", "-", ".", "-."):
        return None
    try:
        return float(cleaned)
    except ValueError:
        return None


def transform_asset(row: AssetRow) -> Asset:
    return Asset(
        id=str(row.id),
        name=row.asset_name or "Unknown Asset",
        type=row.asset_type or row.category or "General",
        location=row.location_name or row.building or "Unknown Location",
        status=row.status or "Active",
        purchase_date=row.install_date or "",
        value=0.0,
        serial_number=row.asset_tag or row.asset_id or "",
        last_service="",
        category=row.category or "",
    )


def filter_assets(assets: Iterable[Asset], term: str) -> list[Asset]:
    """
    Case-insensitive substring match, OR-combined over name, location, tag and
    category. Same columns as the live `or` filter; the term is taken literally.
    """
    needle = (term or "").strip().lower()
    if not needle:
        return list(assets)
    return [
        a
        for a in assets
        if any(needle in (v or "").lower() for v in (a.name, a.location, a.serial_number, a.category))
    ]


def _first_amount(*values: Any) -> Optional[float]:
    for v in values:
        amount = parse_money(v)
        if amount is not None:
            return amount
    return None


def transform_contractor_summary(row: ContractorSummaryRow) -> Contractor:
    return Contractor(
        id=str(row.id),
        name=row.contractor,
        company=row.contractor,
        status=row.status or "Active",
        expiry_date=row.end_date or "",
        category=row.service_category or "",
        annual_value=parse_money(row.annual_fee_omr),
    )


def transform_contractor_tracker(row: ContractorTrackerRow) -> Contractor:
    name = row.contractor or "Unknown Contractor"
    return Contractor(
        id=re.sub(r"[^a-z0-9]+", "-", name.lower()).strip("-") or "contractor",
        name=name,
        company=name,
        status=row.status or "Active",
        expiry_date=row.end_date or "",
        category=row.service_provided or "",
        annual_value=_first_amount(row.annual_value_omr, row.contract_yearly_omr),
    )


def transform_legacy_contract(row: AmcContractRow) -> Contractor:
    return Contractor(
        id=str(row.id),
        name=row.name,
        company=row.company or row.name,
        status=row.status or "Active",
        expiry_date="",
        category=row.category or "",
    )


def join_electricity_readings(
    meters: Iterable[ElectricityMeterRow],
    readings: Iterable[ElectricityReadingRow],
) -> list[ElectricityMeter]:
    """Attach month -> consumption readings to each meter, keyed by meter id."""
    by_meter: dict[str, dict[str, float]] = {}
    for r in readings:
        if not r.month:
            continue
        by_meter.setdefault(str(r.meter_id), {})[r.month] = to_number(r.consumption)

    return [
        ElectricityMeter(
            id=m.id,
            name=m.name or "Unknown Meter",
            account_number=m.account_number or "",
            type=m.meter_type or "",
            readings=dict(by_meter.get(str(m.id), {})),
        )
        for m in meters
    ]


def transform_stp_operation(row: STPOperationRow, tanker_fee: float, tse_saving_rate: float) -> STPOperation:
    inlet = to_number(row.inlet_sewage)
    tse = to_number(row.tse_for_irrigation)
    trips = to_number(row.tanker_trips)
    # Economic fields are derived from volumes; stored values are ignored.
    income = trips * tanker_fee
    savings = tse * tse_saving_rate
    return STPOperation(
        id=str(row.id),
        date=row.date,
        inlet_sewage=inlet,
        tse_for_irrigation=tse,
        tanker_trips=trips,
        generated_income=income,
        water_savings=savings,
        total_impact=income + savings,
    )


def transform_water_meter(row: WaterMeterRow) -> WaterMeter:
    consumption = {label: getattr(row, column) for column, label in WATER_MONTH_COLUMNS}
    return WaterMeter(
        label=row.label or "Unknown Meter",
        account_number=row.account_number or "",
        level=row.level or "N/A",
        zone=row.zone or "",
        parent_meter=row.parent_meter or "",
        type=row.type or "",
        consumption=consumption,
    )


def transform_profile(row: ProfileRow) -> UserProfile:
    return UserProfile(
        id=row.id,
        email=row.email or "",
        full_name=row.full_name,
        username=row.username,
        avatar_url=row.avatar_url,
        website=row.website,
        role=row.role or "user",
    )
