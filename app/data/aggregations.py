"""
Client-side summaries over the (small) view-model lists the pages render.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Iterable, Optional

import pandas as pd

from data.models import Contractor, ElectricityMeter, STPOperation, WaterMeter


MONTH_ORDER = {m: i for i, m in enumerate(
    ["Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"], start=1
)}


def month_sort_key(label: str) -> tuple[int, int]:
    """'Apr-24' -> (2024, 4). Unknown labels sort first."""
    try:
        mon, yy = label.split("-", 1)
        return 2000 + int(yy), MONTH_ORDER.get(mon[:3].title(), 0)
    except (ValueError, AttributeError):
        return 0, 0


def sort_months(labels: Iterable[str]) -> list[str]:
    return sorted(set(labels), key=month_sort_key)


def records_frame(items: Iterable) -> pd.DataFrame:
    return pd.DataFrame([i.as_dict() for i in items])


# --- Electricity ------------------------------------------------------------

@dataclass(frozen=True)
class ElectricitySummary:
    total_kwh: float
    total_cost: float
    meter_count: int
    highest_name: str
    highest_kwh: float


def electricity_long(meters: Iterable[ElectricityMeter]) -> pd.DataFrame:
    rows = [
        {"id": m.id, "name": m.name, "type": m.type or "Unknown", "month": month, "kwh": float(v or 0)}
        for m in meters
        for month, v in m.readings.items()
    ]
    return pd.DataFrame(rows, columns=["id", "name", "type", "month", "kwh"])


def electricity_summary(meters: list[ElectricityMeter], rate_per_kwh: float) -> ElectricitySummary:
    df = electricity_long(meters)
    total = float(df["kwh"].sum()) if len(df) else 0.0

    highest_name, highest_kwh = "N/A", 0.0
    if len(df):
        per_meter = df.groupby(["id", "name"], as_index=False)["kwh"].sum()
        top = per_meter.sort_values("kwh", ascending=False).iloc[0]
        if top["kwh"] > 0:
            highest_name, highest_kwh = str(top["name"]), float(top["kwh"])

    return ElectricitySummary(
        total_kwh=total,
        total_cost=total * rate_per_kwh,
        meter_count=len(meters),
        highest_name=highest_name,
        highest_kwh=highest_kwh,
    )


def electricity_monthly(meters: list[ElectricityMeter]) -> pd.DataFrame:
    """Total consumption per month, chronological."""
    df = electricity_long(meters)
    if not len(df):
        return pd.DataFrame(columns=["month", "consumption"])
    out = df.groupby("month", as_index=False)["kwh"].sum().rename(columns={"kwh": "consumption"})
    order = sort_months(out["month"])
    return out.set_index("month").loc[order].reset_index()


def electricity_by_type(meters: list[ElectricityMeter]) -> pd.DataFrame:
    df = electricity_long(meters)
    if not len(df):
        return pd.DataFrame(columns=["type", "consumption"])
    return (
        df.groupby("type", as_index=False)["kwh"]
        .sum()
        .rename(columns={"kwh": "consumption"})
        .sort_values("consumption", ascending=False)
        .reset_index(drop=True)
    )


# --- STP --------------------------------------------------------------------

@dataclass(frozen=True)
class STPStats:
    total_inlet: float
    total_tse: float
    total_trips: float
    generated_income: float
    water_savings: float
    total_economic_impact: float
    treatment_efficiency: float  # percent
    daily_average_inlet: float


def stp_stats(ops: list[STPOperation], tanker_fee: float, tse_saving_rate: float) -> STPStats:
    total_inlet = sum(o.inlet_sewage for o in ops)
    total_tse = sum(o.tse_for_irrigation for o in ops)
    total_trips = sum(o.tanker_trips for o in ops)
    income = total_trips * tanker_fee
    savings = total_tse * tse_saving_rate
    return STPStats(
        total_inlet=total_inlet,
        total_tse=total_tse,
        total_trips=total_trips,
        generated_income=income,
        water_savings=savings,
        total_economic_impact=income + savings,
        treatment_efficiency=(total_tse / total_inlet) * 100 if total_inlet > 0 else 0.0,
        daily_average_inlet=total_inlet / len(ops) if ops else 0.0,
    )


def stp_monthly(ops: list[STPOperation], tanker_fee: float, tse_saving_rate: float) -> pd.DataFrame:
    cols = ["month", "inlet", "tse", "trips", "income", "savings"]
    if not ops:
        return pd.DataFrame(columns=cols)
    df = records_frame(ops)
    df["period"] = pd.to_datetime(df["date"]).dt.to_period("M")
    out = (
        df.groupby("period", as_index=False)
        .agg(inlet=("inlet_sewage", "sum"), tse=("tse_for_irrigation", "sum"), trips=("tanker_trips", "sum"))
        .sort_values("period")
    )
    out["income"] = out["trips"] * tanker_fee
    out["savings"] = out["tse"] * tse_saving_rate
    out["month"] = out["period"].dt.strftime("%b-%y")
    return out[cols].reset_index(drop=True)


# --- Water ------------------------------------------------------------------

def water_long(meters: Iterable[WaterMeter]) -> pd.DataFrame:
    rows = [
        {"label": m.label, "level": m.level, "zone": m.zone, "month": month, "consumption": v}
        for m in meters
        for month, v in m.consumption.items()
    ]
    return pd.DataFrame(rows, columns=["label", "level", "zone", "month", "consumption"])


def water_by_month_and_level(meters: list[WaterMeter]) -> pd.DataFrame:
    """Month x level totals; null readings are skipped, not counted as 0."""
    df = water_long(meters).dropna(subset=["consumption"])
    if not len(df):
        return pd.DataFrame()
    pivot = df.pivot_table(index="month", columns="level", values="consumption", aggfunc="sum")
    return pivot.loc[sort_months(pivot.index)]


def water_by_zone(meters: list[WaterMeter], level: str = "L3") -> pd.DataFrame:
    df = water_long(m for m in meters if m.level == level).dropna(subset=["consumption"])
    if not len(df):
        return pd.DataFrame(columns=["zone", "consumption"])
    return (
        df.groupby("zone", as_index=False)["consumption"]
        .sum()
        .sort_values("consumption", ascending=False)
        .reset_index(drop=True)
    )


# --- Contractors ------------------------------------------------------------

def contractor_status_counts(contractors: list[Contractor]) -> dict[str, int]:
    counts: dict[str, int] = {}
    for c in contractors:
        counts[c.status] = counts.get(c.status, 0) + 1
    return counts


def contractors_expiring(contractors: list[Contractor], within_days: int = 90, today: Optional[date] = None) -> list[Contractor]:
    """Contracts whose expiry falls in [today, today + within_days], soonest first."""
    today = today or date.today()
    hits = []
    for c in contractors:
        try:
            expiry = date.fromisoformat(c.expiry_date[:10])
        except (TypeError, ValueError):
            continue
        if 0 <= (expiry - today).days <= within_days:
            hits.append((expiry, c))
    return [c for _, c in sorted(hits, key=lambda t: t[0])]


def contractor_annual_total(contractors: list[Contractor], status: Optional[str] = "Active") -> float:
    """Sum of stated annual values, optionally for one status only."""
    return sum(
        c.annual_value
        for c in contractors
        if c.annual_value is not None and (status is None or c.status == status)
    )
