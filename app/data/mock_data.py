from __future__ import annotations

import random
from datetime import date, timedelta

from faker import Faker

from data.models import (
    WATER_MONTH_COLUMNS,
    Asset,
    Contractor,
    ElectricityMeter,
    STPOperation,
    WaterMeter,
)


fake = Faker()


ZONES = ["Zone_01_(FM)", "Zone_03_(A)", "Zone_03_(B)", "Zone_05", "Zone_08", "Zone_VS"]
BUILDINGS = ["Central Park", "Village Square", "Staff Accommodation", "Sales Center", "Beachwood"]
ASSET_TYPES = ["Pump", "Valve", "Chiller", "AHU", "Generator", "Fire Panel", "Lift", "Transformer"]
ELECTRICITY_TYPES = ["PS", "LS", "IRR", "DB", "Street Light", "D_Building", "Retail"]
MONTHS_24_25 = [
    "Apr-24", "May-24", "Jun-24", "Jul-24", "Aug-24", "Sep-24", "Oct-24", "Nov-24", "Dec-24",
    "Jan-25", "Feb-25", "Mar-25", "Apr-25", "May-25", "Jun-25", "Jul-25", "Aug-25", "Sep-25", "Oct-25",
]


def _months_back(n: int, end: date | None = None) -> list[date]:
    end = (end or date.today()).replace(day=1)
    out = []
    for _ in range(n):
        out.append(end)
        end = (end - timedelta(days=1)).replace(day=1)
    return out[::-1]


def assets_mock(n_rows: int = 120) -> list[Asset]:
    random.seed(17)
    Faker.seed(17)
    rows = []
    for i in range(1, n_rows + 1):
        kind = random.choice(ASSET_TYPES)
        building = random.choice(BUILDINGS)
        rows.append(
            Asset(
                id=str(i),
                name=f"{kind} {chr(65 + (i % 26))}{i:03d}",
                type=kind,
                location=f"{building} - {random.choice(['Ground Floor', 'Roof', 'Basement', 'Plant Room'])}",
                status=random.choices(["Active", "Maintenance", "Inactive"], weights=[8, 1, 1])[0],
                purchase_date=fake.date_between(start_date="-10y", end_date="-1y").isoformat(),
                value=0.0,
                serial_number=f"MB-{kind[:3].upper()}-{i:04d}",
                last_service="",
                category=kind,
            )
        )
    return rows


def contractors_mock() -> list[Contractor]:
    random.seed(19)
    Faker.seed(19)
    services = [
        "Fire Alarm & Fire Fighting",
        "HVAC",
        "Lifts & Escalators",
        "STP Operation",
        "Pest Control",
        "Cleaning Services",
        "Security Services",
        "Landscaping",
        "BMS",
        "Water Tank Cleaning",
    ]
    today = date.today()
    rows = []
    for i, service in enumerate(services, start=1):
        expiry = today + timedelta(days=random.randint(-90, 540))
        status = "Expired" if expiry < today else random.choices(["Active", "On-Hold"], weights=[9, 1])[0]
        company = f"{fake.last_name()} {random.choice(['Engineering', 'Services', 'Trading', 'LLC'])}"
        rows.append(
            Contractor(
                id=str(i),
                name=company,
                company=company,
                status=status,
                expiry_date=expiry.isoformat(),
                category=service,
                annual_value=float(random.randrange(2400, 48000, 120)),
            )
        )
    return rows


def electricity_meters_mock(n_meters: int = 24) -> list[ElectricityMeter]:
    random.seed(23)
    rows = []
    for i in range(1, n_meters + 1):
        kind = random.choice(ELECTRICITY_TYPES)
        base = {"PS": 9000, "LS": 4000, "IRR": 2500, "DB": 1500, "Street Light": 3000, "D_Building": 6000, "Retail": 5000}[kind]
        readings = {}
        for month in MONTHS_24_25:
            summer = 1.35 if month[:3] in ("Jun", "Jul", "Aug", "Sep") else 1.0
            readings[month] = round(max(0.0, base * summer * (0.8 + random.random() * 0.4)), 0)
        rows.append(
            ElectricityMeter(
                id=str(i),
                name=f"{kind} {i:02d}",
                account_number=f"R{random.randint(10000, 99999)}",
                type=kind,
                readings=readings,
            )
        )
    return rows


def stp_operations_mock(n_months: int = 12, tanker_fee: float = 4.5, tse_saving_rate: float = 1.32) -> list[STPOperation]:
    random.seed(29)
    rows = []
    i = 0
    for month_start in _months_back(n_months):
        d = month_start
        while d.month == month_start.month and d <= date.today():
            i += 1
            inlet = round(max(0.0, random.gauss(620, 60)), 0)
            tse = round(inlet * (0.85 + random.random() * 0.1), 0)
            trips = max(0, int(random.gauss(12, 3)))
            income = trips * tanker_fee
            savings = tse * tse_saving_rate
            rows.append(
                STPOperation(
                    id=str(i),
                    date=d.isoformat(),
                    inlet_sewage=inlet,
                    tse_for_irrigation=tse,
                    tanker_trips=float(trips),
                    generated_income=income,
                    water_savings=savings,
                    total_impact=income + savings,
                )
            )
            d += timedelta(days=1)
    return rows


def water_meters_mock() -> list[WaterMeter]:
    random.seed(31)
    labels = [label for _, label in WATER_MONTH_COLUMNS]

    def _series(level: float) -> dict[str, float | None]:
        return {m: round(level * (0.85 + random.random() * 0.3), 0) for m in labels}

    rows = [
        WaterMeter(
            label="Main Bulk (NAMA)",
            account_number="C43659",
            level="L1",
            zone="Main Bulk",
            parent_meter="NAMA",
            type="Main BULK",
            consumption=_series(48000),
        )
    ]
    for zone in ZONES:
        rows.append(
            WaterMeter(
                label=f"{zone} Bulk",
                account_number=str(random.randint(4300000, 4399999)),
                level="L2",
                zone=zone,
                parent_meter="Main Bulk (NAMA)",
                type="Zone Bulk",
                consumption=_series(6000),
            )
        )
        for k in range(1, 4):
            rows.append(
                WaterMeter(
                    label=f"{zone} Building {k:02d}",
                    account_number=str(random.randint(4300000, 4399999)),
                    level="L3",
                    zone=zone,
                    parent_meter=f"{zone} Bulk",
                    type="Residential (Apart)",
                    consumption=_series(1400),
                )
            )
    rows.append(
        WaterMeter(
            label="Irrigation Controller DC",
            account_number=str(random.randint(4300000, 4399999)),
            level="DC",
            zone="Direct Connection",
            parent_meter="Main Bulk (NAMA)",
            type="IRR_Services",
            consumption=_series(2500),
        )
    )
    # Newest month not yet read on one meter, as in the live sheet.
    last = rows[-1]
    last.consumption[labels[-1]] = None
    return rows
