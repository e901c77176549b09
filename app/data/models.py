"""
Row shapes (as stored in Supabase) and view-models (as rendered by the pages).

Rows are validated at the boundary with pydantic; view-models are plain frozen
dataclasses that carry no behavior beyond `as_dict()`.
"""

from __future__ import annotations

import math
from dataclasses import asdict, dataclass, field
from typing import Annotated, Any, Generic, Optional, TypeVar, Union

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field


RowId = Union[int, str]
Numeric = Union[float, str]


class _Row(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


def _number_or_none(value: Any) -> Optional[float]:
    """Spreadsheet cell -> float. Blanks, dashes and other text become None."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.replace(",", "").strip()
    try:
        n = float(value)
    except (TypeError, ValueError):
        return None
    return None if math.isnan(n) else n


CellNumber = Annotated[Optional[float], BeforeValidator(_number_or_none)]


# --- Assets -----------------------------------------------------------------

class AssetRow(_Row):
    id: RowId
    row_id: Optional[int] = None
    asset_id: Optional[str] = None
    asset_tag: Optional[str] = None
    asset_name: Optional[str] = None
    asset_description: Optional[str] = None
    asset_type: Optional[str] = None
    category: Optional[str] = None
    sub_category: Optional[str] = None
    system_area: Optional[str] = None
    location_name: Optional[str] = None
    location_tag: Optional[str] = None
    floor_area: Optional[str] = None
    building: Optional[str] = None
    make_brand: Optional[str] = None
    model: Optional[str] = None
    capacity_size: Optional[str] = None
    country_origin: Optional[str] = None
    supplier: Optional[str] = None
    install_date: Optional[str] = None
    life_expectancy_years: Optional[float] = None
    current_age_years: Optional[float] = None
    erl_years: Optional[float] = None
    status: Optional[str] = None
    condition: Optional[str] = None
    ppm_frequency: Optional[str] = None
    is_active: Optional[str] = None
    quantity: Optional[float] = None
    om_volume: Optional[str] = None
    responsibility: Optional[str] = None
    amc_contractor: Optional[str] = None
    floors_served: Optional[str] = None
    notes: Optional[str] = None
    source_sheet: Optional[str] = None


# --- Contractors (current schema) -------------------------------------------

class ContractorTrackerRow(_Row):
    contractor: Optional[str] = Field(default=None, alias="Contractor")
    service_provided: Optional[str] = Field(default=None, alias="Service Provided")
    status: Optional[str] = Field(default=None, alias="Status")
    contract_type: Optional[str] = Field(default=None, alias="Contract Type")
    start_date: Optional[str] = Field(default=None, alias="Start Date")
    end_date: Optional[str] = Field(default=None, alias="End Date")
    contract_monthly_omr: Optional[str] = Field(default=None, alias="Contract (OMR)/Month")
    contract_yearly_omr: Optional[str] = Field(default=None, alias="Contract Total (OMR)/Year")
    annual_value_omr: Optional[Numeric] = Field(default=None, alias="Annual Value (OMR)")
    renewal_plan: Optional[str] = Field(default=None, alias="Renewal Plan")
    note: Optional[str] = Field(default=None, alias="Note")


class ContractorSummaryRow(_Row):
    id: RowId
    no: Optional[int] = None
    contractor: str
    service_category: Optional[str] = None
    contract_ref: Optional[str] = None
    contract_type: Optional[str] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    duration: Optional[str] = None
    monthly_fee_omr: Optional[str] = None
    annual_fee_omr: Optional[str] = None
    total_contract_value_omr: Optional[str] = None
    status: Optional[str] = None
    alert: Optional[str] = None
    document_status: Optional[str] = None


class ContractorDetailsRow(_Row):
    id: RowId
    contractor: str
    contract_ref: Optional[str] = None
    scope_of_work: Optional[str] = None
    ppm_frequency: Optional[str] = None
    response_time_emergency: Optional[str] = None
    response_time_normal: Optional[str] = None
    liquidated_damages: Optional[str] = None
    performance_bond: Optional[str] = None
    payment_terms: Optional[str] = None
    warranty_period: Optional[str] = None
    key_exclusions: Optional[str] = None
    contact_person: Optional[str] = None


class ContractorExpiryRow(_Row):
    id: RowId
    contractor: str
    end_date: Optional[str] = None
    days_remaining: Optional[int] = None
    renewal_action_required_by: Optional[str] = None
    priority: Optional[str] = None
    renewal_status: Optional[str] = None


class ContractorPricingRow(_Row):
    id: RowId
    contractor: str
    year_1_omr: Optional[str] = None
    year_2_omr: Optional[str] = None
    year_3_omr: Optional[str] = None
    year_4_omr: Optional[str] = None
    year_5_omr: Optional[str] = None
    total_omr: Optional[str] = None
    notes: Optional[str] = None


# --- Contractors (legacy schema) --------------------------------------------

class AmcContractRef(_Row):
    name: Optional[str] = None
    company: Optional[str] = None


class AmcContractRow(_Row):
    id: RowId
    name: str
    company: Optional[str] = None
    category: Optional[str] = None
    status: Optional[str] = None
    start_date: Optional[str] = None


class AmcExpiryRow(_Row):
    id: RowId
    contract_id: RowId
    expiry_date: str
    notification_sent: bool = False
    amc_contracts: Optional[AmcContractRef] = None


class AmcContactRow(_Row):
    id: RowId
    contract_id: RowId
    contact_name: str
    role: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    amc_contracts: Optional[AmcContractRef] = None


class AmcPricingRow(_Row):
    id: RowId
    contract_id: RowId
    contract_value: float
    currency: str = "OMR"
    payment_terms: Optional[str] = None
    amc_contracts: Optional[AmcContractRef] = None


# --- Electricity ------------------------------------------------------------

class ElectricityMeterRow(_Row):
    id: RowId
    name: Optional[str] = None
    meter_type: Optional[str] = None
    account_number: Optional[str] = None


class ElectricityReadingRow(_Row):
    id: Optional[RowId] = None
    meter_id: RowId
    month: Optional[str] = None
    consumption: Optional[Numeric] = None


# --- STP --------------------------------------------------------------------

class STPOperationRow(_Row):
    id: RowId
    date: str
    inlet_sewage: Optional[Numeric] = None
    tse_for_irrigation: Optional[Numeric] = None
    tanker_trips: Optional[Numeric] = None
    generated_income: Optional[float] = None
    water_savings: Optional[float] = None
    total_impact: Optional[float] = None
    monthly_volume_input: Optional[float] = None
    monthly_volume_output: Optional[float] = None
    monthly_income: Optional[float] = None
    monthly_savings: Optional[float] = None
    original_id: Optional[str] = None


# --- Water ------------------------------------------------------------------

# Fixed month columns of the "Water System" table, in calendar order.
WATER_MONTH_COLUMNS = [
    ("jan_25", "Jan-25"),
    ("feb_25", "Feb-25"),
    ("mar_25", "Mar-25"),
    ("apr_25", "Apr-25"),
    ("may_25", "May-25"),
    ("jun_25", "Jun-25"),
    ("jul_25", "Jul-25"),
    ("aug_25", "Aug-25"),
    ("sep_25", "Sep-25"),
    ("oct_25", "Oct-25"),
    ("nov_25", "Nov-25"),
]

WATER_LEVELS = ("L1", "L2", "L3", "L4", "DC", "N/A")


class WaterMeterRow(_Row):
    id: Optional[RowId] = None
    label: Optional[str] = None
    account_number: Optional[str] = None
    level: Optional[str] = None
    zone: Optional[str] = None
    parent_meter: Optional[str] = None
    type: Optional[str] = None
    jan_25: CellNumber = None
    feb_25: CellNumber = None
    mar_25: CellNumber = None
    apr_25: CellNumber = None
    may_25: CellNumber = None
    jun_25: CellNumber = None
    jul_25: CellNumber = None
    aug_25: CellNumber = None
    sep_25: CellNumber = None
    oct_25: CellNumber = None
    nov_25: CellNumber = None
    dec_25: CellNumber = None


# --- Profiles ---------------------------------------------------------------

class ProfileRow(_Row):
    id: str
    email: Optional[str] = None
    full_name: Optional[str] = None
    username: Optional[str] = None
    avatar_url: Optional[str] = None
    website: Optional[str] = None
    role: Optional[str] = None


# --- View-models ------------------------------------------------------------

class _Record:
    def as_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class Asset(_Record):
    id: str
    name: str
    type: str
    location: str
    status: str
    purchase_date: str
    value: float
    serial_number: str
    last_service: str
    category: str = ""


@dataclass(frozen=True)
class Contractor(_Record):
    id: str
    name: str
    company: str
    status: str  # "Active" | "Expired" | "On-Hold" | store value
    expiry_date: str
    category: str
    annual_value: Optional[float] = None  # OMR per year, when the source states one


@dataclass(frozen=True)
class ElectricityMeter(_Record):
    id: RowId
    name: str
    account_number: str
    type: str
    readings: dict[str, float] = field(default_factory=dict)


@dataclass(frozen=True)
class STPOperation(_Record):
    id: str
    date: str
    inlet_sewage: float
    tse_for_irrigation: float
    tanker_trips: float
    generated_income: float
    water_savings: float
    total_impact: float


@dataclass(frozen=True)
class WaterMeter(_Record):
    label: str
    account_number: str
    level: str
    zone: str
    parent_meter: str
    type: str
    consumption: dict[str, Optional[float]] = field(default_factory=dict)


@dataclass(frozen=True)
class UserProfile(_Record):
    id: str
    email: str
    full_name: Optional[str]
    username: Optional[str]
    avatar_url: Optional[str]
    website: Optional[str]
    role: str


@dataclass(frozen=True)
class AuthUser(_Record):
    id: str
    email: str
    user_metadata: dict[str, Any] = field(default_factory=dict)


T = TypeVar("T")


@dataclass(frozen=True)
class Page(Generic[T]):
    data: list[T]
    count: int
