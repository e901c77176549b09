import pytest

from data import fetchers
from data.models import Page
from tests.conftest import FakeStore


NEUTRAL = [
    (fetchers.fetch_assets, (), Page(data=[], count=0)),
    (fetchers.fetch_contractor_tracker, (), []),
    (fetchers.fetch_contractor_summary, (), []),
    (fetchers.fetch_contractor_details, (), []),
    (fetchers.fetch_contractor_expiry, (), []),
    (fetchers.fetch_contractor_pricing, (), []),
    (fetchers.fetch_amc_contracts, (), []),
    (fetchers.fetch_amc_expiry, (), []),
    (fetchers.fetch_amc_contacts, (), []),
    (fetchers.fetch_amc_pricing, (), []),
    (fetchers.fetch_contractors, (), []),
    (fetchers.fetch_electricity_meters, (), []),
    (fetchers.fetch_stp_operations, (4.5, 1.32), []),
    (fetchers.fetch_water_meters, (), []),
]

TABLES = [
    "mb_assets", "Contractor_Tracker", "amc_contractor_summary", "amc_contractor_details",
    "amc_contractor_expiry", "amc_contractor_pricing", "amc_contracts", "amc_expiry",
    "amc_contacts", "amc_pricing", "electricity_meters", "electricity_readings",
    "stp_operations", "Water System",
]


@pytest.mark.parametrize("fetch, args, empty", NEUTRAL)
def test_no_client_returns_neutral_value(fetch, args, empty):
    assert fetch(None, *args) == empty


@pytest.mark.parametrize("fetch, args, empty", NEUTRAL)
def test_store_error_returns_neutral_value(fetch, args, empty):
    store = FakeStore(errors={t: RuntimeError("permission denied for table") for t in TABLES})
    assert fetch(store, *args) == empty


def test_invalid_row_is_skipped_and_the_rest_kept(caplog):
    store = FakeStore(tables={"stp_operations": [{"id": 1}, {"id": 2, "date": "2025-01-02", "tanker_trips": 3}]})
    ops = fetchers.load_stp_operations(store, 4.5, 1.32)
    assert [op.id for op in ops] == ["2"]
    assert "Skipping invalid STP operation row 0" in caplog.text


def test_fetch_assets_transforms_rows_and_count():
    store = FakeStore(
        tables={"mb_assets": [{"id": 1, "asset_name": "Pump A"}, {"id": 2, "asset_name": None}]},
        counts={"mb_assets": 240},
    )
    page = fetchers.fetch_assets(store, page=1, page_size=2)
    assert page.count == 240
    assert [a.name for a in page.data] == ["Pump A", "Unknown Asset"]
    assert page.data[0].id == "1"


def test_fetch_electricity_joins_second_query():
    store = FakeStore(
        tables={
            "electricity_meters": [{"id": 1, "name": "M1", "meter_type": "PS"}],
            "electricity_readings": [
                {"meter_id": 1, "month": "Jan-25", "consumption": "120"},
                {"meter_id": 1, "month": "Feb-25", "consumption": 80},
            ],
        }
    )
    [m] = fetchers.fetch_electricity_meters(store)
    assert m.readings == {"Jan-25": 120.0, "Feb-25": 80.0}
    assert [q.table for q in store.executed] == ["electricity_meters", "electricity_readings"]


def test_fetch_electricity_skips_readings_without_meters():
    store = FakeStore()
    assert fetchers.fetch_electricity_meters(store) == []
    assert [q.table for q in store.executed] == ["electricity_meters"]


def test_fetch_electricity_reading_error_is_neutral():
    store = FakeStore(
        tables={"electricity_meters": [{"id": 1, "name": "M1"}]},
        errors={"electricity_readings": RuntimeError("timeout")},
    )
    assert fetchers.fetch_electricity_meters(store) == []


def test_fetch_stp_derives_economics():
    store = FakeStore(
        tables={"stp_operations": [{"id": 1, "date": "2025-03-01", "inlet_sewage": 600, "tse_for_irrigation": 200, "tanker_trips": 10}]}
    )
    [op] = fetchers.fetch_stp_operations(store, 4.5, 1.32)
    assert op.generated_income == 45.0
    assert op.water_savings == 200 * 1.32


def test_fetch_water_meters():
    store = FakeStore(tables={"Water System": [{"label": "Main Bulk", "level": "L1", "jan_25": 50, "feb_25": None}]})
    [w] = fetchers.fetch_water_meters(store)
    assert w.consumption["Jan-25"] == 50
    assert w.consumption["Feb-25"] is None


def test_blank_water_cell_keeps_the_other_meters():
    store = FakeStore(
        tables={"Water System": [{"label": "A", "jan_25": 50}, {"label": "B", "jan_25": "", "feb_25": "1,204"}]}
    )
    a, b = fetchers.fetch_water_meters(store)
    assert a.consumption["Jan-25"] == 50
    assert b.consumption["Jan-25"] is None
    assert b.consumption["Feb-25"] == 1204.0


def test_reading_without_month_is_dropped_not_fatal():
    store = FakeStore(
        tables={
            "electricity_meters": [{"id": 1, "name": "M1"}],
            "electricity_readings": [
                {"meter_id": 1, "month": None, "consumption": 10},
                {"meter_id": 1, "month": "Jan-25", "consumption": 20},
            ],
        }
    )
    [m] = fetchers.fetch_electricity_meters(store)
    assert m.readings == {"Jan-25": 20.0}


def test_fetch_contractors_prefers_summary_then_tracker_then_legacy():
    summary = FakeStore(
        tables={
            "amc_contractor_summary": [{"id": "a", "no": 1, "contractor": "KONE", "service_category": "Lifts"}],
            "Contractor_Tracker": [{"Contractor": "Other"}],
        }
    )
    assert [c.name for c in fetchers.fetch_contractors(summary)] == ["KONE"]

    tracker_only = FakeStore(tables={"Contractor_Tracker": [{"Contractor": "Bahwan", "Service Provided": "HVAC"}]})
    [c] = fetchers.fetch_contractors(tracker_only)
    assert (c.name, c.category) == ("Bahwan", "HVAC")

    legacy_only = FakeStore(tables={"amc_contracts": [{"id": 7, "name": "Pest AMC", "company": "Rentokil"}]})
    [c] = fetchers.fetch_contractors(legacy_only)
    assert (c.id, c.company) == ("7", "Rentokil")
    assert [q.table for q in legacy_only.executed] == ["amc_contractor_summary", "Contractor_Tracker", "amc_contracts"]


def test_legacy_expiry_with_embedded_contract():
    store = FakeStore(
        tables={
            "amc_expiry": [
                {"id": 1, "contract_id": 9, "expiry_date": "2025-12-31", "notification_sent": False,
                 "amc_contracts": {"name": "Lifts AMC", "company": "KONE"}}
            ]
        }
    )
    [row] = fetchers.fetch_amc_expiry(store)
    assert row.amc_contracts.company == "KONE"


def test_contractor_tracker_reads_spaced_columns():
    store = FakeStore(
        tables={"Contractor_Tracker": [{"Contractor": "X", "Annual Value (OMR)": 1200, "Contract (OMR)/Month": "100"}]}
    )
    [row] = fetchers.fetch_contractor_tracker(store)
    assert row.annual_value_omr == 1200
    assert row.contract_monthly_omr == "100"


def test_contractor_annual_value_is_parsed_from_text():
    store = FakeStore(
        tables={"amc_contractor_summary": [{"id": 1, "contractor": "KONE", "annual_fee_omr": "12,600.000 OMR"}]}
    )
    [c] = fetchers.fetch_contractors(store)
    assert c.annual_value == 12600.0
