from data import mock_data
from data.models import WATER_LEVELS


def test_demo_data_is_deterministic():
    assert mock_data.assets_mock() == mock_data.assets_mock()
    assert mock_data.electricity_meters_mock() == mock_data.electricity_meters_mock()


def test_demo_assets_include_searchable_names():
    names = [a.name.lower() for a in mock_data.assets_mock()]
    assert any("pump" in n for n in names)


def test_demo_stp_economics_match_rates():
    ops = mock_data.stp_operations_mock(n_months=2, tanker_fee=5.0, tse_saving_rate=2.0)
    assert ops
    for op in ops:
        assert op.generated_income == op.tanker_trips * 5.0
        assert op.water_savings == op.tse_for_irrigation * 2.0


def test_demo_water_hierarchy():
    meters = mock_data.water_meters_mock()
    assert {m.level for m in meters} <= set(WATER_LEVELS)
    assert sum(1 for m in meters if m.level == "L1") == 1
    assert all(len(m.consumption) == 11 for m in meters)
    assert any(v is None for m in meters for v in m.consumption.values())
