import pytest

from data import queries


@pytest.mark.parametrize("page, size, expected", [(1, 50, (0, 49)), (3, 20, (40, 59)), (0, 10, (0, 9))])
def test_page_range(page, size, expected):
    assert queries.page_range(page, size) == expected


def test_asset_search_filter_covers_four_columns():
    f = queries.asset_search_filter("pump")
    assert f == (
        "asset_name.ilike.%pump%,location_name.ilike.%pump%,"
        "asset_tag.ilike.%pump%,category.ilike.%pump%"
    )


def test_asset_search_filter_strips_reserved_characters():
    assert queries.asset_search_filter("a,b(c)") == queries.asset_search_filter("a b c")
    assert queries.asset_search_filter("pump*") == queries.asset_search_filter("pump")
    assert queries.asset_search_filter("  ") is None
    assert queries.asset_search_filter(",()") is None


def test_asset_search_filter_matches_wildcards_literally():
    f = queries.asset_search_filter("50%_off")
    assert f.startswith(r"asset_name.ilike.%50\%\_off%,")
    assert f.count(r"\%") == 4


def test_assets_query_shape(store):
    queries.q_assets(store, page=2, page_size=25, search="valve")
    [q] = store.queries
    assert q.table == "mb_assets"
    names = [op[0] for op in q.ops]
    assert names == ["select", "or_", "order", "range"]
    assert q.ops[0][2] == {"count": "exact"}
    assert q.ops[2][1] == ("asset_name",) and q.ops[2][2] == {"desc": False}
    assert q.ops[3][1] == (25, 49)


def test_assets_query_without_search_has_no_filter(store):
    queries.q_assets(store)
    assert "or_" not in [op[0] for op in store.queries[0].ops]


@pytest.mark.parametrize(
    "builder, table, order",
    [
        (queries.q_contractor_tracker, "Contractor_Tracker", ("Contractor", False)),
        (queries.q_contractor_summary, "amc_contractor_summary", ("no", False)),
        (queries.q_contractor_expiry, "amc_contractor_expiry", ("days_remaining", False)),
        (queries.q_amc_pricing, "amc_pricing", ("contract_value", True)),
        (queries.q_electricity_meters, "electricity_meters", ("name", False)),
        (queries.q_stp_operations, "stp_operations", ("date", False)),
    ],
)
def test_fixed_ordering(store, builder, table, order):
    builder(store)
    q = store.queries[0]
    assert q.table == table
    _, args, kwargs = next(op for op in q.ops if op[0] == "order")
    assert (args[0], kwargs["desc"]) == order
