"""Read-side search, filter, sort and summary helpers."""

import pytest

from voicepos.errors import QueryError
from voicepos.services import reporting_service
from voicepos.services.command_service import process_command


def _names(products):
    return [p.name for p in products]


class TestProductFilters:

    def test_default_sort_is_name_ascending(self, store):
        assert _names(reporting_service.filter_products()) == [
            "Lentils (Dal)", "Oil", "Rice (Atta)", "Salt", "Sugar",
        ]

    def test_sort_by_value_descending(self, store):
        products = reporting_service.filter_products(sort="value", direction="desc")
        # Oil 20*180=3600, Lentils 30*120=3600, Rice 2750, Sugar 1625, Salt 1200
        assert _names(products)[2:] == ["Rice (Atta)", "Sugar", "Salt"]
        assert set(_names(products)[:2]) == {"Oil", "Lentils (Dal)"}

    def test_search_matches_bengali_name(self, store):
        assert _names(reporting_service.filter_products(search="তেল")) == ["Oil"]

    def test_search_is_case_insensitive(self, store):
        assert _names(reporting_service.filter_products(search="SU")) == ["Sugar"]

    def test_status_filters(self, store):
        process_command("Oil 14 liter bikri 2520 taka")   # 6 left -> low
        process_command("Salt 40 kg bikri 1200 taka")     # 0 left -> out

        assert _names(reporting_service.filter_products(status="low-stock")) == ["Oil"]
        assert _names(reporting_service.filter_products(status="out-of-stock")) == ["Salt"]
        assert "Oil" not in _names(reporting_service.filter_products(status="in-stock"))

    @pytest.mark.parametrize("kwargs", [
        {"status": "nope"},
        {"sort": "colour"},
        {"direction": "sideways"},
    ])
    def test_invalid_arguments(self, store, kwargs):
        with pytest.raises(QueryError):
            reporting_service.filter_products(**kwargs)


def test_inventory_summary(store):
    process_command("Sugar 22 kg bikri 1430 taka")   # 3 left -> critical

    summary = reporting_service.inventory_summary()

    assert summary["total_products"] == 5
    assert summary["total_value"] == 50 * 55 + 30 * 120 + 20 * 180 + 3 * 65 + 40 * 30
    assert summary["low_stock_count"] == 1
    assert summary["critical_count"] == 1
    assert summary["out_of_stock_count"] == 0


def test_search_customers_by_name_or_phone(store):
    assert [c.name for c in reporting_service.search_customers()] == ["Karim", "Rahim"]
    assert [c.name for c in reporting_service.search_customers("rah")] == ["Rahim"]
    assert [c.name for c in reporting_service.search_customers("01898")] == ["Karim"]
    assert reporting_service.search_customers("zzz") == []


def test_customer_summary(store):
    process_command("Karim 750 taka dilo")

    summary = reporting_service.customer_summary()

    assert summary == {"total_baki": 500, "customers_with_baki": 1}


def test_filter_transactions_by_kind_and_search(store):
    process_command("Dal 5 kg stock")
    process_command("Karim 100 taka paid")

    assert [t.kind for t in reporting_service.filter_transactions(kind="stock-in")] == ["stock-in"]
    assert [t.customer_name for t in reporting_service.filter_transactions(search="karim")] == ["Karim"]
    # Product token search
    assert len(reporting_service.filter_transactions(search="lentils")) == 1

    with pytest.raises(QueryError):
        reporting_service.filter_transactions(kind="refund")


def test_transaction_totals(store):
    process_command("Karim 100 taka paid")
    process_command("Rice 1 kg bikri 55 taka")

    totals = reporting_service.transaction_totals()

    # seed: sale 110 + baki-sale 120, then sale 55
    assert totals == {"total_sales": 285, "total_payments": 100}


def test_dashboard_summary(store):
    process_command("Rahim 100 taka baki")

    summary = reporting_service.dashboard_summary()

    assert summary["product_types"] == 5
    assert summary["inventory_units"] == 165
    assert summary["total_baki"] == 1350
    assert summary["customers_with_baki"] == 2
    assert summary["today_transaction_count"] == 3
    assert summary["today_sales"] == 110 + 120 + 100
    assert [c["name"] for c in summary["top_customers"]] == ["Karim", "Rahim"]
    assert summary["recent_transactions"][0]["kind"] == "baki-sale"
    assert summary["low_stock_products"] == []
