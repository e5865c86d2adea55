from datetime import date

import pytest
from faker import Faker

from dashboard_data.generator.constants import CATEGORIES
from dashboard_data.views import (
    category_share, contract_exposure, expiring_contracts, find_vendor, monthly_totals,
    risk_matrix, search_vendors, spend_by_category, spend_summary
)


class TestVendorQueries:

    def test_search_by_name_ignores_case(self, dataset):
        names = [v.name for v in search_vendors(dataset.vendors, "DEUTSCHE")]
        assert names == ["Deutsche Bank"]

    def test_search_by_category(self, dataset):
        found = search_vendors(dataset.vendors, "INSURANCE")
        assert found
        assert all("Insurance" in v.category or "insurance" in v.name.lower() for v in found)
        assert {"Allianz", "Zurich Insurance"} <= {v.name for v in found}

    def test_empty_search_returns_everything(self, dataset):
        assert search_vendors(dataset.vendors, "") == list(dataset.vendors)

    def test_find_vendor(self, dataset):
        assert find_vendor(dataset.vendors, "V-013").name == "HSBC"
        assert find_vendor(dataset.vendors, "V-999") is None


class TestSpendQueries:

    def test_spend_by_category_covers_all_and_sorts(self, dataset):
        rows = spend_by_category(dataset.vendors)
        assert {r["name"] for r in rows} == set(CATEGORIES)
        values = [r["value"] for r in rows]
        assert values == sorted(values, reverse=True)
        assert sum(values) == sum(v.spend for v in dataset.vendors)

    def test_spend_by_category_without_vendors(self):
        rows = spend_by_category([])
        assert [r["value"] for r in rows] == [0] * 7

    def test_category_share(self, dataset):
        shares = [category_share(dataset.vendors, c) for c in CATEGORIES]
        assert sum(shares) == pytest.approx(1.0)
        assert category_share([], "Insurance") == 0.0

    def test_monthly_totals(self, dataset):
        totals = monthly_totals(dataset.spend_history)
        assert len(totals) == 36
        assert totals.index.is_monotonic_increasing
        assert totals.iloc[-1] == dataset.spend_history[-1].total


class TestContractQueries:

    def test_expiring_contracts_before_cutoff(self, dataset):
        cutoff = date(2026, 4, 1)
        expiring = expiring_contracts(dataset.contracts, cutoff)
        assert all(c.end_date < cutoff for c in expiring)
        assert len(expiring) == sum(1 for c in dataset.contracts if c.end_date != date(2026, 12, 31))

    def test_cutoff_is_exclusive(self, dataset):
        expiring = expiring_contracts(dataset.contracts, date(2024, 12, 31))
        assert all(c.end_date != date(2024, 12, 31) for c in expiring)
        assert expiring == []

    def test_contract_exposure(self, dataset):
        assert contract_exposure(dataset.contracts) == sum(v.spend for v in dataset.vendors)
        assert contract_exposure([]) == 0


class TestRiskMatrix:

    def test_points_stay_in_risk_bands(self, dataset, fake):
        points = risk_matrix(dataset.vendors, fake)
        assert len(points) == 40
        bands = {"High": (60, 90), "Medium": (30, 60), "Low": (0, 30)}
        for point in points:
            low, high = bands[point["risk"]]
            assert low <= point["x"] <= high

    def test_impact_is_normalised_spend(self, dataset, fake):
        worldline = risk_matrix(dataset.vendors, fake)[0]
        assert worldline["y"] == pytest.approx(14200000 / 15000000 * 100)
        assert worldline["z"] == 14200000

    def test_same_seed_gives_same_points(self, dataset):
        first, second = Faker(), Faker()
        first.seed_instance(21)
        second.seed_instance(21)
        assert risk_matrix(dataset.vendors, first) == risk_matrix(dataset.vendors, second)


class TestSpendSummary:

    def test_totals_whole_history(self, dataset):
        summary = spend_summary(dataset.spend_history)
        assert summary["totalSpend"] == sum(entry.total for entry in dataset.spend_history)
        assert summary["previousSpend"] == pytest.approx(summary["totalSpend"] * 0.92)
        assert summary["changePct"] == pytest.approx((1 / 0.92 - 1) * 100)

    def test_empty_history(self):
        assert spend_summary([]) == {"totalSpend": 0, "previousSpend": 0.0, "changePct": 0.0}
