"""
Tests de los cálculos de resumen: totales, balance, totales por categoría,
estadísticas con porcentaje y resúmenes mensuales.
"""

import datetime as dt
import random
from decimal import Decimal

import pytest

from app.domain import aggregation
from app.domain.aggregation import CategoryStatistic
from app.models.enums import MovementType
from conftest import make_movement

EXPENSE = MovementType.expense
INCOME = MovementType.income


@pytest.fixture
def scenario():
    """Movimientos válidos del escenario de ejemplo (el ingreso sin categoría se descarta)."""
    candidates = [
        make_movement(EXPENSE, "50.00", dt.date(2025, 1, 5), "Food"),
        make_movement(INCOME, "1000.00", dt.date(2025, 1, 10), ""),
        make_movement(EXPENSE, "30.00", dt.date(2025, 2, 1), "Transport"),
        make_movement(INCOME, "1000.00", dt.date(2025, 2, 15), "Salary"),
    ]
    return [m for m in candidates if m.is_valid()]


class TestTotals:

    def test_empty_collection_is_zero(self):
        assert aggregation.total_expenses([]) == Decimal("0")
        assert aggregation.total_income([]) == Decimal("0")
        assert aggregation.balance([]) == Decimal("0")

    def test_scenario_totals(self, scenario):
        assert len(scenario) == 3
        assert aggregation.total_expenses(scenario) == Decimal("80.00")
        assert aggregation.total_income(scenario) == Decimal("1000.00")
        assert aggregation.balance(scenario) == Decimal("920.00")

    def test_total_by_type_filters_internally(self, scenario):
        assert aggregation.total_by_type(scenario, EXPENSE) == Decimal("80.00")
        assert aggregation.total_by_type(scenario, INCOME) == Decimal("1000.00")

    def test_balance_can_be_negative(self):
        movements = [
            make_movement(EXPENSE, "120.50"),
            make_movement(INCOME, "20.25"),
        ]
        assert aggregation.balance(movements) == Decimal("-100.25")

    def test_balance_accepts_generators(self, scenario):
        assert aggregation.balance(m for m in scenario) == Decimal("920.00")

    def test_decimal_sums_do_not_drift(self):
        movements = [make_movement(EXPENSE, "0.10") for _ in range(3)]
        assert aggregation.total_expenses(movements) == Decimal("0.30")

    def test_ten_thousand_random_amounts_are_exact(self):
        rng = random.Random(20250101)
        # montos con 6 decimales, en millonésimas
        units = [rng.randint(1, 10**12) for _ in range(10_000)]
        types = [rng.choice([EXPENSE, INCOME]) for _ in units]
        movements = [
            make_movement(t, Decimal(u) / Decimal(10**6))
            for t, u in zip(types, units)
        ]

        expenses = aggregation.total_expenses(movements)
        income = aggregation.total_income(movements)
        balance = aggregation.balance(movements)

        assert expenses + balance == income
        expected_expenses = sum(u for u, t in zip(units, types) if t == EXPENSE)
        expected_income = sum(u for u, t in zip(units, types) if t == INCOME)
        assert expenses == Decimal(expected_expenses) / Decimal(10**6)
        assert income == Decimal(expected_income) / Decimal(10**6)


class TestCategoryTotals:

    def test_groups_by_category_for_one_type(self):
        movements = [
            make_movement(EXPENSE, "10.00", category="Food"),
            make_movement(EXPENSE, "5.50", category="Food"),
            make_movement(EXPENSE, "7.25", category="Transport"),
            make_movement(INCOME, "900.00", category="Salary"),
        ]
        assert aggregation.category_totals(movements, EXPENSE) == {
            "Food": Decimal("15.50"),
            "Transport": Decimal("7.25"),
        }
        assert aggregation.category_totals(movements, INCOME) == {"Salary": Decimal("900.00")}

    def test_empty_collection(self):
        assert aggregation.category_totals([], EXPENSE) == {}

    def test_category_totals_partition_type_total(self):
        rng = random.Random(7)
        categories = ["Food", "Transport", "Health", "Other"]
        movements = [
            make_movement(
                rng.choice([EXPENSE, INCOME]),
                Decimal(rng.randint(1, 50_000)) / Decimal(100),
                category=rng.choice(categories),
            )
            for _ in range(500)
        ]
        for movement_type in (EXPENSE, INCOME):
            totals = aggregation.category_totals(movements, movement_type)
            assert sum(totals.values(), Decimal("0")) == aggregation.total_by_type(movements, movement_type)


class TestCategoryStatistics:

    def test_percentages_relative_to_reference(self):
        totals = {"Food": Decimal("50.00"), "Transport": Decimal("30.00")}
        stats = aggregation.category_statistics(totals, Decimal("1000.00"))
        assert stats == [
            CategoryStatistic("Food", Decimal("50.00"), 5.0),
            CategoryStatistic("Transport", Decimal("30.00"), 3.0),
        ]

    def test_sorted_descending_by_total(self):
        totals = {"A": Decimal("1"), "B": Decimal("30"), "C": Decimal("7")}
        stats = aggregation.category_statistics(totals, Decimal("100"))
        assert [s.category for s in stats] == ["B", "C", "A"]

    def test_ties_broken_by_category_name(self):
        totals = {"Transport": Decimal("10"), "Food": Decimal("10"), "Health": Decimal("20")}
        stats = aggregation.category_statistics(totals, Decimal("100"))
        assert [s.category for s in stats] == ["Health", "Food", "Transport"]

    def test_ratio_rounded_to_four_digits(self):
        stats = aggregation.category_statistics({"A": Decimal("1")}, Decimal("3"))
        assert stats[0].percentage == pytest.approx(33.33)

    def test_ratio_rounds_half_up(self):
        # 1 / 20000 = 0.00005 -> 0.0001 -> 0.01 %
        stats = aggregation.category_statistics({"A": Decimal("1")}, Decimal("20000"))
        assert stats[0].percentage == pytest.approx(0.01)

    @pytest.mark.parametrize("reference", [None, Decimal("0"), Decimal("-10")])
    def test_non_positive_reference_gives_zero(self, reference):
        totals = {"Food": Decimal("50"), "Transport": Decimal("30")}
        stats = aggregation.category_statistics(totals, reference)
        assert [s.percentage for s in stats] == [0.0, 0.0]
        assert [s.total for s in stats] == [Decimal("50"), Decimal("30")]

    def test_empty_totals(self):
        assert aggregation.category_statistics({}, Decimal("100")) == []

    def test_percentages_bounded_when_expenses_within_income(self):
        rng = random.Random(11)
        movements = [
            make_movement(EXPENSE, Decimal(rng.randint(1, 10_000)) / Decimal(100),
                          category=rng.choice(["Food", "Health", "Household"]))
            for _ in range(200)
        ]
        income = aggregation.total_expenses(movements) + Decimal("250.00")
        stats = aggregation.category_statistics(aggregation.category_totals(movements, EXPENSE), income)
        for s in stats:
            assert 0.0 <= s.percentage <= 100.0
        assert sum(s.percentage for s in stats) <= 100.0 + 0.01 * len(stats)


class TestMonthLabels:

    @pytest.mark.parametrize("code, label", [
        ("2025-01", "January 2025"),
        ("2024-12", "December 2024"),
        ("1999-06", "June 1999"),
    ])
    def test_valid_codes(self, code, label):
        assert aggregation.month_label(code) == label

    @pytest.mark.parametrize("code", ["abc", "2025-13", "2025-00", "2025", "2025-ab", "20-25-01", ""])
    def test_malformed_codes_fall_back_to_raw(self, code):
        assert aggregation.month_label(code) == code

    def test_month_code_is_zero_padded(self):
        assert aggregation.month_code(dt.date(2025, 1, 31)) == "2025-01"
        assert aggregation.month_code(dt.date(987, 11, 2)) == "0987-11"


class TestMonthlySummaries:

    def test_empty_collection(self):
        assert aggregation.monthly_summaries([]) == []

    def test_scenario(self, scenario):
        summaries = aggregation.monthly_summaries(scenario)
        assert [s.month for s in summaries] == ["2025-02", "2025-01"]

        february, january = summaries
        assert february.month_label == "February 2025"
        assert february.total_expenses == Decimal("30.00")
        assert february.total_income == Decimal("1000.00")
        assert february.balance == Decimal("970.00")
        assert (february.expense_count, february.income_count, february.movement_count) == (1, 1, 2)

        assert january.month_label == "January 2025"
        assert january.total_expenses == Decimal("50.00")
        assert january.total_income == Decimal("0")
        assert january.balance == Decimal("-50.00")
        assert (january.expense_count, january.income_count, january.movement_count) == (1, 0, 1)

    def test_sorted_most_recent_first_across_years(self):
        movements = [
            make_movement(date=dt.date(2025, 1, 20)),
            make_movement(date=dt.date(2024, 12, 3)),
            make_movement(date=dt.date(2025, 2, 14)),
            make_movement(date=dt.date(2025, 1, 2)),
        ]
        summaries = aggregation.monthly_summaries(movements)
        assert [s.month for s in summaries] == ["2025-02", "2025-01", "2024-12"]
        assert summaries[1].movement_count == 2

    def test_recomputing_gives_identical_results(self, scenario):
        assert aggregation.monthly_summaries(scenario) == aggregation.monthly_summaries(scenario)
        totals = aggregation.category_totals(scenario, EXPENSE)
        income = aggregation.total_income(scenario)
        assert aggregation.category_statistics(totals, income) == aggregation.category_statistics(totals, income)


class TestMovementSummary:

    def test_counts_and_totals(self, scenario):
        summary = aggregation.movement_summary(scenario)
        assert summary.total_expenses == Decimal("80.00")
        assert summary.total_income == Decimal("1000.00")
        assert summary.balance == Decimal("920.00")
        assert (summary.movement_count, summary.expense_count, summary.income_count) == (3, 2, 1)

    def test_empty(self):
        summary = aggregation.movement_summary([])
        assert summary.balance == Decimal("0")
        assert summary.movement_count == 0
