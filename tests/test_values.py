"""Raw value coercion into value variants."""

from __future__ import annotations

import pytest

from src.offer_ranking.models import (
    Dimension,
    ExtraBonus,
    LocationValue,
    NumericValue,
    SalaryValue,
    SelectValue,
    WorkloadValue,
    as_number,
)
from src.offer_ranking.values import to_value, weekly_hours, yearly_salary


class TestDerivedNumbers:
    def test_yearly_salary(self):
        assert yearly_salary({"monthly": 20000, "months": 12, "bonus": 50000}) == 290000

    def test_yearly_salary_missing_parts(self):
        assert yearly_salary({"monthly": 20000}) == 0
        assert yearly_salary({"bonus": 5000}) == 5000
        assert yearly_salary(None) == 0
        assert yearly_salary(SalaryValue(monthly=0, months=0, bonus=0)) == 0

    @pytest.mark.parametrize(
        ("hours", "days", "expected"), [(8, 5, 40), (12, 6, 72), (0, 5, 0), (9.5, 4, 38)],
    )
    def test_weekly_hours(self, hours, days, expected):
        assert weekly_hours({"hoursPerDay": hours, "daysPerWeek": days}) == expected

    def test_weekly_hours_snake_case(self):
        assert weekly_hours({"hours_per_day": 8, "days_per_week": 5}) == 40
        assert WorkloadValue(hours_per_day=8, days_per_week=5).weekly_hours == 40


class TestAsNumber:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            (3, 3.0), ("4.5", 4.5), (" 7 ", 7.0), (True, 1.0), (None, 0.0),
            ("", 0.0), ("abc", 0.0), ("nan", 0.0), (float("inf"), 0.0), ([1], 0.0),
        ],
    )
    def test_coercion(self, raw, expected):
        assert as_number(raw) == expected


class TestToValue:
    def test_salary_by_id(self):
        value = to_value(Dimension(id="salary", kind="salary"), {"monthly": "1000", "months": 12})
        assert value == SalaryValue(monthly=1000, months=12, bonus=0)

    def test_salary_garbage_becomes_zero_record(self):
        value = to_value(Dimension(id="salary", kind="salary"), "a lot")
        assert value == SalaryValue()

    def test_record_tag_in_raw_is_ignored(self):
        value = to_value(Dimension(id="salary", kind="salary"), {"tag": "bogus", "bonus": 7})
        assert value.yearly == 7

    def test_location_by_id(self):
        value = to_value(Dimension(id="location", kind="location"), {"city": 42, "preference": "met"})
        assert value == LocationValue(city="42", preference="met")

    def test_select_scalar(self):
        dim = Dimension(id="isCore", kind="select")
        assert to_value(dim, "yes") == SelectValue(choice="yes")
        assert to_value(dim, 3.0) == SelectValue(choice="3")
        assert to_value(dim, None) == SelectValue()

    def test_select_record_becomes_location(self):
        value = to_value(Dimension(id="custom", kind="select"), {"preference": "no"})
        assert value.tag == "location"
        assert value.preference == "no"

    def test_salary_increase_unsure(self):
        dim = Dimension(id="salaryIncrease", kind="numeric")
        assert to_value(dim, "unsure") == NumericValue(unsure=True)
        assert to_value(dim, "8") == NumericValue(amount=8)

    def test_unsure_only_special_for_salary_increase(self):
        dim = Dimension(id="annualLeave", kind="numeric")
        assert to_value(dim, "unsure") == NumericValue(amount=0)

    def test_builtin_numeric_ids_stay_numeric_whatever_kind(self):
        dim = Dimension(id="turnover", kind="select")
        assert to_value(dim, "3") == NumericValue(amount=3)

    def test_slider_and_numeric(self):
        assert to_value(Dimension(id="v", kind="slider"), "55") == NumericValue(amount=55)
        assert to_value(Dimension(id="n", kind="numeric"), None) == NumericValue()

    def test_dumped_variants_rebuilt(self):
        assert to_value(
            Dimension(id="annualLeave", kind="numeric"),
            {"tag": "numeric", "amount": 10, "unsure": False},
        ) == NumericValue(amount=10)
        assert to_value(
            Dimension(id="isCore", kind="select"), {"tag": "select", "choice": "yes"},
        ) == SelectValue(choice="yes")
        assert to_value(
            Dimension(id="salaryIncrease", kind="numeric"),
            NumericValue(unsure=True).model_dump(),
        ) == NumericValue(unsure=True)

    def test_existing_variant_passes_through(self):
        salary = SalaryValue(monthly=1, months=2, bonus=3)
        assert to_value(Dimension(id="salary", kind="salary"), salary) is salary


class TestExtraBonus:
    @pytest.mark.parametrize(
        ("points", "expected"), [(50, 50.0), (-5, 0.0), (250, 100.0), ("30", 30.0), ("x", 0.0)],
    )
    def test_points_clamped(self, points, expected):
        assert ExtraBonus(dimension_id="a", points=points).points == expected
