from datetime import date

import pytest

from cardcycle.domain.models import BillingCycle, CardStats, CashbackRule, RuleCashback
from cardcycle.engine.evaluator import cashback_hints, evaluate_rule


def _rule(**overrides) -> CashbackRule:
    values = {
        "id": "r1",
        "linked_category_id": "cat",
        "min_spend_for_rate": 100,
        "rate_if_met": 0.05,
        "cap_if_met": 50,
        "rate_if_not_met": 0.01,
        "cap_if_not_met": 10,
    }
    values.update(overrides)
    return CashbackRule(**values)


def test_below_threshold_uses_fallback_tier() -> None:
    result = evaluate_rule(_rule(), 80)

    assert result.met_min_spend is False
    assert result.estimated_cashback == pytest.approx(0.8)
    assert result.required_to_reach_min_spend == 20
    assert result.required_to_reach_cap == 920


def test_above_threshold_is_capped() -> None:
    result = evaluate_rule(_rule(), 1000)

    assert result.met_min_spend is True
    assert result.estimated_cashback == 50
    assert result.required_to_reach_cap == 0
    assert result.required_to_reach_min_spend == 0


def test_threshold_is_inclusive() -> None:
    result = evaluate_rule(_rule(), 100)

    assert result.met_min_spend is True
    assert result.estimated_cashback == pytest.approx(5)
    assert result.required_to_reach_cap == 900


def test_fallback_cap_applies_below_threshold() -> None:
    rule = _rule(min_spend_for_rate=5000, rate_if_not_met=0.02, cap_if_not_met=10)

    result = evaluate_rule(rule, 2000)

    assert result.estimated_cashback == 10
    assert result.required_to_reach_cap == 0
    assert result.required_to_reach_min_spend == 3000


def test_required_to_reach_cap_rounds_up() -> None:
    result = evaluate_rule(_rule(), 333.3)

    assert result.required_to_reach_cap == 667


def test_zero_rate_reports_no_spend_to_cap() -> None:
    rule = _rule(rate_if_not_met=0, cap_if_not_met=10)

    result = evaluate_rule(rule, 40)

    assert result.estimated_cashback == 0
    assert result.required_to_reach_cap == 0
    assert result.required_to_reach_min_spend == 60


def test_zero_spend() -> None:
    result = evaluate_rule(_rule(), 0)

    assert result.estimated_cashback == 0
    assert result.required_to_reach_min_spend == 100
    assert result.required_to_reach_cap == 1000


def _entry(category: str, to_min: float, to_cap: float) -> RuleCashback:
    return RuleCashback(
        rule_id=category,
        category_name=category,
        category_spend=0,
        estimated_cashback=0,
        required_to_reach_cap=to_cap,
        required_to_reach_min_spend=to_min,
        met_min_spend=to_min == 0,
    )


def _stats(*entries: RuleCashback) -> CardStats:
    return CardStats(
        card_id="c",
        card_name="Card",
        cycle=BillingCycle(start_date=date(2024, 3, 1), end_date=date(2024, 3, 31)),
        current_cycle_spending=0,
        available_credit=0,
        utilization_percent=0,
        estimated_total_cashback=0,
        next_billing_date=date(2024, 4, 1),
        cashback_by_rule=entries,
    )


def test_hints_prefer_threshold_then_cap_and_skip_maxed_rules() -> None:
    stats = _stats(
        _entry("Dining", to_min=0, to_cap=0),
        _entry("Groceries", to_min=20, to_cap=920),
        _entry("Transport", to_min=0, to_cap=150),
        _entry("Travel", to_min=5, to_cap=0),
    )

    assert cashback_hints(stats) == [
        "Spend 20 more on Groceries to unlock higher rate",
        "Spend 150 more on Transport to max out rewards",
    ]
    assert len(cashback_hints(stats, limit=5)) == 3


def test_spend_just_short_of_cap_still_needs_one_more_unit() -> None:
    rule = _rule(min_spend_for_rate=0, rate_if_met=0.03, cap_if_met=10)

    result = evaluate_rule(rule, 333.333333)

    assert result.estimated_cashback < 10
    assert result.required_to_reach_cap == 1
