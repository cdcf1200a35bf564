import math

from cardcycle.domain.models import CardStats, CashbackRule, RuleEvaluation

_QUOTIENT_PRECISION = 6


def _active_tier(rule: CashbackRule, met_min_spend: bool) -> tuple[float, float]:
    if met_min_spend:
        return rule.rate_if_met, rule.cap_if_met
    return rule.rate_if_not_met, rule.cap_if_not_met


def _spend_to_reach_cap(rate: float, cap: float, category_spend: float) -> float:
    if rate <= 0 or category_spend * rate >= cap:
        return 0
    remaining = round(cap / rate - category_spend, _QUOTIENT_PRECISION)
    return max(1, math.ceil(remaining))


def evaluate_rule(rule: CashbackRule, category_spend: float) -> RuleEvaluation:
    met_min_spend = category_spend >= rule.min_spend_for_rate
    rate, cap = _active_tier(rule, met_min_spend)

    estimated_cashback = min(category_spend * rate, cap)

    if met_min_spend:
        required_to_reach_min_spend = 0.0
    else:
        required_to_reach_min_spend = max(0.0, rule.min_spend_for_rate - category_spend)

    return RuleEvaluation(
        estimated_cashback=estimated_cashback,
        required_to_reach_cap=_spend_to_reach_cap(rate, cap, category_spend),
        required_to_reach_min_spend=required_to_reach_min_spend,
        met_min_spend=met_min_spend,
    )


def cashback_hints(stats: CardStats, limit: int = 2) -> list[str]:
    hints: list[str] = []
    for entry in stats.cashback_by_rule:
        if entry.required_to_reach_min_spend > 0:
            hints.append(
                f"Spend {entry.required_to_reach_min_spend:.0f} more on "
                f"{entry.category_name} to unlock higher rate"
            )
        elif entry.required_to_reach_cap > 0:
            hints.append(
                f"Spend {entry.required_to_reach_cap:.0f} more on "
                f"{entry.category_name} to max out rewards"
            )
    return hints[:limit]
