import logging
from collections.abc import Sequence
from datetime import date

from cardcycle.domain.models import Card, CardStats, CardType, Category, Expense, RuleCashback
from cardcycle.engine.cycle import next_billing_date, resolve_current_cycle
from cardcycle.engine.evaluator import evaluate_rule
from cardcycle.engine.spending import category_totals, cycle_spending

logger = logging.getLogger(__name__)


def utilization_percent(spending: float, card_limit: float) -> float:
    if card_limit <= 0:
        return 0.0
    return spending / card_limit * 100


def _rule_breakdown(
    card: Card,
    expenses: Sequence[Expense],
    categories: Sequence[Category],
    reference_date: date,
) -> list[RuleCashback]:
    breakdown: list[RuleCashback] = []
    if card.card_type != CardType.cashback:
        return breakdown

    totals = category_totals(card, expenses, reference_date)
    for rule in card.cashback_rules:
        category = next((item for item in categories if item.id == rule.linked_category_id), None)
        if category is None:
            logger.debug(
                "card=%s rule=%s skipped: category %s not found",
                card.id,
                rule.id,
                rule.linked_category_id,
            )
            continue

        spend = totals.get(category.name, 0.0)
        result = evaluate_rule(rule, spend)
        breakdown.append(
            RuleCashback(
                rule_id=rule.id,
                category_name=category.name,
                category_spend=spend,
                estimated_cashback=result.estimated_cashback,
                required_to_reach_cap=result.required_to_reach_cap,
                required_to_reach_min_spend=result.required_to_reach_min_spend,
                met_min_spend=result.met_min_spend,
            )
        )
    return breakdown


def compute_card_stats(
    card: Card,
    expenses: Sequence[Expense],
    categories: Sequence[Category],
    reference_date: date,
) -> CardStats:
    spending = cycle_spending(card, expenses, reference_date)
    breakdown = _rule_breakdown(card, expenses, categories, reference_date)

    required_to_reach_benefit = None
    if card.benefit_min_spend is not None:
        required_to_reach_benefit = max(0.0, card.benefit_min_spend - spending)

    return CardStats(
        card_id=card.id,
        card_name=card.name,
        cycle=resolve_current_cycle(card, reference_date),
        current_cycle_spending=spending,
        available_credit=card.card_limit - spending,
        utilization_percent=utilization_percent(spending, card.card_limit),
        estimated_total_cashback=sum((entry.estimated_cashback for entry in breakdown), 0.0),
        next_billing_date=next_billing_date(card, reference_date),
        cashback_by_rule=tuple(breakdown),
        required_to_reach_benefit=required_to_reach_benefit,
    )
