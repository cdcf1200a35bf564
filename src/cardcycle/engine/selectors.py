from collections.abc import Sequence
from datetime import date

from cardcycle.domain.models import Card, CardStats, Category, Expense, PortfolioSummary
from cardcycle.engine.stats import compute_card_stats, utilization_percent


def summarize_cards(
    cards: Sequence[Card],
    expenses: Sequence[Expense],
    categories: Sequence[Category],
    reference_date: date,
) -> PortfolioSummary:
    stats = [compute_card_stats(card, expenses, categories, reference_date) for card in cards]

    total_limit = sum((card.card_limit for card in cards), 0.0)
    total_spending = sum((item.current_cycle_spending for item in stats), 0.0)

    return PortfolioSummary(
        reference_date=reference_date,
        cards=tuple(stats),
        total_card_limit=total_limit,
        total_cycle_spending=total_spending,
        total_available_credit=sum((item.available_credit for item in stats), 0.0),
        total_estimated_cashback=sum((item.estimated_total_cashback for item in stats), 0.0),
        overall_utilization_percent=utilization_percent(total_spending, total_limit),
    )


def rank_by_cashback(stats: Sequence[CardStats]) -> list[CardStats]:
    return sorted(stats, key=lambda item: (-item.estimated_total_cashback, item.utilization_percent))
