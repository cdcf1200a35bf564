from collections.abc import Iterable, Iterator, Mapping
from datetime import date
from types import MappingProxyType

from cardcycle.domain.models import BillingCycle, Card, Expense
from cardcycle.engine.cycle import resolve_current_cycle


def expenses_in_cycle(card: Card, expenses: Iterable[Expense], cycle: BillingCycle) -> Iterator[Expense]:
    for expense in expenses:
        if expense.charged_to(card) and cycle.contains(expense.date):
            yield expense


def cycle_spending(card: Card, expenses: Iterable[Expense], reference_date: date) -> float:
    cycle = resolve_current_cycle(card, reference_date)
    return sum((expense.amount for expense in expenses_in_cycle(card, expenses, cycle)), 0.0)


def category_spending(
    card: Card,
    expenses: Iterable[Expense],
    category_name: str,
    reference_date: date,
) -> float:
    cycle = resolve_current_cycle(card, reference_date)
    return sum(
        (
            expense.amount
            for expense in expenses_in_cycle(card, expenses, cycle)
            if expense.category == category_name
        ),
        0.0,
    )


def category_totals(card: Card, expenses: Iterable[Expense], reference_date: date) -> Mapping[str, float]:
    cycle = resolve_current_cycle(card, reference_date)
    counted = list(expenses_in_cycle(card, expenses, cycle))
    names = list(dict.fromkeys(expense.category for expense in counted))
    totals = {
        name: sum((expense.amount for expense in counted if expense.category == name), 0.0)
        for name in names
    }
    return MappingProxyType(totals)
