import logging
from datetime import date

from cardcycle.domain.models import BillingCycle, Card
from cardcycle.engine.calendar import (
    add_days,
    clamp_day,
    following_month,
    previous_month,
    year_in_range,
)

logger = logging.getLogger(__name__)


def resolve_billing_day(card: Card, year: int, month: int) -> int:
    for override in card.per_month_overrides:
        if override.year == year and override.month == month:
            return override.day
    return card.billing_day


def effective_billing_day(card: Card, year: int, month: int) -> int:
    return clamp_day(year, month, resolve_billing_day(card, year, month))


def resolve_current_cycle(card: Card, reference_date: date) -> BillingCycle:
    year, month = reference_date.year, reference_date.month

    if reference_date.day < effective_billing_day(card, year, month):
        end_year, end_month = year, month
        start_year, start_month = previous_month(year, month)
    else:
        start_year, start_month = year, month
        end_year, end_month = following_month(year, month)

    # Cycles reaching past the representable calendar stop at date.min / date.max.
    if year_in_range(start_year):
        start_date = date(start_year, start_month, effective_billing_day(card, start_year, start_month))
    else:
        start_date = date.min

    if year_in_range(end_year):
        end_date = add_days(date(end_year, end_month, effective_billing_day(card, end_year, end_month)), -1)
    else:
        end_date = date.max

    cycle = BillingCycle(start_date=start_date, end_date=end_date)
    logger.debug(
        "card=%s reference=%s cycle=%s..%s",
        card.id,
        reference_date,
        cycle.start_date,
        cycle.end_date,
    )
    return cycle


def next_billing_date(card: Card, reference_date: date) -> date:
    return add_days(resolve_current_cycle(card, reference_date).end_date, 1)
