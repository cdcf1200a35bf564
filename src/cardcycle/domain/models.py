from datetime import date
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class CardType(str, Enum):
    cashback = "cashback"
    points = "points"


class PaymentMethod(str, Enum):
    cash = "cash"
    credit_card = "credit_card"
    e_wallet = "e_wallet"


class FrozenModel(BaseModel):
    model_config = ConfigDict(frozen=True)


class MonthOverride(FrozenModel):
    year: int
    month: int = Field(ge=1, le=12)
    day: int = Field(ge=1, le=31)


class CashbackRule(FrozenModel):
    id: str = ""
    linked_category_id: str
    min_spend_for_rate: float = Field(default=0, ge=0)
    rate_if_met: float = Field(ge=0)
    cap_if_met: float = Field(ge=0)
    rate_if_not_met: float = Field(default=0, ge=0)
    cap_if_not_met: float = Field(default=0, ge=0)


class Card(FrozenModel):
    id: str
    name: str
    bank_name: str | None = None
    card_limit: float = 0
    billing_day: int = Field(ge=1, le=31)
    per_month_overrides: tuple[MonthOverride, ...] = ()
    card_type: CardType = CardType.points
    cashback_rules: tuple[CashbackRule, ...] = ()
    benefit_min_spend: float | None = Field(default=None, ge=0)


class Category(FrozenModel):
    id: str
    name: str


class Expense(FrozenModel):
    id: str = ""
    amount: float = Field(ge=0)
    date: date
    category: str
    card_id: str | None = None
    payment_method: PaymentMethod | None = None
    description: str | None = None

    def charged_to(self, card: Card) -> bool:
        if self.card_id != card.id:
            return False
        return self.payment_method in (None, PaymentMethod.credit_card)


class BillingCycle(FrozenModel):
    start_date: date
    end_date: date

    def contains(self, day: date) -> bool:
        return self.start_date <= day <= self.end_date


class RuleEvaluation(FrozenModel):
    estimated_cashback: float
    required_to_reach_cap: float
    required_to_reach_min_spend: float
    met_min_spend: bool


class RuleCashback(FrozenModel):
    rule_id: str
    category_name: str
    category_spend: float
    estimated_cashback: float
    required_to_reach_cap: float
    required_to_reach_min_spend: float
    met_min_spend: bool


class CardStats(FrozenModel):
    card_id: str
    card_name: str
    cycle: BillingCycle
    current_cycle_spending: float
    available_credit: float
    utilization_percent: float
    estimated_total_cashback: float
    next_billing_date: date
    cashback_by_rule: tuple[RuleCashback, ...] = ()
    required_to_reach_benefit: float | None = None


class PortfolioSummary(FrozenModel):
    reference_date: date
    cards: tuple[CardStats, ...] = ()
    total_card_limit: float = 0
    total_cycle_spending: float = 0
    total_available_credit: float = 0
    total_estimated_cashback: float = 0
    overall_utilization_percent: float = 0


class LedgerSnapshot(FrozenModel):
    cards: tuple[Card, ...] = ()
    expenses: tuple[Expense, ...] = ()
    categories: tuple[Category, ...] = ()
