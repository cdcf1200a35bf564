from datetime import date

from pydantic import BaseModel

from cardcycle.domain.models import BillingCycle, PortfolioSummary


class CardCycleResponse(BaseModel):
    card_id: str
    reference_date: date
    cycle: BillingCycle
    next_billing_date: date


class CardStatsResponse(BaseModel):
    summary: PortfolioSummary
    ranked_card_ids: list[str]
    hints: dict[str, list[str]]
