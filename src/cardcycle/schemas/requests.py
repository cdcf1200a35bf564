from datetime import date

from pydantic import BaseModel, Field

from cardcycle.domain.models import Card, Category, Expense


class CardStatsRequest(BaseModel):
    cards: list[Card] = Field(default_factory=list)
    expenses: list[Expense] = Field(default_factory=list)
    categories: list[Category] = Field(default_factory=list)
    reference_date: date | None = None
