import logging
import threading
from collections import OrderedDict
from collections.abc import Sequence
from datetime import date, datetime
from zoneinfo import ZoneInfo

from cardcycle.domain.models import Card, Category, Expense
from cardcycle.engine.cycle import next_billing_date, resolve_current_cycle
from cardcycle.engine.evaluator import cashback_hints
from cardcycle.engine.selectors import rank_by_cashback, summarize_cards
from cardcycle.repository.ledger_store import LedgerStore
from cardcycle.schemas.requests import CardStatsRequest
from cardcycle.schemas.responses import CardCycleResponse, CardStatsResponse

logger = logging.getLogger(__name__)


class CardNotFoundError(LookupError):
    pass


class StatsService:
    def __init__(self, ledger_store: LedgerStore, timezone: str = "UTC", cache_size: int = 32):
        self.ledger_store = ledger_store
        self.timezone = ZoneInfo(timezone)
        self.cache_size = cache_size
        self._cache: OrderedDict[tuple[int, date], CardStatsResponse] = OrderedDict()
        self._lock = threading.Lock()

    def today(self) -> date:
        return datetime.now(self.timezone).date()

    def _build_response(
        self,
        cards: Sequence[Card],
        expenses: Sequence[Expense],
        categories: Sequence[Category],
        reference_date: date,
    ) -> CardStatsResponse:
        summary = summarize_cards(cards, expenses, categories, reference_date)
        hints = {stats.card_id: cashback_hints(stats) for stats in summary.cards}
        ranked = [stats.card_id for stats in rank_by_cashback(summary.cards)]
        return CardStatsResponse(summary=summary, ranked_card_ids=ranked, hints=hints)

    def summarize(self, request: CardStatsRequest) -> CardStatsResponse:
        reference_date = request.reference_date or self.today()
        return self._build_response(request.cards, request.expenses, request.categories, reference_date)

    def ledger_summary(self, reference_date: date | None = None) -> CardStatsResponse:
        reference_date = reference_date or self.today()
        key = (self.ledger_store.version(), reference_date)

        with self._lock:
            cached = self._cache.get(key)
            if cached is not None:
                self._cache.move_to_end(key)
                logger.debug("card stats cache hit for %s", reference_date)
                return cached

        snapshot = self.ledger_store.load()
        response = self._build_response(
            snapshot.cards, snapshot.expenses, snapshot.categories, reference_date
        )

        with self._lock:
            self._cache[key] = response
            while len(self._cache) > self.cache_size:
                self._cache.popitem(last=False)
        return response

    def card_cycle(self, card_id: str, reference_date: date | None = None) -> CardCycleResponse:
        reference_date = reference_date or self.today()
        snapshot = self.ledger_store.load()
        card = next((item for item in snapshot.cards if item.id == card_id), None)
        if card is None:
            raise CardNotFoundError(f"Card not found: {card_id}")

        return CardCycleResponse(
            card_id=card.id,
            reference_date=reference_date,
            cycle=resolve_current_cycle(card, reference_date),
            next_billing_date=next_billing_date(card, reference_date),
        )
