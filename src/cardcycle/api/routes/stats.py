from datetime import date

from fastapi import APIRouter, HTTPException

from cardcycle.config import settings
from cardcycle.repository.ledger_store import LedgerLoadError, LedgerStore
from cardcycle.schemas.requests import CardStatsRequest
from cardcycle.schemas.responses import CardCycleResponse, CardStatsResponse
from cardcycle.services.stats_service import CardNotFoundError, StatsService

router = APIRouter(tags=["card-stats"])
service = StatsService(
    LedgerStore(settings.ledger_file),
    timezone=settings.timezone,
    cache_size=settings.stats_cache_size,
)


@router.post("/card-stats", response_model=CardStatsResponse)
def card_stats(request: CardStatsRequest) -> CardStatsResponse:
    return service.summarize(request)


@router.get("/ledger/card-stats", response_model=CardStatsResponse)
def ledger_card_stats(reference_date: date | None = None) -> CardStatsResponse:
    try:
        return service.ledger_summary(reference_date)
    except (FileNotFoundError, LedgerLoadError) as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc


@router.get("/ledger/cards/{card_id}/cycle", response_model=CardCycleResponse)
def ledger_card_cycle(card_id: str, reference_date: date | None = None) -> CardCycleResponse:
    try:
        return service.card_cycle(card_id, reference_date)
    except CardNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except (FileNotFoundError, LedgerLoadError) as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
