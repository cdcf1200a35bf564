from datetime import date

from cardcycle.config import settings
from cardcycle.engine.calendar import to_iso
from cardcycle.repository.ledger_store import LedgerLoadError, LedgerStore
from cardcycle.schemas.responses import CardStatsResponse
from cardcycle.services.stats_service import StatsService


def format_report(payload: CardStatsResponse) -> str:
    summary = payload.summary
    lines = [f"Card statistics as of {to_iso(summary.reference_date)}"]

    for stats in summary.cards:
        lines.append("")
        lines.append(f"{stats.card_name} ({stats.card_id})")
        lines.append(f"  Cycle: {to_iso(stats.cycle.start_date)} .. {to_iso(stats.cycle.end_date)}")
        lines.append(
            f"  Spending: {stats.current_cycle_spending:.2f} "
            f"({stats.utilization_percent:.0f}% of limit), "
            f"available {stats.available_credit:.2f}"
        )
        lines.append(f"  Next billing date: {to_iso(stats.next_billing_date)}")
        if stats.required_to_reach_benefit:
            lines.append(f"  Spend {stats.required_to_reach_benefit:.2f} more to unlock card benefits")
        for entry in stats.cashback_by_rule:
            lines.append(
                f"  - {entry.category_name}: spend {entry.category_spend:.2f}, "
                f"cashback {entry.estimated_cashback:.2f}"
            )
        if stats.cashback_by_rule:
            lines.append(f"  Estimated cashback: {stats.estimated_total_cashback:.2f}")
        lines.extend(f"  * {hint}" for hint in payload.hints.get(stats.card_id, []))

    lines.append("")
    if payload.ranked_card_ids:
        lines.append(f"Ranked by cashback: {', '.join(payload.ranked_card_ids)}")
    lines.append(
        f"Total: spending {summary.total_cycle_spending:.2f} / limit {summary.total_card_limit:.2f}, "
        f"cashback {summary.total_estimated_cashback:.2f}"
    )
    return "\n".join(lines)


def main(reference_date: date | None = None, as_json: bool = False) -> None:
    service = StatsService(
        LedgerStore(settings.ledger_file),
        timezone=settings.timezone,
        cache_size=settings.stats_cache_size,
    )
    try:
        payload = service.ledger_summary(reference_date)
    except (FileNotFoundError, LedgerLoadError) as exc:
        raise SystemExit(f"Report failed: {exc}") from exc

    if as_json:
        print(payload.model_dump_json(indent=2))
        return

    print(format_report(payload))
