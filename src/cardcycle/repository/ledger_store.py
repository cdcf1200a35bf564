import json
import logging
from pathlib import Path

from pydantic import ValidationError

from cardcycle.domain.models import LedgerSnapshot

logger = logging.getLogger(__name__)


class LedgerLoadError(ValueError):
    pass


class LedgerStore:
    def __init__(self, ledger_file: str):
        self.ledger_file = Path(ledger_file)

    def version(self) -> int:
        if not self.ledger_file.exists():
            raise FileNotFoundError(f"Ledger file not found: {self.ledger_file}")
        return self.ledger_file.stat().st_mtime_ns

    def load(self) -> LedgerSnapshot:
        if not self.ledger_file.exists():
            raise FileNotFoundError(f"Ledger file not found: {self.ledger_file}")

        with self.ledger_file.open("r", encoding="utf-8") as fh:
            try:
                data = json.load(fh)
            except json.JSONDecodeError as exc:
                raise LedgerLoadError(f"Ledger file is not valid JSON: {exc}") from exc

        try:
            snapshot = LedgerSnapshot.model_validate(data)
        except ValidationError as exc:
            raise LedgerLoadError(f"Ledger file has invalid records: {exc}") from exc

        logger.info(
            "loaded ledger %s: %d cards, %d expenses, %d categories",
            self.ledger_file,
            len(snapshot.cards),
            len(snapshot.expenses),
            len(snapshot.categories),
        )
        return snapshot
