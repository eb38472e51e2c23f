"""In-memory produce store shared by every request handler."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from operator import attrgetter
from threading import Lock

from supermarket.config import settings
from supermarket.models.produce import ProduceRecord

logger = logging.getLogger(__name__)

PRODUCE_CODE_PATTERN = re.compile(r"(?:[A-Za-z0-9]{4}-){3}[A-Za-z0-9]{4}")

SEED_PRODUCE: tuple[ProduceRecord, ...] = (
    ProduceRecord(name="Lettuce", produce_code="A12T-4GH7-QPL9-3N4M", unit_price=3.46),
    ProduceRecord(name="Peach", produce_code="E5T6-9UI3-TH15-QR88", unit_price=2.99),
    ProduceRecord(
        name="Green Pepper", produce_code="YRT6-72AS-K736-L4AR", unit_price=0.79
    ),
    ProduceRecord(name="Gala Apple", produce_code="TQ4C-VV6T-75ZX-1RMR", unit_price=3.59),
)


class InvalidProduceCodeError(ValueError):
    """Raised when a batch contains a malformed produce code."""

    def __init__(self, produce_code: str):
        super().__init__("invalid product code detected")
        self.produce_code = produce_code


@dataclass(frozen=True)
class UpsertResult:
    """Tally of what an upsert did to the table."""

    created: int = 0
    updated: int = 0

    @property
    def total(self) -> int:
        return self.created + self.updated


def is_valid_produce_code(code: str) -> bool:
    return PRODUCE_CODE_PATTERN.fullmatch(code) is not None


def validate_produce_codes(records: Iterable[ProduceRecord]) -> None:
    """Raise InvalidProduceCodeError on the first record with a bad code."""

    for record in records:
        if not is_valid_produce_code(record.produce_code):
            raise InvalidProduceCodeError(record.produce_code)


class ProduceStore:
    """Mutually exclusive produce table keyed by produce code.

    Every operation takes the same lock for the shortest span that touches the
    table, so the store is safe to share across threads. Records are immutable
    models, which lets readers hold on to them after the lock is released.
    """

    def __init__(self, seed: Iterable[ProduceRecord] = ()) -> None:
        self._lock = Lock()
        self._storage: dict[str, ProduceRecord] = {
            record.produce_code: record for record in seed
        }

    def __len__(self) -> int:
        with self._lock:
            return len(self._storage)

    def list_produce(self) -> list[ProduceRecord]:
        """Return a snapshot of every record sorted by name."""

        with self._lock:
            snapshot = list(self._storage.values())

        snapshot.sort(key=attrgetter("name"))
        return snapshot

    def get(self, produce_code: str) -> ProduceRecord | None:
        with self._lock:
            return self._storage.get(produce_code)

    def upsert(self, records: Sequence[ProduceRecord]) -> UpsertResult:
        """Insert or overwrite a batch of records as a single unit.

        The whole batch is validated before the table is touched. If any code
        is malformed nothing is written and InvalidProduceCodeError is raised.
        Repeated codes inside the batch resolve in batch order, last one wins.

        Returns:
            An UpsertResult counting inserted and overwritten keys.
        """
        batch = list(records)
        validate_produce_codes(batch)

        created = updated = 0
        with self._lock:
            for record in batch:
                if record.produce_code in self._storage:
                    updated += 1
                else:
                    created += 1
                self._storage[record.produce_code] = record

        return UpsertResult(created=created, updated=updated)

    def delete(self, produce_code: str) -> None:
        """Remove a record; absent codes are ignored."""

        with self._lock:
            self._storage.pop(produce_code, None)


def _build_default_store() -> ProduceStore:
    seed = SEED_PRODUCE if settings.SEED_PRODUCE else ()
    store = ProduceStore(seed)
    logger.debug("Produce store initialized with %d records", len(store))
    return store


_store = _build_default_store()


def get_produce_store() -> ProduceStore:
    """FastAPI dependency factory."""

    return _store
