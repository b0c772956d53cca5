"""
In-memory claims store.

Append-only, insertion ordered and process scoped. Readers take an
immutable snapshot; a commit builds the next snapshot under the writer lock
and swaps the reference, so a reader sees either none or all of a batch.
"""

import threading
from typing import Iterator, Sequence, Tuple

from claims_api.domain.entities import ClaimRecord
from claims_api.utils.logger import get_logger

logger = get_logger(__name__)


class ClaimsStore:
    """Append-only collection of committed claims."""

    def __init__(self, records: Sequence[ClaimRecord] = ()):
        self._lock = threading.Lock()
        self._records: Tuple[ClaimRecord, ...] = tuple(records)

    def snapshot(self) -> Tuple[ClaimRecord, ...]:
        """Current committed records in insertion order."""
        return self._records

    def append_batch(self, records: Sequence[ClaimRecord]) -> int:
        """
        Append a validated batch atomically

        Args:
            records: Records in upload row order

        Returns:
            Store size after the append
        """
        batch = tuple(records)
        with self._lock:
            self._records = self._records + batch
            size = len(self._records)

        logger.info(f"Committed {len(batch)} claims, store size is now {size}")
        return size

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[ClaimRecord]:
        return iter(self._records)
