"""Query engine: canonical read-only query surface over loaded transactions.

The engine owns an immutable snapshot (a tuple of frozen records) taken at
construction. Every query is a pure scan over that snapshot; nothing here writes
back to the records or to the source document.
"""

from decimal import Decimal
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Set, Tuple, Union

from ..ingestion.json_loader import load_records
from ..transactions.models import TransactionRecord
from ..utils.logging import get_logger
from .dedupe import first_seen_by_transaction_id

logger = get_logger(__name__)

ZERO = Decimal(0)


class TransactionQueryEngine:
    """Read-only queries over an immutable snapshot of transaction records."""

    def __init__(self, records: Iterable[TransactionRecord]):
        if records is None:
            raise TypeError("TransactionQueryEngine requires a record collection, got None")
        self._records: Tuple[TransactionRecord, ...] = tuple(records)
        logger.debug(f"Query engine built over {len(self._records)} records")

    @classmethod
    def from_path(cls, source: Union[str, Path]) -> "TransactionQueryEngine":
        """Load a JSON document and build an engine over it (fails fast on load errors)."""
        return cls(load_records(source))

    @property
    def records(self) -> Tuple[TransactionRecord, ...]:
        return self._records

    def __len__(self) -> int:
        return len(self._records)

    def _deduplicated(self) -> List[TransactionRecord]:
        return first_seen_by_transaction_id(self._records)

    def total_amount(self) -> Decimal:
        """Sum of amounts, counting each transaction_id once."""
        return sum((record.amount for record in self._deduplicated()), ZERO)

    def total_amount_sent_by(self, sender_full_name: str) -> Decimal:
        """Sum of amounts sent by one client, counting each transaction_id once."""
        sent = (record for record in self._records if record.sender_full_name == sender_full_name)
        return sum((record.amount for record in first_seen_by_transaction_id(sent)), ZERO)

    def max_amount(self) -> Decimal:
        """Highest amount across all records, repeated reports included."""
        return max((record.amount for record in self._records), default=ZERO)

    def unique_client_count(self) -> int:
        """Number of distinct names seen as sender or beneficiary."""
        clients: Set[str] = set()
        for record in self._records:
            clients.add(record.sender_full_name)
            clients.add(record.beneficiary_full_name)
        return len(clients)

    def has_open_compliance_issue(self, client_full_name: str) -> bool:
        """Whether the client, as sender or beneficiary, has an unsolved issue."""
        return any(
            record.has_open_issue
            for record in self._records
            if record.involves(client_full_name)
        )

    def transactions_by_beneficiary(self) -> Dict[str, List[TransactionRecord]]:
        """All records grouped by beneficiary, in first-seen order."""
        grouped: Dict[str, List[TransactionRecord]] = {}
        for record in self._records:
            grouped.setdefault(record.beneficiary_full_name, []).append(record)
        return grouped

    def unsolved_issue_ids(self) -> Set[int]:
        return {record.issue_id for record in self._records if record.has_open_issue}

    def solved_issue_messages(self) -> List[Optional[str]]:
        return [record.issue_message for record in self._records if record.has_solved_issue]

    def top_by_amount(self, limit: int) -> List[TransactionRecord]:
        """
        Largest transactions after deduplication, sorted by amount descending.

        The sort is stable, so equal amounts keep their original relative order.

        Raises:
            ValueError: If limit is negative
        """
        if limit < 0:
            raise ValueError(f"limit must be >= 0, got {limit}")
        ranked = sorted(self._deduplicated(), key=lambda record: record.amount, reverse=True)
        return ranked[:limit]

    def top3_by_amount(self) -> List[TransactionRecord]:
        return self.top_by_amount(3)

    def top_sender(self) -> Optional[str]:
        """
        Sender with the largest deduplicated total, or None when there are no records.

        On an exact tie the sender whose first transaction came earliest wins.
        """
        totals: Dict[str, Decimal] = {}
        for record in self._deduplicated():
            totals[record.sender_full_name] = totals.get(record.sender_full_name, ZERO) + record.amount
        if not totals:
            return None
        return max(totals, key=totals.__getitem__)
