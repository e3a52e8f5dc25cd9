"""Deduplication logic for repeated transaction reports."""

from typing import Iterable, List, Set

from ..transactions.models import TransactionRecord


def is_duplicate(record: TransactionRecord, seen_transaction_ids: Set[int]) -> bool:
    """
    Check whether a record repeats an already-seen transaction.

    Args:
        record: Record being considered
        seen_transaction_ids: Transaction IDs kept so far

    Returns:
        True if the record's transaction_id was already seen
    """
    return record.transaction_id in seen_transaction_ids


def first_seen_by_transaction_id(records: Iterable[TransactionRecord]) -> List[TransactionRecord]:
    """
    Collapse repeated reports of a transaction, keeping the first one encountered.

    Order matters: later records with an already-seen transaction_id are dropped
    even when their amount or parties differ, so callers get the amount of the
    first report.

    Args:
        records: Records in original order

    Returns:
        Kept records, in original order
    """
    seen_transaction_ids: Set[int] = set()
    kept: List[TransactionRecord] = []
    for record in records:
        if is_duplicate(record, seen_transaction_ids):
            continue
        seen_transaction_ids.add(record.transaction_id)
        kept.append(record)
    return kept
