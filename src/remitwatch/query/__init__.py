from .dedupe import first_seen_by_transaction_id, is_duplicate
from .engine import TransactionQueryEngine

__all__ = [
    "TransactionQueryEngine",
    "first_seen_by_transaction_id",
    "is_duplicate",
]
