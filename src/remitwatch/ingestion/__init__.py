from .json_loader import (
    RecordLoadError,
    TRANSACTIONS_SCHEMA,
    load_records,
    parse_records,
)

__all__ = [
    "RecordLoadError",
    "TRANSACTIONS_SCHEMA",
    "load_records",
    "parse_records",
]
