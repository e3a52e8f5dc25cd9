import json
from decimal import Decimal
from pathlib import Path
from typing import Any, Iterable, List, Optional, Tuple, Union

from jsonschema import Draft202012Validator, ValidationError as SchemaValidationError
from pydantic import ValidationError

from ..transactions.models import TransactionRecord
from ..utils.logging import get_logger

logger = get_logger(__name__)

TRANSACTIONS_SCHEMA = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "title": "Transaction document",
    "type": "array",
    "items": {
        "type": "object",
        "required": ["amount", "senderFullName", "beneficiaryFullName"],
        "anyOf": [
            {"required": ["transactionId"]},
            {"required": ["mtn"]},
        ],
        "properties": {
            "transactionId": {"type": "integer"},
            "mtn": {"type": "integer"},
            "amount": {"type": "number"},
            "senderFullName": {"type": "string"},
            "senderAge": {"type": ["integer", "null"]},
            "beneficiaryFullName": {"type": "string"},
            "beneficiaryAge": {"type": ["integer", "null"]},
            "issueId": {"type": ["integer", "null"]},
            "issueSolved": {"type": ["boolean", "null"]},
            "issueMessage": {"type": ["string", "null"]},
        },
    },
}


class RecordLoadError(ValueError):
    """Raised when a transaction document cannot be turned into records."""

    def __init__(self, message: str, source: Optional[str] = None, errors: Optional[List[str]] = None):
        super().__init__(message)
        self.source = source
        self.errors = errors or []


def _format_error_path(error: SchemaValidationError) -> str:
    if not error.absolute_path:
        return "$"
    parts: Iterable[str] = ("$", *map(str, error.absolute_path))
    return ".".join(parts)


def _validate_document(document: Any, source: Optional[str]) -> None:
    validator = Draft202012Validator(TRANSACTIONS_SCHEMA)
    issues = [
        f"{_format_error_path(error)}: {error.message}"
        for error in sorted(validator.iter_errors(document), key=lambda e: list(map(str, e.absolute_path)))
    ]
    if issues:
        raise RecordLoadError(
            f"Transaction document failed schema validation ({len(issues)} issue(s))",
            source=source,
            errors=issues,
        )


def parse_records(document: Any, source: Optional[str] = None) -> Tuple[TransactionRecord, ...]:
    """
    Validate a decoded JSON document and build records from it.

    Args:
        document: Decoded JSON (expected: a list of transaction objects)
        source: Optional label used in error messages

    Returns:
        Tuple of TransactionRecord, in document order

    Raises:
        RecordLoadError: If the document shape or any record is invalid
    """
    _validate_document(document, source)

    records = []
    for index, item in enumerate(document):
        try:
            records.append(TransactionRecord.model_validate(item))
        except ValidationError as exc:
            raise RecordLoadError(
                f"Invalid transaction record at index {index}",
                source=source,
                errors=[f"$.{index}.{'.'.join(map(str, err['loc']))}: {err['msg']}" for err in exc.errors()],
            ) from exc
    return tuple(records)


def load_records(source: Union[str, Path]) -> Tuple[TransactionRecord, ...]:
    """
    Load transaction records from a JSON file.

    Floats are decoded as Decimal so amounts stay exact. Loading is
    all-or-nothing: any failure raises before a single record is returned.

    Raises:
        RecordLoadError: If the file cannot be read, decoded or validated
    """
    path = Path(source)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise RecordLoadError(f"Unable to read transactions file {path}: {exc}", source=str(path)) from exc

    try:
        document = json.loads(text, parse_float=Decimal)
    except json.JSONDecodeError as exc:
        raise RecordLoadError(f"Transactions file {path} is not valid JSON: {exc}", source=str(path)) from exc

    records = parse_records(document, source=str(path))
    logger.info(f"Loaded {len(records)} transaction records from {path}")
    return records
