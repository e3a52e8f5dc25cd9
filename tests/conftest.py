"""Pytest configuration and fixtures."""

from decimal import Decimal
from pathlib import Path

import pytest

from remitwatch.ingestion.json_loader import load_records
from remitwatch.query.engine import TransactionQueryEngine
from remitwatch.transactions.models import TransactionRecord

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixture_path() -> Path:
    """Path to the sample transactions document."""
    return FIXTURES_DIR / "transactions.json"


@pytest.fixture
def records(fixture_path):
    return load_records(fixture_path)


@pytest.fixture
def engine(records):
    return TransactionQueryEngine(records)


@pytest.fixture
def make_record():
    """Factory for hand-built records; only the fields a test cares about need passing."""

    def _make(transaction_id, amount, sender="Alice", beneficiary="Bob", **kwargs):
        return TransactionRecord(
            transaction_id=transaction_id,
            amount=Decimal(str(amount)),
            sender_full_name=sender,
            beneficiary_full_name=beneficiary,
            **kwargs,
        )

    return _make
