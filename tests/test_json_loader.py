"""Tests for loading transaction documents."""

import json
from decimal import Decimal

import pytest

from remitwatch.ingestion.json_loader import RecordLoadError, load_records, parse_records


def _write(tmp_path, payload, name="transactions.json"):
    path = tmp_path / name
    path.write_text(payload if isinstance(payload, str) else json.dumps(payload), encoding="utf-8")
    return path


def test_load_sample_document(records):
    assert len(records) == 13
    first = records[0]
    assert first.transaction_id == 663458
    assert first.amount == Decimal("430.2")
    assert first.sender_full_name == "Tom Shelby"
    assert first.sender_age == 22
    assert first.beneficiary_full_name == "Alfie Solomons"
    assert first.has_issue is True
    assert first.issue_id == 1
    assert first.issue_solved is False
    assert first.issue_message == "Looks like money laundering"


def test_amounts_are_exact_decimals(records):
    """Floats in the document are decoded as Decimal, not binary floats."""
    assert all(isinstance(r.amount, Decimal) for r in records)
    assert records[3].amount == Decimal("97.66")


def test_records_are_immutable(records):
    with pytest.raises(Exception):
        records[0].amount = Decimal("1")


def test_transaction_id_key_accepted(tmp_path):
    path = _write(tmp_path, '[{"transactionId": 9, "amount": 1.5, '
                            '"senderFullName": "A", "beneficiaryFullName": "B"}]')
    records = load_records(path)
    assert records[0].transaction_id == 9
    assert records[0].issue_id is None
    assert records[0].issue_solved is False


def test_null_issue_solved_reads_as_false(tmp_path):
    path = _write(tmp_path, [{
        "mtn": 1, "amount": 2, "senderFullName": "A", "beneficiaryFullName": "B",
        "issueId": 5, "issueSolved": None,
    }])
    record = load_records(path)[0]
    assert record.has_open_issue is True


def test_empty_document(tmp_path):
    assert load_records(_write(tmp_path, "[]")) == ()


def test_missing_file(tmp_path):
    with pytest.raises(RecordLoadError, match="Unable to read transactions file") as exc_info:
        load_records(tmp_path / "missing.json")
    assert exc_info.value.source.endswith("missing.json")


def test_invalid_json(tmp_path):
    path = _write(tmp_path, "[{not json")
    with pytest.raises(RecordLoadError, match="not valid JSON") as exc_info:
        load_records(path)
    assert isinstance(exc_info.value.__cause__, json.JSONDecodeError)


def test_top_level_must_be_array(tmp_path):
    path = _write(tmp_path, {"transactions": []})
    with pytest.raises(RecordLoadError, match="schema validation") as exc_info:
        load_records(path)
    assert exc_info.value.errors[0].startswith("$:")


def test_schema_errors_report_paths(tmp_path):
    path = _write(tmp_path, [
        {"mtn": 1, "amount": 1, "senderFullName": "A", "beneficiaryFullName": "B"},
        {"mtn": 2, "amount": "lots", "senderFullName": "A", "beneficiaryFullName": "B"},
    ])
    with pytest.raises(RecordLoadError) as exc_info:
        load_records(path)
    assert any(issue.startswith("$.1.amount:") for issue in exc_info.value.errors)


def test_missing_transaction_id_rejected(tmp_path):
    path = _write(tmp_path, [{"amount": 1, "senderFullName": "A", "beneficiaryFullName": "B"}])
    with pytest.raises(RecordLoadError) as exc_info:
        load_records(path)
    assert any(issue.startswith("$.0:") for issue in exc_info.value.errors)


def test_all_or_nothing(tmp_path):
    """One bad record means no records at all."""
    good = {"mtn": 1, "amount": 1, "senderFullName": "A", "beneficiaryFullName": "B"}
    bad = {"mtn": 2, "amount": 1, "senderFullName": None, "beneficiaryFullName": "B"}
    with pytest.raises(RecordLoadError):
        load_records(_write(tmp_path, [good, bad]))


def test_parse_records_on_decoded_document():
    records = parse_records([
        {"transactionId": 1, "amount": Decimal("3.10"), "senderFullName": "A", "beneficiaryFullName": "B"},
    ])
    assert records[0].amount == Decimal("3.10")


def test_load_error_is_value_error():
    assert issubclass(RecordLoadError, ValueError)


def test_issue_predicates(make_record):
    """Solved/open flags only apply when an issue_id is present."""
    no_issue = make_record(1, 1, issue_solved=True)
    open_issue = make_record(2, 1, issue_id=8, issue_solved=False)
    solved_issue = make_record(3, 1, issue_id=9, issue_solved=True)

    assert (no_issue.has_issue, no_issue.has_open_issue, no_issue.has_solved_issue) == (False, False, False)
    assert (open_issue.has_issue, open_issue.has_open_issue, open_issue.has_solved_issue) == (True, True, False)
    assert (solved_issue.has_issue, solved_issue.has_open_issue, solved_issue.has_solved_issue) == (True, False, True)
