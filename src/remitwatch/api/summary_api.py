"""Summary read model API.

This is the canonical query/transform surface for summary data.
All query logic lives here - output/summary.py is renderer-only.
"""

from typing import Dict, Iterable, Optional

from ..query.engine import TransactionQueryEngine


def _amount(value) -> str:
    """Decimal amounts are carried as strings so JSON output stays exact."""
    return str(value)


def get_summary(
    engine: TransactionQueryEngine,
    senders: Iterable[str] = (),
    clients: Iterable[str] = (),
    source: Optional[str] = None,
) -> Dict:
    """
    Build the summary read model.

    Args:
        engine: Query engine over the loaded records
        senders: Names to report total sent amounts for
        clients: Names to report open compliance issue flags for
        source: Optional label for where the records came from

    Returns:
        Dict with totals, per-name sections, issues, top transactions and
        beneficiary counts
    """
    beneficiaries = engine.transactions_by_beneficiary()
    return {
        "source": source,
        "record_count": len(engine),
        "totals": {
            "total_amount": _amount(engine.total_amount()),
            "max_amount": _amount(engine.max_amount()),
            "unique_clients": engine.unique_client_count(),
        },
        "senders": [
            {"name": name, "total_sent": _amount(engine.total_amount_sent_by(name))}
            for name in senders
        ],
        "clients": [
            {"name": name, "has_open_issue": engine.has_open_compliance_issue(name)}
            for name in clients
        ],
        "issues": {
            "unsolved_ids": sorted(engine.unsolved_issue_ids()),
            "solved_messages": engine.solved_issue_messages(),
        },
        "top_transactions": [
            record.model_dump(mode="json", by_alias=True)
            for record in engine.top3_by_amount()
        ],
        "top_sender": engine.top_sender(),
        "beneficiaries": [
            {"name": name, "transaction_count": len(records)}
            for name, records in beneficiaries.items()
        ],
    }
