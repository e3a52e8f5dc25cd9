"""Transaction summary rendering (markdown and JSON).

This module is renderer-only. All query/transform logic lives in api/summary_api.py.
"""

import json
from datetime import datetime, timezone
from typing import Dict


def render_markdown(summary: Dict) -> str:
    """Render summary data as markdown."""
    lines = []

    date_str = datetime.now(timezone.utc).strftime("%Y-%m-%d")
    lines.append(f"# Transaction Summary — {date_str}")
    lines.append("")
    if summary.get("source"):
        lines.append(f"Source: `{summary['source']}` ({summary['record_count']} records)")
    else:
        lines.append(f"Records: {summary['record_count']}")
    lines.append("")

    totals = summary["totals"]
    lines.append("## Totals")
    lines.append("")
    lines.append(f"- **Total amount:** {totals['total_amount']}")
    lines.append(f"- **Max amount:** {totals['max_amount']}")
    lines.append(f"- **Unique clients:** {totals['unique_clients']}")
    top_sender = summary.get("top_sender")
    lines.append(f"- **Top sender:** {top_sender if top_sender else 'None'}")
    lines.append("")

    if summary["record_count"] == 0:
        lines.append("No transactions loaded.")
        lines.append("")
        return "\n".join(lines)

    senders = summary.get("senders", [])
    if senders:
        lines.append("## Senders")
        lines.append("")
        for sender in senders:
            lines.append(f"- {sender['name']}: {sender['total_sent']}")
        lines.append("")

    clients = summary.get("clients", [])
    if clients:
        lines.append("## Clients")
        lines.append("")
        for client in clients:
            flag = "OPEN ISSUE" if client["has_open_issue"] else "clear"
            lines.append(f"- {client['name']}: {flag}")
        lines.append("")

    issues = summary["issues"]
    lines.append("## Compliance Issues")
    lines.append("")
    unsolved = ", ".join(str(issue_id) for issue_id in issues["unsolved_ids"])
    lines.append(f"- **Unsolved issue IDs:** {unsolved if unsolved else 'None'}")
    if issues["solved_messages"]:
        lines.append("- **Solved issue messages:**")
        for message in issues["solved_messages"]:
            lines.append(f"  - {message if message is not None else '(no message)'}")
    else:
        lines.append("- **Solved issue messages:** None")
    lines.append("")

    lines.append("## Top Transactions")
    lines.append("")
    for rank, txn in enumerate(summary["top_transactions"], start=1):
        lines.append(
            f"{rank}. **{txn['amount']}** {txn['senderFullName']} → {txn['beneficiaryFullName']} "
            f"(transaction {txn['transactionId']})"
        )
    lines.append("")

    lines.append("## Beneficiaries")
    lines.append("")
    for beneficiary in summary["beneficiaries"]:
        lines.append(f"- {beneficiary['name']}: {beneficiary['transaction_count']}")
    lines.append("")

    return "\n".join(lines)


def render_json(summary: Dict) -> str:
    """Render summary data as JSON."""
    return json.dumps(summary, indent=2, sort_keys=True)
