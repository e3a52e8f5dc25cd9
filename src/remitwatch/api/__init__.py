"""API layer: read models composed from TransactionQueryEngine queries.

Renderers in output/ consume these dicts and never query the engine directly.
"""
