"""remitwatch: read-only analytics over remittance transaction records."""

__version__ = "0.3.0"
