from .models import TransactionRecord

__all__ = ["TransactionRecord"]
