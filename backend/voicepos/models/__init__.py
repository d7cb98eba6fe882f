from .inventory import Product
from .customers import Customer, LedgerEntry
from .transactions import Transaction

__all__ = [
    'Product',
    'Customer', 'LedgerEntry',
    'Transaction',
]
