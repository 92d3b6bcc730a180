"""
Card storage for Paster.

History lives in memory for the lifetime of the process.
"""

from paster.database.card_store import CardStore, DEFAULT_CAPACITY

__all__ = [
    'CardStore',
    'DEFAULT_CAPACITY',
]
