"""
SQLite item store used by the fixture seeder.
"""

from .schema import Item, encode_embedding, decode_embedding
from .store import Store, open_store

__all__ = [
    'Item',
    'Store',
    'open_store',
    'encode_embedding',
    'decode_embedding'
]
