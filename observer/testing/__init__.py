"""
Test-support helpers: fixture seeding, output snapshots and a pty console.
"""

from .fixture import FIXTURE_EMBEDDING, FIXTURE_ITEM, FIXTURE_ITEM_ID, fixture_items, seed_fixture_db
from .snapshot import DeadlineReader, read_snapshot

__all__ = [
    'FIXTURE_EMBEDDING',
    'FIXTURE_ITEM',
    'FIXTURE_ITEM_ID',
    'fixture_items',
    'seed_fixture_db',
    'DeadlineReader',
    'read_snapshot'
]
