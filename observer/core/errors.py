"""
Fixture error types. Raised by the store and the fixture seeder.
"""


class FixtureError(Exception):
    """Base exception for fixture operations."""
    pass


class DirectoryError(FixtureError):
    """Custom exception for data directory creation."""
    pass


class StoreOpenError(FixtureError):
    """Custom exception for opening or migrating the item store."""
    pass


class StoreWriteError(FixtureError):
    """Custom exception for item and embedding writes."""
    pass
