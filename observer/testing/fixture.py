"""
Deterministic fixture data for end-to-end tests.

Seeds a fresh home directory with a single item and its embedding so UI and
search tests have something stable to look for.
"""

from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import List, Optional, Union

from ..core.config import DATA_DIR_MODE, data_dir, db_path
from ..core.errors import DirectoryError
from ..store import Item, Store
from ..util.logging import logger

FIXTURE_ITEM_ID = "item-1"
FIXTURE_EMBEDDING = [0.2, 0.1, 0.4]
FIXTURE_PUBLISHED_OFFSET = timedelta(minutes=10)

FIXTURE_ITEM = {
    "id": FIXTURE_ITEM_ID,
    "source_type": "rss",
    "source_name": "fixture",
    "title": "Fixture Item One",
    "summary": "A deterministic item for UI tests.",
    "url": "https://example.com/fixture-1",
    "author": "Test",
}


def fixture_items(now: Optional[datetime] = None) -> List[Item]:
    """Build the fixture item list. Published is always ten minutes before fetched."""
    if now is None:
        now = datetime.now(timezone.utc)
    return [
        Item(
            **FIXTURE_ITEM,
            published=now - FIXTURE_PUBLISHED_OFFSET,
            fetched=now
        )
    ]


def seed_fixture_db(home_dir: Union[str, Path], now: Optional[datetime] = None) -> Path:
    """Seed <home_dir>/.observer/observer.db with the fixture item and embedding.

    Raises DirectoryError, StoreOpenError or StoreWriteError. The store is
    closed on every path once it has been opened. Returns the database path.
    """
    directory = data_dir(home_dir)
    try:
        directory.mkdir(mode=DATA_DIR_MODE, parents=True, exist_ok=True)
    except OSError as e:
        logger.log_fixture_event("mkdir", str(home_dir), {"error": str(e)}, status="failed")
        raise DirectoryError(f"create data directory {directory}: {e}") from e

    path = db_path(home_dir)
    with Store.open(path) as st:
        st.save_items(fixture_items(now))
        st.save_embedding(FIXTURE_ITEM_ID, FIXTURE_EMBEDDING)

    logger.log_fixture_event("seed", str(home_dir), {"db_path": str(path), "item_id": FIXTURE_ITEM_ID})
    return path
