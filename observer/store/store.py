"""
SQLite persistence for items and their embeddings.
"""

import sqlite3
from datetime import datetime
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Union

from ..core.config import STORE_BUSY_TIMEOUT_MS
from ..core.errors import StoreOpenError, StoreWriteError
from ..util.logging import logger
from .schema import Item, decode_embedding, encode_embedding

MEMORY_PATH = ":memory:"

ITEM_COLUMNS = (
    "id, source_type, source_name, title, summary, url, author, "
    "published_at, fetched_at, read, saved"
)


def _create_tables(conn: sqlite3.Connection):
    """Create the items table and its indexes if they don't exist."""
    cursor = conn.cursor()

    cursor.execute('''
        CREATE TABLE IF NOT EXISTS items (
            id TEXT PRIMARY KEY,
            source_type TEXT NOT NULL,
            source_name TEXT NOT NULL,
            title TEXT NOT NULL,
            summary TEXT,
            url TEXT UNIQUE,
            author TEXT,
            published_at TIMESTAMP NOT NULL,
            fetched_at TIMESTAMP NOT NULL,
            read INTEGER DEFAULT 0,
            saved INTEGER DEFAULT 0,
            embedding BLOB DEFAULT NULL
        )
    ''')

    cursor.execute('CREATE INDEX IF NOT EXISTS idx_items_published ON items(published_at DESC)')
    cursor.execute('CREATE INDEX IF NOT EXISTS idx_items_source ON items(source_name)')
    cursor.execute('CREATE INDEX IF NOT EXISTS idx_items_no_embedding ON items(id) WHERE embedding IS NULL')

    conn.commit()


def _row_to_item(row) -> Item:
    (item_id, source_type, source_name, title, summary, url, author,
     published_at, fetched_at, read, saved) = row
    return Item(
        id=item_id,
        source_type=source_type,
        source_name=source_name,
        title=title,
        summary=summary or "",
        url=url or "",
        author=author or "",
        published=datetime.fromisoformat(published_at),
        fetched=datetime.fromisoformat(fetched_at),
        read=bool(read),
        saved=bool(saved)
    )


class Store:
    """SQLite item store. Use as a context manager so the connection is released on every path."""

    def __init__(self, conn: sqlite3.Connection, path: str):
        self._conn = conn
        self.path = path

    @classmethod
    def open(cls, path: Union[str, Path]) -> "Store":
        """Open the store at path, creating tables if needed.

        File databases run in WAL mode with a busy timeout. Any failure while
        connecting or migrating raises StoreOpenError and leaves no open
        connection behind.
        """
        path = str(path)
        try:
            conn = sqlite3.connect(path)
        except sqlite3.Error as e:
            logger.log_store_operation("open", path, {"error": str(e)}, status="failed")
            raise StoreOpenError(f"open database {path}: {e}") from e

        try:
            if path != MEMORY_PATH:
                conn.execute("PRAGMA journal_mode=WAL")
                conn.execute(f"PRAGMA busy_timeout={STORE_BUSY_TIMEOUT_MS}")
            _create_tables(conn)
        except sqlite3.Error as e:
            conn.close()
            logger.log_store_operation("open", path, {"error": str(e)}, status="failed")
            raise StoreOpenError(f"initialize database {path}: {e}") from e

        logger.log_store_operation("open", path)
        return cls(conn, path)

    @property
    def closed(self) -> bool:
        return self._conn is None

    def close(self):
        """Close the connection. Later calls are no-ops."""
        if self._conn is None:
            return
        conn, self._conn = self._conn, None
        conn.close()
        logger.log_store_operation("close", self.path)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False

    def _connection(self) -> sqlite3.Connection:
        if self._conn is None:
            raise StoreWriteError(f"store {self.path} is closed")
        return self._conn

    def save_items(self, items: Iterable[Item]) -> int:
        """Insert items, returning the count of new rows.

        Duplicates by id or URL are ignored, never overwritten.
        """
        items = list(items)
        if not items:
            return 0

        conn = self._connection()
        new_count = 0
        try:
            with conn:
                for item in items:
                    cursor = conn.execute(
                        f"INSERT OR IGNORE INTO items ({ITEM_COLUMNS}) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)",
                        (
                            item.id,
                            item.source_type,
                            item.source_name,
                            item.title,
                            item.summary,
                            item.url,
                            item.author,
                            item.published.isoformat(),
                            item.fetched.isoformat(),
                            int(item.read),
                            int(item.saved)
                        )
                    )
                    if cursor.rowcount > 0:
                        new_count += 1
        except sqlite3.Error as e:
            logger.log_store_operation("save_items", self.path, {"error": str(e)}, status="failed")
            raise StoreWriteError(f"save items: {e}") from e

        logger.log_store_operation("save_items", self.path, {"submitted": len(items), "inserted": new_count})
        return new_count

    def save_embedding(self, item_id: str, vector: Sequence[float]):
        """Attach an embedding to an existing item. Unknown ids raise StoreWriteError."""
        conn = self._connection()
        try:
            data = encode_embedding(vector)
            with conn:
                cursor = conn.execute("UPDATE items SET embedding = ? WHERE id = ?", (data, item_id))
        except (sqlite3.Error, ValueError, TypeError) as e:
            logger.log_store_operation("save_embedding", self.path, {"item_id": item_id, "error": str(e)}, status="failed")
            raise StoreWriteError(f"save embedding for {item_id}: {e}") from e

        if cursor.rowcount == 0:
            raise StoreWriteError(f"save embedding for {item_id}: no such item")

        logger.log_store_operation("save_embedding", self.path, {"item_id": item_id, "dimension": len(vector)})

    def get_embedding(self, item_id: str) -> Optional[List[float]]:
        """Embedding for an item, or None when the item or its embedding is missing."""
        row = self._connection().execute(
            "SELECT embedding FROM items WHERE id = ?", (item_id,)
        ).fetchone()
        if row is None or row[0] is None:
            return None
        return decode_embedding(row[0])

    def get_items(self, limit: int, include_read: bool = False) -> List[Item]:
        """Items ordered by published time, newest first."""
        if include_read:
            query = f"SELECT {ITEM_COLUMNS} FROM items ORDER BY published_at DESC LIMIT ?"
        else:
            query = f"SELECT {ITEM_COLUMNS} FROM items WHERE read = 0 ORDER BY published_at DESC LIMIT ?"
        rows = self._connection().execute(query, (limit,)).fetchall()
        return [_row_to_item(row) for row in rows]

    def get_items_needing_embedding(self, limit: int) -> List[Item]:
        """Items without an embedding, oldest fetched first."""
        rows = self._connection().execute(
            f"SELECT {ITEM_COLUMNS} FROM items WHERE embedding IS NULL ORDER BY fetched_at ASC LIMIT ?",
            (limit,)
        ).fetchall()
        return [_row_to_item(row) for row in rows]

    def count_items_needing_embedding(self) -> int:
        return self._connection().execute(
            "SELECT COUNT(*) FROM items WHERE embedding IS NULL"
        ).fetchone()[0]

    def count_all_items(self) -> int:
        return self._connection().execute("SELECT COUNT(*) FROM items").fetchone()[0]

    def mark_read(self, item_id: str):
        self._update("mark_read", "UPDATE items SET read = 1 WHERE id = ?", (item_id,))

    def mark_saved(self, item_id: str, saved: bool):
        self._update("mark_saved", "UPDATE items SET saved = ? WHERE id = ?", (int(saved), item_id))

    def clear_all_embeddings(self) -> int:
        """Drop every stored embedding, returning how many were cleared."""
        return self._update("clear_embeddings", "UPDATE items SET embedding = NULL WHERE embedding IS NOT NULL", ())

    def _update(self, operation: str, query: str, params: tuple) -> int:
        conn = self._connection()
        try:
            with conn:
                cursor = conn.execute(query, params)
        except sqlite3.Error as e:
            logger.log_store_operation(operation, self.path, {"error": str(e)}, status="failed")
            raise StoreWriteError(f"{operation}: {e}") from e
        return cursor.rowcount


def open_store(path: Union[str, Path]) -> Store:
    """Open the item store at path."""
    return Store.open(path)
