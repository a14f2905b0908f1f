"""
Item store schema - validated item records and embedding codec.
"""

from datetime import datetime, timezone
from typing import List, Sequence

import numpy as np
from pydantic import BaseModel, field_validator

# Embeddings are persisted as packed little-endian float32
EMBEDDING_DTYPE = np.dtype("<f4")


class Item(BaseModel):
    id: str
    source_type: str
    source_name: str
    title: str
    summary: str = ""
    url: str = ""
    author: str = ""
    published: datetime
    fetched: datetime
    read: bool = False
    saved: bool = False

    @field_validator('id')
    @classmethod
    def id_must_not_be_empty(cls, v):
        if not v.strip():
            raise ValueError('id cannot be empty')
        return v

    @field_validator('published', 'fetched')
    @classmethod
    def timestamps_in_utc(cls, v):
        # Naive timestamps are taken to already be UTC
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v.astimezone(timezone.utc)


def encode_embedding(vector: Sequence[float]) -> bytes:
    """Pack an embedding vector as little-endian float32 bytes."""
    return np.asarray(vector, dtype=EMBEDDING_DTYPE).tobytes()


def decode_embedding(data: bytes) -> List[float]:
    """Unpack little-endian float32 bytes into a list of floats."""
    if not data:
        return []
    return np.frombuffer(data, dtype=EMBEDDING_DTYPE).tolist()
