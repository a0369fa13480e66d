"""
Record Encoding
===============

Maps credential records into the scalar field and the G1 group.

- record_to_scalar: SHA-256 of the canonical record bytes, reduced mod r
- scalar_to_group_element: s · g for the canonical G1 generator g
- leaf_value: the value a leaf contributes to the root polynomial, the
  SHA-256 of the leaf point's compressed encoding reduced mod r

All three are deterministic, so a verifier can re-derive them from a
presented record.
"""

import hashlib
import json

from .groups import FR, G1, g1_mul, serialize_g1
from .records import Record

# Value of an empty tree slot
EMPTY_SLOT_VALUE = 0


def serialize_record(record: Record) -> bytes:
    """
    Canonical byte encoding of a record.

    Compact JSON ``{"id": ..., "metadata": {...}}`` with metadata in the
    record's own order. Reordering metadata therefore changes the encoding.
    """
    return json.dumps(record.to_dict(), separators=(',', ':'), ensure_ascii=False).encode('utf-8')


def hash_to_scalar(data: bytes) -> int:
    digest = hashlib.sha256(data).digest()
    return int.from_bytes(digest, 'big') % FR.order


def record_to_scalar(record: Record) -> int:
    return hash_to_scalar(serialize_record(record))


def scalar_to_group_element(scalar: int):
    """Encode a scalar as s · g in G1."""
    return g1_mul(G1, FR.reduce(scalar))


def leaf_value(point) -> int:
    """Slot value of a leaf whose G1 encoding is ``point``."""
    return hash_to_scalar(serialize_g1(point))
