"""
Credential Records
==================

A record is an identifier plus ordered string metadata, e.g. a diploma or one
micro-credential. Records are immutable once placed in a tree; tampering is
modelled with ``with_field``, which returns a new record.

Input format (as produced by the data-loading side)::

    {"id": "CS101", "metadata": {"name": "Intro to Programming", "grade": "A"}}
"""

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Mapping, Tuple

from .errors import InvalidInput


@dataclass(frozen=True)
class Record:
    identifier: str
    fields: Tuple[Tuple[str, str], ...] = field(default_factory=tuple)

    def __post_init__(self):
        if not isinstance(self.identifier, str) or not self.identifier:
            raise InvalidInput(f"Record identifier must be a non-empty string, got {self.identifier!r}")
        # Normalise any iterable of pairs to a tuple so the record stays hashable
        object.__setattr__(self, 'fields', tuple((str(k), str(v)) for k, v in self.fields))

    @classmethod
    def create(cls, identifier: str, metadata: Mapping[str, str] = None) -> 'Record':
        return cls(identifier, tuple((metadata or {}).items()))

    @classmethod
    def from_mapping(cls, data: Mapping) -> 'Record':
        """
        Build a record from ``{"id": ..., "metadata": {...}}``.

        Raises
        ------
        InvalidInput
            If ``id`` is missing or metadata is not a mapping.
        """
        if 'id' not in data:
            raise InvalidInput(f"Record is missing 'id': {dict(data)!r}")
        metadata = data.get('metadata', {})
        if not isinstance(metadata, Mapping):
            raise InvalidInput(f"Record metadata must be a mapping, got {type(metadata).__name__}")
        return cls.create(data['id'], metadata)

    @property
    def metadata(self) -> Dict[str, str]:
        """A fresh dict copy of the metadata, in insertion order."""
        return dict(self.fields)

    def with_field(self, key: str, value: str) -> 'Record':
        """Return a copy with ``key`` set to ``value`` (order preserved, new keys appended)."""
        metadata = self.metadata
        metadata[key] = value
        return Record.create(self.identifier, metadata)

    def to_dict(self) -> Dict:
        return {'id': self.identifier, 'metadata': self.metadata}


def load_records(data: Iterable[Mapping]) -> List[Record]:
    """Parse a sequence of ``{"id", "metadata"}`` mappings, keeping their order."""
    return [Record.from_mapping(item) for item in data]
