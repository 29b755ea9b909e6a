"""In-memory record store keyed by record id."""

from collections.abc import Mapping
from pathlib import Path
from typing import Iterable, Optional

import pandas as pd

from fastaseq.errors import DuplicateKeyError
from fastaseq.io.fasta import Record, parse_file
from fastaseq.utils.sequences import get_gc_fraction

SUMMARY_COLUMNS = ["id", "name", "description", "length", "gc"]


class RecordStore(Mapping):
    """
    Read-only mapping of record id -> Record, in insertion order.

    Raises:
        DuplicateKeyError: If two records share an id
    """

    def __init__(self, records: Iterable[Record] = ()):
        self._records = {}
        for record in records:
            if record.id in self._records:
                raise DuplicateKeyError(record.id)
            self._records[record.id] = record

    @classmethod
    def from_file(cls, path: str | Path) -> "RecordStore":
        """Parse a FASTA file and index its records."""
        return cls(parse_file(path))

    def __getitem__(self, key: str) -> Record:
        return self._records[key]

    def __iter__(self):
        return iter(self._records)

    def __len__(self):
        return len(self._records)

    def __repr__(self):
        return f"RecordStore({len(self)} records)"

    def lookup(self, key: str) -> Optional[Record]:
        """Return the record with the given id, or None."""
        return self._records.get(key)

    def to_dataframe(self) -> pd.DataFrame:
        """Tabulate id, name, description, length and GC fraction per record."""
        rows = [
            {
                "id": rec.id,
                "name": rec.name,
                "description": rec.description,
                "length": len(rec.seq),
                "gc": get_gc_fraction(rec.seq),
            }
            for rec in self._records.values()
        ]
        return pd.DataFrame(rows, columns=SUMMARY_COLUMNS)


def build(records: Iterable[Record]) -> RecordStore:
    """Index records by id, failing on the first duplicate id."""
    return RecordStore(records)


def lookup(store: RecordStore, key: str) -> Optional[Record]:
    """Return the record with the given id from store, or None."""
    return store.lookup(key)
