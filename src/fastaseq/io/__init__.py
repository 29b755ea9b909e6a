"""FASTA input/output and record indexing."""

from .fasta import (
    UNKNOWN_DESCRIPTION,
    Record,
    parse,
    parse_file,
    format_record,
    write_fasta,
)
from .store import RecordStore, build, lookup

__all__ = [
    "UNKNOWN_DESCRIPTION",
    "Record",
    "parse",
    "parse_file",
    "format_record",
    "write_fasta",
    "RecordStore",
    "build",
    "lookup",
]
