"""FASTA parsing and writing."""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import IO, Iterable, Optional

from fastaseq.errors import ParseError
from fastaseq.utils.sequences import Sequence

logger = logging.getLogger(__name__)

UNKNOWN_DESCRIPTION = "<unknown description>"


@dataclass(frozen=True)
class Record:
    """
    One FASTA entry.

    Attributes:
        id: Header token following '>' up to the first whitespace
        seq: Sequence built from the lines under the header
        name: Same as id unless given
        description: Rest of the header line, or UNKNOWN_DESCRIPTION
    """

    id: str
    seq: Sequence = field(default_factory=Sequence)
    name: Optional[str] = None
    description: str = UNKNOWN_DESCRIPTION

    def __post_init__(self):
        if not isinstance(self.seq, Sequence):
            object.__setattr__(self, "seq", Sequence(self.seq))
        if self.name is None:
            object.__setattr__(self, "name", self.id)


def _parse_header(line: str) -> tuple[str, str]:
    fields = line[1:].split(None, 1)
    if not fields:
        return "", UNKNOWN_DESCRIPTION
    ident = fields[0]
    description = fields[1].strip() if len(fields) > 1 else ""
    return ident, description or UNKNOWN_DESCRIPTION


def parse(raw: str | bytes) -> list[Record]:
    """
    Parse FASTA text into records, in file order.

    Every line starting with '>' opens a record; the lines up to the next
    header (or the end of input) are stripped and concatenated into its
    sequence. A header with no sequence lines gives an empty sequence.
    Input without any header yields an empty list.

    Args:
        raw: FASTA content as text or UTF-8 bytes

    Returns:
        List of Record

    Raises:
        ParseError: If bytes input is not valid UTF-8
    """
    if isinstance(raw, (bytes, bytearray)):
        try:
            raw = raw.decode("utf-8-sig")
        except UnicodeDecodeError as e:
            raise ParseError(f"FASTA input is not valid UTF-8: {e}") from e
    elif raw.startswith("\ufeff"):
        raw = raw[1:]

    lines = [line.rstrip("\r") for line in raw.split("\n")]
    headers = [i for i, line in enumerate(lines) if line.startswith(">")]
    if not headers:
        if raw.strip():
            logger.warning("No FASTA header found; ignoring %d lines of input", len(lines))
        return []

    if any(line.strip() for line in lines[: headers[0]]):
        logger.warning("Ignoring text before the first FASTA header (line %d)", headers[0] + 1)

    records = []
    bounds = headers[1:] + [len(lines)]
    for start, end in zip(headers, bounds):
        ident, description = _parse_header(lines[start])
        body = "".join(line.strip() for line in lines[start + 1 : end])
        records.append(Record(id=ident, seq=Sequence(body), description=description))
    return records


def parse_file(source: str | Path | IO) -> list[Record]:
    """
    Read and parse a FASTA file.

    Args:
        source: Path to a FASTA file, or an open text or binary stream

    Returns:
        List of Record

    Raises:
        OSError: If the file cannot be opened or read (e.g. FileNotFoundError)
        ParseError: If the content is not valid UTF-8
    """
    if hasattr(source, "read"):
        return parse(source.read())

    with open(source, "rb") as handle:
        raw = handle.read()
    return parse(raw)


def format_record(record: Record, width: Optional[int] = 60) -> str:
    """Format a record as FASTA text, wrapping the sequence at width (0/None = no wrap)."""
    if width is not None and width < 0:
        raise ValueError(f"Line width must be zero or positive, got {width}")
    if record.description and record.description != UNKNOWN_DESCRIPTION:
        header = f">{record.id} {record.description}"
    else:
        header = f">{record.id}"

    seq = str(record.seq)
    if width and seq:
        lines = [seq[i : i + width] for i in range(0, len(seq), width)]
    else:
        lines = [seq] if seq else []
    return "\n".join([header, *lines]) + "\n"


def write_fasta(records: Iterable[Record], path: str | Path, width: Optional[int] = 60) -> int:
    """
    Write records to a FASTA file.

    Returns:
        Number of records written
    """
    n = 0
    with open(path, "w") as out:
        for record in records:
            out.write(format_record(record, width))
            n += 1
    return n
