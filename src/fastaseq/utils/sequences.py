"""Sequence value type and nucleotide transformations."""

from typing import Iterable, Optional

from Bio.SeqUtils import gc_fraction

from fastaseq.errors import InvalidCharacterError


NUCLEOTIDES = frozenset("ATGC")

# Complement translation table, upper-case A/T/G/C only
COMPLEMENT_TABLE = str.maketrans({'A': 'T', 'T': 'A', 'G': 'C', 'C': 'G'})


def _check_nucleotides(seq: str) -> None:
    for i, c in enumerate(seq):
        if c not in NUCLEOTIDES:
            raise InvalidCharacterError(c, i)


class Sequence:
    """
    Immutable nucleotide or amino-acid sequence.

    Wraps a string and behaves like one for length, iteration, indexing,
    membership and comparison. Case is preserved as given. Transformation
    methods return new Sequence values and never modify the receiver.
    """

    __slots__ = ("_data",)

    def __init__(self, data=""):
        if isinstance(data, Sequence):
            data = data._data
        elif not isinstance(data, str):
            raise TypeError(f"Sequence data must be a string, got {type(data).__name__}")
        object.__setattr__(self, "_data", data)

    def __setattr__(self, name, value):
        raise AttributeError("Sequence objects are immutable")

    def __reduce__(self):
        return (Sequence, (self._data,))

    def __str__(self):
        return self._data

    def __repr__(self):
        if len(self._data) > 60:
            return f"Sequence('{self._data[:54]}...{self._data[-3:]}')"
        return f"Sequence({self._data!r})"

    def __len__(self):
        return len(self._data)

    def __iter__(self):
        return iter(self._data)

    def __getitem__(self, index):
        if isinstance(index, slice):
            return Sequence(self._data[index])
        return self._data[index]

    def __contains__(self, item):
        return str(item) in self._data

    def __eq__(self, other):
        if isinstance(other, (Sequence, str)):
            return self._data == str(other)
        return NotImplemented

    def __hash__(self):
        return hash(self._data)

    def __add__(self, other):
        if isinstance(other, (Sequence, str)):
            return Sequence(self._data + str(other))
        return NotImplemented

    def __radd__(self, other):
        if isinstance(other, str):
            return Sequence(other + self._data)
        return NotImplemented

    def upper(self) -> "Sequence":
        return Sequence(self._data.upper())

    def lower(self) -> "Sequence":
        return Sequence(self._data.lower())

    def complement(self) -> "Sequence":
        """
        Return the base-pair complement (A<->T, G<->C).

        Raises:
            InvalidCharacterError: If any character is not one of upper-case A, T, G, C
        """
        _check_nucleotides(self._data)
        return Sequence(self._data.translate(COMPLEMENT_TABLE))

    def reverse_complement(self) -> "Sequence":
        """Return the complement in reverse order."""
        return Sequence(self.complement()._data[::-1])

    def transcribe(self) -> "Sequence":
        """Return the RNA transcript (every T replaced by U)."""
        return Sequence(self._data.replace("T", "U"))

    def ungap(self, gap: str = "-") -> "Sequence":
        """
        Return the sequence with every occurrence of gap removed.

        A gap longer than one character is matched as a contiguous substring.

        Raises:
            ValueError: If gap is empty
        """
        gap = str(gap)
        if not gap:
            raise ValueError("gap must be a non-empty string")
        return Sequence(self._data.replace(gap, ""))

    def join(self, parts: Iterable) -> str:
        """
        Concatenate parts, placing this sequence after every part.

        The separator also follows the final part:
        ``Sequence("NNN").join(["ATA", "CGT"]) == "ATANNNCGTNNN"``.
        """
        return "".join(str(part) + self._data for part in parts)

    def count(self, sub) -> int:
        """Count non-overlapping occurrences of sub."""
        return self._data.count(str(sub))

    def contains_any(self, chars) -> bool:
        """Return True if any of chars occurs in the sequence."""
        return any(str(c) in self._data for c in chars)

    def index(self, sub) -> Optional[int]:
        """Return the position of the first occurrence of sub, or None if absent."""
        pos = self._data.find(str(sub))
        return None if pos == -1 else pos

    def translate(self, table=None, stop_sign: str = "*", to_stop: bool = False,
                  cds: bool = False, gap: Optional[str] = None) -> "Sequence":
        """
        Translate this nucleotide sequence into protein.

        Uses the standard genetic code when no table is given.
        See fastaseq.codons.translator.translate for the arguments.
        """
        from fastaseq.codons import standard_table, translate

        if table is None:
            table = standard_table()
        return Sequence(translate(self, table, stop_sign=stop_sign, to_stop=to_stop, cds=cds, gap=gap))


def complement(seq) -> Sequence:
    """Return the complement of seq (A<->T, G<->C)."""
    return Sequence(seq).complement()


def reverse_complement(seq) -> Sequence:
    """Return the reverse complement of seq."""
    return Sequence(seq).reverse_complement()


def transcribe(seq) -> Sequence:
    """Return seq with every T replaced by U."""
    return Sequence(seq).transcribe()


def ungap(seq, gap: str = "-") -> Sequence:
    """Return seq with every occurrence of gap removed."""
    return Sequence(seq).ungap(gap)


def join(seq, parts: Iterable) -> str:
    """Concatenate parts with seq after every part, including the last."""
    return Sequence(seq).join(parts)


def count(seq, sub) -> int:
    """Count non-overlapping occurrences of sub in seq."""
    return Sequence(seq).count(sub)


def contains_any(seq, chars) -> bool:
    """Return True if any of chars occurs in seq."""
    return Sequence(seq).contains_any(chars)


def index(seq, sub) -> Optional[int]:
    """Return the first position of sub in seq, or None if absent."""
    return Sequence(seq).index(sub)


def get_gc_fraction(seq) -> float:
    """Calculate GC content as a fraction (0-1)."""
    return gc_fraction(str(seq))
