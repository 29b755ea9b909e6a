"""Codon table values and constructors for the NCBI genetic codes."""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from Bio.Data import CodonTable as NCBICodonTables


@dataclass(frozen=True)
class CodonTable:
    """
    Immutable codon -> amino acid lookup with start and stop codon sets.

    Attributes:
        id: NCBI translation table number
        name: Human-readable label
        table: Mapping of three-letter codons to one-letter amino acids
        start_codons: Codons valid as translation start
        stop_codons: Codons that terminate translation
    """

    id: int
    name: str
    table: Mapping[str, str] = field(default_factory=dict)
    start_codons: frozenset = frozenset()
    stop_codons: frozenset = frozenset()

    def __post_init__(self):
        for codon, residue in self.table.items():
            _check_codon(codon)
            if len(residue) != 1:
                raise ValueError(f"Amino acid for {codon} must be one character, got {residue!r}")
        for codon in (*self.start_codons, *self.stop_codons):
            _check_codon(codon)

        object.__setattr__(self, "table", MappingProxyType(dict(self.table)))
        object.__setattr__(self, "start_codons", frozenset(self.start_codons))
        object.__setattr__(self, "stop_codons", frozenset(self.stop_codons))

    def __hash__(self):
        return hash((self.id, self.name, frozenset(self.table.items()),
                     self.start_codons, self.stop_codons))

    def duals(self) -> frozenset:
        """Return codons that are listed both as amino acids and as stop codons."""
        return frozenset(self.table.keys() & self.stop_codons)


def _check_codon(codon) -> None:
    if not isinstance(codon, str) or len(codon) != 3:
        raise ValueError(f"Codons must be three-character strings, got {codon!r}")


def from_ncbi(table_id: int, nucleotide: str = "dna") -> CodonTable:
    """
    Build a codon table from the NCBI genetic code with the given id.

    Args:
        table_id: NCBI translation table number (1 = Standard)
        nucleotide: "dna" for T-codons, "rna" for U-codons

    Returns:
        A new CodonTable

    Raises:
        KeyError: If table_id is not a known NCBI table
        ValueError: If nucleotide is not "dna" or "rna"
    """
    if nucleotide == "dna":
        source = NCBICodonTables.unambiguous_dna_by_id
    elif nucleotide == "rna":
        source = NCBICodonTables.unambiguous_rna_by_id
    else:
        raise ValueError(f"nucleotide must be 'dna' or 'rna', got {nucleotide!r}")

    if table_id not in source:
        raise KeyError(f"Unknown NCBI translation table: {table_id}")
    ncbi = source[table_id]
    return CodonTable(
        id=ncbi.id,
        name=ncbi.names[0],
        table=ncbi.forward_table,
        start_codons=ncbi.start_codons,
        stop_codons=ncbi.stop_codons,
    )


def standard_table() -> CodonTable:
    """Return the standard genetic code (NCBI table 1)."""
    return from_ncbi(1)
