"""Codon tables and translation."""

from .tables import CodonTable, from_ncbi, standard_table
from .translator import translate

__all__ = [
    "CodonTable",
    "from_ncbi",
    "standard_table",
    "translate",
]
