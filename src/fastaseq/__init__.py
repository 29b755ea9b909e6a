"""fastaseq - FASTA parsing and nucleotide sequence toolkit."""

__version__ = "0.1.0"
