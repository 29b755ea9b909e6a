"""Pytest configuration and fixtures."""

import pytest


@pytest.fixture
def sample_dna_sequence():
    """Return a sample DNA sequence for testing."""
    return "ATCGATCGATCGATCGATCG"


@pytest.fixture
def sample_fasta_text():
    """Return a small two-record FASTA document."""
    return ">id1 desc one\nACGT\n>id2\nTTTT\n"


@pytest.fixture
def sample_fasta_file(tmp_path):
    """Write a three-record FASTA file and return its path."""
    path = tmp_path / "genes.fa"
    path.write_text(
        ">geneA first gene\n"
        "ATGGCA\n"
        "TAA\n"
        ">geneB\n"
        "ATGTTTGGGTGA\n"
        ">geneC third gene\n"
        "ATGAAATAG\n"
    )
    return path


@pytest.fixture
def params_file(tmp_path):
    """Return a factory writing params.txt content to a temp file."""
    def _write(text):
        path = tmp_path / "params.txt"
        path.write_text(text)
        return path
    return _write
