"""Tests for nucleotide to protein translation."""

import logging

import pytest
from fastaseq.codons import CodonTable, standard_table, translate
from fastaseq.errors import (
    AmbiguousStopCodonError,
    InvalidCodonError,
    InvalidGapCharacterError,
    InvalidStartCodonError,
    InvalidStopCodonError,
    LengthNotMultipleOfThreeError,
    TranslationError,
    UnexpectedStopCodonError,
)
from fastaseq.utils.sequences import Sequence


@pytest.fixture
def table():
    return standard_table()


@pytest.fixture
def dual_table():
    """Return a table where TGA is both tryptophan and a stop codon."""
    base = standard_table()
    return CodonTable(
        id=99,
        name="dual",
        table={**base.table, "TGA": "W"},
        start_codons=base.start_codons,
        stop_codons=base.stop_codons,
    )


class TestTranslate:
    """Tests for plain translation."""

    def test_simple(self, table):
        """Test translation emits the stop sign for stop codons."""
        assert translate("ATGGCATAA", table) == "MA*"

    def test_custom_stop_sign(self, table):
        """Test a custom stop symbol."""
        assert translate("ATGTAAGCA", table, stop_sign="@") == "M@A"

    def test_case_insensitive(self, table):
        """Test lower-case input translates the same."""
        assert translate("atgGCAtaa", table) == "MA*"

    def test_trailing_bases_dropped(self, table):
        """Test one or two leftover bases are ignored."""
        assert translate("ATGGC", table) == "M"
        assert translate("ATGGCAT", table) == "MA"

    def test_empty(self, table):
        """Test an empty sequence translates to an empty protein."""
        assert translate("", table) == ""

    def test_accepts_sequence(self, table):
        """Test a Sequence value is accepted."""
        assert translate(Sequence("TTTGGG"), table) == "FG"

    def test_invalid_codon(self, table):
        """Test an unknown codon raises and names it."""
        with pytest.raises(InvalidCodonError) as exc:
            translate("ATGNNNGCA", table)
        assert exc.value.value == "NNN"
        assert "NNN" in str(exc.value)

    def test_errors_share_base(self, table):
        """Test translation errors derive from TranslationError and ValueError."""
        with pytest.raises(TranslationError):
            translate("ATGXYZ", table)
        with pytest.raises(ValueError):
            translate("ATGXYZ", table)

    def test_sequence_method_default_table(self):
        """Test Sequence.translate uses the standard code by default."""
        protein = Sequence("ATGGCATAA").translate()
        assert isinstance(protein, Sequence)
        assert protein == "MA*"


class TestToStop:
    """Tests for stopping at the first stop codon."""

    def test_halts_at_stop(self, table):
        """Test translation stops before the rest of the frame."""
        assert translate("TTATAATTT", table, to_stop=True) == "L"

    def test_no_stop(self, table):
        """Test a sequence without stops translates fully."""
        assert translate("TTATTT", table, to_stop=True) == "LF"

    def test_ambiguous_stop_codon(self, dual_table):
        """Test to_stop refuses tables with dual codons."""
        with pytest.raises(AmbiguousStopCodonError) as exc:
            translate("ATGTGA", dual_table, to_stop=True)
        assert "TGA" in str(exc.value)


class TestDualCodons:
    """Tests for tables with codons that are both amino acids and stops."""

    def test_warns_and_translates_as_amino_acid(self, dual_table, caplog):
        """Test dual codons are translated as amino acids with a warning."""
        with caplog.at_level(logging.WARNING, logger="fastaseq.codons.translator"):
            assert translate("ATGTGATAA", dual_table) == "MW*"
        assert "TGA" in caplog.text

    def test_no_warning_for_standard_table(self, table, caplog):
        """Test the standard code does not warn."""
        with caplog.at_level(logging.WARNING):
            translate("ATGTGA", table)
        assert caplog.records == []


class TestCDS:
    """Tests for complete coding sequence translation."""

    def test_cds(self, table):
        """Test the final stop codon is trimmed."""
        assert translate("ATGGCATAA", table, cds=True) == "MA"

    def test_alternative_start_gives_methionine(self, table):
        """Test an alternative start codon still gives M."""
        assert translate("TTGGCATAA", table, cds=True) == "MA"

    def test_minimal_cds(self, table):
        """Test a start codon followed directly by a stop."""
        assert translate("ATGTAG", table, cds=True) == "M"

    def test_invalid_start(self, table):
        """Test a non-start first codon fails."""
        with pytest.raises(InvalidStartCodonError) as exc:
            translate("GCAGCATAA", table, cds=True)
        assert exc.value.value == "GCA"

    def test_length_not_multiple_of_three(self, table):
        """Test the length check."""
        with pytest.raises(LengthNotMultipleOfThreeError):
            translate("ATGGCAATAA", table, cds=True)

    def test_invalid_stop(self, table):
        """Test a missing final stop codon fails."""
        with pytest.raises(InvalidStopCodonError) as exc:
            translate("ATGGCAGCA", table, cds=True)
        assert exc.value.value == "GCA"

    def test_internal_stop(self, table):
        """Test an in-frame stop before the end fails."""
        with pytest.raises(UnexpectedStopCodonError) as exc:
            translate("ATGTGAGCATAA", table, cds=True)
        assert exc.value.value == "TGA"

    def test_internal_stop_with_to_stop(self, table):
        """Test CDS rules win over to_stop for internal stops."""
        with pytest.raises(UnexpectedStopCodonError):
            translate("ATGTGAGCATAA", table, cds=True, to_stop=True)

    def test_case_insensitive_cds(self, table):
        """Test lower-case CDS input."""
        assert translate("atggcataa", table, cds=True) == "MA"


class TestGap:
    """Tests for gap handling."""

    def test_gap_codon(self, table):
        """Test three gap characters translate to one gap."""
        assert translate("ATG---GCA", table, gap="-") == "M-A"

    def test_partial_gap_codon(self, table):
        """Test a codon mixing gaps and bases is invalid."""
        with pytest.raises(InvalidCodonError):
            translate("ATGA--GCA", table, gap="-")

    def test_gap_without_gap_setting(self, table):
        """Test gap codons fail when no gap is set."""
        with pytest.raises(InvalidCodonError):
            translate("ATG---", table)

    def test_letter_gap_upper_case(self, table):
        """Test a letter gap matches any case and is emitted in upper case."""
        assert translate("ATGnnnGCA", table, gap="n") == "MNA"

    def test_gap_must_be_single_character(self, table):
        """Test a multi-character gap is rejected."""
        with pytest.raises(InvalidGapCharacterError) as exc:
            translate("ATG", table, gap="--")
        assert exc.value.value == "--"
