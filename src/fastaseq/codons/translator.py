"""Translation of nucleotide sequences into protein."""

import logging
from typing import Optional

from fastaseq.codons.tables import CodonTable
from fastaseq.errors import (
    AmbiguousStopCodonError,
    InvalidCodonError,
    InvalidGapCharacterError,
    InvalidStartCodonError,
    InvalidStopCodonError,
    LengthNotMultipleOfThreeError,
    UnexpectedStopCodonError,
)

logger = logging.getLogger(__name__)


def translate(
    seq,
    table: CodonTable,
    stop_sign: str = "*",
    to_stop: bool = False,
    cds: bool = False,
    gap: Optional[str] = None,
) -> str:
    """
    Translate a nucleotide sequence into a protein sequence.

    The sequence is read in non-overlapping codons from the first base;
    one or two trailing bases that do not form a full codon are dropped.
    Translation is case-insensitive.

    Args:
        seq: Nucleotide sequence (str or Sequence)
        table: Codon table to translate with
        stop_sign: Symbol emitted for stop codons
        to_stop: Stop at the first stop codon instead of emitting stop_sign
        cds: Require a complete coding sequence (start codon, length a
            multiple of three, final stop codon, no internal stops). The
            first residue is always 'M' and the final stop is not emitted.
        gap: Single gap character; a codon of three gaps translates to one gap.
            Matched and emitted in upper case, like the rest of the output

    Returns:
        Protein sequence as a string

    Raises:
        InvalidGapCharacterError: If gap is longer than one character
        AmbiguousStopCodonError: If to_stop is set and the table has codons
            that are both amino acids and stops
        InvalidStartCodonError, LengthNotMultipleOfThreeError,
        InvalidStopCodonError, UnexpectedStopCodonError: On CDS violations
        InvalidCodonError: If a codon is neither in the table, a stop, nor a gap
    """
    if gap and len(gap) != 1:
        raise InvalidGapCharacterError(gap)

    seq = str(seq).upper()
    forward = table.table
    stops = table.stop_codons

    duals = table.duals()
    if duals:
        if to_stop:
            raise AmbiguousStopCodonError(", ".join(sorted(duals)))
        logger.warning(
            "Codons %s in table %r code for amino acids and are also stop codons; "
            "translating them as amino acids",
            ", ".join(sorted(duals)), table.name,
        )

    residues = []
    if cds:
        if seq[:3] not in table.start_codons:
            raise InvalidStartCodonError(seq[:3])
        if len(seq) % 3 != 0:
            raise LengthNotMultipleOfThreeError(len(seq))
        if seq[-3:] not in stops:
            raise InvalidStopCodonError(seq[-3:])
        residues.append("M")
        seq = seq[3:-3]

    gap = gap.upper() if gap else None
    gap_codon = gap * 3 if gap else None
    for i in range(0, len(seq) - len(seq) % 3, 3):
        codon = seq[i : i + 3]
        if codon in forward:
            residues.append(forward[codon])
        elif codon in stops:
            if cds:
                raise UnexpectedStopCodonError(codon)
            if to_stop:
                break
            residues.append(stop_sign)
        elif gap_codon is not None and codon == gap_codon:
            residues.append(gap)
        else:
            raise InvalidCodonError(codon)

    return "".join(residues)
