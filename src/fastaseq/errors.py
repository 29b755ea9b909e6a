"""Exception types raised by fastaseq."""


class FastaseqError(Exception):
    """Base class for fastaseq errors."""


class ParseError(FastaseqError, ValueError):
    """Raised when FASTA input cannot be turned into records."""


class DuplicateKeyError(FastaseqError, ValueError):
    """Raised when two records share an id in a RecordStore."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"Duplicate record id: {key!r}")


class InvalidCharacterError(FastaseqError, ValueError):
    """Raised when a sequence contains a character outside the expected alphabet."""

    def __init__(self, char: str, position: int):
        self.char = char
        self.position = position
        super().__init__(f"Invalid character {char!r} at position {position}")


class TranslationError(FastaseqError, ValueError):
    """Base class for errors raised by translate()."""

    message = "Translation failed"

    def __init__(self, value):
        self.value = value
        super().__init__(f"{self.message}: {value!r}")


class InvalidStartCodonError(TranslationError):
    message = "First codon is not a start codon"


class InvalidStopCodonError(TranslationError):
    message = "Final codon is not a stop codon"


class LengthNotMultipleOfThreeError(TranslationError):
    message = "Sequence length is not a multiple of three"


class UnexpectedStopCodonError(TranslationError):
    message = "Extra in-frame stop codon found"


class AmbiguousStopCodonError(TranslationError):
    message = "Codons are both amino acids and stop codons, cannot stop at them"


class InvalidGapCharacterError(TranslationError):
    message = "Gap must be a single character"


class InvalidCodonError(TranslationError):
    message = "Codon is not in the codon table"
