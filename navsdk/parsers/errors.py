"""
Error kinds raised by the sentence decoder and the AIS codec.

NmeaError and its subclasses reject one sentence (bad input data or a bad
record schema). PreconditionError and its subclasses signal caller misuse
(bit ranges or six-bit values the caller could never have produced). They
are not NmeaErrors, batch decoding never absorbs them.
"""

from typing import Any, Optional


class NmeaError(Exception):
    """Base class for sentence rejections."""

    def __init__(self, message: str, field: Optional[str] = None, position: Optional[int] = None):
        super().__init__(message)
        self.field = field
        self.position = position

    def __str__(self):
        message = super().__str__()
        if self.field is not None:
            return f"{message} (field {self.field!r} at position {self.position})"
        return message


class TooShortError(NmeaError):
    """Sentence has fewer than six characters."""


class NoSigilError(NmeaError):
    """Sentence does not start with '$' or '!'."""


class ChecksumSyntaxError(NmeaError, ValueError):
    """Text after '*' is not a one or two digit hex value."""


class ChecksumMismatchError(NmeaError):
    """Declared checksum differs from the computed one.

    Raised after field decoding has finished, so ``record`` holds every
    field that could be decoded.
    """

    def __init__(self, declared: int, computed: int, record: Any = None):
        super().__init__(f"nmea: checksum mismatch (declared 0x{declared:02X}, computed 0x{computed:02X})")
        self.declared = declared
        self.computed = computed
        self.record = record


class InvalidDestinationError(NmeaError, TypeError):
    """Destination is not an instance of a sentence record."""


class FieldTypeMismatchError(NmeaError, TypeError):
    """Converter cannot write into the declared field kind."""


class ConversionError(NmeaError, ValueError):
    """Token text could not be converted to the declared field kind."""


class SentenceTypeMismatchError(NmeaError):
    """Token 0 does not satisfy the record's type matcher."""


class NotRegisteredError(NmeaError, LookupError):
    """No record is registered for the sentence type."""


class BadArmorCharacterError(NmeaError, ValueError):
    """Character outside the AIS six-bit armor alphabet."""


class SchemaError(NmeaError):
    """Record schema is malformed."""


class LateTypeFieldError(SchemaError):
    """Type field is not the first field of the record."""


class MissingTypeFieldError(SchemaError):
    """Record has no type field."""


class BadTypeMatcherSyntaxError(SchemaError):
    """Type matcher pattern is not a valid /regexp/."""


class PreconditionError(Exception):
    """Caller misuse; never caused by sentence data."""


class BitRangeError(PreconditionError, IndexError):
    """Bit range is negative, reversed or beyond the symbol buffer."""


class SixBitOverflowError(PreconditionError, ValueError):
    """Six-bit value outside 0..63."""


class RegistrationError(PreconditionError, TypeError):
    """Registered value is not a sentence record class."""
