from .exceptions import (
    CodeParseException,
    DomainException,
    InvalidLengthException,
    InvalidLetterException,
    RecordFormatException,
    TooManyDigitsException,
)

__all__ = [
    "DomainException",
    "CodeParseException",
    "InvalidLengthException",
    "InvalidLetterException",
    "TooManyDigitsException",
    "RecordFormatException",
]
