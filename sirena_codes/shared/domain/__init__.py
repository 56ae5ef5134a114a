from .exception import (
    CodeParseException,
    DomainException,
    InvalidLengthException,
    InvalidLetterException,
    RecordFormatException,
    TooManyDigitsException,
)
from .value_object import FixedCode

__all__ = [
    "DomainException",
    "CodeParseException",
    "InvalidLengthException",
    "InvalidLetterException",
    "TooManyDigitsException",
    "RecordFormatException",
    "FixedCode",
]
