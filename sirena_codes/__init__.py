"""ロシア国内の航空データ交換で使われる固定長コード

機材・航空会社・空港・都市の各コードを文字種検証したうえで
KOI8-R の固定長バイト列として保持する。
"""

from sirena_codes.codes.domain import (
    AircraftCode,
    AirlineCode,
    AirportCode,
    CityCode,
    CodeFactory,
    CodeKind,
)
from sirena_codes.shared.domain import (
    CodeParseException,
    DomainException,
    InvalidLengthException,
    InvalidLetterException,
    TooManyDigitsException,
)

__version__ = "0.1.0"

__all__ = [
    "AircraftCode",
    "AirlineCode",
    "AirportCode",
    "CityCode",
    "CodeKind",
    "CodeFactory",
    "DomainException",
    "CodeParseException",
    "InvalidLengthException",
    "InvalidLetterException",
    "TooManyDigitsException",
]
