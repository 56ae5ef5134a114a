from enum import Enum


class CodeKind(str, Enum):
    """コード種別"""

    AIRCRAFT = "aircraft"
    AIRLINE = "airline"
    AIRPORT = "airport"
    CITY = "city"
