from .enum import CodeKind
from .factory import CodeFactory
from .value_object import AircraftCode, AirlineCode, AirportCode, CityCode

__all__ = [
    "AircraftCode",
    "AirlineCode",
    "AirportCode",
    "CityCode",
    "CodeKind",
    "CodeFactory",
]
