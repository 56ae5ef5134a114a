from .aircraft_code import AircraftCode
from .airline_code import AirlineCode
from .airport_code import AirportCode
from .city_code import CityCode

__all__ = ["AircraftCode", "AirlineCode", "AirportCode", "CityCode"]
