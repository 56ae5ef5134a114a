import pytest

from sirena_codes.codes.domain.enum import CodeKind
from sirena_codes.codes.domain.value_object import (
    AircraftCode,
    AirlineCode,
    AirportCode,
    CityCode,
)
from sirena_codes.shared.domain import TooManyDigitsException


class TestCodeFactory:
    @pytest.mark.parametrize(
        "kind, code_type",
        [
            (CodeKind.AIRCRAFT, AircraftCode),
            (CodeKind.AIRLINE, AirlineCode),
            (CodeKind.AIRPORT, AirportCode),
            (CodeKind.CITY, CityCode),
        ],
    )
    def test_code_type(self, factory, kind, code_type):
        assert factory.code_type(kind) is code_type
        assert factory.code_type(kind.value) is code_type

    def test_create_parses_text(self, factory):
        code = factory.create("aircraft", "ПУ1")
        assert code == AircraftCode("ПУ1")

    def test_create_propagates_parse_error(self, factory):
        with pytest.raises(TooManyDigitsException):
            factory.create(CodeKind.AIRLINE, "56")

    def test_restore_from_raw(self, factory):
        code = factory.restore(CodeKind.CITY, CityCode("МОВ").raw)
        assert code == CityCode("МОВ")

    def test_unknown_kind_raises_error(self, factory):
        with pytest.raises(ValueError, match="Unknown code kind: ship"):
            factory.code_type("ship")

    def test_restore_rejects_non_bytes(self, factory):
        with pytest.raises(TypeError, match="AirlineCode expects bytes, got int"):
            factory.restore(CodeKind.AIRLINE, 2)
