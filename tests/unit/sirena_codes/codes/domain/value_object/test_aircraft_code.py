import pytest

from sirena_codes.codes.domain.value_object import AircraftCode
from sirena_codes.shared.domain import InvalidLengthException, InvalidLetterException


class TestAircraftCode:
    """AircraftCode のテスト"""

    def test_valid_aircraft_code(self):
        """キリル文字と数字の混在した機材コードを生成できる"""
        code = AircraftCode.parse("ПУ1")
        assert code.value == "ПУ1"
        assert str(code) == "ПУ1"
        assert f"{code}" == "ПУ1"

    def test_digits_only_is_valid(self):
        assert AircraftCode("320").value == "320"

    def test_invalid_length_raises_error(self):
        with pytest.raises(
            InvalidLengthException, match="invalid length 4, expected 3"
        ) as exc_info:
            AircraftCode("ТУ15")
        assert exc_info.value.length == 4

    def test_length_is_counted_in_characters(self):
        """文字数で判定する（UTF-8 のバイト数ではない）"""
        with pytest.raises(InvalidLengthException) as exc_info:
            AircraftCode("ПУ")
        assert exc_info.value.length == 2
        assert exc_info.value.expected == 3

    def test_lowercase_is_not_normalized(self):
        with pytest.raises(InvalidLetterException, match="invalid character у") as exc_info:
            AircraftCode("Пу1")
        assert exc_info.value.letter == "у"

    def test_reports_first_invalid_character(self):
        with pytest.raises(InvalidLetterException) as exc_info:
            AircraftCode("1ab")
        assert exc_info.value.letter == "a"

    def test_whitespace_is_not_trimmed(self):
        with pytest.raises(InvalidLetterException) as exc_info:
            AircraftCode("ПУ ")
        assert exc_info.value.letter == " "
