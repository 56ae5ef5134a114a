from sirena_codes.shared.utils import charset


class TestCharset:
    def test_designated_letters_are_33_russian_capitals(self):
        assert len(charset.DESIGNATED_LETTERS) == 33
        assert "А" in charset.DESIGNATED_LETTERS
        assert "Я" in charset.DESIGNATED_LETTERS
        assert "Ё" in charset.DESIGNATED_LETTERS

    def test_lowercase_and_latin_are_not_designated(self):
        assert not charset.is_designated_letter("а")
        assert not charset.is_designated_letter("A")
        assert not charset.is_designated_letter("Ї")

    def test_only_ascii_digits(self):
        assert charset.is_ascii_digit("0")
        assert charset.is_ascii_digit("9")
        assert not charset.is_ascii_digit("٣")
        assert not charset.is_ascii_digit("１")

    def test_encode_one_byte_per_character(self):
        assert charset.encode("ПУ1") == b"\xf0\xf5\x31"
        assert charset.encode("Ё") == b"\xb3"

    def test_decode_every_byte_value(self):
        """KOI8-R は全バイト値をデコードできる"""
        text = charset.decode(bytes(range(256)))
        assert len(text) == 256

    def test_accepted_characters_map_to_distinct_single_bytes(self):
        """受理する43文字はそれぞれ異なる1バイトに対応する"""
        accepted = sorted(charset.DESIGNATED_LETTERS) + list("0123456789")

        encoded = [charset.encode(ch) for ch in accepted]

        assert len(accepted) == 43
        assert all(len(raw) == 1 for raw in encoded)
        assert len(set(encoded)) == 43
        assert [charset.decode(raw) for raw in encoded] == accepted
