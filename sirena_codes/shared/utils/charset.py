"""レガシー1バイト文字コード（KOI8-R）

コード値は1文字1バイトの KOI8-R で保持する。
受理する文字集合（ロシア語大文字33文字 + ASCII数字）に対しては
エンコード・デコードが1対1に対応する。
"""

ENCODING = "koi8_r"

# А..Я (U+0410..U+042F) + Ё (U+0401)
DESIGNATED_LETTERS: frozenset[str] = frozenset(
    [chr(c) for c in range(ord("А"), ord("Я") + 1)] + ["Ё"]
)


def is_designated_letter(ch: str) -> bool:
    return ch in DESIGNATED_LETTERS


def is_ascii_digit(ch: str) -> bool:
    """ASCII の 0-9 のみ（全角数字などは含まない）"""
    return "0" <= ch <= "9"


def encode(text: str) -> bytes:
    """検証済みの文字列を1文字1バイトに変換する"""
    return text.encode(ENCODING)


def decode(raw: bytes) -> str:
    """バイト列を文字列に戻す

    KOI8-R は全256値が定義済みのため、未検証のバイト列でも失敗しない。
    """
    return raw.decode(ENCODING, errors="replace")
