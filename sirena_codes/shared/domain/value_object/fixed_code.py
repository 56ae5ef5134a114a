from dataclasses import InitVar, dataclass, field
from typing import ClassVar, Optional, Type, TypeVar

from sirena_codes.shared.domain.exception import (
    InvalidLengthException,
    InvalidLetterException,
    TooManyDigitsException,
)
from sirena_codes.shared.utils import charset

T = TypeVar("T", bound="FixedCode")


@dataclass(frozen=True, order=True, repr=False)
class FixedCode:
    """固定長コードの基底 Value Object

    検証済みの文字列を KOI8-R の固定長バイト列として保持する。
    コード種別ごとにサブクラスを定義し、KIND / LENGTH / MAX_DIGITS で
    検証ルールを切り替える。
    FixedCode 自体は直接生成できない。

    - 受理する文字: ロシア語大文字（А-Я, Ё）と ASCII 数字
    - 正規化（大文字化・空白除去）は行わない
    - 同じ種別同士でのみ等価比較・大小比較ができる（バイト列で比較）
    """

    KIND: ClassVar[str] = "code"
    LENGTH: ClassVar[int] = 0
    # None の場合は数字の個数を制限しない
    MAX_DIGITS: ClassVar[Optional[int]] = None

    text: InitVar[str]
    raw: bytes = field(init=False)

    def __post_init__(self, text: str) -> None:
        self._check_concrete()
        self._validate(text)
        object.__setattr__(self, "raw", charset.encode(text))

    @classmethod
    def _check_concrete(cls) -> None:
        if cls is FixedCode:
            raise TypeError("FixedCode is abstract, use a concrete code kind")

    @classmethod
    def _validate(cls, text: str) -> None:
        if not isinstance(text, str):
            raise TypeError(
                f"{cls.__name__} expects str, got {type(text).__name__}"
            )
        length = len(text)
        if length != cls.LENGTH:
            raise InvalidLengthException(cls.KIND, length, cls.LENGTH)

        digits = 0
        for ch in text:
            if charset.is_designated_letter(ch):
                continue
            if charset.is_ascii_digit(ch):
                digits += 1
                continue
            raise InvalidLetterException(cls.KIND, ch)

        if cls.MAX_DIGITS is not None and digits > cls.MAX_DIGITS:
            raise TooManyDigitsException(cls.KIND, digits, cls.MAX_DIGITS)

    @classmethod
    def parse(cls: Type[T], text: str) -> T:
        """文字列を検証してコードを生成する"""
        return cls(text)

    @classmethod
    def from_bytes_unchecked(cls: Type[T], raw: bytes) -> T:
        """raw から検証なしで復元する

        自システムが書き出したバイト列（raw の値）を読み戻す場合専用。
        長さ以外は検証しないため、任意のバイト列を渡すと
        parse を通らない値が生成されうる。
        """
        cls._check_concrete()
        if not isinstance(raw, (bytes, bytearray, memoryview)):
            raise TypeError(
                f"{cls.__name__} expects bytes, got {type(raw).__name__}"
            )
        raw = bytes(raw)
        if len(raw) != cls.LENGTH:
            raise InvalidLengthException(cls.KIND, len(raw), cls.LENGTH)
        code = object.__new__(cls)
        object.__setattr__(code, "raw", raw)
        return code

    @property
    def value(self) -> str:
        """デコードした文字列"""
        return charset.decode(self.raw)

    def __bytes__(self) -> bytes:
        return self.raw

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.value!r})"
