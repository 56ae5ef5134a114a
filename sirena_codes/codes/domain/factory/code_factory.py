from typing import Type, Union

from sirena_codes.codes.domain.enum import CodeKind
from sirena_codes.codes.domain.value_object import (
    AircraftCode,
    AirlineCode,
    AirportCode,
    CityCode,
)
from sirena_codes.shared.domain import FixedCode


class CodeFactory:
    """コード種別を指定してコードを生成するファクトリ

    - 文字列（外部入力）からの検証付き生成
    - 保存済みバイト列からの検証なし復元
    """

    CODE_TYPES: dict[CodeKind, Type[FixedCode]] = {
        CodeKind.AIRCRAFT: AircraftCode,
        CodeKind.AIRLINE: AirlineCode,
        CodeKind.AIRPORT: AirportCode,
        CodeKind.CITY: CityCode,
    }

    def code_type(self, kind: Union[CodeKind, str]) -> Type[FixedCode]:
        """種別に対応する Value Object のクラスを返す"""
        try:
            return self.CODE_TYPES[CodeKind(kind)]
        except ValueError as e:
            raise ValueError(f"Unknown code kind: {kind}") from e

    def create(self, kind: Union[CodeKind, str], text: str) -> FixedCode:
        """文字列を検証してコードを生成する

        Raises:
            CodeParseException: 文字数・文字種・数字の個数が不正な場合
        """
        return self.code_type(kind).parse(text)

    def restore(self, kind: Union[CodeKind, str], raw: bytes) -> FixedCode:
        """自システムが保存したバイト列からコードを復元する（検証なし）"""
        return self.code_type(kind).from_bytes_unchecked(raw)
