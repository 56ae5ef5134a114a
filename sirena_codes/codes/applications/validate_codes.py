from typing import Optional, TypedDict

from sirena_codes.codes.domain.factory import CodeFactory
from sirena_codes.shared.domain import (
    CodeParseException,
    InvalidLengthException,
    InvalidLetterException,
    TooManyDigitsException,
)


class CodeRequest(TypedDict):
    """検証対象のコード（種別 + 文字列）"""

    kind: str
    text: str


class CodeValidationResult(TypedDict):
    """1件分の検証結果"""

    kind: str
    text: str
    valid: bool
    raw: Optional[str]
    error_code: Optional[str]
    message: Optional[str]


ERROR_CODES: dict[type[CodeParseException], str] = {
    InvalidLengthException: "INVALID_LENGTH",
    InvalidLetterException: "INVALID_LETTER",
    TooManyDigitsException: "TOO_MANY_DIGITS",
}


class ValidateCodesService:
    """コードの一括検証サービス"""

    def __init__(self, factory: CodeFactory) -> None:
        self.factory = factory

    def validate(self, items: list[CodeRequest]) -> list[CodeValidationResult]:
        """各コードを検証し、入力順に結果を返す

        パースエラーは結果に変換する。それ以外の例外はそのまま送出する。
        """
        return [self._validate_one(item) for item in items]

    def _validate_one(self, item: CodeRequest) -> CodeValidationResult:
        kind = self.factory.code_type(item["kind"]).KIND
        try:
            code = self.factory.create(kind, item["text"])
        except CodeParseException as e:
            return {
                "kind": kind,
                "text": item["text"],
                "valid": False,
                "raw": None,
                "error_code": ERROR_CODES[type(e)],
                "message": str(e),
            }
        return {
            "kind": kind,
            "text": item["text"],
            "valid": True,
            "raw": code.raw.hex(),
            "error_code": None,
            "message": None,
        }
