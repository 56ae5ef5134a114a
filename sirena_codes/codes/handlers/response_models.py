from pydantic import BaseModel


class CodeResultData(BaseModel):
    """1件分の検証結果のレスポンスモデル"""

    kind: str
    text: str
    valid: bool
    raw: str | None = None
    error_code: str | None = None
    message: str | None = None


class SuccessResponse(BaseModel):
    """成功レスポンスモデル"""

    status: str = "success"
    data: list[CodeResultData]


class ErrorResponse(BaseModel):
    """エラーレスポンスモデル"""

    status: str = "error"
    error_code: str
    message: str
    details: list | None = None
