from pydantic import BaseModel, Field

from sirena_codes.codes.domain.enum import CodeKind


class CodeItemRequest(BaseModel):
    """検証対象コードの入力スキーマ"""

    kind: CodeKind = Field(
        ...,
        description="コード種別",
        examples=["aircraft", "airline", "airport", "city"],
    )

    text: str = Field(
        ...,
        description="コードの文字列表現（正規化は行わない）",
        examples=["ПУ1", "А5"],
    )


class ValidateCodesRequest(BaseModel):
    """コード一括検証リクエストスキーマ"""

    codes: list[CodeItemRequest] = Field(..., min_length=1)

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "codes": [
                        {"kind": "aircraft", "text": "ПУ1"},
                        {"kind": "airline", "text": "56"},
                    ]
                }
            ]
        }
    }
