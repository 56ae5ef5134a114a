import os
from typing import Optional

from aws_lambda_powertools.utilities.parser import event_parser
from aws_lambda_powertools.utilities.typing import LambdaContext

from sirena_codes.codes.applications.validate_codes import (
    CodeRequest,
    CodeValidationResult,
    ValidateCodesService,
)
from sirena_codes.codes.domain.factory import CodeFactory
from sirena_codes.codes.handlers.request_models import ValidateCodesRequest
from sirena_codes.codes.handlers.response_models import (
    CodeResultData,
    ErrorResponse,
    SuccessResponse,
)
from sirena_codes.shared.utils.logger import get_logger

logger = get_logger(os.getenv("POWERTOOLS_SERVICE_NAME", "code-validation"))

MAX_BATCH_SIZE = int(os.getenv("MAX_BATCH_SIZE", "100"))

factory = CodeFactory()
service = ValidateCodesService(factory=factory)


@logger.inject_lambda_context
@event_parser(model=ValidateCodesRequest)
def lambda_handler(event: ValidateCodesRequest, context: LambdaContext) -> dict:
    """コード一括検証 Lambda Handler

    @event_parser で入力スキーマを検証した後、各コードを検証する。
    不正なコードはエラーではなく結果として返す。
    """

    logger.info("Received validate codes request", extra={"count": len(event.codes)})

    if len(event.codes) > MAX_BATCH_SIZE:
        logger.warning("Batch too large", extra={"count": len(event.codes)})
        return _error_response(
            "BATCH_TOO_LARGE",
            f"Too many codes: {len(event.codes)} (max {MAX_BATCH_SIZE})",
        )

    results = service.validate(_to_code_requests(event))

    rejected = [r for r in results if not r["valid"]]
    for result in rejected:
        logger.info(
            "Code rejected",
            extra={
                "kind": result["kind"],
                "error_code": result["error_code"],
                "detail": result["message"],
            },
        )
    logger.info(
        "Validated codes",
        extra={"valid": len(results) - len(rejected), "rejected": len(rejected)},
    )
    return _to_response(results)


def _to_code_requests(request: ValidateCodesRequest) -> list[CodeRequest]:
    """リクエストボディから CodeRequest のリストを構築する"""
    return [{"kind": item.kind.value, "text": item.text} for item in request.codes]


def _to_response(results: list[CodeValidationResult]) -> dict:
    return SuccessResponse(
        data=[CodeResultData(**result) for result in results]
    ).model_dump()


def _error_response(
    error_code: str, message: str, details: Optional[list] = None
) -> dict:
    """エラーレスポンスを生成"""
    return ErrorResponse(
        error_code=error_code,
        message=message,
        details=details,
    ).model_dump(exclude_none=True)
