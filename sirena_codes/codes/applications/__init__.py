from .validate_codes import CodeRequest, CodeValidationResult, ValidateCodesService

__all__ = ["CodeRequest", "CodeValidationResult", "ValidateCodesService"]
