from .code_kind import CodeKind

__all__ = ["CodeKind"]
