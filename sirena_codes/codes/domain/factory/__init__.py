from .code_factory import CodeFactory

__all__ = ["CodeFactory"]
