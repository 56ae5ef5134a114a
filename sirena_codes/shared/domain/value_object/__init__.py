from .fixed_code import FixedCode

__all__ = ["FixedCode"]
