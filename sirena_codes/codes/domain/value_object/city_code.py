from dataclasses import dataclass
from typing import ClassVar

from sirena_codes.shared.domain import FixedCode


@dataclass(frozen=True, order=True, repr=False)
class CityCode(FixedCode):
    """都市コード（3文字）"""

    KIND: ClassVar[str] = "city"
    LENGTH: ClassVar[int] = 3
