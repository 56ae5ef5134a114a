from dataclasses import dataclass
from typing import ClassVar

from sirena_codes.shared.domain import FixedCode


@dataclass(frozen=True, order=True, repr=False)
class AirportCode(FixedCode):
    """空港コード（3文字）"""

    KIND: ClassVar[str] = "airport"
    LENGTH: ClassVar[int] = 3
