from dataclasses import dataclass
from typing import ClassVar

from sirena_codes.shared.domain import FixedCode


@dataclass(frozen=True, order=True, repr=False)
class AircraftCode(FixedCode):
    """機材コード

    3文字（ロシア語大文字 + 数字）。
    例: ПУ1, ТУ5, ИЛ6
    """

    KIND: ClassVar[str] = "aircraft"
    LENGTH: ClassVar[int] = 3
