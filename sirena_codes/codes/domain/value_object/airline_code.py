from dataclasses import dataclass
from typing import ClassVar, Optional

from sirena_codes.shared.domain import FixedCode


@dataclass(frozen=True, order=True, repr=False)
class AirlineCode(FixedCode):
    """航空会社コード

    2文字（ロシア語大文字 + 数字）。例: СУ, А5
    旧ソ連の国内コード体系では数字は1文字まで（56 のような2桁は不可）。
    """

    KIND: ClassVar[str] = "airline"
    LENGTH: ClassVar[int] = 2
    MAX_DIGITS: ClassVar[Optional[int]] = 1
