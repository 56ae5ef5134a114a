class DomainException(Exception):
    """ドメイン層で発生する基底例外"""

    pass


class CodeParseException(DomainException, ValueError):
    """コードの文字列表現が不正な場合の基底例外"""

    def __init__(self, kind: str, message: str) -> None:
        super().__init__(message)
        self.kind = kind


class InvalidLengthException(CodeParseException):
    """文字数がコード種別の固定長と一致しない場合"""

    def __init__(self, kind: str, length: int, expected: int) -> None:
        super().__init__(kind, f"invalid length {length}, expected {expected}")
        self.length = length
        self.expected = expected


class InvalidLetterException(CodeParseException):
    """許可されていない文字が含まれる場合（最初の1文字のみ報告）"""

    def __init__(self, kind: str, letter: str) -> None:
        super().__init__(kind, f"invalid character {letter}, expected [А-Я]")
        self.letter = letter


class TooManyDigitsException(CodeParseException):
    """数字の個数が上限を超える場合（航空会社コードは1文字まで）"""

    def __init__(self, kind: str, digits: int, allowed: int = 1) -> None:
        super().__init__(kind, f"got {digits} digits, only {allowed} allowed")
        self.digits = digits
        self.allowed = allowed


class RecordFormatException(DomainException):
    """固定長バイナリレコードのサイズが不正な場合"""

    pass
