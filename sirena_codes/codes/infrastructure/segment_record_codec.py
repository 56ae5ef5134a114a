import struct
from dataclasses import dataclass
from typing import Iterator

from sirena_codes.codes.domain.value_object import (
    AircraftCode,
    AirlineCode,
    AirportCode,
)
from sirena_codes.shared.domain import RecordFormatException


@dataclass(frozen=True)
class SegmentRecord:
    """固定長バイナリレコードに格納するフライト区間"""

    airline: AirlineCode
    aircraft: AircraftCode
    departure: AirportCode
    arrival: AirportCode


class SegmentRecordCodec:
    """SegmentRecord と固定長バイナリレコード（11バイト）の相互変換

    レイアウト: 航空会社(2) + 機材(3) + 出発空港(3) + 到着空港(3)
    各フィールドはコードの raw（KOI8-R）をそのまま格納する。
    """

    LAYOUT = struct.Struct("2s3s3s3s")
    RECORD_SIZE = LAYOUT.size

    def encode(self, record: SegmentRecord) -> bytes:
        """レコードをバイト列に変換する"""
        return self.LAYOUT.pack(
            record.airline.raw,
            record.aircraft.raw,
            record.departure.raw,
            record.arrival.raw,
        )

    def encode_all(self, records: list[SegmentRecord]) -> bytes:
        return b"".join(self.encode(record) for record in records)

    def decode(self, data: bytes) -> SegmentRecord:
        """encode で書き出したバイト列からレコードを復元する

        自システムが書いたレコード専用のため、コードの文字種は再検証しない。
        """
        if len(data) != self.RECORD_SIZE:
            raise RecordFormatException(
                f"Invalid record size: {len(data)}, expected {self.RECORD_SIZE}"
            )
        airline, aircraft, departure, arrival = self.LAYOUT.unpack(data)
        return self._to_record(airline, aircraft, departure, arrival)

    def decode_all(self, data: bytes) -> Iterator[SegmentRecord]:
        """連続して格納されたレコードを順に復元する"""
        if len(data) % self.RECORD_SIZE != 0:
            raise RecordFormatException(
                f"Buffer size {len(data)} is not a multiple of {self.RECORD_SIZE}"
            )
        for fields in self.LAYOUT.iter_unpack(data):
            yield self._to_record(*fields)

    def _to_record(
        self, airline: bytes, aircraft: bytes, departure: bytes, arrival: bytes
    ) -> SegmentRecord:
        return SegmentRecord(
            airline=AirlineCode.from_bytes_unchecked(airline),
            aircraft=AircraftCode.from_bytes_unchecked(aircraft),
            departure=AirportCode.from_bytes_unchecked(departure),
            arrival=AirportCode.from_bytes_unchecked(arrival),
        )
