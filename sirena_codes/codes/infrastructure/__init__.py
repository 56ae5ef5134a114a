from .segment_record_codec import SegmentRecord, SegmentRecordCodec

__all__ = ["SegmentRecord", "SegmentRecordCodec"]
