"""
Decoder and viewer for NACHA/ACH fixed-width files.
"""

from .data_model import AchDocument, AchField, AchRecord, ParseState, RawLine, RecordType
from .data_model.ach_parsers_renderers import AchFileParserRenderer, classify

__all__ = [
    "AchDocument",
    "AchField",
    "AchRecord",
    "AchFileParserRenderer",
    "ParseState",
    "RawLine",
    "RecordType",
    "classify",
]
