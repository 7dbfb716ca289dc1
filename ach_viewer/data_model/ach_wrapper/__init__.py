# ach_viewer/data_model/ach_wrapper/__init__.py

from .ach_document import AchDocument
from .ach_field import AchField
from .ach_record import RAW_TAG, AchRecord, ParsedLine, RawLine
from .field_layout import FieldLayout, FieldSpec
from .parse_state import ParseState

__all__ = [
    "AchDocument",
    "AchField",
    "AchRecord",
    "ParsedLine",
    "RawLine",
    "RAW_TAG",
    "FieldLayout",
    "FieldSpec",
    "ParseState",
]
