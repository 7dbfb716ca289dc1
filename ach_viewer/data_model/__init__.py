# ach_viewer/data_model/__init__.py
from .interfaces import (
    AddendaVariant, RecordType, IField, IRecord, IRawLine,
    IToDict, IParserRenderer)
from .ach_wrapper import (
    AchDocument, AchField, AchRecord, RawLine, ParsedLine,
    ParseState, FieldLayout, FieldSpec, RAW_TAG)
__all__ = [
    "AddendaVariant", "RecordType", "IField", "IRecord", "IRawLine",
    "IToDict", "IParserRenderer", "AchDocument", "AchField", "AchRecord",
    "RawLine", "ParsedLine", "ParseState", "FieldLayout", "FieldSpec",
    "RAW_TAG"]
