"""
Interfaces and Enums for the ACH data model.
"""

from .enum_addenda_variant import AddendaVariant
from .enum_record_type import RecordType
from .i_field import IField
from .i_parser_renderer import IParserRenderer
from .i_record import IRawLine, IRecord
from .i_to_dict import IToDict, RecursiveDictStr

__all__ = [
    "AddendaVariant",
    "RecordType",
    "IField",
    "IRecord",
    "IRawLine",
    "IToDict",
    "IParserRenderer",
    "RecursiveDictStr",
]
