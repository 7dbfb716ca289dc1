# ach_viewer/data_model/interfaces/i_record.py
from __future__ import annotations

from typing import Optional, Sequence

from typing_extensions import Protocol, runtime_checkable

from .enum_addenda_variant import AddendaVariant
from .enum_record_type import RecordType
from .i_field import IField
from .i_to_dict import IToDict


@runtime_checkable
class IRecord(IToDict, Protocol):
    # --- data ---
    type: RecordType
    fields: Sequence[IField]
    line_no: int
    variant: Optional[AddendaVariant]

    # --- behavior ---
    def field(self, title: str) -> IField: ...
    def text(self) -> str: ...


@runtime_checkable
class IRawLine(IToDict, Protocol):
    """A line no record grammar accepted, kept verbatim."""

    line: str
    line_no: int
