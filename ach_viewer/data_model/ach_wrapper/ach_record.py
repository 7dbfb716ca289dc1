from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from ach_viewer.data_model.interfaces import (
    AddendaVariant,
    IRawLine,
    IRecord,
    IToDict,
    RecordType,
    RecursiveDictStr,
)

from .ach_field import AchField

# Tag for lines no record grammar accepted; never a RecordType value.
RAW_TAG = "raw"


@dataclass(frozen=True)
class AchRecord:
    """
    Decoded form of one 94-character line.

    ``fields`` is in byte order; joining the values gives back the line.
    ``variant`` is set only for addenda records.
    """

    type: RecordType
    fields: tuple[AchField, ...]
    line_no: int = 0
    variant: Optional[AddendaVariant] = None

    @property
    def tag(self) -> str:
        return self.type.value

    def field(self, title: str) -> AchField:
        """Return the first field called ``title``."""
        for f in self.fields:
            if f.title == title:
                return f
        raise KeyError(f"{self.tag} record has no field {title!r}")

    def text(self) -> str:
        return "".join(f.value for f in self.fields)

    def to_dict(self) -> dict[str, RecursiveDictStr]:
        return {
            "type": self.tag,
            "line_no": self.line_no,
            "variant": self.variant.value if self.variant else None,
            "fields": [f.to_dict() for f in self.fields],
        }


@dataclass(frozen=True)
class RawLine:
    """A line kept verbatim because it is not a decodable record."""

    line: str
    line_no: int = 0

    @property
    def tag(self) -> str:
        return RAW_TAG

    def text(self) -> str:
        return self.line

    def to_dict(self) -> dict[str, RecursiveDictStr]:
        return {"type": RAW_TAG, "line_no": self.line_no, "line": self.line}


ParsedLine = AchRecord | RawLine


if TYPE_CHECKING:
    _is_i_record: type[IRecord] = AchRecord
    _is_i_raw_line: type[IRawLine] = RawLine
    _is_IToDict: type[IToDict] = AchRecord
