from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ach_viewer.data_model.interfaces import IField, IToDict, RecursiveDictStr


@dataclass(frozen=True)
class AchField:
    """One named slice of a record line; ``value`` is never trimmed."""

    title: str
    value: str

    def to_dict(self) -> dict[str, RecursiveDictStr]:
        return {"title": self.title, "value": self.value}


if TYPE_CHECKING:
    _is_i_field: type[IField] = AchField
    _is_IToDict: type[IToDict] = AchField
