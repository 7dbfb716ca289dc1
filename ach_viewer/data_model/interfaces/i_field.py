# ach_viewer/data_model/interfaces/i_field.py
from __future__ import annotations

from typing_extensions import Protocol, runtime_checkable

from .i_to_dict import IToDict


@runtime_checkable
class IField(IToDict, Protocol):
    # data attributes
    title: str
    value: str
