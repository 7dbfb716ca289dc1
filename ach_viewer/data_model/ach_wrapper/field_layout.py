# ach_viewer/data_model/ach_wrapper/field_layout.py
"""
Fixed-width field layouts.

A ``FieldLayout`` is an ordered tuple of ``FieldSpec`` whose byte ranges are
contiguous from offset 0. Every spec but the last has a fixed end; the last
one runs to the end of the line so a record tolerates trailing variation.
The constructor enforces this, so a bad table fails at import time.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional

from .ach_field import AchField


@dataclass(frozen=True)
class FieldSpec:
    title: str
    start: int
    end: Optional[int] = None  # None: to end of line

    def slice(self, line: str) -> str:
        return line[self.start : self.end]

    def span(self, length: int) -> tuple[int, int]:
        """Resolved ``(start, end)`` for a line of ``length`` characters."""
        return self.start, length if self.end is None else self.end


class FieldLayout:
    """Ordered, gap-free field table for one record kind."""

    def __init__(self, *specs: FieldSpec):
        if not specs:
            raise ValueError("A field layout needs at least one field")
        expected = 0
        for i, spec in enumerate(specs):
            if spec.start != expected:
                raise ValueError(
                    f"Field {spec.title!r} starts at {spec.start}, expected {expected}"
                )
            is_last = i == len(specs) - 1
            if spec.end is None and not is_last:
                raise ValueError(
                    f"Only the last field may run to end of line, not {spec.title!r}"
                )
            if spec.end is not None:
                if is_last:
                    raise ValueError(
                        f"Last field {spec.title!r} must run to end of line"
                    )
                if spec.end <= spec.start:
                    raise ValueError(f"Field {spec.title!r} has no width")
                expected = spec.end
        self._specs: tuple[FieldSpec, ...] = tuple(specs)

    @classmethod
    def from_widths(cls, *columns: tuple[str, Optional[int]]) -> "FieldLayout":
        """
        Build a layout from ``(title, width)`` pairs laid end to end.
        The final pair's width must be ``None`` (rest of line).
        """
        specs = []
        offset = 0
        for title, width in columns:
            if width is None:
                specs.append(FieldSpec(title, offset))
            else:
                specs.append(FieldSpec(title, offset, offset + width))
                offset += width
        return cls(*specs)

    @property
    def specs(self) -> tuple[FieldSpec, ...]:
        return self._specs

    @property
    def titles(self) -> list[str]:
        return [s.title for s in self._specs]

    def spans(self, length: int) -> list[tuple[int, int]]:
        return [s.span(length) for s in self._specs]

    def covers(self, length: int) -> bool:
        """True when the spans tile ``[0, length)`` exactly."""
        position = 0
        for start, end in self.spans(length):
            if start != position or end <= start:
                return False
            position = end
        return position == length

    def slice(self, line: str) -> tuple[AchField, ...]:
        return tuple(AchField(title=s.title, value=s.slice(line)) for s in self._specs)

    def __iter__(self) -> Iterator[FieldSpec]:
        return iter(self._specs)

    def __len__(self) -> int:
        return len(self._specs)

    def __repr__(self) -> str:
        return f"FieldLayout({', '.join(self.titles)})"
