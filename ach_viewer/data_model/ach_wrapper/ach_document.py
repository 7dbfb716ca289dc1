from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Iterator

from ach_viewer.data_model.interfaces import RecursiveDictStr

from .ach_record import AchRecord, ParsedLine, RawLine
from .parse_state import ParseState

if TYPE_CHECKING:
    from ..interfaces.i_parser_renderer import IParserRenderer


@dataclass
class AchDocument:
    """Ordered result of parsing one ACH text, plus the state it ended in."""

    items: list[ParsedLine] = field(default_factory=list)
    state: ParseState = field(default_factory=ParseState)
    # back-reference to whatever produced this document
    renderer: "IParserRenderer[AchDocument] | None" = None

    @property
    def records(self) -> list[AchRecord]:
        return [x for x in self.items if isinstance(x, AchRecord)]

    @property
    def raw_lines(self) -> list[RawLine]:
        return [x for x in self.items if isinstance(x, RawLine)]

    def counts_by_type(self) -> dict[str, int]:
        """Number of items per tag, in first-seen order."""
        return dict(Counter(x.tag for x in self.items))

    def render(self) -> str:
        if self.renderer is None:
            raise ValueError("Document has no renderer attached")
        return self.renderer.render(self)

    def to_dict(self) -> dict[str, RecursiveDictStr]:
        return {
            "items": [x.to_dict() for x in self.items],
            "standard_class_code": self.state.standard_class_code,
        }

    def __iter__(self) -> Iterator[ParsedLine]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)
