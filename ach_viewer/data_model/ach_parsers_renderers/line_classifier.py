# ach_viewer/data_model/ach_parsers_renderers/line_classifier.py
"""
Record grammars for single ACH lines.

Each grammar takes ``(state, line, line_no)`` and returns an ``AchRecord`` when
the line's first character is its record type code, otherwise ``None``.
``classify`` tries them in a fixed order. Only the batch grammars touch the
state.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Optional

from ach_viewer.data_model.ach_wrapper import AchRecord, FieldLayout, ParseState
from ach_viewer.data_model.interfaces import AddendaVariant, RecordType

from . import record_layouts as layouts

log = logging.getLogger(__name__)

Grammar = Callable[[ParseState, str, int], Optional[AchRecord]]


def _record(
    record_type: RecordType,
    layout: FieldLayout,
    line: str,
    line_no: int,
    variant: AddendaVariant | None = None,
) -> AchRecord:
    return AchRecord(
        type=record_type,
        fields=layout.slice(line),
        line_no=line_no,
        variant=variant,
    )


def is_padding(line: str) -> bool:
    """True when every character of ``line`` is the block padding ``9``."""
    return len(line) > 0 and line.count(layouts.PADDING_CHAR) == len(line)


def parse_file_header(state: ParseState, line: str, line_no: int = 0) -> AchRecord | None:
    if not line.startswith("1"):
        return None
    return _record(RecordType.FILE_HEADER, layouts.FILE_HEADER, line, line_no)


def parse_file_trailer(state: ParseState, line: str, line_no: int = 0) -> AchRecord | None:
    if not line.startswith("9"):
        return None
    # all-nines lines fill out the last block; a real trailer never is
    if is_padding(line):
        return _record(RecordType.FILE_PADDING, layouts.FILE_PADDING, line, line_no)
    return _record(RecordType.FILE_TRAILER, layouts.FILE_TRAILER, line, line_no)


def parse_batch_header(state: ParseState, line: str, line_no: int = 0) -> AchRecord | None:
    if not line.startswith("5"):
        return None
    record = _record(RecordType.BATCH_HEADER, layouts.BATCH_HEADER, line, line_no)
    state.open_batch(record.field("Standard Entry Class Code").value)
    log.debug(
        "Line %d: batch opened, SEC code %r", line_no, state.standard_class_code
    )
    return record


def parse_batch_trailer(state: ParseState, line: str, line_no: int = 0) -> AchRecord | None:
    if not line.startswith("8"):
        return None
    if not state.in_batch:
        log.debug("Line %d: batch trailer without an open batch", line_no)
    state.close_batch()
    return _record(RecordType.BATCH_TRAILER, layouts.BATCH_TRAILER, line, line_no)


def parse_entry(state: ParseState, line: str, line_no: int = 0) -> AchRecord | None:
    if not line.startswith("6"):
        return None
    return _record(RecordType.ENTRY, layouts.ENTRY, line, line_no)


def parse_addenda(state: ParseState, line: str, line_no: int = 0) -> AchRecord | None:
    if not line.startswith("7"):
        return None
    # state.standard_class_code is available here for SEC-specific layouts;
    # none of the current ones depend on it.
    variant = AddendaVariant.from_type_code(line[1:3])
    return _record(
        RecordType.ADDENDA, layouts.ADDENDA_LAYOUTS[variant], line, line_no, variant
    )


GRAMMARS: tuple[Grammar, ...] = (
    parse_file_header,
    parse_file_trailer,
    parse_batch_header,
    parse_batch_trailer,
    parse_entry,
    parse_addenda,
)


def classify(state: ParseState, line: str, line_no: int = 0) -> AchRecord | None:
    """
    Decode ``line`` into an ``AchRecord``, or return ``None`` when it is not a
    94-character line starting with a known record type code.

    ``line`` must already have its line terminator stripped. ``state`` is
    updated in place by batch headers and trailers only.
    """
    if len(line) != layouts.RECORD_LENGTH:
        return None
    for grammar in GRAMMARS:
        record = grammar(state, line, line_no)
        if record is not None:
            return record
    return None
