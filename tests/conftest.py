# tests/conftest.py
from __future__ import annotations

import pytest


def _line(*parts: str) -> str:
    line = "".join(parts)
    assert len(line) == 94, f"fixture line is {len(line)} chars: {line!r}"
    return line


FILE_HEADER = _line(
    "1", "01", " 091000019", " 123456789", "261019", "1200", "A", "094", "10", "1",
    "WELLS FARGO".ljust(23), "ACME CORP".ljust(23), "REF00001",
)
BATCH_HEADER = _line(
    "5", "200", "ACME CORP".ljust(16), "".ljust(20), "1234567890", "PPD",
    "PAYROLL".ljust(10), "261019", "261020", "   ", "1", "09100001", "0000001",
)
ENTRY = _line(
    "6", "22", "09100001", "9", "123456789".ljust(17), "0000010000",
    "EMP001".ljust(15), "JANE DOE".ljust(22), "  ", "1", "091000010000001",
)
ADDENDA_GENERAL = _line("7", "05", "PAYMENT INFO".ljust(80), "0001", "0000001")
ADDENDA_CHANGE = _line(
    "7", "98", "C01", "091000010000001", " " * 6, "09100001",
    "1918171614".ljust(29), " " * 15, "091000010000001",
)
ADDENDA_RETURN = _line(
    "7", "99", "R01", "091000010000001", " " * 6, "09100001",
    "".ljust(44), "091000010000001",
)
BATCH_TRAILER = _line(
    "8", "200", "000002", "0009100001", "000000010000", "000000000000",
    "1234567890", "".ljust(19), " " * 6, "09100001", "0000001",
)
FILE_TRAILER = _line(
    "9", "000001", "000001", "00000002", "0009100001", "000000010000",
    "000000000000", "".ljust(39),
)
FILE_PADDING = "9" * 94


@pytest.fixture
def ach_lines() -> dict[str, str]:
    """One well-formed 94-character line per record kind."""
    return {
        "file-header": FILE_HEADER,
        "batch-header": BATCH_HEADER,
        "entry": ENTRY,
        "addenda": ADDENDA_GENERAL,
        "addenda-change": ADDENDA_CHANGE,
        "addenda-return": ADDENDA_RETURN,
        "batch-trailer": BATCH_TRAILER,
        "file-trailer": FILE_TRAILER,
        "file-padding": FILE_PADDING,
    }


@pytest.fixture
def sample_ach_text() -> str:
    """A small complete file: one batch, one entry with an addenda, padding."""
    return "\n".join(
        [
            FILE_HEADER,
            BATCH_HEADER,
            ENTRY,
            ADDENDA_GENERAL,
            BATCH_TRAILER,
            FILE_TRAILER,
            FILE_PADDING,
        ]
    ) + "\n"
