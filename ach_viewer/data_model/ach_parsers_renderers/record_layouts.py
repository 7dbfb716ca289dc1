# ach_viewer/data_model/ach_parsers_renderers/record_layouts.py
"""
Field tables for the NACHA record kinds.

Widths add up to 94 for every layout; the last column of each table takes
whatever remains of the line.
"""

from __future__ import annotations

from ach_viewer.data_model.ach_wrapper import FieldLayout
from ach_viewer.data_model.interfaces import AddendaVariant, RecordType

RECORD_LENGTH = 94
PADDING_CHAR = "9"

FILE_HEADER = FieldLayout.from_widths(
    ("Record Type Code", 1),
    ("Priority Code", 2),
    ("Immediate Destination", 10),
    ("Immediate Origin", 10),
    ("File Creation Date", 6),
    ("File Creation Time", 4),
    ("File ID Modifier", 1),
    ("Record Size", 3),
    ("Blocking Factor", 2),
    ("Format Code", 1),
    ("Immediate Destination Name", 23),
    ("Immediate Origin Name", 23),
    ("Reference Code", None),
)

FILE_PADDING = FieldLayout.from_widths(
    ("File Padding", None),
)

FILE_TRAILER = FieldLayout.from_widths(
    ("Record Type Code", 1),
    ("Batch Count", 6),
    ("Block Count", 6),
    ("Entry/Addenda Count", 8),
    ("Entry Hash", 10),
    ("Total Debit Entry Dollar Amount in File", 12),
    ("Total Credit Entry Dollar Amount in File", 12),
    ("Reserved", None),
)

BATCH_HEADER = FieldLayout.from_widths(
    ("Record Type Code", 1),
    ("Service Class Code", 3),
    ("Company Name", 16),
    ("Company Discretionary Data", 20),
    ("Company Identification", 10),
    ("Standard Entry Class Code", 3),
    ("Company Entry Description", 10),
    ("Company Descriptive Date", 6),
    ("Effective Entry Date", 6),
    ("Settlement Date (Julian)", 3),
    ("Originator Status Code", 1),
    ("Originating DFI Identification", 8),
    ("Batch Number", None),
)

BATCH_TRAILER = FieldLayout.from_widths(
    ("Record Type Code", 1),
    ("Service Class Code", 3),
    ("Entry/Addenda Count", 6),
    ("Entry Hash", 10),
    ("Total Debit Entry Dollar Amount", 12),
    ("Total Credit Entry Dollar Amount", 12),
    ("Company Identification", 10),
    ("Message Authentication Code", 19),
    ("Reserved", 6),
    ("Originating DFI Identification", 8),
    ("Batch Number", None),
)

ENTRY = FieldLayout.from_widths(
    ("Record Type Code", 1),
    ("Transaction Code", 2),
    ("Receiving DFI Identification", 8),
    ("Check Digit", 1),
    ("DFI Account Number", 17),
    ("Amount", 10),
    ("Identification Number", 15),
    ("Receiving Individual/Company Name", 22),
    ("Discretionary Data / Payment Type Code", 2),
    ("Addenda Record Indicator", 1),
    ("Trace Number", None),
)

ADDENDA_CHANGE = FieldLayout.from_widths(
    ("Record Type Code", 1),
    ("Addenda Type Code", 2),
    ("Change Code", 3),
    ("Original Entry Trace Number", 15),
    ("Reserved", 6),
    ("Original Receiving DFI Identification", 8),
    ("Corrected Data", 29),
    ("Reserved", 15),
    ("Trace Number", None),
)

ADDENDA_RETURN = FieldLayout.from_widths(
    ("Record Type Code", 1),
    ("Addenda Type Code", 2),
    ("Return Reason Code", 3),
    ("Original Entry Trace Number", 15),
    ("Date of Death", 6),
    ("Original Receiving DFI Identification", 8),
    ("Addenda Information", 44),
    ("Trace Number", None),
)

ADDENDA_GENERAL = FieldLayout.from_widths(
    ("Record Type Code", 1),
    ("Addenda Type Code", 2),
    ("Payment Related Information", 80),
    ("Addenda Sequence Number", 4),
    ("Entry Detail Sequence Number", None),
)

ADDENDA_LAYOUTS: dict[AddendaVariant, FieldLayout] = {
    AddendaVariant.CHANGE: ADDENDA_CHANGE,
    AddendaVariant.RETURN: ADDENDA_RETURN,
    AddendaVariant.GENERAL: ADDENDA_GENERAL,
}

LAYOUTS: dict[RecordType, FieldLayout] = {
    RecordType.FILE_HEADER: FILE_HEADER,
    RecordType.FILE_PADDING: FILE_PADDING,
    RecordType.FILE_TRAILER: FILE_TRAILER,
    RecordType.BATCH_HEADER: BATCH_HEADER,
    RecordType.BATCH_TRAILER: BATCH_TRAILER,
    RecordType.ENTRY: ENTRY,
    # addenda default; the variant tables live in ADDENDA_LAYOUTS
    RecordType.ADDENDA: ADDENDA_GENERAL,
}
