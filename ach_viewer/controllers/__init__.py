from .ach_loader import load_ach_file, read_ach_text
from .data_session import DataSession
from .record_export import EXPORT_COLUMNS, records_to_frame, write_csv

__all__ = [
    "load_ach_file",
    "read_ach_text",
    "DataSession",
    "records_to_frame",
    "write_csv",
    "EXPORT_COLUMNS",
]
