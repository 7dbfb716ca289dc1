from enum import Enum


class RecordType(Enum):
    """
    Enum representing the kind of a decoded ACH record.

    The value is the tag handed to renderers (CSS class, export column).
    """
    FILE_HEADER = "file-header"
    FILE_PADDING = "file-padding"
    FILE_TRAILER = "file-trailer"
    BATCH_HEADER = "batch-header"
    BATCH_TRAILER = "batch-trailer"
    ENTRY = "entry"
    ADDENDA = "addenda"

    @classmethod
    def from_tag(cls, tag: str) -> "RecordType":
        """
        Convert a tag such as ``"batch-header"`` to a RecordType.
        """
        for record_type in cls:
            if record_type.value == tag:
                return record_type
        raise ValueError(f"Unknown record type tag: {tag}")

    def __str__(self) -> str:
        return self.value
