from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass
class ParseState:
    """
    Context threaded through every line of one document.

    ``standard_class_code`` holds the SEC code of the batch currently open:
    set by a batch header, cleared by the batch trailer. Create a fresh
    instance per parse run.
    """

    standard_class_code: Optional[str] = None

    @property
    def in_batch(self) -> bool:
        return self.standard_class_code is not None

    def open_batch(self, standard_class_code: str) -> None:
        self.standard_class_code = standard_class_code

    def close_batch(self) -> None:
        self.standard_class_code = None
