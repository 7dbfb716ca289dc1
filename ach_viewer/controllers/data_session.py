# ach_viewer/controllers/data_session.py
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from ach_viewer.controllers.ach_loader import load_ach_file
from ach_viewer.data_model import AchDocument
from ach_viewer.data_model.ach_parsers_renderers import AchFileParserRenderer

log = logging.getLogger(__name__)


@dataclass
class DataSession:
    """
    Holds the document currently being viewed.

    Responsibilities:
    • Load and memoize one parsed ACH file per path.
    • Re-parse edited text from scratch, each run with its own ParseState.
    """

    path: Optional[Path] = None
    encoding: Optional[str] = None
    document: Optional[AchDocument] = None
    parser: AchFileParserRenderer = field(default_factory=AchFileParserRenderer)

    def load(
        self, path: Path, *, encoding: str = "utf-8", reload: bool = False
    ) -> AchDocument:
        path = Path(path)
        if (
            reload
            or self.path != path
            or self.encoding != encoding
            or self.document is None
        ):
            log.info("Loading ACH file: %s", path)
            self.document = load_ach_file(path, encoding=encoding)
            self.path = path
            self.encoding = encoding
            log.debug(
                "Loaded %d lines from %s (%d raw)",
                len(self.document),
                path,
                len(self.document.raw_lines),
            )
        else:
            log.debug("Reusing cached document for %s (%d lines)", path, len(self.document))
        return self.document

    def update_text(self, text: str) -> AchDocument:
        """Parse edited text; the loaded path no longer describes the document."""
        self.document = self.parser.parse(text)
        self.path = None
        self.encoding = None
        return self.document

    def render(self) -> str:
        if self.document is None:
            return ""
        return self.parser.render(self.document)
