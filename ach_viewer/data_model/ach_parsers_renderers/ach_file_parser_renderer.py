from __future__ import annotations

import html
import logging
from collections.abc import Callable, Iterable

from ach_viewer.data_model.ach_wrapper import (
    AchDocument,
    AchField,
    AchRecord,
    ParsedLine,
    ParseState,
    RawLine,
)
from ach_viewer.data_model.interfaces import IParserRenderer
from ach_viewer.utilities.core_util import split_lines

from .line_classifier import classify
from .record_layouts import RECORD_LENGTH

log = logging.getLogger(__name__)

SPACE_MARKUP = "<span class='space'> </span>"

_PAGE_STYLE = """\
body { font-family: monospace; }
.line, pre { margin: 0; }
.line { display: flex; }
.line pre:nth-child(even) { background: #f3f4f6; }
.space { text-decoration: underline; color: #9ca3af; }
.file-header, .file-trailer { color: #1d4ed8; }
.file-padding { color: #9ca3af; }
.batch-header, .batch-trailer { color: #047857; }
.entry { color: #111827; }
.addenda { color: #b45309; }
"""


def render_field(f: AchField) -> str:
    """One ``<pre>`` per field; each space is wrapped so it shows up."""
    value = html.escape(f.value).replace(" ", SPACE_MARKUP)
    return f'<pre title="{html.escape(f.title)}">{value}</pre>'


def render_item(item: ParsedLine) -> str:
    if isinstance(item, AchRecord):
        body = "".join(render_field(f) for f in item.fields)
        return f'<div class="line {item.tag}">{body}</div>'
    return f"<pre>{html.escape(item.line)}</pre>"


class AchFileParserRenderer(IParserRenderer[AchDocument]):
    """Parse ACH text into an AchDocument and render documents as HTML."""

    record_length: int = RECORD_LENGTH

    def __init__(self, make_state: Callable[[], ParseState] | None = None):
        self._make_state = make_state or ParseState  # default factory

    # --- required by IParserRenderer ---

    def parse(self, unparsed_string: str) -> AchDocument:
        """Decode every non-empty line of ``unparsed_string`` in order."""
        state = self._make_state()
        items = self.parse_lines(state, split_lines(unparsed_string))
        doc = AchDocument(items=items, state=state, renderer=self)
        log.debug("Parsed %d lines: %s", len(items), doc.counts_by_type())
        return doc

    def render(self, obj: Iterable[AchDocument] | AchDocument) -> str:
        def _one(x: AchDocument) -> str:
            return "".join(render_item(item) for item in x)

        if isinstance(obj, AchDocument):
            return _one(obj)
        return "".join(_one(x) for x in obj)

    # ------- parsing helpers -------

    def parse_line(self, state: ParseState, line: str, line_no: int = 0) -> ParsedLine:
        """Decode one line; anything that is not a record comes back as RawLine."""
        record = classify(state, line, line_no)
        if record is not None:
            return record
        if len(line) != self.record_length:
            log.debug(
                "Line %d: length %d, not a %d-character record",
                line_no,
                len(line),
                self.record_length,
            )
        else:
            log.debug("Line %d: unknown record type code %r", line_no, line[:1])
        return RawLine(line=line, line_no=line_no)

    def parse_lines(
        self, state: ParseState, numbered_lines: Iterable[tuple[int, str]]
    ) -> list[ParsedLine]:
        """Fold ``parse_line`` over ``(line_no, line)`` pairs sharing ``state``."""
        return [self.parse_line(state, line, line_no) for line_no, line in numbered_lines]

    def render_page(self, doc: AchDocument, title: str = "ACH file") -> str:
        """Standalone HTML page around ``render(doc)``."""
        return (
            "<!DOCTYPE html>\n"
            '<html lang="en">\n<head>\n<meta charset="utf-8">\n'
            f"<title>{html.escape(title)}</title>\n"
            f"<style>\n{_PAGE_STYLE}</style>\n"
            "</head>\n<body>\n"
            f'<div id="viewer">{self.render(doc)}</div>\n'
            "</body>\n</html>\n"
        )
