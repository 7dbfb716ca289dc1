from .ach_file_parser_renderer import AchFileParserRenderer, render_item
from .line_classifier import GRAMMARS, classify
from .record_layouts import ADDENDA_LAYOUTS, LAYOUTS, RECORD_LENGTH

__all__ = [
    "AchFileParserRenderer",
    "render_item",
    "classify",
    "GRAMMARS",
    "LAYOUTS",
    "ADDENDA_LAYOUTS",
    "RECORD_LENGTH",
]
