# ach_viewer/controllers/ach_loader.py
from __future__ import annotations

from pathlib import Path

from ach_viewer.data_model import AchDocument
from ach_viewer.data_model.ach_parsers_renderers import AchFileParserRenderer
from ach_viewer.utilities.core_util import open_for_read


def read_ach_text(path: Path, encoding: str = "utf-8") -> str:
    """Read the whole file; undecodable bytes are replaced, not fatal."""
    with open_for_read(path=path, binary=False, encoding=encoding, errors="replace") as f:
        text = f.read()
    # a leading BOM would make the first record 95 characters
    return text.removeprefix("\ufeff")


def load_ach_file(path: Path, encoding: str = "utf-8") -> AchDocument:
    """
    Read and decode an ACH file.
    Lines that are not records are kept as RawLine items; nothing is dropped
    except empty lines.
    """
    text = read_ach_text(Path(path), encoding=encoding)
    parser = AchFileParserRenderer()
    return parser.parse(text)
