# tests/controllers/test_ach_loader.py
from pathlib import Path

from ach_viewer.controllers import load_ach_file, read_ach_text


def test_load_ach_file_parses_crlf_file(tmp_path: Path, sample_ach_text):
    # Arrange
    p = tmp_path / "payroll.ach"
    p.write_bytes(sample_ach_text.replace("\n", "\r\n").encode("ascii"))
    # Act
    doc = load_ach_file(p)
    # Assert
    assert len(doc) == 7
    assert doc.raw_lines == []
    assert doc.records[0].tag == "file-header"


def test_undecodable_bytes_are_replaced_not_fatal(tmp_path: Path, ach_lines):
    # Arrange
    p = tmp_path / "bad.ach"
    p.write_bytes(b"\xff" + b"0" * 93 + b"\n" + ach_lines["entry"].encode("ascii"))
    # Act
    doc = load_ach_file(p, encoding="utf-8")
    # Assert
    assert [x.tag for x in doc] == ["raw", "entry"]
    assert doc.items[0].line.startswith("�")


def test_read_ach_text_honours_encoding(tmp_path: Path):
    p = tmp_path / "latin.ach"
    p.write_bytes("café".encode("cp1252"))
    assert read_ach_text(p, encoding="cp1252") == "café"


def test_utf8_bom_does_not_hide_the_file_header(tmp_path: Path, ach_lines):
    # Arrange
    p = tmp_path / "bom.ach"
    p.write_bytes(b"\xef\xbb\xbf" + ach_lines["file-header"].encode("ascii") + b"\r\n")
    # Act
    doc = load_ach_file(p)
    # Assert
    assert [x.tag for x in doc] == ["file-header"]
    assert doc.records[0].text() == ach_lines["file-header"]


def test_bom_only_stripped_at_start(tmp_path: Path):
    p = tmp_path / "inner.ach"
    p.write_text("a\ufeffb", encoding="utf-8")
    assert read_ach_text(p) == "a\ufeffb"
