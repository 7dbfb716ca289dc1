# tests/data_model/ach_wrapper/test_ach_record.py
from dataclasses import FrozenInstanceError

import pytest

from ach_viewer.data_model import (
    AchDocument,
    AchField,
    AchRecord,
    AddendaVariant,
    IField,
    IRawLine,
    IRecord,
    ParseState,
    RawLine,
    RecordType,
)


def _record() -> AchRecord:
    return AchRecord(
        type=RecordType.ADDENDA,
        fields=(
            AchField("Record Type Code", "7"),
            AchField("Reserved", " a "),
            AchField("Reserved", " b "),
        ),
        line_no=4,
        variant=AddendaVariant.CHANGE,
    )


def test_field_lookup_returns_first_match():
    assert _record().field("Reserved").value == " a "


def test_field_lookup_unknown_title_raises_key_error():
    with pytest.raises(KeyError):
        _record().field("Amount")


def test_text_joins_values_back_into_the_line():
    assert _record().text() == "7 a  b "


def test_to_dict_shape():
    # Act
    d = _record().to_dict()
    # Assert
    assert d["type"] == "addenda"
    assert d["line_no"] == 4
    assert d["variant"] == "change"
    assert d["fields"][0] == {"title": "Record Type Code", "value": "7"}


def test_records_are_frozen():
    with pytest.raises(FrozenInstanceError):
        _record().line_no = 9  # type: ignore[misc]


def test_raw_line_is_tagged_distinctly():
    raw = RawLine("short line", line_no=2)
    assert raw.tag == "raw"
    assert raw.tag not in {rt.value for rt in RecordType}
    assert raw.text() == "short line"
    assert raw.to_dict() == {"type": "raw", "line_no": 2, "line": "short line"}


def test_models_satisfy_their_protocols():
    assert isinstance(AchField("a", "b"), IField)
    assert isinstance(_record(), IRecord)
    assert isinstance(RawLine("x"), IRawLine)
    assert not isinstance(RawLine("x"), IRecord), "RawLine has no fields or type."
    assert not isinstance("plain text", IField)


def test_parse_state_batch_lifecycle():
    # Arrange
    state = ParseState()
    assert state.in_batch is False
    # Act
    state.open_batch("PPD")
    # Assert
    assert state.standard_class_code == "PPD"
    assert state.in_batch is True
    state.close_batch()
    assert state.standard_class_code is None
    state.close_batch()
    assert state.standard_class_code is None, "Closing twice is harmless."


def test_document_views_and_counts():
    # Arrange
    rec = _record()
    raw = RawLine("junk", line_no=5)
    doc = AchDocument(items=[rec, raw, rec])
    # Act / Assert
    assert doc.records == [rec, rec]
    assert doc.raw_lines == [raw]
    assert doc.counts_by_type() == {"addenda": 2, "raw": 1}
    assert list(doc) == [rec, raw, rec]
    assert len(doc) == 3
    assert doc.to_dict()["standard_class_code"] is None


def test_document_render_without_renderer_raises():
    with pytest.raises(ValueError):
        AchDocument().render()
