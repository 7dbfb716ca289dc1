# tests/controllers/test_record_export.py
from pathlib import Path

import pandas as pd

from ach_viewer.controllers import EXPORT_COLUMNS, records_to_frame, write_csv
from ach_viewer.data_model.ach_parsers_renderers import AchFileParserRenderer


def test_records_to_frame_one_row_per_field(ach_lines):
    # Arrange
    text = "\n".join([ach_lines["entry"], "garbage", ach_lines["addenda-change"]])
    doc = AchFileParserRenderer().parse(text)
    # Act
    df = records_to_frame(doc)
    # Assert
    assert list(df.columns) == EXPORT_COLUMNS
    assert len(df) == 11 + 1 + 9
    raw = df[df["record_type"] == "raw"].iloc[0]
    assert raw["value"] == "garbage"
    assert raw["line_no"] == 2
    change = df[df["variant"] == "change"]
    assert change["field_index"].tolist() == list(range(1, 10))


def test_records_to_frame_keeps_values_verbatim(ach_lines):
    doc = AchFileParserRenderer().parse(ach_lines["entry"])
    df = records_to_frame(doc)
    name = df.loc[df["title"] == "Receiving Individual/Company Name", "value"].iloc[0]
    amount = df.loc[df["title"] == "Amount", "value"].iloc[0]
    assert name == "JANE DOE".ljust(22)
    assert amount == "0000010000"


def test_records_to_frame_empty_document():
    df = records_to_frame(AchFileParserRenderer().parse(""))
    assert df.empty
    assert list(df.columns) == EXPORT_COLUMNS


def test_write_csv(tmp_path: Path, sample_ach_text):
    # Arrange
    doc = AchFileParserRenderer().parse(sample_ach_text)
    out = tmp_path / "out" / "fields.csv"
    # Act
    rows = write_csv(doc, out)
    # Assert
    back = pd.read_csv(out, dtype=str, keep_default_na=False)
    assert rows == len(back) == len(records_to_frame(doc))
    amounts = back.loc[back["title"] == "Amount", "value"].tolist()
    assert amounts == ["0000010000"], "Leading zeros survive the export."
