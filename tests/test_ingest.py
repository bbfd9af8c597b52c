"""
Ingestion tests: reading raw records from text and CSV files.
"""

from __future__ import annotations

import pytest

from pan_validator.exceptions import IngestionError
from pan_validator.ingest import load_records, parse_csv_text, parse_lines
from pan_validator.pipeline import PanValidationPipeline


class TestParseLines:
    def test_one_record_per_line(self):
        assert parse_lines("ABXCD1934F\nabcde1234f\n") == ["ABXCD1934F", "abcde1234f"]

    def test_empty_lines_skipped_whitespace_lines_are_null(self):
        assert parse_lines("ABXCD1934F\n\n   \nX") == ["ABXCD1934F", None, "X"]

    def test_trailing_blank_line_is_not_a_record(self):
        assert parse_lines("ABXCD1934F\n\n") == ["ABXCD1934F"]

    def test_padding_is_left_for_the_normalizer(self):
        assert parse_lines("  abxcd1934f  ") == ["  abxcd1934f  "]


class TestParseCsv:
    def test_first_column_by_default(self):
        text = "pan,name\nABXCD1934F,Asha\nABCDE1234F,Ravi\n"
        assert parse_csv_text(text) == ["ABXCD1934F", "ABCDE1234F"]

    def test_named_column(self):
        text = "name,pan\nAsha,ABXCD1934F\n"
        assert parse_csv_text(text, "pan") == ["ABXCD1934F"]

    def test_empty_cells_are_null_records(self):
        text = "pan,name\n,Asha\n  ,Ravi\n"
        assert parse_csv_text(text) == [None, None]

    def test_missing_column(self):
        with pytest.raises(IngestionError) as exc:
            parse_csv_text("pan\nABXCD1934F\n", "id_number")
        assert exc.value.code == "INGESTION_FAILED"
        assert exc.value.details["available"] == ["pan"]

    def test_no_header(self):
        with pytest.raises(IngestionError):
            parse_csv_text("")


class TestLoadRecords:
    def test_text_file(self, tmp_path):
        path = tmp_path / "pans.txt"
        path.write_text("ABXCD1934F\n\nabxcd1934f\n", encoding="utf-8")
        assert load_records(path) == ["ABXCD1934F", "abxcd1934f"]

    def test_csv_file_with_bom(self, tmp_path):
        path = tmp_path / "pans.csv"
        path.write_bytes("\ufeffpan\nABXCD1934F\n".encode("utf-8"))
        assert load_records(path, "pan") == ["ABXCD1934F"]

    def test_missing_file(self, tmp_path):
        with pytest.raises(IngestionError):
            load_records(tmp_path / "nope.txt")

    def test_loaded_records_through_pipeline(self, tmp_path):
        path = tmp_path / "pans.csv"
        path.write_text(
            "pan\nabxcd1934f\nABXCD1934F\n\nABCDE1234F\n", encoding="utf-8"
        )
        report = PanValidationPipeline().run(load_records(path))
        # csv.DictReader skips the fully blank row
        assert report.raw_records == 3
        assert report.summary.total_records == 2
        assert report.summary.total_valid == 1


class TestBlankLinePolicy:
    """Text and CSV input read the same blank line the same way."""

    def test_text_and_csv_agree(self, tmp_path):
        body = "ABXCD1934F\n\nPQRSX1934Z\n"
        txt = tmp_path / "pans.txt"
        txt.write_text(body, encoding="utf-8")
        csv_path = tmp_path / "pans.csv"
        csv_path.write_text("pan\n" + body, encoding="utf-8")
        assert load_records(txt) == load_records(csv_path) == ["ABXCD1934F", "PQRSX1934Z"]

    def test_whitespace_only_rows_agree(self):
        assert parse_lines("ABXCD1934F\n  \n") == parse_csv_text("pan\nABXCD1934F\n  \n")
        assert parse_lines("ABXCD1934F\n  \n") == ["ABXCD1934F", None]
