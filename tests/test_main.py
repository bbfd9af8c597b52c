"""
CLI tests: exit codes and report output of ``main.py``.
"""

from __future__ import annotations

from main import main


class TestCli:
    def test_sample_run_reports_invalid(self, capsys):
        assert main([]) == 1
        out = capsys.readouterr().out
        assert "PAN VALIDATION REPORT" in out
        assert "InvalidSequentialAlphabets" in out

    def test_all_valid_file_exits_zero(self, tmp_path, capsys):
        path = tmp_path / "pans.txt"
        path.write_text("ABXCD1934F\nabxcd1934f\n", encoding="utf-8")
        assert main([str(path)]) == 0
        assert "ALL IDENTIFIERS VALID" in capsys.readouterr().out

    def test_csv_column(self, tmp_path):
        path = tmp_path / "pans.csv"
        path.write_text("name,pan\nAsha,ABCDE1234F\n", encoding="utf-8")
        assert main([str(path), "--column", "pan"]) == 1

    def test_missing_file_exits_two(self, tmp_path, capsys):
        assert main([str(tmp_path / "missing.txt")]) == 2
        assert "INGESTION_FAILED" in capsys.readouterr().err

    def test_trailing_blank_line_keeps_clean_file_valid(self, tmp_path):
        path = tmp_path / "pans.txt"
        path.write_text("ABXCD1934F\n\n", encoding="utf-8")
        assert main([str(path)]) == 0

    def test_bad_log_level_exits_two(self, monkeypatch, capsys):
        monkeypatch.setenv("PAN_LOG_LEVEL", "LOUD")
        assert main([]) == 2
        assert "CONFIG_INVALID" in capsys.readouterr().err
