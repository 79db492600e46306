# /// script
# requires-python = ">=3.11"
# dependencies = [
#     "pytest",
# ]
# ///
"""
Unit tests for job_table.py.

Tests reading, writing, and results file naming.
"""

import pytest

from imagecli.errors import JobTableUnreadable, ResultsWriteError
from imagecli.job_table import JobTable, read_job_table, results_path, write_job_table


class TestReadJobTable:
    """Tests for read_job_table."""

    def test_header_and_rows(self, write_job):
        path = write_job([["A", "B"], ["a.png", "b.png"], ["c.jpg", "d.gif"]])
        table = read_job_table(path)
        assert table.header == ["A", "B"]
        assert table.rows == [["a.png", "b.png"], ["c.jpg", "d.gif"]]
        assert table.pairs() == [("a.png", "b.png"), ("c.jpg", "d.gif")]

    def test_extra_columns_passed_through(self, write_job):
        path = write_job([["A", "B", "Note"], ["a.png", "b.png", "x", "y"]])
        table = read_job_table(path)
        assert table.rows == [["a.png", "b.png", "x", "y"]]

    def test_header_column_count_not_checked(self, write_job):
        path = write_job([["Only"], ["a.png", "b.png"]])
        assert read_job_table(path).header == ["Only"]

    def test_header_only(self, write_job):
        table = read_job_table(write_job([["A", "B"]]))
        assert table.rows == []

    def test_blank_lines_skipped(self, tmp_path):
        path = tmp_path / "jobs.csv"
        path.write_text("A B\n\na.png b.png\n\n")
        assert read_job_table(path).rows == [["a.png", "b.png"]]

    def test_quoted_paths_with_spaces(self, tmp_path):
        path = tmp_path / "jobs.csv"
        path.write_text('A B\n"my photos/a.png" b.png\n')
        assert read_job_table(path).pairs() == [("my photos/a.png", "b.png")]

    def test_repeated_spaces_between_cells(self, tmp_path):
        path = tmp_path / "jobs.csv"
        path.write_text("A B\na.png   b.png\n")
        assert read_job_table(path).pairs() == [("a.png", "b.png")]

    def test_trailing_spaces_add_no_cells(self, tmp_path):
        path = tmp_path / "jobs.csv"
        path.write_text("A B \na.png b.png \nc.png d.png  \n")
        table = read_job_table(path)
        assert table.header == ["A", "B"]
        assert table.rows == [["a.png", "b.png"], ["c.png", "d.png"]]

    def test_home_directory_expanded(self, tmp_path, monkeypatch):
        monkeypatch.setenv("HOME", str(tmp_path))
        (tmp_path / "jobs.csv").write_text("A B\na.png b.png\n")
        assert read_job_table("~/jobs.csv").pairs() == [("a.png", "b.png")]
        assert results_path("~/jobs.csv") == str(tmp_path / "jobs.csv") + "results.csv"

    def test_missing_file(self, tmp_path):
        with pytest.raises(JobTableUnreadable) as exc_info:
            read_job_table(tmp_path / "missing.csv")
        assert "missing.csv" in str(exc_info.value)

    def test_empty_file(self, tmp_path):
        path = tmp_path / "jobs.csv"
        path.write_text("")
        with pytest.raises(JobTableUnreadable):
            read_job_table(path)

    def test_row_with_one_cell(self, write_job):
        path = write_job([["A", "B"], ["a.png", "b.png"], ["lonely.png"]])
        with pytest.raises(JobTableUnreadable) as exc_info:
            read_job_table(path)
        assert "data row 2" in str(exc_info.value)

    def test_malformed_quoting(self, tmp_path):
        path = tmp_path / "jobs.csv"
        path.write_text('A B\n"a.png"x b.png\n')
        with pytest.raises(JobTableUnreadable):
            read_job_table(path)

    def test_directory_is_unreadable(self, tmp_path):
        with pytest.raises(JobTableUnreadable):
            read_job_table(tmp_path)


class TestWriteJobTable:
    """Tests for write_job_table and results_path."""

    def test_written_table_reads_back(self, tmp_path):
        table = JobTable(
            header=["A", "B", "Similar", "Elapsed"],
            rows=[["a.png", "b png.png", "0.05", "12"]],
        )
        path = tmp_path / "out.csv"
        write_job_table(path, table)

        assert path.read_text() == 'A B Similar Elapsed\na.png "b png.png" 0.05 12\n'
        assert read_job_table(path) == table

    def test_unwritable_location(self, tmp_path):
        with pytest.raises(ResultsWriteError):
            write_job_table(tmp_path / "no" / "such" / "dir.csv", JobTable(header=["A"]))

    def test_results_path_appends_suffix(self):
        assert results_path("/data/jobs.csv") == "/data/jobs.csvresults.csv"
        assert results_path("jobs") == "jobsresults.csv"
