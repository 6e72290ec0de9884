import pytest

from sheet_interpreter.reader import read_sheet, read_sheet_text, split_rows
from sheet_interpreter.writer import format_sheet, write_sheet


class TestReader:
    def test_split_rows(self):
        assert split_rows("1,2\n3,A1 B1 +\n") == [["1", "2"], ["3", "A1 B1 +"]]

    def test_crlf_line_endings(self):
        assert split_rows("1,2\r\n3,4\r\n") == [["1", "2"], ["3", "4"]]

    def test_empty_fields_are_kept(self):
        assert split_rows("1,,2") == [["1", "", "2"]]

    def test_rectangularizes_ragged_rows(self):
        frame = read_sheet_text("1,2,3\n4\n5,6\n")
        assert frame.shape == (3, 3)
        assert frame.iloc[1, 0] == "4"
        assert frame.isna().sum().sum() == 3

    def test_empty_text(self):
        assert read_sheet_text("").shape == (0, 0)

    def test_read_sheet(self, tmp_path):
        path = tmp_path / "in.csv"
        path.write_text("1,2\n3\n")
        frame = read_sheet(path)
        assert frame.shape == (2, 2)
        assert list(frame.iloc[0]) == ["1", "2"]

    def test_missing_file(self, tmp_path):
        with pytest.raises(OSError):
            read_sheet(tmp_path / "missing.csv")


class TestWriter:
    def test_format_sheet(self):
        assert format_sheet([[1, 2], [3, 4]]) == "1,2\n3,4\n"

    def test_negative_and_large_values(self):
        assert format_sheet([[-1, 2**70]]) == f"-1,{2**70}\n"

    def test_single_column(self):
        assert format_sheet([[1], [2]]) == "1\n2\n"

    def test_empty_sheet(self):
        assert format_sheet([]) == "\n"

    def test_write_sheet(self, tmp_path):
        path = tmp_path / "out.csv"
        write_sheet(path, [[5, 30], [10, 20]])
        assert path.read_bytes() == b"5,30\n10,20\n"
