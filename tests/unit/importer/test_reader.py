"""
test_reader.py
--------------
Unit tests for upload decoding and CSV splitting.
"""
import pytest

from vidpod.core.exceptions import ImportFileError
from vidpod.importer import columns
from vidpod.importer.reader import decode_upload, read_csv


class TestDecodeUpload:
    """Test decode_upload()."""

    def test_plain_utf8(self):
        assert decode_upload("idea_title\nCafé".encode("utf-8")) == "idea_title\nCafé"

    def test_byte_order_mark_removed(self):
        assert decode_upload(b"\xef\xbb\xbfidea_title\nA") == "idea_title\nA"

    def test_accepts_text(self):
        assert decode_upload("idea_title\nA") == "idea_title\nA"

    def test_missing_upload(self):
        with pytest.raises(ImportFileError, match="No CSV file uploaded"):
            decode_upload(None)

    @pytest.mark.parametrize("data", [b"", b"  \n\n "])
    def test_empty_upload(self, data):
        with pytest.raises(ImportFileError, match="CSV file is empty"):
            decode_upload(data)

    def test_invalid_utf8(self):
        with pytest.raises(ImportFileError, match="not valid UTF-8"):
            decode_upload("idea_title\nCafé".encode("latin-1"))

    def test_too_large(self, monkeypatch):
        monkeypatch.setattr("vidpod.importer.reader.MAX_UPLOAD_BYTES", 10)
        with pytest.raises(ImportFileError, match="too large"):
            decode_upload(b"idea_title\n" + b"x" * 20)


class TestReadCsv:
    """Test read_csv()."""

    def test_headers_normalized_and_rows_numbered(self):
        parsed = read_csv(b"Idea Title,Start-Date\nA,2024-01-15\nB,\n")
        assert parsed.headers == ["idea_title", "start_date"]
        assert [record.row for record in parsed.rows] == [2, 3]
        assert parsed.rows[0].values == {"idea_title": "A", "start_date": "2024-01-15"}

    def test_blank_rows_skipped_but_counted(self):
        parsed = read_csv(b"title\nA\n,\n\nB\n")
        assert [record.values["title"] for record in parsed.rows] == ["A", "B"]
        assert [record.row for record in parsed.rows] == [2, 5]
        assert parsed.blank_rows == 2

    def test_leading_blank_lines_ignored(self):
        parsed = read_csv(b"\n\ntitle\nA\n")
        assert parsed.rows[0].row == 2

    def test_short_and_long_rows(self):
        parsed = read_csv(b"title,tags\nA\nB,x,extra\n")
        assert parsed.rows[0].values == {"title": "A", "tags": ""}
        assert parsed.rows[1].values == {"title": "B", "tags": "x"}

    def test_quoted_cells_keep_commas_and_newlines(self):
        parsed = read_csv(b'title,tags\n"Lunch, Revisited","a, b"\n"Two\nLines",\n')
        assert parsed.rows[0].values["title"] == "Lunch, Revisited"
        assert parsed.rows[0].values["tags"] == "a, b"
        assert parsed.rows[1].values["title"] == "Two\nLines"

    def test_duplicate_headers_first_non_empty_wins(self):
        parsed = read_csv(b"title,Title\n,Second\nFirst,Other\n")
        assert parsed.rows[0].values["title"] == "Second"
        assert parsed.rows[1].values["title"] == "First"

    def test_header_only_file_has_no_rows(self):
        parsed = read_csv(b"idea_title,tags\n")
        assert parsed.rows == []

    def test_missing_title_column(self):
        with pytest.raises(ImportFileError, match="no title column"):
            read_csv(b"description,tags\nA,b\n")

    def test_too_many_rows(self, monkeypatch):
        monkeypatch.setattr("vidpod.importer.reader.MAX_ROWS", 2)
        with pytest.raises(ImportFileError, match="limit is 2"):
            read_csv(b"title\nA\nB\nC\n")

    def test_default_limits(self):
        assert columns.MAX_ROWS == 1000
        assert columns.MAX_UPLOAD_BYTES == 10 * 1024 * 1024
