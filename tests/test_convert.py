"""
Tests for part post-processing.
"""

from metrika_logs.convert import tsv_to_csv


class TestTsvToCsv:
    """Tests for tsv_to_csv."""

    def test_default_conversion(self, tmp_path):
        src = tmp_path / "123_42_0-abc.csv"
        src.write_text('ym:s:visitID\tym:s:date\n1\t"2024-01-01"\n2\t2024-01-02\n', encoding="utf-8")

        dst = tsv_to_csv(src)

        assert dst == tmp_path / "123_42_0-abc.converted.csv"
        assert dst.read_text(encoding="utf-8") == (
            "ym:s:visitID|ym:s:date\n1|2024-01-01\n2|2024-01-02\n"
        )
        # Source is left untouched
        assert '"2024-01-01"' in src.read_text(encoding="utf-8")

    def test_keep_quotes_and_custom_delimiter(self, tmp_path):
        src = tmp_path / "part.csv"
        src.write_text("a\tb\n1\tx\n", encoding="utf-8")
        dst = tmp_path / "out.csv"

        result = tsv_to_csv(src, dst, delimiter=";", strip_quotes=False)

        assert result == dst
        assert dst.read_text(encoding="utf-8") == "a;b\n1;x\n"

    def test_crlf_input(self, tmp_path):
        src = tmp_path / "part.csv"
        src.write_bytes(b"a\tb\r\n1\t2\r\n")

        dst = tsv_to_csv(src)

        assert dst.read_bytes() == b"a|b\n1|2\n"

    def test_empty_file(self, tmp_path):
        src = tmp_path / "part.csv"
        src.write_bytes(b"")

        assert tsv_to_csv(src).read_bytes() == b""

    def test_unicode(self, tmp_path):
        src = tmp_path / "part.csv"
        src.write_text("город\tдата\nМосква\t2024-01-01\n", encoding="utf-8")

        assert tsv_to_csv(src).read_text(encoding="utf-8") == "город|дата\nМосква|2024-01-01\n"
