"""Unit tests for header persistence."""

import pytest

from tweet_scraper.auth import load_headers, save_headers
from tweet_scraper.auth.persistence import load_auth, save_auth
from tweet_scraper.core import HeaderLoadError, HeaderSaveError, NoGuestTokenError


class TestHeaderRoundTrip:
    def test_round_trip(self, tmp_path):
        """Test saving then loading reproduces the same mapping."""
        headers = {
            "authorization": "Bearer AAAA%3Dbbb",
            "x-guest-token": "1590000000000000000",
            "x-extra": "a=b=c",
        }
        path = tmp_path / "headers.txt"

        save_headers(headers, path)

        assert load_headers(path) == headers

    def test_file_format(self, tmp_path):
        path = tmp_path / "headers.txt"
        save_headers({"a": "1", "b": "x=y"}, path)
        assert path.read_text(encoding="utf-8") == "a=1\nb=x=y\n"

    def test_auth_round_trip(self, tmp_path, auth):
        path = tmp_path / "auth.txt"
        save_auth(auth, path)
        assert load_auth(path) == auth


class TestLoadHeaders:
    def test_blank_lines_ignored_and_names_lower_cased(self, tmp_path):
        path = tmp_path / "headers.txt"
        path.write_text("\nAuthorization=Bearer x\n   \nx-guest-token=42\n", encoding="utf-8")

        assert load_headers(path) == {"authorization": "Bearer x", "x-guest-token": "42"}

    def test_first_equals_separates(self, tmp_path):
        path = tmp_path / "headers.txt"
        path.write_text("cookie=gt=42; ct0=abc\n", encoding="utf-8")

        assert load_headers(path) == {"cookie": "gt=42; ct0=abc"}

    def test_line_without_equals(self, tmp_path):
        path = tmp_path / "headers.txt"
        path.write_text("authorization=Bearer x\nbroken line\n", encoding="utf-8")

        with pytest.raises(HeaderLoadError) as exc_info:
            load_headers(path)
        assert "no '=' found" in exc_info.value.reason
        assert exc_info.value.path == path

    def test_invalid_header_name(self, tmp_path):
        path = tmp_path / "headers.txt"
        path.write_text("bad name=1\n", encoding="utf-8")

        with pytest.raises(HeaderLoadError):
            load_headers(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(HeaderLoadError):
            load_headers(tmp_path / "missing.txt")

    def test_not_utf8(self, tmp_path):
        path = tmp_path / "headers.txt"
        path.write_bytes(b"x-guest-token=\xff\xfe\n")

        with pytest.raises(HeaderLoadError):
            load_headers(path)

    def test_load_auth_checks_credentials(self, tmp_path):
        path = tmp_path / "headers.txt"
        path.write_text("authorization=Bearer x\n", encoding="utf-8")

        with pytest.raises(NoGuestTokenError):
            load_auth(path)


class TestSaveHeaders:
    def test_rejects_newline_in_value(self, tmp_path):
        with pytest.raises(HeaderSaveError):
            save_headers({"a": "1\n2"}, tmp_path / "h.txt")

    def test_rejects_equals_in_name(self, tmp_path):
        with pytest.raises(HeaderSaveError):
            save_headers({"a=b": "1"}, tmp_path / "h.txt")

    def test_unwritable_path(self, tmp_path):
        with pytest.raises(HeaderSaveError):
            save_headers({"a": "1"}, tmp_path / "missing-dir" / "h.txt")
