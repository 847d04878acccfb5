"""Tests for vcs_jump.scan.grep and vcs_jump.scan.ws modules."""

import pytest

from vcs_jump.exceptions import UnsupportedOperation
from vcs_jump.scan.grep import parse_grep, scan_grep
from vcs_jump.scan.models import LocationRecord
from vcs_jump.scan.ws import parse_check, scan_ws


class TestParseGrep:
    """Tests for parse_grep function."""

    def test_basic_matches(self):
        """Test path:line:text lines become records."""
        output = "src/app.py:12:def main():\nREADME.md:3:main entry\n"

        assert parse_grep(output) == [
            LocationRecord(file="src/app.py", line=12, text="def main():"),
            LocationRecord(file="README.md", line=3, text="main entry"),
        ]

    def test_whitespace_is_collapsed(self):
        """Test tabs and space runs collapse to one space."""
        output = "  lib.c:40:\t\tint   count = 0;\n"

        assert parse_grep(output) == [
            LocationRecord(file="lib.c", line=40, text="int count = 0;")
        ]

    def test_colons_in_text(self):
        """Test colons after the line number stay in the text."""
        records = parse_grep("conf.ini:7:url = http://host:80/\n")

        assert records[0].text == "url = http://host:80/"

    def test_unparseable_lines_skipped(self):
        """Test lines without a line number are ignored."""
        assert parse_grep("Binary file logo.png matches\n\n") == []


class TestScanGrep:
    """Tests for scan_grep function."""

    def test_git_invocation(self, mocker, completed, git_vcs):
        """Test git grep -n is run with the user arguments."""
        mock_run = mocker.patch("subprocess.run", return_value=completed("a.py:1:TODO\n"))

        records = scan_grep(git_vcs, ["-e", "TODO"])

        assert mock_run.call_args[0][0] == ["git", "grep", "-n", "-e", "TODO"]
        assert records == [LocationRecord(file="a.py", line=1, text="TODO")]

    def test_no_matches(self, mocker, completed, git_vcs):
        """Test exit status 1 means no matches, not an error."""
        mocker.patch("subprocess.run", return_value=completed("", returncode=1))

        assert scan_grep(git_vcs, ["nothing"]) == []

    def test_hg_unsupported(self, mocker, hg_vcs):
        """Test grep under hg raises UnsupportedOperation without running hg."""
        mock_run = mocker.patch("subprocess.run")

        with pytest.raises(UnsupportedOperation):
            scan_grep(hg_vcs, ["pattern"])

        mock_run.assert_not_called()


class TestWhitespaceScan:
    """Tests for parse_check and scan_ws functions."""

    def test_parse_check(self):
        """Test diff --check messages become records and content lines are skipped."""
        output = (
            "app.py:10: trailing whitespace.\n"
            "+x = 1   \n"
            "docs/a.md:3: space before tab in indent.\n"
            "+ \tfoo\n"
        )

        assert parse_check(output) == [
            LocationRecord(file="app.py", line=10, text="trailing whitespace."),
            LocationRecord(file="docs/a.md", line=3, text="space before tab in indent."),
        ]

    def test_scan_ws_accepts_check_status(self, mocker, completed, git_vcs):
        """Test the non-zero status of diff --check is not an error."""
        mock_run = mocker.patch(
            "subprocess.run",
            return_value=completed("app.py:10: trailing whitespace.\n+x  \n", returncode=2),
        )

        records = scan_ws(git_vcs, ["HEAD"])

        assert mock_run.call_args[0][0] == ["git", "diff", "--check", "--relative", "HEAD"]
        assert len(records) == 1

    def test_scan_ws_hg_unsupported(self, hg_vcs):
        """Test ws mode requires git."""
        with pytest.raises(UnsupportedOperation):
            scan_ws(hg_vcs, [])
