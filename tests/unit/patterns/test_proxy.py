"""Tests for the protection proxy."""
from unittest.mock import Mock

from pattern_catalog.patterns.structural.proxy import File, NormalFile, SecuredFile, demo


class TestSecuredFile:
    """Test password-guarded reads."""

    def setup_method(self):
        """Set up test fixtures."""
        self.mock_file = Mock(spec=File)
        self.secured_file = SecuredFile(self.mock_file)

    def test_read_denied_without_password(self, capsys):
        """Test that reads are refused by default."""
        self.secured_file.read("readme.md")

        self.mock_file.read.assert_not_called()
        assert capsys.readouterr().out == "Incorrect password. Access denied!\n"

    def test_read_denied_with_wrong_password(self):
        """Test that a wrong password is refused."""
        self.secured_file.password = "guess"
        self.secured_file.read("readme.md")

        self.mock_file.read.assert_not_called()

    def test_read_delegated_with_correct_password(self, capsys):
        """Test that the secret password lets the read through."""
        self.secured_file.password = "secret"
        self.secured_file.read("readme.md")

        self.mock_file.read.assert_called_once_with("readme.md")
        assert capsys.readouterr().out == "Password is correct: secret\n"

    def test_demo_output(self, capsys):
        """Test the demonstration output."""
        demo()
        assert capsys.readouterr().out.splitlines() == [
            "Incorrect password. Access denied!",
            "Password is correct: secret",
            "Reading file: readme.md",
        ]

    def test_normal_file_reads(self, capsys):
        """Test the real subject."""
        NormalFile().read("notes.txt")
        assert capsys.readouterr().out == "Reading file: notes.txt\n"
