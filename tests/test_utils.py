"""Unit tests for utility functions."""

import pytest

from modsync.utils import format_size, is_mod_name


class TestFormatSize:
    """Tests for format_size function."""

    def test_bytes(self):
        assert format_size(0) == "0 B"
        assert format_size(512) == "512 B"
        assert format_size(1023) == "1023 B"

    def test_kilobytes(self):
        assert format_size(1024) == "1.0 KB"
        assert format_size(1536) == "1.5 KB"

    def test_megabytes(self):
        assert format_size(1024 * 1024) == "1.0 MB"
        assert format_size(25 * 1024 * 1024) == "25.0 MB"

    def test_gigabytes(self):
        assert format_size(1024 * 1024 * 1024) == "1.0 GB"
        assert format_size(int(2.5 * 1024 * 1024 * 1024)) == "2.5 GB"


class TestIsModName:
    """Tests for is_mod_name function."""

    @pytest.mark.parametrize("name", ["a.jar", "jei-1.20.1-15.2.0.jar", ".jar"])
    def test_valid(self, name):
        assert is_mod_name(name)

    @pytest.mark.parametrize(
        "name",
        ["", "a.zip", "a.jar.disabled", "mods/a.jar", "..\\a.jar", ".", ".."],
    )
    def test_invalid(self, name):
        assert not is_mod_name(name)

    def test_custom_suffix(self):
        assert is_mod_name("pack.zip", suffix=".zip")
        assert not is_mod_name("a.jar", suffix=".zip")
