"""Tests for exception classes."""

import pytest

from tapsmith.exceptions import (
    AssetNotFoundError,
    ChecksumError,
    FormulaError,
    FormulaWriteError,
    ReleaseError,
    SlugError,
    TapsmithError,
    VersionError,
)


class TestTapsmithError:
    """Test the shared error behaviour."""

    def test_basic_initialization(self):
        """Test basic error initialization."""
        error = FormulaError("no version detected")
        assert error.message == "no version detected"
        assert error.target is None
        assert str(error) == "Invalid formula: no version detected"

    def test_initialization_with_target(self):
        """Test initialization with target parameter."""
        error = FormulaError("no url detected", target="ghg.rb")
        assert error.target == "ghg.rb"
        assert str(error) == "Invalid formula for 'ghg.rb': no url detected"

    @pytest.mark.parametrize(
        "error_class",
        [
            FormulaError,
            FormulaWriteError,
            VersionError,
            ReleaseError,
            AssetNotFoundError,
            ChecksumError,
            SlugError,
        ],
    )
    def test_inheritance(self, error_class):
        """Test every error can be caught as TapsmithError."""
        with pytest.raises(TapsmithError) as exc_info:
            raise error_class("boom", target="x")
        assert exc_info.value.message == "boom"
        assert str(exc_info.value).endswith("for 'x': boom")

    def test_distinct_actions(self):
        """Test messages name the failing operation."""
        assert str(ChecksumError("HTTP 404", target="u")).startswith("Checksum failed")
        assert str(ReleaseError("x")).startswith("Release lookup failed")
