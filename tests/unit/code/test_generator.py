"""Tests for code generation."""

import string

import pytest

from rafflecode.core.modules.code.generator import CHARSETS, generate_code, generate_random_string
from rafflecode.core.modules.code.models import CodeType


class TestGenerateCode:
    """Tests for generate_code function."""

    def test_alphabetic_code(self):
        """Test that alphabetic codes have 7 uppercase letters."""
        for _ in range(50):
            code = generate_code(CodeType.ALPHABETIC)
            assert len(code) == 7
            assert all(c in string.ascii_uppercase for c in code)

    def test_alphanumeric_code(self):
        """Test that alphanumeric codes use only uppercase letters and digits."""
        allowed = set(string.ascii_uppercase + string.digits)
        for _ in range(50):
            code = generate_code(CodeType.ALPHANUMERIC)
            assert len(code) == 7
            assert set(code) <= allowed
            assert code == code.upper()

    def test_custom_length(self):
        assert len(generate_code(CodeType.ALPHANUMERIC, length=12)) == 12

    def test_charsets(self):
        """Test charset sizes for each type."""
        assert len(CHARSETS[CodeType.ALPHABETIC]) == 26
        assert len(CHARSETS[CodeType.ALPHANUMERIC]) == 36


class TestGenerateRandomString:
    """Tests for generate_random_string function."""

    def test_uses_only_charset(self):
        result = generate_random_string("ab", 20)
        assert len(result) == 20
        assert set(result) <= {"a", "b"}

    def test_empty_charset_rejected(self):
        with pytest.raises(ValueError, match="Charset must not be empty"):
            generate_random_string("", 7)
