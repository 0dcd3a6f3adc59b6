import string

import pytest

from crypto_utils.ciphers import caesar


class TestCaesarEncrypt:
    """Test suite for Caesar encryption"""

    def test_lowercase_shift(self):
        """Test the basic lowercase rotation"""
        assert caesar.encrypt("abc", 2) == "cde"

    def test_wraps_around(self):
        """Test that rotation wraps from z back to a"""
        assert caesar.encrypt("xyz", 3) == "abc"
        assert caesar.encrypt("XYZ", 3) == "ABC"

    def test_preserves_case(self):
        """Test that each letter stays in its own case"""
        assert caesar.encrypt("Hello World", 3) == "Khoor Zruog"

    def test_non_letters_unchanged(self):
        """Test that digits, punctuation and non-ASCII pass through"""
        text = "123 !?,. é ß -_"
        assert caesar.encrypt(text, 7) == text

    def test_negative_shift(self):
        """Test that negative shifts rotate backwards"""
        assert caesar.encrypt("cde", -2) == "abc"

    def test_large_shift(self):
        """Test that shifts beyond 25 are taken modulo 26"""
        assert caesar.encrypt("abc", 28) == "cde"
        assert caesar.encrypt("abc", 26) == "abc"

    def test_empty_text(self):
        """Test that empty text stays empty"""
        assert caesar.encrypt("", 5) == ""


class TestCaesarDecrypt:
    """Test suite for Caesar decryption"""

    def test_decrypt(self):
        """Test the basic inverse"""
        assert caesar.decrypt("cde", 2) == "abc"

    @pytest.mark.parametrize("shift", range(26))
    def test_decrypt_is_complementary_encrypt(self, shift):
        """Test that decrypt(C, s) equals encrypt(C, 26 - s) exactly"""
        text = "The Quick Brown Fox, 42!"
        assert caesar.decrypt(text, shift) == caesar.encrypt(text, 26 - shift)

    def test_shift_zero_is_noop(self):
        """Test that a zero shift leaves text untouched both ways"""
        assert caesar.encrypt("Attack at dawn", 0) == "Attack at dawn"
        assert caesar.decrypt("Attack at dawn", 0) == "Attack at dawn"

    @pytest.mark.parametrize("shift", [-30, -1, 1, 13, 25, 27, 100])
    def test_round_trip_any_shift(self, shift):
        """Test round trips for shifts outside the generated range"""
        text = string.ascii_letters + " 0123456789"
        assert caesar.decrypt(caesar.encrypt(text, shift), shift) == text
