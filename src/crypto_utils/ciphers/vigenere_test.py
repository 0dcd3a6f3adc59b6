import pytest

from crypto_utils.ciphers import vigenere
from crypto_utils.errors import EmptyKeyError


class TestVigenere:
    """Test suite for the Vigenère cipher"""

    def test_classic_vector(self):
        """Test the textbook ATTACKATDAWN / LEMON example"""
        assert vigenere.encrypt("ATTACKATDAWN", "LEMON") == "LXFOPVEFRNHR"
        assert vigenere.decrypt("LXFOPVEFRNHR", "LEMON") == "ATTACKATDAWN"

    def test_non_letters_do_not_consume_keyword(self):
        """Test that the space in "AB CD" does not advance the keyword"""
        # K=10, E=4, Y=24, then K again for D
        assert vigenere.encrypt("AB CD", "KEY") == "KF AN"

    def test_preserves_case(self):
        """Test that plaintext case is kept"""
        assert vigenere.encrypt("attack at dawn", "LEMON") == "lxfopv ef rnhr"

    def test_keyword_case_is_irrelevant(self):
        """Test that keyword case does not change the shift"""
        assert vigenere.encrypt("Hello", "key") == vigenere.encrypt("Hello", "KEY")

    def test_keyword_non_letters_ignored(self):
        """Test that digits and spaces in the keyword are skipped"""
        assert vigenere.encrypt("Hello", "K-E 1Y") == vigenere.encrypt("Hello", "KEY")

    def test_round_trip(self):
        """Test decrypt(encrypt(P)) == P with mixed content"""
        text = "Meet me at 10:30, by the old oak! Ça va?"
        assert vigenere.decrypt(vigenere.encrypt(text, "Cipher"), "Cipher") == text

    @pytest.mark.parametrize("keyword", ["", "123", " -!"])
    def test_keyword_without_letters(self, keyword):
        """Test that a keyword with no letters is rejected"""
        with pytest.raises(EmptyKeyError):
            vigenere.encrypt("text", keyword)
        with pytest.raises(EmptyKeyError):
            vigenere.decrypt("text", keyword)

    def test_keyword_shifts(self):
        """Test the A=0..Z=25 mapping"""
        assert vigenere.keyword_shifts("AzY") == [0, 25, 24]

    def test_keyword_non_ascii_letters_ignored(self):
        """Test that characters whose upper case expands to several letters are skipped"""
        assert vigenere.keyword_shifts("straße") == vigenere.keyword_shifts("strae")
        assert vigenere.keyword_shifts("ﬁx") == vigenere.keyword_shifts("x")
        assert vigenere.encrypt("AAAAAAA", "straße") == "STRAEST"

    @pytest.mark.parametrize("keyword", ["ß", "é", "ﬁ"])
    def test_keyword_only_non_ascii(self, keyword):
        """Test that a keyword of non-ASCII letters has no usable letters"""
        with pytest.raises(EmptyKeyError):
            vigenere.keyword_shifts(keyword)
