import pytest

from crypto_utils.algorithms import ALGORITHMS, Algorithm, CiphertextEncoding, KeyShape, describe
from crypto_utils.errors import ValidationError


class TestAlgorithm:
    """Test suite for the Algorithm enumeration"""

    def test_closed_set(self):
        """Test that exactly six algorithms are supported"""
        assert [a.value for a in Algorithm] == ["AES", "TripleDES", "RSA", "XOR", "Caesar", "Vigenere"]

    @pytest.mark.parametrize(
        "name,expected",
        [
            ("AES", Algorithm.AES),
            ("aes", Algorithm.AES),
            ("TripleDES", Algorithm.TRIPLE_DES),
            ("3DES", Algorithm.TRIPLE_DES),
            ("des3", Algorithm.TRIPLE_DES),
            ("caesar", Algorithm.CAESAR),
            ("Vigenère", Algorithm.VIGENERE),
            (" rsa ", Algorithm.RSA),
            (Algorithm.XOR, Algorithm.XOR),
        ],
    )
    def test_parse(self, name, expected):
        """Test case-insensitive parsing and aliases"""
        assert Algorithm.parse(name) is expected

    def test_parse_unknown(self):
        """Test that an unknown name is a validation error"""
        with pytest.raises(ValidationError, match="Unknown algorithm"):
            Algorithm.parse("Blowfish")

    def test_str(self):
        """Test that str() gives the tag value"""
        assert str(Algorithm.TRIPLE_DES) == "TripleDES"


class TestAlgorithmInfo:
    """Test suite for registry metadata"""

    def test_every_algorithm_described(self):
        """Test that each algorithm has an info entry"""
        assert set(ALGORITHMS) == set(Algorithm)

    def test_key_shapes(self):
        """Test the key shape each algorithm requires"""
        assert describe("AES").key_shape is KeyShape.PASSPHRASE
        assert describe("XOR").key_shape is KeyShape.PASSPHRASE
        assert describe("RSA").key_shape is KeyShape.KEYPAIR
        assert describe("Caesar").key_shape is KeyShape.SHIFT
        assert describe("Vigenere").key_shape is KeyShape.KEYWORD

    def test_encodings(self):
        """Test that classical ciphers produce plain text"""
        assert describe("Caesar").encoding is CiphertextEncoding.PLAIN
        assert describe("3DES").encoding is CiphertextEncoding.BASE64
