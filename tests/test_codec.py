"""
Tests for the alphabet and the bijective codec.
"""
import pytest

from shorty.codec import Alphabet, encode, decode
from shorty.config import DEFAULT_ALPHABET
from shorty.exceptions import ConfigurationError, InvalidCharacter


class TestAlphabet:
    """Test alphabet validation and lookups"""

    def test_base_is_length(self):
        assert Alphabet("abc").base == 3
        assert Alphabet(DEFAULT_ALPHABET).base == 62

    @pytest.mark.parametrize("chars", ["", "a", "abca", "xx"])
    def test_rejects_invalid_alphabets(self, chars):
        with pytest.raises(ConfigurationError):
            Alphabet(chars)

    def test_position(self):
        alphabet = Alphabet("xyz")
        assert alphabet.position("x") == 0
        assert alphabet.position("z") == 2

    def test_position_of_unknown_character(self):
        with pytest.raises(InvalidCharacter) as exc_info:
            Alphabet("xyz").position("q", "xqz")
        assert exc_info.value.char == "q"
        assert exc_info.value.code == "xqz"

    def test_matches(self):
        alphabet = Alphabet(DEFAULT_ALPHABET)
        assert alphabet.matches("aZ9")
        assert not alphabet.matches("")
        assert not alphabet.matches("ab-c")
        assert not alphabet.matches("!!!")

    def test_matches_escapes_special_characters(self):
        alphabet = Alphabet("-]^\\")
        assert alphabet.matches("-]^\\")
        assert not alphabet.matches("a")


class TestEncode:
    """Test integer -> string encoding"""

    def test_base3_examples(self):
        # 10 = 1*9 + 0*3 + 1 -> digits 1,0,1
        assert encode(0, "abc") == "a"
        assert encode(1, "abc") == "b"
        assert encode(2, "abc") == "c"
        assert encode(3, "abc") == "ba"
        assert encode(9, "abc") == "baa"
        assert encode(10, "abc") == "bab"

    def test_default_alphabet_examples(self):
        assert encode(0, DEFAULT_ALPHABET) == "a"
        assert encode(61, DEFAULT_ALPHABET) == "9"
        assert encode(62, DEFAULT_ALPHABET) == "ba"
        assert encode(125, DEFAULT_ALPHABET) == "cb"
        assert encode(3843, DEFAULT_ALPHABET) == "99"
        assert encode(3844, DEFAULT_ALPHABET) == "baa"

    def test_no_leading_zero_digit(self):
        for n in range(1, 500):
            code = encode(n, "abc")
            assert code[0] != "a"

    def test_negative_rejected(self):
        with pytest.raises(ValueError):
            encode(-1, "abc")

    def test_alphabet_sensitivity(self):
        assert encode(12345, "abcdef") != encode(12345, "fedcba")
        assert encode(12345, DEFAULT_ALPHABET) != encode(12345, "0123456789")


class TestDecode:
    """Test string -> integer decoding"""

    def test_base3_examples(self):
        assert decode("a", "abc") == 0
        assert decode("ba", "abc") == 3
        assert decode("bab", "abc") == 10

    def test_invalid_character(self):
        with pytest.raises(InvalidCharacter):
            decode("ab!", "abc")

    def test_non_canonical_input_still_decodes(self):
        # Leading zeroth characters are outside encode()'s image
        assert decode("aab", "abc") == 1

    @pytest.mark.parametrize("alphabet", ["01", "abc", "0123456789", DEFAULT_ALPHABET])
    def test_round_trip(self, alphabet):
        for n in list(range(0, 1000)) + [2 ** 31 - 1, 2 ** 53, 2 ** 63 - 1, 10 ** 30]:
            assert decode(encode(n, alphabet), alphabet) == n

    def test_large_numbers_do_not_overflow(self):
        n = 2 ** 64 + 12345
        assert decode(encode(n, DEFAULT_ALPHABET), DEFAULT_ALPHABET) == n
