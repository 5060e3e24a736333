"""Tests for shared punctuation and case helpers."""

from dictation_cleanup.text import (
    clean_word,
    is_alphabetic,
    preserve_case_pattern,
    split_punctuation,
)


class TestIsAlphabetic:
    """Tests for is_alphabetic."""

    def test_letters(self):
        """Test ASCII and accented letters."""
        assert is_alphabetic("a")
        assert is_alphabetic("é")

    def test_combining_vowel_sign(self):
        """Test dependent vowel signs count as alphabetic."""
        assert is_alphabetic("\u0947")  # DEVANAGARI VOWEL SIGN E

    def test_non_letters(self):
        """Test digits, punctuation and spaces."""
        assert not is_alphabetic("1")
        assert not is_alphabetic("!")
        assert not is_alphabetic(" ")


class TestSplitPunctuation:
    """Tests for split_punctuation."""

    def test_plain_word(self):
        """Test word without punctuation."""
        assert split_punctuation("hello") == ("", "hello", "")

    def test_leading_and_trailing(self):
        """Test punctuation on both ends."""
        assert split_punctuation("!hello?") == ("!", "hello", "?")
        assert split_punctuation("...hello...") == ("...", "hello", "...")

    def test_inner_punctuation_stays_in_core(self):
        """Test apostrophes and hyphens between letters are kept."""
        assert split_punctuation("don't,") == ("", "don't", ",")
        assert split_punctuation("(well-known)") == ("(", "well-known", ")")

    def test_digits_are_stripped(self):
        """Test digits count as non-alphabetic."""
        assert split_punctuation("2nd") == ("2", "nd", "")

    def test_no_letters(self):
        """Test token made only of symbols."""
        assert split_punctuation("123") == ("123", "", "")
        assert split_punctuation("--") == ("--", "", "")

    def test_empty(self):
        """Test empty token."""
        assert split_punctuation("") == ("", "", "")

    def test_unicode_letters(self):
        """Test non-ASCII letters count as alphabetic."""
        assert split_punctuation("«café»") == ("«", "café", "»")

    def test_trailing_vowel_sign_stays_in_core(self):
        """Test a word ending in a combining vowel sign is not split."""
        assert split_punctuation("नमस्ते") == ("", "नमस्ते", "")
        assert split_punctuation("नमस्ते!") == ("", "नमस्ते", "!")


class TestCleanWord:
    """Tests for clean_word."""

    def test_lowercases_core(self):
        """Test punctuation is dropped and case folded."""
        assert clean_word("(Hello!)") == "hello"

    def test_symbols_only(self):
        """Test symbols-only token cleans to empty."""
        assert clean_word("?!") == ""


class TestPreserveCasePattern:
    """Tests for preserve_case_pattern."""

    def test_all_uppercase(self):
        """Test uppercase original uppercases the replacement."""
        assert preserve_case_pattern("HELLO", "world") == "WORLD"

    def test_capitalized(self):
        """Test capitalized original capitalizes only the first character."""
        assert preserve_case_pattern("Hello", "world") == "World"
        assert preserve_case_pattern("Hello", "iPhone") == "IPhone"

    def test_lowercase_keeps_replacement(self):
        """Test lowercase original leaves replacement as given."""
        assert preserve_case_pattern("hello", "WORLD") == "WORLD"
        assert preserve_case_pattern("hello", "PostgreSQL") == "PostgreSQL"

    def test_single_uppercase_letter(self):
        """Test one-letter uppercase original counts as all uppercase."""
        assert preserve_case_pattern("I", "eye") == "EYE"

    def test_punctuation_is_not_uppercase(self):
        """Test the raw token decides: punctuation breaks the all-uppercase rule."""
        assert preserve_case_pattern("HELLO!", "world") == "World"
        assert preserve_case_pattern("(Hello)", "world") == "world"

    def test_empty(self):
        """Test empty inputs."""
        assert preserve_case_pattern("", "world") == "world"
        assert preserve_case_pattern("Hello", "") == ""
