import pytest

from password_ruler import classifier
from password_ruler.classifier import AsciiClassifier, is_whitespace


class TestAsciiClassifier:
    def test_from_characters_marks_members_only(self):
        vowels = AsciiClassifier.from_characters("aeiou")
        assert vowels.matches("a")
        assert "u" in vowels
        assert not vowels.matches("b")
        assert sum(vowels.table) == 5

    def test_membership_operator(self):
        digits = classifier.ASCII_DIGITS
        assert "7" in digits
        assert "a" not in digits
        assert "٣" not in digits

    def test_from_characters_rejects_non_ascii(self):
        with pytest.raises(ValueError):
            AsciiClassifier.from_characters("é")

    def test_table_must_cover_ascii_range(self):
        with pytest.raises(ValueError):
            AsciiClassifier((True,) * 10)

    def test_non_ascii_never_matches(self):
        assert not classifier.ASCII_LETTERS.matches("é")
        assert not classifier.ASCII_DIGITS.matches("٣")
        assert classifier.ASCII_LETTERS.count_matches("héllo") == 4

    def test_union(self):
        ab = AsciiClassifier.from_characters("a").union(
            AsciiClassifier.from_characters("b")
        )
        assert ab == AsciiClassifier.from_characters("ab")
        assert (
            AsciiClassifier.from_characters("a") | AsciiClassifier.from_characters("b")
        ) == ab

    def test_intersection(self):
        left = AsciiClassifier.from_characters("abc")
        right = AsciiClassifier.from_characters("bcd")
        assert left.intersection(right) == AsciiClassifier.from_characters("bc")
        assert (left & right) == AsciiClassifier.from_characters("bc")

    def test_count_matches(self):
        assert classifier.ASCII_DIGITS.count_matches("a1b2c3") == 3
        assert classifier.ASCII_DIGITS.count_matches("") == 0

    def test_repr_lists_members(self):
        assert repr(AsciiClassifier.from_characters("ba")) == "AsciiClassifier('ab')"


class TestDerivedClasses:
    def test_letters_is_union_of_cases(self):
        assert classifier.ASCII_LETTERS == AsciiClassifier.from_characters(
            classifier.ASCII_LETTER_CHARACTERS
        )

    def test_alphanumeric_is_union_of_letters_and_digits(self):
        assert classifier.ASCII_ALPHANUMERIC == AsciiClassifier.from_characters(
            classifier.ASCII_ALPHANUMERIC_CHARACTERS
        )

    def test_classes_are_disjoint(self):
        empty = AsciiClassifier.from_characters("")
        assert (classifier.ASCII_LETTERS & classifier.ASCII_DIGITS) == empty
        assert (classifier.ASCII_ALPHANUMERIC & classifier.ASCII_SYMBOLS) == empty
        assert (
            classifier.ASCII_LOWERCASE_LETTERS & classifier.ASCII_UPPERCASE_LETTERS
        ) == empty

    def test_symbols(self):
        assert classifier.ASCII_SYMBOLS.count_matches("a,b.c\\d") == 3
        assert not classifier.ASCII_SYMBOLS.matches(" ")

    def test_character_sets_hold_no_duplicates(self):
        for chars in (
            classifier.ASCII_LOWERCASE_LETTER_CHARACTERS,
            classifier.ASCII_UPPERCASE_LETTER_CHARACTERS,
            classifier.ASCII_LETTER_CHARACTERS,
            classifier.ASCII_DIGIT_CHARACTERS,
            classifier.ASCII_ALPHANUMERIC_CHARACTERS,
            classifier.ASCII_SYMBOL_CHARACTERS,
        ):
            assert len(set(chars)) == len(chars)


class TestWhitespace:
    @pytest.mark.parametrize("char", [" ", "\t", "\n", "\u00a0", "\u2003"])
    def test_whitespace(self, char):
        assert is_whitespace(char)

    @pytest.mark.parametrize("char", ["a", "1", "_", "é"])
    def test_not_whitespace(self, char):
        assert not is_whitespace(char)
