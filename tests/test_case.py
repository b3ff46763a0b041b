"""Tests for the sentence-case and title-case transformers."""

import pytest

from apa_references.domain.formatting.case import abbreviate_title, sentence_case, title_case


class TestSentenceCase:
    def test_title_and_subtitle(self):
        assert sentence_case("THE EFFECTS OF NOISE: A STUDY") == "The effects of noise: A study"

    def test_empty(self):
        assert sentence_case("") == ""

    def test_single_part(self):
        assert sentence_case("machine learning in EDUCATION") == "Machine learning in education"

    def test_multiple_colons(self):
        assert sentence_case("one: two: three") == "One: Two: Three"

    def test_spacing_normalised_around_colon(self):
        assert sentence_case("Title :subtitle") == "Title: Subtitle"


class TestTitleCase:
    def test_minor_words_lowercased(self):
        assert title_case("journal of applied psychology") == "Journal of Applied Psychology"

    def test_first_word_always_capitalized(self):
        assert title_case("the lancet") == "The Lancet"

    def test_word_after_colon_capitalized(self):
        assert title_case("science: an introduction") == "Science: An Introduction"

    @pytest.mark.parametrize("mark", [".", "?", "!"])
    def test_word_after_sentence_punctuation(self, mark):
        assert title_case(f"why{mark} the answer") == f"Why{mark} The Answer"

    def test_upper_input_normalised(self):
        assert title_case("NATURE AND SCIENCE") == "Nature and Science"

    def test_empty(self):
        assert title_case("") == ""


class TestAbbreviateTitle:
    def test_truncated_with_ellipsis(self):
        assert abbreviate_title("Climate Change Impacts on Coastal Regions") == "Climate Change Impacts..."

    def test_short_title_unchanged(self):
        assert abbreviate_title("Climate Change") == "Climate Change"

    def test_exactly_three_words(self):
        assert abbreviate_title("One Two Three") == "One Two Three"
