"""Tests for title casing and slug generation."""

import re

from mdpost.text import slugify, to_title


class TestToTitle:
    def test_small_words_lowercase_mid_title(self):
        assert to_title("a tale of two cities") == "A Tale of Two Cities"

    def test_small_words_never_capitalized_mid_title(self):
        assert to_title("war of the worlds") == "War of the Worlds"
        assert to_title("journey to an island on a map") == "Journey to an Island on a Map"

    def test_leading_small_word_capitalized(self):
        assert to_title("of mice and men") == "Of Mice and Men"
        assert to_title("the art of war") == "The Art of War"
        assert to_title("on") == "On"

    def test_non_small_words_capitalized_everywhere(self):
        assert to_title("tale two cities") == "Tale Two Cities"
        assert to_title("off the grid") == "Off the Grid"

    def test_all_small_words(self):
        assert to_title("the way to an end on a hill") == "The Way to an End on a Hill"

    def test_empty(self):
        assert to_title("") == ""
        assert to_title("   \n") == ""

    def test_word_count_preserved(self):
        raw = "  going   to  the   store \n"
        assert len(to_title(raw).split()) == len(raw.split())

    def test_collapses_whitespace(self):
        assert to_title("hello   world\n") == "Hello World"

    def test_only_first_letter_changes(self):
        assert to_title("using iPhone apps") == "Using IPhone Apps"

    def test_non_letter_start(self):
        assert to_title("10 tips") == "10 Tips"


class TestSlugify:
    def test_basic(self):
        assert slugify("My First Post") == "my-first-post"

    def test_strips_punctuation(self):
        assert slugify("Hello, World! It's me.") == "hello-world-its-me"

    def test_trailing_newline_leaves_no_hyphen(self):
        assert slugify("My First Post\n") == "my-first-post"

    def test_trailing_space_quirk(self):
        assert slugify("Hello ") == "hello-"

    def test_collapses_space_runs(self):
        assert slugify("a    b") == "a-b"

    def test_underscores_kept(self):
        assert slugify("snake_case title") == "snake_case-title"

    def test_output_alphabet(self):
        slug = slugify("Ünïcode & Symbols #42 (draft)")
        assert re.fullmatch(r"[a-z0-9_-]*", slug)
