"""Tests for ifacegen.casing."""

from __future__ import annotations

import pytest

from ifacegen.casing import split_words, to_pascal_case


class TestSplitWords:
    def test_delimiters(self) -> None:
        assert split_words("foo_bar-baz qux") == ["foo", "bar", "baz", "qux"]

    def test_camel_case_boundary(self) -> None:
        assert split_words("fooBarBaz") == ["foo", "Bar", "Baz"]

    def test_acronym_boundary(self) -> None:
        assert split_words("HTTPServerError") == ["HTTP", "Server", "Error"]

    def test_repeated_and_edge_delimiters(self) -> None:
        assert split_words("__foo--bar__") == ["foo", "bar"]

    def test_non_ascii_letters_are_kept(self) -> None:
        assert split_words("caféMenu") == ["café", "Menu"]

    def test_non_ascii_case_boundary(self) -> None:
        assert split_words("ÉtatCivil") == ["État", "Civil"]

    def test_empty(self) -> None:
        assert split_words("") == []


class TestToPascalCase:
    @pytest.mark.parametrize(
        "name, expected",
        [
            ("foo_bar", "FooBar"),
            ("foo-bar", "FooBar"),
            ("foo bar", "FooBar"),
            ("fooBar", "FooBar"),
            ("FooBar", "FooBar"),
            ("Foo", "Foo"),
            ("user_ID", "UserId"),
            ("HTTPServer", "HttpServer"),
            ("api_v2_response", "ApiV2Response"),
            ("SCREAMING_SNAKE", "ScreamingSnake"),
            ("café_menu", "CaféMenu"),
            ("über-größe", "ÜberGröße"),
            ("用户", "用户"),
            ("用户_profile", "用户Profile"),
        ],
    )
    def test_conversion(self, name: str, expected: str) -> None:
        assert to_pascal_case(name) == expected

    def test_only_delimiters_yields_empty_name(self) -> None:
        assert to_pascal_case("__") == ""
        assert to_pascal_case("-- ") == ""
