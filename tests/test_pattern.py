import random

import pytest

from xraykit.pattern import wildcard_match, wildcard_match_case_insensitive


@pytest.mark.parametrize(
    "pattern, text, expected",
    [
        ("", "whatever", False),
        ("foo", "foo", True),
        ("foo", "bar", False),
        ("fo?", "foo", True),
        ("f?o", "boo", False),
        ("?o?", "foo", True),
        ("f??", "boo", False),
        ("*oo", "foo", True),
        ("foo*", "foo", True),
        ("foo*", "fo0", False),
        ("fo*", "boo", False),
        ("*o?", "foo", True),
        ("f?*", "boo", False),
        ("*", "boo", True),
        ("abcd", "abc", False),
    ],
)
def test_basic(pattern, text, expected):
    assert wildcard_match_case_insensitive(pattern, text) is expected


@pytest.mark.parametrize(
    "pattern, text, expected",
    [
        ("?at", "bat", True),
        ("?at", "cat", True),
        ("?o?se", "horse", True),
        ("?o?se", "mouse", True),
        ("*s", "dogs", True),
        ("*s", "horses", True),
        ("J*", "Jeep", True),
        ("????", "ford", True),
        ("????", "chevy", False),
        ("*", "cAr", True),
        ("*/foo", "/bar/foo", True),
    ],
)
def test_misc(pattern, text, expected):
    assert wildcard_match_case_insensitive(pattern, text) is expected


@pytest.mark.parametrize(
    "pattern, text, case_insensitive, expected",
    [
        ("Foo", "Foo", False, True),
        ("Foo", "Foo", True, True),
        ("Foo", "FOO", False, False),
        ("Foo", "FOO", True, True),
        ("Fo*", "Foo0", False, True),
        ("Fo*", "Foo0", True, True),
        ("Fo*", "FOo0", False, False),
        ("Fo*", "FOO0", True, True),
        ("Fo?", "Foo", False, True),
        ("Fo?", "Foo", True, True),
        ("Fo?", "FOo", False, False),
        ("Fo?", "FoO", False, True),
        ("Fo?", "FOO", True, True),
    ],
)
def test_case_insensitivity(pattern, text, case_insensitive, expected):
    assert wildcard_match(pattern, text, case_insensitive) is expected


def test_long_strings():
    rng = random.Random(42)
    text = "a" + "".join(rng.choice("abcd") for _ in range(8192)) + "b"
    assert wildcard_match_case_insensitive("a*b", text) is True


@pytest.mark.parametrize(
    "pattern, text, expected",
    [
        ("", "", True),
        ("a", "a", True),
        ("*a", "a", True),
        ("*a", "ba", True),
        ("a*", "a", True),
        ("a*", "ab", True),
        ("a*a", "aa", True),
        ("a*a", "aba", True),
        ("a*a", "aaa", True),
        ("a*a*", "aa", True),
        ("a*a*", "aba", True),
        ("a*a*", "aaa", True),
        ("a*a*", "aaaaaaaaaaaaaaaaaaaaaaa", True),
        (
            "a*b*a*b*a*b*a*b*a*",
            "akljd9gsdfbkjhaabajkhbbyiaahkjbjhbuykjakjhabkjhbabjhkaabbabbaaakljdfsjklababkjbsdabab",
            True,
        ),
        ("a*na*ha", "anananahahanahana", False),
    ],
)
def test_edge_case_globs(pattern, text, expected):
    assert wildcard_match_case_insensitive(pattern, text) is expected


@pytest.mark.parametrize(
    "pattern, text, expected",
    [
        ("*a", "a", True),
        ("**a", "a", True),
        ("***a", "a", True),
        ("**a*", "a", True),
        ("**a**", "a", True),
        ("a**b", "ab", True),
        ("a**b", "abb", True),
        ("*?", "a", True),
        ("*?", "aa", True),
        ("*??", "aa", True),
        ("*???", "aa", False),
        ("*?", "aaa", True),
        ("?", "a", True),
        ("??", "a", False),
        ("?*", "a", True),
        ("?*?", "a", False),
        ("?*?", "aa", True),
        ("*?*", "a", True),
        ("*?*a", "a", False),
        ("*?*a*", "ba", True),
    ],
)
def test_multi_globs(pattern, text, expected):
    assert wildcard_match_case_insensitive(pattern, text) is expected