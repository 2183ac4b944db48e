import os, sys
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import pytest

from utils.url_parser import URLParser
from utils.error_handler import ContestParseError
from utils.models import ContestIdentifier, ContestKind


@pytest.fixture
def parser():
    return URLParser()


@pytest.mark.parametrize("text, kind, number", [
    ("abc390", ContestKind.ABC, 390),
    ("ARC195", ContestKind.ARC, 195),
    ("  agc001\n", ContestKind.AGC, 1),
    ("Abc0", ContestKind.ABC, 0),
    ("abc007", ContestKind.ABC, 7),
    ("arc12345", ContestKind.ARC, 12345),
    ("agc18446744073709551615", ContestKind.AGC, 2 ** 64 - 1),
    ("abc" + "0" * 5000 + "42", ContestKind.ABC, 42),
])
def test_parse_contest_name(parser, text, kind, number):
    contest = parser.parse_contest_name(text)
    assert contest.kind is kind
    assert contest.number == number


@pytest.mark.parametrize("text", [
    "",
    "   ",
    "abc",
    "ab1",
    "xyz390",
    "abc-1",
    "abc+1",
    "abc 390",
    "abc390a",
    "abc1.5",
    "abc３９０",
    "abc_390",
    "abc" + "1" * 5000,
    "arc18446744073709551616",
])
def test_parse_contest_name_rejects(parser, text):
    with pytest.raises(ContestParseError) as excinfo:
        parser.parse_contest_name(text)
    assert excinfo.value.contest_name == text


def test_parsed_contest_is_immutable(parser):
    contest = parser.parse_contest_name("abc390")
    with pytest.raises(AttributeError):
        contest.number = 391


@pytest.mark.parametrize("number, letters", [
    (1, list("abcd")),
    (125, list("abcd")),
    (126, list("abcdef")),
    (390, list("abcdef")),
])
def test_abc_letters(parser, number, letters):
    assert parser.get_problem_letters(ContestIdentifier(ContestKind.ABC, number)) == letters


@pytest.mark.parametrize("number, letters", [
    (1, list("abcd")),
    (57, list("abcd")),
    (58, list("cdef")),
    (103, list("cdef")),
    (104, list("abcd")),
    (195, list("abcd")),
])
def test_arc_letters(parser, number, letters):
    assert parser.get_problem_letters(ContestIdentifier(ContestKind.ARC, number)) == letters


def test_agc_letters_are_synthetic_codes(parser):
    assert parser.get_problem_letters(ContestIdentifier(ContestKind.AGC, 3)) == ["AGC0", "AGC1", "AGC2"]
    assert parser.get_problem_letters(ContestIdentifier(ContestKind.AGC, 0)) == []


def test_letters_are_deterministic(parser):
    for contest in (ContestIdentifier(ContestKind.ABC, 126),
                    ContestIdentifier(ContestKind.ARC, 80),
                    ContestIdentifier(ContestKind.AGC, 5)):
        assert parser.get_problem_letters(contest) == parser.get_problem_letters(contest)


def test_build_task_url_zero_pads(parser):
    contest = ContestIdentifier(ContestKind.ABC, 7)
    assert parser.build_task_url(contest, "a") == "https://atcoder.jp/contests/abc007/tasks/abc007_a"

    contest = ContestIdentifier(ContestKind.ARC, 1234)
    assert parser.build_task_url(contest, "c") == "https://atcoder.jp/contests/arc1234/tasks/arc1234_c"


def test_enumerate_task_urls_abc126(parser):
    specs = parser.enumerate_task_urls(parser.parse_contest_name("abc126"))
    assert [s.label for s in specs] == list("abcdef")
    assert specs[-1].url == "https://atcoder.jp/contests/abc126/tasks/abc126_f"
    assert all(s.contest == ContestIdentifier(ContestKind.ABC, 126) for s in specs)


def test_enumerate_task_urls_base_url():
    parser = URLParser("http://mirror.example/")
    specs = parser.enumerate_task_urls(ContestIdentifier(ContestKind.ARC, 104))
    assert specs[0].url == "http://mirror.example/contests/arc104/tasks/arc104_a"


def test_parse_task_url(parser):
    info = parser.parse_task_url("https://atcoder.jp/contests/abc390/tasks/abc390_a")
    assert info['contest_id'] == "abc390"
    assert info['task_id'] == "abc390_a"
    assert info['contest_url'] == "https://atcoder.jp/contests/abc390"

    assert parser.parse_task_url("https://atcoder.jp/contests/abc390/tasks/abc390_a?lang=ja")['task_id'] == "abc390_a"
    assert parser.parse_task_url("https://atcoder.jp/contests/abc390") is None
    assert parser.parse_task_url("https://codeforces.com/contest/1/problem/A") is None
    assert parser.parse_task_url("") is None


def test_parse_task_url_follows_base_url():
    parser = URLParser("http://mirror.example:8080/archive/")
    info = parser.parse_task_url("http://mirror.example:8080/archive/contests/abc390/tasks/abc390_b")
    assert info['task_id'] == "abc390_b"
    assert info['contest_url'] == "http://mirror.example:8080/archive/contests/abc390"

    assert parser.parse_task_url("https://atcoder.jp/contests/abc390/tasks/abc390_b") is None
    assert parser.parse_task_url("http://mirror.example:8080/contests/abc390/tasks/abc390_b") is None
