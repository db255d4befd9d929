import os

import pytest

from nfa2dfa import EPSILON, NFAFormatError, ReferentialIntegrityError, load_nfa, parse_nfa

from .conftest import EPSILON_AB_TEXT, SAMPLES


def test_parse_epsilon_ab(epsilon_ab):
    nfa = parse_nfa(EPSILON_AB_TEXT)
    assert nfa == epsilon_ab
    assert nfa.alphabet == ("a", "b")
    assert nfa.transitions[(0, EPSILON)] == {1}


def test_parse_bare_start_digit_and_trailing_whitespace():
    nfa = parse_nfa("(0) (1)  \r\na\n0\n\n(0), a = (1)\n\n")
    assert nfa.start == 0
    assert nfa.accept == frozenset()
    assert nfa.transitions[(0, "a")] == {1}


def test_duplicate_transitions_collapse():
    nfa = parse_nfa("(0) (1)\na\n(0)\n(1)\n(0), a = (1)\n(0), a = (1)\n(0), a = (0)\n")
    assert nfa.transitions[(0, "a")] == {0, 1}


def test_symbol_may_be_letter_e():
    nfa = parse_nfa("(0) (1)\nE\n(0)\n(1)\n(0), E = (1)\n(1), EPS = (0)\n")
    assert nfa.transitions[(0, "E")] == {1}
    assert nfa.transitions[(1, EPSILON)] == {0}


@pytest.mark.parametrize(
    "text, line_number",
    [
        ("", 1),
        ("(0) (1)\na b\n", 3),
        ("(0)(1)\na\n(0)\n(1)\n", 1),
        ("(0) (0)\na\n(0)\n(0)\n", 1),
        ("(0) (1)\nab\n(0)\n(1)\n", 2),
        ("(0) (1)\na a\n(0)\n(1)\n", 2),
        ("(0) (1)\na\n(0) (1)\n(1)\n", 3),
        ("(0) (1)\na\n(0)\n1\n", 4),
        ("(0) (1)\na\n(0)\n(1)\n(0) a = (1)\n", 5),
        ("(0) (1)\na\n(0)\n(1)\n(0), a = (1)\n(0), EPSILON = (1)\n", 6),
        ("(٠) (١)\na\n(٠)\n(١)\n(٠), a = (١)\n", 1),
        ("(0) (1)\na\n(١)\n(1)\n", 3),
        ("(0) (1)\na\n(0)\n(1)\n(0), a = (١)\n", 5),
    ],
)
def test_format_errors_carry_line_number(text, line_number):
    with pytest.raises(NFAFormatError) as info:
        parse_nfa(text)
    assert info.value.line_number == line_number
    assert f"line {line_number}:" in str(info.value)


@pytest.mark.parametrize(
    "text",
    [
        "(0) (1)\na\n(3)\n(1)\n",
        "(0) (1)\na\n(0)\n(5)\n",
        "(0) (1)\na\n(0)\n(1)\n(0), a = (9)\n",
        "(0) (1)\na\n(0)\n(1)\n(0), b = (1)\n",
    ],
)
def test_undeclared_references(text):
    with pytest.raises(ReferentialIntegrityError):
        parse_nfa(text)


def test_load_samples(ends_with_abb, thompson_a_or_b_star):
    assert load_nfa(os.path.join(SAMPLES, "a_or_b_star_a.nfa")) == thompson_a_or_b_star
    assert load_nfa(os.path.join(SAMPLES, "ends_with_abb.nfa")) == ends_with_abb
    assert load_nfa(os.path.join(SAMPLES, "epsilon_ab.nfa")) == parse_nfa(EPSILON_AB_TEXT)


def test_load_rejects_undecodable_bytes(tmp_path):
    path = tmp_path / "bad.nfa"
    path.write_bytes(b"(0) (1)\n\xff\n(0)\n(1)\n")
    with pytest.raises(NFAFormatError) as info:
        load_nfa(str(path))
    assert isinstance(info.value.__cause__, UnicodeDecodeError)
