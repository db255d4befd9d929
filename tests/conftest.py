from __future__ import annotations

import os

import pytest

from nfa2dfa import EPSILON, NFA

SAMPLES = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "samples")

EPSILON_AB_TEXT = (
    "(0) (1) (2)\n"
    "a b\n"
    "(0)\n"
    "(2)\n"
    "(0), a = (1)\n"
    "(1), b = (2)\n"
    "(0), EPS = (1)\n"
)


@pytest.fixture
def epsilon_ab() -> NFA:
    # accepts exactly "b" and "ab"
    return NFA.build(
        states={0, 1, 2},
        alphabet="ab",
        start=0,
        accept={2},
        edges=[(0, "a", 1), (1, "b", 2), (0, EPSILON, 1)],
    )


@pytest.fixture
def epsilon_cycle() -> NFA:
    return NFA.build(
        states={0, 1, 2},
        alphabet="a",
        start=0,
        accept={2},
        edges=[(0, EPSILON, 1), (1, EPSILON, 0), (1, "a", 2)],
    )


@pytest.fixture
def ends_with_abb() -> NFA:
    return NFA.build(
        states=range(4),
        alphabet="ab",
        start=0,
        accept={3},
        edges=[(0, "a", 0), (0, "b", 0), (0, "a", 1), (1, "b", 2), (2, "b", 3)],
    )


@pytest.fixture
def thompson_a_or_b_star() -> NFA:
    # Thompson-style NFA for (a|b)*a with plenty of epsilon moves.
    return NFA.build(
        states=range(10),
        alphabet="ab",
        start=0,
        accept={9},
        edges=[
            (0, EPSILON, 1), (0, EPSILON, 7),
            (1, EPSILON, 2), (1, EPSILON, 4),
            (2, "a", 3), (4, "b", 5),
            (3, EPSILON, 6), (5, EPSILON, 6),
            (6, EPSILON, 1), (6, EPSILON, 7),
            (7, EPSILON, 8), (8, "a", 9),
        ],
    )
