r"""
NFA text format
---------------

    (0) (1) (2)        states, one "(d)" token every 4 characters
    a b                alphabet, one symbol every 2 characters
    (0)                start state ("0" is accepted as well)
    (2)                accept states, same layout as the state line (may be empty)
    (0), a = (1)       transitions, one per line
    (1), b = (2)
    (0), EPS = (1)     EPS marks an epsilon (no-input) move

State ids are single digits. Blank lines after the header are ignored.
"""

from __future__ import annotations

import logging
import re
from typing import List, Optional, Set, Tuple

from .errors import NFAFormatError, ReferentialIntegrityError
from .models import EPSILON, NFA, Symbol

l = logging.getLogger(name=__name__)

EPSILON_TOKEN = "EPS"

_STATE_LIST_RE = re.compile(r"^\([0-9]\)(?: \([0-9]\))*$")
_ALPHABET_RE   = re.compile(r"^\S(?: \S)*$")
_START_RE      = re.compile(r"^(?:(?P<bare>[0-9])|\((?P<wrapped>[0-9])\))$")
_TRANSITION_RE = re.compile(
    r"^\((?P<src>[0-9])\), (?P<sym>" + EPSILON_TOKEN + r"|\S) = \((?P<dst>[0-9])\)$"
)

_HEADER_NAMES = ("state list", "alphabet", "start state", "accept states")


def _parse_state_list(line: str, line_number: int, allow_empty: bool) -> List[int]:
    if not line and allow_empty:
        return []
    if not _STATE_LIST_RE.match(line):
        raise NFAFormatError(f"expected states written as '(d) (d) ...', got {line!r}", line_number)
    states = [int(line[i]) for i in range(1, len(line), 4)]
    if len(set(states)) != len(states):
        raise NFAFormatError(f"duplicate state in {line!r}", line_number)
    return states


def _parse_alphabet(line: str, line_number: int) -> List[str]:
    if not _ALPHABET_RE.match(line):
        raise NFAFormatError(f"expected symbols separated by single spaces, got {line!r}", line_number)
    symbols = list(line[0::2])
    if len(set(symbols)) != len(symbols):
        raise NFAFormatError(f"duplicate symbol in alphabet {line!r}", line_number)
    return symbols


def _parse_start(line: str, line_number: int) -> int:
    m = _START_RE.match(line)
    if not m:
        raise NFAFormatError(f"expected a single start state digit, got {line!r}", line_number)
    return int(m.group("bare") or m.group("wrapped"))


def _parse_transition(line: str, line_number: int) -> Tuple[int, Symbol, int]:
    m = _TRANSITION_RE.match(line)
    if not m:
        raise NFAFormatError(f"expected a transition like '(0), a = (1)', got {line!r}", line_number)
    sym: Symbol = m.group("sym")
    if sym == EPSILON_TOKEN:
        sym = EPSILON
    return int(m.group("src")), sym, int(m.group("dst"))


def _check_declared(states: Set[int], used: List[int], what: str, line_number: int) -> None:
    for s in used:
        if s not in states:
            raise ReferentialIntegrityError(f"line {line_number}: {what} {s} is not a declared state")


def parse_nfa(text: str) -> NFA:
    lines = [ln.rstrip() for ln in text.splitlines()]
    if len(lines) < len(_HEADER_NAMES):
        missing = _HEADER_NAMES[len(lines)]
        raise NFAFormatError(f"input ends before the {missing} line", len(lines) + 1)

    states = _parse_state_list(lines[0], 1, allow_empty=False)
    alphabet = _parse_alphabet(lines[1], 2)
    start = _parse_start(lines[2], 3)
    accept = _parse_state_list(lines[3], 4, allow_empty=True)

    declared = set(states)
    _check_declared(declared, [start], "start state", 3)
    _check_declared(declared, accept, "accept state", 4)

    edges: List[Tuple[int, Symbol, int]] = []
    for line_number, line in enumerate(lines[4:], start=5):
        if not line:
            continue
        src, sym, dst = _parse_transition(line, line_number)
        _check_declared(declared, [src, dst], "transition state", line_number)
        if sym is not EPSILON and sym not in alphabet:
            raise ReferentialIntegrityError(
                f"line {line_number}: symbol {sym!r} is not in the alphabet {''.join(alphabet)!r}"
            )
        edges.append((src, sym, dst))

    l.debug(
        "Parsed NFA: %d states, alphabet %r, start %d, %d accept states, %d transitions",
        len(states), alphabet, start, len(accept), len(edges),
    )
    return NFA.build(states, alphabet, start, accept, edges)


def load_nfa(path: str, encoding: Optional[str] = "utf-8") -> NFA:
    with open(path, "r", encoding=encoding) as f:
        try:
            text = f.read()
        except UnicodeDecodeError as ex:
            raise NFAFormatError(f"{path} is not valid {encoding} text: {ex.reason} at byte {ex.start}") from ex
    return parse_nfa(text)
