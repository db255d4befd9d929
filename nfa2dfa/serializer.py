"""
DFA text output.

Layout (one item per line):
    1. every discovered state, space-separated, discovery order
    2. alphabet symbols, tab-separated
    3. start state
    4. accepting states, space-separated, discovery order
    5+ one "{origin}, <symbol> = {dest}" line per (state, symbol) pair

A state is written as its ascending members in braces, e.g. {0,2}; the
empty (dead) state is written {EM}.
"""

from __future__ import annotations

import logging
from typing import List

from .models import DFA, DFAState

l = logging.getLogger(name=__name__)

DEAD_MARKER = "EM"


def format_state(state: DFAState) -> str:
    if state.is_dead:
        return "{" + DEAD_MARKER + "}"
    return "{" + ",".join(str(m) for m in state.members) + "}"


def serialize(dfa: DFA) -> str:
    lines: List[str] = [
        " ".join(format_state(s) for s in dfa.states),
        "\t".join(dfa.alphabet),
        format_state(dfa.start),
        " ".join(format_state(s) for s in dfa.accept),
    ]
    for state in dfa.states:
        origin = format_state(state)
        for symbol in dfa.alphabet:
            lines.append(f"{origin}, {symbol} = {format_state(dfa.target(state, symbol))}")
    return "\n".join(lines) + "\n"


def write_dfa(dfa: DFA, path: str) -> None:
    # Render first so a failure never leaves a half-written file behind.
    text = serialize(dfa)
    with open(path, "w", encoding="utf-8", newline="\n") as f:
        f.write(text)
    l.info("Wrote DFA with %d states to %s", len(dfa.states), path)
