# tables.py
#
# Human-readable dumps of both automata, printed by the CLI with --show.
#   - NFA: one row per transition, START/ACCEPT markers on the first row of a state
#   - DFA: one row per state, one column per alphabet symbol
#
# The DFA alphabet is whatever the input declared (usually a handful of
# symbols), so a full state x symbol matrix stays readable.

from __future__ import annotations

from typing import List

from .models import DFA, EPSILON, NFA
from .serializer import format_state


def _make_table(rows: List[List[str]], headers: List[str]) -> str:
    cols = len(headers)
    widths = [len(h) for h in headers]
    for r in rows:
        for c in range(cols):
            widths[c] = max(widths[c], len(r[c]))

    def fmt_row(r: List[str]) -> str:
        return " | ".join(r[c].ljust(widths[c]) for c in range(cols)).rstrip()

    line = "-+-".join("-" * w for w in widths)
    out = [fmt_row(headers), line]
    out.extend(fmt_row(r) for r in rows)
    return "\n".join(out)


def _nfa_markers(nfa: NFA, s: int) -> str:
    markers = []
    if s == nfa.start:
        markers.append("START")
    if s in nfa.accept:
        markers.append("ACCEPT")
    return ",".join(markers)


def dump_nfa_table(nfa: NFA) -> str:
    # Columns: State | Markers | Symbol | Dest
    by_state = {s: [] for s in sorted(nfa.states)}
    for src, sym, dst in nfa.edges():
        by_state[src].append(("ε" if sym is EPSILON else sym, dst))

    rows: List[List[str]] = []
    for s, moves in by_state.items():
        mark = _nfa_markers(nfa, s)
        if not moves:
            # Still show the state even if it has no transitions.
            rows.append([str(s), mark, "", ""])
            continue
        first_row = True
        for sym, dst in moves:
            rows.append([str(s) if first_row else "", mark if first_row else "", sym, str(dst)])
            first_row = False

    return _make_table(rows, ["State", "Markers", "Symbol", "Dest"])


def dump_dfa_table(dfa: DFA) -> str:
    # Columns: # | State | Markers | <one per symbol>
    rows: List[List[str]] = []
    for state in dfa.states:
        markers = []
        if state == dfa.start:
            markers.append("START")
        if dfa.is_accepting(state):
            markers.append("ACCEPT")
        if state.is_dead:
            markers.append("DEAD")
        row = [str(dfa.index_of(state)), format_state(state), ",".join(markers)]
        row.extend(format_state(dfa.target(state, sym)) for sym in dfa.alphabet)
        rows.append(row)

    return _make_table(rows, ["#", "State", "Markers"] + list(dfa.alphabet))
