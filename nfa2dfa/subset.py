# subset.py
#
# Subset construction: NFA -> DFA over the reachable part of the powerset.
#
# Exploration is an explicit FIFO work-list rather than recursion, so the
# depth of the search never turns into Python call depth. The DFA under
# construction is the only discovered-state map; it and the frontier belong
# to one SubsetConstruction instance. Nothing is kept at module level, and
# two engines can run side by side.
#
# A DFA state is accepting when its NFA set intersects nfa.accept.

from __future__ import annotations

import logging
from collections import deque
from typing import Deque, Optional

from .closure import epsilon_closure, step
from .models import DFA, DFAState, NFA

l = logging.getLogger(name=__name__)


class SubsetConstruction:
    def __init__(self, nfa: NFA):
        self.nfa = nfa
        self._frontier: Deque[DFAState] = deque()
        self._dfa: Optional[DFA] = None

    def run(self) -> DFA:
        if self._dfa is not None:
            return self._dfa

        nfa = self.nfa
        start = DFAState.of(epsilon_closure(nfa, {nfa.start}))
        dfa = DFA(alphabet=nfa.alphabet, start=start)
        self._discover(dfa, start)

        while self._frontier:
            current = self._frontier.popleft()
            for symbol in nfa.alphabet:
                nxt = DFAState.of(step(nfa, current.members, symbol))
                dfa.add_transition(current, symbol, nxt)
                if nxt not in dfa:
                    self._discover(dfa, nxt)

        l.debug(
            "Subset construction finished: %d NFA states -> %d DFA states, %d accepting",
            len(nfa.states), len(dfa.states), len(dfa.accept),
        )
        # Only a fully explored DFA is ever handed out.
        self._dfa = dfa
        return dfa

    def _discover(self, dfa: DFA, state: DFAState) -> None:
        accepting = state.intersects(self.nfa.accept)
        seq = dfa.add_state(state, accepting)
        self._frontier.append(state)
        l.debug("Discovered DFA state #%d %s%s", seq, state.members, " (accepting)" if accepting else "")


def nfa_to_dfa(nfa: NFA) -> DFA:
    return SubsetConstruction(nfa).run()
