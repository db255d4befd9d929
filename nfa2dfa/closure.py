from __future__ import annotations

from collections import deque
from typing import Deque, FrozenSet, Iterable, Set

from .models import EPSILON, NFA


def epsilon_closure(nfa: NFA, states: Iterable[int]) -> FrozenSet[int]:
    """
    Smallest superset of `states` closed under epsilon moves.

    Each state is queued at most once, so epsilon cycles terminate. A state
    missing from the NFA transition table raises ReferentialIntegrityError.
    """
    closure: Set[int] = set()
    q: Deque[int] = deque()
    for s in states:
        if s not in closure:
            closure.add(s)
            q.append(s)

    while q:
        s = q.popleft()
        for t in nfa.targets(s, EPSILON):
            if t not in closure:
                closure.add(t)
                q.append(t)
    return frozenset(closure)


def move(nfa: NFA, states: Iterable[int], symbol: str) -> FrozenSet[int]:
    out: Set[int] = set()
    for s in states:
        out.update(nfa.targets(s, symbol))
    return frozenset(out)


def step(nfa: NFA, states: Iterable[int], symbol: str) -> FrozenSet[int]:
    # move on `symbol`, then close; empty when no member has a `symbol` edge
    return epsilon_closure(nfa, move(nfa, states, symbol))
