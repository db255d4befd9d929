from __future__ import annotations

from typing import Sequence

from .closure import epsilon_closure, step
from .models import DFA, NFA


def _check_word(alphabet: Sequence[str], word: str) -> None:
    for ch in word:
        if ch not in alphabet:
            raise ValueError(f"Symbol {ch!r} is not in the alphabet {''.join(alphabet)!r}")


def nfa_accepts(nfa: NFA, word: str) -> bool:
    _check_word(nfa.alphabet, word)
    current = epsilon_closure(nfa, {nfa.start})
    for ch in word:
        current = step(nfa, current, ch)
        if not current:
            return False
    return not current.isdisjoint(nfa.accept)


def dfa_accepts(dfa: DFA, word: str) -> bool:
    _check_word(dfa.alphabet, word)
    s = dfa.start
    for ch in word:
        s = dfa.target(s, ch)
    return dfa.is_accepting(s)
