# models.py
#
# Data holders shared by every stage of the pipeline:
#   - NFA: parsed input automaton, never mutated after construction
#   - DFAState: canonical set of NFA state ids (sorted, deduplicated tuple)
#   - DFA: subset-construction result, states tagged with discovery order
#
# DFAState equality and hashing go through the sorted member tuple, so two
# states built from the same NFA ids in any order are the same state.

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, FrozenSet, Iterable, Iterator, List, Mapping, Optional, Set, Tuple

from .errors import ReferentialIntegrityError


# Transition key used for no-input moves.
EPSILON = None

Symbol = Optional[str]


def canonical(states: Iterable[int]) -> Tuple[int, ...]:
    return tuple(sorted(set(states)))


# =============================================================================
# NFA
# =============================================================================

@dataclass(frozen=True)
class NFA:
    states: FrozenSet[int]
    alphabet: Tuple[str, ...]
    start: int
    accept: FrozenSet[int]
    transitions: Mapping[Tuple[int, Symbol], FrozenSet[int]]
    _table: Mapping[int, Mapping[Symbol, FrozenSet[int]]] = field(
        init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        object.__setattr__(self, "states", frozenset(self.states))
        object.__setattr__(self, "alphabet", tuple(self.alphabet))
        object.__setattr__(self, "accept", frozenset(self.accept))

        for s in self.states:
            if not isinstance(s, int) or s < 0:
                raise ValueError(f"NFA state ids must be non-negative integers, got {s!r}")
        if len(set(self.alphabet)) != len(self.alphabet):
            raise ValueError(f"Alphabet has duplicate symbols: {self.alphabet!r}")
        if EPSILON in self.alphabet:
            raise ValueError("The epsilon marker cannot be an alphabet symbol")

        if self.start not in self.states:
            raise ReferentialIntegrityError(f"Start state {self.start} is not a declared state")
        stray = self.accept - self.states
        if stray:
            raise ReferentialIntegrityError(f"Accept states {sorted(stray)} are not declared states")

        # Every declared state gets a row, even one with no outgoing moves.
        table: Dict[int, Dict[Symbol, FrozenSet[int]]] = {s: {} for s in self.states}
        normalized: Dict[Tuple[int, Symbol], FrozenSet[int]] = {}
        for (src, sym), dsts in self.transitions.items():
            if src not in self.states:
                raise ReferentialIntegrityError(f"Transition from undeclared state {src}")
            if sym is not EPSILON and sym not in self.alphabet:
                raise ReferentialIntegrityError(
                    f"Transition from state {src} uses symbol {sym!r} which is not in the alphabet"
                )
            dsts = frozenset(dsts)
            stray = dsts - self.states
            if stray:
                raise ReferentialIntegrityError(
                    f"Transition from state {src} leads to undeclared states {sorted(stray)}"
                )
            normalized[(src, sym)] = dsts
            table[src][sym] = dsts

        object.__setattr__(self, "transitions", MappingProxyType(normalized))
        object.__setattr__(
            self, "_table", MappingProxyType({s: MappingProxyType(row) for s, row in table.items()})
        )

    @classmethod
    def build(
        cls,
        states: Iterable[int],
        alphabet: Iterable[str],
        start: int,
        accept: Iterable[int],
        edges: Iterable[Tuple[int, Symbol, int]],
    ) -> NFA:
        # Collects (src, symbol, dst) triples into the grouped transition map.
        grouped: Dict[Tuple[int, Symbol], Set[int]] = {}
        for src, sym, dst in edges:
            grouped.setdefault((src, sym), set()).add(dst)
        return cls(
            states=frozenset(states),
            alphabet=tuple(alphabet),
            start=start,
            accept=frozenset(accept),
            transitions={k: frozenset(v) for k, v in grouped.items()},
        )

    def targets(self, state: int, symbol: Symbol) -> FrozenSet[int]:
        row = self._table.get(state)
        if row is None:
            raise ReferentialIntegrityError(f"State {state} is not in the NFA transition table")
        return row.get(symbol, frozenset())

    def edges(self) -> Iterator[Tuple[int, Symbol, int]]:
        # Sorted by origin, then alphabet order with epsilon last, then destination.
        rank = {sym: i for i, sym in enumerate(self.alphabet)}
        rank[EPSILON] = len(self.alphabet)
        for src, sym in sorted(self.transitions, key=lambda k: (k[0], rank[k[1]])):
            for dst in sorted(self.transitions[(src, sym)]):
                yield src, sym, dst


# =============================================================================
# DFA
# =============================================================================

@dataclass(frozen=True, order=True)
class DFAState:
    members: Tuple[int, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "members", canonical(self.members))

    @classmethod
    def of(cls, states: Iterable[int]) -> DFAState:
        return cls(tuple(states))

    @property
    def is_dead(self) -> bool:
        return not self.members

    def intersects(self, states: Iterable[int]) -> bool:
        return not set(self.members).isdisjoint(states)

    def __iter__(self) -> Iterator[int]:
        return iter(self.members)

    def __len__(self) -> int:
        return len(self.members)

    def __contains__(self, state: object) -> bool:
        return state in self.members


DEAD = DFAState()


@dataclass
class DFA:
    alphabet: Tuple[str, ...]
    start: DFAState
    states: List[DFAState] = field(default_factory=list)
    accept: List[DFAState] = field(default_factory=list)
    transitions: Dict[Tuple[DFAState, str], DFAState] = field(default_factory=dict)
    _order: Dict[DFAState, int] = field(default_factory=dict, repr=False, compare=False)

    def add_state(self, state: DFAState, accepting: bool) -> int:
        if state in self._order:
            raise ValueError(f"DFA state {state.members} was already discovered")
        seq = len(self.states)
        self._order[state] = seq
        self.states.append(state)
        if accepting:
            self.accept.append(state)
        return seq

    def add_transition(self, src: DFAState, symbol: str, dst: DFAState) -> None:
        self.transitions[(src, symbol)] = dst

    def index_of(self, state: DFAState) -> int:
        return self._order[state]

    def target(self, state: DFAState, symbol: str) -> DFAState:
        return self.transitions[(state, symbol)]

    def is_accepting(self, state: DFAState) -> bool:
        return state in self.accept

    @property
    def dead(self) -> Optional[DFAState]:
        return DEAD if DEAD in self._order else None

    def __contains__(self, state: object) -> bool:
        return state in self._order

    def __len__(self) -> int:
        return len(self.states)
