import logging

from .closure import epsilon_closure, move, step
from .errors import AutomatonError, ConfigError, NFAFormatError, ReferentialIntegrityError
from .models import DEAD, DFA, DFAState, EPSILON, NFA, canonical
from .parser import load_nfa, parse_nfa
from .serializer import format_state, serialize, write_dfa
from .simulate import dfa_accepts, nfa_accepts
from .subset import SubsetConstruction, nfa_to_dfa

logging.getLogger("nfa2dfa").addHandler(logging.NullHandler())

__all__ = [
    "AutomatonError",
    "ConfigError",
    "NFAFormatError",
    "ReferentialIntegrityError",
    "EPSILON",
    "NFA",
    "DFA",
    "DFAState",
    "DEAD",
    "canonical",
    "epsilon_closure",
    "move",
    "step",
    "SubsetConstruction",
    "nfa_to_dfa",
    "parse_nfa",
    "load_nfa",
    "format_state",
    "serialize",
    "write_dfa",
    "nfa_accepts",
    "dfa_accepts",
]
