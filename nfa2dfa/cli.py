r"""
nfa2dfa command line
--------------------

    nfa2dfa input.nfa                      writes converted_dfa.dfa
    nfa2dfa input.nfa -o out.dfa --show    also prints NFA/DFA tables
    nfa2dfa input.nfa --test ab --test b   prints NFA vs DFA verdicts

Exit codes: 0 ok, 1 input format, 2 usage, 3 referential integrity,
4 config, 5 I/O, 99 unexpected. Nothing is written unless the whole
DFA was built.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from .config import LoggingSettings, load_settings
from .errors import ConfigError, NFAFormatError, ReferentialIntegrityError
from .models import DFA, NFA
from .parser import load_nfa
from .serializer import write_dfa
from .simulate import dfa_accepts, nfa_accepts
from .subset import nfa_to_dfa
from .tables import dump_dfa_table, dump_nfa_table

l = logging.getLogger(name=__name__)


def build_arg_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="nfa2dfa",
        description="Convert an NFA (with epsilon moves) to a DFA by subset construction.",
    )
    p.add_argument("input", help="Path to the NFA text file")
    p.add_argument("-o", "--output", help="Where to write the DFA (default: output.path from config)")
    p.add_argument("--config", help="Path to a TOML config file (default: ./nfa2dfa.toml if present)")
    p.add_argument("--show", action="store_true", help="Print the NFA and DFA transition tables")
    p.add_argument("--test", action="append", default=[], metavar="WORD",
                   help="Run WORD through both automata and print the verdicts (repeatable)")
    p.add_argument("-v", "--verbose", action="store_true", help="Log at DEBUG level")
    return p


def _configure_logging(settings: LoggingSettings, verbose: bool) -> None:
    level = logging.DEBUG if verbose else getattr(logging, settings.level)
    logging.basicConfig(level=level, format=settings.format, stream=sys.stderr, force=True)


def _print_tables(nfa: NFA, dfa: DFA) -> None:
    print("NFA transition table:")
    print(dump_nfa_table(nfa))
    print()
    print("DFA transition table:")
    print(dump_dfa_table(dfa))
    print()


def _print_tests(nfa: NFA, dfa: DFA, words: List[str]) -> None:
    print("Tests (NFA vs DFA):")
    for word in words:
        try:
            nfa_ok = nfa_accepts(nfa, word)
            dfa_ok = dfa_accepts(dfa, word)
        except ValueError as ex:
            print(f"  {word!r:20}  skipped: {ex}")
            continue
        print(f"  {word!r:20}  NFA={nfa_ok}  DFA={dfa_ok}")


def main(argv: Optional[List[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)

    try:
        settings = load_settings(args.config).with_output_path(args.output)
    except ConfigError as ex:
        print(f"CONFIG ERROR: {ex}", file=sys.stderr)
        return 4

    _configure_logging(settings.logging, args.verbose)

    try:
        nfa = load_nfa(args.input)
        dfa = nfa_to_dfa(nfa)
        write_dfa(dfa, settings.output.path)

        if args.show:
            _print_tables(nfa, dfa)
        if args.test:
            _print_tests(nfa, dfa, args.test)

        print(f"Wrote {len(dfa.states)} DFA states ({len(dfa.accept)} accepting) to {settings.output.path}")
        return 0

    except NFAFormatError as ex:
        print(f"FORMAT ERROR: {ex}", file=sys.stderr)
        return 1
    except ReferentialIntegrityError as ex:
        print(f"INTEGRITY ERROR: {ex}", file=sys.stderr)
        return 3
    except OSError as ex:
        print(f"I/O ERROR: {ex}", file=sys.stderr)
        return 5
    except Exception as ex:  # unexpected
        l.debug("Unexpected failure", exc_info=True)
        print(f"FATAL: {type(ex).__name__}: {ex}", file=sys.stderr)
        return 99
