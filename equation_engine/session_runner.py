"""Command-line runner for the Equation Engine.

Allows simple experiments from the terminal:
    python -m equation_engine.session_runner --line "a/b" --line "+" --line "c/d"

Without --line, reads stdin: each line is typed into the live input
and committed. ":reset" clears the session, ":quit" stops.
"""

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional

from .config import DEFAULT_LEDGER_PATH, load_config
from .elements import render
from .session import Session
from .tokenizer import tokenize
from .transition_graph import graph_summary, sequence_to_nx


def _report(session: Session, text: str, as_json: bool) -> None:
    if as_json:
        print(json.dumps(session.snapshot(), ensure_ascii=False))
        return
    print("Tokens:", tokenize(text))
    print("State: ", session.state.value)
    print("Canvas:", render(session.canvas) or "(empty)")
    if session.live_input:
        print("Input: ", session.live_input)
    if session.message:
        print("[WARN]", session.message)


def step(session: Session, text: str, as_json: bool = False) -> None:
    """Type ``text`` into the live input, then commit it."""
    session.clear_input()
    session.type_text(text)
    session.commit()
    _report(session, text, as_json)


def run_stdin(session: Session, as_json: bool) -> None:
    for raw in sys.stdin:
        line = raw.rstrip("\n")
        if line.strip() == ":quit":
            break
        if line.strip() == ":reset":
            session.reset()
            print("Session reset.")
            continue
        step(session, line, as_json)


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(
        description="Build an expression one commit at a time."
    )
    parser.add_argument(
        "--line",
        action="append",
        default=[],
        help="input to type and commit (repeatable, applied in order)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="print the session snapshot as JSON after each step",
    )
    parser.add_argument(
        "--graph",
        action="store_true",
        help="print the transition graph of the final canvas",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="JSON configuration file",
    )
    parser.add_argument(
        "--ledger",
        type=Path,
        nargs="?",
        const=DEFAULT_LEDGER_PATH,
        default=None,
        help="append session events to a JSONL ledger",
    )
    args = parser.parse_args(argv)

    config = load_config(args.config)
    if args.ledger is not None:
        config.ledger_path = args.ledger
    session = Session(config)

    if args.line:
        for text in args.line:
            step(session, text, args.json)
    else:
        run_stdin(session, args.json)

    if args.graph:
        g = sequence_to_nx(session.canvas)
        print("Nodes:")
        for n, data in g.nodes(data=True):
            print(f"  {n}: {data}")
        print("Edges:")
        for u, v in g.edges():
            print(f"  {u} -> {v}")
        print("Summary:", graph_summary(g))

    if config.ledger_path is not None:
        print(f"Session ledger → {config.ledger_path}")


if __name__ == "__main__":
    main()
