"""Command line entry point.

    python -m twinscheme            start the REPL
    python -m twinscheme FILE       run a file
"""

from __future__ import annotations

import argparse
import atexit
import logging
import sys
from pathlib import Path

# Readline gives the REPL line editing and history where the platform has it
try:
    import readline
    READLINE_AVAILABLE = True
except ImportError:
    READLINE_AVAILABLE = False

from twinscheme.config import EVALUATORS, get_history_file, get_log_level
from twinscheme.errors import SchemeError
from twinscheme.interpreter import Interpreter

PROMPT = "> "


def make_completer(interp: Interpreter):
    """Readline completer over the names bound in the root environment."""

    def completer(text: str, state: int):
        options = sorted(name for name in map(str, interp.root.vars) if name.startswith(text))
        if state < len(options):
            return options[state]
        return None

    return completer


def setup_readline(interp: Interpreter) -> None:
    if not READLINE_AVAILABLE:
        return

    history_file = get_history_file()
    try:
        readline.read_history_file(history_file)
    except OSError:
        pass  # no history yet
    readline.set_history_length(1000)
    readline.set_completer_delims(" \t\n()'`,\"")
    readline.set_completer(make_completer(interp))
    readline.parse_and_bind("tab: complete")
    atexit.register(_save_history, history_file)


def _save_history(history_file: str) -> None:
    try:
        readline.write_history_file(history_file)
    except OSError as ex:
        logging.getLogger("Repl").warning("Could not save history to %s: %s", history_file, ex)


def start_repl(interp: Interpreter) -> None:
    print("\nWelcome to the twinscheme REPL!")
    while True:
        try:
            line = input(PROMPT)
        except EOFError:
            print()
            return
        if not line.strip():
            continue
        try:
            print(interp.run_str(line))
        except SchemeError as ex:
            print(ex)


def run_file(interp: Interpreter, path: Path) -> int:
    try:
        interp.execute(path.read_text(encoding="utf-8"))
    except SchemeError as ex:
        print(ex)
        return 1
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="twinscheme")
    parser.add_argument("file", nargs="?", type=Path, help="program to run; omit for a REPL")
    parser.add_argument("--evaluator", choices=EVALUATORS, default=None)
    args = parser.parse_args(argv)

    logging.basicConfig(level=get_log_level(), format="%(name)s: %(levelname)s: %(message)s")

    interp = Interpreter(args.evaluator)
    if args.file is None:
        setup_readline(interp)
        start_repl(interp)
        return 0
    return run_file(interp, args.file)


if __name__ == "__main__":
    sys.exit(main())
