import sys
import os
import time
from typing import List, Optional, Set

from . import lexing, parser
from .errors import SwinguageError
from .parser import engine as parser_engine
from .runtime import evaluator as runtime_evaluator
from .syntax import ast

OPTIONS = {"debug", "tokens", "ast"}

def print_usage():
    print("""Usage:
  python -m swinguage [input-file|-] [options...]

Reads source from standard input when no file (or '-') is given.

Options:
  tokens   - Print the token stream
  ast      - Print the parsed tree
  debug    - Trace lexing, parsing and evaluation

A minus sign written directly before a digit is part of the number, so
`10-3` is two statements (10, then -3). Write `10 - 3` to subtract.
""")

def read_source(path: Optional[str]) -> str:
    if path is None or path == "-":
        return sys.stdin.read()
    with open(os.path.abspath(path), 'r', encoding='utf-8') as f:
        return f.read()

def set_debug(enabled: bool):
    lexing.DEBUG_LEX = enabled
    parser_engine.DEBUG_PARSE = enabled
    runtime_evaluator.DEBUG_EVAL = enabled

def run_source(source: str, options: Set[str]) -> int:
    use_debug = "debug" in options
    start = time.time() * 1000
    try:
        tokens = lexing.tokenize(source)
        if "tokens" in options or use_debug:
            print("== Tokens ==")
            print(f"  {lexing.show_tokens(tokens)}")
            print()

        program = parser.parse(tokens)
        if "ast" in options or use_debug:
            print("== AST ==")
            for expr in program.exprs:
                print(f"  {ast.show_expr(expr)}")
            print()

        result = runtime_evaluator.evaluate(program)
    except SwinguageError as e:
        print(f"Error: {e}")
        return 1

    print(f"Result: {result}")
    if use_debug:
        print(f"Total time: {int(time.time() * 1000 - start)}ms")
    return 0

def main(argv: Optional[List[str]] = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    if "-h" in args or "--help" in args:
        print_usage()
        return 0

    options = {a for a in args if a in OPTIONS}
    paths = [a for a in args if a not in OPTIONS]
    if len(paths) > 1:
        print_usage()
        return 2

    input_path = paths[0] if paths else None
    try:
        source = read_source(input_path)
    except OSError as e:
        print(f"Failed to read file: {input_path}")
        print(f"Error: {e}")
        return 1

    # Tracing is switched on for this run only
    previous = (lexing.DEBUG_LEX, parser_engine.DEBUG_PARSE, runtime_evaluator.DEBUG_EVAL)
    if "debug" in options:
        set_debug(True)
    try:
        return run_source(source, options)
    finally:
        lexing.DEBUG_LEX, parser_engine.DEBUG_PARSE, runtime_evaluator.DEBUG_EVAL = previous

if __name__ == "__main__":
    sys.exit(main())
