from typing import Optional
from .errors import (
    SwinguageError, LexError, ParseError, EvalError,
    ExpectedNumber, ExpectedIdentifier, ExpectedOperator, ExpectedExpression, Expected, NestingTooDeep,
    NotDefined, InvalidParameterCount, RecursionLimit,
)
from .lexing import Token, Op, Number, Ident, Keyword, Delim, TokenizerConfig, tokenize, show_tokens
from .syntax.ast import Expr, Block, show_expr
from .parser import Parser, parse
from .runtime import NumVal, Env, evaluate, eval_program, initial_env

def run(source: str, env: Optional[Env] = None) -> float:
    """Tokenize, parse and evaluate ``source``; return the last statement's value."""
    return eval_program(parse(tokenize(source)), env)

__all__ = [
    "SwinguageError", "LexError", "ParseError", "EvalError",
    "ExpectedNumber", "ExpectedIdentifier", "ExpectedOperator", "ExpectedExpression", "Expected", "NestingTooDeep",
    "NotDefined", "InvalidParameterCount", "RecursionLimit",
    "Token", "Op", "Number", "Ident", "Keyword", "Delim", "TokenizerConfig",
    "tokenize", "show_tokens",
    "Expr", "Block", "show_expr",
    "Parser", "parse",
    "NumVal", "Env", "evaluate", "eval_program", "initial_env",
    "run",
]
