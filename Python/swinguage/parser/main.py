from typing import List
from ..lexing import Token, tokenize
from ..syntax import ast
from .engine import Parser

def parse(tokens: List[Token]) -> ast.Block:
    return Parser(tokens).parse()

def parse_source(source: str) -> ast.Block:
    return parse(tokenize(source))
