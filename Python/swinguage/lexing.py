from typing import List, Tuple, Callable, Dict, Optional, Sequence
import re
from .errors import LexError

DEBUG_LEX = False

def log(msg: str):
    if DEBUG_LEX:
        print(f"[LEX] {msg}")

# ======================================
# Token Definition
# ======================================

class Token:
    __slots__ = ("s",)

    def __init__(self, s: str):
        object.__setattr__(self, "s", s)

    def __setattr__(self, name, value):
        raise AttributeError(f"{self.__class__.__name__} is immutable")

    @property
    def lexeme(self) -> str:
        return self.s

    def __repr__(self):
        return f"{self.__class__.__name__}({self.s})"

    def __eq__(self, other):
        return isinstance(other, self.__class__) and self.s == other.s

    def __hash__(self):
        return hash((self.__class__.__name__, self.s))

# Precedence tiers for infix operators (higher binds tighter)
PRECEDENCE: Dict[str, int] = {
    "<": 5, ">": 5, "<=": 5, ">=": 5, "==": 5, "!=": 5,
    "+": 10, "-": 10,
    "*": 20, "/": 20,
}

class Op(Token):
    __slots__ = ()

    @property
    def precedence(self) -> int:
        return PRECEDENCE[self.s]

class Number(Token):
    __slots__ = ()

    @property
    def value(self) -> float:
        return float(self.s)

class Ident(Token):
    __slots__ = ()

class Keyword(Token):
    __slots__ = ()

class Delim(Token):
    __slots__ = ()

# ======================================
# Tokenizer Types and Constructors
# ======================================

# Tokenizer: (input_str, pos) -> (Token, next_pos) or None
Tokenizer = Callable[[str, int], Optional[Tuple[Token, int]]]

def lex_regex_longest(pattern: str, converter: Callable[[str], Token]) -> Tokenizer:
    regex = re.compile(pattern)

    def tokenizer(input_str: str, pos: int) -> Optional[Tuple[Token, int]]:
        m = regex.match(input_str, pos)
        if m and m.end() > pos:
            sub = m.group(0)
            return converter(sub), pos + len(sub)
        return None

    return tokenizer

def lex_delim(delimiters: Sequence[str]) -> Tokenizer:
    # Longest delimiter first so multi-character ones win over their prefixes
    ordered = sorted(delimiters, key=len, reverse=True)

    def tokenizer(input_str: str, pos: int) -> Optional[Tuple[Token, int]]:
        for d in ordered:
            if input_str.startswith(d, pos):
                return Delim(d), pos + len(d)
        return None
    return tokenizer

# ======================================
# Tokenizer Config
# ======================================

class TokenizerConfig:
    def __init__(self, keywords: Sequence[str], operators: Sequence[str], delimiters: Sequence[str]):
        self.keywords = set(keywords)
        self.operators = list(operators)
        self.delimiters = list(delimiters)

    @staticmethod
    def default() -> 'TokenizerConfig':
        return TokenizerConfig(
            keywords=["ref", "fn", "if", "else", "while", "do", "for"],
            operators=list(PRECEDENCE.keys()),
            delimiters=["(", ")", "=", "{", "}", "[", "]", ","],
        )

def build_tokenizers(config: TokenizerConfig) -> List[Tokenizer]:
    """
    Build the ordered rule table. The first rule that matches wins, so the
    order below is part of the lexical grammar: a leading '-' followed by a
    digit is a negative literal, never a minus operator. As a result
    ``10-3`` lexes as ``10`` ``-3``, which is two statements evaluating to -3;
    subtraction needs whitespace after the operator, as in ``10 - 3``.
    """
    number_regex = r"-?([0-9]*\.[0-9]+|[0-9]+)"
    ident_regex = r"[a-zA-Z_$][a-zA-Z_$0-9]*"

    sorted_ops = sorted(config.operators, key=len, reverse=True)
    op_regex = "|".join(re.escape(k) for k in sorted_ops)

    return [
        lex_regex_longest(number_regex, lambda s: Number(s)),
        lex_regex_longest(op_regex, lambda s: Op(s)),
        lex_regex_longest(ident_regex, lambda s:
            Keyword(s) if s in config.keywords else Ident(s)
        ),
        lex_delim(config.delimiters),
    ]

_default_tokenizers: Optional[List[Tokenizer]] = None

def default_tokenizers() -> List[Tokenizer]:
    global _default_tokenizers
    if _default_tokenizers is None:
        _default_tokenizers = build_tokenizers(TokenizerConfig.default())
    return _default_tokenizers

# ======================================
# Main Lexer
# ======================================

def skip_whitespace(input_str: str, pos: int) -> int:
    while pos < len(input_str) and input_str[pos].isspace():
        pos += 1
    return pos

def lex(input_str: str, tokenizers: List[Tokenizer]) -> List[Token]:
    tokens: List[Token] = []
    pos = skip_whitespace(input_str, 0)

    while pos < len(input_str):
        match = None
        for tokenizer in tokenizers:
            match = tokenizer(input_str, pos)
            if match is not None:
                break

        if match is None:
            fragment = input_str[pos:pos + 16]
            log(f"pos={pos}: no rule matched {fragment!r}")
            raise LexError(pos, fragment)

        tok, next_pos = match
        log(f"pos={pos}: {tok!r}")
        tokens.append(tok)
        pos = skip_whitespace(input_str, next_pos)

    return tokens

def tokenize(input_str: str, config: Optional[TokenizerConfig] = None) -> List[Token]:
    tokenizers = default_tokenizers() if config is None else build_tokenizers(config)
    return lex(input_str, tokenizers)

# ======================================
# Unlexer
# ======================================

def show_tokens(tokens: List[Token]) -> str:
    return " ".join(t.lexeme for t in tokens)
