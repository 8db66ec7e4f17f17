from typing import Optional

# ======================================
# Error Families
# ======================================

class SwinguageError(Exception):
    """Base class for every failure the pipeline reports to its host."""

# --- Lexing ---

class LexError(SwinguageError):
    def __init__(self, pos: int, fragment: str):
        self.pos = pos
        self.fragment = fragment
        super().__init__(f"Unexpected input at {pos}: {fragment!r}")

# --- Parsing ---

class ParseError(SwinguageError): pass

class ExpectedNumber(ParseError):
    def __init__(self):
        super().__init__("Expected number")

class ExpectedIdentifier(ParseError):
    def __init__(self):
        super().__init__("Expected identifier")

class ExpectedOperator(ParseError):
    def __init__(self):
        super().__init__("Expected operator")

class ExpectedExpression(ParseError):
    def __init__(self):
        super().__init__("Expected expression")

class Expected(ParseError):
    def __init__(self, what: str):
        self.what = what
        super().__init__(f"Expected {what}")

class NestingTooDeep(ParseError):
    def __init__(self):
        super().__init__("Source is nested too deeply to parse")

# --- Evaluation ---

class EvalError(SwinguageError): pass

class NotDefined(EvalError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"'{name}' is not defined")

class InvalidParameterCount(EvalError):
    def __init__(self, name: str, expected: Optional[int] = None, got: Optional[int] = None):
        self.name = name
        self.expected = expected
        self.got = got
        if expected is None:
            super().__init__(f"Invalid parameter count for '{name}'")
        else:
            super().__init__(f"Invalid parameter count for '{name}': expected {expected}, got {got}")

class RecursionLimit(EvalError):
    def __init__(self):
        super().__init__("Recursion limit reached during evaluation")
