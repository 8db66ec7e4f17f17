import math
from ..runtime.types import NumVal

def divide(a: float, b: float) -> float:
    # IEEE 754 semantics: x/0 is a signed infinity, 0/0 is NaN
    if b == 0:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b

def eval_arithmetic(op: str, a: NumVal, b: NumVal) -> NumVal:
    va, vb = a.n, b.n
    if op == "+": return NumVal(va + vb)
    if op == "-": return NumVal(va - vb)
    if op == "*": return NumVal(va * vb)
    if op == "/": return NumVal(divide(va, vb))
    if op == "<": return from_bool(va < vb)
    if op == ">": return from_bool(va > vb)
    if op == "<=": return from_bool(va <= vb)
    if op == ">=": return from_bool(va >= vb)
    if op == "==": return from_bool(va == vb)
    if op == "!=": return from_bool(va != vb)
    raise ValueError(f"Unknown operator: {op}")

def from_bool(b: bool) -> NumVal:
    return NumVal(1.0 if b else 0.0)
