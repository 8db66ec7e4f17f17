import math
from typing import Dict
from ..runtime.types import Binding, NumVal, Variable
from . import arithmetic

constants = {
    "PI": math.pi,
    "E": math.e,
}

def initial_bindings() -> Dict[str, Binding]:
    return {name: Variable(NumVal(val)) for name, val in constants.items()}

eval_arithmetic = arithmetic.eval_arithmetic
