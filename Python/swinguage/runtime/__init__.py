from .types import Value, NumVal, Binding, Variable, Function, Env
from .evaluator import evaluate, eval_node, eval_program, initial_env

__all__ = [
    "Value", "NumVal", "Binding", "Variable", "Function", "Env",
    "evaluate", "eval_node", "eval_program", "initial_env",
]
