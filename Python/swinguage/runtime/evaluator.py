from typing import Optional
from ..syntax import ast
from ..errors import ExpectedExpression, InvalidParameterCount, RecursionLimit
from .types import NumVal, Variable, Function, Env
from .. import prelude

DEBUG_EVAL = False

def log(msg: str):
    if DEBUG_EVAL:
        print(f"[EVAL] {msg}")

# Results of statements that have no natural value
FUNCTION_DEFINED = NumVal(1.0)
NO_BRANCH_TAKEN = NumVal(-1.0)
LOOP_NEVER_RAN = NumVal(0.0)

def truthy(val: NumVal) -> bool:
    return val.n >= 1

def initial_env() -> Env:
    return Env(prelude.initial_bindings())

# ======================================
# Evaluation
# ======================================

def eval_node(node: ast.Expr, env: Env) -> NumVal:
    if isinstance(node, ast.Num): return NumVal(node.value)
    if isinstance(node, ast.Var): return env.lookup_variable(node.name)
    if isinstance(node, ast.InfixOp): return eval_infix(node, env)
    if isinstance(node, ast.VarDecl): return eval_var_decl(node, env)
    if isinstance(node, ast.Block): return eval_block(node, env)
    if isinstance(node, ast.FuncDef): return eval_func_def(node, env)
    if isinstance(node, ast.Call): return eval_call(node, env)
    if isinstance(node, ast.IfStmt): return eval_if(node, env)
    if isinstance(node, ast.WhileStmt): return eval_while(node, env)
    raise TypeError(f"Cannot evaluate {node!r}")

def eval_infix(node: ast.InfixOp, env: Env) -> NumVal:
    # Walk the left spine without recursing so long operator chains stay flat
    spine = [node]
    while isinstance(spine[-1].left, ast.InfixOp):
        spine.append(spine[-1].left)

    acc = eval_node(spine[-1].left, env)
    for op_node in reversed(spine):
        right = eval_node(op_node.right, env)
        acc = prelude.eval_arithmetic(op_node.op, acc, right)
    return acc

def eval_var_decl(node: ast.VarDecl, env: Env) -> NumVal:
    val = eval_node(node.value, env)
    env.bind(node.name, Variable(val))
    log(f"ref {node.name} = {val}")
    return val

def eval_block(node: ast.Block, env: Env) -> NumVal:
    if not node.exprs:
        raise ExpectedExpression()
    for expr in node.exprs[:-1]:
        eval_node(expr, env)
    return eval_node(node.exprs[-1], env)

def eval_func_def(node: ast.FuncDef, env: Env) -> NumVal:
    env.bind(node.name, Function(node))
    log(f"fn {node.name}({', '.join(node.params)})")
    return FUNCTION_DEFINED

def eval_call(node: ast.Call, env: Env) -> NumVal:
    definition = env.lookup_function(node.name)
    if len(definition.params) != len(node.args):
        raise InvalidParameterCount(node.name, len(definition.params), len(node.args))

    # Arguments see the environment as it stood at call entry
    args = [eval_node(arg, env) for arg in node.args]
    frame = {name: Variable(val) for name, val in zip(definition.params, args)}
    log(f"call {node.name}({', '.join(str(a) for a in args)}) depth={env.depth}")

    with env.scope(frame):
        result = eval_node(definition.body, env)

    log(f"return {node.name} -> {result}")
    return result

def eval_if(node: ast.IfStmt, env: Env) -> NumVal:
    for condition, body in node.branches:
        if truthy(eval_node(condition, env)):
            return eval_node(body, env)
    if node.else_body is None:
        return NO_BRANCH_TAKEN
    return eval_node(node.else_body, env)

def eval_while(node: ast.WhileStmt, env: Env) -> NumVal:
    result: Optional[NumVal] = None
    while True:
        # Every condition is evaluated each iteration, no short-circuit
        values = [eval_node(cond, env) for cond in node.conditions]
        if not all(truthy(v) for v in values):
            break
        result = eval_node(node.body, env)
    return result if result is not None else LOOP_NEVER_RAN

# ======================================
# Entry Points
# ======================================

def evaluate(node: ast.Expr, env: Optional[Env] = None) -> NumVal:
    if env is None:
        env = initial_env()
    try:
        return eval_node(node, env)
    except RecursionError:
        raise RecursionLimit() from None

def eval_program(program: ast.Block, env: Optional[Env] = None) -> float:
    return evaluate(program, env).n
