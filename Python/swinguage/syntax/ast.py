from dataclasses import dataclass, field
from typing import List, Optional, Tuple

# ======================================
# AST Nodes
# ======================================

class Expr: pass

@dataclass
class Num(Expr):
    value: float
    def __repr__(self): return f"Num({self.value})"

@dataclass
class Var(Expr):
    name: str
    def __repr__(self): return f"Var({self.name})"

@dataclass
class InfixOp(Expr):
    op: str
    left: Expr
    right: Expr
    def __repr__(self): return f"InfixOp({self.op}, {self.left}, {self.right})"

@dataclass
class VarDecl(Expr):
    name: str
    value: Expr
    def __repr__(self): return f"VarDecl({self.name}, {self.value})"

@dataclass
class Block(Expr):
    exprs: List[Expr] = field(default_factory=list)
    def __repr__(self): return f"Block({self.exprs})"

@dataclass
class FuncDef(Expr):
    name: str
    params: List[str]
    body: Block
    def __repr__(self): return f"FuncDef({self.name}, {self.params}, {self.body})"

@dataclass
class Call(Expr):
    name: str
    args: List[Expr]
    def __repr__(self): return f"Call({self.name}, {self.args})"

@dataclass
class IfStmt(Expr):
    # (condition, body) pairs tried in order
    branches: List[Tuple[Expr, Block]]
    else_body: Optional[Block] = None
    def __repr__(self): return f"IfStmt({self.branches}, {self.else_body})"

@dataclass
class WhileStmt(Expr):
    # Loop continues only while every condition holds
    conditions: List[Expr]
    body: Block
    def __repr__(self): return f"WhileStmt({self.conditions}, {self.body})"

# ======================================
# Printer
# ======================================

def show_number(value: float) -> str:
    if value.is_integer():
        return str(int(value))
    return repr(value)

def show_expr(expr: Expr) -> str:
    if isinstance(expr, Num): return show_number(expr.value)
    if isinstance(expr, Var): return expr.name
    if isinstance(expr, InfixOp):
        spine = [expr]
        while isinstance(spine[-1].left, InfixOp):
            spine.append(spine[-1].left)
        text = show_expr(spine[-1].left)
        for node in reversed(spine):
            text = f"({node.op} {text} {show_expr(node.right)})"
        return text
    if isinstance(expr, VarDecl):
        return f"(ref {expr.name} {show_expr(expr.value)})"
    if isinstance(expr, FuncDef):
        return f"(fn {expr.name} ({' '.join(expr.params)}) {show_expr(expr.body)})"
    if isinstance(expr, Call):
        args_str = " ".join(map(show_expr, expr.args))
        return f"({expr.name} {args_str})" if args_str else f"({expr.name})"
    if isinstance(expr, IfStmt):
        parts = [f"{show_expr(cond)} {show_expr(body)}" for cond, body in expr.branches]
        if expr.else_body is not None:
            parts.append(f"else {show_expr(expr.else_body)}")
        return f"(if {' '.join(parts)})"
    if isinstance(expr, WhileStmt):
        conds = " ".join(map(show_expr, expr.conditions))
        return f"(while {conds} {show_expr(expr.body)})"
    if isinstance(expr, Block):
        exprs_str = "; ".join(map(show_expr, expr.exprs))
        return f"{{ {exprs_str} }}"
    return str(expr)
