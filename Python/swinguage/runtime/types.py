from contextlib import contextmanager
from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional
from ..syntax import ast
from ..syntax.ast import show_number
from ..errors import NotDefined

# ======================================
# Values
# ======================================

class Value: pass

@dataclass(frozen=True)
class NumVal(Value):
    n: float

    def __str__(self): return show_number(self.n)
    def __float__(self): return float(self.n)

# ======================================
# Bindings
# ======================================

class Binding: pass

@dataclass
class Variable(Binding):
    value: NumVal
    def __repr__(self): return f"Variable({self.value})"

@dataclass
class Function(Binding):
    definition: ast.FuncDef
    def __repr__(self): return f"Function({self.definition.name}/{len(self.definition.params)})"

# ======================================
# Environment
# ======================================

class Env:
    """
    A stack of scope frames. The bottom frame holds globals; every function
    call pushes a frame holding only its parameters and pops it on the way
    out, whether the body succeeded or not. Lookups walk from the innermost
    frame outward. Declarations update an existing binding in place or
    create a new global, so they outlive the call that made them.
    """

    def __init__(self, bindings: Optional[Dict[str, Binding]] = None):
        self.frames: List[Dict[str, Binding]] = [dict(bindings) if bindings else {}]

    @property
    def depth(self) -> int:
        return len(self.frames)

    @property
    def globals(self) -> Dict[str, Binding]:
        return self.frames[0]

    def lookup(self, name: str) -> Optional[Binding]:
        for frame in reversed(self.frames):
            if name in frame:
                return frame[name]
        return None

    def lookup_variable(self, name: str) -> NumVal:
        binding = self.lookup(name)
        if not isinstance(binding, Variable):
            raise NotDefined(name)
        return binding.value

    def lookup_function(self, name: str) -> ast.FuncDef:
        binding = self.lookup(name)
        if not isinstance(binding, Function):
            raise NotDefined(name)
        return binding.definition

    def bind(self, name: str, binding: Binding):
        # Rebind where the name already lives; new names are always global
        for frame in reversed(self.frames):
            if name in frame:
                frame[name] = binding
                return
        self.globals[name] = binding

    @contextmanager
    def scope(self, bindings: Dict[str, Binding]) -> Iterator['Env']:
        self.frames.append(dict(bindings))
        try:
            yield self
        finally:
            self.frames.pop()

    def contains(self, name: str) -> bool: return self.lookup(name) is not None

    def __repr__(self):
        return f"Env({self.frames})"
