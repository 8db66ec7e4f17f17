from typing import List, Optional
from ..lexing import Token, Op, Number, Ident, Keyword, Delim
from ..syntax import ast
from ..errors import (
    ParseError, ExpectedNumber, ExpectedIdentifier, ExpectedOperator,
    ExpectedExpression, Expected, NestingTooDeep,
)

DEBUG_PARSE = False

def log(msg: str):
    if DEBUG_PARSE:
        print(f"[PARSE] {msg}")

# ======================================
# Recursive-Descent Parser
# ======================================

class Parser:
    def __init__(self, tokens: List[Token], depth: int = 0):
        self.tokens = tokens
        self.index = 0
        self.depth = depth

    # --- Cursor ---

    @property
    def can_pop(self) -> bool:
        return self.index < len(self.tokens)

    def peek(self) -> Optional[Token]:
        if not self.can_pop: return None
        return self.tokens[self.index]

    def pop(self) -> Optional[Token]:
        if not self.can_pop: return None
        tok = self.tokens[self.index]
        self.index += 1
        return tok

    def peek_is(self, cls: type, lexeme: str) -> bool:
        tok = self.peek()
        return isinstance(tok, cls) and tok.lexeme == lexeme

    def expect(self, cls: type, lexeme: str):
        tok = self.pop()
        if not (isinstance(tok, cls) and tok.lexeme == lexeme):
            raise Expected(f"'{lexeme}'")
        return tok

    # --- Program ---

    def parse(self) -> ast.Block:
        exprs: List[ast.Expr] = []
        try:
            while self.can_pop:
                exprs.append(self.parse_statement())
        except RecursionError:
            raise NestingTooDeep() from None
        log(f"{'  ' * self.depth}block of {len(exprs)} statement(s)")
        return ast.Block(exprs)

    def parse_statement(self) -> ast.Expr:
        tok = self.peek()
        if isinstance(tok, Keyword):
            if tok.lexeme == "ref": return self.parse_var_decl()
            if tok.lexeme == "fn": return self.parse_func_def()
            if tok.lexeme == "if": return self.parse_if()
            if tok.lexeme == "while": return self.parse_while()
            if tok.lexeme == "for": return self.parse_for()
        return self.parse_expression()

    def parse_var_decl(self) -> ast.VarDecl:
        self.expect(Keyword, "ref")
        name = self.parse_identifier()
        self.expect(Delim, "=")
        value = self.parse_expression()
        log(f"{'  ' * self.depth}ref {name}")
        return ast.VarDecl(name, value)

    def parse_func_def(self) -> ast.FuncDef:
        self.expect(Keyword, "fn")
        name = self.parse_identifier()

        params = []
        for node in self.parse_argument_list():
            if not isinstance(node, ast.Var):
                raise ExpectedIdentifier()
            params.append(node.name)

        body = self.parse_block()
        log(f"{'  ' * self.depth}fn {name}({', '.join(params)})")
        return ast.FuncDef(name, params, body)

    def parse_if(self) -> ast.IfStmt:
        self.expect(Keyword, "if")
        condition = self.parse_expression()
        body = self.parse_block()
        branches = [(condition, body)]

        if not self.peek_is(Keyword, "else"):
            return ast.IfStmt(branches, None)
        self.pop()

        if not self.peek_is(Keyword, "if"):
            return ast.IfStmt(branches, self.parse_block())

        # 'else if' folds into this statement's branch list
        chained = self.parse_if()
        return ast.IfStmt(branches + chained.branches, chained.else_body)

    def parse_while(self) -> ast.WhileStmt:
        self.expect(Keyword, "while")
        condition = self.parse_expression()
        body = self.parse_block()
        return ast.WhileStmt([condition], body)

    def parse_for(self) -> ast.WhileStmt:
        # No initializer or step clauses: 'for' is a plain conditional loop
        self.expect(Keyword, "for")
        condition = self.parse_expression()
        body = self.parse_block()
        return ast.WhileStmt([condition], body)

    # --- Blocks ---

    def parse_block(self) -> ast.Block:
        if not self.peek_is(Delim, "{"):
            raise Expected("'{'")
        self.pop()

        start = self.index
        depth = 1
        while self.can_pop:
            tok = self.tokens[self.index]
            if isinstance(tok, Delim) and tok.lexeme == "{":
                depth += 1
            elif isinstance(tok, Delim) and tok.lexeme == "}":
                depth -= 1
                if depth == 0:
                    break
            self.index += 1
        end = self.index

        if not self.peek_is(Delim, "}"):
            raise Expected("'}'")
        self.pop()

        return Parser(self.tokens[start:end], self.depth + 1).parse()

    # --- Expressions ---

    def parse_expression(self) -> ast.Expr:
        if not self.can_pop:
            raise ExpectedExpression()
        node = self.parse_value()
        return self.parse_infix(node)

    def peek_precedence(self) -> int:
        tok = self.peek()
        if isinstance(tok, Op):
            return tok.precedence
        return -1

    def parse_infix(self, node: ast.Expr, min_precedence: int = 0) -> ast.Expr:
        left = node
        while True:
            precedence = self.peek_precedence()
            if precedence < min_precedence:
                break
            op = self.pop()
            if not isinstance(op, Op):
                raise ExpectedOperator()

            right = self.parse_value()
            if precedence < self.peek_precedence():
                right = self.parse_infix(right, precedence + 1)
            left = ast.InfixOp(op.lexeme, left, right)
        return left

    def parse_value(self) -> ast.Expr:
        tok = self.peek()
        if isinstance(tok, Number):
            return self.parse_number()
        if isinstance(tok, Delim) and tok.lexeme == "(":
            return self.parse_parens()
        if isinstance(tok, Ident):
            name = self.parse_identifier()
            if not self.peek_is(Delim, "("):
                return ast.Var(name)
            return ast.Call(name, self.parse_argument_list())
        raise ExpectedExpression()

    def parse_number(self) -> ast.Num:
        tok = self.pop()
        if not isinstance(tok, Number):
            raise ExpectedNumber()
        return ast.Num(tok.value)

    def parse_identifier(self) -> str:
        tok = self.pop()
        if not isinstance(tok, Ident):
            raise ExpectedIdentifier()
        return tok.lexeme

    def parse_parens(self) -> ast.Expr:
        self.expect(Delim, "(")
        node = self.parse_expression()
        self.expect(Delim, ")")
        return node

    def parse_argument_list(self) -> List[ast.Expr]:
        self.expect(Delim, "(")

        args: List[ast.Expr] = []
        while self.can_pop:
            # Only the attempt at one more entry is abandoned on failure
            mark = self.index
            try:
                value = self.parse_expression()
            except ParseError:
                self.index = mark
                break

            args.append(value)
            if not self.peek_is(Delim, ","):
                break
            self.pop()

        self.expect(Delim, ")")
        return args
