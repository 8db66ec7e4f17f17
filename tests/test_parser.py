from __future__ import annotations

import pytest

from swinguage import (
    Expected,
    ExpectedExpression,
    ExpectedIdentifier,
    ParseError,
    parse,
    show_expr,
    tokenize,
)
from swinguage.syntax import ast


def parse_text(source: str) -> ast.Block:
    return parse(tokenize(source))


def first(source: str) -> ast.Expr:
    return parse_text(source).exprs[0]


def test_program_is_a_block_of_statements() -> None:
    program = parse_text("1 2 3")
    assert program == ast.Block([ast.Num(1.0), ast.Num(2.0), ast.Num(3.0)])


def test_empty_program() -> None:
    assert parse_text("") == ast.Block([])


@pytest.mark.parametrize(
    ("source", "expected"),
    [
        ("2 + 3 * 4", "(+ 2 (* 3 4))"),
        ("2 * 3 + 4", "(+ (* 2 3) 4)"),
        ("(2 + 3) * 4", "(* (+ 2 3) 4)"),
        ("10 - 3 - 2", "(- (- 10 3) 2)"),
        ("8 / 4 / 2", "(/ (/ 8 4) 2)"),
        ("a - b * c - d", "(- (- a (* b c)) d)"),
        ("1 + 2 < 3 * 4", "(< (+ 1 2) (* 3 4))"),
    ],
)
def test_precedence_climbing(source: str, expected: str) -> None:
    assert show_expr(first(source)) == expected


def test_variable_declaration() -> None:
    assert first("ref x = 1 + 2") == ast.VarDecl(
        "x", ast.InfixOp("+", ast.Num(1.0), ast.Num(2.0))
    )


def test_function_definition() -> None:
    node = first("fn add(a, b) { a + b }")
    assert isinstance(node, ast.FuncDef)
    assert node.name == "add"
    assert node.params == ["a", "b"]
    assert node.body == ast.Block([ast.InfixOp("+", ast.Var("a"), ast.Var("b"))])


def test_function_definition_without_parameters() -> None:
    node = first("fn one() { 1 }")
    assert isinstance(node, ast.FuncDef)
    assert node.params == []


def test_function_parameters_must_be_identifiers() -> None:
    with pytest.raises(ExpectedIdentifier):
        parse_text("fn f(a + 1) { a }")
    with pytest.raises(ExpectedIdentifier):
        parse_text("fn f(2) { 1 }")


def test_call_with_expression_arguments() -> None:
    node = first("sumOrA(1, (5 + 4), 3 + 2)")
    assert isinstance(node, ast.Call)
    assert node.name == "sumOrA"
    assert [show_expr(a) for a in node.args] == ["1", "(+ 5 4)", "(+ 3 2)"]


def test_call_allows_trailing_comma() -> None:
    node = first("f(1, 2,)")
    assert isinstance(node, ast.Call)
    assert len(node.args) == 2


def test_identifier_without_parens_is_a_reference() -> None:
    assert first("x") == ast.Var("x")


def test_if_else_if_chain_folds_into_one_statement() -> None:
    node = first("if a { 1 } else if b { 2 } else { 3 }")
    assert isinstance(node, ast.IfStmt)
    assert [show_expr(c) for c, _ in node.branches] == ["a", "b"]
    assert node.else_body == ast.Block([ast.Num(3.0)])


def test_if_without_else() -> None:
    node = first("if 1 { 2 }")
    assert isinstance(node, ast.IfStmt)
    assert node.else_body is None


def test_while_statement_has_a_single_condition() -> None:
    node = first("while x < 3 { ref x = x + 1 }")
    assert isinstance(node, ast.WhileStmt)
    assert len(node.conditions) == 1
    assert show_expr(node.conditions[0]) == "(< x 3)"


def test_for_parses_like_while() -> None:
    assert first("for x < 3 { x }") == first("while x < 3 { x }")


def test_nested_blocks_match_by_depth() -> None:
    program = parse_text("if 1 { if 1 { 2 } 3 } 4")
    assert len(program.exprs) == 2
    outer = program.exprs[0]
    assert isinstance(outer, ast.IfStmt)
    body = outer.branches[0][1]
    assert len(body.exprs) == 2
    assert isinstance(body.exprs[0], ast.IfStmt)
    assert program.exprs[1] == ast.Num(4.0)


def test_unclosed_block() -> None:
    with pytest.raises(Expected) as excinfo:
        parse_text("fn f() { 1")
    assert excinfo.value.what == "'}'"


def test_missing_block() -> None:
    with pytest.raises(Expected):
        parse_text("while 1 2")


def test_unclosed_paren() -> None:
    with pytest.raises(Expected):
        parse_text("(1 + 2")


def test_dangling_operator() -> None:
    with pytest.raises(ExpectedExpression):
        parse_text("1 +")


@pytest.mark.parametrize("source", ["do", "[1]", "else { 1 }", ")"])
def test_constructs_without_a_grammar_rule(source: str) -> None:
    with pytest.raises(ExpectedExpression):
        parse_text(source)


def test_missing_equals_in_declaration() -> None:
    with pytest.raises(ParseError):
        parse_text("ref x 1")


def test_parse_source_runs_the_lexer_first() -> None:
    from swinguage.parser import parse_source

    assert parse_source("ref r = 2 r") == parse_text("ref r = 2 r")


def test_deeply_nested_parentheses_are_a_parse_error() -> None:
    from swinguage import NestingTooDeep

    source = "(" * 3000 + "1" + ")" * 3000
    with pytest.raises(NestingTooDeep):
        parse_text(source)


def test_long_chain_prints_without_recursing() -> None:
    text = show_expr(first(" * ".join(["2"] * 3000)))
    assert text.startswith("(* (* ")
    assert text.endswith(" 2)")
