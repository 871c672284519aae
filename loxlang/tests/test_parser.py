"""Tests for the parser and the prefix expression printer."""

import pytest

from loxlang.exceptions import ParseException
from loxlang.lexer import tokenize
from loxlang.operations import Op
from loxlang.parser import Parser
from loxlang.tests.utils import parse_expression, parse_source, prefix_form


@pytest.mark.parametrize("source, expected", [
    ("true", "true"),
    ("false", "false"),
    ("nil", "nil"),
    ("42", "42.0"),
    ("0.5", "0.5"),
    ('"hi there"', "hi there"),
    ("foo", "foo"),
    ("(1)", "(group 1.0)"),
    ("((true))", "(group (group true))"),
    ("-3", "(- 3.0)"),
    ("!!false", "(! (! false))"),
    ("1 - 2", "(- 1.0 2.0)"),
    ("1 + 2 * 3", "(+ 1.0 (* 2.0 3.0))"),
    ("(1 + 2) * 3", "(* (group (+ 1.0 2.0)) 3.0)"),
    ("8 / 4 / 2", "(/ (/ 8.0 4.0) 2.0)"),
    ("1 < 2 == 3 >= 4", "(== (< 1.0 2.0) (>= 3.0 4.0))"),
    ("1 != 2", "(!= 1.0 2.0)"),
    ("a or b and c", "(or a (and b c))"),
    ("a = b = 1", "(= a (= b 1.0))"),
    ("-a * b", "(* (- a) b)"),
])
def test_prefix_form(source, expected):
    assert prefix_form(source) == expected


def test_binary_nodes_record_operator_line():
    node = parse_expression("1\n+\n2")
    assert node[0] == Op.ADD
    assert node[-1] == 2


def test_grouping_records_paren_line():
    node = parse_expression("\n(1)")
    assert node == ('group', ('number', 1.0, 2), 2)


def test_missing_right_paren():
    with pytest.raises(ParseException) as exc:
        parse_expression("(1 + 2")
    assert exc.value.message == "Expecting `)`"
    assert str(exc.value) == "[line 1] Error at end: Expecting `)`"


def test_missing_expression_names_offending_token():
    with pytest.raises(ParseException) as exc:
        parse_expression("(72 +)")
    assert str(exc.value) == "[line 1] Error at ')': Expecting expression"
    assert exc.value.token.lexeme == ')'


def test_invalid_assignment_target_reported_at_equals():
    with pytest.raises(ParseException) as exc:
        parse_source("\n1 = 2;")
    assert exc.value.message == "Invalid assignment target"
    assert exc.value.token.type == 'EQUAL'
    assert exc.value.line == 2


def test_assignment_to_variable_parses():
    (stmt,) = parse_source("x = 2;")
    assert stmt == ('expr_stmt', ('assign', 'x', ('number', 2.0, 1), 1), 1)


def test_var_declaration_with_and_without_initializer():
    decl_a, decl_b = parse_source("var a = 1;\nvar b;")
    assert decl_a == ('decl', 'a', ('number', 1.0, 1), 1)
    assert decl_b == ('decl', 'b', None, 2)


def test_var_requires_name():
    with pytest.raises(ParseException) as exc:
        parse_source("var 1 = 2;")
    assert exc.value.message == "Expecting variable name"


def test_statement_requires_semicolon():
    with pytest.raises(ParseException) as exc:
        parse_source("print 1")
    assert exc.value.at_end
    assert str(exc.value) == "[line 1] Error at end: Expecting `;`"


def test_block_and_if_else():
    (stmt,) = parse_source(
        "if (x) {\n"
        "  print 1;\n"
        "} else print 2;\n"
    )
    kind, cond, then_branch, else_branch, line = stmt
    assert kind == 'if'
    assert cond == ('ident', 'x', 1)
    assert then_branch[0] == 'block'
    assert then_branch[1] == [('print', ('number', 1.0, 2), 2)]
    assert else_branch == ('print', ('number', 2.0, 3), 3)
    assert line == 1


def test_dangling_else_binds_to_nearest_if():
    (outer,) = parse_source("if (a) if (b) print 1; else print 2;")
    assert outer[3] is None
    inner = outer[2]
    assert inner[0] == 'if'
    assert inner[3] is not None


def test_unclosed_block():
    with pytest.raises(ParseException) as exc:
        parse_source("{ print 1;")
    assert exc.value.message == "Expecting `}`"


def test_if_requires_parenthesized_condition():
    with pytest.raises(ParseException) as exc:
        parse_source("if true print 1;")
    assert exc.value.message == "Expecting `(`"


def test_parse_expression_rejects_trailing_tokens():
    with pytest.raises(ParseException) as exc:
        parse_expression("1 2")
    assert exc.value.message == "Expecting end of expression"


def test_empty_program():
    assert parse_source("") == []


def test_parser_requires_eof_token():
    tokens, _ = tokenize("1")
    with pytest.raises(ValueError):
        Parser(tokens[:-1])
