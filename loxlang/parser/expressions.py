"""
Expression parsing utilities for Lox.

These functions operate on a `loxlang.parser.parser.Parser` instance and
implement the recursive descent logic for expressions, maintaining
operator precedence and associativity.

Precedence, lowest first:
    assignment  =                 (right-associative)
    logic_or    or
    logic_and   and
    equality    == !=
    comparison  > >= < <=
    term        + -
    factor      * /
    unary       ! -               (prefix)
    primary     literals, identifiers, ( expression )

Each binary node records the line of its operator token.


File: expressions.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from typing import TYPE_CHECKING

from loxlang.exceptions import ParseException
from loxlang.operations import (
    COMPARISON_OPS,
    EQUALITY_OPS,
    FACTOR_OPS,
    TERM_OPS,
    UNARY_OPS,
    Op,
)

if TYPE_CHECKING:
    from loxlang.parser import Parser


# ---- Highest precedence ----

def parse_primary(parser: 'Parser') -> tuple:
    """Parse a literal, variable, or parenthesized expression."""
    tok = parser.curr_token

    if tok.type == 'NUMBER':
        parser.advance()
        return ('number', tok.literal, tok.line)

    if tok.type == 'STRING':
        parser.advance()
        return ('string', tok.literal, tok.line)

    if tok.type in ('TRUE', 'FALSE'):
        parser.advance()
        return ('bool', tok.type == 'TRUE', tok.line)

    if tok.type == 'NIL':
        parser.advance()
        return ('nil', None, tok.line)

    if tok.type == 'IDENTIFIER':
        parser.advance()
        return ('ident', tok.lexeme, tok.line)

    if tok.type == 'LEFT_PAREN':
        parser.advance()
        inner = parser.expr()
        parser.eat('RIGHT_PAREN', "Expecting `)`")
        return ('group', inner, tok.line)

    raise ParseException(tok, "Expecting expression")


def parse_unary(parser: 'Parser') -> tuple:
    """Parse prefix negation and logical not."""
    tok = parser.match(*UNARY_OPS)
    if tok is not None:
        operand = parser.unary()
        return ('unary', UNARY_OPS[tok.type], operand, tok.line)
    return parser.primary()


def parse_factor(parser: 'Parser') -> tuple:
    """Parse multiplication and division expressions."""
    result = parser.unary()
    while parser.check(*FACTOR_OPS):
        op_tok = parser.advance()
        result = (FACTOR_OPS[op_tok.type], result, parser.unary(), op_tok.line)
    return result


def parse_term(parser: 'Parser') -> tuple:
    """Parse addition and subtraction expressions."""
    result = parser.factor()
    while parser.check(*TERM_OPS):
        op_tok = parser.advance()
        result = (TERM_OPS[op_tok.type], result, parser.factor(), op_tok.line)
    return result


def parse_comparison(parser: 'Parser') -> tuple:
    """Parse comparison expressions (<, >, <=, >=)."""
    result = parser.term()
    while parser.check(*COMPARISON_OPS):
        op_tok = parser.advance()
        result = (COMPARISON_OPS[op_tok.type], result, parser.term(), op_tok.line)
    return result


def parse_equality(parser: 'Parser') -> tuple:
    """Parse equality expressions (==, !=)."""
    result = parser.comparison()
    while parser.check(*EQUALITY_OPS):
        op_tok = parser.advance()
        result = (EQUALITY_OPS[op_tok.type], result, parser.comparison(), op_tok.line)
    return result


def parse_logic_and(parser: 'Parser') -> tuple:
    """Parse logical AND expressions using the 'and' keyword."""
    result = parser.equality()
    while parser.check('AND'):
        tok = parser.advance()
        result = (Op.AND, result, parser.equality(), tok.line)
    return result


def parse_logic_or(parser: 'Parser') -> tuple:
    """Parse logical OR expressions using the 'or' keyword."""
    result = parser.logic_and()
    while parser.check('OR'):
        tok = parser.advance()
        result = (Op.OR, result, parser.logic_and(), tok.line)
    return result


# ---- Lowest precedence ----

def parse_assignment(parser: 'Parser') -> tuple:
    """
    Parse an assignment.

    The target is parsed as an ordinary expression first and only checked
    once ``=`` is seen: it must be a bare variable reference.
    """
    target = parser.logic_or()
    if parser.check('EQUAL'):
        equals = parser.advance()
        value = parser.assignment()
        if target[0] == 'ident':
            return ('assign', target[1], value, equals.line)
        raise ParseException(equals, "Invalid assignment target")
    return target


# ---- Entry point ----

def parse_expr(parser: 'Parser') -> tuple:
    """Parse an expression starting from the lowest-precedence operator."""
    return parser.assignment()
