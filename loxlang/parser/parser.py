"""
Main parser entry point for Lox.

This module defines the `Parser` class, which coordinates the recursive
descent parsing process. The actual parsing routines are split across
`loxlang.parser.expressions` and `loxlang.parser.statements`.

The first syntax error aborts parsing with a `ParseException`; there is no
error recovery.


File: parser.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.1
License: MIT
"""

from loxlang.exceptions import ParseException
from loxlang.lexer import Token

from . import expressions as _expr
from . import statements as _stmt


class Parser:
    """Lox parser."""

    def __init__(self, tokens: list[Token]):
        """
        Initialize the parser with a list of tokens.

        Parameters:
            tokens (list): A list of Token instances ending with an EOF token.
        """
        if not tokens or tokens[-1].type != 'EOF':
            raise ValueError("Token list must end with an EOF token")
        self.tokens = tokens
        self.position = 0
        self.curr_token = self.tokens[self.position]

    def advance(self) -> Token:
        """
        Consume the current token and return it. The EOF token is never
        consumed.
        """
        tok = self.curr_token
        if tok.type != 'EOF':
            self.position += 1
            self.curr_token = self.tokens[self.position]
        return tok

    def check(self, *token_types: str) -> bool:
        """
        Return True if the current token is one of ``token_types``.
        """
        return self.curr_token.type in token_types

    def match(self, *token_types: str) -> Token | None:
        """
        Consume and return the current token if it is one of ``token_types``.
        """
        if self.check(*token_types):
            return self.advance()
        return None

    def eat(self, token_type: str, message: str) -> Token:
        """
        Consume the current token if it matches the expected type.

        Parameters:
            token_type (str): The expected token type.
            message (str): The error message if it does not match.

        Raises:
            ParseException: If the token does not match the expected type.
        """
        if self.curr_token.type == token_type:
            return self.advance()
        raise ParseException(self.curr_token, message)

    # Expression wrappers
    def expr(self) -> tuple:
        """
        Parse a full expression.
        """
        return _expr.parse_expr(self)

    def assignment(self) -> tuple:
        """
        Parse an assignment or anything of higher precedence.
        """
        return _expr.parse_assignment(self)

    def logic_or(self) -> tuple:
        """
        Parse a logical OR expression.
        """
        return _expr.parse_logic_or(self)

    def logic_and(self) -> tuple:
        """
        Parse a logical AND expression.
        """
        return _expr.parse_logic_and(self)

    def equality(self) -> tuple:
        """
        Parse an equality expression using ``==`` or ``!=``.
        """
        return _expr.parse_equality(self)

    def comparison(self) -> tuple:
        """
        Parse a comparison expression using relational operators.
        """
        return _expr.parse_comparison(self)

    def term(self) -> tuple:
        """
        Parse an addition or subtraction expression.
        """
        return _expr.parse_term(self)

    def factor(self) -> tuple:
        """
        Parse a multiplication or division expression.
        """
        return _expr.parse_factor(self)

    def unary(self) -> tuple:
        """
        Parse a prefix ``!`` or ``-`` expression.
        """
        return _expr.parse_unary(self)

    def primary(self) -> tuple:
        """
        Parse a literal, variable, or parenthesized group.
        """
        return _expr.parse_primary(self)

    # Statement wrappers
    def declaration(self) -> tuple:
        """
        Parse a declaration or a statement.
        """
        return _stmt.parse_declaration(self)

    def statement(self) -> tuple:
        """
        Parse a single statement.
        """
        return _stmt.parse_statement(self)

    def block(self) -> tuple:
        """
        Parse a block of declarations enclosed in braces.
        """
        return _stmt.parse_block(self)

    def parse_var_declaration(self) -> tuple:
        """
        Parse a ``var`` declaration.
        """
        return _stmt.parse_var_declaration(self)

    def parse_print(self) -> tuple:
        """
        Parse a ``print`` statement.
        """
        return _stmt.parse_print(self)

    def parse_if(self) -> tuple:
        """
        Parse an ``if`` conditional statement.
        """
        return _stmt.parse_if(self)

    def parse_expression_statement(self) -> tuple:
        """
        Parse an expression followed by a semicolon.
        """
        return _stmt.parse_expression_statement(self)

    def parse(self) -> list[tuple]:
        """
        Parse the full input into a list of statements.
        """
        statements = []
        while not self.check('EOF'):
            statements.append(self.declaration())
        return statements

    def parse_expression(self) -> tuple:
        """
        Parse the full input as a single expression.
        """
        node = self.expr()
        self.eat('EOF', "Expecting end of expression")
        return node
