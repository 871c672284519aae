"""Lexer for Lox.

This lexer performs a single forward pass over the source code using a
combined regular expression of named groups. Each match yields a
:class:`Token` containing its kind, the exact lexeme it was scanned from, a
literal value (for strings and numbers) and the source line.

Tokens cover literals (numbers, strings, identifiers), reserved words
(``var``, ``print``, ``if`` …), operators and punctuation. Line comments
beginning with ``//`` are skipped, as is whitespace.

Lexical errors never abort the scan. Each one is reported to stderr with its
line number, the offending character or construct is skipped, and the
returned flag tells the caller that at least one error occurred.


File: lexer.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.1
License: MIT
"""

import re
import sys

from loxlang.values import format_literal_number


KEYWORDS = {
    'and': 'AND',
    'class': 'CLASS',
    'else': 'ELSE',
    'false': 'FALSE',
    'fun': 'FUN',
    'for': 'FOR',
    'if': 'IF',
    'nil': 'NIL',
    'or': 'OR',
    'print': 'PRINT',
    'return': 'RETURN',
    'super': 'SUPER',
    'this': 'THIS',
    'true': 'TRUE',
    'var': 'VAR',
    'while': 'WHILE',
}


TOKEN_SPECIFICATION: list[tuple[str, str]] = [
    # Comments must win over SLASH
    ('COMMENT',       r'//[^\n]*'),

    # Literals
    ('STRING',        r'"[^"]*"'),
    ('UNTERMINATED',  r'"[^"]*'),
    ('NUMBER',        r'[0-9]+(?:\.[0-9]+)?'),
    ('IDENTIFIER',    r'[A-Za-z_][A-Za-z0-9_]*'),

    # Two-character operators
    ('BANG_EQUAL',    r'!='),
    ('EQUAL_EQUAL',   r'=='),
    ('GREATER_EQUAL', r'>='),
    ('LESS_EQUAL',    r'<='),

    # One-character operators
    ('BANG',          r'!'),
    ('EQUAL',         r'='),
    ('GREATER',       r'>'),
    ('LESS',          r'<'),

    # Punctuation
    ('LEFT_PAREN',    r'\('),
    ('RIGHT_PAREN',   r'\)'),
    ('LEFT_BRACE',    r'\{'),
    ('RIGHT_BRACE',   r'\}'),
    ('COMMA',         r','),
    ('DOT',           r'\.'),
    ('MINUS',         r'-'),
    ('PLUS',          r'\+'),
    ('SEMICOLON',     r';'),
    ('SLASH',         r'/'),
    ('STAR',          r'\*'),

    # Miscellaneous
    ('NEWLINE',       r'\n'),
    ('SKIP',          r'[ \t]+'),
    ('MISMATCH',      r'.'),
]

TOKEN_REGEX = re.compile(
    '|'.join(f'(?P<{name}>{pattern})' for name, pattern in TOKEN_SPECIFICATION)
)


class Token:
    """
    Represents a lexical token with a kind, lexeme, literal and line.
    """
    __slots__ = ('type', 'lexeme', 'literal', 'line')

    def __init__(self, type_, lexeme, literal, line):
        """
        Initialize a new token.

        Parameters:
            type_ (str): The token kind, e.g. ``'NUMBER'``.
            lexeme (str): The exact source text of the token.
            literal (Any): The parsed value for STRING/NUMBER tokens, else None.
            line (int): The 1-based source line.
        """
        object.__setattr__(self, 'type', type_)
        object.__setattr__(self, 'lexeme', lexeme)
        object.__setattr__(self, 'literal', literal)
        object.__setattr__(self, 'line', line)

    def __setattr__(self, name, value):
        raise AttributeError("Token is immutable")

    def literal_str(self) -> str:
        """
        Render the literal the way tokenize mode prints it.
        """
        if self.type == 'STRING':
            return self.literal
        if self.type == 'NUMBER':
            return format_literal_number(self.literal)
        return 'null'

    def __str__(self) -> str:
        return f"{self.type} {self.lexeme} {self.literal_str()}"

    def __repr__(self) -> str:
        """
        Return a string representation of the token.
        """
        return f"Token({self.type}, {self.lexeme!r}, line={self.line})"


def report_error(line: int, message: str) -> None:
    """
    Write a lexical diagnostic to stderr.
    """
    print(f"[line {line}] Error: {message}", file=sys.stderr)


def tokenize(source: str) -> tuple[list[Token], bool]:
    """
    Convert a string of source code into a list of tokens.

    Parameters:
        source (str): The source code to tokenize.

    Returns:
        list[Token]: The scanned tokens, always terminated by an EOF token.
        bool: True if any lexical error was reported.
    """
    tokens: list[Token] = []
    had_error = False
    line_num = 1

    for match_obj in TOKEN_REGEX.finditer(source):
        kind = match_obj.lastgroup
        value = match_obj.group()

        if kind == 'NEWLINE':
            line_num += 1
            continue
        if kind in ('SKIP', 'COMMENT'):
            continue
        if kind == 'MISMATCH':
            report_error(line_num, f"Unexpected character: {value}")
            had_error = True
            continue
        if kind == 'UNTERMINATED':
            report_error(line_num, "Unterminated string.")
            had_error = True
            line_num += value.count('\n')
            continue

        if kind == 'STRING':
            tokens.append(Token('STRING', value, value[1:-1], line_num))
            line_num += value.count('\n')
        elif kind == 'NUMBER':
            tokens.append(Token('NUMBER', value, float(value), line_num))
        elif kind == 'IDENTIFIER':
            tokens.append(Token(KEYWORDS.get(value, 'IDENTIFIER'), value, None, line_num))
        else:
            tokens.append(Token(kind, value, None, line_num))

    tokens.append(Token('EOF', '', None, line_num))
    return tokens, had_error


def ends_inside_string(source: str) -> bool:
    """
    Return True if ``source`` stops partway through a string literal and
    has no other lexical error, i.e. more input could complete it.
    """
    for match_obj in TOKEN_REGEX.finditer(source):
        if match_obj.lastgroup == 'MISMATCH':
            return False
        if match_obj.lastgroup == 'UNTERMINATED':
            return True
    return False
