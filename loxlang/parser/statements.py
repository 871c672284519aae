"""Statement parsing utilities for Lox.

These functions operate on a `loxlang.parser.parser.Parser` instance and
handle the statement forms in the language: variable declarations, blocks,
conditionals, print statements and expression statements.


File: statements.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from loxlang.parser import Parser


def parse_declaration(parser: 'Parser') -> tuple:
    """
    Parse a declaration, falling back to an ordinary statement.

    Syntax:
        var <identifier> ( = <expression> )? ;
        | <statement>

    Args:
        parser: The parser instance.

    Returns:
        tuple: representing the AST node.
    """
    if parser.check('VAR'):
        return parser.parse_var_declaration()
    return parser.statement()


def parse_var_declaration(parser: 'Parser') -> tuple:
    """
    Parse a `var` variable declaration.

    Syntax:
        var <identifier> ( = <expression> )? ;

    Args:
        parser: The parser instance.

    Returns:
        tuple: ('decl', name, initializer_or_None, line)
    """
    var_tok = parser.eat('VAR', "Expecting `var`")
    name_tok = parser.eat('IDENTIFIER', "Expecting variable name")
    initializer = None
    if parser.match('EQUAL'):
        initializer = parser.expr()
    parser.eat('SEMICOLON', "Expecting `;`")
    return ('decl', name_tok.lexeme, initializer, var_tok.line)


def parse_statement(parser: 'Parser') -> tuple:
    """
    Parse a single statement.

    Syntax:
        print <expression> ;
        | { <declaration>* }
        | if ( <expression> ) <statement> ( else <statement> )?
        | <expression> ;

    Args:
        parser: The parser instance.

    Returns:
        tuple: representing the AST node.
    """
    tok = parser.curr_token
    if tok.type == 'PRINT':
        return parser.parse_print()
    if tok.type == 'LEFT_BRACE':
        return parser.block()
    if tok.type == 'IF':
        return parser.parse_if()
    return parser.parse_expression_statement()


def parse_block(parser: 'Parser') -> tuple:
    """
    Parse a block of declarations enclosed in braces.

    Syntax:
        { <declaration>* }

    Args:
        parser: The parser instance.

    Returns:
        tuple: ('block', list_of_statements, line_number)
    """
    tok = parser.eat('LEFT_BRACE', "Expecting `{`")
    statements = []
    while not parser.check('RIGHT_BRACE', 'EOF'):
        statements.append(parser.declaration())
    parser.eat('RIGHT_BRACE', "Expecting `}`")
    return ('block', statements, tok.line)


def parse_print(parser: 'Parser') -> tuple:
    """
    Parse a `print` statement.

    Syntax:
        print <expression> ;

    Args:
        parser: The parser instance.

    Returns:
        tuple: ('print', expression_node, line_number)
    """
    tok = parser.eat('PRINT', "Expecting `print`")
    expr_node = parser.expr()
    parser.eat('SEMICOLON', "Expecting `;`")
    return ('print', expr_node, tok.line)


def parse_if(parser: 'Parser') -> tuple:
    """
    Parse a conditional `if` statement with an optional else branch.

    A dangling ``else`` binds to the nearest ``if``.

    Syntax:
        if ( <condition> ) <statement> ( else <statement> )?

    Args:
        parser: The parser instance.

    Returns:
        tuple: ('if', condition, then_branch, else_branch_or_None, line)
    """
    tok = parser.eat('IF', "Expecting `if`")
    parser.eat('LEFT_PAREN', "Expecting `(`")
    condition = parser.expr()
    parser.eat('RIGHT_PAREN', "Expecting `)`")
    then_branch = parser.statement()

    else_branch = None
    if parser.match('ELSE'):
        else_branch = parser.statement()

    return ('if', condition, then_branch, else_branch, tok.line)


def parse_expression_statement(parser: 'Parser') -> tuple:
    """
    Parse an expression evaluated for its side effects.

    Syntax:
        <expression> ;

    Args:
        parser: The parser instance.

    Returns:
        tuple: ('expr_stmt', expression_node, line_number)
    """
    line = parser.curr_token.line
    expr_node = parser.expr()
    parser.eat('SEMICOLON', "Expecting `;`")
    return ('expr_stmt', expr_node, line)
