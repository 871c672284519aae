"""
Utility functions shared across Lox Language tests.
"""
from loxlang.lexer import tokenize
from loxlang.parser import Parser, format_expr
from loxlang.interpreter import Interpreter


def parse_source(source: str):
    """
    Parse source code and return the list of statements.
    """
    tokens, had_error = tokenize(source)
    assert not had_error
    return Parser(tokens).parse()


def parse_expression(source: str):
    """
    Parse source code as a single expression and return its node.
    """
    tokens, had_error = tokenize(source)
    assert not had_error
    return Parser(tokens).parse_expression()


def prefix_form(source: str) -> str:
    """
    Parse an expression and return its parenthesized prefix form.
    """
    return format_expr(parse_expression(source))


def eval_source(source: str):
    """
    Evaluate a single expression and return its raw value.
    """
    return Interpreter().eval_expr(parse_expression(source))


def run_source(source: str) -> Interpreter:
    """
    Execute a program and return the interpreter instance after execution.
    """
    interpreter = Interpreter()
    interpreter.execute(parse_source(source))
    return interpreter
