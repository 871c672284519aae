"""Prefix display form of expression nodes.

Every node renders fully parenthesized with its operator first, so the
structure the parser built is visible at a glance:

    1 + 2 * 3      ->  (+ 1.0 (* 2.0 3.0))
    -(4)           ->  (- (group 4.0))


File: printer.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from loxlang.operations import BINARY_OPS, LOGICAL_OPS
from loxlang.values import format_literal_number


def format_expr(node) -> str:
    """
    Convert an expression node to its parenthesized prefix form.

    Args:
        node (tuple): An expression node, structured as a tuple.

    Returns:
        str: A string representation of the expression.
    """
    op = node[0]
    match op:
        case 'number':
            return format_literal_number(node[1])
        case 'string':
            return node[1]
        case 'bool':
            return 'true' if node[1] else 'false'
        case 'nil':
            return 'nil'
        case 'ident':
            return node[1]
        case 'group':
            return f"(group {format_expr(node[1])})"
        case 'unary':
            return f"({node[1].symbol} {format_expr(node[2])})"
        case 'assign':
            return f"(= {node[1]} {format_expr(node[2])})"
        case _ if op in BINARY_OPS or op in LOGICAL_OPS:
            return f"({op.symbol} {format_expr(node[1])} {format_expr(node[2])})"
        case _:
            raise TypeError(f"Not an expression node: {node!r}")
