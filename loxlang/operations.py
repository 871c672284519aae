"""Shared definitions for AST operation identifiers.

This module centralizes the operator identifiers used by the parser,
the expression printer and the interpreter to label nodes in the abstract
syntax tree. Keeping them in one place prevents the components from drifting
apart when operators are added or renamed.


File: operations.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from enum import Enum


class Op(str, Enum):
    """
    Enumeration of supported AST operation names.
    """

    # Arithmetic
    ADD = "add"
    SUB = "sub"
    MUL = "mul"
    DIV = "div"

    # Comparison
    EQ = "eq"
    NE = "ne"
    LT = "lt"
    LE = "le"
    GT = "gt"
    GE = "ge"

    # Unary
    NEG = "neg"
    NOT = "not"

    # Boolean
    AND = "and"
    OR = "or"

    @property
    def symbol(self) -> str:
        """
        Return the source spelling of the operator.
        """
        return OP_SYMBOLS[self]

    def __str__(self) -> str:  # pragma: no cover - trivial
        """
        Return the underlying string value for nicer debug output.
        """
        return self.value


OP_SYMBOLS = {
    Op.ADD: "+",
    Op.SUB: "-",
    Op.MUL: "*",
    Op.DIV: "/",
    Op.EQ: "==",
    Op.NE: "!=",
    Op.LT: "<",
    Op.LE: "<=",
    Op.GT: ">",
    Op.GE: ">=",
    Op.NEG: "-",
    Op.NOT: "!",
    Op.AND: "and",
    Op.OR: "or",
}

# Token kinds recognised at each binary precedence level.
EQUALITY_OPS = {'BANG_EQUAL': Op.NE, 'EQUAL_EQUAL': Op.EQ}
COMPARISON_OPS = {
    'GREATER': Op.GT,
    'GREATER_EQUAL': Op.GE,
    'LESS': Op.LT,
    'LESS_EQUAL': Op.LE,
}
TERM_OPS = {'MINUS': Op.SUB, 'PLUS': Op.ADD}
FACTOR_OPS = {'SLASH': Op.DIV, 'STAR': Op.MUL}
UNARY_OPS = {'BANG': Op.NOT, 'MINUS': Op.NEG}

ARITHMETIC_OPS = (Op.SUB, Op.MUL, Op.DIV)
ORDERING_OPS = (Op.LT, Op.LE, Op.GT, Op.GE)
BINARY_OPS = (Op.ADD, Op.SUB, Op.MUL, Op.DIV, Op.EQ, Op.NE) + ORDERING_OPS
LOGICAL_OPS = (Op.AND, Op.OR)


__all__ = [
    "Op",
    "OP_SYMBOLS",
    "EQUALITY_OPS",
    "COMPARISON_OPS",
    "TERM_OPS",
    "FACTOR_OPS",
    "UNARY_OPS",
    "ARITHMETIC_OPS",
    "ORDERING_OPS",
    "BINARY_OPS",
    "LOGICAL_OPS",
]
