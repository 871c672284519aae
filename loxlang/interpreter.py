"""Interpreter.

This is a tree-walk interpreter for evaluating AST nodes produced by the parser. It supports
literals, arithmetic, comparisons, logical operators, variables, blocks, conditionals and
print statements.

1. Execution Model
The interpreter evaluates an abstract syntax tree (AST) in a top-down, recursive manner.
Statements are executed via the `execute()` method, and expressions are evaluated using
`eval_expr()`. Both methods operate over structured tuples representing nodes in the AST.

2. Environment
The interpreter owns an `Environment`, a stack of scopes. The global scope lives for the
whole run; a block pushes a scope on entry and pops it on every exit path. Lookups and
assignments search from the innermost scope outwards.

3. Expression Evaluation
Expression nodes are evaluated recursively. Operands are type-checked: arithmetic and
ordering need numbers, `+` needs two numbers or two strings. Only `nil` and `false` are
falsy. `and`/`or` short-circuit and yield the operand that decided the result.

4. Control Flow
Control constructs include:
- `if`/`else`: executes exactly one branch, or none.
- `block`: executes a nested sequence of statements in a fresh scope.

5. Error Handling
The first runtime error (`LoxRuntimeException` and subclasses) aborts the rest of the
program. Each carries the line of the node that raised it.


File: interpreter.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import math

from loxlang.environment import Environment
from loxlang.exceptions import LoxRuntimeException, OperandTypeException
from loxlang.operations import ARITHMETIC_OPS, ORDERING_OPS, Op
from loxlang.values import is_truthy, stringify, values_equal


def _divide(lhs: float, rhs: float) -> float:
    """IEEE division: dividing by zero gives an infinity or NaN."""
    try:
        return lhs / rhs
    except ZeroDivisionError:
        if lhs == 0 or math.isnan(lhs):
            return math.nan
        return math.copysign(math.inf, lhs) * math.copysign(1.0, rhs)


class Interpreter:
    """Tree-walk interpreter for Lox."""

    def __init__(self, env: Environment | None = None):
        """Initialize the interpreter."""
        self.env = env if env is not None else Environment()

    @staticmethod
    def _expect_number(value, line: int) -> float:
        if not isinstance(value, float):
            raise OperandTypeException("a number", line)
        return value

    def _add(self, lhs, rhs, line: int):
        if isinstance(lhs, float):
            return lhs + self._expect_number(rhs, line)
        if isinstance(lhs, str):
            if not isinstance(rhs, str):
                raise OperandTypeException("a string", line)
            return lhs + rhs
        raise OperandTypeException("a number or a string", line)

    def eval_expr(self, node):
        """
        Recursively evaluate an expression node and return its computed value.

        Parameters:
            node (tuple): An expression node, structured as a tuple.
                        The first element is the node type (e.g., Op.ADD, 'ident'),
                        followed by operands and the line number for error reporting.

        Returns:
            The evaluated result of the expression.

        Raises:
            UndefinedVariableException: If a variable is referenced that has not been defined.
            UndeclaredAssignmentException: If a variable is assigned before it is declared.
            OperandTypeException: If an operator receives an operand of the wrong kind.
        """
        op = node[0]
        line = node[-1]

        # Literals
        if op in ('number', 'string', 'bool', 'nil'):
            return node[1]

        # Variables
        if op == 'ident':
            return self.env.get(node[1], line)

        if op == 'assign':
            _, var_name, value_node, _ = node
            value = self.eval_expr(value_node)
            return self.env.assign(var_name, value, line)

        if op == 'group':
            return self.eval_expr(node[1])

        # Unary operators
        if op == 'unary':
            _, operator, operand_node, _ = node
            operand = self.eval_expr(operand_node)
            if operator == Op.NEG:
                return -self._expect_number(operand, line)
            return not is_truthy(operand)

        # Logical operators
        if op == Op.AND:
            lhs = self.eval_expr(node[1])
            if not is_truthy(lhs):
                return lhs
            return self.eval_expr(node[2])
        if op == Op.OR:
            lhs = self.eval_expr(node[1])
            if is_truthy(lhs):
                return lhs
            return self.eval_expr(node[2])

        # Binary operators
        lhs = self.eval_expr(node[1])
        rhs = self.eval_expr(node[2])
        match op:
            case Op.ADD:
                return self._add(lhs, rhs, line)
            case Op.EQ:
                return values_equal(lhs, rhs)
            case Op.NE:
                return not values_equal(lhs, rhs)
            case _ if op in ARITHMETIC_OPS or op in ORDERING_OPS:
                lhs = self._expect_number(lhs, line)
                rhs = self._expect_number(rhs, line)
                match op:
                    case Op.SUB:
                        return lhs - rhs
                    case Op.MUL:
                        return lhs * rhs
                    case Op.DIV:
                        return _divide(lhs, rhs)
                    case Op.LT:
                        return lhs < rhs
                    case Op.LE:
                        return lhs <= rhs
                    case Op.GT:
                        return lhs > rhs
                    case Op.GE:
                        return lhs >= rhs

        raise LoxRuntimeException(f"Invalid expression node: {node!r}", line)

    def evaluate(self, node) -> str:
        """
        Evaluate an expression node and return the display form of its value.
        """
        return stringify(self.eval_expr(node))

    def execute(self, statements: list):
        """
        Executes a list of statements.

        Parameters:
            statements (list):
                A list of ('decl' | 'print' | 'expr_stmt' | 'if' | 'block', ...) tuples.

        Raises:
            LoxRuntimeException: For the first statement that fails.
        """
        for stmt in statements:
            self.execute_statement(stmt)

    def execute_statement(self, stmt: tuple):
        """
        Execute a single statement node.
        """
        kind = stmt[0]
        line = stmt[-1]

        if kind == 'decl':
            _, var_name, expr_node, _ = stmt
            value = self.eval_expr(expr_node) if expr_node is not None else None
            self.env.define(var_name, value)

        elif kind == 'print':
            _, expr_node, _ = stmt
            print(stringify(self.eval_expr(expr_node)))

        elif kind == 'expr_stmt':
            _, expr_node, _ = stmt
            self.eval_expr(expr_node)

        elif kind == 'if':
            _, cond_node, then_branch, else_branch, _ = stmt
            if is_truthy(self.eval_expr(cond_node)):
                self.execute_statement(then_branch)
            elif else_branch is not None:
                self.execute_statement(else_branch)

        elif kind == 'block':
            _, block_statements, _ = stmt
            with self.env.scope():
                self.execute(block_statements)

        else:
            raise LoxRuntimeException(f"Unknown statement type: {kind}", line)
