"""Variable storage.

The environment is a stack of scopes, each a ``dict`` from name to value.
The bottom scope holds globals and is never popped. A block pushes a scope on
entry and pops it on exit, including when an error is propagating, so scopes
never outlive the block that created them.


File: environment.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from contextlib import contextmanager

from loxlang.exceptions import UndeclaredAssignmentException, UndefinedVariableException


class Environment:
    """Stack of lexical scopes, innermost last."""

    def __init__(self):
        self.scopes: list[dict] = [{}]

    @property
    def global_vars(self) -> dict:
        """The outermost scope."""
        return self.scopes[0]

    @property
    def depth(self) -> int:
        """Number of active scopes, including the global one."""
        return len(self.scopes)

    def push(self) -> None:
        """Enter a new innermost scope."""
        self.scopes.append({})

    def pop(self) -> None:
        """
        Discard the innermost scope.

        Raises:
            RuntimeError: If only the global scope is left.
        """
        if len(self.scopes) == 1:
            raise RuntimeError("Cannot pop the global scope")
        self.scopes.pop()

    @contextmanager
    def scope(self):
        """Run the body of a ``with`` statement inside a fresh scope."""
        self.push()
        try:
            yield self
        finally:
            self.pop()

    def define(self, name: str, value) -> None:
        """
        Bind ``name`` in the innermost scope, replacing any binding it
        already has there.
        """
        self.scopes[-1][name] = value

    def get(self, name: str, line: int | None = None):
        """
        Look ``name`` up from the innermost scope outwards.

        Raises:
            UndefinedVariableException: If no active scope binds ``name``.
        """
        for scope in reversed(self.scopes):
            if name in scope:
                return scope[name]
        raise UndefinedVariableException(name, line)

    def assign(self, name: str, value, line: int | None = None):
        """
        Overwrite the nearest existing binding of ``name`` and return ``value``.

        Raises:
            UndeclaredAssignmentException: If no active scope binds ``name``.
        """
        for scope in reversed(self.scopes):
            if name in scope:
                scope[name] = value
                return value
        raise UndeclaredAssignmentException(name, line)

    def __contains__(self, name: str) -> bool:
        return any(name in scope for scope in self.scopes)
