"""Errors.

Parse errors abort parsing at the first offending token. Runtime errors abort
execution at the first failing node. Both carry the source line so callers
can report it or inspect it programmatically. Lexical errors are not
exceptions: the lexer reports them and keeps scanning.


File: exceptions.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""


class ParseException(Exception):
    """
    Error for malformed token sequences.
    """
    def __init__(self, token, message):
        self.token = token
        self.line = token.line
        self.message = message
        if token.type == 'EOF':
            where = "at end"
        else:
            where = f"at '{token.lexeme}'"
        super().__init__(f"[line {self.line}] Error {where}: {message}")

    @property
    def at_end(self) -> bool:
        """
        True if parsing ran out of input, i.e. the source may be incomplete.
        """
        return self.token.type == 'EOF'


class LoxRuntimeException(Exception):
    """
    Base error for failures during evaluation.
    """
    def __init__(self, message, line):
        self.message = message
        self.line = line
        super().__init__(message)

    def report(self) -> str:
        """
        Return the two-line diagnostic written to stderr.
        """
        return f"{self.message}\n[line {self.line}]"


class UndefinedVariableException(LoxRuntimeException):
    """
    Error for references to variables that are not in scope.
    """
    def __init__(self, varname, line):
        self.varname = varname
        super().__init__(f"Undefined variable '{varname}'.", line)


class UndeclaredAssignmentException(LoxRuntimeException):
    """
    Error for assignments to variables that were never declared.
    """
    def __init__(self, varname, line):
        self.varname = varname
        super().__init__(f"Variable '{varname}' not declared before assignment", line)


class OperandTypeException(LoxRuntimeException):
    """
    Error for operands of the wrong kind.
    """
    def __init__(self, expected, line):
        self.expected = expected
        super().__init__(f"Expecting {expected}", line)
