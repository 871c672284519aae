"""
Lox Language Interpreter

This is the main entry point for the Lox language interpreter.

Workflow:
1. The source script is read from the file specified on the command line.
2. The Lexer tokenizes the source code into tokens, reporting every lexical error.
3. The Parser processes tokens into an AST following the language grammar.
4. The Interpreter walks the AST, evaluating expressions and executing statements.

Each command stops after the stage it is named for:

    tokenize   print the token stream
    parse      print the prefix form of a single expression
    evaluate   print the value of a single expression
    run        execute a program

Exit codes: 0 on success, 65 for lexical or parse errors, 70 for runtime
errors, 1 if the script cannot be read. Set ``LOXDEBUG`` to dump the tokens
and AST to stderr before execution.


File: lox.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""
import argparse
import os
import sys

from loxlang.exceptions import LoxRuntimeException, ParseException
from loxlang.interpreter import Interpreter
from loxlang.lexer import ends_inside_string, tokenize
from loxlang.parser import Parser, format_expr


EXIT_OK = 0
EXIT_IO_ERROR = 1
EXIT_DATA_ERROR = 65
EXIT_RUNTIME_ERROR = 70


def debug_print_tokens_ast(tokens, ast):
    """
    Print tokenized source and AST to stderr.
    """
    print("\nTokens:\n", file=sys.stderr)
    print(tokens, file=sys.stderr)
    print("\nAST:\n", file=sys.stderr)
    print(ast, file=sys.stderr)
    print(" ", file=sys.stderr)


def report_runtime_error(error: LoxRuntimeException) -> int:
    """
    Write a runtime error to stderr and return the matching exit code.
    """
    print(error.report(), file=sys.stderr)
    return EXIT_RUNTIME_ERROR


def report_parse_error(error: ParseException) -> int:
    """
    Write a parse error to stderr and return the matching exit code.
    """
    print(error, file=sys.stderr)
    return EXIT_DATA_ERROR


def tokenize_source(code: str) -> int:
    """
    Print every token of ``code``, one per line.
    """
    tokens, had_error = tokenize(code)
    for token in tokens:
        print(token)
    return EXIT_DATA_ERROR if had_error else EXIT_OK


def parse_source(code: str) -> int:
    """
    Parse ``code`` as a single expression and print its prefix form.
    """
    tokens, had_error = tokenize(code)
    if had_error:
        return EXIT_DATA_ERROR
    try:
        node = Parser(tokens).parse_expression()
    except ParseException as e:
        return report_parse_error(e)
    print(format_expr(node))
    return EXIT_OK


def evaluate_source(code: str) -> int:
    """
    Evaluate ``code`` as a single expression and print its value.
    """
    tokens, had_error = tokenize(code)
    if had_error:
        return EXIT_DATA_ERROR
    try:
        node = Parser(tokens).parse_expression()
    except ParseException as e:
        return report_parse_error(e)
    try:
        print(Interpreter().evaluate(node))
    except LoxRuntimeException as e:
        return report_runtime_error(e)
    return EXIT_OK


def run_source(code: str, interpreter: Interpreter | None = None) -> int:
    """
    Execute ``code`` as a program.
    """
    tokens, had_error = tokenize(code)
    if had_error:
        return EXIT_DATA_ERROR
    try:
        ast = Parser(tokens).parse()
    except ParseException as e:
        return report_parse_error(e)

    if os.environ.get('LOXDEBUG'):
        debug_print_tokens_ast(tokens, ast)

    if interpreter is None:
        interpreter = Interpreter()
    try:
        interpreter.execute(ast)
    except LoxRuntimeException as e:
        return report_runtime_error(e)
    return EXIT_OK


COMMANDS = {
    'tokenize': tokenize_source,
    'parse': parse_source,
    'evaluate': evaluate_source,
    'run': run_source,
}


def run_script(command: str, script_name: str) -> int:
    """
    Read a Lox script and hand it to ``command``.
    """
    try:
        with open(script_name, "r", encoding="utf-8") as f:
            code = f.read()
    except OSError as e:
        print(f"Cannot read '{script_name}': {e.strerror}", file=sys.stderr)
        return EXIT_IO_ERROR
    return COMMANDS[command](code)


def run_repl():
    """
    Run the interactive REPL
    """
    print("Lox Language Interpreter - REPL")
    print("Type `exit` or `quit` to leave.")
    interpreter = Interpreter()
    buffer: list[str] = []
    while True:
        try:
            prompt = ">>> " if not buffer else "... "
            line = input(prompt)
            if not buffer and line.strip() in {"exit", "quit"}:
                break
            buffer.append(line)
            if ends_inside_string("\n".join(buffer)):
                continue
            tokens, had_error = tokenize("\n".join(buffer))
            if had_error:
                buffer.clear()
                continue
            try:
                ast = Parser(tokens).parse()
            except ParseException as e:
                # Running out of tokens means the entry may continue on the next line
                if e.at_end:
                    continue
                report_parse_error(e)
                buffer.clear()
                continue
            buffer.clear()
            try:
                interpreter.execute(ast)
            except LoxRuntimeException as e:
                report_runtime_error(e)
        except KeyboardInterrupt:
            print("\nInterrupted.")
            break
        except EOFError:
            print()
            break


def build_arg_parser() -> argparse.ArgumentParser:
    """
    Build the command-line parser.
    """
    parser = argparse.ArgumentParser(
        prog="lox",
        description="Lox language interpreter. Run with no arguments to enter the REPL.",
        allow_abbrev=False,
    )
    sub = parser.add_subparsers(dest="command")
    helps = {
        'tokenize': "Print the tokens of a script",
        'parse': "Print the prefix form of a single expression",
        'evaluate': "Print the value of a single expression",
        'run': "Execute a script",
    }
    for name, help_text in helps.items():
        cmd = sub.add_parser(name, help=help_text)
        cmd.add_argument("file", help="Path to a Lox source file")
    return parser


def main(argv: list[str]) -> int:
    """
    Entry point for the CLI.

    Behaviour:
    - No arguments: enter the REPL.
    - ``<command> <file>``: run the pipeline up to ``command`` over the file.
    - Anything else: print usage and exit with argparse's status code.
    """
    args = build_arg_parser().parse_args(argv[1:])
    if args.command is None:
        run_repl()
        return EXIT_OK
    return run_script(args.command, args.file)


def cli():
    """
    Console-script wrapper around :func:`main`.
    """
    sys.exit(main(sys.argv))


if __name__ == "__main__":
    cli()
