"""
Tests for scoping rules in Lox Language
"""
import pytest

from loxlang.exceptions import OperandTypeException, UndefinedVariableException
from loxlang.interpreter import Interpreter
from loxlang.tests.utils import parse_source, run_source


def test_block_shadowing_does_not_leak(capsys):
    """
    A declaration inside a block shadows the outer variable only within the block.
    """
    source = (
        "var x = 1;\n"
        "{\n"
        "    var x = 2;\n"
        "    print x;\n"
        "}\n"
        "print x;\n"
    )
    run_source(source)
    captured = capsys.readouterr().out.strip().splitlines()
    assert captured == ['2', '1']


def test_globals_visible_in_nested_blocks(capsys):
    """
    Outer variables are visible from any depth of nesting.
    """
    source = (
        "var g = \"global\";\n"
        "{ { { print g; } } }\n"
    )
    run_source(source)
    captured = capsys.readouterr().out.strip().splitlines()
    assert captured == ['global']


def test_blocks_modify_enclosing_variable(capsys):
    """
    Assignment inside a block updates the nearest enclosing binding.
    """
    source = (
        "var x = 1;\n"
        "{\n"
        "    x = 2;\n"
        "}\n"
        "print x;\n"
    )
    interpreter = run_source(source)
    captured = capsys.readouterr().out.strip().splitlines()
    assert captured == ['2']
    assert interpreter.env.get('x') == 2.0


def test_assignment_targets_innermost_binding(capsys):
    source = (
        "var a = \"outer\";\n"
        "{\n"
        "    var a = \"inner\";\n"
        "    a = \"changed\";\n"
        "    print a;\n"
        "}\n"
        "print a;\n"
    )
    run_source(source)
    captured = capsys.readouterr().out.strip().splitlines()
    assert captured == ['changed', 'outer']


def test_block_variables_are_gone_after_block():
    source = (
        "{\n"
        "    var inner = 1;\n"
        "}\n"
        "print inner;\n"
    )
    with pytest.raises(UndefinedVariableException) as exc:
        run_source(source)
    assert exc.value.line == 4
    assert str(exc.value) == "Undefined variable 'inner'."


def test_scope_popped_when_error_escapes_block(capsys):
    """
    A runtime error inside a block still discards the block's scope.
    """
    interpreter = Interpreter()
    ast = parse_source(
        "var x = 1;\n"
        "{\n"
        "    var x = 2;\n"
        "    print -\"oops\";\n"
        "}\n"
    )
    with pytest.raises(OperandTypeException):
        interpreter.execute(ast)
    assert interpreter.env.depth == 1
    assert interpreter.env.get('x') == 1.0


def test_redeclaration_in_same_scope_shadows(capsys):
    source = (
        "var a = 1;\n"
        "var a = \"again\";\n"
        "print a;\n"
    )
    run_source(source)
    assert capsys.readouterr().out == "again\n"


def test_initializer_sees_outer_binding(capsys):
    source = (
        "var a = 1;\n"
        "{\n"
        "    var a = a + 2;\n"
        "    print a;\n"
        "}\n"
    )
    run_source(source)
    assert capsys.readouterr().out == "3\n"
