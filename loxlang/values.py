"""Runtime values.

Lox values are represented by plain Python objects:

- ``nil``     -> ``None``
- booleans    -> ``bool``
- numbers     -> ``float``
- strings     -> ``str``

This module holds the rules that do not belong to any single pipeline stage:
truthiness, structural equality, and the two textual renderings of numbers
(the literal form shown by ``tokenize``/``parse`` and the display form shown
by ``print``).


File: values.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import math
from decimal import Decimal


def is_truthy(value) -> bool:
    """
    Return the truthiness of a value. Only ``nil`` and ``false`` are falsy.
    """
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    return True


def values_equal(left, right) -> bool:
    """
    Structural equality. Values of different kinds are never equal, so
    ``true == 1`` is false even though Python says otherwise.
    """
    if type(left) is not type(right):
        return False
    return left == right


def format_literal_number(number: float) -> str:
    """
    Render a number literal with an explicit fractional part.

    ``42`` -> ``42.0``, ``1e16`` -> ``1e16``, ``0.00001`` -> ``1e-5``.
    """
    text = repr(number)
    if 'e' in text:
        mantissa, exponent = text.split('e')
        return f"{mantissa}e{int(exponent)}"
    return text


def format_number(number: float) -> str:
    """
    Render a number for display: no trailing ``.0`` and no exponent.
    """
    if math.isnan(number):
        return 'NaN'
    if math.isinf(number):
        return 'inf' if number > 0 else '-inf'
    text = format(Decimal(repr(number)), 'f')
    return text.removesuffix('.0')


def stringify(value) -> str:
    """
    Return the display form of a runtime value, as written by ``print``.
    """
    if value is None:
        return 'nil'
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, float):
        return format_number(value)
    return value

