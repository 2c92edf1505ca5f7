"""Helpers that build literal nodes from native Python values."""

from decimal import Decimal
from typing import Any, Union

from .ast_nodes import (
    NULL, BigNumericLiteral, BooleanLiteral, Node, NumericLiteral, StringLiteral,
    Group,
)
from .errors import NodeConstructionError

# Largest magnitude at which every integer has an exact float
MAX_SAFE_INTEGER = 2 ** 53


def string_literal(value: str) -> StringLiteral:
    """Build a string literal."""
    return StringLiteral(value)


def bool_literal(value: bool) -> BooleanLiteral:
    """Build a boolean literal."""
    return BooleanLiteral(value)


def number_literal(value: Union[int, float, Decimal]) -> Union[NumericLiteral, BigNumericLiteral]:
    """Build a numeric literal, choosing the wrapper from the input type.

    Integers and floats become NumericLiteral; Decimal values and integers
    too large to round-trip through a float become BigNumericLiteral.
    Anything else (bool included) raises NodeConstructionError.
    """
    if isinstance(value, bool):
        raise NodeConstructionError("Invalid type passed to number_literal: bool")
    if isinstance(value, Decimal):
        return BigNumericLiteral(value)
    if isinstance(value, int):
        if abs(value) > MAX_SAFE_INTEGER:
            return BigNumericLiteral(Decimal(value))
        return NumericLiteral(float(value))
    if isinstance(value, float):
        return NumericLiteral(value)
    raise NodeConstructionError(
        f"Invalid type passed to number_literal: {type(value).__name__}"
    )


def literal(value: Any) -> Node:
    """Convert a Python scalar to a literal node.

    None -> null, bool -> boolean, str -> string, numbers as number_literal.
    Literal nodes are returned unchanged.
    """
    if isinstance(value, Node):
        if Group.LITERAL in value.groups:
            return value
        raise NodeConstructionError(f"{type(value).__name__} is not a literal")
    if value is None:
        return NULL
    if isinstance(value, bool):
        return bool_literal(value)
    if isinstance(value, str):
        return string_literal(value)
    if isinstance(value, (int, float, Decimal)):
        return number_literal(value)
    raise NodeConstructionError(f"Cannot convert {type(value).__name__} to a literal")
