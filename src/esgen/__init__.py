"""
esgen - ECMAScript source generation from syntax trees

Build a tree of nodes (by hand or from a transform pass) and render it back
to readable, parseable JavaScript.
"""

import logging

__version__ = "0.1.0"

from .ast_nodes import NULL, UNDEFINED, Group, is_member, members
from .builders import bool_literal, literal, number_literal, string_literal
from .config import default_indentor, get_default_indentor, reset_default_indentor, set_default_indentor
from .errors import ESGenError, NodeConstructionError, UnsupportedConstructError
from .generator import Generator
from .indent import Indentor, Spaces, Tabs
from .printer import Printer, render

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Generator",
    "Printer",
    "render",
    "Group",
    "is_member",
    "members",
    "NULL",
    "UNDEFINED",
    "string_literal",
    "bool_literal",
    "number_literal",
    "literal",
    "Indentor",
    "Spaces",
    "Tabs",
    "default_indentor",
    "get_default_indentor",
    "set_default_indentor",
    "reset_default_indentor",
    "ESGenError",
    "NodeConstructionError",
    "UnsupportedConstructError",
]
