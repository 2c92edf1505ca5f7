"""Error types raised while building and rendering syntax trees."""

from typing import Optional


class ESGenError(Exception):
    """Base class for all esgen errors."""

    def __init__(self, message: str = "", name: str = "Error"):
        self.message = message
        self.name = name
        super().__init__(f"{name}: {message}" if message else name)


class NodeConstructionError(ESGenError, TypeError):
    """Invalid input while constructing a node.

    Raised for literal inputs of an unsupported kind and for children placed
    in a slot whose capability group does not admit them.
    """

    def __init__(self, message: str = "", field: Optional[str] = None):
        self.field = field
        if field:
            message = f"{field}: {message}"
        super().__init__(message, "ConstructionError")


class UnsupportedConstructError(ESGenError, NotImplementedError):
    """Rendering was requested for a node kind that has no text form."""

    def __init__(self, node_type: str, message: str = ""):
        self.node_type = node_type
        super().__init__(message or f"{node_type} cannot be rendered", "UnsupportedConstruct")
