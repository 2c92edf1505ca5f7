"""Program generator - collects top-level statements and renders them."""

from typing import List, Optional

from .ast_nodes import Group, Node, Program
from .errors import NodeConstructionError
from .indent import Indentor
from .printer import Printer


class Generator:
    """Accumulates top-level statement list items for rendering.

    Example:
        >>> gen = Generator()
        >>> gen.add_statement(ExpressionStatement(Identifier("x"))).render()
        'x;'
    """

    def __init__(self) -> None:
        self.statements: List[Node] = []

    def add_statement(self, statement: Node) -> "Generator":
        """Append one statement list item. Returns self for chaining."""
        if not (isinstance(statement, Node) and Group.STATEMENT_LIST_ITEM in statement.groups):
            raise NodeConstructionError(
                f"{type(statement).__name__} is not a statement list item", "statements"
            )
        self.statements.append(statement)
        return self

    def add_statements(self, *statements: Node) -> "Generator":
        """Append several statement list items in order. Returns self for chaining."""
        for statement in statements:
            self.add_statement(statement)
        return self

    def to_program(self) -> Program:
        """Snapshot the collected statements as a Program node."""
        return Program(self.statements)

    def render(self, indentor: Optional[Indentor] = None) -> str:
        """Render every statement, newline-joined, without a trailing newline."""
        return Printer(indentor).render_program(self.statements)

    def __str__(self) -> str:
        return self.render()

    def __len__(self) -> int:
        return len(self.statements)
