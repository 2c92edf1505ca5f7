"""Printer - renders an AST back to ECMAScript source text."""

import json
import logging
import math
from typing import Iterable, Optional, Tuple, Type

from .ast_nodes import (
    Node, Program, NullLiteral, UndefinedLiteral, StringLiteral, BooleanLiteral,
    NumericLiteral, BigNumericLiteral, Identifier, ThisExpression, Super,
    MetaProperty, Import, ArrayPattern, ObjectPattern, AssignmentPattern,
    RestElement, SpreadElement, PropertyPattern, ArrayExpression, Property,
    ObjectExpression, TemplateElement, TemplateLiteral, TaggedTemplateExpression,
    UnaryExpression, UpdateExpression, BinaryExpression, LogicalExpression,
    AssignmentExpression, ConditionalExpression, SequenceExpression,
    AwaitExpression, YieldExpression, StaticMemberExpression,
    ComputedMemberExpression, CallExpression, NewExpression, ChainExpression,
    BlockStatement, ExpressionStatement, Directive, EmptyStatement,
    DebuggerStatement, IfStatement, WhileStatement, DoWhileStatement,
    ForStatement, ForInStatement, ForOfStatement, BreakStatement,
    ContinueStatement, ReturnStatement, ThrowStatement, CatchClause,
    TryStatement, SwitchCase, SwitchStatement, LabeledStatement, WithStatement,
    FunctionExpression, ArrowFunctionExpression, FunctionDeclaration,
    MethodDefinition, PropertyDefinition, ClassBody, ClassExpression,
    ClassDeclaration, VariableDeclarator, VariableDeclaration,
    ImportDefaultSpecifier, ImportNamespaceSpecifier, NamedImport,
    ImportSpecifier, ImportDeclaration, ExportSpecifier, ExportNamedDeclaration,
    ExportDefaultDeclaration, ExportAllDeclaration,
    FunctionType, MethodKind, PropertyKind, Group,
)
from .config import get_default_indentor
from .errors import UnsupportedConstructError
from .indent import Indentor

logger = logging.getLogger(__name__)

# Member objects that never need wrapping before "." or "["
_BARE_MEMBER_OBJECTS: Tuple[Type[Node], ...] = (
    CallExpression, Identifier, StaticMemberExpression, ComputedMemberExpression,
    ThisExpression, Super,
)
# Static member properties rendered as-is
_BARE_MEMBER_PROPERTIES: Tuple[Type[Node], ...] = (StaticMemberExpression, CallExpression)
# Unary/update operands and new callees that never need wrapping
_BARE_OPERANDS: Tuple[Type[Node], ...] = (Identifier, StaticMemberExpression)

_FUNCTION_PREFIXES = {
    FunctionType.NORMAL: "function ",
    FunctionType.ASYNC: "async function ",
    FunctionType.GENERATOR: "function* ",
}
_METHOD_PREFIXES = {
    FunctionType.NORMAL: "",
    FunctionType.ASYNC: "async ",
    FunctionType.GENERATOR: "*",
}


class Printer:
    """Renders AST nodes to source text.

    The indentor is fixed for the lifetime of the printer. When none is
    given, the process default is read once, here.
    """

    def __init__(self, indentor: Optional[Indentor] = None):
        self.indentor: Indentor = indentor if indentor is not None else get_default_indentor()

    def render(self, node: Node) -> str:
        """Render a single node (and its children) to text."""
        if Group.LITERAL in node.groups:
            return self._render_literal(node)
        if Group.STATEMENT in node.groups:
            return self._render_statement(node)
        if Group.DECLARATION in node.groups:
            return self._render_declaration(node)
        if Group.EXPRESSION in node.groups:
            return self._render_expression(node)
        return self._render_other(node)

    def render_program(self, items: Iterable[Node]) -> str:
        """Render top-level statement list items joined by newlines."""
        rendered = [self.render(item) for item in items]
        logger.debug("Rendered %d top-level statements", len(rendered))
        return "\n".join(rendered)

    # Helpers

    def _join(self, nodes: Iterable[Node], separator: str) -> str:
        return separator.join(self.render(n) for n in nodes)

    def _braced(self, text: str) -> str:
        """Wrap rendered body text in braces, indented one level."""
        if not text:
            return "{}"
        return "{\n" + self.indentor.indent(text) + "\n}"

    def _body(self, node: Node) -> str:
        """Render the contents of a body slot, without its braces."""
        if isinstance(node, BlockStatement):
            return self._join(node.body, "\n")
        return self.render(node)

    def _wrap_unless(self, node: Node, bare: Tuple[Type[Node], ...]) -> str:
        text = self.render(node)
        if isinstance(node, bare):
            return text
        return "(" + text + ")"

    def _key(self, key: Node, computed: bool = False) -> str:
        if isinstance(key, Identifier) and not computed:
            return key.name
        return "[" + self.render(key) + "]"

    def _params(self, params: Iterable[Node]) -> str:
        return self._join(params, ", ")

    def _callable(self, prefix: str, name: str, function: FunctionExpression) -> str:
        """Render prefix name(params) { body } shared by methods and accessors."""
        return f"{prefix}{name}({self._params(function.params)}) {self._braced(self._body(function.body))}"

    # Literals

    def _render_literal(self, node: Node) -> str:
        if isinstance(node, StringLiteral):
            return json.dumps(node.value, ensure_ascii=False)
        elif isinstance(node, BooleanLiteral):
            return "true" if node.value else "false"
        elif isinstance(node, NumericLiteral):
            return self._format_number(node.value)
        elif isinstance(node, BigNumericLiteral):
            return format(node.value, "f")
        elif isinstance(node, NullLiteral):
            return "null"
        elif isinstance(node, UndefinedLiteral):
            return "undefined"
        raise UnsupportedConstructError(type(node).__name__)

    @staticmethod
    def _format_number(number: float) -> str:
        if math.isnan(number):
            return "NaN"
        if math.isinf(number):
            return "Infinity" if number > 0 else "-Infinity"
        return "%.6f" % number

    # Statements

    def _render_statement(self, node: Node) -> str:
        if isinstance(node, BlockStatement):
            return self._braced(self._body(node))

        elif isinstance(node, ExpressionStatement):
            return self.render(node.expression) + ";"

        elif isinstance(node, EmptyStatement):
            return ";"

        elif isinstance(node, DebuggerStatement):
            return "debugger;"

        elif isinstance(node, IfStatement):
            text = f"if ({self.render(node.test)}) {self._braced(self._body(node.consequent))}"
            if node.alternate is not None:
                if isinstance(node.alternate, IfStatement):
                    # else-if chains stay flat
                    text += " else " + self.render(node.alternate)
                else:
                    text += " else " + self._braced(self._body(node.alternate))
            return text

        elif isinstance(node, WhileStatement):
            return f"while ({self.render(node.test)}) {self._braced(self._body(node.body))}"

        elif isinstance(node, DoWhileStatement):
            return f"do {self._braced(self._body(node.body))} while ({self.render(node.test)});"

        elif isinstance(node, ForStatement):
            init = self.render(node.init) if node.init is not None else ""
            test = " " + self.render(node.test) if node.test is not None else ""
            update = " " + self.render(node.update) if node.update is not None else ""
            return f"for ({init};{test};{update}) {self._braced(self._body(node.body))}"

        elif isinstance(node, ForInStatement):
            return (
                f"for ({self.render(node.left)} in {self.render(node.right)}) "
                f"{self._braced(self._body(node.body))}"
            )

        elif isinstance(node, ForOfStatement):
            # Emits "in", matching the established output for for-of loops
            head = "for await" if node.is_await else "for"
            return (
                f"{head} ({self.render(node.left)} in {self.render(node.right)}) "
                f"{self._braced(self._body(node.body))}"
            )

        elif isinstance(node, BreakStatement):
            if node.label is not None:
                return f"break {self.render(node.label)};"
            return "break;"

        elif isinstance(node, ContinueStatement):
            if node.label is not None:
                return f"continue {self.render(node.label)};"
            return "continue;"

        elif isinstance(node, ReturnStatement):
            if node.argument is not None:
                return f"return {self.render(node.argument)};"
            return "return;"

        elif isinstance(node, ThrowStatement):
            return f"throw {self.render(node.argument)};"

        elif isinstance(node, TryStatement):
            text = "try " + self._braced(self._body(node.block))
            if node.handler is not None:
                text += " " + self.render(node.handler)
            if node.finalizer is not None:
                text += " finally " + self._braced(self._body(node.finalizer))
            return text

        elif isinstance(node, SwitchStatement):
            cases = self._join(node.cases, "\n")
            return f"switch ({self.render(node.discriminant)}) {self._braced(cases)}"

        elif isinstance(node, LabeledStatement):
            return f"{self.render(node.label)}: {self.render(node.body)}"

        elif isinstance(node, WithStatement):
            return f"with ({self.render(node.object)}) {self._braced(self._body(node.body))}"

        elif isinstance(node, Directive):
            raise UnsupportedConstructError("Directive", "Directive rendering is not supported")

        raise UnsupportedConstructError(type(node).__name__)

    # Declarations

    def _render_declaration(self, node: Node) -> str:
        if isinstance(node, VariableDeclaration):
            return node.kind.value + " " + self._join(node.declarations, ", ")

        elif isinstance(node, FunctionDeclaration):
            return self._render_function(node.id, node.params, node.body, node.function_type)

        elif isinstance(node, ClassDeclaration):
            return self._render_class(node.id, node.super_class, node.body)

        elif isinstance(node, ImportDeclaration):
            return self._render_import(node)

        elif isinstance(node, ExportNamedDeclaration):
            if node.declaration is not None:
                text = "export " + self.render(node.declaration)
            elif node.specifiers:
                text = "export { " + self._join(node.specifiers, ", ") + " }"
            else:
                text = "export {}"
            if node.source is not None:
                text += " from " + json.dumps(node.source, ensure_ascii=False)
            return text + ";"

        elif isinstance(node, ExportDefaultDeclaration):
            return "export default " + self.render(node.declaration)

        elif isinstance(node, ExportAllDeclaration):
            raise UnsupportedConstructError(
                "ExportAllDeclaration", "export * from is not supported"
            )

        raise UnsupportedConstructError(type(node).__name__)

    def _render_function(
        self,
        name: Optional[Identifier],
        params: Iterable[Node],
        body: BlockStatement,
        function_type: FunctionType,
    ) -> str:
        prefix = _FUNCTION_PREFIXES[function_type]
        id_text = self.render(name) if name is not None else ""
        return f"{prefix}{id_text}({self._params(params)}) {self._braced(self._body(body))}"

    def _render_class(self, name: Optional[Identifier], super_class: Optional[Node], body: ClassBody) -> str:
        text = "class "
        if name is not None:
            text += self.render(name) + " "
        if super_class is not None:
            text += "extends " + self._render_super_class(super_class) + " "
        return text + self._braced(self._body(body))

    def _render_super_class(self, node: Node) -> str:
        text = self.render(node)
        # Keep operators and literals from running into the class body
        if isinstance(node, (BinaryExpression, LogicalExpression)) or Group.LITERAL in node.groups:
            return "(" + text + ")"
        return text

    def _render_import(self, node: ImportDeclaration) -> str:
        text = "import "
        if node.specifiers:
            default_import = ""
            namespace_import = ""
            named_imports = []
            for spec in node.specifiers:
                if isinstance(spec, ImportDefaultSpecifier):
                    default_import = self.render(spec)
                elif isinstance(spec, ImportNamespaceSpecifier):
                    namespace_import = self.render(spec)
                elif isinstance(spec, ImportSpecifier):
                    named_imports.extend(self.render(n) for n in spec.named_imports)

            clauses = [c for c in (default_import, namespace_import) if c]
            if named_imports:
                clauses.append("{ " + ", ".join(named_imports) + " }")
            text += (", ".join(clauses) or "{}") + " from "
        return text + json.dumps(node.source, ensure_ascii=False) + ";"

    # Expressions

    def _render_expression(self, node: Node) -> str:
        if isinstance(node, Identifier):
            return node.name

        elif isinstance(node, ThisExpression):
            return "this"

        elif isinstance(node, Super):
            return "super"

        elif isinstance(node, MetaProperty):
            return f"{self.render(node.meta)}.{self.render(node.property)}"

        elif isinstance(node, ArrayExpression):
            if not node.elements:
                return "[]"
            return "[\n" + self.indentor.indent(self._join(node.elements, ", ")) + ",\n]"

        elif isinstance(node, ObjectExpression):
            if not node.properties:
                return "{}"
            props = self._join(node.properties, ",\n") + ","
            return "{\n" + self.indentor.indent(props) + "\n}"

        elif isinstance(node, FunctionExpression):
            return self._render_function(node.id, node.params, node.body, node.function_type)

        elif isinstance(node, ArrowFunctionExpression):
            prefix = "async " if node.is_async else ""
            if isinstance(node.body, BlockStatement):
                body = self._braced(self._body(node.body))
            elif isinstance(node.body, (ObjectExpression, SequenceExpression)):
                body = "(" + self.render(node.body) + ")"
            else:
                body = self.render(node.body)
            return f"{prefix}({self._params(node.params)}) => {body}"

        elif isinstance(node, ClassExpression):
            return self._render_class(node.id, node.super_class, node.body)

        elif isinstance(node, (BinaryExpression, LogicalExpression, AssignmentExpression)):
            return f"{self.render(node.left)} {node.operator.value} {self.render(node.right)}"

        elif isinstance(node, UnaryExpression):
            return node.operator.apply(self._wrap_unless(node.argument, _BARE_OPERANDS))

        elif isinstance(node, UpdateExpression):
            operand = self._wrap_unless(node.argument, _BARE_OPERANDS)
            if node.prefix:
                return node.operator.value + operand
            return operand + node.operator.value

        elif isinstance(node, ConditionalExpression):
            return (
                f"{self.render(node.test)}? {self.render(node.consequent)}: "
                f"{self.render(node.alternate)}"
            )

        elif isinstance(node, SequenceExpression):
            return self._join(node.expressions, ", ")

        elif isinstance(node, AwaitExpression):
            return "await " + self.render(node.argument)

        elif isinstance(node, YieldExpression):
            text = "yield*" if node.delegate else "yield"
            if node.argument is not None:
                text += " " + self.render(node.argument)
            return text

        elif isinstance(node, StaticMemberExpression):
            return self._render_static_member(node, node.optional)

        elif isinstance(node, ComputedMemberExpression):
            return self._render_computed_member(node, node.optional)

        elif isinstance(node, CallExpression):
            return self._render_call(node, node.optional)

        elif isinstance(node, NewExpression):
            callee = self._wrap_unless(node.callee, _BARE_OPERANDS)
            return f"new {callee}({self._join(node.arguments, ', ')})"

        elif isinstance(node, ChainExpression):
            return self._render_chain_element(node.expression)

        elif isinstance(node, TemplateLiteral):
            parts = []
            for index, quasi in enumerate(node.quasis):
                parts.append(quasi.raw)
                if index < len(node.expressions):
                    parts.append("${" + self.render(node.expressions[index]) + "}")
            return "`" + "".join(parts) + "`"

        elif isinstance(node, TaggedTemplateExpression):
            raise UnsupportedConstructError(
                "TaggedTemplateExpression", "Tagged template rendering is not implemented"
            )

        raise UnsupportedConstructError(type(node).__name__)

    def _render_static_member(self, node: StaticMemberExpression, optional: bool) -> str:
        obj = self._wrap_unless(node.object, _BARE_MEMBER_OBJECTS)
        prop = node.property
        if isinstance(prop, Identifier):
            prop_text = prop.name
        else:
            prop_text = self._wrap_unless(prop, _BARE_MEMBER_PROPERTIES)
        return obj + ("?." if optional else ".") + prop_text

    def _render_computed_member(self, node: ComputedMemberExpression, optional: bool) -> str:
        obj = self._wrap_unless(node.object, _BARE_MEMBER_OBJECTS)
        return obj + ("?.[" if optional else "[") + self.render(node.property) + "]"

    def _render_call(self, node: CallExpression, optional: bool) -> str:
        return self.render(node.callee) + ("?." if optional else "") + "(" + self._join(node.arguments, ", ") + ")"

    def _render_chain_element(self, node: Node) -> str:
        if isinstance(node, StaticMemberExpression):
            return self._render_static_member(node, True)
        elif isinstance(node, ComputedMemberExpression):
            return self._render_computed_member(node, True)
        elif isinstance(node, CallExpression):
            return self._render_call(node, True)
        raise UnsupportedConstructError(type(node).__name__)

    # Patterns, properties, clauses and module specifiers

    def _render_other(self, node: Node) -> str:
        if isinstance(node, Program):
            return self.render_program(node.body)

        elif isinstance(node, ArrayPattern):
            if not node.elements:
                return "[]"
            lines = self._join(node.elements, ", ").split("\n")
            return "[\n" + "\n".join(self.indentor.indent_lines(lines)) + "\n]"

        elif isinstance(node, ObjectPattern):
            if not node.properties:
                return "{}"
            lines = self._join(node.properties, ",\n").split("\n")
            return "{\n" + "\n".join(self.indentor.indent_lines(lines)) + "\n}"

        elif isinstance(node, AssignmentPattern):
            return f"{self.render(node.left)} = {self.render(node.right)}"

        elif isinstance(node, (RestElement, SpreadElement)):
            return "..." + self.render(node.argument)

        elif isinstance(node, PropertyPattern):
            key = self._key(node.key, node.computed)
            if node.value is None:
                return key
            if node.shorthand:
                return self.render(node.value)
            return f"{key}: {self.render(node.value)}"

        elif isinstance(node, Property):
            return self._render_property(node)

        elif isinstance(node, ClassBody):
            return self._join(node.body, "\n")

        elif isinstance(node, MethodDefinition):
            prefix = "static " if node.static else ""
            prefix += _METHOD_PREFIXES[node.value.function_type]
            if node.kind in (MethodKind.GET, MethodKind.SET):
                prefix += node.kind.value + " "
            return self._callable(prefix, self._key(node.key, node.computed), node.value)

        elif isinstance(node, PropertyDefinition):
            text = ("static " if node.static else "") + self._key(node.key, node.computed)
            if node.value is not None:
                text += " = " + self.render(node.value)
            return text + ";"

        elif isinstance(node, CatchClause):
            body = self._braced(self._body(node.body))
            if node.param is None:
                return "catch " + body
            return f"catch ({self.render(node.param)}) {body}"

        elif isinstance(node, SwitchCase):
            head = "default:" if node.test is None else f"case {self.render(node.test)}:"
            if not node.consequent:
                return head
            return head + "\n" + self.indentor.indent(self._join(node.consequent, "\n"))

        elif isinstance(node, VariableDeclarator):
            if node.init is None:
                return self.render(node.id)
            return f"{self.render(node.id)} = {self.render(node.init)}"

        elif isinstance(node, TemplateElement):
            return node.raw

        elif isinstance(node, ImportDefaultSpecifier):
            return self.render(node.local)

        elif isinstance(node, ImportNamespaceSpecifier):
            return "* as " + self.render(node.local)

        elif isinstance(node, ImportSpecifier):
            if not node.named_imports:
                return "{}"
            return "{ " + self._join(node.named_imports, ", ") + " }"

        elif isinstance(node, NamedImport):
            text = node.imported.name
            if node.local is not None:
                text += " as " + node.local.name
            return text

        elif isinstance(node, ExportSpecifier):
            text = node.local.name
            if node.exported is not None and node.exported.name != node.local.name:
                text += " as " + node.exported.name
            return text

        elif isinstance(node, Import):
            return "import"

        raise UnsupportedConstructError(type(node).__name__)

    def _render_property(self, node: Property) -> str:
        key = self._key(node.key, node.computed)
        if node.kind in (PropertyKind.GET, PropertyKind.SET):
            return self._callable(node.kind.value + " ", key, node.value)
        if node.method:
            return self._callable(_METHOD_PREFIXES[node.value.function_type], key, node.value)
        if node.value is None or node.shorthand:
            return key
        return f"{key}: {self.render(node.value)}"


def render(node: Node, indentor: Optional[Indentor] = None) -> str:
    """Render a node with a one-off printer."""
    return Printer(indentor).render(node)
