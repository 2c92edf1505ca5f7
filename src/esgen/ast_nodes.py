"""AST node types for ECMAScript code generation.

Every concrete node is a frozen dataclass that declares the capability groups
it belongs to. Child slots declare which groups (or exact node classes) they
accept, and the check runs when the node is built, so an ill-typed tree can
never reach the printer.
"""

from dataclasses import dataclass, field, fields, is_dataclass, asdict
from decimal import Decimal
from enum import Enum
from typing import Any, ClassVar, Dict, FrozenSet, Optional, Tuple, Type, Union

from .errors import NodeConstructionError


class Group(Enum):
    """Capability groups: closed sets of variants allowed in a slot."""

    EXPRESSION = "Expression"
    STATEMENT = "Statement"
    DECLARATION = "Declaration"
    STATEMENT_LIST_ITEM = "StatementListItem"
    LITERAL = "Literal"
    BINDING_PATTERN = "BindingPattern"
    BINDING_IDENTIFIER_OR_PATTERN = "BindingIdentifierOrPattern"
    ARGUMENT_LIST_ELEMENT = "ArgumentListElement"
    ARRAY_EXPRESSION_ELEMENT = "ArrayExpressionElement"
    ARRAY_PATTERN_ELEMENT = "ArrayPatternElement"
    FUNCTION_PARAMETER = "FunctionParameter"
    PROPERTY_KEY = "PropertyKey"
    PROPERTY_VALUE = "PropertyValue"
    OBJECT_EXPRESSION_PROPERTY = "ObjectExpressionProperty"
    OBJECT_PATTERN_PROPERTY = "ObjectPatternProperty"
    IMPORT_DECLARATION_SPECIFIER = "ImportDeclarationSpecifier"
    EXPORTABLE_DEFAULT_DECLARATION = "ExportableDefaultDeclaration"
    EXPORTABLE_NAMED_DECLARATION = "ExportableNamedDeclaration"
    EXPORT_DECLARATION = "ExportDeclaration"
    CHAIN_ELEMENT = "ChainElement"
    CLASS_PROPERTY = "ClassProperty"
    EXPRESSION_OR_IMPORT = "ExpressionOrImport"


_EXPRESSION = frozenset({
    Group.EXPRESSION,
    Group.ARGUMENT_LIST_ELEMENT,
    Group.ARRAY_EXPRESSION_ELEMENT,
    Group.EXPORTABLE_DEFAULT_DECLARATION,
    Group.EXPRESSION_OR_IMPORT,
    Group.PROPERTY_KEY,
})
_LITERAL = _EXPRESSION | {Group.LITERAL}
_STATEMENT = frozenset({Group.STATEMENT, Group.STATEMENT_LIST_ITEM})
_DECLARATION = frozenset({Group.DECLARATION, Group.STATEMENT_LIST_ITEM})
_EXPORT = _DECLARATION | {Group.EXPORT_DECLARATION}
_BINDING_PATTERN = frozenset({
    Group.BINDING_PATTERN,
    Group.BINDING_IDENTIFIER_OR_PATTERN,
    Group.FUNCTION_PARAMETER,
    Group.PROPERTY_VALUE,
    Group.ARRAY_PATTERN_ELEMENT,
    Group.EXPORTABLE_DEFAULT_DECLARATION,
})

# Class name -> class, filled as node classes are defined
_NODE_TYPES: Dict[str, Type["Node"]] = {}


# Operators and tags
class AssignmentOperator(Enum):
    ASSIGN = "="
    ADD = "+="
    SUBTRACT = "-="
    MULTIPLY = "*="
    DIVIDE = "/="
    MODULUS = "%="
    EXPONENT = "**="
    SHIFT_LEFT = "<<="
    SHIFT_RIGHT = ">>="
    ZERO_FILL_SHIFT_RIGHT = ">>>="
    BITWISE_AND = "&="
    BITWISE_OR = "|="
    BITWISE_XOR = "^="
    LOGICAL_AND = "&&="
    LOGICAL_OR = "||="
    NULLISH = "??="


class BinaryOperator(Enum):
    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    EXPONENT = "**"
    DIVIDE = "/"
    MODULUS = "%"
    BITWISE_AND = "&"
    BITWISE_OR = "|"
    BITWISE_XOR = "^"
    SHIFT_LEFT = "<<"
    SHIFT_RIGHT = ">>"
    ZERO_FILL_SHIFT_RIGHT = ">>>"
    EQUAL = "=="
    NOT_EQUAL = "!="
    STRICT_EQUAL = "==="
    STRICT_NOT_EQUAL = "!=="
    LESS = "<"
    LESS_EQUAL = "<="
    GREATER = ">"
    GREATER_EQUAL = ">="
    IN = "in"
    INSTANCEOF = "instanceof"


class LogicalOperator(Enum):
    OR = "||"
    AND = "&&"
    NULLISH_COALESCING = "??"


class UnaryOperator(Enum):
    """Unary operators as (prefix, suffix) pairs around the operand."""

    PLUS = ("+", "")
    MINUS = ("-", "")
    INCREMENT_PREFIX = ("++", "")
    INCREMENT_POSTFIX = ("", "++")
    DECREMENT_PREFIX = ("--", "")
    DECREMENT_POSTFIX = ("", "--")
    NOT = ("!", "")
    BITWISE_NOT = ("~", "")
    TYPEOF = ("typeof ", "")
    VOID = ("void ", "")
    DELETE = ("delete ", "")

    @property
    def prefix(self) -> str:
        return self.value[0]

    @property
    def suffix(self) -> str:
        return self.value[1]

    def apply(self, operand: str) -> str:
        return self.prefix + operand + self.suffix

    @classmethod
    def _missing_(cls, value):
        # Operator text such as "-" or "typeof" names the prefix form
        if isinstance(value, str):
            for member in cls:
                if not member.suffix and member.prefix.strip() == value:
                    return member
        return None


class UpdateOperator(Enum):
    INCREMENT = "++"
    DECREMENT = "--"


class FunctionType(Enum):
    NORMAL = "normal"
    ASYNC = "async"
    GENERATOR = "generator"


class VariableKind(Enum):
    CONST = "const"
    LET = "let"
    VAR = "var"


class PropertyKind(Enum):
    INIT = "init"
    GET = "get"
    SET = "set"


class MethodKind(Enum):
    METHOD = "method"
    CONSTRUCTOR = "constructor"
    GET = "get"
    SET = "set"


# Source metadata
@dataclass(frozen=True)
class Position:
    """A line/column position in the originating source."""
    line: int
    column: int


@dataclass(frozen=True)
class SourceLocation:
    """Start and end positions plus the originating source name."""
    start: Position
    end: Position
    source: Optional[str] = None


@dataclass(frozen=True)
class Range:
    """Start/end character offsets in the originating source."""
    start: int
    end: int


def slot(*accepts: Union[Group, str], many: bool = False, optional: bool = False, **kwargs: Any) -> Any:
    """Declare a child slot accepting the given groups or node class names."""
    if optional and "default" not in kwargs and "default_factory" not in kwargs:
        kwargs["default"] = None
    return field(metadata={"accepts": accepts, "many": many, "optional": optional}, **kwargs)


def scalar(*types: type, **kwargs: Any) -> Any:
    """Declare a scalar field restricted to the given Python types or enums."""
    return field(metadata={"types": types}, **kwargs)


def _accepts(node: Any, accepts: Tuple[Union[Group, str], ...]) -> bool:
    if not isinstance(node, Node):
        return False
    for accepted in accepts:
        if isinstance(accepted, Group):
            if accepted in node.groups:
                return True
        elif isinstance(node, _NODE_TYPES[accepted]):
            return True
    return False


def _describe(accepts: Tuple[Union[Group, str], ...]) -> str:
    return " or ".join(a.value if isinstance(a, Group) else a for a in accepts)


def _coerce(owner: str, name: str, raw: Any, types: Tuple[type, ...]) -> Any:
    for expected in types:
        if expected is type(None):
            if raw is None:
                return raw
        elif isinstance(raw, expected):
            # bool is an int subclass but never a number here
            if isinstance(raw, bool) and expected is not bool:
                continue
            return raw
    for expected in types:
        if isinstance(expected, type) and issubclass(expected, Enum):
            try:
                return expected(raw)
            except ValueError:
                pass
    expected_names = " or ".join(t.__name__ for t in types)
    raise NodeConstructionError(
        f"{owner} expects {expected_names}, got {type(raw).__name__} {raw!r}", name
    )


def _to_plain(item: Any) -> Any:
    if isinstance(item, Node):
        return item.to_dict()
    if isinstance(item, (list, tuple)):
        return [_to_plain(v) for v in item]
    if isinstance(item, Enum):
        return item.value if isinstance(item.value, str) else item.name
    if isinstance(item, Decimal):
        return format(item, "f")
    if is_dataclass(item):
        return asdict(item)
    return item


@dataclass(frozen=True)
class Node:
    """Base class for all AST nodes."""

    groups: ClassVar[FrozenSet[Group]] = frozenset()

    loc: Optional[SourceLocation] = field(default=None, kw_only=True, compare=False, repr=False)
    source_range: Optional[Range] = field(default=None, kw_only=True, compare=False, repr=False)

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        _NODE_TYPES[cls.__name__] = cls

    def __post_init__(self) -> None:
        owner = type(self).__name__
        for f in fields(self):
            current = getattr(self, f.name)
            types = f.metadata.get("types")
            if types is not None:
                object.__setattr__(self, f.name, _coerce(owner, f.name, current, types))
                continue
            accepts = f.metadata.get("accepts")
            if accepts is None:
                continue
            if f.metadata["many"]:
                if current is None or isinstance(current, (str, Node)):
                    raise NodeConstructionError(f"{owner} expects a sequence of nodes", f.name)
                current = tuple(current)
                object.__setattr__(self, f.name, current)
                for item in current:
                    self._check_child(f.name, item, accepts)
            elif current is None:
                if not f.metadata["optional"]:
                    raise NodeConstructionError(f"{owner} requires a value", f.name)
            else:
                self._check_child(f.name, current, accepts)

    def _check_child(self, name: str, child: Any, accepts: Tuple[Union[Group, str], ...]) -> None:
        if not _accepts(child, accepts):
            raise NodeConstructionError(
                f"{type(self).__name__} does not accept {type(child).__name__} "
                f"(expected {_describe(accepts)})",
                name,
            )

    def to_dict(self) -> dict:
        """Convert node to dictionary for testing/serialization."""
        result = {"type": self.__class__.__name__}
        for f in fields(self):
            item = getattr(self, f.name)
            if f.name in ("loc", "source_range") and item is None:
                continue
            result[f.name] = _to_plain(item)
        return result


def is_member(node: Any, group: Group) -> bool:
    """Check whether a node's kind belongs to a capability group."""
    return isinstance(node, Node) and group in node.groups


def members(group: Group) -> Tuple[Type[Node], ...]:
    """Return every concrete node class belonging to a capability group."""
    return tuple(
        cls for name, cls in sorted(_NODE_TYPES.items()) if group in cls.groups
    )


# Literals
@dataclass(frozen=True)
class NullLiteral(Node):
    """Null literal: null"""
    groups = _LITERAL


@dataclass(frozen=True)
class UndefinedLiteral(Node):
    """Undefined literal: undefined"""
    groups = _LITERAL


@dataclass(frozen=True)
class StringLiteral(Node):
    """String literal: "hello" """
    groups = _LITERAL
    value: str = scalar(str)


@dataclass(frozen=True)
class BooleanLiteral(Node):
    """Boolean literal: true, false"""
    groups = _LITERAL
    value: bool = scalar(bool)


@dataclass(frozen=True)
class NumericLiteral(Node):
    """Numeric literal stored as a 64-bit float: 42, 3.14"""
    groups = _LITERAL
    value: float = scalar(int, float)

    def __post_init__(self) -> None:
        super().__post_init__()
        object.__setattr__(self, "value", float(self.value))


@dataclass(frozen=True)
class BigNumericLiteral(Node):
    """Arbitrary-precision decimal literal."""
    groups = _LITERAL
    value: Decimal = scalar(Decimal)


NULL = NullLiteral()
UNDEFINED = UndefinedLiteral()


# Identifiers and primaries
@dataclass(frozen=True)
class Identifier(Node):
    """Identifier: variable names, property names"""
    groups = _EXPRESSION | {
        Group.BINDING_IDENTIFIER_OR_PATTERN,
        Group.FUNCTION_PARAMETER,
        Group.PROPERTY_VALUE,
        Group.ARRAY_PATTERN_ELEMENT,
    }
    name: str = scalar(str)


@dataclass(frozen=True)
class ThisExpression(Node):
    """The 'this' keyword."""
    groups = _EXPRESSION


@dataclass(frozen=True)
class Super(Node):
    """The 'super' keyword, as a callee or member object."""
    groups = _EXPRESSION


@dataclass(frozen=True)
class MetaProperty(Node):
    """Meta property: new.target, import.meta"""
    groups = _EXPRESSION
    meta: "Identifier" = slot("Identifier")
    property: "Identifier" = slot("Identifier")


@dataclass(frozen=True)
class Import(Node):
    """The 'import' keyword used as a dynamic import callee."""
    groups = frozenset({Group.EXPRESSION_OR_IMPORT})


# Patterns
@dataclass(frozen=True)
class ArrayPattern(Node):
    """Array destructuring target: [a, b]"""
    groups = _BINDING_PATTERN
    elements: Tuple[Node, ...] = slot(Group.ARRAY_PATTERN_ELEMENT, many=True, default=())


@dataclass(frozen=True)
class ObjectPattern(Node):
    """Object destructuring target: {a, b: c}"""
    groups = _BINDING_PATTERN
    properties: Tuple[Node, ...] = slot(Group.OBJECT_PATTERN_PROPERTY, many=True, default=())


@dataclass(frozen=True)
class AssignmentPattern(Node):
    """Binding with a default value: a = 1"""
    groups = frozenset({
        Group.ARRAY_PATTERN_ELEMENT,
        Group.PROPERTY_VALUE,
        Group.FUNCTION_PARAMETER,
    })
    left: Node = slot(Group.BINDING_IDENTIFIER_OR_PATTERN)
    right: Node = slot(Group.EXPRESSION)


@dataclass(frozen=True)
class RestElement(Node):
    """Rest binding: ...rest"""
    groups = frozenset({
        Group.ARRAY_PATTERN_ELEMENT,
        Group.OBJECT_PATTERN_PROPERTY,
        Group.FUNCTION_PARAMETER,
    })
    argument: Node = slot(Group.BINDING_IDENTIFIER_OR_PATTERN)


@dataclass(frozen=True)
class SpreadElement(Node):
    """Spread element: ...items"""
    groups = frozenset({
        Group.ARGUMENT_LIST_ELEMENT,
        Group.ARRAY_EXPRESSION_ELEMENT,
        Group.OBJECT_EXPRESSION_PROPERTY,
    })
    argument: Node = slot(Group.EXPRESSION)


@dataclass(frozen=True)
class PropertyPattern(Node):
    """Object pattern property: key, key: value, key = default"""
    groups = frozenset({Group.OBJECT_PATTERN_PROPERTY})
    key: Node = slot(Group.PROPERTY_KEY)
    value: Optional[Node] = slot(Group.PROPERTY_VALUE, optional=True)
    computed: bool = scalar(bool, default=False)
    shorthand: bool = scalar(bool, default=False)


# Expressions
@dataclass(frozen=True)
class ArrayExpression(Node):
    """Array literal: [1, 2, 3]"""
    groups = _EXPRESSION
    elements: Tuple[Node, ...] = slot(Group.ARRAY_EXPRESSION_ELEMENT, many=True, default=())


@dataclass(frozen=True)
class Property(Node):
    """Object property: key: value"""
    groups = frozenset({Group.OBJECT_EXPRESSION_PROPERTY})
    key: Node = slot(Group.PROPERTY_KEY)
    value: Optional[Node] = slot(Group.EXPRESSION, optional=True)
    kind: PropertyKind = scalar(PropertyKind, default=PropertyKind.INIT)
    method: bool = scalar(bool, default=False)
    shorthand: bool = scalar(bool, default=False)
    computed: bool = scalar(bool, default=False)

    def __post_init__(self) -> None:
        super().__post_init__()
        if self.kind is not PropertyKind.INIT or self.method:
            if not isinstance(self.value, FunctionExpression):
                form = "method" if self.method else f"{self.kind.value} accessor"
                raise NodeConstructionError(f"Property {form} needs a FunctionExpression value", "value")


@dataclass(frozen=True)
class ObjectExpression(Node):
    """Object literal: {a: 1, b: 2}"""
    groups = _EXPRESSION
    properties: Tuple[Node, ...] = slot(Group.OBJECT_EXPRESSION_PROPERTY, many=True, default=())


@dataclass(frozen=True)
class TemplateElement(Node):
    """Raw text chunk of a template literal."""
    raw: str = scalar(str)
    tail: bool = scalar(bool, default=False)


@dataclass(frozen=True)
class TemplateLiteral(Node):
    """Template literal: `a${b}c`"""
    groups = _EXPRESSION
    quasis: Tuple[TemplateElement, ...] = slot("TemplateElement", many=True, default=())
    expressions: Tuple[Node, ...] = slot(Group.EXPRESSION, many=True, default=())

    def __post_init__(self) -> None:
        super().__post_init__()
        if (self.quasis or self.expressions) and len(self.quasis) != len(self.expressions) + 1:
            raise NodeConstructionError(
                "TemplateLiteral needs exactly one more quasi than expressions", "quasis"
            )


@dataclass(frozen=True)
class TaggedTemplateExpression(Node):
    """Tagged template: tag`text`"""
    groups = _EXPRESSION
    tag: Node = slot(Group.EXPRESSION)
    quasi: TemplateLiteral = slot("TemplateLiteral")


@dataclass(frozen=True)
class UnaryExpression(Node):
    """Unary expression: -x, !x, typeof x, x++, etc."""
    groups = _EXPRESSION
    operator: UnaryOperator = scalar(UnaryOperator)
    argument: Node = slot(Group.EXPRESSION)


@dataclass(frozen=True)
class UpdateExpression(Node):
    """Update expression: ++x, x++, --x, x--"""
    groups = _EXPRESSION
    operator: UpdateOperator = scalar(UpdateOperator)
    argument: Node = slot(Group.EXPRESSION)
    prefix: bool = scalar(bool, default=False)


@dataclass(frozen=True)
class BinaryExpression(Node):
    """Binary expression: a + b, a * b, etc."""
    groups = _EXPRESSION
    operator: BinaryOperator = scalar(BinaryOperator)
    left: Node = slot(Group.EXPRESSION)
    right: Node = slot(Group.EXPRESSION)


@dataclass(frozen=True)
class LogicalExpression(Node):
    """Logical expression: a && b, a || b, a ?? b"""
    groups = _EXPRESSION
    operator: LogicalOperator = scalar(LogicalOperator)
    left: Node = slot(Group.EXPRESSION)
    right: Node = slot(Group.EXPRESSION)


@dataclass(frozen=True)
class AssignmentExpression(Node):
    """Assignment expression: a = b, a += b, etc."""
    groups = _EXPRESSION
    operator: AssignmentOperator = scalar(AssignmentOperator)
    left: Node = slot(Group.EXPRESSION, Group.BINDING_PATTERN)
    right: Node = slot(Group.EXPRESSION)


@dataclass(frozen=True)
class ConditionalExpression(Node):
    """Conditional (ternary) expression: a ? b : c"""
    groups = _EXPRESSION
    test: Node = slot(Group.EXPRESSION)
    consequent: Node = slot(Group.EXPRESSION)
    alternate: Node = slot(Group.EXPRESSION)


@dataclass(frozen=True)
class SequenceExpression(Node):
    """Sequence expression: a, b, c"""
    groups = _EXPRESSION
    expressions: Tuple[Node, ...] = slot(Group.EXPRESSION, many=True)


@dataclass(frozen=True)
class AwaitExpression(Node):
    """Await expression: await promise"""
    groups = _EXPRESSION
    argument: Node = slot(Group.EXPRESSION)


@dataclass(frozen=True)
class YieldExpression(Node):
    """Yield expression: yield x, yield* gen"""
    groups = _EXPRESSION
    argument: Optional[Node] = slot(Group.EXPRESSION, optional=True)
    delegate: bool = scalar(bool, default=False)


@dataclass(frozen=True)
class StaticMemberExpression(Node):
    """Dot member access: a.b"""
    groups = _EXPRESSION | {Group.CHAIN_ELEMENT}
    object: Node = slot(Group.EXPRESSION)
    property: Node = slot(Group.EXPRESSION)
    optional: bool = scalar(bool, default=False)


@dataclass(frozen=True)
class ComputedMemberExpression(Node):
    """Bracket member access: a[b]"""
    groups = _EXPRESSION | {Group.CHAIN_ELEMENT}
    object: Node = slot(Group.EXPRESSION)
    property: Node = slot(Group.EXPRESSION)
    optional: bool = scalar(bool, default=False)


@dataclass(frozen=True)
class CallExpression(Node):
    """Call expression: f(a, b)"""
    groups = _EXPRESSION | {Group.CHAIN_ELEMENT}
    callee: Node = slot(Group.EXPRESSION_OR_IMPORT)
    arguments: Tuple[Node, ...] = slot(Group.ARGUMENT_LIST_ELEMENT, many=True, default=())
    optional: bool = scalar(bool, default=False)


@dataclass(frozen=True)
class NewExpression(Node):
    """New expression: new Foo(a, b)"""
    groups = _EXPRESSION
    callee: Node = slot(Group.EXPRESSION)
    arguments: Tuple[Node, ...] = slot(Group.ARGUMENT_LIST_ELEMENT, many=True, default=())


@dataclass(frozen=True)
class ChainExpression(Node):
    """Optional chain: a?.b, a?.[b], f?.()"""
    groups = _EXPRESSION
    expression: Node = slot(Group.CHAIN_ELEMENT)


# Statements
@dataclass(frozen=True)
class Program(Node):
    """Program node - root of AST."""
    body: Tuple[Node, ...] = slot(Group.STATEMENT_LIST_ITEM, many=True, default=())


@dataclass(frozen=True)
class BlockStatement(Node):
    """Block statement: { ... }"""
    groups = _STATEMENT
    body: Tuple[Node, ...] = slot(Group.STATEMENT_LIST_ITEM, many=True, default=())


def _empty_block() -> BlockStatement:
    return BlockStatement()


@dataclass(frozen=True)
class ExpressionStatement(Node):
    """Expression statement: expression;"""
    groups = _STATEMENT
    expression: Node = slot(Group.EXPRESSION)


@dataclass(frozen=True)
class Directive(Node):
    """Directive prologue entry: "use strict";"""
    groups = _STATEMENT
    expression: Node = slot(Group.EXPRESSION)
    directive: str = scalar(str, default="")


@dataclass(frozen=True)
class EmptyStatement(Node):
    """Empty statement: ;"""
    groups = _STATEMENT


@dataclass(frozen=True)
class DebuggerStatement(Node):
    """Debugger statement: debugger;"""
    groups = _STATEMENT


@dataclass(frozen=True)
class IfStatement(Node):
    """If statement: if (test) consequent else alternate"""
    groups = _STATEMENT
    test: Node = slot(Group.EXPRESSION)
    consequent: Node = slot(Group.STATEMENT)
    alternate: Optional[Node] = slot(Group.STATEMENT, optional=True)


@dataclass(frozen=True)
class WhileStatement(Node):
    """While statement: while (test) body"""
    groups = _STATEMENT
    test: Node = slot(Group.EXPRESSION)
    body: Node = slot(Group.STATEMENT)


@dataclass(frozen=True)
class DoWhileStatement(Node):
    """Do-while statement: do body while (test)"""
    groups = _STATEMENT
    body: Node = slot(Group.STATEMENT)
    test: Node = slot(Group.EXPRESSION)


@dataclass(frozen=True)
class ForStatement(Node):
    """For statement: for (init; test; update) body"""
    groups = _STATEMENT
    init: Optional[Node] = slot(Group.EXPRESSION, "VariableDeclaration", optional=True)
    test: Optional[Node] = slot(Group.EXPRESSION, optional=True)
    update: Optional[Node] = slot(Group.EXPRESSION, optional=True)
    body: Node = slot(Group.STATEMENT, default_factory=_empty_block)


@dataclass(frozen=True)
class ForInStatement(Node):
    """For-in statement: for (left in right) body"""
    groups = _STATEMENT
    left: Node = slot(Group.EXPRESSION, Group.BINDING_PATTERN, "VariableDeclaration")
    right: Node = slot(Group.EXPRESSION)
    body: Node = slot(Group.STATEMENT)


@dataclass(frozen=True)
class ForOfStatement(Node):
    """For-of statement: for (left of right) body"""
    groups = _STATEMENT
    left: Node = slot(Group.EXPRESSION, Group.BINDING_PATTERN, "VariableDeclaration")
    right: Node = slot(Group.EXPRESSION)
    body: Node = slot(Group.STATEMENT)
    is_await: bool = scalar(bool, default=False)


@dataclass(frozen=True)
class BreakStatement(Node):
    """Break statement: break; or break label;"""
    groups = _STATEMENT
    label: Optional["Identifier"] = slot("Identifier", optional=True)


@dataclass(frozen=True)
class ContinueStatement(Node):
    """Continue statement: continue; or continue label;"""
    groups = _STATEMENT
    label: Optional["Identifier"] = slot("Identifier", optional=True)


@dataclass(frozen=True)
class ReturnStatement(Node):
    """Return statement: return; or return expr;"""
    groups = _STATEMENT
    argument: Optional[Node] = slot(Group.EXPRESSION, optional=True)


@dataclass(frozen=True)
class ThrowStatement(Node):
    """Throw statement: throw expr;"""
    groups = _STATEMENT
    argument: Node = slot(Group.EXPRESSION)


@dataclass(frozen=True)
class CatchClause(Node):
    """Catch clause: catch (param) { body }"""
    param: Optional[Node] = slot(Group.BINDING_IDENTIFIER_OR_PATTERN, optional=True)
    body: BlockStatement = slot("BlockStatement", default_factory=_empty_block)


@dataclass(frozen=True)
class TryStatement(Node):
    """Try statement: try { } catch (e) { } finally { }"""
    groups = _STATEMENT
    block: BlockStatement = slot("BlockStatement")
    handler: Optional[CatchClause] = slot("CatchClause", optional=True)
    finalizer: Optional[BlockStatement] = slot("BlockStatement", optional=True)

    def __post_init__(self) -> None:
        super().__post_init__()
        if self.handler is None and self.finalizer is None:
            raise NodeConstructionError("Missing catch or finally clause", "handler")


@dataclass(frozen=True)
class SwitchCase(Node):
    """Switch case: case test: consequent or default: consequent"""
    test: Optional[Node] = slot(Group.EXPRESSION, optional=True)  # None for default
    consequent: Tuple[Node, ...] = slot(Group.STATEMENT_LIST_ITEM, many=True, default=())


@dataclass(frozen=True)
class SwitchStatement(Node):
    """Switch statement: switch (discriminant) { cases }"""
    groups = _STATEMENT
    discriminant: Node = slot(Group.EXPRESSION)
    cases: Tuple[SwitchCase, ...] = slot("SwitchCase", many=True, default=())


@dataclass(frozen=True)
class LabeledStatement(Node):
    """Labeled statement: label: statement"""
    groups = _STATEMENT
    label: "Identifier" = slot("Identifier")
    body: Node = slot(Group.STATEMENT)


@dataclass(frozen=True)
class WithStatement(Node):
    """With statement: with (object) body"""
    groups = _STATEMENT
    object: Node = slot(Group.EXPRESSION)
    body: Node = slot(Group.STATEMENT)


# Functions and classes
@dataclass(frozen=True)
class FunctionExpression(Node):
    """Function expression: function name(params) { body }"""
    groups = _EXPRESSION | {Group.PROPERTY_VALUE}
    id: Optional["Identifier"] = slot("Identifier", optional=True)
    params: Tuple[Node, ...] = slot(Group.FUNCTION_PARAMETER, many=True, default=())
    body: BlockStatement = slot("BlockStatement", default_factory=_empty_block)
    function_type: FunctionType = scalar(FunctionType, default=FunctionType.NORMAL)


@dataclass(frozen=True)
class ArrowFunctionExpression(Node):
    """Arrow function: (a, b) => { body } or (a) => expr"""
    groups = _EXPRESSION
    params: Tuple[Node, ...] = slot(Group.FUNCTION_PARAMETER, many=True, default=())
    body: Node = slot("BlockStatement", Group.EXPRESSION, default_factory=_empty_block)
    is_async: bool = scalar(bool, default=False)


@dataclass(frozen=True)
class FunctionDeclaration(Node):
    """Function declaration: function name(params) { body }"""
    groups = _DECLARATION | {
        Group.EXPORTABLE_DEFAULT_DECLARATION,
        Group.EXPORTABLE_NAMED_DECLARATION,
    }
    id: Optional["Identifier"] = slot("Identifier", optional=True)
    params: Tuple[Node, ...] = slot(Group.FUNCTION_PARAMETER, many=True, default=())
    body: BlockStatement = slot("BlockStatement", default_factory=_empty_block)
    function_type: FunctionType = scalar(FunctionType, default=FunctionType.NORMAL)


@dataclass(frozen=True)
class MethodDefinition(Node):
    """Class method: [static] name(params) { body }"""
    groups = frozenset({Group.CLASS_PROPERTY})
    key: Node = slot(Group.PROPERTY_KEY)
    value: FunctionExpression = slot("FunctionExpression")
    static: bool = scalar(bool, default=False)
    kind: MethodKind = scalar(MethodKind, default=MethodKind.METHOD)
    computed: bool = scalar(bool, default=False)


@dataclass(frozen=True)
class PropertyDefinition(Node):
    """Class field: [static] name = value;"""
    groups = frozenset({Group.CLASS_PROPERTY})
    key: Node = slot(Group.PROPERTY_KEY)
    value: Optional[Node] = slot(Group.EXPRESSION, optional=True)
    static: bool = scalar(bool, default=False)
    computed: bool = scalar(bool, default=False)


@dataclass(frozen=True)
class ClassBody(Node):
    """Class body: the list of methods and fields."""
    body: Tuple[Node, ...] = slot(Group.CLASS_PROPERTY, many=True, default=())


@dataclass(frozen=True)
class ClassExpression(Node):
    """Class expression: class [name] [extends base] { body }"""
    groups = _EXPRESSION
    id: Optional["Identifier"] = slot("Identifier", optional=True)
    super_class: Optional[Node] = slot(Group.EXPRESSION, optional=True)
    body: ClassBody = slot("ClassBody", default_factory=ClassBody)


@dataclass(frozen=True)
class ClassDeclaration(Node):
    """Class declaration: class name [extends base] { body }"""
    groups = _DECLARATION | {
        Group.EXPORTABLE_DEFAULT_DECLARATION,
        Group.EXPORTABLE_NAMED_DECLARATION,
    }
    id: Optional["Identifier"] = slot("Identifier", optional=True)
    super_class: Optional[Node] = slot(Group.EXPRESSION, optional=True)
    body: ClassBody = slot("ClassBody", default_factory=ClassBody)


# Declarations
@dataclass(frozen=True)
class VariableDeclarator(Node):
    """Variable declarator: a = 1"""
    id: Node = slot(Group.BINDING_IDENTIFIER_OR_PATTERN)
    init: Optional[Node] = slot(Group.EXPRESSION, optional=True)


@dataclass(frozen=True)
class VariableDeclaration(Node):
    """Variable declaration: var a = 1, b = 2"""
    groups = _DECLARATION | {Group.EXPORTABLE_NAMED_DECLARATION}
    declarations: Tuple[VariableDeclarator, ...] = slot("VariableDeclarator", many=True)
    kind: VariableKind = scalar(VariableKind, default=VariableKind.VAR)


# Modules
@dataclass(frozen=True)
class ImportDefaultSpecifier(Node):
    """Default import binding: import name from "x" """
    groups = frozenset({Group.IMPORT_DECLARATION_SPECIFIER})
    local: "Identifier" = slot("Identifier")


@dataclass(frozen=True)
class ImportNamespaceSpecifier(Node):
    """Namespace import binding: import * as name from "x" """
    groups = frozenset({Group.IMPORT_DECLARATION_SPECIFIER})
    local: "Identifier" = slot("Identifier")


@dataclass(frozen=True)
class NamedImport(Node):
    """One named import, optionally renamed: a as b"""
    imported: "Identifier" = slot("Identifier")
    local: Optional["Identifier"] = slot("Identifier", optional=True)


@dataclass(frozen=True)
class ImportSpecifier(Node):
    """Named import list: { a, b as c }"""
    groups = frozenset({Group.IMPORT_DECLARATION_SPECIFIER})
    named_imports: Tuple[NamedImport, ...] = slot("NamedImport", many=True, default=())


@dataclass(frozen=True)
class ImportDeclaration(Node):
    """Import declaration: import a, { b } from "source";"""
    groups = _DECLARATION
    specifiers: Tuple[Node, ...] = slot(Group.IMPORT_DECLARATION_SPECIFIER, many=True)
    source: str = scalar(str)


@dataclass(frozen=True)
class ExportSpecifier(Node):
    """One exported binding, optionally renamed: a as b"""
    local: "Identifier" = slot("Identifier")
    exported: Optional["Identifier"] = slot("Identifier", optional=True)


@dataclass(frozen=True)
class ExportNamedDeclaration(Node):
    """Named export: export const a = 1; or export { a, b };"""
    groups = _EXPORT
    declaration: Optional[Node] = slot(Group.EXPORTABLE_NAMED_DECLARATION, optional=True)
    specifiers: Tuple[ExportSpecifier, ...] = slot("ExportSpecifier", many=True, default=())
    source: Optional[str] = scalar(str, type(None), default=None)


@dataclass(frozen=True)
class ExportDefaultDeclaration(Node):
    """Default export: export default expr"""
    groups = _EXPORT
    declaration: Node = slot(Group.EXPORTABLE_DEFAULT_DECLARATION)


@dataclass(frozen=True)
class ExportAllDeclaration(Node):
    """Re-export: export * from "source" """
    groups = _EXPORT
    source: StringLiteral = slot("StringLiteral")
    exported: Optional["Identifier"] = slot("Identifier", optional=True)
