"""Tests for the node model: capability groups and slot checks."""

import pytest

from esgen import Group, NodeConstructionError, is_member, members, number_literal, string_literal
from esgen.ast_nodes import (
    ArrayExpression, ArrayPattern, AssignmentPattern, BinaryExpression,
    BinaryOperator, BlockStatement, CallExpression, ChainExpression,
    ClassDeclaration, ExportNamedDeclaration, ExpressionStatement,
    ForStatement, FunctionDeclaration, FunctionExpression, FunctionType,
    Identifier, Import, ImportDeclaration, ImportDefaultSpecifier,
    MethodDefinition, NumericLiteral, ObjectPattern, Position, Program,
    Property, PropertyKind, Range, RestElement, ReturnStatement,
    SourceLocation, SpreadElement, StaticMemberExpression, TemplateElement,
    TemplateLiteral, TryStatement, UnaryExpression, UnaryOperator,
    VariableDeclaration, VariableDeclarator, VariableKind,
)


class TestGroups:
    """Group membership of node kinds."""

    def test_identifier_groups(self):
        """Identifiers are expressions, binding targets and parameters."""
        node = Identifier("a")
        for group in (
            Group.EXPRESSION,
            Group.BINDING_IDENTIFIER_OR_PATTERN,
            Group.FUNCTION_PARAMETER,
            Group.PROPERTY_KEY,
            Group.ARRAY_PATTERN_ELEMENT,
        ):
            assert is_member(node, group)
        assert not is_member(node, Group.STATEMENT)

    def test_literal_is_expression(self):
        """Every literal is also an expression."""
        assert is_member(string_literal("x"), Group.LITERAL)
        assert is_member(string_literal("x"), Group.EXPRESSION)

    def test_statements_are_list_items(self):
        """Every statement is a statement list item."""
        for cls in members(Group.STATEMENT):
            assert Group.STATEMENT_LIST_ITEM in cls.groups

    def test_declarations_are_list_items(self):
        """Every declaration is a statement list item."""
        for cls in members(Group.DECLARATION):
            assert Group.STATEMENT_LIST_ITEM in cls.groups

    def test_members_sorted_and_complete(self):
        """members() lists classes by name."""
        literals = [cls.__name__ for cls in members(Group.LITERAL)]
        assert literals == sorted(literals)
        assert literals == [
            "BigNumericLiteral", "BooleanLiteral", "NullLiteral",
            "NumericLiteral", "StringLiteral", "UndefinedLiteral",
        ]

    def test_rest_element_is_not_expression(self):
        """Rest elements only bind."""
        node = RestElement(Identifier("xs"))
        assert is_member(node, Group.FUNCTION_PARAMETER)
        assert not is_member(node, Group.EXPRESSION)

    def test_spread_element_groups(self):
        """Spread elements fit argument lists, arrays and objects."""
        node = SpreadElement(Identifier("xs"))
        assert is_member(node, Group.ARGUMENT_LIST_ELEMENT)
        assert is_member(node, Group.ARRAY_EXPRESSION_ELEMENT)
        assert is_member(node, Group.OBJECT_EXPRESSION_PROPERTY)

    def test_import_keyword_only_callee(self):
        """The import keyword is only a callee."""
        assert is_member(Import(), Group.EXPRESSION_OR_IMPORT)
        assert not is_member(Import(), Group.EXPRESSION)

    def test_chain_elements(self):
        """Member and call expressions are chain elements."""
        assert {cls.__name__ for cls in members(Group.CHAIN_ELEMENT)} == {
            "CallExpression", "ComputedMemberExpression", "StaticMemberExpression",
        }

    def test_exportable_declarations(self):
        """Functions, classes and variables can be exported by name."""
        names = {cls.__name__ for cls in members(Group.EXPORTABLE_NAMED_DECLARATION)}
        assert names == {"ClassDeclaration", "FunctionDeclaration", "VariableDeclaration"}

    def test_is_member_non_node(self):
        """Non-nodes belong to no group."""
        assert not is_member("a", Group.EXPRESSION)
        assert not is_member(None, Group.EXPRESSION)


class TestSlotChecks:
    """Children are checked against their slot at construction."""

    def test_statement_in_expression_slot(self):
        """A statement cannot be an operand."""
        stmt = ExpressionStatement(Identifier("a"))
        with pytest.raises(NodeConstructionError) as exc_info:
            BinaryExpression("+", stmt, Identifier("b"))
        assert exc_info.value.field == "left"

    def test_pattern_not_an_argument(self):
        """Patterns are not call arguments."""
        with pytest.raises(NodeConstructionError):
            CallExpression(Identifier("f"), [ObjectPattern()])

    def test_spread_allowed_as_argument(self):
        """Spread elements are call arguments."""
        node = CallExpression(Identifier("f"), [SpreadElement(Identifier("xs"))])
        assert len(node.arguments) == 1

    def test_missing_required_child(self):
        """Required slots reject None."""
        with pytest.raises(NodeConstructionError):
            ExpressionStatement(None)

    def test_list_slot_rejects_single_node(self):
        """A list slot needs a sequence."""
        with pytest.raises(NodeConstructionError):
            ArrayExpression(Identifier("a"))

    def test_list_slot_checks_each_item(self):
        """Every list item is checked."""
        with pytest.raises(NodeConstructionError):
            BlockStatement([ExpressionStatement(Identifier("a")), Identifier("b")])

    def test_list_slot_becomes_tuple(self):
        """Sequences are frozen into tuples."""
        node = ArrayExpression([Identifier("a")])
        assert node.elements == (Identifier("a"),)

    def test_named_class_slot(self):
        """Slots naming a class accept only that class."""
        with pytest.raises(NodeConstructionError):
            MethodDefinition(Identifier("m"), Identifier("notAFunction"))

    def test_function_body_must_be_block(self):
        """Function bodies are blocks."""
        with pytest.raises(NodeConstructionError):
            FunctionDeclaration(Identifier("f"), body=ExpressionStatement(Identifier("x")))

    def test_for_init_accepts_declaration(self):
        """A for loop initializer may declare variables."""
        decl = VariableDeclaration([VariableDeclarator(Identifier("i"), number_literal(0))], "let")
        assert ForStatement(init=decl).init is decl

    def test_for_defaults(self):
        """Every for loop part is optional."""
        node = ForStatement()
        assert node.init is None and node.test is None and node.update is None
        assert node.body == BlockStatement()

    def test_try_requires_handler_or_finalizer(self):
        """A bare try block is rejected."""
        with pytest.raises(NodeConstructionError):
            TryStatement(BlockStatement())

    def test_template_quasi_count(self):
        """Quasis must outnumber expressions by one."""
        with pytest.raises(NodeConstructionError):
            TemplateLiteral([TemplateElement("a")], [Identifier("b")])

    def test_export_accepts_exportable_only(self):
        """Imports cannot be exported."""
        imp = ImportDeclaration([ImportDefaultSpecifier(Identifier("a"))], "a")
        with pytest.raises(NodeConstructionError):
            ExportNamedDeclaration(declaration=imp)

    def test_accessor_needs_function(self):
        """Getters and setters must be functions."""
        with pytest.raises(NodeConstructionError) as exc_info:
            Property(Identifier("v"), Identifier("x"), kind="get")
        assert exc_info.value.field == "value"
        with pytest.raises(NodeConstructionError):
            Property(Identifier("v"), kind="set")

    def test_method_property_needs_function(self):
        """Method shorthand must be a function."""
        with pytest.raises(NodeConstructionError):
            Property(Identifier("m"), Identifier("x"), method=True)

    def test_program_body(self):
        """Programs hold statement list items."""
        node = Program([ClassDeclaration(Identifier("A"))])
        assert len(node.body) == 1
        with pytest.raises(NodeConstructionError):
            Program([AssignmentPattern(Identifier("a"), Identifier("b"))])


class TestScalarFields:
    """Scalar fields are typed and enums are coerced."""

    def test_operator_from_text(self):
        """Operator text coerces to the enum."""
        node = BinaryExpression("===", Identifier("a"), Identifier("b"))
        assert node.operator is BinaryOperator.STRICT_EQUAL

    def test_unknown_operator_rejected(self):
        """Unknown operator text is rejected."""
        with pytest.raises(NodeConstructionError):
            BinaryExpression("<=>", Identifier("a"), Identifier("b"))

    def test_unary_operator_from_text(self):
        """Bare keyword text names the prefix form."""
        assert UnaryExpression("typeof", Identifier("a")).operator is UnaryOperator.TYPEOF
        assert UnaryExpression("-", Identifier("a")).operator is UnaryOperator.MINUS

    def test_kind_from_text(self):
        """Kinds coerce from their spelling."""
        decl = VariableDeclaration([VariableDeclarator(Identifier("a"))], "const")
        assert decl.kind is VariableKind.CONST
        assert Property(Identifier("a"), FunctionExpression(), kind="get").kind is PropertyKind.GET
        assert FunctionExpression(function_type="async").function_type is FunctionType.ASYNC

    def test_wrong_scalar_type(self):
        """Names must be strings."""
        with pytest.raises(NodeConstructionError):
            Identifier(42)

    def test_flag_rejects_non_bool(self):
        """Flags must be real booleans."""
        with pytest.raises(NodeConstructionError):
            StaticMemberExpression(Identifier("a"), Identifier("b"), optional=1)


class TestMetadata:
    """Source metadata rides along without affecting equality."""

    def test_location_ignored_in_equality(self):
        """Location does not affect comparison."""
        loc = SourceLocation(Position(1, 0), Position(1, 1))
        assert Identifier("a", loc=loc) == Identifier("a")
        assert Identifier("a", source_range=Range(0, 1)).source_range == Range(0, 1)

    def test_metadata_is_keyword_only(self):
        """Metadata cannot be passed positionally."""
        with pytest.raises(TypeError):
            Identifier("a", SourceLocation(Position(1, 0), Position(1, 1)))


class TestToDict:
    """Plain-data conversion of trees."""

    def test_simple(self):
        """Nodes convert with their type and fields."""
        assert Identifier("a").to_dict() == {"type": "Identifier", "name": "a"}

    def test_nested(self):
        """Children, enums and lists convert recursively."""
        node = ReturnStatement(BinaryExpression("+", Identifier("a"), number_literal(1)))
        assert node.to_dict() == {
            "type": "ReturnStatement",
            "argument": {
                "type": "BinaryExpression",
                "operator": "+",
                "left": {"type": "Identifier", "name": "a"},
                "right": {"type": "NumericLiteral", "value": 1.0},
            },
        }

    def test_unary_operator_uses_name(self):
        """Pair-valued operators convert by name."""
        data = UnaryExpression("!", Identifier("a")).to_dict()
        assert data["operator"] == "NOT"

    def test_location_included_when_set(self):
        """Locations appear only when present."""
        loc = SourceLocation(Position(1, 0), Position(1, 1), "a.js")
        data = Identifier("a", loc=loc).to_dict()
        assert data["loc"] == {
            "start": {"line": 1, "column": 0},
            "end": {"line": 1, "column": 1},
            "source": "a.js",
        }

    def test_list_field(self):
        """Tuples convert to lists."""
        data = ArrayPattern([Identifier("a")]).to_dict()
        assert data["elements"] == [{"type": "Identifier", "name": "a"}]

    def test_chain(self):
        """Chains wrap a single element."""
        data = ChainExpression(CallExpression(Identifier("f"))).to_dict()
        assert data["expression"]["type"] == "CallExpression"
        assert data["expression"]["optional"] is False
