"""Tests for mutating the tree during traversal.

Covers replace(), insert_before() and insert_after() together with the
way each of them moves the traversal.
"""

import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from estreelib import traverse, UsageError, TraversalError
from sample_trees import (
    console_log,
    const,
    function_then_const,
    ident,
    lit,
    nested_block,
    object_with,
    single_log_function,
)


def arguments_of_first_call(ast):
    return ast["body"][0]["body"]["body"][0]["expression"]["arguments"]


def is_c(node):
    return node["type"] == "Identifier" and node["name"] == "c"


class TestReplace:
    """replace() with single nodes and lists."""

    def test_replaces_node_without_skipping(self):
        ast = function_then_const()
        visited = []

        def visit(state, node, notes):
            if node["type"] == "ArrowFunctionExpression":
                state.replace(object_with("c"))
            visited.append(node)

        traverse(ast, visit)

        assert arguments_of_first_call(ast) == [object_with("c")]
        assert any(is_c(node) for node in visited)

    def test_replacement_takes_over_current_visit(self):
        """The new node is not passed to the callback again, its children are."""
        ast = function_then_const()
        types = []

        def visit(state, node, notes):
            types.append(node["type"])
            if node["type"] == "ArrowFunctionExpression":
                state.replace(object_with("c"))

        traverse(ast, visit)

        assert "ObjectExpression" not in types
        assert "Literal" in types  # const d = 4 still reached
        index = types.index("ArrowFunctionExpression")
        assert types[index + 1] == "Identifier"

    def test_replaces_node_and_skips_it(self):
        ast = function_then_const()
        visited = []

        def visit(state, node, notes):
            if node["type"] == "ArrowFunctionExpression":
                state.replace(object_with("c"), True)
            visited.append(node)

        traverse(ast, visit)

        assert arguments_of_first_call(ast) == [object_with("c")]
        assert not any(is_c(node) for node in visited)
        # traversal resumes after the replaced node
        assert visited[-1] == lit(4)

    def test_replaces_node_in_property_slot(self):
        ast = nested_block()

        def visit(state, node, notes):
            if node["type"] == "Literal" and node["value"] == 4:
                state.replace(lit(40))

        traverse(ast, visit)
        assert ast["body"][1]["declarations"][0]["init"] == lit(40)

    def test_replaces_node_with_list_without_skipping(self):
        ast = function_then_const()
        visited_c = []

        def visit(state, node, notes):
            if node["type"] == "ArrowFunctionExpression":
                state.replace([object_with("c"), object_with("c")])
            if is_c(node):
                visited_c.append(state.path)

        traverse(ast, visit)

        assert arguments_of_first_call(ast) == [object_with("c"), object_with("c")]
        assert len(visited_c) == 2
        assert visited_c[0][-4:] == ("arguments", 0, "properties", 0)
        assert visited_c[1][-4:] == ("arguments", 1, "properties", 0)

    def test_replaces_node_with_list_and_skips(self):
        ast = function_then_const()
        visited_c = []
        after = []

        def visit(state, node, notes):
            if node["type"] == "ArrowFunctionExpression":
                state.replace([object_with("c"), object_with("c")], True)
            elif is_c(node):
                visited_c.append(state.path)
            elif node["type"] == "Identifier" and node["name"] == "b":
                after.append(state.path)

        traverse(ast, visit)

        assert arguments_of_first_call(ast) == [object_with("c"), object_with("c")]
        assert visited_c == []
        # the original next statement, console.log(b), is still visited
        assert after == [("body", 0, "body", "body", 1, "expression", "arguments", 0)]

    def test_replace_with_empty_list_removes_node(self):
        ast = nested_block()
        types = []

        def visit(state, node, notes):
            types.append(node["type"])
            if state.path == ("body", 0):
                state.replace([])

        traverse(ast, visit)

        assert len(ast["body"]) == 1
        # the sibling that moved into the gap is visited from its own node
        assert types == [
            "Program",
            "BlockStatement",
            "VariableDeclaration",
            "VariableDeclarator",
            "Identifier",
            "Literal",
        ]

    def test_skip_after_removal_keeps_the_next_sibling(self):
        ast = nested_block()
        seen = []

        def visit(state, node, notes):
            seen.append((state.path, node["type"]))
            if state.path == ("body", 0) and node["type"] == "BlockStatement":
                state.replace([])
                state.skip()
                assert state.node is node

        traverse(ast, visit)

        assert seen[2] == (("body", 0), "VariableDeclaration")
        assert len(seen) == 6

    def test_replace_list_in_property_slot_is_usage_error(self):
        ast = nested_block()

        def visit(state, node, notes):
            if node["type"] == "Literal":
                state.replace([lit(1), lit(2)])

        with pytest.raises(UsageError):
            traverse(ast, visit)

    def test_replace_root_is_usage_error(self):
        def visit(state, node, notes):
            state.replace({"type": "Program", "body": []})

        with pytest.raises(UsageError):
            traverse(nested_block(), visit)

    def test_last_mutation_call_wins(self):
        """insert_after(skip_both) after replace(): the later call decides."""
        ast = single_log_function()
        types = []

        def visit(state, node, notes):
            types.append(node["type"])
            if node["type"] == "ExpressionStatement" and state.key == 0:
                state.replace(console_log(ident("x")))
                state.insert_after(console_log(lit(1)), True)

        traverse(ast, visit)

        statements = ast["body"][0]["body"]["body"]
        assert statements == [console_log(ident("x")), console_log(lit(1))]
        assert types == ["Program", "FunctionDeclaration", "Identifier", "BlockStatement", "ExpressionStatement"]


class TestInsert:
    """insert_before() and insert_after()."""

    @staticmethod
    def is_arrow_log(node):
        return (
            node["type"] == "ExpressionStatement"
            and node["expression"]["type"] == "CallExpression"
            and node["expression"]["arguments"]
            and node["expression"]["arguments"][0]["type"] == "ArrowFunctionExpression"
        )

    def test_inserts_before_node(self):
        ast = single_log_function()
        original = ast["body"][0]["body"]["body"][0]
        paths = []

        def visit(state, node, notes):
            if node["type"] == "ExpressionStatement" and node["expression"]["type"] == "CallExpression":
                state.insert_before(console_log(lit(1)))
                paths.append(state.path)
            notes.append(node)

        visited = []
        traverse(ast, visit, visited)

        statements = ast["body"][0]["body"]["body"]
        assert statements == [console_log(lit(1)), original]
        # the path follows the original node, which is visited exactly once
        assert paths == [("body", 0, "body", "body", 1)]
        assert lit(1) not in visited
        assert lit("meow") in visited

    def test_inserts_several_before_node(self):
        ast = nested_block()

        def visit(state, node, notes):
            if state.path == ("body", 1):
                state.insert_before([const("x", 1), const("y", 2)])
                notes.append(state.path)

        paths = []
        traverse(ast, visit, paths)

        assert [statement["type"] for statement in ast["body"]] == [
            "BlockStatement", "VariableDeclaration", "VariableDeclaration", "VariableDeclaration",
        ]
        assert ast["body"][3] == const("d", 4)
        assert paths == [("body", 3)]

    def test_inserts_after_node_without_skipping(self):
        ast = single_log_function()
        visited = []

        def visit(state, node, notes):
            if self.is_arrow_log(node):
                state.insert_after(console_log(lit(1)))
            visited.append(node["type"] if node["type"] != "Literal" else node["value"])

        traverse(ast, visit)

        statements = ast["body"][0]["body"]["body"]
        assert statements[1] == console_log(lit(1))
        assert 1 in visited
        # the inserted statement comes after the whole original subtree
        assert visited.index("meow") < visited.index(1)

    def test_inserts_after_node_and_skips(self):
        ast = single_log_function()
        visited = []

        def visit(state, node, notes):
            if self.is_arrow_log(node):
                state.insert_after(console_log(lit(1)), True)
            visited.append(node["type"] if node["type"] != "Literal" else node["value"])

        traverse(ast, visit)

        statements = ast["body"][0]["body"]["body"]
        assert statements[1] == console_log(lit(1))
        assert 1 not in visited
        assert "ArrowFunctionExpression" not in visited

    def test_insert_after_skip_resumes_at_next_sibling(self):
        ast = nested_block()

        def visit(state, node, notes):
            notes.append(state.path)
            if state.path == ("body", 0, "body", 0):
                state.insert_after(const("z", 9), True)

        paths = []
        traverse(ast, visit, paths)

        assert len(ast["body"][0]["body"]) == 3
        index = paths.index(("body", 0, "body", 0))
        assert paths[index + 1] == ("body", 0, "body", 2)

    def test_insert_into_property_slot_is_usage_error(self):
        ast = nested_block()

        def visit(state, node, notes):
            if node["type"] == "Literal":
                state.insert_before(lit(0))

        with pytest.raises(UsageError) as excinfo:
            traverse(ast, visit)
        assert isinstance(excinfo.value, TypeError)
        assert isinstance(excinfo.value, TraversalError)

    def test_insert_after_root_is_usage_error(self):
        def visit(state, node, notes):
            state.insert_after(const("x", 1))

        with pytest.raises(UsageError):
            traverse(nested_block(), visit)
