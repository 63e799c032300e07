#!/usr/bin/env python3
"""
Enter/exit traversal example: tracking function scopes.

This example demonstrates:
- Generator callbacks that run code when a node's subtree is left
- Using the notes argument to carry state through the traversal
- Reading the traversal position (path, ancestors)
"""

import json
import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from estreelib import traverse, format_path

FUNCTION_TYPES = ("FunctionDeclaration", "FunctionExpression", "ArrowFunctionExpression")

# const a = 1;
# function f(b, c, d = 2) {
#   const e = () => c + 2;
# }
SAMPLE = {
    "type": "Program",
    "body": [
        {"type": "VariableDeclaration", "kind": "const", "declarations": [
            {"type": "VariableDeclarator", "id": {"type": "Identifier", "name": "a"},
             "init": {"type": "Literal", "value": 1}},
        ]},
        {"type": "FunctionDeclaration", "id": {"type": "Identifier", "name": "f"},
         "params": [
             {"type": "Identifier", "name": "b"},
             {"type": "Identifier", "name": "c"},
             {"type": "AssignmentPattern", "left": {"type": "Identifier", "name": "d"},
              "right": {"type": "Literal", "value": 2}},
         ],
         "body": {"type": "BlockStatement", "body": [
             {"type": "VariableDeclaration", "kind": "const", "declarations": [
                 {"type": "VariableDeclarator", "id": {"type": "Identifier", "name": "e"},
                  "init": {"type": "ArrowFunctionExpression", "id": None, "params": [],
                           "body": {"type": "BinaryExpression", "operator": "+",
                                    "left": {"type": "Identifier", "name": "c"},
                                    "right": {"type": "Literal", "value": 2}}}},
             ]},
         ]}},
    ],
}


def track_scopes(state, node, scopes):
    """Print every identifier with the function scope it appears in."""
    if node["type"] in FUNCTION_TYPES:
        scopes.append(format_path(state.path) or "<program>")
        yield
        scopes.pop()
    elif node["type"] == "Identifier":
        scope = scopes[-1] if scopes else "<module>"
        depth = len(state.ancestors)
        print(f"  {'  ' * depth}{node['name']:<4} in {scope}")


def main():
    """Traverse a JSON AST (file argument) or the built-in sample."""
    if len(sys.argv) > 1:
        ast = json.loads(Path(sys.argv[1]).read_text())
    else:
        ast = SAMPLE

    print("Identifiers by scope:")
    print("-" * 50)
    traverse(ast, track_scopes, [])


if __name__ == "__main__":
    main()
