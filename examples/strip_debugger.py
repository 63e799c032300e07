#!/usr/bin/env python3
"""
Tree rewriting example: removing debugger statements and console calls.

This example demonstrates:
- replace() with an empty list to delete a statement
- catching UsageError when the statement is not inside a list
- skip() to leave whole subtrees untouched
"""

import json
import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from estreelib import traverse, UsageError


def is_console_call(node):
    if node["type"] != "ExpressionStatement":
        return False
    expression = node["expression"]
    return (
        expression["type"] == "CallExpression"
        and expression["callee"]["type"] == "MemberExpression"
        and expression["callee"]["object"].get("name") == "console"
    )


def strip(state, node, stats):
    if node["type"] == "DebuggerStatement" or is_console_call(node):
        try:
            state.replace([])
            stats["removed"] += 1
        except UsageError:
            # single statement in a non-list slot, e.g. `if (x) debugger;`
            state.replace({"type": "EmptyStatement"}, True)
            stats["emptied"] += 1
    elif node["type"] == "FunctionDeclaration" and node["id"]["name"].startswith("debug"):
        state.skip()
        stats["kept"] += 1


def main():
    """Strip a JSON AST read from the file argument and print it."""
    if len(sys.argv) < 2:
        print("usage: strip_debugger.py AST.json", file=sys.stderr)
        return 1

    ast = json.loads(Path(sys.argv[1]).read_text())
    stats = {"removed": 0, "emptied": 0, "kept": 0}
    traverse(ast, strip, stats)

    print(json.dumps(ast, indent=2))
    print(f"\nremoved {stats['removed']}, emptied {stats['emptied']}, "
          f"left {stats['kept']} debug functions alone", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())
