"""High-level API for estreelib.

``traverse`` is the single entry point of the engine. The remaining
functions wrap it for common read-only questions about a tree.
"""

import dataclasses
from typing import Any, Callable, List, Optional, Tuple, Union

from ._common.config import TraversalConfig
from .core.state import TraversalState


def traverse(
    ast: Any,
    callback: Callable[[TraversalState, Any, Any], Any],
    notes: Any = None,
    *,
    schema: Optional[Any] = None,
    config: Optional[TraversalConfig] = None,
) -> None:
    """Traverse the supplied AST in pre-order, calling ``callback`` on each node.

    The callback is called as ``callback(state, node, notes)``. ``state`` is
    the TraversalState for the current step, so the callback can use e.g.
    ``state.replace(new_node)`` or ``state.skip()``. If it returns an exit
    computation (or is a generator function), the rest of it runs once the
    node's whole subtree has been visited.

    Args:
        ast: ESTree-compatible AST to traverse; mutated in place
        callback: Function called on each node
        notes: Object passed to every callback call. Use it to store any
            data you want
        schema: Children schema overriding ``config.schema``
        config: Traversal configuration

    Raises:
        StructuralError: If a node has no string type or an unknown type
        UsageError: If the callback misuses a list-only mutation

    Example:
        >>> types = []
        >>> traverse(ast, lambda state, node, notes: notes.append(node["type"]), types)
    """
    if schema is not None:
        config = dataclasses.replace(config or TraversalConfig(), schema=schema)

    TraversalState(ast, config)._run(callback, notes)


def count_nodes(ast: Any, schema: Optional[Any] = None) -> int:
    """Count the nodes reachable from ``ast`` (holes excluded).

    Example:
        >>> count_nodes({"type": "Program", "body": []})
        1
    """
    counter = [0]

    def _count(state, node, notes):
        counter[0] += 1

    traverse(ast, _count, schema=schema)
    return counter[0]


def find_nodes(
    ast: Any,
    predicate: Union[str, Callable[[Any], bool]],
    schema: Optional[Any] = None,
) -> List[Any]:
    """Find all nodes matching a predicate, in visitation order.

    Args:
        ast: Root of the tree
        predicate: Node type name, or a function taking a node
        schema: Children schema (default ES2022)

    Returns:
        List of matching nodes

    Example:
        >>> calls = find_nodes(ast, "CallExpression")
        >>> literals = find_nodes(ast, lambda n: n["type"] == "Literal" and n["value"] == 1)
    """
    if isinstance(predicate, str):
        node_type = predicate
        predicate = lambda node: node["type"] == node_type

    def _match(state, node, found):
        if predicate(node):
            found.append(node)

    found = []
    traverse(ast, _match, found, schema=schema)
    return found


def get_node_paths(ast: Any, schema: Optional[Any] = None) -> List[Tuple[Union[str, int], ...]]:
    """Get the path of every node, in visitation order.

    Example:
        >>> get_node_paths({"type": "ExpressionStatement", "expression": {"type": "ThisExpression"}})
        [(), ('expression',)]
    """
    paths = []
    traverse(ast, lambda state, node, notes: paths.append(state.path), schema=schema)
    return paths


def get_node_types(ast: Any, schema: Optional[Any] = None) -> List[str]:
    """Get the type of every node, in visitation order."""
    types = []
    traverse(ast, lambda state, node, notes: types.append(node["type"]), schema=schema)
    return types
