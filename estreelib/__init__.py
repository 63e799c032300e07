"""estreelib - Mutation-aware traversal for ESTree syntax trees.

estreelib walks ESTree-compatible ASTs (plain dicts and lists, as produced
by JSON-emitting parsers) in pre-order. The next node is computed from the
current path and a children schema, so the callback may replace, insert or
skip nodes while the traversal is running.

    from estreelib import traverse

    def visit(state, node, notes):
        if node["type"] == "FunctionDeclaration":
            state.skip()

    traverse(ast, visit)
"""

__version__ = "0.4.0"

from ._common.config import TraversalConfig, UnknownTypeStrategy
from .core import (
    TraversalError,
    StructuralError,
    UsageError,
    UnfinishedExitError,
    UnfinishedExitWarning,
    ChildrenSchema,
    ES2022,
    PathResolver,
    format_path,
    ExitComputation,
    on_exit,
    TraversalState,
)
from .policies import ExitPolicy, WarnPolicy, CollectPolicy, FailFastPolicy
from .api import (
    traverse,
    count_nodes,
    find_nodes,
    get_node_paths,
    get_node_types,
)

__all__ = [
    "__version__",
    # API
    "traverse",
    "count_nodes",
    "find_nodes",
    "get_node_paths",
    "get_node_types",
    # Engine
    "TraversalState",
    "PathResolver",
    "format_path",
    "ExitComputation",
    "on_exit",
    # Schema
    "ChildrenSchema",
    "ES2022",
    # Config
    "TraversalConfig",
    "UnknownTypeStrategy",
    # Policies
    "ExitPolicy",
    "WarnPolicy",
    "CollectPolicy",
    "FailFastPolicy",
    # Errors
    "TraversalError",
    "StructuralError",
    "UsageError",
    "UnfinishedExitError",
    "UnfinishedExitWarning",
]
