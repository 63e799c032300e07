"""Traversal engine and the control API handed to callbacks.

TraversalState owns the current path, the look-ahead path and the table
of pending exit computations. Callbacks receive it as their first
argument and use it to inspect the position or to mutate the tree:

    def visit(state, node, notes):
        if node["type"] == "DebuggerStatement":
            state.replace({"type": "EmptyStatement"})

Nodes are addressed by path only, so splicing a list never leaves stale
references behind: after a mutation the engine adjusts the current path
and recomputes the look-ahead path from the tree as it is now.
"""

from typing import Any, Callable, Dict, List, Optional, Tuple

from .._common.config import TraversalConfig, UnknownTypeStrategy
from ..policies import WarnPolicy
from .errors import UsageError
from .es2022 import ES2022
from .exits import as_exit_computation
from .resolver import (
    Path,
    PathResolver,
    Step,
    ancestor_path,
    common_prefix_length,
    get_element_at,
)
from .schema import ChildrenSchema


class TraversalState:
    """The traversal state a callback is bound to.

    One instance drives one traversal. Use ``estreelib.traverse`` rather
    than instantiating this directly.
    """

    def __init__(self, ast: Any, config: Optional[TraversalConfig] = None):
        """Initialize the state for a traversal of ``ast``.

        Args:
            ast: Root node of the tree; mutated in place
            config: Traversal configuration (defaults to TraversalConfig())

        Raises:
            ValueError: If the configuration is invalid
        """
        config = config or TraversalConfig()
        errors = config.validate()
        if errors:
            raise ValueError(f"Invalid configuration: {', '.join(errors)}")

        schema = config.schema if config.schema is not None else ES2022
        if not isinstance(schema, ChildrenSchema):
            schema = ChildrenSchema(schema)

        self._ast = ast
        self._resolver = PathResolver(
            schema,
            skip_unknown_types=config.unknown_types is UnknownTypeStrategy.SKIP,
        )
        self._exit_policy = config.exit_policy or WarnPolicy()
        self._path: Optional[Path] = None
        self._next_path: Optional[Path] = []
        self._exits: Dict[Tuple[Step, ...], Any] = {}
        # Node taken out of the tree by replace([]) during the current callback
        self._removed: Any = None

    # Position

    @property
    def path(self) -> Tuple[Step, ...]:
        """Path to the current node, e.g. ``('body', 0, 'expression')``."""
        return tuple(self._path or ())

    @property
    def node(self) -> Any:
        """The current node.

        After ``replace([])`` this is still the removed node, both for the
        rest of the callback and during its exit phase.
        """
        if self._removed is not None:
            return self._removed
        return self.get_element_at(self._path or [])

    @property
    def parent_node(self) -> Any:
        """The nearest ancestor node, skipping intermediate lists.

        None at the root.
        """
        if not self._path:
            return None
        return self.get_element_at(ancestor_path(self._path))

    @property
    def parent_element(self) -> Any:
        """The container holding the current node.

        Unlike parent_node this may be a list, e.g. when the current node
        is a statement inside the ``body`` of a BlockStatement.
        """
        if not self._path:
            return None
        return self.get_element_at(self._path[:-1])

    @property
    def key(self) -> Optional[Step]:
        """Last step of the path: a property name or a list index."""
        if not self._path:
            return None
        return self._path[-1]

    @property
    def ancestors(self) -> List[Any]:
        """Ancestor nodes of the current node, root first."""
        ancestors = []
        path = self._path or []
        while path:
            path = ancestor_path(path)
            ancestors.insert(0, self.get_element_at(path))
        return ancestors

    @property
    def pending_exit_paths(self) -> List[Tuple[Step, ...]]:
        """Paths whose exit computations have not been resumed yet."""
        return list(self._exits)

    def get_element_at(self, path) -> Any:
        """Return the element at ``path`` (a node, a list or None)."""
        return get_element_at(self._ast, path)

    # Control API

    def skip(self) -> None:
        """Do not visit the children of the current node."""
        if self._removed is not None:
            # Already out of the tree along with its children
            return
        self._next_path = self._resolver.next_path(self._ast, self._path, skip=True)

    def replace(self, node: Any, skip: bool = False) -> None:
        """Replace the current node.

        A single node overwrites the current slot and its children are
        visited next. A list of nodes is spliced into the parent list in
        place of the current element and each of them is visited in turn.
        An empty list removes the current element: traversal continues at
        the sibling that moves into the gap, and an exit computation
        returned by the callback runs as soon as the callback returns,
        with ``path`` and ``node`` still describing the removed node.

        Args:
            node: The new node, or a list of nodes
            skip: If True, do not visit the new node(s)

        Raises:
            UsageError: If a list is given and the parent is not a list,
                or if the root node is replaced
        """
        if isinstance(node, list):
            removed = self.get_element_at(self._path)
            count = self._splice(0, node, delete_count=1)
            if count == 0:
                self._removed = removed
                # Resolve as if leaving the slot before the gap; the cursor stays put
                gap = self._path[:-1] + [self.key - 1]
                self._next_path = self._resolver.next_path(self._ast, gap, skip=True)
                return
            self._removed = None
            if skip:
                # Park on the last inserted element
                self._path[-1] += count - 1
        elif not self._path:
            raise UsageError("the root node cannot be replaced")
        else:
            self._removed = None
            self.parent_element[self.key] = node

        self._next_path = self._resolver.next_path(self._ast, self._path, skip)

    def insert_before(self, node: Any) -> None:
        """Insert node(s) before the current one.

        Only works if the current node is located inside a list, e.g. in
        the ``body`` of a BlockStatement. The inserted nodes are behind
        the traversal position and are not visited. Unlike insert_after,
        nothing inserted here gets a callback, even though the new nodes
        come first in source order.

        Raises:
            UsageError: If the parent is not a list
        """
        count = self._splice(0, node)
        self._path[-1] += count

        self._next_path = self._resolver.next_path(self._ast, self._path)

    def insert_after(self, node: Any, skip_both: bool = False) -> None:
        """Insert node(s) after the current one.

        Only works if the current node is located inside a list.

        Args:
            node: The new node, or a list of nodes
            skip_both: If True, skip both the current node's children and
                the inserted nodes

        Raises:
            UsageError: If the parent is not a list
        """
        count = self._splice(1, node)

        if not skip_both:
            self._next_path = self._resolver.next_path(self._ast, self._path)
        else:
            last_inserted = self._path[:-1] + [self.key + count]
            self._next_path = self._resolver.next_path(self._ast, last_inserted, skip=True)

    def _splice(self, offset: int, node: Any, delete_count: int = 0) -> int:
        host = self.parent_element
        if not isinstance(host, list):
            raise UsageError("can only insert into a list")

        insertee = list(node) if isinstance(node, list) else [node]
        index = self.key + offset
        host[index:index + delete_count] = insertee

        return len(insertee)

    # Driving the traversal

    def _run(self, callback: Callable, notes: Any = None) -> None:
        self._advance()
        while self._step(callback, notes):
            pass

    def _step(self, callback: Callable, notes: Any) -> bool:
        # Holes (None list elements) are stepped through without a callback
        if self.node is not None:
            self._run_callback(callback, notes)

        if self._advance():
            return True

        # Last iteration
        self._resume_exit([])
        return False

    def _run_callback(self, callback: Callable, notes: Any) -> None:
        computation = as_exit_computation(callback(self, self.node, notes))
        if computation is not None and self._removed is not None:
            # Removed with its subtree, so nothing is left to wait for
            self._finish_exit(self._path, computation)
        elif computation is not None:
            # Keyed after the callback ran: mutations may have moved the path
            self._exits[tuple(self._path)] = computation
        self._removed = None

    def _advance(self) -> bool:
        if self._path is not None:
            self._resume_exits_between(self._path, self._next_path or [])

        if self._next_path is None:
            return False

        self._path = self._next_path
        self._next_path = self._resolver.next_path(self._ast, self._path)
        return True

    def _resume_exits_between(self, current: Path, upcoming: Path) -> None:
        shared = common_prefix_length(current, upcoming)
        for length in range(len(current), shared, -1):
            self._resume_exit(current[:length])

    def _resume_exit(self, path: Path) -> None:
        computation = self._exits.pop(tuple(path), None)
        if computation is not None:
            self._finish_exit(path, computation)

    def _finish_exit(self, path: Path, computation: Any) -> None:
        self._path = list(path)
        if not computation.resume():
            self._exit_policy.handle(tuple(path), computation)
