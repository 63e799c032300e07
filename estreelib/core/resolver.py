"""Path resolution for lazy pre-order traversal.

A path is a list of steps from the root: property names (str) and list
indexes (int). The resolver never builds the visitation order of the whole
tree; from any path it computes the single path that follows it in
pre-order, so the tree can be mutated between steps.
"""

from collections.abc import Mapping
from typing import Any, List, Optional, Sequence, Union

from .errors import StructuralError
from .schema import ChildrenSchema

Step = Union[str, int]
Path = List[Step]


def get_element_at(root: Any, path: Sequence[Step]) -> Any:
    """Walk ``path`` from ``root`` and return what it addresses."""
    element = root
    for step in path:
        element = element[step]
    return element


def ancestor_path(path: Sequence[Step]) -> Path:
    """Return the path of the nearest strict ancestor node.

    A property step is dropped on its own; an index step is dropped along
    with the list property that precedes it.
    """
    if not path:
        return []
    if isinstance(path[-1], str):
        return list(path[:-1])
    return list(path[:-2])


def common_prefix_length(first: Sequence[Step], second: Sequence[Step]) -> int:
    """Return how many leading steps the two paths share."""
    length = 0
    for a, b in zip(first, second):
        if a != b:
            break
        length += 1
    return length


def format_path(path: Sequence[Step]) -> str:
    """Render a path as ``body/0/expression`` (root is ``""``)."""
    return "/".join(str(step) for step in path)


class PathResolver:
    """Computes pre-order successors of paths using a children schema.

    Args:
        schema: Children schema describing node shapes
        skip_unknown_types: Treat types missing from the schema as leaves
            instead of raising StructuralError
    """

    def __init__(self, schema: ChildrenSchema, skip_unknown_types: bool = False):
        self.schema = schema
        self.skip_unknown_types = skip_unknown_types

    def next_path(self, root: Any, path: Sequence[Step], skip: bool = False) -> Optional[Path]:
        """Return the path visited after ``path``, or None when done.

        Args:
            root: Root of the tree
            path: Path of the node just visited
            skip: Do not descend into the node at ``path``

        Raises:
            StructuralError: If a node on the way has no usable type
        """
        if not skip:
            segment = self.next_segment(get_element_at(root, path))
            if segment:
                return list(path) + segment

        # Backtrack from the deepest step toward the root
        for depth in range(len(path) - 1, -1, -1):
            step = path[depth]
            parent_path = list(path[:depth])
            if isinstance(step, str):
                segment = self.next_segment(get_element_at(root, parent_path), step)
                if segment:
                    return parent_path + segment
            else:
                holder_path = parent_path[:-1]
                prop = parent_path[-1]
                index = self.next_index(get_element_at(root, holder_path), prop, step)
                if index is not None:
                    return holder_path + [prop, index]

        return None

    def next_segment(self, node: Any, after: str = "") -> Optional[Path]:
        """Find the first child slot of ``node`` listed after ``after``.

        Returns ``[prop]`` for a single child, ``[prop, 0]`` for a
        non-empty list, or None. Missing, None and empty-list properties
        are passed over. A None node (a hole) has no children.
        """
        if node is None:
            return None

        node_type = self.node_type(node)
        if self.skip_unknown_types and node_type not in self.schema:
            return None

        prop = self.schema.next_property(node_type, after)
        while prop is not None:
            value = node.get(prop)
            if isinstance(value, list):
                if value:
                    return [prop, 0]
            elif value is not None:
                return [prop]
            prop = self.schema.next_property(node_type, prop)

        return None

    @staticmethod
    def next_index(node: Any, prop: str, index: int) -> Optional[int]:
        """Return ``index + 1`` if ``node[prop]`` still has that element."""
        sequence = node.get(prop)
        if isinstance(sequence, list) and index + 1 < len(sequence):
            return index + 1
        return None

    @staticmethod
    def node_type(node: Any) -> str:
        node_type = node.get("type") if isinstance(node, Mapping) else None
        if not isinstance(node_type, str):
            raise StructuralError(
                f"node.type has to be a string, got {node_type!r} on {type(node).__name__}"
            )
        return node_type
