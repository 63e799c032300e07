"""Children schema for ESTree node types.

The schema is the only knowledge the traversal has about node shapes: for
every node type it lists, in visitation order, the properties that may hold
child nodes. Types that never have children (identifiers, literals) map to
an empty tuple.
"""

from collections.abc import Mapping
from types import MappingProxyType
from typing import Dict, Iterator, Optional, Tuple

from .errors import StructuralError


class ChildrenSchema(Mapping):
    """Immutable mapping from node type name to ordered child properties.

    Example:
        schema = ChildrenSchema({"Program": ["body"], "Identifier": []})
        schema["Program"]                    # ('body',)
        schema.next_property("Program", "")  # 'body'
    """

    def __init__(self, mapping: Mapping):
        entries: Dict[str, Tuple[str, ...]] = {}
        for node_type, props in mapping.items():
            if not isinstance(node_type, str):
                raise TypeError(f"Schema keys must be strings, got {node_type!r}")
            entries[node_type] = tuple(props)
        self._entries = MappingProxyType(entries)
        # prop -> position, so next_property is a dict lookup instead of a scan
        self._positions = MappingProxyType({
            node_type: {prop: index for index, prop in enumerate(props)}
            for node_type, props in entries.items()
        })

    def __getitem__(self, node_type: str) -> Tuple[str, ...]:
        return self._entries[node_type]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({len(self)} types)"

    def properties_for(self, node_type: str) -> Tuple[str, ...]:
        """Return the child properties of ``node_type`` in visitation order.

        Raises:
            StructuralError: If the schema has no entry for the type
        """
        try:
            return self._entries[node_type]
        except KeyError:
            raise StructuralError(
                f"No children schema entry for node type {node_type!r}"
            ) from None

    def next_property(self, node_type: str, current: str = "") -> Optional[str]:
        """Return the schema property following ``current``.

        An empty or unlisted ``current`` starts from the first property.

        Args:
            node_type: Type name of the node being scanned
            current: Property the scan is positioned on

        Returns:
            The next property name, or None when the list is exhausted
        """
        props = self.properties_for(node_type)
        index = self._positions[node_type].get(current, -1) + 1
        if index >= len(props):
            return None
        return props[index]

    def extend(self, mapping: Mapping) -> "ChildrenSchema":
        """Return a new schema with ``mapping`` entries added or overridden."""
        merged = dict(self._entries)
        merged.update(mapping)
        return ChildrenSchema(merged)

    def without(self, *node_types: str) -> "ChildrenSchema":
        """Return a new schema without the given node types."""
        return ChildrenSchema({
            node_type: props
            for node_type, props in self._entries.items()
            if node_type not in node_types
        })

