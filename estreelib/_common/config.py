"""Configuration system for estreelib.

This module defines how users specify a traversal: which children schema
describes the tree, what happens with node types the schema does not know,
and how unfinished exit computations are reported.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, List, Optional


class UnknownTypeStrategy(Enum):
    """What to do with a node whose type has no schema entry."""
    RAISE = "raise"     # StructuralError, traversal aborts
    SKIP = "skip"       # Visit the node but treat it as a leaf


@dataclass
class TraversalConfig:
    """Complete configuration for one traversal.

    All fields are optional; the defaults give the strict behavior with
    the bundled ES2022 schema and warnings for unfinished exits.
    """

    # Children schema (None = ES2022)
    schema: Optional[Any] = None

    # Unfinished exit computations (None = WarnPolicy)
    exit_policy: Optional[Any] = None

    # Node types missing from the schema
    unknown_types: UnknownTypeStrategy = UnknownTypeStrategy.RAISE

    @classmethod
    def strict(cls, schema: Optional[Any] = None) -> 'TraversalConfig':
        """Create config that fails on anything the schema does not describe.

        Args:
            schema: Children schema to use (default ES2022)

        Returns:
            TraversalConfig with unknown types raising StructuralError
        """
        return cls(schema=schema, unknown_types=UnknownTypeStrategy.RAISE)

    @classmethod
    def lenient(cls, schema: Optional[Any] = None) -> 'TraversalConfig':
        """Create config for trees carrying non-standard node types.

        Nodes of unknown types are still passed to the callback but their
        children are not visited.

        Args:
            schema: Children schema to use (default ES2022)

        Returns:
            TraversalConfig with unknown types treated as leaves
        """
        return cls(schema=schema, unknown_types=UnknownTypeStrategy.SKIP)

    def validate(self) -> List[str]:
        """Validate configuration consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if self.schema is not None and not isinstance(self.schema, Mapping):
            errors.append("schema must be a mapping of node type to properties")

        if self.exit_policy is not None and not callable(getattr(self.exit_policy, 'handle', None)):
            errors.append("exit_policy must provide a handle(path, computation) method")

        if not isinstance(self.unknown_types, UnknownTypeStrategy):
            errors.append(f"unknown_types must be an UnknownTypeStrategy, got {self.unknown_types!r}")

        return errors
