"""Core traversal machinery: schema, path resolver, exits and engine."""

from .errors import (
    TraversalError,
    StructuralError,
    UsageError,
    UnfinishedExitError,
    UnfinishedExitWarning,
)
from .schema import ChildrenSchema
from .es2022 import ES2022
from .resolver import (
    PathResolver,
    get_element_at,
    ancestor_path,
    common_prefix_length,
    format_path,
)
from .exits import (
    ExitComputation,
    CallbackExitComputation,
    GeneratorExitComputation,
    as_exit_computation,
    on_exit,
)
from .state import TraversalState

__all__ = [
    # Errors
    'TraversalError',
    'StructuralError',
    'UsageError',
    'UnfinishedExitError',
    'UnfinishedExitWarning',
    # Schema
    'ChildrenSchema',
    'ES2022',
    # Paths
    'PathResolver',
    'get_element_at',
    'ancestor_path',
    'common_prefix_length',
    'format_path',
    # Exit computations
    'ExitComputation',
    'CallbackExitComputation',
    'GeneratorExitComputation',
    'as_exit_computation',
    'on_exit',
    # Engine
    'TraversalState',
]
