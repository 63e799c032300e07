"""Components shared by the engine and the public API.

This internal package holds configuration only. It must NEVER import
from ``estreelib.core`` to avoid circular dependencies.
"""

from .config import (
    TraversalConfig,
    UnknownTypeStrategy,
)

__all__ = [
    'TraversalConfig',
    'UnknownTypeStrategy',
]
