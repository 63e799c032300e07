"""
Policies for exit computations that do not finish.

An exit computation is resumed exactly once. If it reports that it is
still pending afterwards, the engine hands it to the configured policy and
drops it; it is never resumed again.
"""

import warnings
from abc import ABC, abstractmethod
from typing import Any, List, Sequence, Tuple, Union

from .core.errors import UnfinishedExitError, UnfinishedExitWarning
from .core.resolver import format_path


class ExitPolicy(ABC):
    """
    Base class for unfinished exit computation policies.
    """

    @abstractmethod
    def handle(self, path: Sequence[Union[str, int]], computation: Any) -> None:
        """
        Handle an exit computation that is still pending after its resume.

        Args:
            path: Path of the node whose exit phase did not finish
            computation: The discarded exit computation
        """
        pass


class WarnPolicy(ExitPolicy):
    """
    Policy that emits an UnfinishedExitWarning and lets traversal continue.

    This is the default behavior.
    """

    def handle(self, path: Sequence[Union[str, int]], computation: Any) -> None:
        warnings.warn(
            f"Exit computation at {format_path(path)!r} isn't done, "
            "but won't be resumed again",
            UnfinishedExitWarning,
            stacklevel=2,
        )


class CollectPolicy(ExitPolicy):
    """
    Policy that silently records unfinished exit computations.

    Useful in tests and batch tools that inspect the result afterwards.
    """

    def __init__(self):
        self.unfinished: List[Tuple[Union[str, int], ...]] = []

    def handle(self, path: Sequence[Union[str, int]], computation: Any) -> None:
        self.unfinished.append(tuple(path))

    def get_statistics(self) -> dict:
        """
        Get statistics about unfinished exit computations.

        Returns:
            Dictionary with the count and the rendered paths
        """
        return {
            'total_unfinished': len(self.unfinished),
            'paths': [format_path(path) for path in self.unfinished],
        }


class FailFastPolicy(ExitPolicy):
    """
    Policy that raises UnfinishedExitError, aborting the traversal.
    """

    def handle(self, path: Sequence[Union[str, int]], computation: Any) -> None:
        raise UnfinishedExitError(path)
