"""Exit computations: the deferred half of an enter/exit callback.

A callback that needs to run code after a node's whole subtree has been
visited returns an exit computation. The engine resumes it exactly once,
when traversal leaves the subtree. Two spellings are supported:

    def visit(state, node, notes):
        scopes.append(node)
        return on_exit(scopes.pop)

    def visit(state, node, notes):
        scopes.append(node)
        yield
        scopes.pop()
"""

import inspect
from abc import ABC, abstractmethod
from typing import Any, Callable, Generator, Optional


class ExitComputation(ABC):
    """Paused second phase of a callback.

    Anything with a callable ``resume`` attribute is accepted by the
    engine; subclassing is optional.
    """

    @abstractmethod
    def resume(self) -> bool:
        """Run the exit phase.

        Returns:
            True if the computation finished, False if it is still pending
        """
        pass


class CallbackExitComputation(ExitComputation):
    """Exit phase given as a plain function, always finishes on resume."""

    def __init__(self, fn: Callable[[], Any]):
        self._fn = fn

    def resume(self) -> bool:
        self._fn()
        return True


class GeneratorExitComputation(ExitComputation):
    """Adapts a generator callback to the two-phase protocol.

    The code before the first ``yield`` is the enter phase, the code after
    it is the exit phase. A generator that yields again during its exit
    phase is reported as unfinished.
    """

    def __init__(self, generator: Generator):
        self._generator = generator

    def start(self) -> bool:
        """Run the enter phase; return True if the generator suspended."""
        try:
            next(self._generator)
        except StopIteration:
            return False
        return True

    def resume(self) -> bool:
        try:
            next(self._generator)
        except StopIteration:
            return True
        return False


def on_exit(fn: Callable[[], Any]) -> CallbackExitComputation:
    """Return an exit computation that calls ``fn()`` when the node is left."""
    return CallbackExitComputation(fn)


def as_exit_computation(value: Any) -> Optional[Any]:
    """Turn a callback's return value into an exit computation, if it is one.

    Generators are started here, which runs their enter phase. Plain
    return values (including None) yield None.
    """
    if inspect.isgenerator(value):
        computation = GeneratorExitComputation(value)
        return computation if computation.start() else None
    if callable(getattr(value, "resume", None)):
        return value
    return None
