"""Exceptions and warnings raised by estreelib traversals."""


class TraversalError(Exception):
    """Base class for every error raised by a traversal."""
    pass


class StructuralError(TraversalError, TypeError):
    """Raised when the tree cannot be walked with the children schema.

    Either a visited node has no string ``type`` or the schema has no
    entry for the node's type. The traversal is aborted; mutations made
    so far are left in place.
    """
    pass


class UsageError(TraversalError, TypeError):
    """Raised when a list-only mutation targets a non-list container."""
    pass


class UnfinishedExitError(TraversalError):
    """Raised by FailFastPolicy when an exit computation does not finish."""

    def __init__(self, path):
        self.path = tuple(path)
        rendered = "/".join(str(step) for step in self.path)
        super().__init__(f"Exit computation at {rendered!r} did not finish")


class UnfinishedExitWarning(UserWarning):
    """Emitted when an exit computation is still running after its resume."""
    pass
