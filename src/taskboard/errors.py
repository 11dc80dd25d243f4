"""Exception types for taskboard."""


class TaskboardError(Exception):
    """Base class for taskboard errors."""


class StorageError(TaskboardError):
    """The state file could not be read, written or understood."""


class BoardNotFound(StorageError):
    """The state file does not exist yet."""
