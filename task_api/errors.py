class StorageError(Exception):
    """Raised when the task store cannot be opened, read or written.

    The message is meant for logs only; HTTP clients get a generic body.
    """
