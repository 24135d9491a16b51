class DoProjectError(Exception):
    """Base class for errors raised by the service and storage layers."""


class NotFoundError(DoProjectError):
    """The row an operation targets does not exist."""


class InvalidInputError(DoProjectError):
    """The request is well formed but cannot be applied as given."""


class StorageError(DoProjectError):
    """The database rejected or failed a statement."""
