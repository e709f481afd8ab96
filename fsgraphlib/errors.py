"""Exception hierarchy for fsgraphlib.

The adapter distinguishes two failure tiers. Contract violations and
unimplemented features raise one of the exceptions below and abort the
operation. Expected-missing data (a context without an active vertex, an
unreadable directory entry, a file without an extension) never raises;
it yields None or is skipped.

Failures to open a directory are not wrapped: the underlying OSError
propagates unchanged.
"""


class FilesystemGraphError(Exception):
    """Base class for all fsgraphlib errors."""
    pass


class ContractViolationError(FilesystemGraphError):
    """Raised when a caller breaks the resolver contract.

    Examples:
    - requesting a starting edge other than ``OriginDirectory``
    - passing parameters to the parameterless starting edge
    - a context whose active vertex is not of the declared type
    """
    pass


class UnsupportedOperationError(FilesystemGraphError, NotImplementedError):
    """Raised for type, property or edge names the adapter does not implement.

    Also raised by every coercion request, since the schema declares no
    subtype relationships.
    """
    pass


class VertexDecodeError(FilesystemGraphError, ValueError):
    """Raised when a serialized vertex cannot be decoded."""
    pass


class ConfigurationError(FilesystemGraphError, ValueError):
    """Raised when an adapter is built with an invalid ScanConfig."""
    pass
