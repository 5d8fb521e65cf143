class ReallocError(Exception):
    """Base exception for realloc."""

    pass


class RequestError(ReallocError):
    """Raised when a resize request is malformed. Maps to HTTP 400."""

    pass


class MissingParameterError(RequestError):
    """Raised when a required request parameter is absent or empty."""

    pass


class UnsupportedResourceError(RequestError):
    """Raised when the requested resource kind is not cpu, memory or bandwidth."""

    pass


class ResourceParseError(RequestError, ValueError):
    """Raised when a raw resource value cannot be parsed for its kind."""

    pass


class ClusterLookupError(ReallocError):
    """Raised when the pod descriptor cannot be read from cluster state."""

    pass


class ContainerNotFoundError(ClusterLookupError):
    """Raised when the named container is absent from the pod descriptor."""

    pass


class ExecutionError(ReallocError):
    """Raised when the container runtime command fails. Maps to HTTP 500."""

    pass


class TransportError(ReallocError):
    """Raised when the resolver cannot reach the node agent."""

    pass
