class ServerError(Exception):
    """Base class for errors raised while setting up or running the server."""


class ListenFailure(ServerError):
    """The listening socket could not be bound, or serving stopped with an error."""

    def __init__(self, host: str, port: int, reason: BaseException):
        self.host = host
        self.port = port
        self.reason = reason
        super().__init__(f"cannot listen on {host}:{port}: {reason}")


class DuplicateRouteError(ServerError, ValueError):
    """A path was registered twice on the same route table."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"route already registered: {path}")
