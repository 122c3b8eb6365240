"""Explicit route table for the probe server.

Paths are matched exactly. The table is filled during startup and frozen
once it has been applied to an application.
"""

from typing import Awaitable, Callable

from aiohttp import web

from errors import DuplicateRouteError

Handler = Callable[[web.Request], Awaitable[web.StreamResponse]]


class RouteTable:
    def __init__(self):
        self._handlers: dict[str, Handler] = {}
        self._frozen = False

    def register(self, path: str, handler: Handler) -> None:
        if self._frozen:
            raise RuntimeError("Cannot register routes after the table is frozen")
        if not path.startswith("/"):
            raise ValueError(f"Route path must start with '/': {path!r}")
        if path in self._handlers:
            raise DuplicateRouteError(path)
        self._handlers[path] = handler

    @property
    def frozen(self) -> bool:
        return self._frozen

    def apply(self, app: web.Application) -> web.Application:
        """Freeze the table and install every route on ``app`` for any method."""
        self._frozen = True
        for path, handler in self._handlers.items():
            app.router.add_route("*", path, handler)
        return app
