"""Standalone greeting handler.

Defines the application only; nothing here starts a server.
"""

from aiohttp import web


async def home_page(_request: web.Request) -> web.Response:
    return web.Response(text="Hello, World!")


def create_app() -> web.Application:
    app = web.Application()
    app.router.add_route("*", "/", home_page)
    return app
