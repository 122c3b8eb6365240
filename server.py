"""Greeting server with liveness and readiness probes.

Run:
    python server.py
"""

import asyncio
import sys

from aiohttp import web

from errors import ListenFailure
from routes import RouteTable

# ===== ENV =====
HOST = "0.0.0.0"
PORT = 11000

HEALTHZ_PATH = "/probe/liveness"
READINESS_PATH = "/probe/readiness"


async def hello(_request: web.Request) -> web.Response:
    return web.Response(text="Hello Filip")


async def healthz(_request: web.Request) -> web.Response:
    return web.Response(text="Healthy!\n")


async def readyz(_request: web.Request) -> web.Response:
    return web.Response(text="Ready!\n")


def build_routes() -> RouteTable:
    routes = RouteTable()
    routes.register("/", hello)
    routes.register(HEALTHZ_PATH, healthz)
    routes.register(READINESS_PATH, readyz)
    return routes


def create_app(routes: RouteTable | None = None) -> web.Application:
    if routes is None:
        routes = build_routes()
    return routes.apply(web.Application())


async def start_site(app: web.Application, host: str, port: int) -> web.AppRunner:
    """Bind ``host:port`` and start accepting connections.

    Raises ListenFailure if the socket cannot be bound; the runner is
    cleaned up first so nothing is left listening.
    """
    runner = web.AppRunner(app)
    await runner.setup()
    site = web.TCPSite(runner, host, port)
    try:
        await site.start()
    except OSError as e:
        await runner.cleanup()
        raise ListenFailure(host, port, e) from e
    return runner


async def serve(app: web.Application, host: str, port: int) -> None:
    runner = await start_site(app, host, port)
    try:
        await asyncio.Event().wait()
    finally:
        await runner.cleanup()


def run(port: int = PORT, host: str = HOST) -> None:
    """Serve until the process exits. Only returns by raising ListenFailure."""
    asyncio.run(serve(create_app(), host, port))


def main():
    print(f"Server listening on port {PORT}...", flush=True)
    try:
        run(PORT, HOST)
    except ListenFailure as e:
        print(f"Server failed to start: {e}", file=sys.stderr, flush=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
