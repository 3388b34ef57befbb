"""The web application: route dispatch, WSGI entry point and command line."""

from __future__ import annotations

import argparse
import os
from dataclasses import replace
from http import HTTPStatus
from typing import Any, Callable, Iterable, Optional, Sequence
from wsgiref.simple_server import make_server

from portfolio_site.controllers import (
    PathError,
    Response,
    Route,
    healthcheck_routes,
    structure_routes,
)

_VERSION = "0.1.0"
DEFAULT_BINDING = "localhost"
DEFAULT_PORT = 5150


def app_name() -> str:
    return "portfolio_site"


def app_version() -> str:
    """The package version followed by the build revision, or ``dev``."""
    revision = os.environ.get("BUILD_SHA") or os.environ.get("GITHUB_SHA") or "dev"
    return f"{_VERSION} ({revision})"


class App:
    """Dispatches requests to the first route that serves them."""

    def __init__(self, routes: Iterable[Route]) -> None:
        self.routes = tuple(routes)

    def handle(self, method: str, path: str) -> Response:
        """Serve one request; ``path`` is already percent-decoded."""
        method = method.upper()
        path = path.partition("?")[0] or "/"
        wanted = "GET" if method == "HEAD" else method
        allowed: set[str] = set()
        for route in self.routes:
            params = route.match(route.method, path)
            if params is None:
                continue
            if route.method != wanted:
                allowed.add(route.method)
                continue
            try:
                response = route.handler(**params)
            except PathError as exc:
                response = Response.text(f"Invalid URL: {exc}", status=400)
            if method == "HEAD":
                response = replace(response, body=b"")
            return response
        if allowed:
            if "GET" in allowed:
                allowed.add("HEAD")
            return Response(405, headers=(("Allow", ",".join(sorted(allowed))),))
        return Response(404)

    def __call__(
        self, environ: dict[str, Any], start_response: Callable[..., Any]
    ) -> list[bytes]:
        raw_path = environ.get("PATH_INFO", "") or "/"
        path = raw_path.encode("latin-1").decode("utf-8", "replace")
        response = self.handle(environ.get("REQUEST_METHOD", "GET"), path)
        status_line = f"{response.status} {HTTPStatus(response.status).phrase}"
        start_response(status_line, response.header_list())
        return [response.body]


def create_app() -> App:
    """Build the application with every route registered."""
    return App([*healthcheck_routes(), *structure_routes()])


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog=app_name())
    commands = parser.add_subparsers(dest="command", required=True)
    start = commands.add_parser("start", help="start the web server")
    start.add_argument("-b", "--binding", default=DEFAULT_BINDING)
    start.add_argument("-p", "--port", type=int, default=DEFAULT_PORT)
    commands.add_parser("routes", help="list the registered routes")
    commands.add_parser("version", help="print the application version")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parser().parse_args(argv)
    app = create_app()
    if args.command == "version":
        print(app_version())
    elif args.command == "routes":
        for route in app.routes:
            print(f"[{route.method}] {route.path}")
    else:
        with make_server(args.binding, args.port, app) as server:
            print(f"listening on http://{args.binding}:{args.port}")
            try:
                server.serve_forever()
            except KeyboardInterrupt:
                pass
    return 0