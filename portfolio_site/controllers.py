"""HTTP handlers and the routes that expose them."""

from __future__ import annotations

import json as _json
import re
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Callable, Optional

API_PREFIX = "/api/v1"

_U32_MAX = 2**32 - 1
_UNSIGNED = re.compile(r"\+?[0-9]+")


class PathError(ValueError):
    """A path parameter could not be converted to the type its handler expects."""


def parse_u32(value: str) -> int:
    """Parse a path segment as an unsigned 32-bit integer."""
    if _UNSIGNED.fullmatch(value):
        number = int(value)
        if number <= _U32_MAX:
            return number
    raise PathError(f"Cannot parse `{value}` to a `u32`")


@dataclass(frozen=True)
class Response:
    """An HTTP response: status code, body and headers."""

    status: int
    body: bytes = b""
    content_type: Optional[str] = None
    headers: tuple[tuple[str, str], ...] = ()

    @classmethod
    def json(cls, data: Any, status: int = 200) -> Response:
        return cls(status, _json.dumps(data).encode("utf-8"), "application/json")

    @classmethod
    def text(cls, content: str, status: int = 200) -> Response:
        return cls(status, content.encode("utf-8"), "text/plain; charset=utf-8")

    def json_body(self) -> Any:
        """Decode the body as JSON."""
        return _json.loads(self.body)

    def header_list(self) -> list[tuple[str, str]]:
        """All headers, including content type and length, as WSGI expects them."""
        headers = []
        if self.content_type is not None:
            headers.append(("Content-Type", self.content_type))
        headers.append(("Content-Length", str(len(self.body))))
        headers.extend(self.headers)
        return headers


@dataclass(frozen=True)
class Route:
    """A method and a path pattern bound to a handler.

    Segments written as ``{name}`` capture one non-empty path segment and are
    handed to the handler as keyword arguments.
    """

    method: str
    path: str
    handler: Callable[..., Response]

    def match(self, method: str, path: str) -> Optional[dict[str, str]]:
        """Return the captured parameters if this route serves the request."""
        if method.upper() != self.method:
            return None
        expected_segments = self.path.split("/")
        actual_segments = path.split("/")
        if len(expected_segments) != len(actual_segments):
            return None
        params: dict[str, str] = {}
        for expected, actual in zip(expected_segments, actual_segments):
            if expected.startswith("{") and expected.endswith("}"):
                if not actual:
                    return None
                params[expected[1:-1]] = actual
            elif expected != actual:
                return None
        return params


def healthcheck() -> Response:
    """Report that the service is up, with the current UTC time."""
    return Response.json(
        {
            "message": "Status is healthy!",
            "status": 200,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
    )


def healthcheck_routes() -> list[Route]:
    return [Route("GET", "/api/healthcheck", healthcheck)]


def _collection_routes(collection: str, plural: str, singular: str, key: str) -> list[Route]:
    def get_all() -> Response:
        return Response.text(f"Get all {plural}")

    def get_specific(**params: str) -> Response:
        value = parse_u32(params[key])
        return Response.text(f"Get {singular} with {key} {value}")

    base = f"{API_PREFIX}{collection}"
    return [
        Route("GET", base, get_all),
        Route("GET", f"{base}/{{{key}}}", get_specific),
    ]


_STRUCTURES = (
    ("/education", "educations", "education", "id"),
    ("/jobs", "jobs", "job", "id"),
    ("/projects", "projects", "project", "id"),
    ("/skills", "skills", "skill", "name"),
    ("/testimonials", "testimonials", "testimonial", "id"),
)


def structure_routes() -> list[Route]:
    """Routes for every portfolio collection, in registration order."""
    return [
        route
        for collection, plural, singular, key in _STRUCTURES
        for route in _collection_routes(collection, plural, singular, key)
    ]