"""Route frozen dataclass and small handler/matcher constructors."""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any, TypeAlias

# A matcher set: every matcher in it must match (logical AND)
MatcherSet: TypeAlias = Mapping[str, Any]

# A handler object: {"handler": "<module name>", ...}
Handler: TypeAlias = Mapping[str, Any]


@dataclass(frozen=True, slots=True)
class Route:
    """A compiled Caddy HTTP route.

    ``match`` holds matcher sets (any may match, logical OR). An empty
    ``match`` matches every request that reaches the route.

    ``errors`` are the routes evaluated when handling this route fails
    with an HTTP error. Caddy has no per-route error slot, so the server
    builder lifts them into the server's ``errors`` block, guarded by
    this route's ``match``.
    """

    handle: tuple[Handler, ...] = ()
    match: tuple[MatcherSet, ...] = ()
    errors: tuple["Route", ...] = ()
    group: str | None = None
    route_id: str | None = None
    terminal: bool = False

    def to_json(self) -> dict[str, Any]:
        """Caddy JSON for this route. Empty fields are omitted."""
        data: dict[str, Any] = {}
        if self.route_id:
            data["@id"] = self.route_id
        if self.group:
            data["group"] = self.group
        if self.match:
            data["match"] = [_to_json(m) for m in self.match]
        data["handle"] = [_to_json(h) for h in self.handle]
        if self.terminal:
            data["terminal"] = True
        return data


def _to_json(value: Any) -> Any:
    """Recursively convert nested routes, mappings, and tuples."""
    if isinstance(value, Route):
        return value.to_json()
    if isinstance(value, Mapping):
        return {k: _to_json(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_to_json(v) for v in value]
    return value


# ---------------------------------------------------------------------------
# Constructors
# ---------------------------------------------------------------------------


def subroute(routes: Iterable[Route]) -> Handler:
    """``subroute`` handler trying *routes* in order."""
    return {"handler": "subroute", "routes": tuple(routes)}


def error_status(status: int) -> MatcherSet:
    """Matcher set selecting error routes for one HTTP status."""
    return {"expression": f"{{http.error.status_code}} == {status}"}


def static_response(body: str, status_code: int | str, **extra: Any) -> Handler:
    """``static_response`` handler with a plaintext body."""
    return {"handler": "static_response", "body": body, "status_code": status_code, **extra}
