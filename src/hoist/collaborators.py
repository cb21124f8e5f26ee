"""Host Collaborators

Interfaces for the host services the discovery registry calls into:

    Container: builds a live instance from a feature handle
    Router: checks a route name and builds its URL
    Evaluator: answers whether a feature is active for a scope

The registry takes these as constructor arguments. Hoist ships a default
container that imports the class and calls it with no arguments, and a
table-backed router. Evaluation is always the host's job.
"""

from typing import Any, Mapping, Protocol, runtime_checkable

from hoist.scanner import load_type


@runtime_checkable
class Container(Protocol):
    """Builds a fully constructed instance for a feature handle."""

    def make(self, handle: str) -> Any: ...


@runtime_checkable
class Router(Protocol):
    """Named route lookup."""

    def route_exists(self, name: str) -> bool: ...

    def resolve_url(self, name: str) -> str: ...


@runtime_checkable
class Evaluator(Protocol):
    """Feature flag evaluation engine."""

    def is_active(self, name: str, scope: Any) -> bool: ...


class ClassContainer:
    """Default container: import the handle and call the class.

    Instances are not cached; every ``make`` builds a new object. Classes
    whose constructor needs arguments raise ``TypeError``, which is left to
    propagate so the host sees the misconfigured flag.
    """

    def make(self, handle: str) -> Any:
        return load_type(handle)()


class StaticRouter:
    """Router backed by a ``{route_name: url}`` mapping."""

    def __init__(self, routes: Mapping[str, str] | None = None) -> None:
        self._routes: dict[str, str] = dict(routes or {})

    def add(self, name: str, url: str) -> "StaticRouter":
        """Register (or replace) a named route."""
        self._routes[name] = url
        return self

    def route_exists(self, name: str) -> bool:
        return name in self._routes

    def resolve_url(self, name: str) -> str:
        return self._routes[name]
