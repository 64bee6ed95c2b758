"""Reverse routing over the FastAPI route table — implements the RouteBuilder port."""

from __future__ import annotations

from collections.abc import Iterable
from urllib.parse import quote

from fastapi.routing import APIRoute
from starlette.datastructures import QueryParams
from starlette.routing import BaseRoute


class FastAPIRouteBuilder:
    """Build links to named routes of a FastAPI application.

    Parameters named like a path placeholder of the route fill the path;
    every other parameter becomes a query parameter, spelled with the alias
    the route declares for it (``branch`` → ``b``).  ``None`` values are
    dropped.  Path values are percent-encoded except for ``/``, so a branch
    such as ``feature/x`` keeps its slash; query values are form-encoded.
    Empty values are inserted as empty segments rather than rejected.
    """

    def __init__(self, routes: Iterable[BaseRoute]) -> None:
        self._routes: dict[str, APIRoute] = {}
        self._aliases: dict[str, dict[str, str]] = {}
        for route in routes:
            if isinstance(route, APIRoute):
                self._routes[route.name] = route
                self._aliases[route.name] = {
                    field.name: field.alias for field in route.dependant.query_params
                }

    def path_for(self, endpoint: str, **params: str | None) -> str:
        route = self._routes.get(endpoint)
        if route is None:
            raise KeyError(f"No route named '{endpoint}'")

        path_names = set(route.param_convertors)
        aliases = self._aliases[endpoint]
        query = {
            aliases.get(k, k): v
            for k, v in params.items()
            if k not in path_names and v is not None
        }

        # path_format holds bare {name} placeholders, convertors stripped.
        path = route.path_format
        for name in path_names:
            path = path.replace(f"{{{name}}}", quote(params.get(name) or "", safe="/"))

        if not query:
            return path
        return f"{path}?{QueryParams(query)}"

    def absolute_url_for(
        self, endpoint: str, *, secure: bool, hostname: str, **params: str | None
    ) -> str:
        scheme = "https" if secure else "http"
        return f"{scheme}://{hostname}{self.path_for(endpoint, **params)}"
