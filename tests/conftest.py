from __future__ import annotations

import json
from typing import Callable, Dict, List, Optional, Tuple

import pytest

import jira_vrsnmngr as jvm

BASE = "https://acme.atlassian.net/rest/api/3"


class FakeResponse:
    def __init__(self, status_code: int = 200, payload: Optional[object] = None) -> None:
        self.status_code = status_code
        self._payload = payload
        self.text = json.dumps(payload) if payload is not None else ""
        self.content = self.text.encode()
        self.reason = "Fake"

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 400

    def json(self) -> object:
        return self._payload


class NotJsonResponse(FakeResponse):
    """A 2xx response whose body is an HTML page, e.g. an SSO login."""

    def __init__(self) -> None:
        super().__init__(200)
        self.text = "<html>Sign in</html>"
        self.content = self.text.encode()

    def json(self) -> object:
        raise ValueError("Expecting value: line 1 column 1 (char 0)")


Route = Callable[[Dict], FakeResponse]


class FakeSession:
    """Stands in for requests.Session; responds from a (method, path) route table."""

    def __init__(self) -> None:
        self.routes: Dict[Tuple[str, str], Route] = {}
        self.calls: List[Tuple[str, str, Dict]] = []

    def add(self, method: str, path: str, response) -> None:
        if isinstance(response, FakeResponse):
            self.routes[(method, path)] = lambda kwargs: response
        else:
            self.routes[(method, path)] = response

    def request(self, method: str, url: str, timeout=None, **kwargs) -> FakeResponse:
        del timeout
        path = url[len(BASE):]
        self.calls.append((method, path, kwargs))
        route = self.routes.get((method, path))
        if route is None:
            return FakeResponse(404, {"errorMessages": [f"no route for {method} {path}"]})
        return route(kwargs)

    def paths(self, method: Optional[str] = None) -> List[str]:
        return [path for m, path, _ in self.calls if method is None or m == method]


@pytest.fixture
def session() -> FakeSession:
    return FakeSession()


@pytest.fixture
def client(session: FakeSession) -> jvm.JiraClient:
    c = jvm.create_client("dev@example.com", "token", "acme")
    c.session = session
    return c


def version_json(version_id: str, name: str, **extra) -> Dict:
    data = {
        "id": version_id,
        "name": name,
        "released": False,
        "archived": False,
        "projectId": 10000,
    }
    data.update(extra)
    return data


def versions_page(*versions: Dict) -> FakeResponse:
    return FakeResponse(200, {"isLast": True, "values": list(versions)})


def echo_version(version_id: str) -> Route:
    def respond(kwargs: Dict) -> FakeResponse:
        return FakeResponse(200, dict(kwargs["json"], id=version_id))

    return respond
