"""Shared test fixtures: an in-memory fake of the TFE JSON:API.

The fake is mounted through ``httpx.MockTransport`` so the real clients,
services and error handling run unchanged; only the network is replaced.
Every request the fake receives is recorded in ``FakeTFE.requests``.
"""

from __future__ import annotations

import itertools
import json
import re
import uuid
from typing import Dict, List, Optional
from urllib.parse import unquote

import httpx
import pytest
import pytest_asyncio

from tfe_sdk import AsyncTFEClient, CreateOrganizationInput, CreateWorkspaceInput, TFEClient
from tfe_sdk.config import get_settings

TOKEN = "test-token"
ADDRESS = "https://tfe.test"
API_PREFIX = "/api/v2"

_VERSION_RE = re.compile(r"^\d+\.\d+\.\d+$")

WORKSPACE_PERMISSIONS = {
    "can-update": True,
    "can-destroy": True,
    "can-queue-run": True,
    "can-queue-destroy": True,
    "can-lock": True,
    "can-update-variable": True,
}

ORGANIZATION_PERMISSIONS = {
    "can-update": True,
    "can-destroy": True,
    "can-create-workspace": True,
}


def _error(status: int, title: str, detail: Optional[str] = None) -> httpx.Response:
    entry = {"status": str(status), "title": title}
    if detail:
        entry["detail"] = detail
    return httpx.Response(status, json={"errors": [entry]})


def _not_found() -> httpx.Response:
    return _error(404, "not found")


class FakeTFE:
    """Minimal stateful stand-in for the organizations/workspaces endpoints"""

    def __init__(self) -> None:
        self.organizations: Dict[str, dict] = {}
        self.workspaces: Dict[str, Dict[str, dict]] = {}
        self.requests: List[httpx.Request] = []
        self._ids = itertools.count(1)

    # -- transport ----------------------------------------------------------

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)

        if request.headers.get("Authorization") != f"Bearer {TOKEN}":
            return _error(401, "unauthorized")

        path = request.url.raw_path.decode().split("?", 1)[0]
        if not path.startswith(API_PREFIX):
            return _not_found()
        segments = [unquote(s) for s in path[len(API_PREFIX):].split("/") if s]
        body = json.loads(request.content) if request.content else {}

        if segments == ["ping"]:
            return httpx.Response(204)
        if segments == ["organizations"]:
            if request.method == "GET":
                return self._list([self._organization_resource(o) for o in self.organizations.values()], request)
            if request.method == "POST":
                return self._create_organization(body)
        if len(segments) == 2 and segments[0] == "organizations":
            return self._organization(request.method, segments[1], body)
        if len(segments) == 3 and segments[2] == "workspaces":
            return self._workspaces(request, segments[1], body)
        if len(segments) == 4 and segments[2] == "workspaces":
            return self._workspace(request.method, segments[1], segments[3], body)
        return _not_found()

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    # -- helpers --------------------------------------------------------------

    @staticmethod
    def _list(resources: List[dict], request: httpx.Request) -> httpx.Response:
        size = request.url.params.get("page[size]")
        number = request.url.params.get("page[number]")
        if size:
            start = (int(number or 1) - 1) * int(size)
            resources = resources[start:start + int(size)]
        return httpx.Response(200, json={"data": resources})

    def _organization_resource(self, org: dict) -> dict:
        return {"id": org["name"], "type": "organizations", "attributes": dict(org)}

    def _workspace_resource(self, organization: str, ws: dict) -> dict:
        attributes = {k: v for k, v in ws.items() if k != "id"}
        return {
            "id": ws["id"],
            "type": "workspaces",
            "attributes": attributes,
            "relationships": {
                "organization": {"data": {"id": organization, "type": "organizations"}},
            },
        }

    # -- organizations --------------------------------------------------------

    def _create_organization(self, body: dict) -> httpx.Response:
        attributes = body["data"]["attributes"]
        name = attributes["name"]
        if name in self.organizations:
            return _error(422, "invalid attribute", "Name has already been taken")
        self.organizations[name] = {
            "name": name,
            "email": attributes["email"],
            "created-at": "2018-03-01T12:00:00.000Z",
            "collaborator-auth-policy": "password",
            "enterprise-plan": "premium",
            "session-remember": 20160,
            "session-timeout": 20160,
            "permissions": dict(ORGANIZATION_PERMISSIONS),
        }
        self.workspaces[name] = {}
        return httpx.Response(201, json={"data": self._organization_resource(self.organizations[name])})

    def _organization(self, method: str, name: str, body: dict) -> httpx.Response:
        org = self.organizations.get(name)
        if org is None:
            return _not_found()
        if method == "GET":
            return httpx.Response(200, json={"data": self._organization_resource(org)})
        if method == "PATCH":
            org.update(body["data"]["attributes"])
            if org["name"] != name:
                self.organizations[org["name"]] = self.organizations.pop(name)
                self.workspaces[org["name"]] = self.workspaces.pop(name)
            return httpx.Response(200, json={"data": self._organization_resource(org)})
        if method == "DELETE":
            del self.organizations[name]
            del self.workspaces[name]
            return httpx.Response(204)
        return _error(405, "method not allowed")

    # -- workspaces -----------------------------------------------------------

    def _validate_workspace(self, attributes: dict) -> Optional[httpx.Response]:
        version = attributes.get("terraform-version")
        if version is not None and not _VERSION_RE.match(version):
            return _error(422, "invalid attribute", "Terraform version is invalid")
        return None

    def _workspaces(self, request: httpx.Request, organization: str, body: dict) -> httpx.Response:
        if organization not in self.organizations:
            return _not_found()
        owned = self.workspaces[organization]
        if request.method == "GET":
            return self._list([self._workspace_resource(organization, w) for w in owned.values()], request)
        if request.method != "POST":
            return _error(405, "method not allowed")

        attributes = body["data"]["attributes"]
        invalid = self._validate_workspace(attributes)
        if invalid is not None:
            return invalid
        if attributes["name"] in owned:
            return _error(422, "invalid attribute", "Name has already been taken")

        ws = {
            "id": f"ws-{next(self._ids):016d}",
            "name": attributes["name"],
            "auto-apply": attributes.get("auto-apply", False),
            "terraform-version": attributes.get("terraform-version", "0.11.7"),
            "working-directory": attributes.get("working-directory"),
            "locked": False,
            "environment": "default",
            "can-queue-destroy-plan": False,
            "created-at": "2018-03-02T12:00:00.000Z",
            "vcs-repo": attributes.get("vcs-repo"),
            "permissions": dict(WORKSPACE_PERMISSIONS),
        }
        owned[ws["name"]] = ws
        return httpx.Response(201, json={"data": self._workspace_resource(organization, ws)})

    def _workspace(self, method: str, organization: str, name: str, body: dict) -> httpx.Response:
        ws = self.workspaces.get(organization, {}).get(name)
        if ws is None:
            return _not_found()
        owned = self.workspaces[organization]
        if method == "GET":
            return httpx.Response(200, json={"data": self._workspace_resource(organization, ws)})
        if method == "PATCH":
            attributes = body["data"]["attributes"]
            invalid = self._validate_workspace(attributes)
            if invalid is not None:
                return invalid
            new_name = attributes.get("name", name)
            if new_name != name and new_name in owned:
                return _error(422, "invalid attribute", "Name has already been taken")
            ws.update(attributes)
            if ws["name"] != name:
                owned[ws["name"]] = owned.pop(name)
            return httpx.Response(200, json={"data": self._workspace_resource(organization, ws)})
        if method == "DELETE":
            del owned[name]
            return httpx.Response(204)
        return _error(405, "method not allowed")


def random_name() -> str:
    return f"tst-{uuid.uuid4().hex[:12]}"


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch, tmp_path):
    """Keep TFE_* variables from the developer's shell out of the tests."""
    for key in ("TFE_ADDRESS", "TFE_TOKEN", "TFE_TIMEOUT", "TFE_BASE_PATH"):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def fake_tfe() -> FakeTFE:
    return FakeTFE()


@pytest.fixture
def client(fake_tfe):
    with TFEClient(ADDRESS, TOKEN, transport=fake_tfe.transport()) as c:
        yield c


@pytest_asyncio.fixture
async def async_client(fake_tfe):
    async with AsyncTFEClient(ADDRESS, TOKEN, transport=fake_tfe.transport()) as c:
        yield c


@pytest.fixture
def organization(client):
    """An organization created through the API"""
    return client.organizations.create(
        CreateOrganizationInput(name=random_name(), email="info@example.com")
    )


@pytest.fixture
def create_workspace(client, organization):
    """Factory creating a workspace with a random name in ``organization``"""

    def _create(**kwargs):
        kwargs.setdefault("name", random_name())
        return client.workspaces.create(
            CreateWorkspaceInput(organization=organization.name, **kwargs)
        )

    return _create
