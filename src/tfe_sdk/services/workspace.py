"""
Workspace service for managing workspaces within an organization
"""

import logging
from typing import Optional, List
import httpx

from tfe_sdk.errors import check_response
from tfe_sdk.services._jsonapi import (
    decode_permissions,
    document,
    escape,
    list_params,
    relationship_id,
    require,
    set_if,
)
from tfe_sdk.types import (
    Workspace,
    VCSRepo,
    VCSRepoOptions,
    ListOptions,
    CreateWorkspaceInput,
    ModifyWorkspaceInput,
    DeleteWorkspaceInput,
    DeleteWorkspaceOutput,
)

logger = logging.getLogger(__name__)


def _workspaces_path(organization: str) -> str:
    return f"/organizations/{escape(organization)}/workspaces"


def _workspace_path(organization: str, name: str) -> str:
    return f"{_workspaces_path(organization)}/{escape(name)}"


def _vcs_repo_attributes(options: VCSRepoOptions) -> dict:
    attributes = {}
    set_if(attributes, "identifier", options.identifier)
    set_if(attributes, "branch", options.branch)
    set_if(attributes, "ingress-submodules", options.ingress_submodules)
    set_if(attributes, "oauth-token-id", options.oauth_token_id)
    return attributes


def _create_payload(params: CreateWorkspaceInput) -> dict:
    attributes = {"name": params.name}
    set_if(attributes, "auto-apply", params.auto_apply)
    set_if(attributes, "terraform-version", params.terraform_version)
    set_if(attributes, "working-directory", params.working_directory)
    if params.vcs_repo is not None:
        attributes["vcs-repo"] = _vcs_repo_attributes(params.vcs_repo)
    return document("workspaces", attributes)


def _modify_payload(params: ModifyWorkspaceInput) -> dict:
    # Only supplied fields are sent; the rest stay as they are remotely.
    attributes = {}
    set_if(attributes, "name", params.rename)
    set_if(attributes, "auto-apply", params.auto_apply)
    set_if(attributes, "terraform-version", params.terraform_version)
    set_if(attributes, "working-directory", params.working_directory)
    if params.vcs_repo is not None:
        attributes["vcs-repo"] = _vcs_repo_attributes(params.vcs_repo)
    return document("workspaces", attributes)


def _transform_vcs_repo(data: Optional[dict]) -> Optional[VCSRepo]:
    if not data:
        return None
    return VCSRepo(
        identifier=data.get("identifier"),
        branch=data.get("branch") or None,
        ingress_submodules=bool(data.get("ingress-submodules", False)),
        oauth_token_id=data.get("oauth-token-id"),
    )


def _transform_workspace(data: dict) -> Workspace:
    """Transform a JSON:API workspace resource to Workspace type"""
    attributes = data.get("attributes") or {}
    return Workspace(
        id=data["id"],
        name=attributes["name"],
        organization=relationship_id(data, "organization"),
        auto_apply=bool(attributes.get("auto-apply", False)),
        terraform_version=attributes.get("terraform-version"),
        working_directory=attributes.get("working-directory"),
        locked=bool(attributes.get("locked", False)),
        environment=attributes.get("environment"),
        can_queue_destroy_plan=bool(attributes.get("can-queue-destroy-plan", False)),
        created_at=attributes.get("created-at"),
        vcs_repo=_transform_vcs_repo(attributes.get("vcs-repo")),
        permissions=decode_permissions(attributes.get("permissions")),
    )


class AsyncWorkspaceService:
    """Async service for managing workspaces"""

    def __init__(self, client: httpx.AsyncClient):
        self._client = client

    async def list(self, organization: str, options: Optional[ListOptions] = None) -> List[Workspace]:
        """List the workspaces of an organization"""
        require(organization, "Organization")
        response = await self._client.get(_workspaces_path(organization), params=list_params(options))
        check_response(response)
        return [_transform_workspace(w) for w in response.json().get("data", [])]

    async def get(self, organization: str, name: str) -> Workspace:
        """Get a workspace by organization and name"""
        require(organization, "Organization")
        require(name, "Name")
        response = await self._client.get(_workspace_path(organization, name))
        check_response(response)
        return _transform_workspace(response.json()["data"])

    async def create(self, params: CreateWorkspaceInput) -> Workspace:
        """Create a new workspace"""
        organization = require(params.organization, "Organization")
        require(params.name, "Name")

        response = await self._client.post(_workspaces_path(organization), json=_create_payload(params))
        check_response(response)
        workspace = _transform_workspace(response.json()["data"])
        logger.debug("Created workspace %s (%s/%s)", workspace.id, organization, workspace.name)
        return workspace

    async def modify(self, params: ModifyWorkspaceInput) -> Workspace:
        """Update the supplied settings of a workspace"""
        organization = require(params.organization, "Organization")
        name = require(params.name, "Name")

        response = await self._client.patch(_workspace_path(organization, name), json=_modify_payload(params))
        check_response(response)
        return _transform_workspace(response.json()["data"])

    async def delete(self, params: DeleteWorkspaceInput) -> DeleteWorkspaceOutput:
        """Delete a workspace"""
        organization = require(params.organization, "Organization")
        name = require(params.name, "Name")

        response = await self._client.delete(_workspace_path(organization, name))
        check_response(response)
        logger.debug("Deleted workspace %s/%s", organization, name)
        return DeleteWorkspaceOutput()


class WorkspaceService:
    """Sync service for managing workspaces"""

    def __init__(self, client: httpx.Client):
        self._client = client

    def list(self, organization: str, options: Optional[ListOptions] = None) -> List[Workspace]:
        """List the workspaces of an organization"""
        require(organization, "Organization")
        response = self._client.get(_workspaces_path(organization), params=list_params(options))
        check_response(response)
        return [_transform_workspace(w) for w in response.json().get("data", [])]

    def get(self, organization: str, name: str) -> Workspace:
        """Get a workspace by organization and name"""
        require(organization, "Organization")
        require(name, "Name")
        response = self._client.get(_workspace_path(organization, name))
        check_response(response)
        return _transform_workspace(response.json()["data"])

    def create(self, params: CreateWorkspaceInput) -> Workspace:
        """Create a new workspace"""
        organization = require(params.organization, "Organization")
        require(params.name, "Name")

        response = self._client.post(_workspaces_path(organization), json=_create_payload(params))
        check_response(response)
        workspace = _transform_workspace(response.json()["data"])
        logger.debug("Created workspace %s (%s/%s)", workspace.id, organization, workspace.name)
        return workspace

    def modify(self, params: ModifyWorkspaceInput) -> Workspace:
        """Update the supplied settings of a workspace"""
        organization = require(params.organization, "Organization")
        name = require(params.name, "Name")

        response = self._client.patch(_workspace_path(organization, name), json=_modify_payload(params))
        check_response(response)
        return _transform_workspace(response.json()["data"])

    def delete(self, params: DeleteWorkspaceInput) -> DeleteWorkspaceOutput:
        """Delete a workspace"""
        organization = require(params.organization, "Organization")
        name = require(params.name, "Name")

        response = self._client.delete(_workspace_path(organization, name))
        check_response(response)
        logger.debug("Deleted workspace %s/%s", organization, name)
        return DeleteWorkspaceOutput()
