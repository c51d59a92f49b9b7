"""
Organization service for managing organizations
"""

import logging
from typing import Optional, List
import httpx

from tfe_sdk.errors import check_response
from tfe_sdk.services._jsonapi import decode_permissions, document, escape, list_params, require, set_if
from tfe_sdk.types import (
    Organization,
    ListOptions,
    CreateOrganizationInput,
    ModifyOrganizationInput,
    DeleteOrganizationOutput,
)

logger = logging.getLogger(__name__)


def _organization_path(name: str) -> str:
    return f"/organizations/{escape(name)}"


def _create_payload(params: CreateOrganizationInput) -> dict:
    return document("organizations", {"name": params.name, "email": params.email})


def _modify_payload(params: ModifyOrganizationInput) -> dict:
    attributes = {}
    set_if(attributes, "name", params.rename)
    set_if(attributes, "email", params.email)
    set_if(attributes, "session-remember", params.session_remember)
    set_if(attributes, "session-timeout", params.session_timeout)
    set_if(attributes, "collaborator-auth-policy", params.collaborator_auth_policy)
    return document("organizations", attributes)


def _transform_organization(data: dict) -> Organization:
    """Transform a JSON:API organization resource to Organization type"""
    attributes = data.get("attributes") or {}
    return Organization(
        name=attributes.get("name") or data["id"],
        email=attributes.get("email"),
        created_at=attributes.get("created-at"),
        collaborator_auth_policy=attributes.get("collaborator-auth-policy"),
        enterprise_plan=attributes.get("enterprise-plan"),
        session_remember=attributes.get("session-remember"),
        session_timeout=attributes.get("session-timeout"),
        permissions=decode_permissions(attributes.get("permissions")),
    )


def _validate_create(params: CreateOrganizationInput) -> None:
    require(params.name, "Name")
    require(params.email, "Email")


class AsyncOrganizationService:
    """Async service for managing organizations"""

    def __init__(self, client: httpx.AsyncClient):
        self._client = client

    async def list(self, options: Optional[ListOptions] = None) -> List[Organization]:
        """List all organizations visible to the token"""
        response = await self._client.get("/organizations", params=list_params(options))
        check_response(response)
        return [_transform_organization(o) for o in response.json().get("data", [])]

    async def get(self, name: str) -> Organization:
        """Get an organization by name"""
        require(name, "Name")
        response = await self._client.get(_organization_path(name))
        check_response(response)
        return _transform_organization(response.json()["data"])

    async def create(self, params: CreateOrganizationInput) -> Organization:
        """Create a new organization"""
        _validate_create(params)
        response = await self._client.post("/organizations", json=_create_payload(params))
        check_response(response)
        logger.debug("Created organization %s", params.name)
        return _transform_organization(response.json()["data"])

    async def modify(self, params: ModifyOrganizationInput) -> Organization:
        """Update the supplied settings of an organization"""
        name = require(params.name, "Name")
        response = await self._client.patch(_organization_path(name), json=_modify_payload(params))
        check_response(response)
        return _transform_organization(response.json()["data"])

    async def delete(self, name: str) -> DeleteOrganizationOutput:
        """Delete an organization and everything it owns"""
        require(name, "Name")
        response = await self._client.delete(_organization_path(name))
        check_response(response)
        logger.debug("Deleted organization %s", name)
        return DeleteOrganizationOutput()


class OrganizationService:
    """Sync service for managing organizations"""

    def __init__(self, client: httpx.Client):
        self._client = client

    def list(self, options: Optional[ListOptions] = None) -> List[Organization]:
        """List all organizations visible to the token"""
        response = self._client.get("/organizations", params=list_params(options))
        check_response(response)
        return [_transform_organization(o) for o in response.json().get("data", [])]

    def get(self, name: str) -> Organization:
        """Get an organization by name"""
        require(name, "Name")
        response = self._client.get(_organization_path(name))
        check_response(response)
        return _transform_organization(response.json()["data"])

    def create(self, params: CreateOrganizationInput) -> Organization:
        """Create a new organization"""
        _validate_create(params)
        response = self._client.post("/organizations", json=_create_payload(params))
        check_response(response)
        logger.debug("Created organization %s", params.name)
        return _transform_organization(response.json()["data"])

    def modify(self, params: ModifyOrganizationInput) -> Organization:
        """Update the supplied settings of an organization"""
        name = require(params.name, "Name")
        response = self._client.patch(_organization_path(name), json=_modify_payload(params))
        check_response(response)
        return _transform_organization(response.json()["data"])

    def delete(self, name: str) -> DeleteOrganizationOutput:
        """Delete an organization and everything it owns"""
        require(name, "Name")
        response = self._client.delete(_organization_path(name))
        check_response(response)
        logger.debug("Deleted organization %s", name)
        return DeleteOrganizationOutput()
