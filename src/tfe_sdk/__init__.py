"""
TFE SDK - Python Client

A Python SDK for managing organizations and workspaces through the
Terraform Enterprise API. Supports both synchronous and asynchronous APIs.
"""

from tfe_sdk.client import TFEClient
from tfe_sdk.async_client import AsyncTFEClient
from tfe_sdk.config import TFESettings, get_settings
from tfe_sdk.types import (
    Organization,
    Workspace,
    Permissions,
    VCSRepo,
    VCSRepoOptions,
    ListOptions,
    CreateOrganizationInput,
    ModifyOrganizationInput,
    DeleteOrganizationOutput,
    CreateWorkspaceInput,
    ModifyWorkspaceInput,
    DeleteWorkspaceInput,
    DeleteWorkspaceOutput,
)
from tfe_sdk.errors import (
    TFEError,
    ValidationError,
    NotFoundError,
    UnauthorizedError,
    RemoteError,
)

__version__ = "0.1.0"

__all__ = [
    # Clients
    "TFEClient",
    "AsyncTFEClient",
    # Configuration
    "TFESettings",
    "get_settings",
    # Types
    "Organization",
    "Workspace",
    "Permissions",
    "VCSRepo",
    "VCSRepoOptions",
    "ListOptions",
    "CreateOrganizationInput",
    "ModifyOrganizationInput",
    "DeleteOrganizationOutput",
    "CreateWorkspaceInput",
    "ModifyWorkspaceInput",
    "DeleteWorkspaceInput",
    "DeleteWorkspaceOutput",
    # Errors
    "TFEError",
    "ValidationError",
    "NotFoundError",
    "UnauthorizedError",
    "RemoteError",
]
