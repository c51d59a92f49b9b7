"""
Services module for the TFE SDK
"""

from tfe_sdk.services.organization import OrganizationService, AsyncOrganizationService
from tfe_sdk.services.workspace import WorkspaceService, AsyncWorkspaceService

__all__ = [
    "OrganizationService",
    "AsyncOrganizationService",
    "WorkspaceService",
    "AsyncWorkspaceService",
]
