"""
Type definitions for the TFE SDK
"""

from dataclasses import dataclass, field
from typing import Optional, Dict, Literal


CollaboratorAuthPolicy = Literal["password", "two_factor_mandatory"]


@dataclass
class Permissions:
    """Decoded permission set of a resource.

    The API reports permissions as ``can-<action>`` flags, for example
    ``{"can-destroy": true, "can-queue-run": false}``.
    """
    actions: Dict[str, bool] = field(default_factory=dict)

    def can(self, action: str) -> bool:
        """Check whether the given action (e.g. ``"destroy"``) is allowed"""
        return bool(self.actions.get(f"can-{action}", False))


@dataclass
class VCSRepo:
    """VCS repository a workspace is linked to"""
    identifier: Optional[str] = None
    branch: Optional[str] = None
    ingress_submodules: bool = False
    oauth_token_id: Optional[str] = None


@dataclass
class VCSRepoOptions:
    """VCS repository settings for creating or modifying a workspace"""
    identifier: Optional[str] = None
    branch: Optional[str] = None
    ingress_submodules: Optional[bool] = None
    oauth_token_id: Optional[str] = None


@dataclass
class Organization:
    """Organization resource"""
    name: str
    email: Optional[str] = None
    created_at: Optional[str] = None
    collaborator_auth_policy: Optional[CollaboratorAuthPolicy] = None
    enterprise_plan: Optional[str] = None
    session_remember: Optional[int] = None
    session_timeout: Optional[int] = None
    permissions: Permissions = field(default_factory=Permissions)


@dataclass
class Workspace:
    """Workspace resource"""
    id: str
    name: str
    organization: Optional[str] = None
    auto_apply: bool = False
    terraform_version: Optional[str] = None
    working_directory: Optional[str] = None
    locked: bool = False
    environment: Optional[str] = None
    can_queue_destroy_plan: bool = False
    created_at: Optional[str] = None
    vcs_repo: Optional[VCSRepo] = None
    permissions: Permissions = field(default_factory=Permissions)


@dataclass
class ListOptions:
    """Pagination options for list calls"""
    page_number: Optional[int] = None
    page_size: Optional[int] = None


@dataclass
class CreateOrganizationInput:
    """Parameters for creating an organization"""
    name: Optional[str] = None
    email: Optional[str] = None


@dataclass
class ModifyOrganizationInput:
    """Parameters for modifying an organization.

    ``name`` selects the organization; every other field is only sent
    when set.
    """
    name: Optional[str] = None
    rename: Optional[str] = None
    email: Optional[str] = None
    session_remember: Optional[int] = None
    session_timeout: Optional[int] = None
    collaborator_auth_policy: Optional[CollaboratorAuthPolicy] = None


@dataclass
class DeleteOrganizationOutput:
    """Result of deleting an organization"""


@dataclass
class CreateWorkspaceInput:
    """Parameters for creating a workspace"""
    organization: Optional[str] = None
    name: Optional[str] = None
    auto_apply: Optional[bool] = None
    terraform_version: Optional[str] = None
    working_directory: Optional[str] = None
    vcs_repo: Optional[VCSRepoOptions] = None


@dataclass
class ModifyWorkspaceInput:
    """Parameters for modifying a workspace.

    ``organization`` and ``name`` select the workspace; ``rename`` gives it
    a new name. Fields left as ``None`` are not sent and keep their value.
    """
    organization: Optional[str] = None
    name: Optional[str] = None
    rename: Optional[str] = None
    auto_apply: Optional[bool] = None
    terraform_version: Optional[str] = None
    working_directory: Optional[str] = None
    vcs_repo: Optional[VCSRepoOptions] = None


@dataclass
class DeleteWorkspaceInput:
    """Parameters for deleting a workspace"""
    organization: Optional[str] = None
    name: Optional[str] = None


@dataclass
class DeleteWorkspaceOutput:
    """Result of deleting a workspace"""
