#!/usr/bin/env python3
"""
Example: Basic Usage

This example creates a workspace, updates part of its settings, renames it
and deletes it again using the synchronous client.

Requires TFE_TOKEN (and optionally TFE_ADDRESS) in the environment.

Run: python basic.py my-organization
"""

import sys

from tfe_sdk import (
    TFEClient,
    CreateWorkspaceInput,
    ModifyWorkspaceInput,
    DeleteWorkspaceInput,
    TFEError,
    NotFoundError,
    ValidationError,
)


def main(organization: str):
    print("=== TFE SDK Basic Example ===\n")

    with TFEClient.create() as client:
        # 1. Validation happens locally, before any request
        print("1. Creating a workspace without a name...")
        try:
            client.workspaces.create(CreateWorkspaceInput(organization=organization))
        except ValidationError as e:
            print(f"   ValidationError: {e}\n")

        # 2. Create a workspace
        print("2. Creating workspace...")
        workspace = client.workspaces.create(CreateWorkspaceInput(
            organization=organization,
            name="sdk-example",
            terraform_version="0.11.7",
            working_directory="infra/",
        ))
        print(f"   Created: {workspace.id} (terraform {workspace.terraform_version})")
        print(f"   Can destroy: {workspace.permissions.can('destroy')}\n")

        try:
            # 3. Partial update: only auto-apply changes
            print("3. Enabling auto-apply...")
            workspace = client.workspaces.modify(ModifyWorkspaceInput(
                organization=organization,
                name=workspace.name,
                auto_apply=True,
            ))
            print(f"   auto_apply={workspace.auto_apply}, working_directory={workspace.working_directory}\n")

            # 4. Rename keeps the identifier
            print("4. Renaming workspace...")
            workspace = client.workspaces.modify(ModifyWorkspaceInput(
                organization=organization,
                name=workspace.name,
                rename="sdk-example-renamed",
            ))
            print(f"   Renamed: {workspace.id} -> {workspace.name}\n")

            # 5. List all workspaces
            print("5. Listing workspaces...")
            for ws in client.workspaces.list(organization):
                print(f"   - {ws.name} ({ws.id})")

        except TFEError as e:
            print(f"   API Error: {e}")

        finally:
            # 6. Cleanup
            print("\n6. Cleaning up...")
            client.workspaces.delete(DeleteWorkspaceInput(organization=organization, name=workspace.name))
            try:
                client.workspaces.get(organization, workspace.name)
            except NotFoundError as e:
                print(f"   {e}: deleted")


if __name__ == "__main__":
    main(sys.argv[1] if len(sys.argv) > 1 else "my-organization")
