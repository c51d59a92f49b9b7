"""
Sync TFE Client - Main entry point for synchronous SDK usage
"""

import logging
from typing import Optional
import httpx

from tfe_sdk.config import get_settings
from tfe_sdk.errors import check_response
from tfe_sdk.services.organization import OrganizationService
from tfe_sdk.services.workspace import WorkspaceService

logger = logging.getLogger(__name__)

CONTENT_TYPE = "application/vnd.api+json"


def _log_request(request: httpx.Request) -> None:
    logger.debug("%s %s", request.method, request.url)


def _log_response(response: httpx.Response) -> None:
    logger.debug(
        "%s %s -> %d", response.request.method, response.request.url, response.status_code
    )


class TFEClient:
    """Synchronous client for interacting with the TFE API"""

    def __init__(
        self,
        address: Optional[str] = None,
        token: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        """
        Initialize the TFE client.

        Args:
            address: Scheme and host of the service (default: TFE_ADDRESS)
            token: API token (default: TFE_TOKEN)
            timeout: Request timeout in seconds (default: TFE_TIMEOUT or 30)
            transport: Optional httpx transport, e.g. for testing

        Raises:
            ValueError: if no token is given or configured
        """
        settings = get_settings()
        self._api_url = settings.api_url(address)
        self._token = settings.resolve_token(token)
        self._timeout = timeout if timeout is not None else settings.timeout
        self._transport = transport
        self._client: Optional[httpx.Client] = None

        # Services will be initialized when context manager is entered
        self.organizations: OrganizationService
        self.workspaces: WorkspaceService

    def __enter__(self) -> "TFEClient":
        """Enter context manager"""
        headers = {
            "Authorization": f"Bearer {self._token}",
            "Content-Type": CONTENT_TYPE,
            "Accept": CONTENT_TYPE,
        }

        self._client = httpx.Client(
            base_url=self._api_url,
            headers=headers,
            timeout=self._timeout,
            transport=self._transport,
            event_hooks={"request": [_log_request], "response": [_log_response]},
        )

        # Initialize services
        self.organizations = OrganizationService(self._client)
        self.workspaces = WorkspaceService(self._client)

        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Exit context manager"""
        if self._client:
            self._client.close()
            self._client = None

    def ping(self) -> dict:
        """Check if the API is reachable"""
        if not self._client:
            raise RuntimeError("Client not initialized. Use 'with' context manager.")
        response = self._client.get("/ping")
        check_response(response)
        if "json" not in response.headers.get("Content-Type", ""):
            return {}
        return response.json()

    @staticmethod
    def create(
        address: Optional[str] = None,
        token: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> "TFEClient":
        """
        Factory method to create a TFEClient.

        Usage:
            with TFEClient.create("https://tfe.example.com", token) as client:
                workspace = client.workspaces.get("my-org", "my-workspace")
        """
        return TFEClient(address, token, timeout, transport)
