"""
Async TFE Client - Main entry point for async SDK usage
"""

import logging
from typing import Optional
import httpx

from tfe_sdk.client import CONTENT_TYPE
from tfe_sdk.config import get_settings
from tfe_sdk.errors import check_response
from tfe_sdk.services.organization import AsyncOrganizationService
from tfe_sdk.services.workspace import AsyncWorkspaceService

logger = logging.getLogger(__name__)


async def _log_request(request: httpx.Request) -> None:
    logger.debug("%s %s", request.method, request.url)


async def _log_response(response: httpx.Response) -> None:
    logger.debug(
        "%s %s -> %d", response.request.method, response.request.url, response.status_code
    )


class AsyncTFEClient:
    """Async client for interacting with the TFE API"""

    def __init__(
        self,
        address: Optional[str] = None,
        token: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize the async TFE client.

        Args:
            address: Scheme and host of the service (default: TFE_ADDRESS)
            token: API token (default: TFE_TOKEN)
            timeout: Request timeout in seconds (default: TFE_TIMEOUT or 30)
            transport: Optional httpx async transport, e.g. for testing
        """
        settings = get_settings()
        self._api_url = settings.api_url(address)
        self._token = settings.resolve_token(token)
        self._timeout = timeout if timeout is not None else settings.timeout
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

        # Services will be initialized when context manager is entered
        self.organizations: AsyncOrganizationService
        self.workspaces: AsyncWorkspaceService

    async def __aenter__(self) -> "AsyncTFEClient":
        """Enter async context manager"""
        headers = {
            "Authorization": f"Bearer {self._token}",
            "Content-Type": CONTENT_TYPE,
            "Accept": CONTENT_TYPE,
        }

        self._client = httpx.AsyncClient(
            base_url=self._api_url,
            headers=headers,
            timeout=self._timeout,
            transport=self._transport,
            event_hooks={"request": [_log_request], "response": [_log_response]},
        )

        # Initialize services
        self.organizations = AsyncOrganizationService(self._client)
        self.workspaces = AsyncWorkspaceService(self._client)

        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Exit async context manager"""
        if self._client:
            await self._client.aclose()
            self._client = None

    async def ping(self) -> dict:
        """Check if the API is reachable"""
        if not self._client:
            raise RuntimeError("Client not initialized. Use 'async with' context manager.")
        response = await self._client.get("/ping")
        check_response(response)
        if "json" not in response.headers.get("Content-Type", ""):
            return {}
        return response.json()

    @staticmethod
    def create(
        address: Optional[str] = None,
        token: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> "AsyncTFEClient":
        """
        Factory method to create an AsyncTFEClient.

        Usage:
            async with AsyncTFEClient.create("https://tfe.example.com", token) as client:
                workspaces = await client.workspaces.list("my-org")
        """
        return AsyncTFEClient(address, token, timeout, transport)
