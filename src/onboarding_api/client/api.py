"""HTTP client for the onboarding API."""

import logging

import httpx

from onboarding_api.config import ClientSettings, get_client_settings
from onboarding_api.models.dto.user import UserRecord

logger = logging.getLogger(__name__)

USER_AGENT = "EmployeeOnboardingForm/0.1"


class UserAPIClient:
    """Client for the user endpoints.

    Sends each request once. Transport failures surface as
    ``httpx.TransportError``; HTTP error statuses are returned, not raised.
    """

    def __init__(
        self,
        settings: ClientSettings | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            settings: Client settings, read from the environment when omitted
            transport: Optional httpx transport, used to route requests in tests
        """
        self.settings = settings or get_client_settings()
        self._transport = transport
        self._http_client: httpx.AsyncClient | None = None

    def _get_http_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client with connection pooling."""
        if self._http_client is None or self._http_client.is_closed:
            self._http_client = httpx.AsyncClient(
                timeout=httpx.Timeout(
                    self.settings.request_timeout, connect=self.settings.connect_timeout
                ),
                headers={
                    "User-Agent": USER_AGENT,
                    "Content-Type": "application/json",
                },
                transport=self._transport,
            )
        return self._http_client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._http_client and not self._http_client.is_closed:
            await self._http_client.aclose()
            self._http_client = None

    async def add_user(self, record: UserRecord) -> httpx.Response:
        """POST a validated record to the add-user endpoint.

        Args:
            record: Validated onboarding record

        Returns:
            The HTTP response, whatever its status

        Raises:
            httpx.TransportError: If the request never completed
        """
        client = self._get_http_client()
        response = await client.post(
            self.settings.add_user_url,
            json=record.model_dump(mode="json"),
        )
        logger.debug(f"add_user answered {response.status_code}")
        return response
